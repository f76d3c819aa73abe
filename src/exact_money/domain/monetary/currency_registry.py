from exact_money.domain.monetary.currency import Currency
from exact_money.domain.monetary.currency_catalog import CurrencyCatalog


# Major currencies
USD = Currency("USD", 2, 840, "$", "US Dollar")
EUR = Currency("EUR", 2, 978, "€", "Euro")
GBP = Currency("GBP", 2, 826, "£", "British Pound Sterling")
JPY = Currency("JPY", 0, 392, "¥", "Japanese Yen")
CHF = Currency("CHF", 2, 756, "CHF", "Swiss Franc")
CAD = Currency("CAD", 2, 124, "CA$", "Canadian Dollar")
AUD = Currency("AUD", 2, 36, "AU$", "Australian Dollar")
NZD = Currency("NZD", 2, 554, "NZ$", "New Zealand Dollar")
CNY = Currency("CNY", 2, 156, "CN¥", "Chinese Yuan")
HKD = Currency("HKD", 2, 344, "HK$", "Hong Kong Dollar")
SGD = Currency("SGD", 2, 702, "S$", "Singapore Dollar")

# Europe
SEK = Currency("SEK", 2, 752, "Skr", "Swedish Krona")
NOK = Currency("NOK", 2, 578, "Nkr", "Norwegian Krone")
DKK = Currency("DKK", 2, 208, "Dkr", "Danish Krone")
ISK = Currency("ISK", 0, 352, "Ikr", "Icelandic Króna")
PLN = Currency("PLN", 2, 985, "zł", "Polish Zloty")
CZK = Currency("CZK", 2, 203, "Kč", "Czech Koruna")
HUF = Currency("HUF", 2, 348, "Ft", "Hungarian Forint")
RON = Currency("RON", 2, 946, "RON", "Romanian Leu")
BGN = Currency("BGN", 2, 975, "BGN", "Bulgarian Lev")
UAH = Currency("UAH", 2, 980, "₴", "Ukrainian Hryvnia")
RUB = Currency("RUB", 2, 643, "RUB", "Russian Ruble")
TRY = Currency("TRY", 2, 949, "TL", "Turkish Lira")

# Middle East and Africa
AED = Currency("AED", 2, 784, "AED", "United Arab Emirates Dirham")
SAR = Currency("SAR", 2, 682, "SR", "Saudi Riyal")
ILS = Currency("ILS", 2, 376, "₪", "Israeli New Sheqel")
BHD = Currency("BHD", 3, 48, "BD", "Bahraini Dinar")
KWD = Currency("KWD", 3, 414, "KD", "Kuwaiti Dinar")
JOD = Currency("JOD", 3, 400, "JD", "Jordanian Dinar")
OMR = Currency("OMR", 3, 512, "OMR", "Omani Rial")
IQD = Currency("IQD", 3, 368, "IQD", "Iraqi Dinar")
LYD = Currency("LYD", 3, 434, "LD", "Libyan Dinar")
TND = Currency("TND", 3, 788, "DT", "Tunisian Dinar")
EGP = Currency("EGP", 2, 818, "EGP", "Egyptian Pound")
ZAR = Currency("ZAR", 2, 710, "R", "South African Rand")
NGN = Currency("NGN", 2, 566, "₦", "Nigerian Naira")
KES = Currency("KES", 2, 404, "Ksh", "Kenyan Shilling")
UGX = Currency("UGX", 0, 800, "USh", "Ugandan Shilling")
XAF = Currency("XAF", 0, 950, "FCFA", "CFA Franc BEAC")
XOF = Currency("XOF", 0, 952, "CFA", "CFA Franc BCEAO")

# Asia
INR = Currency("INR", 2, 356, "Rs", "Indian Rupee")
KRW = Currency("KRW", 0, 410, "₩", "South Korean Won")
IDR = Currency("IDR", 2, 360, "Rp", "Indonesian Rupiah")
THB = Currency("THB", 2, 764, "฿", "Thai Baht")
MYR = Currency("MYR", 2, 458, "RM", "Malaysian Ringgit")
PHP = Currency("PHP", 2, 608, "₱", "Philippine Peso")
VND = Currency("VND", 0, 704, "₫", "Vietnamese Dong")

# Americas
BRL = Currency("BRL", 2, 986, "R$", "Brazilian Real")
MXN = Currency("MXN", 2, 484, "MX$", "Mexican Peso")
ARS = Currency("ARS", 2, 32, "AR$", "Argentine Peso")
CLP = Currency("CLP", 0, 152, "CL$", "Chilean Peso")
CLF = Currency("CLF", 4, 990, "UF", "Chilean Unit of Account (UF)")
COP = Currency("COP", 2, 170, "CO$", "Colombian Peso")
PEN = Currency("PEN", 2, 604, "S/.", "Peruvian Sol")
PYG = Currency("PYG", 0, 600, "₲", "Paraguayan Guarani")
UYU = Currency("UYU", 2, 858, "$U", "Uruguayan Peso")

# All predefined currencies, in declaration order
ISO_CURRENCIES: tuple[Currency, ...] = (
    USD, EUR, GBP, JPY, CHF, CAD, AUD, NZD, CNY, HKD, SGD, SEK, NOK, DKK, ISK, PLN, CZK, HUF, RON, BGN, UAH, RUB,
    TRY, AED, SAR, ILS, BHD, KWD, JOD, OMR, IQD, LYD, TND, EGP, ZAR, NGN, KES, UGX, XAF, XOF, INR, KRW, IDR, THB,
    MYR, PHP, VND, BRL, MXN, ARS, CLP, CLF, COP, PEN, PYG, UYU,
)


def builtin_catalog() -> CurrencyCatalog:
    """Return a new catalog holding all predefined ISO 4217 currencies."""
    return CurrencyCatalog(ISO_CURRENCIES)
