"""
Only the root tests/ directory carries an __init__.py; subdirectories rely on namespace
packages (PEP 420). Test module basenames therefore have to stay unique across the tree.
"""
