"""
Only the root tests directory keeps an __init__.py; subdirectories are namespace packages
(PEP 420). This keeps pytest treating tests/ as one package with consistent imports.
"""
