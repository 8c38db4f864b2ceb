# liquid_translate/__init__.py
"""
Liquid ``t`` filter for namespaced, dot-path translation lookups.

Canonical imports:
    from liquid_translate.engine import build_environment, render
    from liquid_translate.core.i18n import resolve, lookup
"""
__version__ = "0.1.0"
