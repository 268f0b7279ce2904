"""
Translation Service - UI string localization with a persistent translation cache
"""
__version__ = "0.1.0"
