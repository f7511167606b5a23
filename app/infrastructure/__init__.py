"""Infrastructure modules for the UI strings application.

Centralized infrastructure components:
- i18n: Locale resolution and fallback-chain translation catalogs
"""
