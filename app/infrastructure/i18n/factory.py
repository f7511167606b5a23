"""Factory functions for creating i18n components.

Provides convenience functions for building I18n from application settings.
"""

from pathlib import Path
from typing import Optional, Sequence

import structlog
from core.config import settings
from infrastructure.i18n.service import I18n, TranslationService

logger = structlog.get_logger()


def default_locale_folder() -> Path:
    """Auto-discover the app/locales directory."""
    # this file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_i18n(
    locale_codes: Optional[Sequence[str]] = None,
    locale_folder: Optional[Path] = None,
    use_isolating: Optional[bool] = None,
) -> I18n:
    """Create an I18n from explicit values or settings.

    Args:
        locale_codes: Locale preferences (default: I18N_LOCALES, then LANGUAGE,
            then LANG)
        locale_folder: Dialect translations root (default: I18N_LOCALE_FOLDER,
            then app/locales)
        use_isolating: Bidi isolation of arguments (default: I18N_USE_ISOLATING)

    Returns:
        I18n: Resolved translation configuration

    Usage:
        # Use settings
        i18n = create_i18n()

        # Explicit preferences
        i18n = create_i18n(["zh-TW", "en-US"])
        cat = i18n.get(TranslationFile.MEDIA_CHECK)
    """
    config = settings.i18n

    if locale_codes is None:
        locale_codes = config.preferences
    if locale_folder is None:
        locale_folder = (
            Path(config.LOCALE_FOLDER)
            if config.LOCALE_FOLDER
            else default_locale_folder()
        )
    if use_isolating is None:
        use_isolating = config.USE_ISOLATING

    i18n = I18n(locale_codes, locale_folder, use_isolating=use_isolating)
    logger.info(
        "i18n_created",
        locale_folder=str(locale_folder),
        langs=[str(lang) for lang in i18n.langs],
        supported=[dialect.value for dialect in i18n.supported],
    )
    return i18n


def create_translation_service(
    locale_codes: Optional[Sequence[str]] = None,
    locale_folder: Optional[Path] = None,
    use_isolating: Optional[bool] = None,
) -> TranslationService:
    """Create a TranslationService; arguments as for create_i18n()."""
    return TranslationService(
        create_i18n(
            locale_codes=locale_codes,
            locale_folder=locale_folder,
            use_isolating=use_isolating,
        )
    )
