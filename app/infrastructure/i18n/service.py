"""Process-wide translation configuration and service facade.

I18n is built once at startup from the user's locale preferences; categories
are built from it on demand.
"""

import threading
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

from infrastructure.i18n.models import (
    LanguageDialect,
    LocaleIdentifier,
    TranslationFile,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import I18nCategory


class I18n:
    """Resolved locales plus the folder holding dialect translations.

    Preferences are resolved once, on construction; the result is read-only.

    Usage:
        i18n = I18n(["ja_JP", "en-US"], "/path/to/locales")
        i18n.get(TranslationFile.MEDIA_CHECK).tr("media-check-window-title")
    """

    def __init__(
        self,
        locale_codes: Iterable[str],
        locale_folder,
        use_isolating: bool = True,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Resolve locale preferences.

        Args:
            locale_codes: Locale tags, most preferred first.
            locale_folder: Root directory with dialect folders.
            use_isolating: Wrap arguments in Unicode bidi isolation marks.
            resolver: Override for the default LocaleResolver.
        """
        self._resolution = (resolver or LocaleResolver()).resolve(locale_codes)
        self._locale_folder = Path(locale_folder)
        self._use_isolating = use_isolating

    @property
    def langs(self) -> Tuple[LocaleIdentifier, ...]:
        """Locale identifiers, used for date/time and plural rendering."""
        return self._resolution.langs

    @property
    def supported(self) -> Tuple[LanguageDialect, ...]:
        """Dialects with translation files, in preference order."""
        return self._resolution.supported

    @property
    def locale_folder(self) -> Path:
        return self._locale_folder

    @property
    def use_isolating(self) -> bool:
        return self._use_isolating

    def get(self, file: TranslationFile) -> I18nCategory:
        """Build the translations for one file."""
        return I18nCategory(
            self._resolution.formatting_codes,
            self.supported,
            file,
            self.locale_folder,
            use_isolating=self.use_isolating,
        )



class TranslationService:
    """Class-based translation service.

    Wraps an I18n and keeps one I18nCategory per translation file, so
    repeated lookups do not re-read files from disk.

    Usage:
        service = TranslationService(I18n(["ja_JP"], "locales"))
        service.tr(TranslationFile.MEDIA_CHECK, "media-check-window-title")
    """

    def __init__(self, i18n: I18n):
        """Initialize translation service.

        Args:
            i18n: Resolved translation configuration.
        """
        self._i18n = i18n
        self._categories: Dict[TranslationFile, I18nCategory] = {}
        self._lock = threading.Lock()

    @property
    def i18n(self) -> I18n:
        return self._i18n

    def category(self, file: TranslationFile) -> I18nCategory:
        """Get the translations for a file, building them on first use."""
        with self._lock:
            category = self._categories.get(file)
            if category is None:
                category = self._i18n.get(file)
                self._categories[file] = category
            return category

    def tr(self, file: TranslationFile, key: str) -> str:
        """Get translation with zero arguments."""
        return self.category(file).tr(key)

    def trn(self, file: TranslationFile, key: str, args: Dict[str, Any]) -> str:
        """Get translation with one or more arguments."""
        return self.category(file).trn(key, args)
