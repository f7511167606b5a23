"""Translation models for i18n system.

Defines the closed sets of supported dialects and translation files, and the
result of resolving a user's locale preferences.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from babel import Locale, UnknownLocaleError


@dataclass(frozen=True)
class LocaleIdentifier:
    """A syntactically valid locale tag, split into its subtags.

    Kept whether or not CLDR has data for it, so "ja_US" still reads as
    Japanese. Only plural and number formatting need CLDR data; see
    formatting_code.

    Attributes:
        language: Lowercase language subtag, e.g. "zh".
        territory: Uppercase region subtag, e.g. "TW".
        script: Titlecase script subtag, e.g. "Hant".
        variant: Variant subtag.
    """

    language: str
    territory: Optional[str] = None
    script: Optional[str] = None
    variant: Optional[str] = None

    def __str__(self) -> str:
        return "_".join(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part
        )

    @property
    def formatting_code(self) -> str:
        """Closest code babel has plural and number rules for.

        "ja_US" -> "ja". Codes babel does not know at all are returned
        unchanged; the formatting engine skips them.
        """
        for code in (str(self), self.language):
            try:
                return str(Locale.parse(code))
            except (ValueError, UnknownLocaleError):
                continue
        return str(self)


class LanguageDialect(str, Enum):
    """Languages with dedicated translation files, excluding fallback English.

    The value of each member is the name of its folder under the locale
    root, so every dialect has exactly one folder.
    """

    JAPANESE = "ja"
    CHINESE_MAINLAND = "zh"
    CHINESE_TAIWAN = "zh-TW"

    @property
    def folder(self) -> str:
        """Folder name holding this dialect's translation files."""
        return self.value

    @classmethod
    def from_locale(cls, locale: LocaleIdentifier) -> Optional["LanguageDialect"]:
        """Classify a parsed locale into a supported dialect.

        Args:
            locale: Parsed locale identifier.

        Returns:
            Matching LanguageDialect, or None if the language has no
            translation files of its own.
        """
        if locale.language == "ja":
            return cls.JAPANESE
        if locale.language == "zh":
            if locale.territory == "TW":
                return cls.CHINESE_TAIWAN
            return cls.CHINESE_MAINLAND
        return None


class TranslationFile(str, Enum):
    """Translation categories, each backed by one file per locale.

    The value of each member is the file name used in every locale folder.
    """

    TEST = "test.ftl"
    MEDIA_CHECK = "media-check.ftl"

    @property
    def filename(self) -> str:
        return self.value


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of resolving a list of locale preferences.

    Attributes:
        langs: Parsed locale identifiers in preference order, always ending
            with the en_US fallback. Used for plural and number rules.
        supported: Dialects with translation files, in preference order.
    """

    langs: Tuple[LocaleIdentifier, ...]
    supported: Tuple[LanguageDialect, ...]

    @property
    def locale_codes(self) -> List[str]:
        """Locale identifiers as strings, e.g. ["ja_JP", "en_US"]."""
        return [str(lang) for lang in self.langs]

    @property
    def formatting_codes(self) -> List[str]:
        """Codes handed to the formatting engine, e.g. ["ja", "en_US"]."""
        return [lang.formatting_code for lang in self.langs]
