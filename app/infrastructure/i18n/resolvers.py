"""Locale resolution logic for determining user's preferred language.

Parses raw locale preferences into locale identifiers and classifies them
into the dialects that have translation files.
"""

from typing import Iterable, List, Optional

import structlog
from babel.core import parse_locale as split_locale

from infrastructure.i18n.models import (
    LanguageDialect,
    LocaleIdentifier,
    LocaleResolution,
)

logger = structlog.get_logger().bind(component="i18n.resolver")

# Always available; keeps number and date formatting sane when none of the
# user's locales parse
FALLBACK_LOCALE = "en_US"


def parse_locale(code: str) -> Optional[LocaleIdentifier]:
    """Parse a locale tag into a LocaleIdentifier.

    Accepts BCP 47 ("zh-TW") and POSIX ("ja_JP.UTF-8", "de_DE@euro") forms.
    Only the syntax is checked, so tags CLDR has no data for ("ja-US",
    "zz") are kept.

    Args:
        code: Raw locale tag.

    Returns:
        LocaleIdentifier, or None if the tag is malformed.
    """
    try:
        tag = code.split(".")[0].split("@")[0].strip().replace("-", "_")
        language, territory, script, variant = split_locale(tag)[:4]
    except (ValueError, TypeError, AttributeError):
        return None
    return LocaleIdentifier(
        language=language,
        territory=territory,
        script=script,
        variant=variant,
    )


class LocaleResolver:
    """Resolves the locales and dialects used to build translation catalogs.

    Resolution keeps every parseable preference for formatting rules, keeps
    only the preferences with translation files as dialects, and always
    appends en_US.
    """

    def __init__(self, fallback_locale: str = FALLBACK_LOCALE):
        """Initialize locale resolver.

        Args:
            fallback_locale: Locale appended after all user preferences.
        """
        self.fallback_locale = parse_locale(fallback_locale)
        if self.fallback_locale is None:
            raise ValueError(f"Invalid fallback locale: {fallback_locale}")
        self.log = logger.bind(fallback_locale=str(self.fallback_locale))

    def resolve(self, preferences: Iterable[str]) -> LocaleResolution:
        """Resolve preferences into locale identifiers and dialects.

        Unparseable preferences are skipped. Order is preserved and
        duplicates are kept.

        Args:
            preferences: Locale tags, most preferred first.

        Returns:
            LocaleResolution with langs and supported dialects.
        """
        langs: List[LocaleIdentifier] = []
        supported: List[LanguageDialect] = []
        for code in preferences:
            locale = parse_locale(code)
            if locale is None:
                self.log.debug("skipped_unparseable_locale", locale_str=code)
                continue
            langs.append(locale)
            dialect = LanguageDialect.from_locale(locale)
            if dialect is not None:
                supported.append(dialect)

        langs.append(self.fallback_locale)

        self.log.debug(
            "resolved_locales",
            langs=[str(lang) for lang in langs],
            supported=[dialect.value for dialect in supported],
        )
        return LocaleResolution(langs=tuple(langs), supported=tuple(supported))

    @staticmethod
    def preferences_from_header(accept_language: Optional[str]) -> List[str]:
        """Turn an HTTP Accept-Language header into ordered preferences.

        "fr;q=0.5,ja-JP,zh-TW;q=0.8" -> ["ja-JP", "zh-TW", "fr"]

        Entries are ordered by quality, keeping header order for equal
        quality. Wildcards and empty entries are dropped; an unreadable
        quality counts as 1.0.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Locale tags, most preferred first.
        """
        if not accept_language:
            return []

        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue

            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        # sorted() is stable, so equal qualities keep header order
        return [
            lang_range
            for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
        ]

    @staticmethod
    def preferences_from_env(value: Optional[str]) -> List[str]:
        """Split a POSIX LANGUAGE or LANG value into preferences.

        "ja_JP.UTF-8" -> ["ja_JP.UTF-8"], "zh_TW:zh:en" -> ["zh_TW", "zh", "en"]
        """
        if not value:
            return []
        return [
            part.strip()
            for part in value.replace(",", ":").split(":")
            if part.strip()
        ]
