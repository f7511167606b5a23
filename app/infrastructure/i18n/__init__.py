"""i18n system - fallback-chain translation catalogs.

Resolves the user's locale preferences into supported dialects and looks up
Fluent messages through a chain of bundles ending in English.

Main components:
- models: LocaleIdentifier, LanguageDialect, TranslationFile, LocaleResolution
- resolvers: LocaleResolver for parsing and classifying locale preferences
- loader: TranslationLoader and FTLTranslationLoader
- bundles: parsing translation text into Fluent bundles
- translator: I18nCategory with tr()/trn() lookups
- service: I18n root configuration and TranslationService
"""

from infrastructure.i18n.bundles import (
    DuplicateMessageError,
    FallbackBundleError,
    TranslationError,
    TranslationParseError,
)
from infrastructure.i18n.loader import FTLTranslationLoader, TranslationLoader
from infrastructure.i18n.models import (
    LanguageDialect,
    LocaleIdentifier,
    LocaleResolution,
    TranslationFile,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import I18n, TranslationService
from infrastructure.i18n.translator import I18nCategory, tr_args, tr_strs

__all__ = [
    "LanguageDialect",
    "LocaleIdentifier",
    "TranslationFile",
    "LocaleResolution",
    "LocaleResolver",
    "TranslationLoader",
    "FTLTranslationLoader",
    "TranslationError",
    "TranslationParseError",
    "DuplicateMessageError",
    "FallbackBundleError",
    "I18n",
    "I18nCategory",
    "TranslationService",
    "tr_args",
    "tr_strs",
]
