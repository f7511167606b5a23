"""Translation lookup through a chain of bundles.

Core component for i18n: a category holds one bundle per preferred dialect
followed by the English fallback, and resolves keys against them in order.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from fluent.runtime import FluentBundle

from core.logging import get_module_logger
from infrastructure.i18n.bundles import (
    FallbackBundleError,
    TranslationError,
    build_bundle,
    get_bundle,
    parse_resource,
)
from infrastructure.i18n.loader import FTLTranslationLoader, TranslationLoader
from infrastructure.i18n.models import LanguageDialect, TranslationFile

logger = get_module_logger()

MISSING_KEY_TEMPLATE = "Missing translation key: {key}"


def tr_args(**kwargs: Any) -> Dict[str, Any]:
    """Arguments for trn(), e.g. tr_args(count=3, name="deck")."""
    return dict(kwargs)


def tr_strs(**kwargs: Any) -> Dict[str, str]:
    """Arguments for trn() with every value converted to a string.

    Numbers passed this way are substituted as-is instead of being
    formatted for the locale.
    """
    return {key: str(value) for key, value in kwargs.items()}


class I18nCategory:
    """Translations for one file, in preferred language order.

    Attributes:
        file: Translation category the bundles were built from.
        bundles: Dialect bundles in preference order, with the English
            fallback bundle as the last element.
    """

    def __init__(
        self,
        langs: Sequence[str],
        preferred: Sequence[LanguageDialect],
        file: TranslationFile,
        locale_folder: Path,
        use_isolating: bool = True,
        loader: Optional[TranslationLoader] = None,
    ):
        """Build the bundle chain for a translation file.

        Dialects whose file is missing or invalid are skipped.

        Args:
            langs: Locale codes for plural and number rules.
            preferred: Dialects to load, most preferred first.
            file: Translation category.
            locale_folder: Root directory with dialect folders.
            use_isolating: Wrap arguments in Unicode bidi isolation marks.
            loader: Override for the on-disk loader.

        Raises:
            FallbackBundleError: If the shipped English file is broken.
        """
        self.file = file
        loader = loader or FTLTranslationLoader(locale_folder)
        locales = list(langs)

        bundles = []
        for dialect in preferred:
            text = loader.load(dialect, file)
            if text is None:
                continue
            bundle = get_bundle(text, locales, use_isolating=use_isolating)
            if bundle is None:
                logger.error(
                    "bundle_creation_failed",
                    dialect=dialect.value,
                    file=file.value,
                )
                continue
            bundles.append(bundle)

        bundles.append(self._fallback_bundle(loader, file, locales, use_isolating))
        self._bundles: Tuple[FluentBundle, ...] = tuple(bundles)

        logger.debug(
            "initialized_category",
            file=file.value,
            bundle_count=len(self._bundles),
        )

    @staticmethod
    def _fallback_bundle(
        loader: TranslationLoader,
        file: TranslationFile,
        locales: Sequence[str],
        use_isolating: bool,
    ) -> FluentBundle:
        try:
            resource = parse_resource(loader.load_fallback(file))
            return build_bundle(resource, locales, use_isolating=use_isolating)
        except (OSError, TranslationError) as e:
            raise FallbackBundleError(
                f"Fallback translations for {file.value} are unusable: {e}"
            ) from e

    @property
    def bundles(self) -> Tuple[FluentBundle, ...]:
        return self._bundles

    def tr(self, key: str) -> str:
        """Get translation with zero arguments."""
        return self._translate(key, None)

    def trn(self, key: str, args: Dict[str, Any]) -> str:
        """Get translation with one or more arguments."""
        return self._translate(key, args)

    def _translate(self, key: str, args: Optional[Dict[str, Any]]) -> str:
        """Format the first message for key found in the bundle chain.

        A message with no value (attributes only) does not count as found.
        Formatting errors are logged and the partial text is returned.
        """
        for bundle in self._bundles:
            if not bundle.has_message(key):
                # not translated in this bundle
                continue

            message = bundle.get_message(key)
            if message.value is None:
                continue

            text, errors = bundle.format_pattern(message.value, args)
            if errors:
                logger.error(
                    "translation_format_errors",
                    key=key,
                    errors=[str(e) for e in errors],
                )
            return str(text)

        logger.warning("translation_not_found", key=key, file=self.file.value)
        return MISSING_KEY_TEMPLATE.format(key=key)
