"""Translation loading interface and implementations.

Dialect translations are read from a locale folder on disk; the English
fallback translations ship inside this package and are always available.
"""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Optional

import structlog
from infrastructure.i18n.models import LanguageDialect, TranslationFile

logger = structlog.get_logger()

FALLBACK_PACKAGE = "infrastructure.i18n.resources"


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations return raw translation text; parsing happens when the
    text is bound into a bundle.
    """

    @abstractmethod
    def load(self, dialect: LanguageDialect, file: TranslationFile) -> Optional[str]:
        """Load the text of one translation file for a dialect.

        Args:
            dialect: Dialect whose translation is wanted.
            file: Translation category.

        Returns:
            File contents, or None if the file could not be read.
        """
        pass

    def load_fallback(self, file: TranslationFile) -> str:
        """Load the English text shipped with the application.

        Args:
            file: Translation category.

        Returns:
            File contents.

        Raises:
            FileNotFoundError: If the package was built without the file.
        """
        return (
            resources.files(FALLBACK_PACKAGE)
            .joinpath(file.filename)
            .read_text(encoding="utf-8")
        )


class FTLTranslationLoader(TranslationLoader):
    """Loader for Fluent (.ftl) translation files.

    Expects files laid out as <locale_folder>/<dialect folder>/<file name>,
    e.g. locales/ja/media-check.ftl.

    Attributes:
        locale_folder: Root directory holding one folder per dialect.
    """

    def __init__(self, locale_folder: Path):
        """Initialize FTL translation loader.

        A missing locale folder is not an error; every dialect lookup will
        fail and callers fall back to English.

        Args:
            locale_folder: Root directory with dialect folders.
        """
        self.locale_folder = Path(locale_folder)

    def path_for(self, dialect: LanguageDialect, file: TranslationFile) -> Path:
        """Path of a translation file for a dialect."""
        return self.locale_folder / dialect.folder / file.filename

    def load(self, dialect: LanguageDialect, file: TranslationFile) -> Optional[str]:
        """Read a dialect's translation file as UTF-8 text.

        Read failures are logged and reported as None.
        """
        path = self.path_for(dialect, file)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "translation_file_unreadable",
                path=str(path),
                dialect=dialect.value,
                error=str(e),
            )
            return None
