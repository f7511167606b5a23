"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- LocaleResolution
- I18n
- Dialect translation folders on disk
"""

from pathlib import Path
from typing import Dict, Optional, Sequence

from infrastructure.i18n import (
    I18n,
    LanguageDialect,
    LocaleResolution,
    TranslationFile,
)
from infrastructure.i18n.resolvers import parse_locale


def make_locale_resolution(
    locale_codes: Sequence[str] = ("ja_JP", "en_US"),
    supported: Sequence[LanguageDialect] = (LanguageDialect.JAPANESE,),
) -> LocaleResolution:
    """Create a LocaleResolution instance.

    Args:
        locale_codes: Syntactically valid locale codes.
        supported: Dialects in preference order.

    Returns:
        LocaleResolution instance.
    """
    return LocaleResolution(
        langs=tuple(parse_locale(code) for code in locale_codes),
        supported=tuple(supported),
    )


def make_i18n(
    locale_codes: Sequence[str] = ("ja_JP",),
    locale_folder: Optional[Path] = None,
    use_isolating: bool = False,
) -> I18n:
    """Create an I18n instance with bidi isolation off by default.

    Args:
        locale_codes: Locale preferences.
        locale_folder: Dialect translations root.
        use_isolating: Wrap arguments in bidi isolation marks.

    Returns:
        I18n instance.
    """
    return I18n(
        locale_codes,
        locale_folder or Path("/nonexistent"),
        use_isolating=use_isolating,
    )


def make_locale_tree(
    root: Path,
    files: Dict[LanguageDialect, str],
    file: TranslationFile = TranslationFile.TEST,
) -> Path:
    """Write one translation file per dialect under root.

    Args:
        root: Directory to create dialect folders in.
        files: Fluent text per dialect.
        file: Translation category the text belongs to.

    Returns:
        The root directory.
    """
    for dialect, text in files.items():
        folder = root / dialect.folder
        folder.mkdir(parents=True, exist_ok=True)
        (folder / file.filename).write_text(text, encoding="utf-8")
    return root
