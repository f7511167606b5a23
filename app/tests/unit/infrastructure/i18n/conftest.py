"""Feature-level fixtures for i18n system tests.

Provides translation folders for locale resolution and lookup scenarios.
"""

from pathlib import Path

import pytest

from infrastructure.i18n import LanguageDialect
from tests.factories.i18n import make_locale_tree

SUPPORT_DIR = Path(__file__).resolve().parents[3] / "support"


@pytest.fixture
def support_dir():
    """Checked-in translations: a Japanese test.ftl only."""
    return SUPPORT_DIR


@pytest.fixture
def broken_translations_dir(tmp_path):
    """Create a locale folder where every non-Japanese dialect is broken.

    Returns a directory structure like:
    - ja/test.ftl      valid
    - zh/test.ftl      invalid Fluent syntax
    - zh-TW/test.ftl   the same message defined twice
    """
    return make_locale_tree(
        tmp_path,
        {
            LanguageDialect.JAPANESE: "valid-key = キー\n",
            LanguageDialect.CHINESE_MAINLAND: "valid-key = {\n",
            LanguageDialect.CHINESE_TAIWAN: "valid-key = 鍵\nvalid-key = 鑰匙\n",
        },
    )


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple": "ja",
        "with_quality": "zh-TW,zh;q=0.9,en;q=0.8",
        "reordered": "fr;q=0.5,ja-JP,zh-TW;q=0.8",
        "wildcard": "ja-JP,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
