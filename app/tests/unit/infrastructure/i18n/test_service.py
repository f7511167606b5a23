"""Tests for infrastructure.i18n.service module."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import (
    I18n,
    I18nCategory,
    LanguageDialect,
    LocaleResolver,
    TranslationFile,
    TranslationService,
    tr_args,
)
from tests.factories.i18n import make_i18n


class TestI18n:
    """Tests for the I18n root configuration."""

    def test_constructor(self, support_dir):
        """I18n resolves preferences and keeps the locale folder."""
        i18n = I18n(["ja_JP", "fr"], str(support_dir))
        assert [str(lang) for lang in i18n.langs] == ["ja_JP", "fr", "en_US"]
        assert i18n.supported == (LanguageDialect.JAPANESE,)
        assert i18n.locale_folder == support_dir
        assert i18n.use_isolating is True

    def test_constructor_with_resolver(self, support_dir):
        """I18n uses a supplied resolver."""
        resolver = LocaleResolver(fallback_locale="en_GB")
        i18n = I18n(["ja"], support_dir, resolver=resolver)
        assert str(i18n.langs[-1]) == "en_GB"

    def test_documented_usage(self, support_dir):
        """Preferences and a folder path are enough to look up messages."""
        i18n = I18n(["ja_JP", "en-US"], str(support_dir))
        assert [str(lang) for lang in i18n.langs] == ["ja_JP", "en_US", "en_US"]
        assert i18n.supported == (LanguageDialect.JAPANESE,)
        assert i18n.get(TranslationFile.TEST).tr("valid-key") == "キー"

    @pytest.mark.parametrize("attribute", ["langs", "supported", "locale_folder"])
    def test_read_only(self, support_dir, attribute):
        """I18n cannot be modified after construction."""
        i18n = make_i18n(["ja"], support_dir)
        with pytest.raises(AttributeError):
            setattr(i18n, attribute, None)

    def test_region_without_locale_data(self, support_dir):
        """Japanese outside Japan still gets Japanese translations."""
        i18n = make_i18n(["ja-US"], support_dir)
        assert i18n.supported == (LanguageDialect.JAPANESE,)
        assert i18n.get(TranslationFile.TEST).tr("valid-key") == "キー"

    def test_get(self, support_dir):
        """get() builds a category for the file."""
        category = make_i18n(["ja"], support_dir).get(TranslationFile.TEST)
        assert isinstance(category, I18nCategory)
        assert category.file == TranslationFile.TEST
        assert category.tr("valid-key") == "キー"

    def test_get_builds_independent_categories(self, support_dir):
        """Each call builds a new category."""
        i18n = make_i18n(["ja"], support_dir)
        assert i18n.get(TranslationFile.TEST) is not i18n.get(TranslationFile.TEST)

    def test_shared_across_categories(self, support_dir):
        """One I18n serves every translation file."""
        i18n = make_i18n(["ja"], support_dir)
        test = i18n.get(TranslationFile.TEST)
        media = i18n.get(TranslationFile.MEDIA_CHECK)
        assert test.tr("valid-key") == "キー"
        assert media.tr("media-check-window-title") == "Check Media"


class TestTranslationService:
    """Tests for TranslationService."""

    @pytest.fixture
    def service(self, support_dir):
        """Service preferring Japanese."""
        return TranslationService(make_i18n(["ja"], support_dir))

    def test_initialization(self, service):
        """TranslationService exposes its I18n."""
        assert service.i18n.supported == (LanguageDialect.JAPANESE,)

    def test_category_cached(self, service):
        """category() builds each file once."""
        first = service.category(TranslationFile.TEST)
        assert service.category(TranslationFile.TEST) is first
        assert service.category(TranslationFile.MEDIA_CHECK) is not first

    def test_category_built_lazily(self):
        """Nothing is built until a file is requested."""
        i18n = MagicMock(spec=I18n)
        service = TranslationService(i18n)
        i18n.get.assert_not_called()

        service.tr(TranslationFile.TEST, "valid-key")
        service.tr(TranslationFile.TEST, "other-key")
        i18n.get.assert_called_once_with(TranslationFile.TEST)

    def test_tr(self, service):
        """tr() delegates to the category."""
        assert service.tr(TranslationFile.TEST, "valid-key") == "キー"
        assert service.tr(TranslationFile.TEST, "only-in-english") == "not translated"

    def test_trn(self, service):
        """trn() delegates to the category."""
        assert (
            service.trn(TranslationFile.TEST, "two-args-key", tr_args(one=1, two="2"))
            == "1と2"
        )

    def test_locale_folder_path(self, support_dir):
        """The locale folder is stored as a Path."""
        service = TranslationService(I18n([], str(support_dir)))
        assert isinstance(service.i18n.locale_folder, Path)
