"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_i18n,
    make_locale_resolution,
    make_locale_tree,
)

__all__ = [
    "make_i18n",
    "make_locale_resolution",
    "make_locale_tree",
]
