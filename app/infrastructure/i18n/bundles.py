"""Parsing translation text into Fluent bundles.

A bundle holds the messages of one translation file, bound to the user's
locales so plural and number rules match their language.
"""

from collections import Counter
from typing import Optional, Sequence

from fluent.runtime import FluentBundle
from fluent.syntax import FluentParser, ast

from core.logging import get_module_logger

logger = get_module_logger()


class TranslationError(Exception):
    """Base class for translation file errors."""


class TranslationParseError(TranslationError):
    """Translation text contains invalid Fluent syntax."""

    def __init__(self, junk: Sequence[ast.Junk]):
        self.junk = list(junk)
        details = [
            annotation.message
            for entry in self.junk
            for annotation in entry.annotations
        ]
        super().__init__(f"Invalid Fluent syntax: {details}")


class DuplicateMessageError(TranslationError):
    """The same message or term id is defined more than once in a file."""

    def __init__(self, ids: Sequence[str]):
        self.ids = list(ids)
        super().__init__(f"Duplicate message ids: {', '.join(self.ids)}")


class FallbackBundleError(TranslationError):
    """The English translations shipped with the application are broken."""


def parse_resource(text: str) -> ast.Resource:
    """Parse Fluent text into a resource.

    Raises:
        TranslationParseError: If any entry could not be parsed.
    """
    resource = FluentParser(with_spans=False).parse(text)
    junk = [entry for entry in resource.body if isinstance(entry, ast.Junk)]
    if junk:
        raise TranslationParseError(junk)
    return resource


def _entry_id(entry: ast.BaseNode) -> Optional[str]:
    if isinstance(entry, ast.Message):
        return entry.id.name
    if isinstance(entry, ast.Term):
        return f"-{entry.id.name}"
    return None


def build_bundle(
    resource: ast.Resource,
    locales: Sequence[str],
    use_isolating: bool = True,
) -> FluentBundle:
    """Bind a parsed resource into a bundle for the given locales.

    Args:
        resource: Parsed Fluent resource.
        locales: Locale codes, most preferred first.
        use_isolating: Wrap placeables in Unicode bidi isolation marks.

    Returns:
        FluentBundle holding the resource's messages.

    Raises:
        DuplicateMessageError: If an id is defined more than once.
    """
    counts = Counter(
        entry_id
        for entry_id in (_entry_id(entry) for entry in resource.body)
        if entry_id is not None
    )
    duplicates = [entry_id for entry_id, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateMessageError(duplicates)

    bundle = FluentBundle(list(locales), use_isolating=use_isolating)
    bundle.add_resource(resource)
    return bundle


def get_bundle(
    text: str,
    locales: Sequence[str],
    use_isolating: bool = True,
) -> Optional[FluentBundle]:
    """Parse and bind translation text, logging instead of raising.

    Returns:
        FluentBundle, or None if the text is invalid.
    """
    try:
        resource = parse_resource(text)
    except TranslationParseError as e:
        logger.error("translation_file_unparseable", error=str(e))
        return None

    try:
        return build_bundle(resource, locales, use_isolating=use_isolating)
    except DuplicateMessageError as e:
        logger.error("duplicate_translation_key", ids=e.ids)
        return None
