# liquid_translate/core/i18n/errors.py
"""
Typed failure kinds for translation path resolution.

These never escape a render.  ``resolve()`` and the ``t`` filter catch
``TranslationError`` subtypes and collapse them to an empty string, so a
broken key degrades to blank text instead of aborting the template.
``lookup()`` raises them directly for callers that want the reason.
"""
from __future__ import annotations


class TranslationError(Exception):
    """Base class for all translation resolution failures."""

    def __init__(self, key: str, detail: str = "Translation not found"):
        self.key = key
        self.detail = detail
        super().__init__(f"{detail} (key={key!r})")


class MalformedKeyError(TranslationError):
    """Wrong number of namespace separators, or an empty namespace/path."""


class NamespaceNotFoundError(TranslationError):
    """The ``$_<namespace>`` subtree is absent from the table."""

    def __init__(self, key: str, namespace_key: str):
        self.namespace_key = namespace_key
        super().__init__(key, f"Namespace {namespace_key!r} not found")


class KeyNotFoundError(TranslationError):
    """An intermediate or leaf segment is missing."""

    def __init__(self, key: str, segment: str):
        self.segment = segment
        super().__init__(key, f"Segment {segment!r} not found")


class NotTraversableError(TranslationError):
    """A scalar sits where a nested mapping was expected."""

    def __init__(self, key: str, segment: str):
        self.segment = segment
        super().__init__(key, f"Cannot look up {segment!r} in a non-mapping value")


class NonScalarValueError(TranslationError):
    """The path ends on a mapping (or list / None) instead of a scalar."""


class MissingTranslationsError(TranslationError):
    """The translation table is absent from the render context or is not a mapping."""
