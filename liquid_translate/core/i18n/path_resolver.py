# liquid_translate/core/i18n/path_resolver.py
"""
Translation path resolution.

A lookup key is either ``path`` or ``namespace:path`` where ``path`` is a
dot-separated chain of keys, e.g. ``layout:header.hello_user``.  Namespaced
subtrees live under ``"$_" + namespace`` at the top of the table::

    {"$_layout": {"header": {"hello_user": "Hello {{name}}!"}}}

``lookup()`` is strict and raises a ``TranslationError`` subtype naming the
exact failure.  ``resolve()`` is total: any failure becomes ``""``.

Both are pure.  The table is only read, never copied or retained.
"""
from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, NamedTuple

from liquid_translate.core.i18n.errors import (
    KeyNotFoundError,
    MalformedKeyError,
    MissingTranslationsError,
    NamespaceNotFoundError,
    NonScalarValueError,
    NotTraversableError,
    TranslationError,
)

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = ":"
KEY_SEPARATOR = "."
NAMESPACE_PREFIX = "$_"

# Liquid scalars.  bool is covered by int but rendered separately.
_SCALAR_TYPES = (str, int, float, Decimal, datetime.date)


class ParsedKey(NamedTuple):
    namespace: str | None
    segments: tuple[str, ...]


def split_key(
    key: str,
    *,
    namespace_separator: str = NAMESPACE_SEPARATOR,
    key_separator: str = KEY_SEPARATOR,
) -> ParsedKey:
    """Split a lookup key into an optional namespace and its path segments.

    Raises ``MalformedKeyError`` for an empty key, more than one namespace
    separator, or an empty string on either side of the separator.
    Empty segments produced by stray dots are kept and looked up literally.
    """
    if not key:
        raise MalformedKeyError(key, "Empty translation key")

    parts = key.split(namespace_separator)

    if len(parts) == 2:
        namespace, path = parts
        if not namespace or not path:
            raise MalformedKeyError(key, "Empty namespace or path")
    elif len(parts) == 1:
        namespace, path = None, parts[0]
    else:
        raise MalformedKeyError(key, "More than one namespace separator")

    return ParsedKey(namespace, tuple(path.split(key_separator)))


def is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES)


def scalar_to_str(value: Any) -> str:
    """String form of a leaf value, Liquid-style for booleans."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def lookup(
    key: str,
    table: Mapping[str, Any],
    *,
    namespace_separator: str = NAMESPACE_SEPARATOR,
    key_separator: str = KEY_SEPARATOR,
    namespace_prefix: str = NAMESPACE_PREFIX,
) -> str:
    """Resolve ``key`` against ``table`` or raise a ``TranslationError``."""
    namespace, segments = split_key(
        key,
        namespace_separator=namespace_separator,
        key_separator=key_separator,
    )

    if not isinstance(table, Mapping):
        raise MissingTranslationsError(
            key, f"Translation table is {type(table).__name__}, not a mapping"
        )

    cursor: Any = table
    if namespace is not None:
        namespace_key = f"{namespace_prefix}{namespace}"
        if namespace_key not in table:
            raise NamespaceNotFoundError(key, namespace_key)
        cursor = table[namespace_key]

    for segment in segments:
        if not isinstance(cursor, Mapping):
            raise NotTraversableError(key, segment)
        if segment not in cursor:
            raise KeyNotFoundError(key, segment)
        cursor = cursor[segment]

    if not is_scalar(cursor):
        raise NonScalarValueError(
            key, f"Path resolves to {type(cursor).__name__}, not a scalar"
        )

    return scalar_to_str(cursor)


def resolve(
    key: str,
    table: Mapping[str, Any],
    *,
    namespace_separator: str = NAMESPACE_SEPARATOR,
    key_separator: str = KEY_SEPARATOR,
    namespace_prefix: str = NAMESPACE_PREFIX,
) -> str:
    """Resolve ``key`` against ``table``; returns ``""`` on any miss."""
    try:
        return lookup(
            key,
            table,
            namespace_separator=namespace_separator,
            key_separator=key_separator,
            namespace_prefix=namespace_prefix,
        )
    except TranslationError as exc:
        logger.debug(
            "Translation miss: %s",
            exc.detail,
            extra={"translation_key": key},
        )
        return ""
