# liquid_translate/core/i18n/translate_filter.py
"""
The ``t`` Liquid filter.

    {{ 'layout:header.hello_user' | t: name: first_name, other: 'literal' }}

The piped-in value is the lookup key.  The translation table is read from
the render context (``knock_translations_config`` by default), so it can be
passed per render as a global.  The resolved string is itself rendered as a
Liquid template against the filter's keyword arguments.

Every failure renders as an empty string.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from liquid.exceptions import LiquidError
from liquid.filter import with_context

from liquid_translate.config import Settings, settings as default_settings
from liquid_translate.core.i18n.errors import MissingTranslationsError, TranslationError
from liquid_translate.core.i18n.path_resolver import lookup
from liquid_translate.infra.logging_config import LogContext

logger = logging.getLogger(__name__)

FILTER_NAME = "t"


def _translation_table(context: Any, var_name: str, key: str) -> Mapping[str, Any]:
    table = context.resolve(var_name, default=None)
    if not isinstance(table, Mapping):
        raise MissingTranslationsError(
            key, f"Render context variable {var_name!r} is missing or not a mapping"
        )
    return table


def make_translate_filter(settings: Settings | None = None) -> Callable[..., str]:
    """Build a ``t`` filter bound to the lookup options in ``settings``."""
    s = settings or default_settings

    @with_context
    def translate(value: object, /, *args: object, context: Any, **variables: object) -> str:
        key = "" if value is None else str(value)

        # A `context:` keyword argument replaces the injected render context
        if not hasattr(context, "resolve"):
            LogContext(logger, translation_key=key).debug(
                "Reserved argument name 'context' passed to %r filter", FILTER_NAME
            )
            return ""

        template_name = getattr(getattr(context, "template", None), "name", None)
        log = LogContext(logger, template_name=template_name or None, translation_key=key)

        try:
            table = _translation_table(context, s.translations_var_name, key)
            text = lookup(
                key,
                table,
                namespace_separator=s.namespace_separator,
                key_separator=s.key_separator,
                namespace_prefix=s.namespace_prefix,
            )
        except TranslationError as exc:
            log.debug("Translation miss: %s", exc.detail)
            return ""

        if not s.rerender_translations:
            return text

        try:
            return context.env.from_string(text).render(**variables)
        except LiquidError as exc:
            log.warning("Failed to render translation: %s", exc)
            return ""

    return translate


translate = make_translate_filter()
