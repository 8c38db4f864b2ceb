# liquid_translate/engine.py
"""
Liquid environment with the ``t`` filter installed.

Canonical usage:
    from liquid_translate.engine import build_environment, render

    env = build_environment()
    render("{{ 'layout:header.title' | t }}", translations=table, environment=env)
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from liquid import Environment

from liquid_translate.config import Settings, settings as default_settings, validate_or_warn
from liquid_translate.core.i18n.translate_filter import FILTER_NAME, make_translate_filter

logger = logging.getLogger(__name__)


def build_environment(settings: Settings | None = None, **environment_kwargs: Any) -> Environment:
    """Create a Liquid environment (standard filters plus ``t``).

    Extra keyword arguments are passed through to ``liquid.Environment``.
    Raises ``RuntimeError`` if ``settings`` make lookups impossible.
    """
    s = settings or default_settings
    validate_or_warn(s)
    env = Environment(**environment_kwargs)
    env.filters[FILTER_NAME] = make_translate_filter(s)
    logger.debug("Liquid environment built: translations_var=%s", s.translations_var_name)
    return env


_default_environment: Environment | None = None


def get_environment() -> Environment:
    """Shared environment built from the default settings."""
    global _default_environment
    if _default_environment is None:
        _default_environment = build_environment()
    return _default_environment


def render(
    source: str,
    variables: Mapping[str, Any] | None = None,
    translations: Mapping[str, Any] | None = None,
    *,
    environment: Environment | None = None,
    settings: Settings | None = None,
) -> str:
    """Render ``source`` with ``translations`` bound as the table global.

    ``settings`` only names the context variable; pass an environment built
    from the same settings to change lookup options.
    """
    env = environment or get_environment()
    s = settings or default_settings

    template_globals: dict[str, Any] = {}
    if translations is not None:
        template_globals[s.translations_var_name] = translations

    template = env.from_string(source, globals=template_globals)
    return template.render(**dict(variables or {}))
