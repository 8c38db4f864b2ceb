# liquid_translate/config.py
import logging
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_env: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    log_json: bool = False  # JSON log lines instead of colored console output

    # Translation lookup
    # Render-context variable holding the nested translation table
    translations_var_name: str = "knock_translations_config"
    namespace_separator: str = ":"  # "layout:header.title"
    key_separator: str = "."
    namespace_prefix: str = "$_"  # namespace "layout" lives under "$_layout"

    # Re-render the resolved string as a Liquid template with the filter's
    # keyword arguments.  False returns the raw translation text.
    rerender_translations: bool = True

    @property
    def is_production(self) -> bool:
        return self.app_env == "prod"

    def validate_required(self) -> list[str]:
        """Return configuration errors that make lookups impossible"""
        errors = []

        if not self.translations_var_name:
            errors.append("translations_var_name is empty")
        if not self.namespace_separator:
            errors.append("namespace_separator is empty")
        if not self.key_separator:
            errors.append("key_separator is empty")
        if (
            self.namespace_separator
            and self.namespace_separator == self.key_separator
        ):
            errors.append(
                f"namespace_separator and key_separator are both {self.key_separator!r}"
            )

        return errors


def warn_on_risky_config(s: "Settings") -> list[str]:
    warnings: list[str] = []

    if not s.namespace_prefix:
        warnings.append(
            "namespace_prefix is empty: namespaced keys share the top level with plain keys."
        )

    if s.namespace_separator and s.namespace_separator in s.namespace_prefix:
        warnings.append(
            f"namespace_prefix {s.namespace_prefix!r} contains the namespace separator."
        )

    if s.is_production and s.log_level.upper() == "DEBUG":
        warnings.append("prod: log_level=DEBUG logs every translation miss.")

    if s.is_production and not s.log_json:
        warnings.append("prod: log_json=False (console formatter in production).")

    return warnings


def validate_or_warn(s: "Settings") -> None:
    """
    Hard-fail on settings that break every lookup.
    Log warnings for the rest.
    """
    errors = s.validate_required()

    if errors:
        raise RuntimeError(f"Invalid translation settings: {', '.join(errors)}")

    for msg in warn_on_risky_config(s):
        logger.warning("[config] %s", msg)


settings = Settings()
