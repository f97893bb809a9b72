"""Configuration for handler dispatch.

DispatchConfig holds the few knobs the resolver and dispatcher expose.
Values come from keyword arguments or from ``HANDLER_DISPATCH_*``
environment variables via ``DispatchConfig.from_env()``.

Example:
    >>> config = DispatchConfig(separator="#", cache_enabled=False)
    >>> dispatcher = Dispatcher.from_config(config)
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "HANDLER_DISPATCH_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class DispatchConfig(BaseModel):
    """Configuration for resolver, cache, and default lookups."""

    separator: str = Field(
        default="@",
        description='Character splitting "Type@method" descriptors.',
    )
    cache_enabled: bool = Field(
        default=True,
        description="Memoize resolved descriptors.",
    )
    import_lookup: bool = Field(
        default=True,
        description="Include ImportLookup (dotted module paths) in the default chain.",
    )
    allow_builtins: bool = Field(
        default=False,
        description="Let ImportLookup resolve bare builtin names such as 'len'.",
    )
    log_level: str = Field(
        default="info",
        description="Log level (trace, debug, info, warn, error).",
    )

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"separator must be exactly one character, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.lower()
        if level not in {"trace", "debug", "info", "warn", "warning", "error"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides: Any) -> DispatchConfig:
        """Build a config from ``HANDLER_DISPATCH_*`` environment variables.

        Recognized variables: ``HANDLER_DISPATCH_SEPARATOR``,
        ``HANDLER_DISPATCH_CACHE``, ``HANDLER_DISPATCH_IMPORT_LOOKUP``,
        ``HANDLER_DISPATCH_ALLOW_BUILTINS``, ``HANDLER_DISPATCH_LOG_LEVEL``.

        Args:
            environ: Mapping to read instead of os.environ.
            **overrides: Values taking precedence over the environment.

        Returns:
            The validated config.

        Raises:
            pydantic.ValidationError: If a value is invalid.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        if f"{ENV_PREFIX}SEPARATOR" in env:
            values["separator"] = env[f"{ENV_PREFIX}SEPARATOR"]
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]

        for field_name, var in (
            ("cache_enabled", "CACHE"),
            ("import_lookup", "IMPORT_LOOKUP"),
            ("allow_builtins", "ALLOW_BUILTINS"),
        ):
            raw = env.get(f"{ENV_PREFIX}{var}")
            if raw is not None:
                values[field_name] = _parse_bool(f"{ENV_PREFIX}{var}", raw)

        values.update(overrides)
        return cls(**values)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


__all__ = ["DispatchConfig", "ENV_PREFIX"]
