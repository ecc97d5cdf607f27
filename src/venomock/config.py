"""Settings for venomock and their loading."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from venomock.errors import ConfigValidationError, ErrorContext

MIN_WIDTH = 20


class MockSettings(BaseSettings):
    """Configuration for venomock mocks and diagnostics."""

    model_config = SettingsConfigDict(
        env_prefix="VENOMOCK_",
        extra="ignore",
    )

    # Rendering of values in diagnostics (passed to rich's pretty_repr)
    max_width: int = 120
    max_length: int | None = None
    max_string: int | None = None
    max_depth: int | None = None

    log_calls: bool = True
    show_candidates: bool = True

    @field_validator("max_width")
    @classmethod
    def validate_max_width(cls, v: int) -> int:
        if v < MIN_WIDTH:
            raise ConfigValidationError(
                message=f"max_width must be at least {MIN_WIDTH}",
                field="max_width",
                value=v,
                context=ErrorContext(extra={"minimum": MIN_WIDTH}),
            )
        return v

    @field_validator("max_length", "max_string", "max_depth")
    @classmethod
    def validate_limits(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is not None and v < 1:
            raise ConfigValidationError(
                message=f"{info.field_name} must be a positive integer or unset",
                field=info.field_name,
                value=v,
            )
        return v


def load_settings(config_path: str | Path | None = None) -> MockSettings:
    """Load settings from a YAML file and the environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
            if not isinstance(config_data, dict):
                raise ConfigValidationError(
                    message=f"Settings file must contain a mapping: {config_path}",
                    value=config_data,
                )

    config_data.update(_get_env_overrides())

    return MockSettings(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get settings overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "VENOMOCK_MAX_WIDTH": ("max_width", int),
        "VENOMOCK_MAX_LENGTH": ("max_length", int),
        "VENOMOCK_MAX_STRING": ("max_string", int),
        "VENOMOCK_MAX_DEPTH": ("max_depth", int),
        "VENOMOCK_LOG_CALLS": ("log_calls", _to_bool),
        "VENOMOCK_SHOW_CANDIDATES": ("show_candidates", _to_bool),
    }

    for env_key, (config_key, converter) in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            try:
                overrides[config_key] = converter(value)
            except ValueError as e:
                raise ConfigValidationError(
                    message=f"Invalid value for {env_key}: {value!r}",
                    field=config_key,
                    value=value,
                    cause=e,
                ) from e

    return overrides


def _to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value!r}")


@lru_cache(maxsize=1)
def get_settings() -> MockSettings:
    """Get the process-wide default settings."""
    return load_settings()
