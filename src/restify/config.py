"""Server settings and the YAML loader consumed by ``restify serve``."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from restify import __version__
from restify.protocol.dispatcher import DEFAULT_PROTOCOL_VERSION, DEFAULT_SERVER_NAME

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised when a settings file fails parsing or validation."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    model_config = {"frozen": True}

    enabled: bool = False
    export_to_console: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Everything the HTTP host needs to start."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=0, le=65535)
    path: str = "/mcp"
    server_name: str = DEFAULT_SERVER_NAME
    server_version: str = __version__
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    log_level: LogLevel = "INFO"
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            msg = f"path must start with '/', got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings(path: str | Path | None = None) -> ServerSettings:
    """Read YAML, interpolate env vars, and validate.

    Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
    using :func:`os.path.expandvars` before YAML parsing. Without *path* the
    defaults are returned.

    Raises:
        ConfigError: On read errors, YAML parse errors or validation failures.
    """
    if path is None:
        return ServerSettings()

    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {p}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        return ServerSettings()
    if not isinstance(data, dict):
        raise ConfigError("Settings YAML must be a mapping")

    try:
        return ServerSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
