"""Pydantic models for config validation.

``Config.validated()`` turns the merged ``config_data`` dict into a typed
``LogmetaConfig``.  Values arriving from environment variables are strings,
so booleans are coerced here rather than at every call site.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ResourceConfig(BaseModel):
    """How the resource descriptor is resolved."""

    project_id: str | None = None
    disable_project_lookup: bool = False

    @field_validator("project_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class LoggingConfig(BaseModel):
    """loguru sink settings."""

    level: str = "WARNING"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}; expected one of {sorted(_LOG_LEVELS)}")
        return level


class LogmetaConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can keep their own sections in the
    same file.
    """

    model_config = ConfigDict(extra="allow")

    resource: ResourceConfig = ResourceConfig()
    logging: LoggingConfig = LoggingConfig()
