from __future__ import annotations

"""Configuration utilities for bdrate.

This module defines a small hierarchical configuration schema using Pydantic
models.  The :class:`Settings` container groups the computation defaults and
the logging options.  Instances can be populated from environment variables
(``BDRATE_`` prefix, ``__`` between section and key) or from YAML/JSON files
with matching nested keys.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import Method

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class BDRateSettings(SectionModel):
    """Defaults for the BD-rate computation."""

    min_overlap: float = Field(default=0.5, ge=0.0, le=1.0)
    method: str = Method.AKIMA.value

    @field_validator("method", mode="before")
    @classmethod
    def _check_method(cls, value: Any) -> Any:
        return Method.parse(value).value


class LoggingSettings(SectionModel):
    """Options for the command line logger."""

    level: str = "WARNING"
    format: str = "%(levelname)s:%(name)s:%(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _check_level(cls, value: Any) -> Any:
        name = str(value).upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown logging level: {value}")
        return name


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    bdrate: BDRateSettings = Field(default_factory=BDRateSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="BDRATE_",
        env_nested_delimiter="__",
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
