from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class FluentSettings(BaseModel):
    """Labels and rendering options used when building failure messages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    checked_label: str = "checked value"
    expected_label: str = "expected value"
    null_token: str = "None"
    max_value_length: int | None = None
    hash_format: Literal["hex", "decimal"] = "hex"

    @field_validator("checked_label", "expected_label", "null_token")
    @classmethod
    def labels_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("labels must not be blank")
        return v

    @field_validator("max_value_length")
    @classmethod
    def max_value_length_must_leave_room(cls, v: int | None) -> int | None:
        if v is not None and v < 8:
            raise ValueError("max_value_length must be at least 8")
        return v


_settings = FluentSettings()


def get_settings() -> FluentSettings:
    return _settings


def use_settings(settings: FluentSettings) -> None:
    """Replace the process-wide default settings.

    Meant to be called once, before any check runs (e.g. from a conftest).
    Contexts already built keep the settings they captured.
    """
    global _settings
    _settings = settings


def load_settings(path: Path) -> FluentSettings:
    """Load and validate settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    # Settings may live under a top-level key in a shared config file
    if isinstance(raw, dict) and "fluentcheck" in raw:
        raw = raw["fluentcheck"]

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")

    settings = FluentSettings(**raw)
    logger.debug(f"Loaded settings from {path}: {settings.model_dump()}")
    return settings
