"""Pydantic settings for the page bootstrap and its performance diagnostics."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError

SETTINGS_ENV = "PAGEWIRE_SETTINGS"


class BootstrapSettings(BaseModel):
    """Knobs of the initialization orchestrator."""

    trace_flag: str = Field(
        default="_ui_performance_trace=1",
        min_length=1,
        description="Substring of the query string that turns on per-initializer tracing",
    )
    trace_limit: int = Field(default=20, ge=1, description="How many of the slowest initializers to report")
    slow_threshold_ms: float = Field(
        default=500.0, ge=0, description="Total init time above which a slow-startup error is logged"
    )


def load_settings(value: Any = None) -> BootstrapSettings:
    """Normalize supported inputs into a BootstrapSettings instance.

    With no value, the file named by $PAGEWIRE_SETTINGS is read if set,
    otherwise the defaults are returned.
    """
    if value is None:
        env_path = os.environ.get(SETTINGS_ENV)
        if not env_path:
            return BootstrapSettings()
        value = Path(env_path)
    if isinstance(value, BootstrapSettings):
        return value
    payload: Mapping[str, Any]
    if isinstance(value, Mapping):
        payload = value
    elif isinstance(value, (str, bytes)):
        payload = _load_text_payload(value)
    elif isinstance(value, Path):
        try:
            text = value.read_text()
        except OSError as exc:
            raise ValueError(f"Cannot read settings file {value}") from exc
        payload = _load_text_payload(text)
    else:
        raise TypeError(f"Unsupported settings value: {type(value).__name__}")
    try:
        return BootstrapSettings.model_validate(payload)
    except ValidationError as exc:
        raise ValueError("Invalid bootstrap settings") from exc


def _load_text_payload(raw: str | bytes) -> dict[str, Any]:
    """Interpret raw text as YAML first, falling back to JSON."""
    text = raw.decode() if isinstance(raw, bytes) else raw
    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError:
        return json.loads(text)


__all__ = ["BootstrapSettings", "SETTINGS_ENV", "load_settings"]
