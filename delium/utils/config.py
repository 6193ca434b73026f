# delium/utils/config.py
"""
Config Loader — Delium (Typed YAML Configs)

Intent
- Load and validate configs/parameters.yaml into typed objects (Pydantic v2).
- Provide the defaults (algorithm / stride / repeat / path) the orchestration layer
  falls back to when a call does not override them.

What this module guarantees
- Strict validation: invalid configs fail fast with actionable Pydantic errors.
- Unicode whitespace hardening BEFORE YAML parse: NBSP/BOM/narrow NBSP normalized.
- Missing blocks fall back to model defaults.
- Values are validated with the same rules the manglers enforce (stride > 0,
  repeat >= 0, path must parse), so a bad default never reaches a hashing call.
- stride / repeat are StrictInt: YAML `true` or `2.0` is rejected, not coerced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from delium.core.digest import DigestAlgorithm
from delium.core.errors import DeliumError
from delium.core.path import parse_path
from delium.utils.logging import get_logger

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class RunConfig(BaseModel):
    """Top-level runtime metadata (logging)."""
    name: str = "delium"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        lvl = str(v).strip().upper()
        if lvl not in _LOG_LEVELS:
            raise ValueError(f"run.log_level must be one of {sorted(_LOG_LEVELS)}")
        return lvl


class DeliumConfig(BaseModel):
    """Mangling defaults used when a call leaves a parameter unset."""
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    stride: StrictInt = 3
    repeat: StrictInt = 1
    path: Optional[str] = None

    @field_validator("algorithm", mode="before")
    @classmethod
    def _coerce_algorithm(cls, v: Any) -> DigestAlgorithm:
        try:
            return DigestAlgorithm.coerce(v)
        except DeliumError as e:
            raise ValueError(f"delium.algorithm: {e}") from e

    @field_validator("stride")
    @classmethod
    def _validate_stride(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("delium.stride must be > 0")
        return v

    @field_validator("repeat")
    @classmethod
    def _validate_repeat(cls, v: int) -> int:
        if v < 0:
            raise ValueError("delium.repeat must be >= 0")
        return v

    @field_validator("path")
    @classmethod
    def _validate_path(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            parse_path(v)
        except DeliumError as e:
            raise ValueError(f"delium.path is invalid: {e}") from e
        return v


class ParametersConfig(BaseModel):
    """Top-level typed view of parameters.yaml."""
    run: RunConfig = Field(default_factory=RunConfig)
    delium: DeliumConfig = Field(default_factory=DeliumConfig)


# -----------------------------
# YAML helpers
# -----------------------------

_BAD_WHITESPACE = ["\u00A0", "\u2007", "\u202F", "\uFEFF"]


def _load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {str(path)}")

    raw = p.read_text(encoding="utf-8")

    for ch in _BAD_WHITESPACE:
        raw = raw.replace(ch, " ")

    data = yaml.safe_load(raw) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/object: {str(path)}")
    return data


def load_parameters(path: str | Path = "configs/parameters.yaml") -> ParametersConfig:
    """Load parameters.yaml and return a validated typed ParametersConfig."""
    logger = get_logger(__name__)
    raw = _load_yaml(path)
    try:
        return ParametersConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid parameters.yaml: %s", e)
        raise


def resolve_parameters(path: Optional[str | Path]) -> ParametersConfig:
    """load_parameters(path), or built-in defaults when path is None."""
    if path is None:
        return ParametersConfig()
    return load_parameters(path)


__all__ = [
    "RunConfig",
    "DeliumConfig",
    "ParametersConfig",
    "load_parameters",
    "resolve_parameters",
]
