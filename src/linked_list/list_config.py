# This file defines runtime configuration for the linked list container.
# The loader merges YAML defaults with environment overrides and validates diagnostic levels.
# A missing config file falls back to the built-in catalog so the container works outside the repo checkout.

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = "configs/linked_list.yaml"
DEFAULT_LOGGER_NAME = "linked_list"


@dataclass(frozen=True)
class DiagnosticSpec:
    level: int
    message: str


def _default_catalog() -> dict[str, DiagnosticSpec]:
    return {
        "EMPTY_LIST": DiagnosticSpec(level=logging.ERROR, message="delete on empty list"),
        "INDEX_OUT_OF_RANGE": DiagnosticSpec(level=logging.ERROR, message="index out of range"),
        "VALUE_NOT_FOUND": DiagnosticSpec(level=logging.WARNING, message="value not found"),
    }


@dataclass(frozen=True)
class ListConfig:
    logger_name: str = DEFAULT_LOGGER_NAME
    diagnostics: Mapping[str, DiagnosticSpec] = field(default_factory=_default_catalog)

    def __post_init__(self) -> None:
        # Read-only: the cached default instance is shared by every list.
        object.__setattr__(self, "diagnostics", MappingProxyType(dict(self.diagnostics)))

    def diagnostic(self, reason_code: str) -> DiagnosticSpec:
        spec = self.diagnostics.get(reason_code)
        if spec is None:
            return DiagnosticSpec(level=logging.ERROR, message=f"operation did not apply ({reason_code})")
        return spec


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _parse_level(value: Any, field_name: str) -> int:
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{field_name} must be a logging level name, got: {value!r}")
    return level


def _parse_catalog(raw_codes: Any) -> dict[str, DiagnosticSpec]:
    if not isinstance(raw_codes, dict):
        raise ValueError("diagnostics.codes must be a mapping of code->{level, message}")

    catalog = _default_catalog()
    for code, payload in raw_codes.items():
        payload = dict(payload or {})
        fallback = catalog.get(str(code), DiagnosticSpec(level=logging.ERROR, message=str(code).lower()))
        level = fallback.level
        if "level" in payload:
            level = _parse_level(payload["level"], f"diagnostics.codes.{code}.level")
        catalog[str(code)] = DiagnosticSpec(level=level, message=str(payload.get("message", fallback.message)))
    return catalog


def load_list_config(*, config_path: str = DEFAULT_CONFIG_PATH) -> ListConfig:
    path = Path(config_path)
    if not path.is_absolute():
        path = PROJECT_ROOT / path

    raw = _load_yaml(path) if path.exists() else {}
    diagnostics_cfg = dict(raw.get("diagnostics", {}) or {})

    logger_name = str(diagnostics_cfg.get("logger_name", DEFAULT_LOGGER_NAME))
    logger_name = _env_str("LINKED_LIST_LOGGER_NAME", logger_name)
    if not logger_name:
        raise ValueError("diagnostics.logger_name must be non-empty")

    return ListConfig(
        logger_name=logger_name,
        diagnostics=_parse_catalog(diagnostics_cfg.get("codes", {}) or {}),
    )


@lru_cache(maxsize=1)
def get_list_config() -> ListConfig:
    """Cached accessor for the default list configuration.

    The file and `LINKED_LIST_LOGGER_NAME` are read on the first call only; lists built
    afterwards share that instance until `get_list_config.cache_clear()` is called.
    """

    return load_list_config()
