"""Traversal configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from causechain.common.constants import CONFIG_SECTION
from causechain.common.errors import ConfigError
from causechain.common.fs import read_yaml
from causechain.common.schema import validate_traversal_config


@dataclass(frozen=True)
class TraversalConfig:
    follow_context: bool = False
    max_depth: int | None = None


DEFAULT_CONFIG = TraversalConfig()


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_config_file(path: Path) -> Any:
    try:
        return read_yaml(path)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}") from exc


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> Any:
    base = _read_config_file(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = _read_config_file(overlay_path)
    if overlay is None:
        return base
    return _deep_merge(base, overlay)


def config_from_mapping(cfg: dict) -> TraversalConfig:
    section = cfg.get(CONFIG_SECTION) or {}
    return TraversalConfig(
        follow_context=section.get("follow_context", False),
        max_depth=section.get("max_depth"),
    )


def load_traversal_config(
    path: Path,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> TraversalConfig:
    raw = _load_yaml_with_overlay(path, overlay_path)
    cfg = validate_traversal_config(raw, allow_unknown=allow_unknown)
    return config_from_mapping(cfg)
