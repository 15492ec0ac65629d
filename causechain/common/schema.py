"""Minimal strict schema for the YAML traversal config."""

from __future__ import annotations

from causechain.common.constants import CONFIG_SECTION, TRAVERSAL_KEYS
from causechain.common.errors import ConfigError


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping, got {type(obj).__name__}")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_traversal_config(cfg, *, allow_unknown: bool = False) -> dict:
    _assert_mapping(cfg, "config document")
    _assert_required_keys(cfg, {CONFIG_SECTION}, "config document")
    _assert_no_unknown_keys(cfg, {CONFIG_SECTION}, "config document", allow_unknown)

    section = cfg[CONFIG_SECTION]
    if section is None:
        section = {}
        cfg = {**cfg, CONFIG_SECTION: section}
    _assert_mapping(section, CONFIG_SECTION)
    _assert_no_unknown_keys(section, set(TRAVERSAL_KEYS), CONFIG_SECTION, allow_unknown)

    follow_context = section.get("follow_context", False)
    if not isinstance(follow_context, bool):
        raise ConfigError(f"{CONFIG_SECTION}.follow_context must be a boolean")

    # bool is an int subclass; reject it explicitly.
    max_depth = section.get("max_depth")
    if max_depth is not None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
            raise ConfigError(f"{CONFIG_SECTION}.max_depth must be a positive integer or null")

    return cfg
