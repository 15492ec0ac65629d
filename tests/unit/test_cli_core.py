import pytest

from causechain.cli import parse_args, resolve_target
from causechain.common.errors import TargetError


def test_parse_args_defaults():
    args = parse_args(["inspect", "pkg.module:func"])
    assert args.command == "inspect"
    assert args.target == "pkg.module:func"
    assert args.config is None
    assert args.overlay_config is None
    assert args.include_self is False
    assert args.log_level == "INFO"


def test_parse_args_accepts_config_and_overlay():
    args = parse_args(["inspect", "a:b", "--config", "causechain.yml", "--overlay-config", "live.yml", "--include-self"])
    assert args.config == "causechain.yml"
    assert args.overlay_config == "live.yml"
    assert args.include_self is True


def test_parse_args_requires_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_resolve_target_returns_nested_attribute():
    target = resolve_target("os.path:join")
    assert target("a", "b").endswith("b")


@pytest.mark.parametrize(
    "spec",
    ["no_colon", ":func", "os:", "causechain_missing_module:func", "os:missing_attr", "os:sep"],
)
def test_resolve_target_rejects_bad_specs(spec):
    with pytest.raises(TargetError) as excinfo:
        resolve_target(spec)
    assert excinfo.value.error_code == "TARGET_ERROR"
