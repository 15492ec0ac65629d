import pytest

from causechain.common.errors import ConfigError
from causechain.common.schema import validate_traversal_config


BASE_CONFIG = {"traversal": {"follow_context": True, "max_depth": 100}}


def test_validate_traversal_config_accepts_valid_shape():
    validated = validate_traversal_config(dict(BASE_CONFIG))
    assert validated["traversal"]["max_depth"] == 100


def test_validate_traversal_config_accepts_empty_section():
    validated = validate_traversal_config({"traversal": None})
    assert validated["traversal"] == {}


def test_validate_traversal_config_rejects_missing_section():
    with pytest.raises(ConfigError):
        validate_traversal_config({})


def test_validate_traversal_config_rejects_non_mapping_document():
    with pytest.raises(ConfigError):
        validate_traversal_config(["not", "a", "mapping"])
    with pytest.raises(ConfigError):
        validate_traversal_config(None)


def test_validate_traversal_config_rejects_unknown_key_by_default():
    bad = {"traversal": {"follow_context": False, "unexpected": True}}
    with pytest.raises(ConfigError):
        validate_traversal_config(bad)


def test_validate_traversal_config_allows_unknown_when_enabled():
    okay = {"traversal": {"extra": 1}, "other": {}}
    validate_traversal_config(okay, allow_unknown=True)


@pytest.mark.parametrize("value", [0, -3, "10", True, 1.5])
def test_validate_traversal_config_rejects_bad_max_depth(value):
    with pytest.raises(ConfigError):
        validate_traversal_config({"traversal": {"max_depth": value}})


def test_validate_traversal_config_rejects_non_boolean_follow_context():
    with pytest.raises(ConfigError):
        validate_traversal_config({"traversal": {"follow_context": "yes"}})
