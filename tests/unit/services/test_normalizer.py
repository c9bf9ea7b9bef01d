import pytest

from src.contentment.exceptions import ConfigurationError
from src.contentment.services.normalizer import normalize_selection, to_selection_entry


def test_legacy_type_is_renamed_to_key() -> None:
    entry = {"type": "enum", "value": {"sortAlphabetically": True}}

    normalized = normalize_selection(entry)

    assert normalized == {"key": "enum", "value": {"sortAlphabetically": True}}
    assert "type" not in normalized


def test_input_is_not_mutated() -> None:
    entry = {"type": "enum", "value": {}}

    normalize_selection(entry)

    assert entry == {"type": "enum", "value": {}}


def test_existing_key_wins_over_stray_type() -> None:
    entry = {"key": "dropdown", "type": "enum", "value": {}}

    assert normalize_selection(entry) == entry


@pytest.mark.parametrize(
    "entry",
    [
        {"key": "enum", "value": {}},
        {"type": "enum", "value": {}},
        {"key": "a", "type": "b"},
    ],
)
def test_normalize_is_idempotent(entry: dict) -> None:
    once = normalize_selection(entry)

    assert normalize_selection(once) == once


def test_non_mapping_entry_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        normalize_selection(["enum"], path="dataSource[0]")

    assert excinfo.value.path == "dataSource[0]"


def test_entry_without_key_or_type_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="neither 'key' nor 'type'"):
        normalize_selection({"value": {}})


def test_non_string_key_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        normalize_selection({"key": 42}, path="listEditor[0]")

    assert excinfo.value.path == "listEditor[0].key"


def test_selection_entry_defaults_missing_value() -> None:
    entry = to_selection_entry({"type": "dropdown"})

    assert entry.key == "dropdown"
    assert entry.value == {}


def test_selection_entry_rejects_non_mapping_value() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        to_selection_entry({"key": "dropdown", "value": "oops"}, path="listEditor[0]")

    assert excinfo.value.path == "listEditor[0].value"
