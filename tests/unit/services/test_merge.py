from src.contentment.services.merge import merge_defaults


def test_base_wins_over_every_override() -> None:
    merged = merge_defaults({"a": 1}, {"a": 2, "b": 2}, {"a": 3, "b": 3, "c": 3})

    assert merged == {"a": 1, "b": 2, "c": 3}


def test_base_wins_regardless_of_override_order() -> None:
    first = merge_defaults({"a": "base"}, {"a": "x"}, {"a": "y"})
    second = merge_defaults({"a": "base"}, {"a": "y"}, {"a": "x"})

    assert first["a"] == second["a"] == "base"


def test_grouping_of_overrides_does_not_change_result() -> None:
    base = {"a": 0}
    one, two, three = {"b": 1}, {"b": 2, "c": 2}, {"c": 3, "d": 3}

    nested = merge_defaults(base, merge_defaults(one, two), three)
    flat = merge_defaults(base, one, two, three)

    assert nested == flat


def test_keys_keep_first_insertion_position() -> None:
    merged = merge_defaults({"z": 1}, {"a": 2}, {"m": 3, "z": 4})

    assert list(merged) == ["z", "a", "m"]


def test_inputs_are_not_mutated_and_none_is_skipped() -> None:
    base = {"a": 1}
    override = {"b": 2}

    merged = merge_defaults(base, None, override)

    assert merged == {"a": 1, "b": 2}
    assert base == {"a": 1}
    assert merged is not base


def test_none_base_behaves_like_empty_mapping() -> None:
    assert merge_defaults(None, {"a": 1}) == {"a": 1}


def test_remerge_is_idempotent() -> None:
    once = merge_defaults({"a": 1}, {"b": 2})

    assert merge_defaults(once, {"b": 2}) == once
