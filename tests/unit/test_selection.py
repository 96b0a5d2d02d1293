import pytest

from service_list.records.selection import is_indicator_on, is_selected, iter_options, last_option


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, True),
        (1, True),
        ("yes", True),
        (False, False),
        (0, False),
        (None, False),
        ("", False),
        ("false", False),
        ("0", False),
    ],
)
def test_is_selected(value, expected):
    assert is_selected(value) is expected


def test_iter_options_keeps_insertion_order():
    assert list(iter_options({"b": 0, "a": 1, "c": True})) == ["b", "a", "c"]
    assert list(iter_options({"b": 0, "a": 1, "c": True}, only_selected=True)) == ["a", "c"]


def test_iter_options_ignores_non_mappings():
    assert list(iter_options(["a", "b"])) == []
    assert list(iter_options(None)) == []


def test_last_option():
    assert last_option({"a": True, "b": False}) == "b"
    assert last_option({"a": True, "b": False}, only_selected=True) == "a"
    assert last_option({}) is None


def test_is_indicator_on_is_strict_by_default():
    assert is_indicator_on(1) is True
    assert is_indicator_on(1.0) is True
    assert is_indicator_on(2) is False
    assert is_indicator_on("1") is False
    assert is_indicator_on(True) is False


def test_is_indicator_on_accepts_boolean_when_enabled():
    assert is_indicator_on(True, accept_boolean=True) is True
    assert is_indicator_on(False, accept_boolean=True) is False
