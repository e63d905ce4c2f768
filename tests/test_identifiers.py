"""Tests for action type helpers."""

import pytest

from reducks import (
    InvalidActionNameError,
    InvalidActionTypeError,
    InvalidNamespaceError,
    make_action_type,
    split_action_type,
)


class TestMakeActionType:
    """Tests for make_action_type."""

    def test_joins_with_slash(self):
        assert make_action_type("counter", "INCREMENT") == "counter/INCREMENT"

    def test_any_case_name(self):
        assert make_action_type("todos", "addTodo") == "todos/addTodo"

    def test_nested_namespace(self):
        assert make_action_type("app/counter", "RESET") == "app/counter/RESET"

    def test_trailing_separator_namespace(self):
        with pytest.raises(InvalidNamespaceError, match="must not end"):
            make_action_type("counter/", "RESET")

    def test_empty_name(self):
        with pytest.raises(InvalidActionNameError):
            make_action_type("counter", "")


class TestSplitActionType:
    """Tests for split_action_type."""

    def test_splits(self):
        assert split_action_type("counter/INCREMENT") == ("counter", "INCREMENT")

    def test_splits_on_last_separator(self):
        assert split_action_type("app/counter/RESET") == ("app/counter", "RESET")

    @pytest.mark.parametrize("value", ["INCREMENT", "/INCREMENT", "counter/"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidActionTypeError):
            split_action_type(value)
