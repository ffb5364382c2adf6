"""Tests for the Action / UnknownAction tagged-union decode."""

from __future__ import annotations

from typing import Any

import pytest

from flowtree.model.actions import Action, UnknownAction, decode_action, decode_actions


class TestDecodeAction:
    def test_leaf_action(self) -> None:
        action = decode_action({"print": {"message": "hi"}})
        assert action == Action(kind="print", value={"message": "hi"})
        assert isinstance(action, Action)
        assert action.is_container is False
        assert action.nested_actions == []

    def test_container_action(self, iterate_action: dict[str, Any]) -> None:
        action = decode_action(iterate_action)
        assert isinstance(action, Action)
        assert action.kind == "iterate"
        assert action.is_container is True
        assert len(action.nested_actions) == 2

    def test_nested_actions_share_document_list(
        self, iterate_action: dict[str, Any]
    ) -> None:
        action = decode_action(iterate_action)
        assert isinstance(action, Action)
        assert action.nested_actions is iterate_action["iterate"]["actions"]

    def test_non_list_actions_field_is_leaf(self) -> None:
        action = decode_action({"iterate": {"actions": "oops"}})
        assert isinstance(action, Action)
        assert action.is_container is False

    def test_scalar_params_are_leaf(self) -> None:
        action = decode_action({"echo": "text"})
        assert isinstance(action, Action)
        assert action.value == "text"
        assert action.is_container is False

    def test_custom_steps_field(self) -> None:
        action = decode_action({"group": {"steps": [{"print": {}}]}}, steps_field="steps")
        assert isinstance(action, Action)
        assert action.is_container is True

    @pytest.mark.parametrize("raw", [{}, {"a": 1, "b": 2}, None, "print", [{"print": {}}]])
    def test_malformed_decodes_to_unknown(self, raw: Any) -> None:
        action = decode_action(raw)
        assert action == UnknownAction(raw)


class TestDecodeActions:
    def test_preserves_order(self) -> None:
        actions = decode_actions([{"print": {}}, {}, {"delay": {}}])
        assert [type(a) for a in actions] == [Action, UnknownAction, Action]
        assert [a.kind for a in actions if isinstance(a, Action)] == ["print", "delay"]

    @pytest.mark.parametrize("raw", [None, "actions", {"print": {}}, 3])
    def test_non_list_is_empty(self, raw: Any) -> None:
        assert decode_actions(raw) == ()
