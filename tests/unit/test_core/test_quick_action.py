"""Unit tests for the QuickAction model and helpers."""

import pytest

from quickactions.core.quick_action import (
    DEFAULT_ICON,
    ActionColor,
    QuickAction,
    action_from_dict,
    action_to_dict,
    default_quick_actions,
    prompt_preview,
)


class TestQuickAction:
    """Tests for the QuickAction dataclass."""

    def test_defaults(self) -> None:
        """Only id and name are required."""
        action = QuickAction(id="x", name="Minimal")
        assert action.prompt == ""
        assert action.icon == DEFAULT_ICON
        assert action.color is ActionColor.BLUE
        assert action.sort_order == 0

    def test_is_frozen(self) -> None:
        """Actions are immutable, so the id can never change."""
        action = QuickAction(id="x", name="Frozen")
        with pytest.raises(AttributeError):
            action.id = "y"  # type: ignore[misc]

    def test_empty_name_and_prompt_allowed(self) -> None:
        """Name and prompt may be empty strings."""
        action = QuickAction(id="x", name="", prompt="")
        assert action.name == ""
        assert action.prompt == ""


class TestActionColor:
    """Tests for color name lookup."""

    def test_from_name_is_case_insensitive(self) -> None:
        assert ActionColor.from_name("Purple") is ActionColor.PURPLE

    @pytest.mark.parametrize("name", ["teal", "", None])
    def test_from_name_unknown_falls_back_to_blue(self, name) -> None:
        assert ActionColor.from_name(name) is ActionColor.BLUE


class TestSerialization:
    """Tests for action_to_dict / action_from_dict."""

    def test_to_dict_stores_color_by_name(self) -> None:
        action = QuickAction(id="a", name="Deploy", prompt="Ship it", icon="arrow.up", color=ActionColor.RED)
        data = action_to_dict(action)
        assert data == {
            "id": "a",
            "name": "Deploy",
            "prompt": "Ship it",
            "icon": "arrow.up",
            "color": "red",
            "sort_order": 0,
        }

    def test_from_dict_restores_action(self) -> None:
        action = QuickAction(
            id="a", name="Deploy", prompt="Ship it", icon="arrow.up", color=ActionColor.RED, sort_order=4
        )
        assert action_from_dict(action_to_dict(action)) == action

    def test_from_dict_fills_missing_optional_fields(self) -> None:
        action = action_from_dict({"id": "a", "name": "Bare"})
        assert action == QuickAction(id="a", name="Bare")

    def test_from_dict_blank_icon_uses_default(self) -> None:
        action = action_from_dict({"id": "a", "name": "Bare", "icon": ""})
        assert action.icon == DEFAULT_ICON

    @pytest.mark.parametrize("missing", ["id", "name"])
    def test_from_dict_requires_id_and_name(self, missing: str) -> None:
        data = {"id": "a", "name": "Bare"}
        del data[missing]
        with pytest.raises(KeyError):
            action_from_dict(data)


class TestDefaultQuickActions:
    """Tests for the built-in defaults."""

    def test_two_defaults_in_order(self) -> None:
        names = [a.name for a in default_quick_actions()]
        assert names == ["Run App", "Commit & Push"]

    def test_defaults_get_fresh_ids(self) -> None:
        first = {a.id for a in default_quick_actions()}
        second = {a.id for a in default_quick_actions()}
        assert len(first) == 2
        assert first.isdisjoint(second)

    def test_defaults_are_sorted_by_sort_order(self) -> None:
        orders = [a.sort_order for a in default_quick_actions()]
        assert orders == sorted(orders)


class TestPromptPreview:
    """Tests for the one-line prompt preview."""

    def test_short_single_line_unchanged(self) -> None:
        assert prompt_preview("Run the app", 60) == "Run the app"

    def test_long_line_truncated_with_ellipsis(self) -> None:
        preview = prompt_preview("x" * 100, 10)
        assert preview == "x" * 9 + "…"
        assert len(preview) == 10

    def test_multi_line_keeps_first_line(self) -> None:
        assert prompt_preview("Run the tests\nthen fix failures", 60) == "Run the tests…"

    def test_leading_blank_lines_skipped(self) -> None:
        assert prompt_preview("\n\n  Commit  \n", 60) == "Commit"

    def test_blank_prompt_gives_empty_preview(self) -> None:
        assert prompt_preview("  \n ", 60) == ""
