# quickactions/core/quick_action.py

"""Quick action model.

A quick action is a named shortcut that sends a preset prompt to the
assistant. This module defines the frozen QuickAction dataclass, the
editor-facing QuickActionDraft, the ActionColor palette names, dict
(de)serialization helpers, and the built-in default actions.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = [
    "DEFAULT_ICON",
    "ActionColor",
    "QuickAction",
    "QuickActionDraft",
    "action_from_dict",
    "action_to_dict",
    "default_quick_actions",
    "new_action_id",
    "prompt_preview",
]

DEFAULT_ICON = "bolt.fill"


class ActionColor(Enum):
    """Named accent colors a quick action can be tinted with."""

    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"
    PINK = "pink"
    YELLOW = "yellow"
    GRAY = "gray"

    @classmethod
    def from_name(cls, name: str | None) -> ActionColor:
        """Looks up a color by name, falling back to BLUE for unknown names."""
        try:
            return cls(str(name).lower())
        except ValueError:
            return cls.BLUE


@dataclass(frozen=True)
class QuickAction:
    """Immutable quick action record.

    Attributes:
        id: Stable unique identifier, never changed after creation.
        name: Display name shown in the actions list.
        prompt: Prompt text sent when the action runs.
        icon: Symbolic icon name (e.g. "play.fill").
        color: Accent color for the icon.
        sort_order: Position in the sorted view (ascending).
    """

    id: str
    name: str
    prompt: str = ""
    icon: str = DEFAULT_ICON
    color: ActionColor = ActionColor.BLUE
    sort_order: int = 0


@dataclass(frozen=True)
class QuickActionDraft:
    """User input collected by the editor, without identity or ordering."""

    name: str
    prompt: str = ""
    icon: str = DEFAULT_ICON
    color: ActionColor = ActionColor.BLUE


def new_action_id() -> str:
    """Returns a fresh unique action id."""
    return uuid.uuid4().hex


def action_to_dict(action: QuickAction) -> dict[str, Any]:
    """Converts a QuickAction to a JSON-serializable dict.

    Args:
        action: The action to serialize.

    Returns:
        Dictionary with the color stored by name.
    """
    return {
        "id": action.id,
        "name": action.name,
        "prompt": action.prompt,
        "icon": action.icon,
        "color": action.color.value,
        "sort_order": action.sort_order,
    }


def action_from_dict(data: dict[str, Any]) -> QuickAction:
    """Constructs a QuickAction from a plain dict.

    Missing optional fields fall back to QuickAction defaults.

    Args:
        data: Dictionary as produced by ``action_to_dict``.

    Returns:
        A frozen QuickAction instance.

    Raises:
        KeyError: If ``id`` or ``name`` is missing.
    """
    for required in ("id", "name"):
        if required not in data:
            raise KeyError(f"Quick action is missing required '{required}' field")

    return QuickAction(
        id=str(data["id"]),
        name=str(data["name"]),
        prompt=str(data.get("prompt", "")),
        icon=str(data.get("icon") or DEFAULT_ICON),
        color=ActionColor.from_name(data.get("color")),
        sort_order=int(data.get("sort_order", 0)),
    )


def default_quick_actions() -> list[QuickAction]:
    """Builds the built-in default actions with fresh ids.

    Returns:
        "Run App" followed by "Commit & Push".
    """
    return [
        QuickAction(
            id=new_action_id(),
            name="Run App",
            prompt="Run the app",
            icon="play.fill",
            color=ActionColor.GREEN,
            sort_order=0,
        ),
        QuickAction(
            id=new_action_id(),
            name="Commit & Push",
            prompt="Commit all changes and push to the remote",
            icon="arrow.up.circle",
            color=ActionColor.BLUE,
            sort_order=1,
        ),
    ]


def prompt_preview(prompt: str, max_chars: int) -> str:
    """Returns a one-line preview of a prompt.

    Only the first non-empty line is kept; it is cut to ``max_chars``
    characters with a trailing ellipsis when longer. A prompt with
    further lines always gets the ellipsis.

    Args:
        prompt: Full prompt text.
        max_chars: Maximum preview length including the ellipsis.

    Returns:
        The preview string (empty for a blank prompt).
    """
    lines = [line.strip() for line in prompt.splitlines() if line.strip()]
    if not lines:
        return ""

    first = lines[0]
    if len(lines) == 1 and len(first) <= max_chars:
        return first
    return first[: max(max_chars - 1, 0)].rstrip() + "…"
