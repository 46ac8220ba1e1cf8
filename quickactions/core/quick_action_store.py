# quickactions/core/quick_action_store.py

"""Quick action store.

Owns the canonical collection of quick actions and performs every
mutation on it. The view layer receives a store instance explicitly and
learns about changes through ``subscribe`` callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from quickactions.core.quick_action import (
    QuickAction,
    QuickActionDraft,
    default_quick_actions,
    new_action_id,
)

logger = logging.getLogger("quickactions.quick_action_store")

__all__ = ["QuickActionStore", "StoreListener"]

StoreListener = Callable[[list[QuickAction]], None]


class QuickActionStore:
    """In-memory collection of quick actions keyed by id.

    Listeners are called synchronously after every mutation with the new
    sorted list of actions. Exceptions raised by a listener propagate to
    the caller of the mutating method.
    """

    def __init__(self, actions: Iterable[QuickAction] | None = None) -> None:
        """Initializes the store.

        Args:
            actions: Initial actions (e.g. restored by the caller). When
                None, the store starts with the built-in defaults.

        Raises:
            ValueError: If two initial actions share an id.
        """
        self._actions: dict[str, QuickAction] = {}
        self._listeners: list[StoreListener] = []

        for action in default_quick_actions() if actions is None else actions:
            if action.id in self._actions:
                raise ValueError(f"Duplicate quick action id '{action.id}'")
            self._actions[action.id] = action

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[QuickAction]:
        return iter(self.sorted_actions())

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def sorted_actions(self) -> list[QuickAction]:
        """Returns all actions ordered by sort order, then name."""
        return sorted(self._actions.values(), key=lambda a: (a.sort_order, a.name.lower()))

    def get_action(self, action_id: str) -> QuickAction | None:
        """Returns the action with ``action_id``, or None if unknown."""
        return self._actions.get(action_id)

    def create_action(self, draft: QuickActionDraft) -> QuickAction:
        """Builds a new action from editor input without inserting it.

        Allocates a fresh id and places the action after all existing ones.

        Args:
            draft: Field values collected by the editor.

        Returns:
            A QuickAction ready for ``add_action``.
        """
        next_order = max((a.sort_order for a in self._actions.values()), default=-1) + 1
        return QuickAction(
            id=new_action_id(),
            name=draft.name,
            prompt=draft.prompt,
            icon=draft.icon,
            color=draft.color,
            sort_order=next_order,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_action(self, action: QuickAction) -> None:
        """Inserts a new action.

        Args:
            action: The action to add.

        Raises:
            ValueError: If an action with the same id already exists.
        """
        if action.id in self._actions:
            raise ValueError(f"Quick action id '{action.id}' already exists")

        self._actions[action.id] = action
        logger.info("Added quick action '%s'", action.name)
        self._notify()

    def update_action(self, action: QuickAction) -> bool:
        """Replaces the stored action that has the same id.

        Args:
            action: The updated action.

        Returns:
            True if an action was replaced, False if the id is unknown.
        """
        if action.id not in self._actions:
            logger.warning("Cannot update unknown quick action '%s'", action.id)
            return False

        self._actions[action.id] = action
        logger.info("Updated quick action '%s'", action.name)
        self._notify()
        return True

    def delete_action(self, action_id: str) -> bool:
        """Removes an action by id.

        Args:
            action_id: Id of the action to delete.

        Returns:
            True if an action was removed, False if the id is unknown.
        """
        removed = self._actions.pop(action_id, None)
        if removed is None:
            logger.warning("Cannot delete unknown quick action '%s'", action_id)
            return False

        logger.info("Deleted quick action '%s'", removed.name)
        self._notify()
        return True

    def reset_to_defaults(self) -> None:
        """Replaces the whole collection with the built-in defaults."""
        self._actions = {a.id: a for a in default_quick_actions()}
        logger.info("Reset quick actions to defaults")
        self._notify()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Registers a change listener.

        Args:
            listener: Called with the sorted actions after each mutation.

        Returns:
            A callable that removes the listener. Calling it twice is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.sorted_actions()
        for listener in list(self._listeners):
            listener(snapshot)
