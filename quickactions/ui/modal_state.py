# quickactions/ui/modal_state.py

"""Modal state machine for the quick actions manager.

Exactly one modal can be open at a time: the create editor, the edit
editor, or one of the two destructive confirmations. The current modal is
a single ``ModalState`` value; the manager dialog renders from it and
routes user answers back through ``QuickActionsController``. Nothing here
depends on Qt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from quickactions.core.quick_action import QuickAction, QuickActionDraft

if TYPE_CHECKING:
    from quickactions.core.quick_action_store import QuickActionStore

__all__ = [
    "Adding",
    "Closed",
    "ConfirmingDelete",
    "ConfirmingReset",
    "Editing",
    "InvalidTransitionError",
    "ModalState",
    "QuickActionsController",
]

logger = logging.getLogger("quickactions.modal_state")


@dataclass(frozen=True)
class Closed:
    """No modal is open."""


@dataclass(frozen=True)
class Adding:
    """The editor is open in create mode."""


@dataclass(frozen=True)
class Editing:
    """The editor is open for an existing action."""

    action: QuickAction


@dataclass(frozen=True)
class ConfirmingDelete:
    """Waiting for the user to confirm deleting ``action``."""

    action: QuickAction


@dataclass(frozen=True)
class ConfirmingReset:
    """Waiting for the user to confirm resetting to the defaults."""


ModalState = Union[Closed, Adding, Editing, ConfirmingDelete, ConfirmingReset]

StateListener = Callable[[ModalState], None]


class InvalidTransitionError(RuntimeError):
    """Raised when an event is not valid in the current modal state."""


class QuickActionsController:
    """Drives the manager's modal flow and applies results to the store.

    Requests open a modal only from ``Closed``. ``submit`` closes an editor
    and writes the draft to the store; ``confirm`` closes a confirmation
    and performs the destructive operation; ``cancel`` always closes the
    current modal without touching the store.

    Attributes:
        store: The store every mutation is delegated to.
    """

    def __init__(self, store: QuickActionStore) -> None:
        self.store = store
        self._state: ModalState = Closed()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ModalState:
        """The currently open modal."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registers a listener called with the new state after each transition.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Requests (Closed -> modal)
    # ------------------------------------------------------------------

    def request_add(self) -> None:
        """Opens the editor in create mode."""
        self._open(Adding())

    def request_edit(self, action: QuickAction) -> None:
        """Opens the editor for ``action``."""
        self._open(Editing(action))

    def request_delete(self, action: QuickAction) -> None:
        """Asks for confirmation before deleting ``action``."""
        self._open(ConfirmingDelete(action))

    def request_reset(self) -> None:
        """Asks for confirmation before resetting to the defaults."""
        self._open(ConfirmingReset())

    # ------------------------------------------------------------------
    # Answers (modal -> Closed)
    # ------------------------------------------------------------------

    def submit(self, draft: QuickActionDraft) -> QuickAction:
        """Saves the editor's input.

        In create mode the store allocates a new action; in edit mode the
        draft's fields replace those of the edited action, keeping its id
        and sort order.

        Args:
            draft: Values entered in the editor.

        Returns:
            The action that was added or updated.

        Raises:
            InvalidTransitionError: If no editor is open.
        """
        state = self._state
        if isinstance(state, Adding):
            action = self.store.create_action(draft)
            self.store.add_action(action)
        elif isinstance(state, Editing):
            action = replace(
                state.action,
                name=draft.name,
                prompt=draft.prompt,
                icon=draft.icon,
                color=draft.color,
            )
            self.store.update_action(action)
        else:
            raise InvalidTransitionError(f"Cannot submit an editor in state {type(state).__name__}")

        self._set_state(Closed())
        return action

    def confirm(self) -> None:
        """Performs the pending destructive operation.

        Raises:
            InvalidTransitionError: If no confirmation is pending.
        """
        state = self._state
        if isinstance(state, ConfirmingDelete):
            self.store.delete_action(state.action.id)
        elif isinstance(state, ConfirmingReset):
            self.store.reset_to_defaults()
        else:
            raise InvalidTransitionError(f"Nothing to confirm in state {type(state).__name__}")

        self._set_state(Closed())

    def cancel(self) -> None:
        """Closes the current modal with no side effects."""
        if not isinstance(self._state, Closed):
            logger.debug("Cancelled %s", type(self._state).__name__)
        self._set_state(Closed())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _open(self, new_state: ModalState) -> None:
        if not isinstance(self._state, Closed):
            raise InvalidTransitionError(
                f"Cannot open {type(new_state).__name__} while {type(self._state).__name__} is open"
            )
        self._set_state(new_state)

    def _set_state(self, new_state: ModalState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
