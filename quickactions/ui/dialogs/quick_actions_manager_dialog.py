# quickactions/ui/dialogs/quick_actions_manager_dialog.py

"""Dialog for managing quick actions.

Lists the store's actions as rows with edit/delete buttons, shows an
empty state when there are none, and offers Add and Reset to Defaults.
Deleting and resetting require confirmation. All mutations go through
QuickActionsController to the store; the list re-renders from store
notifications.
"""

from __future__ import annotations

__all__ = ["QuickActionsManagerDialog"]

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quickactions.config import config
from quickactions.core.quick_action import QuickAction, default_quick_actions
from quickactions.ui.dialogs.quick_action_editor_dialog import QuickActionEditorDialog
from quickactions.ui.modal_state import (
    Adding,
    Closed,
    ConfirmingDelete,
    ConfirmingReset,
    Editing,
    ModalState,
    QuickActionsController,
)
from quickactions.ui.theme import Theme
from quickactions.ui.widgets.base_dialog import BaseDialog
from quickactions.ui.widgets.quick_action_row import QuickActionRow
from quickactions.ui.widgets.ui_helper import UIHelper
from quickactions.utils.i18n import t

if TYPE_CHECKING:
    from quickactions.core.quick_action_store import QuickActionStore

logger = logging.getLogger("quickactions.quick_actions_manager_dialog")

# Stacked content pages
_PAGE_EMPTY = 0
_PAGE_LIST = 1


class QuickActionsManagerDialog(BaseDialog):
    """Modal list of quick actions with add, edit, delete and reset.

    Attributes:
        store: The store being managed.
        controller: Modal state machine that gates every mutation.
        rows: Row widgets currently shown, in display order.
    """

    def __init__(
        self,
        parent: QWidget | None,
        store: QuickActionStore,
        on_dismiss: Callable[[], object] | None = None,
    ) -> None:
        """Initializes the manager dialog.

        Args:
            parent: Parent widget.
            store: Store holding the actions; the dialog subscribes to it
                until it is closed.
            on_dismiss: Called once when the dialog closes.
        """
        self.store = store
        self.controller = QuickActionsController(store)
        self.rows: list[QuickActionRow] = []
        self._on_dismiss = on_dismiss
        self._unsubscribe: Callable[[], None] | None = None

        super().__init__(
            parent,
            title_key="ui.quick_actions.title",
            min_width=config.DIALOG_WIDTH,
            show_title_label=False,
        )
        self.resize(config.DIALOG_WIDTH, config.DIALOG_HEIGHT)

        self._unsubscribe = store.subscribe(self._refresh_list)
        self._refresh_list(store.sorted_actions())

    def _build_content(self, layout: QVBoxLayout) -> None:
        """Builds header, stacked empty/list content, and footer."""
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header
        self.header_bar = self._bar()
        header = QHBoxLayout(self.header_bar)
        header.setContentsMargins(16, 12, 16, 12)
        self.header_label = QLabel(self.display_title)
        font = self.header_label.font()
        font.setBold(True)
        self.header_label.setFont(font)
        header.addWidget(self.header_label)
        header.addStretch()

        self.done_button = QPushButton(t("common.done"))
        self.done_button.setStyleSheet(Theme.button_flat(Theme.ACCENT))
        self.done_button.clicked.connect(self.accept)
        header.addWidget(self.done_button)
        layout.addWidget(self.header_bar)
        layout.addWidget(self._separator())

        # Content
        self.stack = QStackedWidget()
        self.stack.insertWidget(_PAGE_EMPTY, self._build_empty_state())

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self._rows_container = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_container)
        self._rows_layout.setContentsMargins(16, 16, 16, 16)
        self._rows_layout.setSpacing(8)
        self._rows_layout.addStretch()
        self.scroll_area.setWidget(self._rows_container)
        self.stack.insertWidget(_PAGE_LIST, self.scroll_area)

        layout.addWidget(self.stack, stretch=1)
        layout.addWidget(self._separator())

        # Footer
        self.footer_bar = self._bar()
        footer = QHBoxLayout(self.footer_bar)
        footer.setContentsMargins(16, 12, 16, 12)

        self.reset_button = QPushButton(f"{t('emoji.reset')} {t('ui.quick_actions.reset')}")
        self.reset_button.setStyleSheet(Theme.button_flat(Theme.TEXT_MUTED))
        self.reset_button.clicked.connect(self._on_reset_clicked)
        footer.addWidget(self.reset_button)

        footer.addStretch()

        self.add_button = QPushButton(f"{t('emoji.plus')} {t('ui.quick_actions.add')}")
        self.add_button.setStyleSheet(Theme.button_primary())
        self.add_button.clicked.connect(self._on_add_clicked)
        footer.addWidget(self.add_button)
        layout.addWidget(self.footer_bar)

    def _build_empty_state(self) -> QWidget:
        page = QWidget()
        page_layout = QVBoxLayout(page)
        page_layout.setSpacing(12)
        page_layout.addStretch()

        icon = QLabel(t("emoji.bolt"))
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon.setStyleSheet(f"color: {Theme.TEXT_MUTED}; font-size: 40px;")
        page_layout.addWidget(icon)

        self.empty_title_label = QLabel(t("ui.quick_actions.empty_title"))
        self.empty_title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_title_label.setStyleSheet(Theme.STYLE_EMPTY_TITLE)
        page_layout.addWidget(self.empty_title_label)

        hint = QLabel(t("ui.quick_actions.empty_hint"))
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        hint.setWordWrap(True)
        hint.setStyleSheet(Theme.STYLE_HINT)
        page_layout.addWidget(hint)

        page_layout.addStretch()
        return page

    @staticmethod
    def _bar() -> QFrame:
        bar = QFrame()
        bar.setObjectName("quickActionsBar")
        bar.setStyleSheet(Theme.bar())
        return bar

    @staticmethod
    def _separator() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setStyleSheet(f"color: {Theme.BORDER};")
        return line

    # ------------------------------------------------------------------
    # List rendering
    # ------------------------------------------------------------------

    @property
    def is_showing_empty_state(self) -> bool:
        """True while the empty-state placeholder is displayed."""
        return self.stack.currentIndex() == _PAGE_EMPTY

    def _refresh_list(self, actions: list[QuickAction]) -> None:
        """Rebuilds one row per action, or shows the empty state."""
        for row in self.rows:
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []

        for action in actions:
            row = QuickActionRow(action)
            row.edit_requested.connect(self._on_edit_requested)
            row.delete_requested.connect(self._on_delete_requested)
            # Keep the trailing stretch last
            self._rows_layout.insertWidget(self._rows_layout.count() - 1, row)
            self.rows.append(row)

        self.stack.setCurrentIndex(_PAGE_LIST if actions else _PAGE_EMPTY)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def _on_add_clicked(self) -> None:
        self.controller.request_add()
        self._render_modal(self.controller.state)

    def _on_reset_clicked(self) -> None:
        self.controller.request_reset()
        self._render_modal(self.controller.state)

    def _on_edit_requested(self, action: QuickAction) -> None:
        self.controller.request_edit(action)
        self._render_modal(self.controller.state)

    def _on_delete_requested(self, action: QuickAction) -> None:
        self.controller.request_delete(action)
        self._render_modal(self.controller.state)

    def _render_modal(self, state: ModalState) -> None:
        """Presents the modal that corresponds to ``state``.

        Editors report back through the controller's submit/cancel;
        confirmations through confirm/cancel.
        """
        if isinstance(state, Closed):
            return

        if isinstance(state, (Adding, Editing)):
            editor = QuickActionEditorDialog(
                self,
                action=state.action if isinstance(state, Editing) else None,
                on_save=self.controller.submit,
                on_cancel=self.controller.cancel,
            )
            editor.exec()
            # Closed without either callback firing (e.g. parent torn down)
            if not isinstance(self.controller.state, Closed):
                self.controller.cancel()
            return

        if isinstance(state, ConfirmingDelete):
            confirmed = UIHelper.confirm(
                self,
                t("ui.quick_actions.delete_confirm", name=state.action.name),
                title=t("ui.quick_actions.delete_title"),
                confirm_text=t("common.delete"),
                destructive=True,
            )
        elif isinstance(state, ConfirmingReset):
            defaults = ", ".join(a.name for a in default_quick_actions())
            confirmed = UIHelper.confirm(
                self,
                t("ui.quick_actions.reset_confirm", defaults=defaults),
                title=t("ui.quick_actions.reset_title"),
                confirm_text=t("common.reset"),
                destructive=True,
            )
        else:
            raise TypeError(f"Unknown modal state {state!r}")

        if confirmed:
            self.controller.confirm()
        else:
            self.controller.cancel()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def done(self, result: int) -> None:
        """Unsubscribes from the store and notifies the dismiss callback."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            if self._on_dismiss is not None:
                self._on_dismiss()
        super().done(result)
