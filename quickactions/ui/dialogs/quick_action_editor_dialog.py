# quickactions/ui/dialogs/quick_action_editor_dialog.py

"""Editor dialog for creating or editing a single quick action.

The dialog never touches the store: it hands a QuickActionDraft to its
save callback, or calls its cancel callback when dismissed.
"""

from __future__ import annotations

__all__ = ["QuickActionEditorDialog"]

import logging
from collections.abc import Callable

from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quickactions.core.quick_action import DEFAULT_ICON, ActionColor, QuickAction, QuickActionDraft
from quickactions.ui.theme import Theme
from quickactions.ui.widgets.base_dialog import BaseDialog
from quickactions.utils.i18n import t

logger = logging.getLogger("quickactions.quick_action_editor_dialog")


class QuickActionEditorDialog(BaseDialog):
    """Form for the name, prompt, icon and color of a quick action.

    Opens in create mode when ``action`` is None, otherwise in edit mode
    with the action's values filled in.

    Attributes:
        action: The action being edited, or None in create mode.
        result_draft: The saved draft, set once Save is clicked.
    """

    def __init__(
        self,
        parent: QWidget | None,
        action: QuickAction | None = None,
        on_save: Callable[[QuickActionDraft], object] | None = None,
        on_cancel: Callable[[], object] | None = None,
    ) -> None:
        """Initializes the editor.

        Args:
            parent: Parent widget.
            action: Existing action to edit, or None to create a new one.
            on_save: Called with the draft when the user saves.
            on_cancel: Called when the user cancels or closes the dialog.
        """
        self.action = action
        self.result_draft: QuickActionDraft | None = None
        self._on_save = on_save
        self._on_cancel = on_cancel

        title_key = "ui.quick_actions.editor.edit_title" if action else "ui.quick_actions.editor.new_title"
        super().__init__(parent, title_key=title_key, min_width=400)
        self._populate_fields()

    @property
    def is_edit_mode(self) -> bool:
        """True when editing an existing action."""
        return self.action is not None

    def _build_content(self, layout: QVBoxLayout) -> None:
        """Adds the form and the Cancel/Save row."""
        form = QFormLayout()

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText(t("ui.quick_actions.editor.name_placeholder"))
        form.addRow(t("ui.quick_actions.editor.name_label"), self.name_edit)

        self.prompt_edit = QPlainTextEdit()
        self.prompt_edit.setPlaceholderText(t("ui.quick_actions.editor.prompt_placeholder"))
        self.prompt_edit.setMinimumHeight(90)
        form.addRow(t("ui.quick_actions.editor.prompt_label"), self.prompt_edit)

        self.icon_edit = QLineEdit()
        self.icon_edit.setPlaceholderText(DEFAULT_ICON)
        form.addRow(t("ui.quick_actions.editor.icon_label"), self.icon_edit)

        icon_help = QLabel(t("ui.quick_actions.editor.icon_help"))
        icon_help.setStyleSheet(Theme.STYLE_HINT)
        form.addRow("", icon_help)

        self.color_combo = QComboBox()
        for color in ActionColor:
            self.color_combo.addItem(t(f"ui.quick_actions.colors.{color.value}"), color)
        form.addRow(t("ui.quick_actions.editor.color_label"), self.color_combo)

        layout.addLayout(form)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()

        self.cancel_button = QPushButton(t("common.cancel"))
        self.cancel_button.clicked.connect(self.reject)
        btn_layout.addWidget(self.cancel_button)

        self.save_button = QPushButton(t("common.save"))
        self.save_button.setDefault(True)
        self.save_button.setStyleSheet(Theme.button_primary())
        self.save_button.clicked.connect(self._save)
        btn_layout.addWidget(self.save_button)

        layout.addLayout(btn_layout)

        self.name_edit.textChanged.connect(self._update_save_enabled)

    def _populate_fields(self) -> None:
        if self.action is not None:
            self.name_edit.setText(self.action.name)
            self.prompt_edit.setPlainText(self.action.prompt)
            self.icon_edit.setText(self.action.icon)
            self.color_combo.setCurrentIndex(list(ActionColor).index(self.action.color))
        self._update_save_enabled()

    def _update_save_enabled(self) -> None:
        self.save_button.setEnabled(bool(self.name_edit.text().strip()))

    def get_draft(self) -> QuickActionDraft:
        """Builds a draft from the current field values.

        The name is stripped and a blank icon falls back to the default icon.
        """
        color = self.color_combo.currentData()
        return QuickActionDraft(
            name=self.name_edit.text().strip(),
            prompt=self.prompt_edit.toPlainText(),
            icon=self.icon_edit.text().strip() or DEFAULT_ICON,
            color=color if isinstance(color, ActionColor) else ActionColor.BLUE,
        )

    def _save(self) -> None:
        """Accepts the dialog and forwards the draft to the save callback."""
        draft = self.get_draft()
        if not draft.name:
            return

        self.result_draft = draft
        self.accept()
        if self._on_save is not None:
            self._on_save(draft)

    def reject(self) -> None:
        """Closes without saving and notifies the cancel callback."""
        super().reject()
        if self._on_cancel is not None:
            self._on_cancel()
