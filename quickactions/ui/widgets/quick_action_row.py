# quickactions/ui/widgets/quick_action_row.py

"""Single row of the quick actions manager list.

Each row shows: [icon glyph] [name / prompt preview] [edit] [delete].
"""

from __future__ import annotations

import html

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quickactions.config import config
from quickactions.core.quick_action import QuickAction, prompt_preview
from quickactions.ui.theme import Theme
from quickactions.utils.i18n import t

__all__ = ["QuickActionRow", "icon_glyph"]

# Symbol name prefixes -> i18n glyph keys, longest prefix wins
_ICON_GLYPH_KEYS: dict[str, str] = {
    "play": "emoji.play",
    "stop": "emoji.stop",
    "arrow.up": "emoji.arrow_up",
    "arrow.down": "emoji.arrow_down",
    "arrow.counterclockwise": "emoji.reset",
    "hammer": "emoji.hammer",
    "ant": "emoji.bug",
    "ladybug": "emoji.bug",
    "doc": "emoji.document",
    "terminal": "emoji.terminal",
    "checkmark": "emoji.check_mark",
    "star": "emoji.star",
    "trash": "emoji.trash",
    "bolt": "emoji.bolt",
}


def icon_glyph(icon: str) -> str:
    """Maps a symbolic icon name to the glyph shown in the row.

    Args:
        icon: Symbol name such as "play.fill" or "arrow.up.circle".

    Returns:
        A text glyph; the bolt glyph for unknown names.
    """
    name = icon.lower()
    for prefix in sorted(_ICON_GLYPH_KEYS, key=len, reverse=True):
        if name == prefix or name.startswith(prefix + "."):
            return t(_ICON_GLYPH_KEYS[prefix])
    return t("emoji.bolt")


class QuickActionRow(QFrame):
    """Display-only card for one quick action.

    Attributes:
        edit_requested: Emitted with the row's action when edit is clicked.
        delete_requested: Emitted with the row's action when delete is clicked.
    """

    edit_requested = pyqtSignal(object)
    delete_requested = pyqtSignal(object)

    def __init__(self, action: QuickAction, parent: QWidget | None = None) -> None:
        """Initializes the row.

        Args:
            action: The action to display.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.action = action
        self.setObjectName("quickActionRow")
        self.setStyleSheet(Theme.action_row())
        self._create_ui()

    def _create_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(12)

        self.icon_label = QLabel(icon_glyph(self.action.icon))
        self.icon_label.setFixedSize(24, 24)
        self.icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.icon_label.setStyleSheet(f"color: {Theme.action_color(self.action.color)}; font-size: 16px;")
        layout.addWidget(self.icon_label)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(2)

        self.name_label = QLabel(self.action.name)
        self.name_label.setTextFormat(Qt.TextFormat.PlainText)
        self.name_label.setStyleSheet(Theme.STYLE_ROW_TITLE)
        text_layout.addWidget(self.name_label)

        self.prompt_label = QLabel(prompt_preview(self.action.prompt, config.PROMPT_PREVIEW_CHARS))
        self.prompt_label.setTextFormat(Qt.TextFormat.PlainText)
        self.prompt_label.setStyleSheet(Theme.STYLE_HINT)
        # Escaped rich text: markup in a prompt shows literally
        self.prompt_label.setToolTip(f'<p style="white-space: pre-wrap">{html.escape(self.action.prompt)}</p>')
        text_layout.addWidget(self.prompt_label)

        layout.addLayout(text_layout, stretch=1)

        self.edit_button = QPushButton(t("emoji.edit"))
        self.edit_button.setToolTip(t("ui.quick_actions.edit_tooltip"))
        self.edit_button.setStyleSheet(Theme.button_flat(Theme.TEXT_MUTED))
        self.edit_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.edit_button.clicked.connect(lambda: self.edit_requested.emit(self.action))
        layout.addWidget(self.edit_button)

        self.delete_button = QPushButton(t("emoji.trash"))
        self.delete_button.setToolTip(t("ui.quick_actions.delete_tooltip"))
        self.delete_button.setStyleSheet(Theme.button_flat(Theme.DANGER))
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_button.clicked.connect(lambda: self.delete_requested.emit(self.action))
        layout.addWidget(self.delete_button)
