"""Base class for the quick actions dialogs.

Sets up the window title, modality and an optional bold header label.
Subclasses build everything else, including their own button rows, in
_build_content().
"""

from __future__ import annotations

from PyQt6.QtWidgets import QDialog, QLabel, QVBoxLayout, QWidget

from quickactions.utils.i18n import t

__all__ = ["BaseDialog"]


class BaseDialog(QDialog):
    """Modal dialog with an optional title label above subclass content."""

    def __init__(
        self,
        parent: QWidget | None = None,
        title_key: str = "",
        title_text: str = "",
        min_width: int = 420,
        show_title_label: bool = True,
    ) -> None:
        """Initializes the base dialog.

        Args:
            parent: Parent widget.
            title_key: i18n key for the window title (and header label).
            title_text: Pre-formatted title string (takes precedence over title_key).
            min_width: Minimum dialog width in pixels.
            show_title_label: Whether to display a bold title label at top.
        """
        super().__init__(parent)
        self.display_title = title_text or (t(title_key) if title_key else "")
        if self.display_title:
            self.setWindowTitle(self.display_title)
        self.setMinimumWidth(min_width)
        self.setModal(True)

        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(12)

        if show_title_label and self.display_title:
            self.title_label = QLabel(self.display_title)
            font = self.title_label.font()
            font.setPointSize(14)
            font.setBold(True)
            self.title_label.setFont(font)
            self._layout.addWidget(self.title_label)

        self._build_content(self._layout)

    def _build_content(self, layout: QVBoxLayout) -> None:
        """Override this to add dialog-specific content and buttons.

        Args:
            layout: The main vertical layout to add widgets to.
        """
