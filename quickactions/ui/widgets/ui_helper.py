# quickactions/ui/widgets/ui_helper.py

"""
Static helpers for standardized message boxes.

Centralizes QMessageBox handling so titles and button labels always go
through the i18n layer.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMessageBox, QWidget

from quickactions.utils.i18n import t
from quickactions.version import __app_name__

__all__ = ["UIHelper"]


class UIHelper:
    """A static helper class for common UI dialog interactions."""

    @staticmethod
    def show_error(parent: QWidget | None, message: str, title: str | None = None) -> None:
        """Displays a critical error message box with a localized OK button.

        Args:
            parent: The parent widget for the dialog.
            message: The main error message to display.
            title: The title for the dialog window. Defaults to common 'Error'.
        """
        msg = QMessageBox(parent)
        msg.setWindowTitle(title or t("common.error"))
        msg.setTextFormat(Qt.TextFormat.PlainText)
        msg.setText(message)
        msg.setIcon(QMessageBox.Icon.Critical)
        msg.addButton(t("common.ok"), QMessageBox.ButtonRole.AcceptRole)
        msg.exec()

    @staticmethod
    def confirm(
        parent: QWidget | None,
        question: str,
        title: str | None = None,
        confirm_text: str | None = None,
        destructive: bool = False,
    ) -> bool:
        """Displays a confirmation dialog with localized button texts.

        Uses addButton() instead of StandardButtons because Qt6 on Linux does
        not translate StandardButton labels without .qm translation files.

        Args:
            parent: The parent widget for the dialog.
            question: The question to ask the user.
            title: The title bar text. Defaults to the app title.
            confirm_text: Label of the accepting button. Defaults to common 'Yes'.
            destructive: Marks the accepting button as destructive; Cancel
                becomes the default button.

        Returns:
            True if the user clicked the accepting button, False otherwise.
        """
        msg = QMessageBox(parent)
        msg.setWindowTitle(title or __app_name__)
        msg.setTextFormat(Qt.TextFormat.PlainText)
        msg.setText(question)
        msg.setIcon(QMessageBox.Icon.Warning if destructive else QMessageBox.Icon.Question)

        if destructive:
            cancel_btn = msg.addButton(t("common.cancel"), QMessageBox.ButtonRole.RejectRole)
            accept_btn = msg.addButton(confirm_text or t("common.yes"), QMessageBox.ButtonRole.DestructiveRole)
            msg.setDefaultButton(cancel_btn)
        else:
            accept_btn = msg.addButton(confirm_text or t("common.yes"), QMessageBox.ButtonRole.YesRole)
            msg.addButton(t("common.no"), QMessageBox.ButtonRole.NoRole)
            msg.setDefaultButton(accept_btn)

        msg.exec()
        return msg.clickedButton() == accept_btn
