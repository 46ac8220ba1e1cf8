"""
UI Widgets Package.

Custom Qt widgets shared by the quick actions dialogs:
- BaseDialog: Standard modal layout with an optional header label
- UIHelper: Static helpers for localized message boxes
- QuickActionRow: Display card for one quick action
"""

from __future__ import annotations

from quickactions.ui.widgets.base_dialog import BaseDialog
from quickactions.ui.widgets.quick_action_row import QuickActionRow
from quickactions.ui.widgets.ui_helper import UIHelper

__all__ = [
    "BaseDialog",
    "QuickActionRow",
    "UIHelper",
]
