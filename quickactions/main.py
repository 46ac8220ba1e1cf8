#!/usr/bin/env python3
"""Quick Actions Manager - Main Entry Point (PyQt6 Version)."""

from __future__ import annotations

import logging
import sys
import traceback

from PyQt6.QtWidgets import QApplication

from quickactions.config import config
from quickactions.core.logging import logger, setup_logging
from quickactions.core.quick_action_store import QuickActionStore
from quickactions.ui.dialogs.quick_actions_manager_dialog import QuickActionsManagerDialog
from quickactions.ui.widgets.ui_helper import UIHelper
from quickactions.utils.i18n import init_i18n, t
from quickactions.version import __app_name__, __version__

__all__ = ["main"]


def main() -> None:
    """Opens the quick actions manager over a store seeded with the defaults.

    Flags:
        --debug: log at DEBUG level.
        --log-file: also write logs to DATA_DIR/quickactions.log.
    """
    # 1. Initialize language (BEFORE creating UI elements)
    init_i18n(config.UI_LANGUAGE)

    # 2. Setup logging
    level = logging.DEBUG if "--debug" in sys.argv else logging.INFO
    log_file = config.DATA_DIR / "quickactions.log" if "--log-file" in sys.argv else None
    setup_logging(level, log_file)

    # 3. Create QApplication
    app = QApplication(sys.argv)
    app.setApplicationName(__app_name__)

    logger.info("%s %s", __app_name__, __version__)

    try:
        store = QuickActionStore()
        dialog = QuickActionsManagerDialog(None, store)
        dialog.exec()
    except Exception as e:
        logger.critical("%s: %s", t("common.error"), e)
        traceback.print_exc()
        UIHelper.show_error(None, t("ui.main.startup_error", error=e))
        sys.exit(1)

    logger.info("Closed with %d quick actions", len(store))
    app.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
