# tests/conftest.py
import os
from collections.abc import Generator

# Ensure Qt can run headless (CI runners have no display server)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication
from pytestqt.qtbot import QtBot

from quickactions.core.quick_action import ActionColor, QuickAction
from quickactions.core.quick_action_store import QuickActionStore
from quickactions.utils.i18n import init_i18n


@pytest.fixture(scope="session")
def qapp():
    """QApplication instance for all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def qtbot(qapp, request):
    """Provide qtbot fixture with automatic cleanup."""
    bot = QtBot(request)
    yield bot
    if hasattr(bot, "cleanup"):
        bot.cleanup()


@pytest.fixture(autouse=True)
def english_i18n() -> Generator[None, None, None]:
    """Pin translations to English regardless of the user's settings."""
    init_i18n("en")
    yield


@pytest.fixture
def sample_actions() -> list[QuickAction]:
    """Three actions whose sort order differs from their insertion order."""
    return [
        QuickAction(
            id="b", name="Build", prompt="Build the project", icon="hammer", color=ActionColor.ORANGE, sort_order=1
        ),
        QuickAction(
            id="t", name="Test", prompt="Run the test suite\nand report failures", icon="checkmark", sort_order=2
        ),
        QuickAction(
            id="r", name="Run App", prompt="Run the app", icon="play.fill", color=ActionColor.GREEN, sort_order=0
        ),
    ]


@pytest.fixture
def store(sample_actions) -> QuickActionStore:
    """Store seeded with ``sample_actions``."""
    return QuickActionStore(sample_actions)


@pytest.fixture
def empty_store() -> QuickActionStore:
    """Store with no actions."""
    return QuickActionStore([])
