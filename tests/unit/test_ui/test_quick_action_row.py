"""Tests for QuickActionRow display and signals."""

from __future__ import annotations

from PyQt6.QtCore import Qt

from quickactions.core.quick_action import ActionColor, QuickAction
from quickactions.ui.theme import Theme
from quickactions.ui.widgets.quick_action_row import QuickActionRow, icon_glyph
from quickactions.utils.i18n import t


class TestIconGlyph:
    """Tests for symbol name -> glyph mapping (no widgets)."""

    def test_known_prefix(self) -> None:
        assert icon_glyph("play.fill") == t("emoji.play")

    def test_longest_prefix_wins(self) -> None:
        assert icon_glyph("arrow.up.circle") == t("emoji.arrow_up")
        assert icon_glyph("arrow.counterclockwise") == t("emoji.reset")

    def test_exact_name(self) -> None:
        assert icon_glyph("hammer") == t("emoji.hammer")

    def test_prefix_must_end_at_dot(self) -> None:
        assert icon_glyph("starship") == t("emoji.bolt")

    def test_unknown_falls_back_to_bolt(self) -> None:
        assert icon_glyph("sparkles") == t("emoji.bolt")


class TestQuickActionRow:
    """Tests for the row widget."""

    def _make_action(self, **overrides) -> QuickAction:
        fields = {
            "id": "a",
            "name": "Deploy",
            "prompt": "Deploy to staging\nthen run smoke tests",
            "icon": "arrow.up.circle",
            "color": ActionColor.PURPLE,
        }
        fields.update(overrides)
        return QuickAction(**fields)

    def test_shows_name_and_one_line_preview(self, qtbot) -> None:
        row = QuickActionRow(self._make_action())
        qtbot.addWidget(row)

        assert row.name_label.text() == "Deploy"
        assert row.prompt_label.text() == "Deploy to staging…"
        assert "\n" not in row.prompt_label.text()
        assert "Deploy to staging\nthen run smoke tests" in row.prompt_label.toolTip()

    def test_icon_tinted_with_action_color(self, qtbot) -> None:
        row = QuickActionRow(self._make_action())
        qtbot.addWidget(row)

        assert row.icon_label.text() == t("emoji.arrow_up")
        assert Theme.action_color(ActionColor.PURPLE) in row.icon_label.styleSheet()

    def test_markup_in_name_and_prompt_shows_literally(self, qtbot) -> None:
        row = QuickActionRow(self._make_action(name="<b>Deploy</b>", prompt="Use <i>care</i> & check"))
        qtbot.addWidget(row)

        assert row.name_label.textFormat() == Qt.TextFormat.PlainText
        assert row.prompt_label.textFormat() == Qt.TextFormat.PlainText
        assert row.name_label.text() == "<b>Deploy</b>"
        assert "&lt;i&gt;care&lt;/i&gt; &amp; check" in row.prompt_label.toolTip()
        assert "<i>" not in row.prompt_label.toolTip()

    def test_button_tooltips(self, qtbot) -> None:
        row = QuickActionRow(self._make_action())
        qtbot.addWidget(row)

        assert row.edit_button.toolTip() == "Edit action"
        assert row.delete_button.toolTip() == "Delete action"

    def test_edit_click_emits_action(self, qtbot) -> None:
        action = self._make_action()
        row = QuickActionRow(action)
        qtbot.addWidget(row)

        with qtbot.waitSignal(row.edit_requested, timeout=1000) as blocker:
            row.edit_button.click()

        assert blocker.args == [action]

    def test_delete_click_emits_action(self, qtbot) -> None:
        action = self._make_action()
        row = QuickActionRow(action)
        qtbot.addWidget(row)

        with qtbot.waitSignal(row.delete_requested, timeout=1000) as blocker:
            row.delete_button.click()

        assert blocker.args == [action]
