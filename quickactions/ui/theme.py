"""Centralized theme constants and style factory.

Two-layer color system:
  Layer 1 (Palette): Raw color hex values — what the color IS.
  Layer 2 (Semantic): Purpose-based aliases — what the color MEANS.

Quick action accent colors are looked up by ActionColor through
``Theme.action_color``.
"""

from __future__ import annotations

from quickactions.core.quick_action import ActionColor

__all__ = ["Theme"]


class Theme:
    """Central color and style definitions for the application."""

    # ══════════════════════════════════════════════════════
    # LAYER 1: PALETTE — Raw colors (What IS it?)
    # ══════════════════════════════════════════════════════

    WINDOW_DARK = "#1e1e1e"
    CONTROL_DARK = "#2b2b2b"

    GRAY_BORDER = "#3d3d3d"
    GRAY_MUTED = "#8e8e93"

    BLUE = "#0a84ff"
    BLUE_LIGHT = "#409cff"
    GREEN = "#30d158"
    ORANGE = "#ff9f0a"
    RED = "#ff453a"
    PURPLE = "#bf5af2"
    PINK = "#ff375f"
    YELLOW = "#ffd60a"
    GRAY = "#98989d"

    TEXT_LIGHT = "#e5e5e7"
    TEXT_WHITE = "#ffffff"

    # ══════════════════════════════════════════════════════
    # LAYER 2: SEMANTIC — Purpose-based aliases (What MEANS it?)
    # ══════════════════════════════════════════════════════

    BG_WINDOW = WINDOW_DARK
    BG_ROW = CONTROL_DARK
    BORDER = GRAY_BORDER

    ACCENT = BLUE
    ACCENT_HOVER = BLUE_LIGHT
    DANGER = RED

    TEXT_PRIMARY = TEXT_LIGHT
    TEXT_MUTED = GRAY_MUTED

    ACTION_COLORS: dict[ActionColor, str] = {
        ActionColor.BLUE: BLUE,
        ActionColor.GREEN: GREEN,
        ActionColor.ORANGE: ORANGE,
        ActionColor.RED: RED,
        ActionColor.PURPLE: PURPLE,
        ActionColor.PINK: PINK,
        ActionColor.YELLOW: YELLOW,
        ActionColor.GRAY: GRAY,
    }

    @staticmethod
    def action_color(color: ActionColor) -> str:
        """Hex value for a quick action accent color.

        Args:
            color: The action's color.

        Returns:
            Hex color string, the accent color for unmapped values.
        """
        return Theme.ACTION_COLORS.get(color, Theme.ACCENT)

    # ══════════════════════════════════════════════════════
    # STYLE FACTORIES — Reusable stylesheet generators
    # ══════════════════════════════════════════════════════

    @staticmethod
    def button_primary() -> str:
        """Stylesheet for the primary (Add) button.

        Returns:
            CSS stylesheet string for QPushButton.
        """
        return f"""
            QPushButton {{ background-color: {Theme.ACCENT}; color: {Theme.TEXT_WHITE};
                          padding: 6px 14px; border-radius: 5px; }}
            QPushButton:hover {{ background-color: {Theme.ACCENT_HOVER}; }}
        """

    @staticmethod
    def button_flat(color: str) -> str:
        """Stylesheet for borderless text/icon buttons.

        Args:
            color: Text color for the button.

        Returns:
            CSS stylesheet string for QPushButton.
        """
        return f"""
            QPushButton {{ border: none; background: transparent; color: {color}; padding: 2px 6px; }}
            QPushButton:hover {{ color: {Theme.TEXT_PRIMARY}; }}
        """

    @staticmethod
    def action_row() -> str:
        """Stylesheet for a quick action row card.

        Returns:
            CSS stylesheet string for the row QFrame.
        """
        return f"""
            QFrame#quickActionRow {{ background-color: {Theme.BG_ROW}; border-radius: 8px; }}
        """

    @staticmethod
    def bar() -> str:
        """Stylesheet for the manager's header and footer bars.

        Returns:
            CSS stylesheet string for the bar QFrame.
        """
        return f"QFrame#quickActionsBar {{ background-color: {Theme.BG_WINDOW}; }}"

    STYLE_HINT = f"color: {GRAY_MUTED};"
    STYLE_ROW_TITLE = "font-weight: 500;"
    STYLE_EMPTY_TITLE = f"color: {GRAY_MUTED}; font-size: 14px; font-weight: bold;"
