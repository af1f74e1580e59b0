"""Color palette supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()

    @classmethod
    def from_name(cls, name: str) -> Theme:
        """Look up a theme by case-insensitive name, e.g. "dark"."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown theme: {name!r}") from None


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1C1B1F",      # Near black
        dark="#E6E1E5"        # Near white
    )

    TEXT_SECONDARY = ThemeColors(
        light="#49454F",
        dark="#CAC4D0"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFBFE",
        dark="#1C1B1F"
    )

    CARD_BACKGROUND = ThemeColors(
        light="#F4EFF4",
        dark="#2B2930"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#CAC4D0",
        dark="#49454F"
    )

    BUTTON_PRIMARY_BG = ThemeColors(
        light="#6750A4",      # Purple
        dark="#D0BCFF"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#381E72"
    )

    BUTTON_DISABLED_BG = ThemeColors(
        light="#E7E0EC",
        dark="#49454F"
    )

    # Result card
    RESULT_CONTAINER = ThemeColors(
        light="#EADDFF",
        dark="#4F378B"
    )

    RESULT_TEXT = ThemeColors(
        light="#21005D",
        dark="#EADDFF"
    )

    ERROR_CONTAINER = ThemeColors(
        light="#F9DEDC",
        dark="#8C1D18"
    )

    ERROR_TEXT = ThemeColors(
        light="#B3261E",
        dark="#F2B8B5"
    )

    PROGRESS_CHUNK = ThemeColors(
        light="#6750A4",
        dark="#D0BCFF"
    )
