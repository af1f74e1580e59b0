"""Styling module for the risk assessment client."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
