"""Random style generation for the inline CSS page."""

from .generator import (
    COLORS,
    FONTS,
    StyleGenerator,
    chaos_style,
    random_color,
    random_font,
)

__all__ = [
    "COLORS",
    "FONTS",
    "StyleGenerator",
    "chaos_style",
    "random_color",
    "random_font",
]
