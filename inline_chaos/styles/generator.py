"""Generator for deliberately awful inline styles.

Every value comes from a fixed palette or a fixed integer range; the only
state involved is the random source.
"""
import random
from typing import Optional, Tuple

COLORS: Tuple[str, ...] = (
    "#FF00FF", "#00FFFF", "#FFFF00", "#FF0000", "#00FF00",
    "#0000FF", "#FF6600", "#6600FF", "#00FF66", "hotpink",
    "limegreen", "deeppink", "chartreuse", "aquamarine",
)

FONTS: Tuple[str, ...] = (
    "Comic Sans MS", "Papyrus", "Curlz MT", "Jokerman",
    "Wingdings", "Impact", "Bradley Hand", "Chiller",
)

# Inclusive ranges
FONT_SIZE_RANGE = (8, 72)
ROTATION_RANGE = (-30, 30)
BORDER_WIDTH_RANGE = (1, 10)
PADDING_RANGE = (5, 30)
MARGIN_RANGE = (5, 20)

IMPORTANT = "!important;"

_shared_random = random.Random()


class StyleGenerator:
    """Produces random colors, fonts and composed style declarations."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source to draw from (default: a process-wide shared one)
        """
        self.rng = rng or _shared_random

    def random_color(self) -> str:
        return self.rng.choice(COLORS)

    def random_font(self) -> str:
        return self.rng.choice(FONTS)

    def random_in(self, bounds: Tuple[int, int]) -> int:
        low, high = bounds
        return self.rng.randint(low, high)

    def chaos_style(self) -> str:
        """Compose one inline style string with every declaration forced."""
        return (
            f"color: {self.random_color()}; "
            f"background-color: {self.random_color()}; "
            f"font-family: '{self.random_font()}', cursive; "
            f"font-size: {self.random_in(FONT_SIZE_RANGE)}px; "
            f"transform: rotate({self.random_in(ROTATION_RANGE)}deg); "
            f"text-shadow: 2px 2px {self.random_color()}; "
            f"border: {self.random_in(BORDER_WIDTH_RANGE)}px dashed {self.random_color()}; "
            f"padding: {self.random_in(PADDING_RANGE)}px; "
            f"margin: {self.random_in(MARGIN_RANGE)}px; "
            f"{IMPORTANT}"
        )


default_generator = StyleGenerator()


def random_color() -> str:
    return default_generator.random_color()


def random_font() -> str:
    return default_generator.random_font()


def chaos_style() -> str:
    return default_generator.chaos_style()
