"""Model for the inline CSS page.

The page exists to show what NOT to do: every element carries its own
inline style and its own inline click handler.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from inline_chaos.styles.generator import (
    BORDER_WIDTH_RANGE,
    FONT_SIZE_RANGE,
    ROTATION_RANGE,
    StyleGenerator,
)

MAX_ITEMS = 50
BLINK_SPEED_RANGE = (100, 2000)
PLAIN_ITEM_STYLE = "color: black; font-family: serif;"

ITEM_TEXTS = (
    "Click me",
    "No, click me",
    "Important announcement",
    "Even more important announcement",
    "Lorem ipsum, but louder",
    "Buy now",
    "Under construction",
)


class InlineCssItem(BaseModel):
    """One element on the page with its own inline style and handler."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    style: str = ""
    onclick: str = ""
    is_important: bool = False


class InlineCssModel(BaseModel):
    """Everything the inline CSS page template needs."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    content: str = ""
    items: List[InlineCssItem] = Field(default_factory=list)
    background_color: str = ""
    text_color: str = ""
    font_family: str = ""
    blink_speed: int = 0
    enable_chaos: bool = False
    marquee_text: str = ""
    font_size: int = 0
    border_style: str = ""
    rotation_degrees: int = 0


def build_inline_css_model(
    generator: Optional[StyleGenerator] = None,
    item_count: int = 5,
    enable_chaos: bool = True,
) -> InlineCssModel:
    """
    Fill an InlineCssModel with freshly generated chaos.

    Args:
        generator: Style generator to draw from (default: shared generator)
        item_count: Number of items on the page (0..MAX_ITEMS)
        enable_chaos: When False items get a plain style instead

    Returns:
        Populated InlineCssModel

    Raises:
        ValueError: If item_count is out of range
    """
    if not 0 <= item_count <= MAX_ITEMS:
        raise ValueError(f"item_count must be between 0 and {MAX_ITEMS}, got {item_count}")

    generator = generator or StyleGenerator()

    items = []
    for index in range(item_count):
        text = ITEM_TEXTS[index % len(ITEM_TEXTS)]
        items.append(
            InlineCssItem(
                text=text,
                style=generator.chaos_style() if enable_chaos else PLAIN_ITEM_STYLE,
                onclick=f"alert('You clicked item {index + 1}. Why?');",
                is_important=index % 2 == 0,
            )
        )

    return InlineCssModel(
        title="Inline CSS Hell",
        content="Every element on this page styles itself. Please do not do this.",
        items=items,
        background_color=generator.random_color(),
        text_color=generator.random_color(),
        font_family=generator.random_font(),
        blink_speed=generator.random_in(BLINK_SPEED_RANGE),
        enable_chaos=enable_chaos,
        marquee_text="Welcome to the web page your designer warned you about",
        font_size=generator.random_in(FONT_SIZE_RANGE),
        border_style=f"{generator.random_in(BORDER_WIDTH_RANGE)}px dashed {generator.random_color()}",
        rotation_degrees=generator.random_in(ROTATION_RANGE),
    )
