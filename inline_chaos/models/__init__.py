"""Page models for the inline CSS demonstration."""

from .inline_css import (
    MAX_ITEMS,
    InlineCssItem,
    InlineCssModel,
    build_inline_css_model,
)

__all__ = [
    "MAX_ITEMS",
    "InlineCssItem",
    "InlineCssModel",
    "build_inline_css_model",
]
