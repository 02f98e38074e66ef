"""Color values, literal parsing and WCAG contrast math."""

from .model import BLACK, WHITE, Color, InvalidColor
from .parse import parse_color
from .wcag import contrast_ratio, relative_luminance

__all__ = [
    "Color",
    "InvalidColor",
    "BLACK",
    "WHITE",
    "parse_color",
    "contrast_ratio",
    "relative_luminance",
]
