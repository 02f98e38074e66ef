"""Contrast resolution for section backgrounds."""

from .layout import LayoutRule, Padding, border_layout_for, is_white
from .resolver import (
    INHERIT,
    Inherit,
    SectionStyles,
    border_for,
    foreground_for,
    header_text_for,
    hover_background_for,
    is_light,
    link_color_for,
    resolve_section,
)

__all__ = [
    "INHERIT",
    "Inherit",
    "LayoutRule",
    "Padding",
    "SectionStyles",
    "is_light",
    "is_white",
    "foreground_for",
    "border_for",
    "hover_background_for",
    "header_text_for",
    "link_color_for",
    "border_layout_for",
    "resolve_section",
]
