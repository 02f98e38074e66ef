"""Contrast resolver: derived section colors from a background color.

Every operation branches on the same light/dark test of the background
(`is_light`), so a tie at exactly 50% lightness always lands on the dark side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..color.model import BLACK, WHITE, Color
from ..config import (
    BORDER_SHIFT,
    DEFAULT_PADDING_BASE,
    HEADER_TEXT_SHIFT,
    HOVER_SHIFT,
    LIGHTNESS_THRESHOLD,
    LINK_SHIFT,
)
from .layout import LayoutRule, border_layout_for


class Inherit(Enum):
    """No explicit color; the surrounding style applies."""

    INHERIT = "inherit"

    def to_css(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


INHERIT = Inherit.INHERIT


def is_light(color: Color) -> bool:
    return color.lightness > LIGHTNESS_THRESHOLD


def _shift_away(background: Color, color: Color, amount: float) -> Color:
    # Darken on light backgrounds, lighten on dark ones.
    delta = -amount if is_light(background) else amount
    return color.adjust(lightness=delta)


def foreground_for(background: Color) -> Color:
    """Black text on light backgrounds, white text on dark ones."""
    return BLACK if is_light(background) else WHITE


def border_for(background: Color) -> Color:
    return _shift_away(background, background, BORDER_SHIFT)


def hover_background_for(background: Color) -> Color:
    return _shift_away(background, background, HOVER_SHIFT)


def header_text_for(background: Color) -> Color:
    """Strong-contrast caption color derived from the background itself."""
    return _shift_away(background, background, HEADER_TEXT_SHIFT)


def link_color_for(background: Color, anchor: Color | None = None) -> Color | Inherit:
    """Link color: the anchor nudged away from the background's side.

    The direction comes from the background only; the anchor's own lightness
    never matters. Without an anchor links inherit.
    """
    if anchor is None:
        return INHERIT
    return _shift_away(background, anchor, LINK_SHIFT)


@dataclass(frozen=True)
class SectionStyles:
    background: Color
    foreground: Color
    border: Color
    hover_background: Color
    header_text: Color
    link: Color | Inherit
    layout: LayoutRule


def resolve_section(
    background: Color,
    anchor: Color | None = None,
    padding_base: float = DEFAULT_PADDING_BASE,
) -> SectionStyles:
    """Compute every derived value for one section."""
    return SectionStyles(
        background=background,
        foreground=foreground_for(background),
        border=border_for(background),
        hover_background=hover_background_for(background),
        header_text=header_text_for(background),
        link=link_color_for(background, anchor),
        layout=border_layout_for(background, padding_base),
    )
