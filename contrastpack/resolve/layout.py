"""Padding layout selection for bordered sections."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..color.model import Color
from ..config import (
    CHILD_PADDING_EM,
    CHILD_PADDING_PERCENT,
    CONTAINER_PADDING_SCALE,
    FULL_LIGHTNESS,
    PADDING_CORRECTION_DIVISOR,
)


@dataclass(frozen=True)
class Padding:
    """A `calc(<percent>% - <em>em)` padding value."""

    percent: float
    em: float

    def to_css(self) -> str:
        return f"calc({_fmt(self.percent)}% - {_fmt(self.em)}em)"


@dataclass(frozen=True)
class LayoutRule:
    """Padding for a section container and its direct children.

    Either side may be None, meaning no padding declaration is emitted.
    """

    container_padding: Padding | None
    child_padding: Padding | None


def is_white(color: Color) -> bool:
    """True only for exactly full lightness; unrelated to is_light."""
    return color.lightness == FULL_LIGHTNESS


def corrected_padding(percent: float) -> Padding:
    """Padding of `percent`% less its em correction term (percent / 5)."""
    return Padding(percent=percent, em=percent / PADDING_CORRECTION_DIVISOR)


def border_layout_for(background: Color, padding_base: float) -> LayoutRule:
    """Pick the padding layout for a section on `background`.

    A pure white section has no visible edge, so the padding moves onto its
    children. Any other background pads the container and gives the children
    a fixed inset.

    Args:
        background: Section background
        padding_base: Base padding as a percentage number (10 means 10%)

    Returns:
        LayoutRule for the section
    """
    if isinstance(padding_base, bool) or not isinstance(padding_base, (int, float)):
        raise ValueError(f"padding_base must be a number, got {padding_base!r}")
    if not math.isfinite(padding_base) or padding_base < 0:
        raise ValueError(f"padding_base must be a finite non-negative number, got {padding_base!r}")

    if is_white(background):
        return LayoutRule(container_padding=None, child_padding=corrected_padding(padding_base))

    return LayoutRule(
        container_padding=corrected_padding(padding_base * CONTAINER_PADDING_SCALE),
        child_padding=Padding(percent=CHILD_PADDING_PERCENT, em=CHILD_PADDING_EM),
    )


def _fmt(value: float) -> str:
    return f"{value:.4f}".rstrip("0").rstrip(".")
