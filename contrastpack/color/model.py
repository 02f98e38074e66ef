"""Immutable HSL color value."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass


class InvalidColor(ValueError):
    """Raised when a color literal or channel value cannot form a valid color."""

    def __init__(self, message: str, literal: str | None = None):
        super().__init__(message)
        self.literal = literal


@dataclass(frozen=True)
class Color:
    """A color stored as HSL channels plus alpha.

    Hue is in degrees [0, 360), saturation and lightness are percentages
    [0, 100], alpha is [0, 1]. Lightness is kept exactly as given so that
    adjustments are exact in percentage points.
    """

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name, value, low, high in (
            ("hue", self.hue, 0.0, 360.0),
            ("saturation", self.saturation, 0.0, 100.0),
            ("lightness", self.lightness, 0.0, 100.0),
            ("alpha", self.alpha, 0.0, 1.0),
        ):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidColor(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidColor(f"{name} must be finite, got {value!r}")
            if value < low or value > high:
                raise InvalidColor(f"{name} {value!r} outside [{low:g}, {high:g}]")
        # 360 and 0 are the same hue
        if self.hue == 360.0:
            object.__setattr__(self, "hue", 0.0)

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a color from 0-255 RGB channels."""
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidColor(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0 or value > 255:
                raise InvalidColor(f"{name} {value!r} outside [0, 255]")
        h, l, s = colorsys.rgb_to_hls(red / 255.0, green / 255.0, blue / 255.0)
        return cls(hue=h * 360.0, saturation=s * 100.0, lightness=l * 100.0, alpha=alpha)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """Unrounded RGB channels on a 0-255 scale."""
        r, g, b = colorsys.hls_to_rgb(self.hue / 360.0, self.lightness / 100.0, self.saturation / 100.0)
        return r * 255.0, g * 255.0, b * 255.0

    @property
    def red(self) -> int:
        return _channel(self.rgb[0])

    @property
    def green(self) -> int:
        return _channel(self.rgb[1])

    @property
    def blue(self) -> int:
        return _channel(self.rgb[2])

    def adjust(
        self,
        lightness: float = 0.0,
        saturation: float = 0.0,
        hue: float = 0.0,
        alpha: float = 0.0,
    ) -> Color:
        """Return a new color with channels shifted by signed amounts.

        Lightness and saturation clamp to [0, 100], alpha to [0, 1] and hue
        wraps around the circle.
        """
        for name, delta in (
            ("lightness", lightness),
            ("saturation", saturation),
            ("hue", hue),
            ("alpha", alpha),
        ):
            if not math.isfinite(delta):
                raise InvalidColor(f"{name} adjustment must be finite, got {delta!r}")

        return Color(
            hue=(self.hue + hue) % 360.0,
            saturation=_clamp(self.saturation + saturation, 0.0, 100.0),
            lightness=_clamp(self.lightness + lightness, 0.0, 100.0),
            alpha=_clamp(self.alpha + alpha, 0.0, 1.0),
        )

    def to_hex(self) -> str:
        """Hex form; includes an alpha byte only when not fully opaque."""
        out = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.alpha < 1.0:
            out += f"{_channel(self.alpha * 255.0):02x}"
        return out

    def to_css(self) -> str:
        if self.alpha < 1.0:
            return f"rgba({self.red}, {self.green}, {self.blue}, {_fmt(self.alpha)})"
        return self.to_hex()

    def __str__(self) -> str:
        return self.to_css()


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def _channel(value: float) -> int:
    return int(_clamp(round(value), 0, 255))


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


BLACK = Color(hue=0.0, saturation=0.0, lightness=0.0)
WHITE = Color(hue=0.0, saturation=0.0, lightness=100.0)
