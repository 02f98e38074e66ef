"""WCAG 2.x relative luminance and contrast ratio."""

from .model import Color


def _linearize(channel: float) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Relative luminance in [0, 1]; alpha is ignored."""
    r, g, b = (_linearize(c) for c in color.rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: Color, b: Color) -> float:
    """Contrast ratio between two colors, from 1.0 to 21.0."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)
