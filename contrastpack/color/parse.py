"""Parse stylesheet color literals into Color values."""

from __future__ import annotations

import re

from .model import Color, InvalidColor

# Core CSS named colors (the ones blog themes actually reach for)
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "aqua": (0, 255, 255),
    "magenta": (255, 0, 255),
    "fuchsia": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
    "silver": (192, 192, 192),
    "maroon": (128, 0, 0),
    "olive": (128, 128, 0),
    "lime": (0, 255, 0),
    "purple": (128, 0, 128),
    "teal": (0, 128, 128),
    "navy": (0, 0, 128),
    "orange": (255, 165, 0),
    "rebeccapurple": (102, 51, 153),
    "whitesmoke": (245, 245, 245),
    "gainsboro": (220, 220, 220),
    "lightgray": (211, 211, 211),
    "darkgray": (169, 169, 169),
    "dimgray": (105, 105, 105),
    "slategray": (112, 128, 144),
}

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\((.*)\)$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)(%|deg)?$")


def parse_color(value: Color | str) -> Color:
    """Parse a CSS color literal.

    Accepts hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba(), hsl()/hsla()
    with comma or space separators, and a subset of named colors.

    Args:
        value: Color literal, or an existing Color (returned unchanged)

    Returns:
        Parsed Color

    Raises:
        InvalidColor: If the literal is malformed or out of range
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise InvalidColor(f"Color literal must be a string, got {type(value).__name__}")

    literal = value
    text = value.strip().lower()
    if not text:
        raise InvalidColor("Empty color literal", literal=literal)

    try:
        if text == "transparent":
            return Color(hue=0.0, saturation=0.0, lightness=0.0, alpha=0.0)
        if text in NAMED_COLORS:
            return Color.from_rgb(*NAMED_COLORS[text])
        if text.startswith("#"):
            return _parse_hex(text)
        m = _FUNC_RE.match(text)
        if m:
            return _parse_function(m.group(1), m.group(2))
    except InvalidColor as e:
        raise InvalidColor(f"Invalid color {literal!r}: {e}", literal=literal) from e

    raise InvalidColor(f"Invalid color {literal!r}: unrecognized syntax", literal=literal)


def _parse_hex(text: str) -> Color:
    if not _HEX_RE.match(text):
        raise InvalidColor("hex colors need 3, 4, 6 or 8 hex digits")
    digits = text[1:]
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return Color.from_rgb(r, g, b, alpha=alpha)


def _parse_function(name: str, body: str) -> Color:
    args = _split_args(body)
    if len(args) not in (3, 4):
        raise InvalidColor(f"{name}() takes 3 or 4 arguments, got {len(args)}")

    alpha = _alpha(args[3]) if len(args) == 4 else 1.0

    if name.startswith("rgb"):
        channels = [_rgb_channel(a) for a in args[:3]]
        return Color.from_rgb(*channels, alpha=alpha)

    hue = _number(args[0], allowed=("", "deg")) % 360.0
    saturation = _percent(args[1])
    lightness = _percent(args[2])
    return Color(hue=hue, saturation=saturation, lightness=lightness, alpha=alpha)


def _split_args(body: str) -> list[str]:
    body = body.strip()
    if "," in body:
        return [a.strip() for a in body.split(",")]
    # Space syntax: "r g b / a"
    if "/" in body:
        head, _, tail = body.partition("/")
        return head.split() + [tail.strip()]
    return body.split()


def _number(token: str, allowed: tuple[str, ...]) -> float:
    m = _NUMBER_RE.match(token)
    if not m:
        raise InvalidColor(f"expected a number, got {token!r}")
    unit = m.group(3) or ""
    if unit not in allowed:
        raise InvalidColor(f"unexpected unit in {token!r}")
    return float(token[: len(token) - len(unit)])


def _rgb_channel(token: str) -> float:
    if token.endswith("%"):
        return _number(token, allowed=("%",)) * 255.0 / 100.0
    return _number(token, allowed=("",))


def _percent(token: str) -> float:
    # Sass accepts unitless saturation/lightness as percentages
    return _number(token, allowed=("%", ""))


def _alpha(token: str) -> float:
    if token.endswith("%"):
        return _number(token, allowed=("%",)) / 100.0
    return _number(token, allowed=("",))
