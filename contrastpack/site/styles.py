"""CSS generation for resolved themes."""

from __future__ import annotations

from ..config import GENERATOR_VERSION
from ..theme.model import ResolvedSection, ResolvedTheme

HEADER_SELECTORS = ("h1", "h2", "h3", "figcaption")

# Page chrome for the preview page only; section colors come from the theme.
PREVIEW_CSS = r"""
:root {
  --page-max: 860px;
  --serif: Georgia, "Times New Roman", serif;
  --mono: ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
}

body {
  font-family: var(--serif);
  font-size: 17px;
  line-height: 1.6;
  max-width: var(--page-max);
  margin: 0 auto;
  padding: 2rem 1.25rem 3rem;
  background: #fdfdfd;
  color: #1a1a1a;
}

header { border-bottom: 1px solid #e3e3e3; margin-bottom: 1.5rem; }

section { border-width: 1px; border-style: solid; margin: 1.5rem 0; }

.label { font-family: var(--mono); font-size: 12px; opacity: 0.8; }

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; font-size: 14px; }
th, td { border: 1px solid #e3e3e3; padding: 0.3rem 0.5rem; text-align: left; }
td.fail { font-weight: 600; }

.swatch {
  display: inline-block;
  width: 0.9em;
  height: 0.9em;
  border: 1px solid #999;
  vertical-align: middle;
}
"""


def render_section_css(section: ResolvedSection) -> str:
    """CSS rules for one resolved section."""
    sel = section.selector
    rules: list[str] = []

    container = [
        f"background: {section.background};",
        f"color: {section.foreground};",
        f"border-color: {section.border};",
    ]
    if section.container_padding:
        container.append(f"padding: {section.container_padding};")
    rules.append(_rule(sel, container))

    rules.append(_rule(_scoped(sel, ":hover", joiner=""), [f"background: {section.hover_background};"]))
    headers = ", ".join(_scoped(sel, h) for h in HEADER_SELECTORS)
    rules.append(_rule(headers, [f"color: {section.header_text};"]))
    rules.append(_rule(_scoped(sel, "a"), [f"color: {section.link};"]))

    if section.child_padding:
        rules.append(_rule(_scoped(sel, "> *"), [f"padding: {section.child_padding};"]))

    return "\n\n".join(rules) + "\n"


def render_stylesheet(theme: ResolvedTheme) -> str:
    """Full stylesheet for a theme, sections in file order."""
    parts = [f"/* Generated by ContrastPack {GENERATOR_VERSION}. Do not edit. */\n"]
    for section in theme.sections:
        parts.append(f"/* {_comment_text(section.name)} */\n" + render_section_css(section))
    return "\n".join(parts)


def _comment_text(text: str) -> str:
    # A literal "*/" would end the comment early.
    return text.replace("*/", "* /")


def _scoped(selector: str, suffix: str, joiner: str = " ") -> str:
    # "a, .b" + "h1" -> "a h1, .b h1"
    parts = [s.strip() for s in split_selector_list(selector) if s.strip()]
    return ", ".join(f"{p}{joiner}{suffix}" for p in parts)


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas only.

    Commas inside parentheses, brackets or quoted strings belong to a single
    selector, as in `.post:not(.a, .b)` or `[title="a,b"]`.
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False

    for ch in selector:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            parts.append("".join(buf))
            buf = []
            continue
        buf.append(ch)

    parts.append("".join(buf))
    return parts


def _rule(selector: str, declarations: list[str]) -> str:
    body = "\n".join(f"  {d}" for d in declarations)
    return f"{selector} {{\n{body}\n}}"
