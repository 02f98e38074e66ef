"""Write stylesheets and preview pages for resolved themes."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from ..theme.model import ResolvedTheme
from .styles import render_section_css, render_stylesheet
from .templates import contrast_table, html_doc, section_block


def write_stylesheet(theme: ResolvedTheme, path: Path) -> Path:
    """Write the theme stylesheet to `path`, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_stylesheet(theme), encoding="utf-8")
    return path


def build_preview(theme: ResolvedTheme, out_dir: Path, title: str = "Theme preview") -> dict[str, Any]:
    """Build a single-page HTML preview of every section in a theme.

    Section rules are re-scoped to element ids on the page, since the theme's
    own selectors target the real site markup.
    """
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    styles: list[str] = []
    body: list[str] = []
    used: set[str] = set()
    for section in theme.sections:
        element_id = _element_id(section.name, used)
        scoped = section.model_copy(update={"selector": f"#{element_id}"})
        styles.append(render_section_css(scoped))
        body.append(section_block(element_id, section))
        body.append(contrast_table(section.checks))

    html = html_doc(title=title, styles="\n".join(styles), body="\n".join(body))
    index = out_dir / "index.html"
    index.write_text(html, encoding="utf-8")

    stylesheet = write_stylesheet(theme, out_dir / "theme.css")

    return {
        "sections": len(theme.sections),
        "warnings": len(theme.warnings),
        "out_dir": str(out_dir),
        "files": [index.name, stylesheet.name],
        "total_bytes": index.stat().st_size + stylesheet.stat().st_size,
    }


def _element_id(name: str, used: set[str]) -> str:
    base = "section-" + (re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "unnamed")
    candidate = base
    n = 2
    while candidate in used:
        candidate = f"{base}-{n}"
        n += 1
    used.add(candidate)
    return candidate
