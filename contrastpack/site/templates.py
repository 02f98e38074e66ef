"""HTML templates for the theme preview page."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from ..theme.model import ContrastCheck, ResolvedSection
from .styles import PREVIEW_CSS


def html_doc(title: str, styles: str, body: str) -> str:
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{PREVIEW_CSS}\n{styles}</style>\n"
        "</head>\n"
        "<body>\n"
        f"<header><h1>{escape(title)}</h1></header>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def swatch(css_color: str) -> str:
    return f'<span class="swatch" style="background: {escape(css_color, quote=True)}"></span>'


def contrast_table(checks: Iterable[ContrastCheck]) -> str:
    lines = [
        "<table>",
        "<thead><tr><th>Pair</th><th>Colors</th><th>Ratio</th><th>AA</th><th>AA large</th></tr></thead>",
        "<tbody>",
    ]
    for c in checks:
        normal = "PASS" if c.aa_normal else "FAIL"
        large = "PASS" if c.aa_large else "FAIL"
        lines.append(
            "<tr>"
            f"<td>{escape(c.label)}</td>"
            f"<td>{swatch(c.foreground)} {escape(c.foreground)} on "
            f"{swatch(c.background)} {escape(c.background)}</td>"
            f"<td>{c.ratio:.2f}</td>"
            f'<td class="{normal.lower()}">{normal}</td>'
            f'<td class="{large.lower()}">{large}</td>'
            "</tr>"
        )
    lines.extend(["</tbody>", "</table>"])
    return "\n".join(lines)


def section_block(element_id: str, section: ResolvedSection) -> str:
    """Sample content for one section, styled by its generated rules."""
    return "\n".join(
        [
            f'<section id="{escape(element_id, quote=True)}">',
            f"<h2>{escape(section.name)}</h2>",
            f'<p class="label">{escape(section.selector)} · background {escape(section.background)}</p>',
            "<p>Body text on this background, with "
            '<a href="#">a sample link</a> for the anchor color.</p>',
            "<figcaption>Figure caption in the header text color.</figcaption>",
            "</section>",
        ]
    )
