"""Resolve a theme file into concrete section styles."""

from __future__ import annotations

from ..color.model import Color, InvalidColor
from ..color.parse import parse_color
from ..color.wcag import contrast_ratio
from ..config import MIN_CONTRAST_LARGE, MIN_CONTRAST_NORMAL
from ..resolve.resolver import Inherit, SectionStyles, resolve_section
from .model import ContrastCheck, ResolvedSection, ResolvedTheme, SectionConfig, ThemeFile


def resolve_theme(theme: ThemeFile) -> ResolvedTheme:
    """Resolve every section of a theme.

    Args:
        theme: Validated theme file

    Returns:
        ResolvedTheme with CSS values, contrast checks and warnings

    Raises:
        InvalidColor: If any section holds a malformed color literal
    """
    sections: list[ResolvedSection] = []
    warnings: list[str] = []

    for config in theme.sections:
        section = resolve_config(config, theme.padding_base)
        sections.append(section)
        warnings.extend(f"{section.name}: {w}" for w in section.warnings)

    return ResolvedTheme(
        padding_base=theme.padding_base,
        sections=sections,
        warnings=warnings,
    )


def resolve_config(config: SectionConfig, padding_base: float) -> ResolvedSection:
    """Resolve a single section config."""
    background = _parse_field(config, "background", config.background)
    anchor = _parse_field(config, "anchor", config.anchor) if config.anchor is not None else None

    styles = resolve_section(background, anchor, padding_base=padding_base)
    checks = check_contrast(styles)

    warnings: list[str] = []
    if isinstance(styles.link, Inherit):
        warnings.append("No anchor color; links inherit the surrounding color")
    # Contrast math treats colors as opaque.
    if background.alpha < 1.0:
        warnings.append(
            f"Background is translucent (alpha {background.alpha:.2f}); contrast ignores what shows through"
        )
    if anchor is not None and anchor.alpha < 1.0:
        warnings.append(f"Anchor is translucent (alpha {anchor.alpha:.2f}); link contrast ignores alpha")
    for check in checks:
        if not check.aa_normal:
            warnings.append(
                f"{check.label} contrast {check.ratio:.2f} is below {MIN_CONTRAST_NORMAL}"
            )

    layout = styles.layout
    return ResolvedSection(
        name=config.name,
        selector=config.selector,
        background=styles.background.to_css(),
        foreground=styles.foreground.to_css(),
        border=styles.border.to_css(),
        hover_background=styles.hover_background.to_css(),
        header_text=styles.header_text.to_css(),
        link=styles.link.to_css(),
        container_padding=layout.container_padding.to_css() if layout.container_padding else None,
        child_padding=layout.child_padding.to_css() if layout.child_padding else None,
        checks=checks,
        warnings=warnings,
    )


def check_contrast(styles: SectionStyles) -> list[ContrastCheck]:
    """Contrast checks for the text colors a section renders.

    Inherited links are skipped since their color is not known here.
    """
    pairs: list[tuple[str, Color, Color]] = [
        ("Text", styles.foreground, styles.background),
        ("Header text", styles.header_text, styles.background),
        ("Hover text", styles.foreground, styles.hover_background),
    ]
    if isinstance(styles.link, Color):
        pairs.append(("Link", styles.link, styles.background))

    checks = []
    for label, fg, bg in pairs:
        ratio = contrast_ratio(fg, bg)
        checks.append(
            ContrastCheck(
                label=label,
                foreground=fg.to_css(),
                background=bg.to_css(),
                ratio=round(ratio, 2),
                aa_normal=ratio >= MIN_CONTRAST_NORMAL,
                aa_large=ratio >= MIN_CONTRAST_LARGE,
            )
        )
    return checks


def _parse_field(config: SectionConfig, field: str, literal: str) -> Color:
    try:
        return parse_color(literal)
    except InvalidColor as e:
        raise InvalidColor(f"Section {config.name!r} {field}: {e}", literal=e.literal) from e
