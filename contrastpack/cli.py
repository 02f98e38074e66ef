"""CLI entry point for ContrastPack.

This CLI intentionally avoids third-party CLI frameworks so the project remains
easy to run inside a site build.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DEFAULT_PADDING_BASE, DEFAULT_THEME_FILE


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="contrastpack",
        description="Readable section colors and padding from a background color.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"ContrastPack {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_resolve = sub.add_parser("resolve", help="Resolve derived colors for one background")
    p_resolve.add_argument("--background", "-b", required=True, help="Background color literal")
    p_resolve.add_argument("--anchor", "-a", help="Anchor (link) color literal")
    p_resolve.add_argument("--padding", type=float, default=DEFAULT_PADDING_BASE, help="Padding base in percent")
    p_resolve.add_argument("--json", action="store_true", help="Print JSON instead of text")

    p_css = sub.add_parser("css", help="Generate a stylesheet from a theme file")
    p_css.add_argument("--theme", "-t", type=Path, default=DEFAULT_THEME_FILE, help="Theme JSON file")
    p_css.add_argument("--out", "-o", type=Path, help="Output file (default: stdout)")

    p_check = sub.add_parser("check", help="Report WCAG contrast for a theme file")
    p_check.add_argument("--theme", "-t", type=Path, default=DEFAULT_THEME_FILE, help="Theme JSON file")
    p_check.add_argument("--strict", action="store_true", help="Exit 1 when any pair fails AA")
    p_check.add_argument("--out", "-o", type=Path, help="Also write the resolved theme as JSON")

    p_preview = sub.add_parser("preview", help="Generate an HTML preview page")
    p_preview.add_argument("--theme", "-t", type=Path, default=DEFAULT_THEME_FILE, help="Theme JSON file")
    p_preview.add_argument("--out", "-o", type=Path, default=Path("./preview"), help="Output directory")

    args = parser.parse_args(argv)

    if args.cmd == "resolve":
        return _cmd_resolve(args)
    if args.cmd == "css":
        return _cmd_css(args)
    if args.cmd == "check":
        return _cmd_check(args)
    if args.cmd == "preview":
        return _cmd_preview(args)

    parser.print_help()
    return 2


def _cmd_resolve(args: Any) -> int:
    from .color.parse import parse_color
    from .resolve.resolver import resolve_section

    try:
        background = parse_color(args.background)
        anchor = parse_color(args.anchor) if args.anchor is not None else None
        styles = resolve_section(background, anchor, padding_base=args.padding)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    layout = styles.layout
    values = {
        "background": styles.background.to_css(),
        "foreground": styles.foreground.to_css(),
        "border": styles.border.to_css(),
        "hover_background": styles.hover_background.to_css(),
        "header_text": styles.header_text.to_css(),
        "link": styles.link.to_css(),
        "container_padding": layout.container_padding.to_css() if layout.container_padding else None,
        "child_padding": layout.child_padding.to_css() if layout.child_padding else None,
    }

    if args.json:
        print(json.dumps(values, indent=2))
        return 0

    for key, value in values.items():
        print(f"  {key:18} {value if value is not None else '-'}")
    return 0


def _cmd_css(args: Any) -> int:
    from .site.build import write_stylesheet
    from .site.styles import render_stylesheet

    resolved = _load_resolved(args.theme)
    if resolved is None:
        return 1

    if args.out is None:
        sys.stdout.write(render_stylesheet(resolved))
    else:
        path = write_stylesheet(resolved, args.out)
        print(f"✓ Stylesheet written: {path}")

    _print_warnings(resolved.warnings)
    return 0


def _cmd_check(args: Any) -> int:
    from .theme.model import write_resolved

    resolved = _load_resolved(args.theme)
    if resolved is None:
        return 1

    print("WCAG contrast report (AA normal >=4.5, AA large >=3.0):\n")
    failed = 0
    for section in resolved.sections:
        print(f"{section.name} ({section.selector}):")
        for c in section.checks:
            normal = "PASS" if c.aa_normal else "FAIL"
            large = "PASS" if c.aa_large else "FAIL"
            print(
                f"  {c.label:12} {c.foreground} on {c.background} -> contrast={c.ratio:.2f}"
                f" | AA normal: {normal} | AA large: {large}"
            )
            if not c.aa_normal:
                failed += 1

    if args.out is not None:
        write_resolved(resolved, args.out)
        print(f"\nResolved theme written: {args.out}")

    if failed:
        print(f"\n{failed} pair(s) below AA normal", file=sys.stderr)
        if args.strict:
            return 1
    return 0


def _cmd_preview(args: Any) -> int:
    from .site.build import build_preview

    resolved = _load_resolved(args.theme)
    if resolved is None:
        return 1

    report = build_preview(resolved, args.out)
    print("✓ Preview generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Sections: {report.get('sections')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")

    _print_warnings(resolved.warnings)
    return 0


def _load_resolved(path: Path) -> Any:
    from .theme.build import resolve_theme
    from .theme.model import load_theme

    try:
        return resolve_theme(load_theme(path))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def _print_warnings(warnings: list[str]) -> None:
    if not warnings:
        return
    print(f"\nWarnings ({len(warnings)}):", file=sys.stderr)
    for w in warnings[:10]:
        print(f"  - {w}", file=sys.stderr)
    if len(warnings) > 10:
        print(f"  ... and {len(warnings) - 10} more", file=sys.stderr)


if __name__ == "__main__":
    app()
