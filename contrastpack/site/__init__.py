"""Stylesheet and preview output."""

from .build import build_preview, write_stylesheet
from .styles import render_section_css, render_stylesheet

__all__ = [
    "build_preview",
    "write_stylesheet",
    "render_section_css",
    "render_stylesheet",
]
