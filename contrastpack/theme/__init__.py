"""Theme files and their resolution."""

from .build import check_contrast, resolve_config, resolve_theme
from .model import (
    ContrastCheck,
    ResolvedSection,
    ResolvedTheme,
    SectionConfig,
    ThemeFile,
    load_theme,
    write_resolved,
)

__all__ = [
    "ThemeFile",
    "SectionConfig",
    "ResolvedTheme",
    "ResolvedSection",
    "ContrastCheck",
    "load_theme",
    "write_resolved",
    "resolve_theme",
    "resolve_config",
    "check_contrast",
]
