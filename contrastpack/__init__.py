"""ContrastPack: readable section colors and layout from a background color."""

__version__ = "0.1.0"
