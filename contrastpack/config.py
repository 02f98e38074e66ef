"""Configuration constants for ContrastPack."""

import os
from pathlib import Path

# Light/dark split on HSL lightness (percent). Strictly greater is "light".
LIGHTNESS_THRESHOLD = 50.0

# Only this exact lightness counts as white for layout selection
FULL_LIGHTNESS = 100.0

# Lightness shifts (percentage points) applied away from the background's side
BORDER_SHIFT = 12.0
HOVER_SHIFT = 7.0
HEADER_TEXT_SHIFT = 60.0
LINK_SHIFT = 5.0

# Border layout padding
# Override the default base via CONTRASTPACK_PADDING_BASE environment variable
DEFAULT_PADDING_BASE = float(os.getenv("CONTRASTPACK_PADDING_BASE", "10"))
PADDING_CORRECTION_DIVISOR = 5.0
CONTAINER_PADDING_SCALE = 0.8
CHILD_PADDING_PERCENT = 13.0
CHILD_PADDING_EM = 1.6

# WCAG 2.x AA thresholds
MIN_CONTRAST_NORMAL = 4.5
MIN_CONTRAST_LARGE = 3.0

# Theme file looked up when the CLI gets no --theme
DEFAULT_THEME_FILE = Path(os.getenv("CONTRASTPACK_THEME_FILE", "theme.json"))

# Versioning for generated stylesheets
GENERATOR_VERSION = "0.1.0"
SCHEMA_VERSION = 1
