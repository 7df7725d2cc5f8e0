"""
color.
=====

Does: Aggregate the color value types, relative luminance calculation,
      contrast selection and color parsing.
Used By: The package root and any caller working with sRGB colors.
Returns: Pure functions and immutable values; no side effects at import.
"""

# ── Types ────────────────────────────────────────────────────────────────────
from .types import (
    REC709_WEIGHTS,
    Color,
    InvalidChannelValue,
    LuminanceSource,
    LuminanceWeights,
    Rgb,
)

# ── Luminance ────────────────────────────────────────────────────────────────
from .luminance import (
    linear_rgb,
    relative_luminance,
    srgb_to_linear,
)

# ── Parsing ──────────────────────────────────────────────────────────────────
from .parse import (
    ColorParseError,
    parse_color,
)

# ── Contrast ─────────────────────────────────────────────────────────────────
from .contrast import (
    ContrastSettings,
    contrasting_foreground,
    is_light,
    load_contrast_settings,
    select_contrasting,
)

__all__ = [
    # types
    "Color",
    "Rgb",
    "LuminanceSource",
    "LuminanceWeights",
    "REC709_WEIGHTS",
    "InvalidChannelValue",
    # luminance
    "srgb_to_linear",
    "linear_rgb",
    "relative_luminance",
    # parsing
    "ColorParseError",
    "parse_color",
    # contrast
    "ContrastSettings",
    "is_light",
    "select_contrasting",
    "load_contrast_settings",
    "contrasting_foreground",
]
