"""
relative_luminance
==================

Does: Compute the relative luminance of sRGB colors and choose a readable
      foreground for a given background.
Returns: Re-exports the public API of `relative_luminance.color`.
Used by: Library callers; `from relative_luminance import relative_luminance, Color`.
"""

from .color import (
    REC709_WEIGHTS,
    Color,
    ColorParseError,
    ContrastSettings,
    InvalidChannelValue,
    LuminanceSource,
    LuminanceWeights,
    Rgb,
    contrasting_foreground,
    is_light,
    linear_rgb,
    load_contrast_settings,
    parse_color,
    relative_luminance,
    select_contrasting,
    srgb_to_linear,
)

__all__ = [
    "Color",
    "Rgb",
    "LuminanceSource",
    "LuminanceWeights",
    "REC709_WEIGHTS",
    "InvalidChannelValue",
    "ColorParseError",
    "ContrastSettings",
    "srgb_to_linear",
    "linear_rgb",
    "relative_luminance",
    "is_light",
    "select_contrasting",
    "load_contrast_settings",
    "contrasting_foreground",
    "parse_color",
]
__version__ = "0.1.0"
__docformat__ = "google"
