"""
luminance.py
============

Does: Compute relative luminance of sRGB colors: gamma-expand each channel to
      linear light, then combine with luminosity weights.
Used By: Contrast selection and any caller that needs a light/dark measure.
Returns: Floats in [0.0, 1.0] and linear Rgb triples. Pure functions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from relative_luminance.color.types import (
    REC709_WEIGHTS,
    Color,
    LuminanceSource,
    LuminanceWeights,
    Rgb,
)

__all__ = [
    "LINEAR_THRESHOLD",
    "ColorLike",
    "as_luminance_source",
    "srgb_to_linear",
    "linear_rgb",
    "relative_luminance",
]
__docformat__ = "google"

# Breakpoint between the linear segment and the power curve of the sRGB
# transfer function (WCAG 2.x value).
LINEAR_THRESHOLD = 0.03928

ColorLike = Union[LuminanceSource, Sequence[int]]


def as_luminance_source(color: ColorLike) -> LuminanceSource:
    """Does: Accept a LuminanceSource as-is, or coerce an (r, g, b) int triple to Color."""
    if isinstance(color, LuminanceSource):
        return color
    if isinstance(color, Sequence) and not isinstance(color, (str, bytes)) and len(color) == 3:
        return Color(*color)
    raise TypeError(
        f"Expected a Color, Rgb, LuminanceSource or (r, g, b) triple, got {type(color).__name__}"
    )


def srgb_to_linear(value: float) -> float:
    """Convert one normalized sRGB channel to linear light.

    Args:
        value: Gamma-encoded channel in [0.0, 1.0].

    Returns:
        Linear channel in [0.0, 1.0].
    """
    if value <= LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_rgb(color: ColorLike) -> Rgb:
    """Does: Return the gamma-expanded (linear light) channels of a color."""
    rgb = as_luminance_source(color).luminance_rgb()
    return Rgb(*(srgb_to_linear(c) for c in rgb.as_tuple()))


def relative_luminance(color: ColorLike, weights: LuminanceWeights = REC709_WEIGHTS) -> float:
    """Compute the relative luminance of a color.

    Args:
        color: A Color, an Rgb, any object implementing ``luminance_rgb()``,
            or an (r, g, b) triple of ints in [0, 255].
        weights: Per-channel luminosity weights, Rec. 709 by default.
            LuminanceWeights rejects sets that do not sum to 1, so the final
            clamp only absorbs float rounding.

    Returns:
        Relative luminance in [0.0, 1.0]: 0.0 for black, 1.0 for white.

    Raises:
        InvalidChannelValue: If a raw triple has a channel outside [0, 255].
        TypeError: If ``color`` is not color-like.
    """
    lin = linear_rgb(color)
    lum = weights.red * lin.r + weights.green * lin.g + weights.blue * lin.b
    # weight sum may round a hair above 1.0
    return min(1.0, max(0.0, lum))
