"""
contrast.py
===========

Does: Pick a readable foreground for a background by thresholding its
      relative luminance (dark text on light backgrounds, light text otherwise).
Used By: Callers rendering text over arbitrary colors.
Returns: One of the two candidate Colors; a bool for is_light().

The default threshold (0.5) is a midpoint heuristic, not a WCAG contrast
ratio. It reproduces the classic cases: white on #00FF00 and black on
#0000FF are both rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from relative_luminance.color.luminance import ColorLike, relative_luminance
from relative_luminance.color.parse import parse_color
from relative_luminance.color.types import Color
from relative_luminance.utils import debug, load_config
from relative_luminance.utils.log import enabled

__all__ = [
    "DEFAULT_THRESHOLD",
    "ContrastSettings",
    "is_light",
    "select_contrasting",
    "load_contrast_settings",
    "contrasting_foreground",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.5
CONTRAST_CONFIG = "contrast"


# ── Settings ─────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ContrastSettings:
    """Does: Hold the configured threshold and light/dark foreground pair."""

    threshold: float
    light: Color
    dark: Color


def _validate_settings(data: dict[str, Any]) -> ContrastSettings:
    """Does: Build ContrastSettings from a raw config dict; reject bad values."""
    missing = [k for k in ("light", "dark") if k not in data]
    if missing:
        raise ValueError(f"missing keys: {', '.join(missing)}")
    threshold = data.get("threshold", DEFAULT_THRESHOLD)
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ValueError(f"threshold must be a number, got {threshold!r}")
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be in [0, 1], got {threshold!r}")
    return ContrastSettings(
        threshold=float(threshold),
        light=parse_color(data["light"]),
        dark=parse_color(data["dark"]),
    )


def load_contrast_settings() -> ContrastSettings:
    """Does: Load and validate <data>/contrast.json."""
    return load_config(CONTRAST_CONFIG, "validated_dict", validator=_validate_settings)


# ── Decisions ────────────────────────────────────────────────────────────────
def is_light(color: ColorLike, *, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Does: True when the color's relative luminance is above `threshold`."""
    return relative_luminance(color) > threshold


def select_contrasting(
    background: ColorLike,
    light_option: Color,
    dark_option: Color,
    *,
    threshold: float = DEFAULT_THRESHOLD,
) -> Color:
    """Choose the foreground that reads best on ``background``.

    Args:
        background: Background color.
        light_option: Returned for dark backgrounds (luminance <= threshold).
        dark_option: Returned for light backgrounds (luminance > threshold).
        threshold: Luminance cut-off, 0.5 by default.

    Returns:
        ``dark_option`` or ``light_option``.
    """
    lum = relative_luminance(background)
    chosen = dark_option if lum > threshold else light_option
    if enabled("contrast"):
        debug(f"background={background!r} luminance={lum:.4f} -> {chosen!r}", topic="contrast")
    return chosen


def contrasting_foreground(background: ColorLike) -> Color:
    """Does: select_contrasting() with the light/dark pair and threshold from config."""
    settings = load_contrast_settings()
    logger.debug("Using contrast settings %s", settings)
    return select_contrasting(
        background, settings.light, settings.dark, threshold=settings.threshold
    )
