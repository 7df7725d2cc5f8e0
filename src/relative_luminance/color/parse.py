"""
parse.py
========

Does: Turn loose color specs (Color, hex strings, CSS/XKCD names, int triples)
      into validated Color values.
Used By: Contrast settings loader, callers building colors from user input.
Returns: Color instances; raises ColorParseError / InvalidChannelValue.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from functools import lru_cache

import webcolors

from relative_luminance.color.types import Color

__all__ = ["ColorParseError", "parse_color", "color_from_hex", "color_from_name"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ColorParseError(ValueError):
    """Raise when a value cannot be interpreted as a color."""


def _normalize_name(name: str) -> str:
    return re.sub(r"[\s_\-]+", " ", name.strip().lower())


@lru_cache(maxsize=1)
def _xkcd_color_map() -> dict[str, str]:
    """Does: Load XKCD {name: hex} once (lazy import, matplotlib is heavy)."""
    from matplotlib.colors import XKCD_COLORS

    return {_normalize_name(k.replace("xkcd:", "")): hx for k, hx in XKCD_COLORS.items()}


def color_from_hex(value: str) -> Color:
    """Does: Parse '#rgb' / '#rrggbb' (leading '#' optional) into a Color."""
    text = value.strip()
    if not _HEX_RE.match(text):
        raise ColorParseError(f"Not a hex color: {value!r}")
    if not text.startswith("#"):
        text = f"#{text}"
    r, g, b = webcolors.hex_to_rgb(text)
    return Color(r, g, b)


def color_from_name(name: str) -> Color:
    """Does: Resolve a CSS3 name first, then an XKCD name, into a Color."""
    key = _normalize_name(name)
    try:
        r, g, b = webcolors.name_to_rgb(key.replace(" ", ""))
        return Color(r, g, b)
    except ValueError:
        logger.debug("Not a CSS3 color name: %r", key)

    hx = _xkcd_color_map().get(key)
    if hx is None:
        raise ColorParseError(f"Unknown color name: {name!r}")
    return color_from_hex(hx)


def parse_color(value: object) -> Color:
    """Interpret ``value`` as a Color.

    Accepts a Color, a hex string, a CSS3 or XKCD color name, or a sequence
    of three ints in [0, 255].

    Raises:
        ColorParseError: If the value has no color interpretation.
        InvalidChannelValue: If a triple has an out-of-range channel.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        # names only here without '#': "bad" or "fed" are not hex
        if value.strip().startswith("#"):
            return color_from_hex(value)
        return color_from_name(value)
    if isinstance(value, Sequence) and not isinstance(value, bytes):
        if len(value) != 3:
            raise ColorParseError(f"Expected 3 channels, got {len(value)}: {value!r}")
        return Color(*value)
    raise ColorParseError(f"Cannot interpret {type(value).__name__} as a color: {value!r}")
