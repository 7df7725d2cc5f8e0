"""
types.py
========

Does: Define the color value types (8-bit Color, normalized Rgb), the
      LuminanceSource protocol, luminance weights, and channel validation.
Used By: Luminance calculation, contrast selection, color parsing.
Returns: Immutable dataclasses and a structural Protocol; no side effects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Protocol, runtime_checkable

__all__ = [
    "CHANNELS",
    "Color",
    "Rgb",
    "LuminanceSource",
    "LuminanceWeights",
    "REC709_WEIGHTS",
    "InvalidChannelValue",
]
__docformat__ = "google"

CHANNELS = ("red", "green", "blue")


# ── Errors ───────────────────────────────────────────────────────────────────
class InvalidChannelValue(ValueError):
    """Raise when a channel is out of range or of the wrong type."""

    def __init__(self, channel: str, value: object, expected: str):
        self.channel = channel
        self.value = value
        super().__init__(f"Invalid {channel} channel {value!r}: expected {expected}")


def _check_int_channel(channel: str, value: object) -> int:
    # bool is Integral; True/False are not channel values
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidChannelValue(channel, value, "an int in [0, 255]")
    if not 0 <= value <= 255:
        raise InvalidChannelValue(channel, value, "an int in [0, 255]")
    return int(value)


def _check_unit_channel(channel: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidChannelValue(channel, value, "a real number in [0.0, 1.0]")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidChannelValue(channel, value, "a real number in [0.0, 1.0]")


# ── Protocol ─────────────────────────────────────────────────────────────────
@runtime_checkable
class LuminanceSource(Protocol):
    """Anything that can expose its channels normalized to [0.0, 1.0]."""

    def luminance_rgb(self) -> Rgb: ...


# ── Values ───────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Rgb:
    """Normalized RGB triple, each channel a float in [0.0, 1.0]."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for channel, value in zip(CHANNELS, (self.r, self.g, self.b)):
            _check_unit_channel(channel, value)

    def luminance_rgb(self) -> Rgb:
        return self

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Color:
    """8-bit-per-channel sRGB color.

    Channels are validated on construction; out-of-range values raise
    InvalidChannelValue instead of being clamped.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        # numpy and other Integral channels are stored as plain int
        for channel in CHANNELS:
            object.__setattr__(self, channel, _check_int_channel(channel, getattr(self, channel)))

    @classmethod
    def from_normalized(cls, r: float, g: float, b: float) -> Color:
        """Does: Build a Color from [0.0, 1.0] floats, rounding to the nearest 8-bit value."""
        unit = Rgb(r, g, b)
        return cls(*(int(round(c * 255)) for c in unit.as_tuple()))

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def luminance_rgb(self) -> Rgb:
        return Rgb(self.red / 255.0, self.green / 255.0, self.blue / 255.0)


@dataclass(frozen=True)
class LuminanceWeights:
    """Per-channel multipliers applied to linear channels.

    Weights must be non-negative and sum to 1 so that white maps to 1.0.
    """

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        values = (self.red, self.green, self.blue)
        if any(isinstance(w, bool) or not isinstance(w, Real) or not w >= 0 for w in values):
            raise ValueError(f"Luminance weights must be non-negative numbers, got {values!r}")
        if not math.isclose(math.fsum(values), 1.0, abs_tol=1e-6):
            raise ValueError(f"Luminance weights must sum to 1, got {math.fsum(values)!r}")


# Rec. 709 / sRGB primaries: green dominates, blue contributes least.
REC709_WEIGHTS = LuminanceWeights(red=0.2126, green=0.7152, blue=0.0722)
