"""
RGB color value type and the color math used by the strip effects.

Everything here is pure: no I/O, no controller state.  Conversions
truncate toward zero (``int()``) rather than rounding so frames match what
existing Adalight hosts put on the wire.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import ValidationError

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

_MIN_CHANNEL = 0
_MAX_CHANNEL = 255


def _validate_channel(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {value!r}")
    if not (_MIN_CHANNEL <= value <= _MAX_CHANNEL):
        raise ValidationError(f"{label} must be {_MIN_CHANNEL}-{_MAX_CHANNEL}, got {value}")


def _validate_unit(value: float, label: str) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValidationError(f"{label} must be 0.0-1.0, got {value}")


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """One 8-bit-per-channel RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _validate_channel(self.r, "r")
        _validate_channel(self.g, "g")
        _validate_channel(self.b, "b")

    @classmethod
    def coerce(cls, value: Color | Sequence[int]) -> Color:
        """Return *value* as a :class:`Color`.

        Accepts an existing :class:`Color` or any ``(r, g, b)`` sequence.
        """
        if isinstance(value, Color):
            return value
        try:
            r, g, b = value
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Expected a Color or (r, g, b), got {value!r}") from exc
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """Convert an HSV triple to a :class:`Color`.

    Args:
        hue: Hue in degrees.  Not clamped; anything past 360 wraps through
            the ``sector mod 6`` step.
        saturation: 0.0-1.0.
        value: 0.0-1.0.

    Each channel is scaled by 255 and truncated.
    """
    _validate_unit(saturation, "saturation")
    _validate_unit(value, "value")

    scaled = hue / 60.0
    whole = math.floor(scaled)
    sector = whole % 6
    frac = scaled - whole

    p = value * (1 - saturation)
    q = value * (1 - frac * saturation)
    t = value * (1 - (1 - frac) * saturation)

    if sector == 0:
        r, g, b = value, t, p
    elif sector == 1:
        r, g, b = q, value, p
    elif sector == 2:
        r, g, b = p, value, t
    elif sector == 3:
        r, g, b = p, q, value
    elif sector == 4:
        r, g, b = t, p, value
    else:
        r, g, b = value, p, q

    return Color(int(r * 255), int(g * 255), int(b * 255))


def lerp_color(start: Color, end: Color, ratio: float) -> Color:
    """Linearly interpolate between *start* and *end* (``ratio`` 0.0-1.0)."""
    _validate_unit(ratio, "ratio")
    return Color(
        int(start.r + (end.r - start.r) * ratio),
        int(start.g + (end.g - start.g) * ratio),
        int(start.b + (end.b - start.b) * ratio),
    )
