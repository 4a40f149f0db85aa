"""
RGB color values for the Voronoi renderer.

Channels are stored as floats, nominally in [0, 1]. Nothing is clamped at
construction; `Color.to_byte_triple` is the single place where channels are
clamped and converted to 8-bit values for output.
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple


MAX_SUBPIXEL_VALUE = 255.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; exact .5 ties go away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _normalize(subpixel: float) -> int:
    """Clamp a channel to [0, 1] and scale it to a byte."""
    if math.isnan(subpixel):
        return 0
    value = min(max(subpixel, 0.0), 1.0) * MAX_SUBPIXEL_VALUE
    return round_half_away_from_zero(value)


@dataclass(frozen=True)
class Color:
    """Immutable RGB color with float channels."""

    red: float
    green: float
    blue: float

    def __post_init__(self):
        # Accept ints, numpy scalars, anything float() understands
        object.__setattr__(self, "red", float(self.red))
        object.__setattr__(self, "green", float(self.green))
        object.__setattr__(self, "blue", float(self.blue))

    @classmethod
    def from_hex(cls, hex_color: int) -> "Color":
        """
        Build a color from a packed 0xRRGGBB integer.

        Each byte is divided by 255 so the result lies in [0, 1].

        Args:
            hex_color: Packed 24-bit color, e.g. 0xFF8000

        Returns:
            Normalized Color
        """
        r = (hex_color >> 16) & 0xFF
        g = (hex_color >> 8) & 0xFF
        b = hex_color & 0xFF
        return cls(
            r / MAX_SUBPIXEL_VALUE,
            g / MAX_SUBPIXEL_VALUE,
            b / MAX_SUBPIXEL_VALUE,
        )

    def to_byte_triple(self) -> Tuple[int, int, int]:
        """
        Convert to an (r, g, b) triple of ints in [0, 255].

        Out-of-range channels are clamped first, so e.g. -0.5 maps to 0
        and 1.5 maps to 255.
        """
        return (
            _normalize(self.red),
            _normalize(self.green),
            _normalize(self.blue),
        )


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)
CYAN = Color(0.0, 1.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
NAVY = Color(0.0, 0.0, 0.5)
TEAL = Color(0.0, 0.5, 0.5)
OLIVE = Color(0.5, 0.5, 0.0)
GRAY = Color(0.5, 0.5, 0.5)

NAMED_COLORS: Dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "yellow": YELLOW,
    "navy": NAVY,
    "teal": TEAL,
    "olive": OLIVE,
    "gray": GRAY,
}


def named_color(name: str) -> Color:
    """Look up a named color (case-insensitive). Raises KeyError for unknown names."""
    key = name.strip().lower()
    if key not in NAMED_COLORS:
        raise KeyError(f"Unknown color name: {name}")
    return NAMED_COLORS[key]
