"""Color parsing and palette interpolation.

Colors travel through the renderers as `Color` tuples and are only turned
back into `#rrggbb` strings at serialization time. Alpha is kept separate
so it can be written as a fill/stop opacity attribute.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from image_service.services.errors import InvalidColor

# #RGB, #RGBA, #RRGGBB, #RRGGBBAA (leading # optional)
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha out of range: {self.a}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opaque(self) -> bool:
        return self.a >= 1.0


DEFAULT_COLOR = Color(0x3B, 0x82, 0xF6)
DEFAULT_BACKGROUND = Color(0xE5, 0xE7, 0xEB)


def parse_color(text: str, param: Optional[str] = None) -> Color:
    """Parse a hex color. Raises InvalidColor for anything else."""
    raw = (text or "").strip()
    match = _HEX_RE.match(raw)
    if not match:
        raise InvalidColor(
            f"Invalid color format '{raw}'. Use hex color (e.g., #3B82F6)",
            param=param,
        )
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = round(int(digits[6:8], 16) / 255, 3) if len(digits) == 8 else 1.0
    return Color(r, g, b, a)


def parse_palette(text: str, param: Optional[str] = None) -> tuple[Color, ...]:
    """Parse a comma-separated list of hex colors (at least one)."""
    parts = [p.strip() for p in (text or "").split(",")]
    if not any(parts):
        raise InvalidColor("At least one color is required", param=param)
    return tuple(parse_color(p, param=param) for p in parts)


def interpolate(c1: Color, c2: Color, factor: float) -> Color:
    """Per-channel linear interpolation between two colors."""
    return Color(
        _round_half_up(c1.r + (c2.r - c1.r) * factor),
        _round_half_up(c1.g + (c2.g - c1.g) * factor),
        _round_half_up(c1.b + (c2.b - c1.b) * factor),
        round(c1.a + (c2.a - c1.a) * factor, 3),
    )


def resolve_color(palette: Sequence[Color], fraction: float) -> Color:
    """Color at `fraction` (0..1) along an evenly spaced palette.

    The palette is split into len-1 equal segments; the fraction is
    clamped, and 1.0 always returns the last entry.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")
    f = min(1.0, max(0.0, fraction))
    n = len(palette)
    if n == 1:
        return palette[0]
    if f >= 1.0:
        return palette[-1]

    scaled = f * (n - 1)
    segment = min(max(int(math.floor(scaled)), 0), n - 2)
    return interpolate(palette[segment], palette[segment + 1], scaled - segment)


def section_color(palette: Sequence[Color], index: int) -> Color:
    """Color for the index-th multi-value section, cycling through the palette."""
    if not palette:
        raise ValueError("palette must contain at least one color")
    return palette[index % len(palette)]


def lighten(color: Color, percent: float = 30) -> Color:
    """Move each channel `percent`% of the way towards white."""
    p = min(100.0, max(0.0, percent)) / 100
    return Color(
        _round_half_up(color.r + (255 - color.r) * p),
        _round_half_up(color.g + (255 - color.g) * p),
        _round_half_up(color.b + (255 - color.b) * p),
        color.a,
    )
