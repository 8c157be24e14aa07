"""
Color sources for chart elements.

Every chart element asks its color source for a color by position:
    color = source.color_for_index(i, total)
where ``i`` is the sample index and ``total`` the number of samples in the
render. Color sources are immutable and may be shared between renders.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol, Tuple, Union


_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= int(channel) <= 255:
                raise ValueError(f"color channel out of range [0, 255]: {channel}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a ``#rrggbb`` string."""
        if not isinstance(text, str) or not _HEX_RE.match(text):
            raise ValueError(f"expected a '#rrggbb' hex color, got {text!r}")
        return cls(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


ColorLike = Union[Color, str]


def as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_hex(value)


class ChartColor(Protocol):
    """Anything that can color the ``index``-th of ``total`` chart elements."""

    def color_for_index(self, index: int, total: int) -> Color:
        ...


@dataclass(frozen=True, init=False)
class Palette:
    """
    Takes colors from a fixed sequence, wrapping around at the end.

    Attributes:
        colors: Ordered, non-empty tuple of colors
    """

    colors: Tuple[Color, ...]

    def __init__(self, colors: Iterable[ColorLike]):
        resolved = tuple(as_color(c) for c in colors)
        if not resolved:
            raise ValueError("palette must contain at least one color")
        object.__setattr__(self, "colors", resolved)

    def __len__(self) -> int:
        return len(self.colors)

    def color_at(self, index: int) -> Color:
        """Color for ``index``, wrapping modulo the palette length."""
        if index < 0:
            raise ValueError(f"palette index must be non-negative, got {index}")
        return self.colors[index % len(self.colors)]

    def color_for_index(self, index: int, total: int) -> Color:
        return self.color_at(index)


def invert_gamma_compression(channel: int) -> float:
    """sRGB 8-bit channel -> linear light in [0, 1]."""
    relative = channel / 255.0
    if relative > 0.04045:
        return ((relative + 0.055) / 1.055) ** 2.4
    return relative / 12.92


def gamma_compression(linear: float) -> int:
    """Linear light -> sRGB 8-bit channel (truncated, saturated to [0, 255])."""
    if linear > 0.0031308:
        corrected = 1.055 * linear ** (1.0 / 2.4) - 0.055
    else:
        corrected = linear * 12.92
    return min(max(int(corrected * 255.0), 0), 255)


@dataclass(frozen=True, init=False)
class Gradient:
    """
    Interpolates between ``start`` and ``end`` in linear light.

    Element ``i`` of ``total`` sits at ``t = i / (total - 1)``, so the first
    element gets ``start`` and the last gets ``end``.
    """

    start: Color
    end: Color

    def __init__(self, start: ColorLike, end: ColorLike):
        object.__setattr__(self, "start", as_color(start))
        object.__setattr__(self, "end", as_color(end))

    def color_for_index(self, index: int, total: int) -> Color:
        # Endpoints are returned as given; the gamma round trip truncates.
        if total <= 1 or index == 0:
            return self.start
        if index == total - 1:
            return self.end
        t = index / (total - 1)
        channels = []
        for lo, hi in zip(self.start.to_tuple(), self.end.to_tuple()):
            lo_lin = invert_gamma_compression(lo)
            hi_lin = invert_gamma_compression(hi)
            channels.append(gamma_compression((hi_lin - lo_lin) * t + lo_lin))
        return Color(*channels)


@dataclass(frozen=True)
class CalculatedColor:
    """Delegates to ``func(index, total)``."""

    func: Callable[[int, int], Color]

    def color_for_index(self, index: int, total: int) -> Color:
        return self.func(index, total)


# Catppuccin Latte
CATPPUCCIN_COLORS: Tuple[Color, ...] = (
    Color.from_hex("#dc8a78"),  # rosewater
    Color.from_hex("#8839ef"),  # mauve
    Color.from_hex("#fe640b"),  # peach
    Color.from_hex("#40a02b"),  # green
    Color.from_hex("#04a5e5"),  # sky
    Color.from_hex("#ea76cb"),  # pink
    Color.from_hex("#1e66f5"),  # blue
    Color.from_hex("#d20f39"),  # red
    Color.from_hex("#df8e1d"),  # yellow
    Color.from_hex("#209fb5"),  # sapphire
    Color.from_hex("#7287fd"),  # lavender
    Color.from_hex("#e64553"),  # maroon
)

DEFAULT_PALETTE = Palette(CATPPUCCIN_COLORS)

NAMED_PALETTES = {
    "catppuccin": DEFAULT_PALETTE,
}
