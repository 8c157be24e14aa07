from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple

import numpy as np

from .color import Color

if TYPE_CHECKING:
    from .scale import Scale


@dataclass(frozen=True)
class Point:
    """A sample value with a display label."""

    value: float
    label: str = ""


@dataclass(frozen=True)
class Series:
    """Ordered, labelled samples."""

    points: Tuple[Point, ...] = ()

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[float, str]]) -> "Series":
        return Series(points=tuple(Point(value=float(v), label=str(lab)) for v, lab in pairs))

    @staticmethod
    def from_values(values: Sequence[float], labels: Optional[Sequence[str]] = None) -> "Series":
        if labels is None:
            labels = [""] * len(values)
        if len(labels) != len(values):
            raise ValueError("values and labels must have same length")
        return Series.from_pairs(zip(values, labels))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @property
    def values(self) -> np.ndarray:
        return np.array([p.value for p in self.points], dtype=float)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(p.label for p in self.points)


@dataclass(frozen=True)
class Tick:
    """Axis tick. ``y_fraction`` is measured up from the viewport bottom."""

    value: float
    y_fraction: float
    label: str


@dataclass(frozen=True)
class BarRect:
    """
    One bar in normalized [0, 1] viewport units.

    Attributes:
        index: Sample index (left-to-right position)
        value: Sample value
        x: Left edge
        y: Bottom edge, measured up from the viewport bottom
        width: Bar width
        height: Bar extent (always >= 0)
        color: Fill color
    """

    index: int
    value: float
    x: float
    y: float
    width: float
    height: float
    color: Color

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def signed_height(self) -> float:
        # Negative samples hang below the baseline.
        return self.height if self.value >= 0.0 else -self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0


@dataclass(frozen=True)
class BarLayout:
    bars: Tuple[BarRect, ...]
    ticks: Tuple[Tick, ...]
    scale: Optional["Scale"] = None
    baseline: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.bars


@dataclass(frozen=True)
class Sector:
    """
    One pie wedge.

    Angles are in radians within [0, 2*pi], measured from the +x axis towards +y.
    ``radius`` is a fraction of the chart's half-size.
    """

    index: int
    value: float
    start_angle: float
    end_angle: float
    radius: float
    color: Color

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return 0.5 * (self.start_angle + self.end_angle)

    @property
    def large_arc(self) -> bool:
        return self.span > math.pi

    @property
    def start_point(self) -> Tuple[float, float]:
        return (self.radius * math.cos(self.start_angle), self.radius * math.sin(self.start_angle))

    @property
    def end_point(self) -> Tuple[float, float]:
        return (self.radius * math.cos(self.end_angle), self.radius * math.sin(self.end_angle))

    def label_position(self, distance: float = 0.85) -> Tuple[float, float]:
        """Point on the wedge's center ray, ``distance`` of the way to the rim."""
        r = self.radius * float(distance)
        return (r * math.cos(self.mid_angle), r * math.sin(self.mid_angle))


@dataclass(frozen=True)
class PieLayout:
    sectors: Tuple[Sector, ...]
    total: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.sectors
