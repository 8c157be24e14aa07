"""
Per-chart options.

Options can be built directly, from a dictionary, or from a YAML file:

    svg_charts:
      bar:
        max_ticks: 4
        palette: ["#dc8a78", "#8839ef"]   # or: palette: catppuccin
      pie:
        radius: 0.99
        gradient: {from: "#000000", to: "#ffffff"}

The ``svg_charts`` wrapper is optional. Unknown keys are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from .color import DEFAULT_PALETTE, NAMED_PALETTES, ChartColor, Gradient, Palette

logger = logging.getLogger(__name__)

ROOT_KEY = "svg_charts"


def color_from_dict(d: Dict[str, Any], default: ChartColor = DEFAULT_PALETTE) -> ChartColor:
    """Build a color source from a ``palette`` or ``gradient`` entry."""
    if "palette" in d and "gradient" in d:
        raise ValueError("specify either 'palette' or 'gradient', not both")
    if "gradient" in d:
        entry = d["gradient"]
        if not isinstance(entry, dict) or "from" not in entry or "to" not in entry:
            raise ValueError("gradient must be a mapping with 'from' and 'to' colors")
        return Gradient(entry["from"], entry["to"])
    if "palette" in d:
        entry = d["palette"]
        if isinstance(entry, str):
            try:
                return NAMED_PALETTES[entry.lower()]
            except KeyError:
                raise ValueError(
                    f"unknown palette {entry!r}, expected one of {sorted(NAMED_PALETTES)}"
                ) from None
        return Palette(entry)
    return default


def _color_to_dict(color: ChartColor) -> Dict[str, Any]:
    if isinstance(color, Palette):
        return {"palette": [c.hex for c in color.colors]}
    if isinstance(color, Gradient):
        return {"gradient": {"from": color.start.hex, "to": color.end.hex}}
    # Calculated colors have no file representation.
    return {}


def _load_section(filepath: str, section: str) -> Dict[str, Any]:
    with open(filepath, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{filepath}: expected a mapping at top level")

    # Accept both the nested layout and a flat section.
    if ROOT_KEY in data:
        data = data[ROOT_KEY] or {}
    if section in data:
        data = data[section] or {}
    logger.debug("loaded %s chart options from %s", section, filepath)
    return data


@dataclass(frozen=True)
class BarChartOptions:
    """
    Bar chart options.

    Attributes:
        max_ticks: Number of intervals between axis gridlines (ticks = max_ticks + 1)
        color: Color source, indexed by sample position
        bar_width: Fraction of each slot covered by its bar, in (0, 1]
        nice_ticks: Round tick spacing to 1/2/5 x 10^k instead of an exact split
    """

    max_ticks: int = 5
    color: ChartColor = DEFAULT_PALETTE
    bar_width: float = 0.8
    nice_ticks: bool = False

    def __post_init__(self):
        if isinstance(self.max_ticks, bool) or int(self.max_ticks) != self.max_ticks or self.max_ticks < 1:
            raise ValueError(f"max_ticks must be an integer >= 1, got {self.max_ticks!r}")
        if not isinstance(self.nice_ticks, bool):
            raise ValueError(f"nice_ticks must be a bool, got {self.nice_ticks!r}")
        if not 0.0 < float(self.bar_width) <= 1.0:
            raise ValueError(f"bar_width must be in (0, 1], got {self.bar_width!r}")
        object.__setattr__(self, "max_ticks", int(self.max_ticks))
        object.__setattr__(self, "bar_width", float(self.bar_width))

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "BarChartOptions":
        kwargs: Dict[str, Any] = {"color": color_from_dict(d)}
        if "max_ticks" in d:
            kwargs["max_ticks"] = d["max_ticks"]
        if "bar_width" in d:
            kwargs["bar_width"] = d["bar_width"]
        if "nice_ticks" in d:
            kwargs["nice_ticks"] = d["nice_ticks"]
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, filepath: str) -> "BarChartOptions":
        return cls.from_dict(_load_section(filepath, "bar"))

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "max_ticks": self.max_ticks,
            "bar_width": self.bar_width,
            "nice_ticks": self.nice_ticks,
        }
        d.update(_color_to_dict(self.color))
        return d


@dataclass(frozen=True)
class PieChartOptions:
    """
    Pie chart options.

    Attributes:
        color: Color source, indexed by sample position
        radius: Sector radius as a fraction of the chart's half-size, in (0, 1]
    """

    color: ChartColor = DEFAULT_PALETTE
    radius: float = 1.0

    def __post_init__(self):
        if not 0.0 < float(self.radius) <= 1.0:
            raise ValueError(f"radius must be in (0, 1], got {self.radius!r}")
        object.__setattr__(self, "radius", float(self.radius))

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PieChartOptions":
        kwargs: Dict[str, Any] = {"color": color_from_dict(d)}
        if "radius" in d:
            kwargs["radius"] = d["radius"]
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, filepath: str) -> "PieChartOptions":
        return cls.from_dict(_load_section(filepath, "pie"))

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"radius": self.radius}
        d.update(_color_to_dict(self.color))
        return d
