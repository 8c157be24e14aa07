# SVG Charts
# Resolution-independent layout engine for SVG bar and pie charts

from .color import (
    CATPPUCCIN_COLORS,
    DEFAULT_PALETTE,
    CalculatedColor,
    ChartColor,
    Color,
    Gradient,
    Palette,
)
from .types import BarLayout, BarRect, PieLayout, Point, Sector, Series, Tick
from .scale import Scale, as_samples, linear_scale, nice_scale, value_range
from .options import BarChartOptions, PieChartOptions
from .bar import bar_layout
from .pie import pie_layout
from .render import bar_chart_svg, pie_chart_svg

__version__ = "0.1.0"
__all__ = [
    "CATPPUCCIN_COLORS",
    "DEFAULT_PALETTE",
    "CalculatedColor",
    "ChartColor",
    "Color",
    "Gradient",
    "Palette",
    "BarLayout",
    "BarRect",
    "PieLayout",
    "Point",
    "Sector",
    "Series",
    "Tick",
    "Scale",
    "as_samples",
    "linear_scale",
    "nice_scale",
    "value_range",
    "BarChartOptions",
    "PieChartOptions",
    "bar_layout",
    "pie_layout",
    "bar_chart_svg",
    "pie_chart_svg",
]
