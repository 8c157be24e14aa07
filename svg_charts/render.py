from __future__ import annotations

import math
from html import escape
from typing import Optional, Sequence

from .bar import bar_layout
from .options import BarChartOptions, PieChartOptions
from .pie import pie_layout
from .scale import Samples, format_tick
from .types import Sector, Series


def _labels_for(samples: Samples, labels: Optional[Sequence[str]], n: int) -> list[str]:
    if labels is None and isinstance(samples, Series):
        labels = samples.labels
    if labels is None:
        return [""] * n
    labels = [str(lab) for lab in labels]
    if len(labels) != n:
        raise ValueError("labels and samples must have same length")
    return labels


def _title(label: str, value: float) -> str:
    text = f"{label}: {format_tick(value)}" if label else format_tick(value)
    return f"<title>{escape(text)}</title>"


def bar_chart_svg(
    samples: Samples,
    options: Optional[BarChartOptions] = None,
    labels: Optional[Sequence[str]] = None,
    width: int = 480,
    height: int = 220,
) -> str:
    """Render a bar chart as an inline SVG string."""
    layout = bar_layout(samples, options)
    names = _labels_for(samples, labels, len(layout.bars))

    margin_l, margin_r, margin_t, margin_b = 48, 10, 10, 24
    w = width - margin_l - margin_r
    h = height - margin_t - margin_b

    def to_svg_x(frac: float) -> float:
        return margin_l + frac * w

    def to_svg_y(frac: float) -> float:
        # Layout fractions grow upwards, SVG y grows downwards.
        return margin_t + (1.0 - frac) * h

    grid = []
    for tick in layout.ticks:
        ty = to_svg_y(tick.y_fraction)
        grid.append(
            f'<line x1="{margin_l - 4}" y1="{ty:.2f}" x2="{margin_l + w}" y2="{ty:.2f}" stroke="#eee" stroke-width="1"/>'
            f'<text x="{margin_l - 6}" y="{ty + 3:.2f}" font-size="10" fill="#555" text-anchor="end">{escape(tick.label)}</text>'
        )

    rects = []
    texts = []
    for bar, name in zip(layout.bars, names):
        color = bar.color.hex
        rects.append(
            f'<rect x="{to_svg_x(bar.x):.2f}" y="{to_svg_y(bar.top):.2f}" '
            f'width="{bar.width * w:.2f}" height="{bar.height * h:.2f}" '
            f'fill="{color}" fill-opacity="0.6" stroke="{color}" stroke-width="1">'
            f'{_title(name, bar.value)}</rect>'
        )
        if name:
            texts.append(
                f'<text x="{to_svg_x(bar.center_x):.2f}" y="{height - 8}" font-size="10" fill="#555" '
                f'text-anchor="middle">{escape(name)}</text>'
            )

    y0 = to_svg_y(layout.baseline)
    svg = f"""
<svg viewBox="0 0 {width} {height}" width="{width}" height="{height}" role="img">
  {''.join(grid)}
  {''.join(rects)}
  {''.join(texts)}
  <line x1="{margin_l}" y1="{y0:.2f}" x2="{margin_l + w}" y2="{y0:.2f}" stroke="#444" stroke-width="1"/>
  <line x1="{margin_l}" y1="{margin_t}" x2="{margin_l}" y2="{margin_t + h}" stroke="#444" stroke-width="1"/>
</svg>
"""
    return svg.strip()


def sector_path(sector: Sector, scale: float = 1.0) -> str:
    """
    SVG path for a wedge centered on the origin.

    Args:
        sector: Sector geometry
        scale: Pixels per unit radius
    """
    r = sector.radius * scale
    x0, y0 = (c * scale for c in sector.start_point)
    x1, y1 = (c * scale for c in sector.end_point)
    large = 1 if sector.large_arc else 0
    return f"M0 0 L{x0:.3f} {y0:.3f} A{r:.3f} {r:.3f} 0 {large} 1 {x1:.3f} {y1:.3f}Z"


def pie_chart_svg(
    samples: Samples,
    options: Optional[PieChartOptions] = None,
    labels: Optional[Sequence[str]] = None,
    size: int = 200,
) -> str:
    """Render a pie chart as an inline SVG string."""
    layout = pie_layout(samples, options)
    names = _labels_for(samples, labels, len(layout.sectors))
    half = size / 2.0

    shapes = []
    for sector, name in zip(layout.sectors, names):
        if sector.span <= 0.0:
            continue
        color = sector.color.hex
        style = f'fill="{color}" fill-opacity="0.6" stroke="{color}" stroke-width="2"'
        if sector.span >= 2.0 * math.pi:
            # A closed arc has coincident endpoints and renders nothing.
            shapes.append(f'<circle cx="0" cy="0" r="{sector.radius * half:.3f}" {style}>{_title(name, sector.value)}</circle>')
        else:
            shapes.append(f'<path d="{sector_path(sector, half)}" {style}>{_title(name, sector.value)}</path>')

    svg = f"""
<svg viewBox="0 0 {size} {size}" width="{size}" height="{size}" role="img">
  <g transform="translate({half:g},{half:g})">
  {''.join(shapes)}
  </g>
</svg>
"""
    return svg.strip()
