"""
Bar chart layout.

The viewport is split into one equal slot per sample; each bar covers
``bar_width`` of its slot, centered. Bars grow from the zero baseline:
upwards for positive samples, downwards for negative ones.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .options import BarChartOptions
from .scale import Samples, Scale, as_samples, linear_scale, nice_scale, value_range
from .types import BarLayout, BarRect

logger = logging.getLogger(__name__)


def bar_scale(samples: Samples, options: Optional[BarChartOptions] = None) -> Scale:
    """Value scale for a bar chart of ``samples``."""
    options = options or BarChartOptions()
    lower, upper = value_range(samples)
    if options.nice_ticks:
        return nice_scale(lower, upper, options.max_ticks)
    return linear_scale(lower, upper, options.max_ticks)


def bar_layout(samples: Samples, options: Optional[BarChartOptions] = None) -> BarLayout:
    """
    Compute bar rectangles and axis ticks.

    Args:
        samples: Sample values, in left-to-right order
        options: Chart options (defaults if None)

    Returns:
        BarLayout with one BarRect per sample. Empty input gives no bars and no ticks.
    """
    options = options or BarChartOptions()
    values = as_samples(samples)
    n = values.size
    if n == 0:
        logger.debug("bar layout: no samples, empty chart")
        return BarLayout(bars=(), ticks=())

    scale = bar_scale(values, options)
    baseline = scale.baseline
    tops = scale.normalize_many(values)

    slot = 1.0 / n
    width = options.bar_width * slot
    offset = 0.5 * (slot - width)

    bars = []
    for i, (v, top) in enumerate(zip(values, tops)):
        bars.append(BarRect(
            index=i,
            value=float(v),
            x=float(i * slot + offset),
            y=float(min(baseline, top)),
            width=float(width),
            height=float(abs(top - baseline)),
            color=options.color.color_for_index(i, n),
        ))

    return BarLayout(bars=tuple(bars), ticks=scale.ticks(), scale=scale, baseline=baseline)


def bar_heights(samples: Samples, options: Optional[BarChartOptions] = None) -> np.ndarray:
    """Signed bar extents (negative below the baseline), shape (n,)."""
    layout = bar_layout(samples, options)
    return np.array([b.signed_height for b in layout.bars], dtype=float)
