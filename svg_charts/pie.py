"""
Pie chart layout.

Sector i spans 2*pi * value_i / total, laid out in sample order starting at
angle 0. Negative samples count as zero, so the sectors always partition the
full circle. A non-positive total produces an empty chart.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .options import PieChartOptions
from .scale import Samples, as_samples
from .types import PieLayout, Sector

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi


def sector_angles(magnitudes: np.ndarray) -> np.ndarray:
    """
    Start/end angles for non-negative magnitudes with a positive sum.

    Returns:
        Array of shape (n, 2): [start_angle, end_angle] per sample
    """
    # Scale by the largest sample first so huge values cannot overflow the sum.
    scaled = magnitudes / float(np.max(magnitudes))
    ends = np.minimum(np.cumsum(scaled) / float(np.sum(scaled)) * TAU, TAU)
    # Close the circle exactly; trailing zero-width sectors collapse onto 2*pi.
    last_nonzero = int(np.flatnonzero(magnitudes)[-1])
    ends[last_nonzero:] = TAU
    starts = np.concatenate(([0.0], ends[:-1]))
    return np.stack([starts, ends], axis=1)


def pie_layout(samples: Samples, options: Optional[PieChartOptions] = None) -> PieLayout:
    """
    Compute pie sectors.

    Args:
        samples: Sample values, in sector order
        options: Chart options (defaults if None)

    Returns:
        PieLayout with one Sector per sample, or no sectors when the
        (non-negative) total is zero. A total that overflows is clamped to the
        largest finite float.
    """
    options = options or PieChartOptions()
    values = as_samples(samples)
    n = values.size

    negative = int(np.count_nonzero(values < 0.0))
    if negative:
        logger.debug("pie layout: clamped %d negative samples to zero", negative)
    magnitudes = np.clip(values, 0.0, None)
    with np.errstate(over="ignore"):
        total = float(np.sum(magnitudes))
    if n == 0 or not total > 0.0:
        logger.debug("pie layout: total %s is not positive, empty chart", total)
        return PieLayout(sectors=(), total=0.0)
    if not math.isfinite(total):
        logger.debug("pie layout: total overflows, clamped to the largest float")
        total = float(np.finfo(np.float64).max)

    angles = sector_angles(magnitudes)
    sectors = tuple(
        Sector(
            index=i,
            value=float(values[i]),
            start_angle=float(angles[i, 0]),
            end_angle=float(angles[i, 1]),
            radius=options.radius,
            color=options.color.color_for_index(i, n),
        )
        for i in range(n)
    )
    return PieLayout(sectors=sectors, total=total)
