"""
Value scales for chart axes.

A scale maps data values onto a normalized viewport height:
    fraction = (value - lower) / (upper - lower),  clipped to [0, 1]

Value ranges always include zero so bars grow from a zero baseline. A degenerate
range (upper == lower, e.g. empty or all-zero data) has a single tick and maps
every value to 0.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

import numpy as np

from .types import Series, Tick

logger = logging.getLogger(__name__)

Samples = Union[Iterable[float], np.ndarray, Series]


def as_samples(samples: Samples) -> np.ndarray:
    """
    Convert samples to a 1D float array.

    Args:
        samples: Iterable of numbers, numpy array, or Series

    Returns:
        Array of shape (n,)

    Raises:
        ValueError: if any sample is NaN or infinite
    """
    if isinstance(samples, Series):
        arr = samples.values
    elif isinstance(samples, np.ndarray):
        arr = samples.astype(np.float64).reshape(-1)
    else:
        arr = np.asarray(list(samples), dtype=np.float64).reshape(-1)
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr)).tolist()
        raise ValueError(f"samples must be finite, got non-finite values at indices {bad}")
    return arr


def value_range(samples: Samples) -> Tuple[float, float]:
    """(min, max) of the samples, widened to include zero."""
    arr = as_samples(samples)
    if arr.size == 0:
        return 0.0, 0.0
    return min(float(np.min(arr)), 0.0), max(float(np.max(arr)), 0.0)


def format_tick(value: float) -> str:
    value = float(value)
    if value == 0.0:
        value = 0.0  # drop the sign of -0.0
    return f"{value:.10g}"


@dataclass(frozen=True)
class Scale:
    """
    Linear value scale with evenly spaced ticks.

    Attributes:
        lower: Value at the viewport bottom
        upper: Value at the viewport top
        spacing: Distance between ticks (0 for a degenerate scale)
        num_ticks: Number of ticks
    """

    lower: float
    upper: float
    spacing: float
    num_ticks: int

    @property
    def span(self) -> float:
        return self.upper - self.lower

    @property
    def is_degenerate(self) -> bool:
        return not self.span > 0.0

    def normalize(self, value: float) -> float:
        return float(self.normalize_many(np.array([float(value)]))[0])

    def normalize_many(self, values: np.ndarray) -> np.ndarray:
        values = np.asarray(values, dtype=np.float64)
        if self.is_degenerate:
            return np.zeros_like(values)
        if math.isfinite(self.span):
            return np.clip((values - self.lower) / self.span, 0.0, 1.0)
        # Span overflows: work relative to the largest bound.
        k = max(abs(self.lower), abs(self.upper))
        lower, upper = self.lower / k, self.upper / k
        return np.clip((values / k - lower) / (upper - lower), 0.0, 1.0)

    @property
    def baseline(self) -> float:
        """Fraction of the zero line."""
        return self.normalize(0.0)

    def tick_values(self) -> np.ndarray:
        if self.is_degenerate:
            return np.array([self.lower])
        if math.isfinite(self.span):
            values = np.linspace(self.lower, self.upper, self.num_ticks)
        else:
            t = np.arange(self.num_ticks) / (self.num_ticks - 1)
            values = self.lower * (1.0 - t) + self.upper * t
        return np.clip(values, self.lower, self.upper)

    def ticks(self) -> Tuple[Tick, ...]:
        values = self.tick_values()
        fractions = self.normalize_many(values)
        return tuple(
            Tick(value=float(v), y_fraction=float(f), label=format_tick(v))
            for v, f in zip(values, fractions)
        )


def _degenerate(lower: float) -> Scale:
    return Scale(lower=lower, upper=lower, spacing=0.0, num_ticks=1)


def linear_scale(lower: float, upper: float, max_ticks: int) -> Scale:
    """
    Split [lower, upper] into ``max_ticks`` equal intervals.

    Produces ``max_ticks + 1`` ticks from ``lower`` to ``upper`` inclusive.
    """
    lower, upper = float(lower), float(upper)
    if max_ticks < 1:
        raise ValueError(f"max_ticks must be >= 1, got {max_ticks}")
    if not upper > lower:
        logger.debug("degenerate value range [%s, %s], using a single tick", lower, upper)
        return _degenerate(lower)
    spacing = (upper - lower) / max_ticks
    if not math.isfinite(spacing):
        spacing = upper / max_ticks - lower / max_ticks
    return Scale(lower=lower, upper=upper, spacing=spacing, num_ticks=int(max_ticks) + 1)


def _has_nice_num(num: float) -> bool:
    # log10 needs a finite positive input, and the power of ten must not underflow.
    return math.isfinite(num) and num > 0.0 and 10.0 ** math.floor(math.log10(num)) > 0.0


def nice_num(num: float, round_result: bool) -> float:
    """
    Closest "nice" number (1, 2, 5 or 10 times a power of ten) to ``num``.

    With ``round_result`` the nearest nice number is picked, otherwise the
    smallest nice number >= num.

    Raises:
        ValueError: if num is not a finite positive number with a representable
            power of ten
    """
    if not _has_nice_num(num):
        raise ValueError(f"no nice number for {num!r}")
    exponent = math.floor(math.log10(num))
    fraction = num / 10.0 ** exponent
    if round_result:
        if fraction < 1.5:
            nice_fraction = 1.0
        elif fraction < 3.0:
            nice_fraction = 2.0
        elif fraction < 7.0:
            nice_fraction = 5.0
        else:
            nice_fraction = 10.0
    else:
        if fraction <= 1.0:
            nice_fraction = 1.0
        elif fraction <= 2.0:
            nice_fraction = 2.0
        elif fraction <= 5.0:
            nice_fraction = 5.0
        else:
            nice_fraction = 10.0
    return nice_fraction * 10.0 ** exponent


_MAX_WIDENING_STEPS = 16


def _nice_bounds(lower: float, upper: float, spacing: float) -> Optional[Tuple[float, float, int]]:
    """Bounds widened to multiples of spacing, or None if they overflow."""
    if not math.isfinite(spacing):
        return None
    lo_steps, hi_steps = lower / spacing, upper / spacing
    if not (math.isfinite(lo_steps) and math.isfinite(hi_steps)):
        return None
    lo = math.floor(lo_steps) * spacing
    hi = math.ceil(hi_steps) * spacing
    if not (math.isfinite(lo) and math.isfinite(hi)):
        return None
    return lo, hi, int(round(math.ceil(hi_steps) - math.floor(lo_steps))) + 1


def nice_scale(lower: float, upper: float, max_ticks: int) -> Scale:
    """
    Scale with human-friendly tick spacing.

    The range is widened outwards to multiples of the spacing, so the first and
    last ticks may lie beyond the data. At most ``max_ticks + 1`` ticks. Ranges
    too wide or too narrow for nice spacing get linear ticks instead.
    """
    lower, upper = float(lower), float(upper)
    if max_ticks < 1:
        raise ValueError(f"max_ticks must be >= 1, got {max_ticks}")
    if not upper > lower:
        logger.debug("degenerate value range [%s, %s], using a single tick", lower, upper)
        return _degenerate(lower)

    step = upper - lower
    if _has_nice_num(step):
        step = nice_num(step, False) / max(max_ticks - 1, 1)
    for _ in range(_MAX_WIDENING_STEPS):
        if not _has_nice_num(step):
            break
        spacing = nice_num(step, True)
        bounds = _nice_bounds(lower, upper, spacing)
        if bounds is None:
            break
        lo, hi, num_ticks = bounds
        if num_ticks <= max_ticks + 1:
            return Scale(lower=lo, upper=hi, spacing=spacing, num_ticks=num_ticks)
        logger.debug("nice tick spacing %s gives %d ticks, widening", spacing, num_ticks)
        step = spacing * 1.5

    # A range straddling zero always needs 3 nice ticks (-s, 0, s).
    logger.debug("no nice spacing fits %d ticks in [%s, %s], falling back to linear ticks",
                 max_ticks + 1, lower, upper)
    return linear_scale(lower, upper, max_ticks)
