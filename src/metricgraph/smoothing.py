"""
Temporal smoothing of metric samples.

Turns raw per-period samples into display samples, either passing daily values
through or averaging over a trailing window of up to seven samples, and derives
the uncertainty bands drawn around the line.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from metricgraph.models import AggregationMode, DisplaySample, Sample, SmoothingWindow

logger = logging.getLogger(__name__)

__all__ = [
    "WARMUP_SAMPLES",
    "WEEK_WINDOW",
    "UncertaintyBand",
    "lower_bound",
    "provisional_mask",
    "smooth",
    "solid_mask",
    "uncertainty_bands",
    "upper_bound",
]

WEEK_WINDOW = 7

# Leading samples flagged out of range under weekly smoothing. Fixed display
# convention, deliberately independent of how full the window actually is.
WARMUP_SAMPLES = 6


def smooth(
    samples: Sequence[Sample],
    window: SmoothingWindow | str = SmoothingWindow.NONE,
    mode: AggregationMode | str = AggregationMode.AVG,
) -> list[DisplaySample]:
    """Convert raw samples to display samples.

    Args:
        samples: Chronologically ordered samples. Order is not checked; an
            unordered sequence yields undefined (but non-failing) output.
        window: ``"none"`` (alias ``"day"``) or ``"week"``
        mode: ``"avg"`` or ``"sum"``. In sum mode the plotted quantity is
            ``value * count`` and the standard deviation is dropped.

    Returns:
        One display sample per input sample, in input order.

    Raises:
        ChartConfigError: If ``window`` or ``mode`` is not a known value
    """
    window = SmoothingWindow.parse(window)
    mode = AggregationMode.parse(mode)

    n = len(samples)
    if n == 0:
        return []

    values = np.array([0.0 if s.value is None else s.value for s in samples], dtype=float)
    counts = np.array([1.0 if s.count is None else s.count for s in samples], dtype=float)

    if mode is AggregationMode.AVG:
        quantity = values
        stddevs = np.array([0.0 if s.stddev is None else s.stddev for s in samples], dtype=float)
    else:
        quantity = values * counts
        stddevs = np.zeros(n)

    out_of_range = np.zeros(n, dtype=bool)
    if window is SmoothingWindow.WEEK:
        quantity = _trailing_mean(quantity, WEEK_WINDOW)
        stddevs = _trailing_mean(stddevs, WEEK_WINDOW)
        out_of_range[:WARMUP_SAMPLES] = True

    logger.debug("Smoothed %d samples (window=%s, mode=%s)", n, window.value, mode.value)

    return [
        DisplaySample(
            timestamp=sample.timestamp,
            value=value,
            stddev=stddev,
            count=sample.count or 1.0,
            out_of_range=oor,
        )
        for sample, value, stddev, oor in zip(samples, quantity.tolist(), stddevs.tolist(), out_of_range.tolist(), strict=True)
    ]


def _trailing_mean(arr: np.ndarray, width: int) -> np.ndarray:
    """Mean over the trailing ``width`` elements, shrinking at the start."""
    # Full convolution: element i sums arr[max(0, i - width + 1)..i]
    sums = np.convolve(arr, np.ones(width))[: len(arr)]
    lengths = np.minimum(np.arange(1, len(arr) + 1), width)
    return sums / lengths


@dataclass(frozen=True)
class UncertaintyBand:
    """Lower and upper edge of an uncertainty band."""

    lower: float
    upper: float


def lower_bound(sample: DisplaySample, k: float = 1) -> float:
    """``value - k * stddev``, floored at zero."""
    return max(0.0, sample.value - k * sample.stddev)


def upper_bound(sample: DisplaySample, k: float = 1) -> float:
    """``value + k * stddev``."""
    return sample.value + k * sample.stddev


def uncertainty_bands(sample: DisplaySample) -> tuple[UncertaintyBand, UncertaintyBand]:
    """Return the nested inner (1σ) and outer (2σ) bands of a sample."""
    return (
        UncertaintyBand(lower_bound(sample, 1), upper_bound(sample, 1)),
        UncertaintyBand(lower_bound(sample, 2), upper_bound(sample, 2)),
    )


def solid_mask(samples: Sequence[DisplaySample]) -> list[bool]:
    """Samples drawn as part of the solid line and bands."""
    return [not s.out_of_range for s in samples]


def provisional_mask(samples: Sequence[DisplaySample]) -> list[bool]:
    """Samples drawn as part of the provisional (warm-up) segment.

    The first solid sample is included so the two segments join.
    """
    return [s.out_of_range or (i > 0 and samples[i - 1].out_of_range) for i, s in enumerate(samples)]
