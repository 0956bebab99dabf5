"""
Coordinate mapping between data space and pixel space.

``ScaleMapper`` maps sample times to x pixels and values to y pixels, and maps
a pointer x position back to the nearest display sample. Degenerate domains or
viewports collapse to constant mappings instead of dividing by zero.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from metricgraph.models import DisplaySample, MetricKind
from metricgraph.utils.timestamp import parse_to_ms

__all__ = ["LinearScale", "ScaleMapper", "max_display_value"]


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


class LinearScale:
    """Linear map from a numeric domain to a pixel range, rounded to whole pixels."""

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float]) -> None:
        self.domain = domain
        self.range = range_

    @property
    def is_degenerate(self) -> bool:
        """True when the domain has zero length."""
        return self.domain[0] == self.domain[1]

    def __call__(self, value: float) -> int:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.is_degenerate:
            return _round_half_up(r0)
        t = (value - d0) / (d1 - d0)
        y = r0 + t * (r1 - r0)
        if math.isnan(y):
            return _round_half_up(r0)
        if math.isinf(y):
            # Pin to the nearer end of the range
            return _round_half_up(max(r0, r1) if y > 0 else min(r0, r1))
        return _round_half_up(y)

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"


def max_display_value(samples: Sequence[DisplaySample], metric_kind: MetricKind | str = MetricKind.CONTINUOUS) -> float:
    """Top of the value domain.

    Proportion metrics chart counts; continuous metrics need room for the
    outer (2σ) uncertainty band.
    """
    kind = MetricKind.parse(metric_kind)
    if kind is MetricKind.PROPORTION:
        return max((s.count for s in samples), default=0.0)
    return max((s.value + 2 * s.stddev for s in samples), default=0.0)


class ScaleMapper:
    """Forward and inverse mappings for one render pass.

    Attributes:
        time_scale: ``[min_time, max_time] -> [0, pixel_width]``
        value_scale: ``[0, max_value] -> [pixel_height, 0]``
    """

    def __init__(
        self,
        min_time: int | datetime,
        max_time: int | datetime,
        max_value: float,
        pixel_width: float,
        pixel_height: float,
    ) -> None:
        self.pixel_width = max(0.0, float(pixel_width))
        self.pixel_height = max(0.0, float(pixel_height))
        self.time_scale = LinearScale((parse_to_ms(min_time), parse_to_ms(max_time)), (0.0, self.pixel_width))
        # A non-positive max collapses the value domain
        self.value_scale = LinearScale((0.0, max(0.0, float(max_value))), (self.pixel_height, 0.0))

    @classmethod
    def from_display_samples(
        cls,
        samples: Sequence[DisplaySample],
        pixel_width: float,
        pixel_height: float,
        metric_kind: MetricKind | str = MetricKind.CONTINUOUS,
    ) -> ScaleMapper:
        """Build a mapper whose domain spans the given display samples."""
        timestamps = [s.timestamp for s in samples]
        return cls(
            min(timestamps, default=0),
            max(timestamps, default=0),
            max_display_value(samples, metric_kind),
            pixel_width,
            pixel_height,
        )

    def time_to_x(self, t: int | datetime) -> int:
        """Map a time (UNIX ms or datetime) to an x pixel."""
        return self.time_scale(parse_to_ms(t))

    def value_to_y(self, v: float) -> int:
        """Map a value to a y pixel; zero sits at the bottom."""
        return self.value_scale(v)

    def effective_width(self, sample_count: int) -> float:
        """Plot width stretched by one sample slot so the last sample stays reachable."""
        if sample_count <= 0:
            return self.pixel_width
        return self.pixel_width + self.pixel_width / sample_count

    def pixel_x_to_sample(self, px: float, sample_count: int) -> int | None:
        """Index of the sample nearest to pointer position ``px``.

        Samples are treated as evenly spaced in pixel space regardless of
        their timestamps. Returns None when there are no samples.
        """
        if sample_count <= 0:
            return None
        width = self.effective_width(sample_count)
        if width <= 0:
            return 0
        if math.isnan(px):
            return 0
        position = px / width * sample_count
        return _round_half_up(min(max(position, 0), sample_count - 1))

    def sample_x(self, index: int, sample_count: int) -> float:
        """X position of the probe indicator for sample ``index``."""
        if sample_count <= 0:
            return 0.0
        return index / sample_count * self.effective_width(sample_count)
