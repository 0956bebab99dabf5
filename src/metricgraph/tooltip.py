"""Tooltip content for probed samples and highlighted intervals."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from metricgraph.models import AggregationMode, DisplaySample, ExperimentStatus, LanedInterval, MetricKind, SmoothingWindow
from metricgraph.utils.timestamp import ms_to_datetime

__all__ = ["IntervalTooltip", "SampleTooltip", "interval_tooltip", "sample_tooltip"]


class SampleTooltip(BaseModel):
    """What the pointer tooltip shows for one sample.

    Proportion metrics only show the count; ``value`` and ``stddev`` are None.
    ``stddev`` is also None in sum mode.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime
    count: float
    value_label: str | None = None
    value: float | None = None
    stddev: float | None = None
    smoothed: bool = False


class IntervalTooltip(BaseModel):
    """What the tooltip of a highlighted experiment shows."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    start: datetime
    # None while the experiment is still running
    end: datetime | None
    status: str | None = None
    result: str | None = None
    analysis: str = ""


def sample_tooltip(
    sample: DisplaySample | None,
    metric_kind: MetricKind | str = MetricKind.CONTINUOUS,
    mode: AggregationMode | str = AggregationMode.AVG,
    window: SmoothingWindow | str = SmoothingWindow.NONE,
) -> SampleTooltip | None:
    """Build tooltip content, or None for a missing or warm-up sample."""
    if sample is None or sample.out_of_range:
        return None

    date = ms_to_datetime(sample.timestamp)
    if MetricKind.parse(metric_kind) is MetricKind.PROPORTION:
        return SampleTooltip(date=date, count=sample.count)

    mode = AggregationMode.parse(mode)
    return SampleTooltip(
        date=date,
        count=sample.count,
        value_label="Σ" if mode is AggregationMode.SUM else "μ",
        value=sample.value,
        stddev=sample.stddev if mode is AggregationMode.AVG else None,
        smoothed=SmoothingWindow.parse(window) is SmoothingWindow.WEEK,
    )


def interval_tooltip(interval: LanedInterval) -> IntervalTooltip:
    """Running experiments show their status and no end date, others their result."""
    running = interval.status == ExperimentStatus.RUNNING.value
    return IntervalTooltip(
        id=interval.id,
        name=interval.name,
        start=interval.start,
        end=None if running else interval.end,
        status=interval.status if running else None,
        result=None if running else interval.result,
        analysis=interval.analysis,
    )
