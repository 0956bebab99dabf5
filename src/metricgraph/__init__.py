"""
metricgraph - data and layout engine for metric charts with experiment annotations.

Smooths metric samples, lays out experiment intervals on non-overlapping lanes,
and maps between data space and pixel space for a rendering layer.

Examples:
    >>> import metricgraph
    >>> display = metricgraph.smooth(samples, window="week", mode="avg")
    >>> intervals = metricgraph.band(experiments, highlight_id="exp_1")
    >>> mapper = metricgraph.ScaleMapper.from_display_samples(display, 640, 160)
"""

from metricgraph.banding import assign_lanes, band, lane_count
from metricgraph.chart import ChartFrame, DateGraph
from metricgraph.config import ChartOptions, LayoutConfig
from metricgraph.exceptions import ChartConfigError
from metricgraph.logger import setup_logger
from metricgraph.models import (
    AggregationMode,
    DisplaySample,
    IntervalRecord,
    LanedInterval,
    MetricKind,
    Phase,
    Sample,
    SmoothingWindow,
)
from metricgraph.scales import ScaleMapper
from metricgraph.smoothing import lower_bound, smooth, uncertainty_bands, upper_bound

__version__ = "0.1.0"
__all__ = [
    "AggregationMode",
    "ChartConfigError",
    "ChartFrame",
    "ChartOptions",
    "DateGraph",
    "DisplaySample",
    "IntervalRecord",
    "LanedInterval",
    "LayoutConfig",
    "MetricKind",
    "Phase",
    "Sample",
    "ScaleMapper",
    "SmoothingWindow",
    "assign_lanes",
    "band",
    "lane_count",
    "lower_bound",
    "setup_logger",
    "smooth",
    "uncertainty_bands",
    "upper_bound",
]
