"""
metricgraph data models package.

This package contains the input and output models shared by all components.
"""

from metricgraph.models.interval import IntervalRecord, LanedInterval, Phase
from metricgraph.models.options import AggregationMode, MetricKind, SmoothingWindow
from metricgraph.models.sample import DisplaySample, Sample
from metricgraph.models.status import ExperimentResult, ExperimentStatus, IntervalColor

__all__ = [
    "AggregationMode",
    "DisplaySample",
    "ExperimentResult",
    "ExperimentStatus",
    "IntervalColor",
    "IntervalRecord",
    "LanedInterval",
    "MetricKind",
    "Phase",
    "Sample",
    "SmoothingWindow",
]
