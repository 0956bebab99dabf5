"""
DateGraph - memoizing facade over smoothing, banding and layout.

Holds the current chart inputs and recomputes smoothed samples only when
``(samples, window, mode)`` changes and laned intervals only when
``(records, highlight_id)`` changes. Pointer moves reuse the cached render
frame, so they never re-run smoothing or lane assignment.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from metricgraph.banding import band, lane_count
from metricgraph.config import ChartOptions, LayoutConfig, get_layout_config
from metricgraph.interaction import HighlightState, PointerProbe, ProbeResult
from metricgraph.layout import ChartGeometry, IntervalBar, Rect, compute_geometry, highlight_overlay, interval_bars
from metricgraph.models import DisplaySample, IntervalRecord, LanedInterval, MetricKind
from metricgraph.scales import ScaleMapper
from metricgraph.smoothing import provisional_mask, smooth, solid_mask
from metricgraph.tooltip import IntervalTooltip, SampleTooltip, interval_tooltip, sample_tooltip

logger = logging.getLogger(__name__)

__all__ = ["ChartFrame", "DateGraph"]


@dataclass(frozen=True)
class ChartFrame:
    """Everything a renderer needs for one render pass."""

    geometry: ChartGeometry
    mapper: ScaleMapper
    samples: list[DisplaySample]
    intervals: list[LanedInterval]
    bars: list[IntervalBar]
    overlay: Rect | None
    solid: list[bool]
    provisional: list[bool]
    show_bands: bool


@dataclass
class _Memo:
    """Last computed value and the inputs it was computed from."""

    key: tuple[Any, ...] | None = None
    value: Any = None
    misses: int = field(default=0)

    def get(self, key: tuple[Any, ...], compute):
        # Tuple equality checks element identity before __eq__
        if self.key is not None and self.key == key:
            return self.value
        self.misses += 1
        self.value = compute()
        self.key = key
        return self.value


class DateGraph:
    """Metric chart with experiment annotations.

    Examples:
        >>> graph = DateGraph(ChartOptions(smoothing="week"))
        >>> graph.set_samples(samples)
        >>> graph.set_records(experiments)
        >>> frame = graph.render(width=800)
        >>> graph.on_pointer_move(120, width=800)
    """

    def __init__(
        self,
        options: ChartOptions | None = None,
        layout: LayoutConfig | None = None,
        samples: Sequence = (),
        records: Sequence[IntervalRecord] = (),
    ) -> None:
        self._options = options or ChartOptions()
        self._layout = layout or get_layout_config()
        self._samples: tuple = tuple(samples)
        self._records: tuple[IntervalRecord, ...] = tuple(records)
        self._highlight_id: str | None = None

        self._smooth_memo = _Memo()
        self._band_memo = _Memo()
        self._frame_memo = _Memo()
        self._probe: PointerProbe | None = None
        # Presentation-side hover state feeding set_highlight
        self.highlight = HighlightState(self._options.highlight_delay, on_change=self.set_highlight)

    @property
    def options(self) -> ChartOptions:
        """Current display options."""
        return self._options

    @options.setter
    def options(self, options: ChartOptions) -> None:
        self._options = options
        self.highlight.delay = options.highlight_delay

    @property
    def layout(self) -> LayoutConfig:
        """Layout constants."""
        return self._layout

    @property
    def highlight_id(self) -> str | None:
        """Currently highlighted experiment id."""
        return self._highlight_id

    def set_samples(self, samples: Sequence) -> None:
        """Replace the raw samples (chronological order expected)."""
        self._samples = tuple(samples)

    def set_records(self, records: Sequence[IntervalRecord]) -> None:
        """Replace the experiment records."""
        self._records = tuple(records)

    def set_highlight(self, highlight_id: str | None) -> None:
        """Highlight one experiment, or none."""
        self._highlight_id = highlight_id

    @property
    def display_samples(self) -> list[DisplaySample]:
        """Smoothed samples for the current inputs."""
        key = (self._samples, self._options.smoothing, self._options.aggregation)
        return self._smooth_memo.get(key, lambda: smooth(self._samples, self._options.smoothing, self._options.aggregation))

    @property
    def intervals(self) -> list[LanedInterval]:
        """Laned experiments for the current inputs."""
        key = (self._records, self._highlight_id)
        return self._band_memo.get(key, lambda: band(self._records, self._highlight_id))

    @property
    def lane_count(self) -> int:
        """Number of experiment lanes."""
        return lane_count(self.intervals)

    def render(self, width: float) -> ChartFrame:
        """Compute the render frame for a chart ``width`` pixels wide."""
        samples = self.display_samples
        intervals = self.intervals
        key = (samples, intervals, self._highlight_id, width, self._options, self._layout)
        return self._frame_memo.get(key, lambda: self._build_frame(width, samples, intervals))

    def _build_frame(self, width: float, samples: list[DisplaySample], intervals: list[LanedInterval]) -> ChartFrame:
        geometry = compute_geometry(width, self._options.height, lane_count(intervals), self._layout)
        mapper = ScaleMapper.from_display_samples(samples, geometry.inner_width, geometry.graph_height, self._options.metric_kind)
        self._probe = PointerProbe(samples, mapper)
        logger.debug("Built frame: width=%s, samples=%d, intervals=%d", width, len(samples), len(intervals))
        return ChartFrame(
            geometry=geometry,
            mapper=mapper,
            samples=samples,
            intervals=intervals,
            bars=interval_bars(intervals, mapper, geometry, self._layout),
            overlay=highlight_overlay(intervals, self._highlight_id, mapper, geometry),
            solid=solid_mask(samples),
            provisional=provisional_mask(samples),
            show_bands=self._options.show_stddev and self._options.metric_kind is MetricKind.CONTINUOUS,
        )

    def on_pointer_move(self, pixel_x: float, width: float) -> ProbeResult | None:
        """Probe the sample under ``pixel_x`` for a chart ``width`` pixels wide."""
        self.render(width)
        assert self._probe is not None
        return self._probe.on_pointer_move(pixel_x)

    def on_pointer_leave(self) -> None:
        """Hide the probe."""
        if self._probe is not None:
            self._probe.on_pointer_leave()

    @property
    def probe(self) -> ProbeResult | None:
        """Result of the last pointer move, if the pointer is over the chart."""
        return self._probe.current if self._probe is not None else None

    def probe_tooltip(self) -> SampleTooltip | None:
        """Tooltip content for the probed sample."""
        probe = self.probe
        if probe is None:
            return None
        return sample_tooltip(probe.sample, self._options.metric_kind, self._options.aggregation, self._options.smoothing)

    def highlight_tooltip(self) -> IntervalTooltip | None:
        """Tooltip content for the highlighted experiment."""
        for interval in self.intervals:
            if interval.id == self._highlight_id:
                return interval_tooltip(interval)
        return None
