"""
Chart geometry.

Splits the requested chart area into the plotting area and the interval bar
rows underneath it, and places interval bars in pixel space.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from metricgraph.config import LayoutConfig, get_layout_config
from metricgraph.models import IntervalColor, LanedInterval
from metricgraph.scales import ScaleMapper

__all__ = ["ChartGeometry", "IntervalBar", "Rect", "compute_geometry", "highlight_overlay", "interval_bars"]


class ChartGeometry(BaseModel):
    """Pixel geometry of one render pass.

    ``bars_top`` is measured from the top of the chart; bar rectangles are
    relative to ``(margin_left, bars_top)``, plot content to
    ``(margin_left, margin_top)``.
    """

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    inner_width: float
    graph_height: float
    margin_left: float
    margin_top: float
    bars_top: float


class Rect(BaseModel):
    """Axis-aligned rectangle."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float


class IntervalBar(BaseModel):
    """One interval bar with its tooltip anchor."""

    model_config = ConfigDict(frozen=True)

    interval_id: str
    rect: Rect
    color: IntervalColor
    opacity: float
    tip_left: float
    tip_top: float


def compute_geometry(width: float, height: float, lane_count: int, config: LayoutConfig | None = None) -> ChartGeometry:
    """Reserve one bar row per lane below the plotting area.

    The plotting area never shrinks below ``config.min_graph_height``; the
    chart grows taller instead.

    Args:
        width: Total chart width in pixels
        height: Requested total chart height in pixels
        lane_count: Number of interval lanes
        config: Layout constants (default: ``get_layout_config()``)

    Returns:
        ChartGeometry with non-negative sizes
    """
    config = config or get_layout_config()

    inner_width = max(0.0, width - config.margin_left - config.margin_right)
    inner_height = height - config.margin_top - config.margin_bottom
    graph_height = inner_height - lane_count * config.lane_pitch
    if graph_height < config.min_graph_height:
        height += config.min_graph_height - graph_height
        graph_height = config.min_graph_height

    return ChartGeometry(
        width=max(0.0, width),
        height=height,
        inner_width=inner_width,
        graph_height=graph_height,
        margin_left=config.margin_left,
        margin_top=config.margin_top,
        bars_top=graph_height + config.axis_height + config.margin_top,
    )


def interval_bars(
    intervals: Sequence[LanedInterval],
    mapper: ScaleMapper,
    geometry: ChartGeometry,
    config: LayoutConfig | None = None,
) -> list[IntervalBar]:
    """Place interval bars, one row per lane.

    Bars with no positive width (outside the time domain, or collapsed by a
    degenerate scale) are left out.
    """
    config = config or get_layout_config()

    bars = []
    for interval in intervals:
        x = mapper.time_to_x(interval.start)
        width = mapper.time_to_x(interval.end) - x
        if width <= 0:
            continue
        bars.append(
            IntervalBar(
                interval_id=interval.id,
                rect=Rect(x=x, y=interval.lane * config.lane_pitch, width=width, height=config.bar_height),
                color=interval.color,
                opacity=interval.opacity,
                tip_left=x + min(config.tooltip_max_offset, width / 2),
                tip_top=geometry.height,
            )
        )
    return bars


def highlight_overlay(
    intervals: Sequence[LanedInterval],
    highlight_id: str | None,
    mapper: ScaleMapper,
    geometry: ChartGeometry,
) -> Rect | None:
    """Full-height shading over the plotting area for the highlighted interval."""
    if highlight_id is None:
        return None
    for interval in intervals:
        if interval.id == highlight_id:
            x = mapper.time_to_x(interval.start)
            return Rect(x=x, y=0, width=mapper.time_to_x(interval.end) - x, height=geometry.graph_height)
    return None
