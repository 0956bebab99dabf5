"""Configuration value objects for metricgraph."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricgraph.models.options import AggregationMode, MetricKind, SmoothingWindow

__all__ = [
    "ChartOptions",
    "LayoutConfig",
    "get_layout_config",
]


class ChartOptions(BaseModel):
    """Display configuration for one chart.

    String values are accepted for the enum fields, including the ``"day"``
    and ``"binomial"`` aliases.
    """

    model_config = ConfigDict(frozen=True)

    metric_kind: MetricKind = Field(default=MetricKind.CONTINUOUS, description="proportion or continuous")
    smoothing: SmoothingWindow = Field(default=SmoothingWindow.NONE, description="Temporal smoothing window")
    aggregation: AggregationMode = Field(default=AggregationMode.AVG, description="avg or sum")
    show_stddev: bool = Field(default=True, description="Draw uncertainty bands")
    height: int = Field(default=220, ge=0, description="Requested chart height in pixels")
    highlight_delay: float = Field(default=0.6, ge=0, description="Seconds before a highlight clears after the pointer leaves")

    @field_validator("metric_kind", mode="before")
    @classmethod
    def parse_kind(cls, value: Any) -> MetricKind:
        return MetricKind.parse(value)

    @field_validator("smoothing", mode="before")
    @classmethod
    def parse_smoothing(cls, value: Any) -> SmoothingWindow:
        return SmoothingWindow.parse(value)

    @field_validator("aggregation", mode="before")
    @classmethod
    def parse_aggregation(cls, value: Any) -> AggregationMode:
        return AggregationMode.parse(value)


class LayoutConfig(BaseModel):
    """Fixed pixel margins and bar sizes of the chart layout.

    Margins follow CSS order: top, right, bottom, left.
    """

    model_config = ConfigDict(frozen=True)

    margin_top: int = Field(default=15, ge=0)
    margin_right: int = Field(default=15, ge=0)
    margin_bottom: int = Field(default=30, ge=0)
    margin_left: int = Field(default=80, ge=0)

    axis_height: int = Field(default=30, ge=0, description="Height reserved for the time axis below the graph")
    min_graph_height: int = Field(default=100, ge=0, description="Graph never shrinks below this; the chart grows instead")
    bar_height: int = Field(default=10, ge=0, description="Height of one interval bar")
    bar_margin: int = Field(default=4, ge=0, description="Vertical gap between interval lanes")
    tooltip_max_offset: int = Field(
        default=150,
        ge=0,
        description="Maximum distance from a bar's left edge to its tooltip anchor",
    )

    @property
    def lane_pitch(self) -> int:
        """Vertical distance between two consecutive lanes."""
        return self.bar_height + self.bar_margin


# Global default layout instance
_layout_config: LayoutConfig | None = None


def get_layout_config() -> LayoutConfig:
    """Get the default layout configuration.

    Returns cached instance if already initialized.
    """
    global _layout_config
    if _layout_config is None:
        _layout_config = LayoutConfig()
    return _layout_config
