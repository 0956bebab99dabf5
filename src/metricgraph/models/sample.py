"""
Metric sample models.

``Sample`` is one raw per-period observation as delivered by the caller,
``DisplaySample`` is what the smoother hands to the drawing layer.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricgraph.utils.timestamp import parse_to_ms


class Sample(BaseModel):
    """Raw metric observation.

    Samples are expected in chronological order; nothing re-sorts them.
    Missing ``value`` or ``stddev`` count as zero, a missing ``count`` as one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: int = Field(..., alias="d", description="Sample time as UNIX milliseconds")
    value: float | None = Field(default=None, alias="v", description="Metric value")
    stddev: float | None = Field(default=None, alias="s", description="Standard deviation (optional)")
    count: float | None = Field(default=None, alias="c", description="Number of observations (optional)")

    @field_validator("timestamp", mode="before")
    @classmethod
    def normalize_timestamp(cls, value: Any) -> int:
        return parse_to_ms(value)


class DisplaySample(BaseModel):
    """Smoothed sample ready for plotting.

    ``out_of_range`` marks warm-up samples of a rolling window; renderers draw
    them as a provisional segment instead of the solid line.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Sample time as UNIX milliseconds")
    value: float = Field(..., description="Smoothed value")
    stddev: float = Field(default=0.0, description="Smoothed standard deviation")
    count: float = Field(default=1.0, description="Observation count")
    out_of_range: bool = Field(default=False, description="Rolling window not yet warmed up")

    def __str__(self) -> str:
        return f"DisplaySample(timestamp={self.timestamp}, value={self.value:.4g}, out_of_range={self.out_of_range})"
