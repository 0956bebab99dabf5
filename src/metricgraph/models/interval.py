"""
Experiment interval models.

``IntervalRecord`` mirrors the experiment payload (camelCase aliases accepted),
``LanedInterval`` is a dated, laned and colored record produced by banding.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from metricgraph.models.status import IntervalColor
from metricgraph.utils.timestamp import try_parse_to_datetime


class Phase(BaseModel):
    """One experiment phase. Unparseable dates are treated as missing."""

    model_config = ConfigDict(populate_by_name=True)

    date_started: datetime | None = Field(default=None, alias="dateStarted")
    date_ended: datetime | None = Field(default=None, alias="dateEnded")

    @field_validator("date_started", "date_ended", mode="before")
    @classmethod
    def lenient_date(cls, value: Any) -> datetime | None:
        if value is None or value == "":
            return None
        return try_parse_to_datetime(value)


class IntervalRecord(BaseModel):
    """Experiment-like record annotated on the chart."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Experiment id")
    name: str = Field(default="", description="Display name")
    status: str | None = Field(default=None, description="draft, running, stopped, ...")
    result: str | None = Field(default=None, alias="results", description="won, lost, ... (optional)")
    phases: list[Phase] = Field(default_factory=list)
    analysis: str = Field(default="", description="Free-text analysis")

    def date_range(self) -> tuple[datetime | None, datetime | None]:
        """Earliest phase start and latest phase end, ignoring missing dates."""
        starts = [p.date_started for p in self.phases if p.date_started is not None]
        ends = [p.date_ended for p in self.phases if p.date_ended is not None]
        return (min(starts) if starts else None, max(ends) if ends else None)


class LanedInterval(BaseModel):
    """Interval placed on a lane.

    Two intervals sharing a lane never overlap on ``[start, end)``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    start: datetime
    end: datetime
    lane: int = Field(..., ge=0)
    color: IntervalColor
    opacity: float
    status: str | None = None
    result: str | None = None
    analysis: str = ""

    def __str__(self) -> str:
        return f"LanedInterval(id={self.id}, lane={self.lane}, start={self.start.isoformat()}, end={self.end.isoformat()})"
