"""
Chart option enumerations.

Each enum accepts the aliases used by callers (``"day"`` for no smoothing,
``"binomial"`` for proportion metrics) through ``parse``.
"""

from __future__ import annotations

from enum import Enum

from metricgraph.exceptions import ChartConfigError


class _ParsableEnum(Enum):
    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {}

    @classmethod
    def parse(cls, value):
        """Convert a string (or member) to a member, resolving aliases.

        Raises:
            ChartConfigError: If the value names no member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = cls._aliases().get(value.lower(), value.lower())
            for member in cls:
                if member.value == key:
                    return member
        allowed = ", ".join(m.value for m in cls)
        raise ChartConfigError(f"Invalid {cls.__name__} value {value!r}. Expected one of: {allowed}")


class SmoothingWindow(_ParsableEnum):
    """Temporal smoothing applied to raw samples."""

    NONE = "none"
    WEEK = "week"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"day": "none"}


class AggregationMode(_ParsableEnum):
    """Whether a sample's value is its mean or its total."""

    AVG = "avg"
    SUM = "sum"


class MetricKind(_ParsableEnum):
    """Metric kind; proportion metrics chart the count, not the value."""

    PROPORTION = "proportion"
    CONTINUOUS = "continuous"

    @classmethod
    def _aliases(cls) -> dict[str, str]:
        return {"binomial": "proportion"}
