"""
Lane assignment for experiment intervals.

Experiments are drawn as horizontal bars under the chart. Overlapping
experiments go on separate lanes; lanes are assigned greedily in start-time
order, which yields the minimum number of lanes for any interval set.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from metricgraph.models import ExperimentStatus, IntervalColor, IntervalRecord, LanedInterval

logger = logging.getLogger(__name__)

__all__ = [
    "DIMMED_OPACITY",
    "HIGHLIGHT_OPACITY",
    "assign_lanes",
    "band",
    "lane_count",
]

HIGHLIGHT_OPACITY = 1.0
DIMMED_OPACITY = 0.35


def band(
    records: Sequence[IntervalRecord],
    highlight_id: str | None = None,
    now: datetime | None = None,
) -> list[LanedInterval]:
    """Filter, color, sort and lane experiment records.

    Args:
        records: Experiment records in any order
        highlight_id: Id of the highlighted experiment, drawn at full opacity
        now: End used for running experiments without an end date.
            Defaults to the current UTC time.

    Returns:
        Laned intervals sorted by start. Records sharing a start keep their
        input order.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    dated: list[tuple[IntervalRecord, datetime, datetime]] = []
    for record in records:
        if record.status == ExperimentStatus.DRAFT.value:
            continue

        start, end = record.date_range()
        if record.status == ExperimentStatus.RUNNING.value and end is None:
            end = now
        if start is None or end is None:
            logger.debug("Dropping experiment %s without a start or end date", record.id)
            continue
        dated.append((record, start, end))

    # sorted() is stable, so ties keep input order
    dated.sort(key=lambda item: item[1])
    lanes = assign_lanes([(start, end) for _, start, end in dated])

    intervals = [
        LanedInterval(
            id=record.id,
            name=record.name,
            start=start,
            end=end,
            lane=lane,
            color=IntervalColor.from_status_and_result(record.status, record.result),
            opacity=HIGHLIGHT_OPACITY if record.id == highlight_id else DIMMED_OPACITY,
            status=record.status,
            result=record.result,
            analysis=record.analysis,
        )
        for (record, start, end), lane in zip(dated, lanes, strict=True)
    ]
    logger.debug("Banded %d of %d experiments into %d lanes", len(intervals), len(records), lane_count(intervals))
    return intervals


def assign_lanes(spans: Sequence[tuple[datetime, datetime]]) -> list[int]:
    """Greedy first-fit lane assignment.

    Args:
        spans: ``(start, end)`` pairs sorted by start

    Returns:
        Lane index per span. A span fits a lane when it starts no earlier than
        every span already placed there ends.
    """
    # Latest end per lane; only the watermark matters for the overlap test
    watermarks: list[datetime] = []
    lanes: list[int] = []
    for start, end in spans:
        for lane, watermark in enumerate(watermarks):
            if start >= watermark:
                watermarks[lane] = max(watermark, end)
                lanes.append(lane)
                break
        else:
            watermarks.append(end)
            lanes.append(len(watermarks) - 1)
    return lanes


def lane_count(intervals: Sequence[LanedInterval]) -> int:
    """Number of lanes in use."""
    return max((i.lane for i in intervals), default=-1) + 1
