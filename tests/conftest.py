"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from metricgraph.models import IntervalRecord, Phase, Sample

DAY_MS = 24 * 60 * 60 * 1000
BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)
BASE_MS = int(BASE_TIME.timestamp() * 1000)


def make_samples(values, stddev=None, count=None):
    """Build one sample per day starting at BASE_TIME."""
    return [Sample(timestamp=BASE_MS + i * DAY_MS, value=v, stddev=stddev, count=count) for i, v in enumerate(values)]


def day(n: float) -> datetime:
    """BASE_TIME shifted by ``n`` days."""
    return BASE_TIME + timedelta(days=n)


def make_record(record_id, start=None, end=None, status="stopped", result=None, **kwargs):
    """Build a single-phase experiment record spanning day ``start`` to day ``end``."""
    phases = []
    if start is not None or end is not None:
        phases.append(
            Phase(
                date_started=day(start) if start is not None else None,
                date_ended=day(end) if end is not None else None,
            )
        )
    return IntervalRecord(id=record_id, name=kwargs.pop("name", record_id), status=status, result=result, phases=phases, **kwargs)


@pytest.fixture
def constant_samples():
    """Ten days of value=100, stddev=10, count=50."""
    return make_samples([100.0] * 10, stddev=10.0, count=50.0)


@pytest.fixture
def overlapping_records():
    """A=[0,10], B=[5,15], C=[12,20]: A/B and B/C overlap, A/C do not."""
    return [
        make_record("A", 0, 10),
        make_record("B", 5, 15),
        make_record("C", 12, 20),
    ]
