"""Tests for tooltip content."""

from datetime import datetime, timezone

from conftest import BASE_MS, day, make_record

from metricgraph.banding import band
from metricgraph.models import DisplaySample
from metricgraph.tooltip import interval_tooltip, sample_tooltip


class TestSampleTooltip:
    """Tests for sample_tooltip."""

    def test_avg_continuous(self):
        """Avg mode shows μ, σ and n."""
        tip = sample_tooltip(DisplaySample(timestamp=BASE_MS, value=12.5, stddev=2.0, count=40.0), "continuous", "avg", "none")

        assert tip.value_label == "μ"
        assert tip.value == 12.5
        assert tip.stddev == 2.0
        assert tip.count == 40.0
        assert tip.date == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert not tip.smoothed

    def test_sum_hides_stddev(self):
        """Sum mode shows Σ and no σ."""
        tip = sample_tooltip(DisplaySample(timestamp=BASE_MS, value=500.0, count=40.0), "continuous", "sum", "week")

        assert tip.value_label == "Σ"
        assert tip.stddev is None
        assert tip.smoothed

    def test_proportion_shows_count_only(self):
        """Proportion metrics only show the count."""
        tip = sample_tooltip(DisplaySample(timestamp=BASE_MS, value=0.2, stddev=0.1, count=40.0), "proportion")

        assert tip.count == 40.0
        assert tip.value is None
        assert tip.value_label is None

    def test_warmup_sample_has_no_tooltip(self):
        """Out-of-range samples show nothing."""
        assert sample_tooltip(DisplaySample(timestamp=BASE_MS, value=1.0, out_of_range=True)) is None
        assert sample_tooltip(None) is None


class TestIntervalTooltip:
    """Tests for interval_tooltip."""

    def test_running_shows_status(self):
        """Running experiments show status and no end date."""
        interval = band([make_record("live", start=0, status="running", analysis="ongoing")], now=day(5))[0]

        tip = interval_tooltip(interval)

        assert tip.status == "running"
        assert tip.end is None
        assert tip.result is None
        assert tip.analysis == "ongoing"

    def test_stopped_shows_result(self):
        """Finished experiments show their result and end date."""
        interval = band([make_record("done", 0, 4, result="lost", name="Pricing page")])[0]

        tip = interval_tooltip(interval)

        assert tip.name == "Pricing page"
        assert tip.result == "lost"
        assert tip.status is None
        assert tip.start == day(0)
        assert tip.end == day(4)
