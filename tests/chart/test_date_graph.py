"""Tests for the DateGraph facade."""

import asyncio

import pytest
from conftest import make_record, make_samples

import metricgraph.chart as chart_module
from metricgraph.chart import DateGraph
from metricgraph.config import ChartOptions


@pytest.fixture
def counting(monkeypatch):
    """Count calls to smooth() and band() made by the facade."""
    calls = {"smooth": 0, "band": 0}
    real_smooth = chart_module.smooth
    real_band = chart_module.band

    def counting_smooth(*args, **kwargs):
        calls["smooth"] += 1
        return real_smooth(*args, **kwargs)

    def counting_band(*args, **kwargs):
        calls["band"] += 1
        return real_band(*args, **kwargs)

    monkeypatch.setattr(chart_module, "smooth", counting_smooth)
    monkeypatch.setattr(chart_module, "band", counting_band)
    return calls


@pytest.fixture
def graph(constant_samples, overlapping_records):
    return DateGraph(ChartOptions(smoothing="week"), samples=constant_samples, records=overlapping_records)


class TestMemoization:
    """Tests for recomputation keys."""

    def test_pointer_moves_do_not_recompute(self, graph, counting):
        """Pointer moves reuse smoothed samples and lanes."""
        graph.render(800)
        for px in range(0, 700, 7):
            graph.on_pointer_move(px, 800)

        assert counting == {"smooth": 1, "band": 1}

    def test_highlight_change_rebands_only(self, graph, counting):
        """Changing the highlight re-runs banding, not smoothing."""
        graph.render(800)
        graph.set_highlight("B")
        frame = graph.render(800)

        assert counting == {"smooth": 1, "band": 2}
        assert {i.id: i.opacity for i in frame.intervals}["B"] == 1.0

    def test_option_change_resmooths_only(self, graph, counting):
        """Changing aggregation re-runs smoothing, not banding."""
        graph.render(800)
        graph.options = ChartOptions(smoothing="week", aggregation="sum")
        graph.render(800)

        assert counting == {"smooth": 2, "band": 1}

    def test_equal_inputs_hit_cache(self, graph, counting, constant_samples):
        """Equal (not identical) sample lists reuse the cached result."""
        graph.render(800)
        graph.set_samples(list(constant_samples))
        graph.render(800)

        assert counting["smooth"] == 1

    def test_new_samples_recompute(self, graph, counting):
        """Different samples are smoothed again."""
        graph.render(800)
        graph.set_samples(make_samples([1.0, 2.0]))
        frame = graph.render(800)

        assert counting["smooth"] == 2
        assert len(frame.samples) == 2


class TestRender:
    """Tests for the render frame."""

    def test_frame_contents(self, graph):
        """The frame carries samples, lanes, bars and masks."""
        frame = graph.render(800)

        assert len(frame.samples) == 10
        assert all(d.value == pytest.approx(100.0) for d in frame.samples)
        assert graph.lane_count == 2
        assert len(frame.bars) == 3
        assert frame.solid == [False] * 6 + [True] * 4
        assert frame.provisional == [True] * 7 + [False] * 3
        assert frame.show_bands
        assert frame.overlay is None
        assert frame.geometry.graph_height == 175 - 2 * 14

    def test_value_domain_covers_outer_band(self, graph):
        """The value axis tops out at value + 2 stddev."""
        frame = graph.render(800)

        assert frame.mapper.value_scale.domain[1] == pytest.approx(120.0)

    def test_proportion_hides_bands(self, constant_samples):
        """Proportion charts plot counts without bands."""
        graph = DateGraph(ChartOptions(metric_kind="binomial"), samples=constant_samples)

        frame = graph.render(800)

        assert not frame.show_bands
        assert frame.mapper.value_scale.domain[1] == 50.0

    def test_overlay_for_highlight(self, graph):
        """A highlighted experiment gets a full-height overlay."""
        graph.set_highlight("A")

        frame = graph.render(800)

        assert frame.overlay is not None
        assert frame.overlay.height == frame.geometry.graph_height

    def test_empty_graph(self):
        """An empty chart renders without errors."""
        graph = DateGraph()

        frame = graph.render(800)

        assert frame.samples == []
        assert frame.bars == []
        assert graph.on_pointer_move(100, 800) is None


class TestPointer:
    """Tests for pointer handling through the facade."""

    def test_probe_and_tooltip(self, graph):
        """Probing a warmed-up sample yields tooltip content."""
        result = graph.on_pointer_move(10_000, 800)

        assert result.index == 9
        tip = graph.probe_tooltip()
        assert tip is not None
        assert tip.smoothed
        assert tip.value == pytest.approx(100.0)

    def test_warmup_probe_has_no_tooltip(self, graph):
        """Warm-up samples can be probed but show no tooltip."""
        result = graph.on_pointer_move(0, 800)

        assert result.sample.out_of_range
        assert graph.probe_tooltip() is None

    def test_leave(self, graph):
        """Leaving the chart clears the probe."""
        graph.on_pointer_move(100, 800)
        graph.on_pointer_leave()

        assert graph.probe is None
        assert graph.probe_tooltip() is None

    def test_highlight_tooltip(self, graph):
        """Tooltip content for the highlighted experiment."""
        assert graph.highlight_tooltip() is None

        graph.set_highlight("C")

        assert graph.highlight_tooltip().id == "C"


class TestEndToEnd:
    """Ten constant days smoothed weekly."""

    def test_constant_week_scenario(self):
        """Every value stays 100; only the first six are out of range."""
        graph = DateGraph(
            ChartOptions(smoothing="week", aggregation="avg"),
            samples=make_samples([100.0] * 10, stddev=10.0, count=50.0),
            records=[make_record("exp", 2, 8, result="won"), make_record("draft", 0, 9, status="draft")],
        )

        frame = graph.render(600)

        assert [d.value for d in frame.samples] == pytest.approx([100.0] * 10)
        assert [d.out_of_range for d in frame.samples] == [True] * 6 + [False] * 4
        assert [i.id for i in frame.intervals] == ["exp"]
        assert frame.bars[0].rect.x == round(2 / 9 * frame.geometry.inner_width)


class TestHighlightWiring:
    """Hover state drives the highlight id."""

    @pytest.mark.asyncio
    async def test_hover_highlights_and_clears(self, constant_samples, overlapping_records):
        """Entering a bar highlights it; leaving clears it after the delay."""
        graph = DateGraph(ChartOptions(highlight_delay=0.05), samples=constant_samples, records=overlapping_records)

        graph.highlight.enter("B")
        assert graph.highlight_id == "B"
        assert graph.render(800).overlay is not None

        graph.highlight.leave()
        await asyncio.sleep(0.1)

        assert graph.highlight_id is None
        assert graph.render(800).overlay is None

    def test_option_change_updates_delay(self):
        """Replacing the options carries the new highlight delay over."""
        graph = DateGraph()
        assert graph.highlight.delay == 0.6

        graph.options = ChartOptions(highlight_delay=5.0)

        assert graph.highlight.delay == 5.0
