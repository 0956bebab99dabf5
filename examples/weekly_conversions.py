"""
Sample script that lays out a conversion chart with experiment annotations.
Generates 60 days of noisy conversions, smooths them weekly and prints the
resulting lanes, bars and a few pointer probes.
"""

import math
import random
from datetime import datetime, timedelta, timezone

import metricgraph
from metricgraph.tooltip import interval_tooltip


def generate_samples(days: int, start: datetime) -> list[metricgraph.Sample]:
    """
    Generate daily conversion samples with a weekly cycle and noise.

    Args:
        days: Number of days
        start: First day

    Returns:
        Chronologically ordered samples
    """
    samples = []
    for i in range(days):
        weekly = 0.02 * math.sin(i * 2 * math.pi / 7)
        rate = max(0.0, 0.12 + weekly + random.gauss(0, 0.01))
        visitors = random.randint(800, 1200)
        samples.append(
            metricgraph.Sample(
                timestamp=start + timedelta(days=i),
                value=rate,
                stddev=math.sqrt(rate * (1 - rate) / visitors),
                count=visitors,
            )
        )
    return samples


def generate_experiments(start: datetime) -> list[metricgraph.IntervalRecord]:
    """Create a handful of overlapping experiments."""

    def phase(first: int, last: int | None) -> dict:
        return {
            "dateStarted": (start + timedelta(days=first)).isoformat(),
            "dateEnded": (start + timedelta(days=last)).isoformat() if last is not None else None,
        }

    payloads = [
        {"id": "exp_checkout", "name": "Checkout button", "status": "stopped", "results": "won", "phases": [phase(3, 20)]},
        {"id": "exp_pricing", "name": "Pricing page", "status": "stopped", "results": "lost", "phases": [phase(10, 25)]},
        {"id": "exp_banner", "name": "Promo banner", "status": "stopped", "phases": [phase(22, 35)]},
        {"id": "exp_onboarding", "name": "Onboarding flow", "status": "running", "phases": [phase(40, None)]},
        {"id": "exp_draft", "name": "Not started", "status": "draft", "phases": []},
    ]
    return [metricgraph.IntervalRecord.model_validate(p) for p in payloads]


def main() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)

    graph = metricgraph.DateGraph(metricgraph.ChartOptions(smoothing="week", aggregation="avg"))
    graph.set_samples(generate_samples(60, start))
    graph.set_records(generate_experiments(start))

    frame = graph.render(width=800)
    print(f"Graph height: {frame.geometry.graph_height}px, lanes: {graph.lane_count}")

    for bar in frame.bars:
        print(f"  {bar.interval_id:<16} lane y={bar.rect.y:>4} x={bar.rect.x:>4} width={bar.rect.width:>4} color={bar.color.value}")

    for px in (0, 200, 400, 700):
        probe = graph.on_pointer_move(px, width=800)
        tip = graph.probe_tooltip()
        if probe is None:
            continue
        label = f"{tip.value_label}={tip.value:.4f}" if tip else "warming up"
        print(f"  pointer x={px:>3} -> sample #{probe.index} ({label})")

    graph.set_highlight("exp_pricing")
    tip = interval_tooltip(next(i for i in graph.intervals if i.id == "exp_pricing"))
    print(f"Highlighted: {tip.name} ({tip.result})")


if __name__ == "__main__":
    main()
