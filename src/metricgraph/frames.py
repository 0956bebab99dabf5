"""
Polars adapters.

Builds samples from a metric DataFrame and exports display samples, with
their uncertainty band edges, back to a DataFrame.
"""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from metricgraph.models import DisplaySample, Sample
from metricgraph.smoothing import lower_bound, upper_bound

__all__ = ["display_frame", "samples_from_frame"]


def samples_from_frame(
    df: pl.DataFrame,
    timestamp_col: str = "d",
    value_col: str = "v",
    stddev_col: str | None = "s",
    count_col: str | None = "c",
) -> list[Sample]:
    """Convert a metric DataFrame to samples, keeping row order.

    Args:
        df: DataFrame with one row per period
        timestamp_col: Datetime, Date, ISO string or UNIX ms column
        value_col: Value column
        stddev_col: Standard deviation column; ignored if None or absent
        count_col: Count column; ignored if None or absent

    Returns:
        List of samples. Null cells become missing fields.

    Raises:
        KeyError: If the timestamp or value column is missing
    """
    for col in (timestamp_col, value_col):
        if col not in df.columns:
            raise KeyError(f"Column not found: {col}")

    timestamps = df[timestamp_col].to_list()
    values = df[value_col].to_list()
    stddevs = df[stddev_col].to_list() if stddev_col and stddev_col in df.columns else [None] * len(df)
    counts = df[count_col].to_list() if count_col and count_col in df.columns else [None] * len(df)

    return [
        Sample(timestamp=ts, value=v, stddev=s, count=c)
        for ts, v, s, c in zip(timestamps, values, stddevs, counts, strict=True)
    ]


def display_frame(samples: Sequence[DisplaySample]) -> pl.DataFrame:
    """Display samples as a DataFrame with 1σ and 2σ band edges."""
    return pl.DataFrame(
        {
            "timestamp": [s.timestamp for s in samples],
            "value": [s.value for s in samples],
            "stddev": [s.stddev for s in samples],
            "count": [s.count for s in samples],
            "out_of_range": [s.out_of_range for s in samples],
            "lower_1": [lower_bound(s, 1) for s in samples],
            "upper_1": [upper_bound(s, 1) for s in samples],
            "lower_2": [lower_bound(s, 2) for s in samples],
            "upper_2": [upper_bound(s, 2) for s in samples],
        },
        schema={
            "timestamp": pl.Int64,
            "value": pl.Float64,
            "stddev": pl.Float64,
            "count": pl.Float64,
            "out_of_range": pl.Boolean,
            "lower_1": pl.Float64,
            "upper_1": pl.Float64,
            "lower_2": pl.Float64,
            "upper_2": pl.Float64,
        },
    )
