"""Shared helpers for metricgraph."""

from metricgraph.utils.timestamp import ms_to_datetime, parse_to_datetime, parse_to_ms, try_parse_to_datetime

__all__ = ["ms_to_datetime", "parse_to_datetime", "parse_to_ms", "try_parse_to_datetime"]
