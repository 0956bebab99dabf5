"""
metricgraph exceptions module.

Contains exception classes shared by the smoothing, banding and scale modules.
"""


class ChartConfigError(ValueError):
    """Exception raised when a chart option has an unsupported value."""

    pass
