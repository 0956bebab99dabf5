"""
Experiment status, result and color enumerations.

Interval records arrive with free-form status/result strings; these enums
name the values the banding step gives meaning to.
"""

from enum import Enum


class ExperimentStatus(Enum):
    """Experiment status enumeration.

    - draft: never started, never drawn
    - running: actively collecting data, end defaults to now
    - stopped: finished
    """

    DRAFT = "draft"
    RUNNING = "running"
    STOPPED = "stopped"


class ExperimentResult(Enum):
    """Experiment result enumeration."""

    WON = "won"
    LOST = "lost"
    DNF = "dnf"
    INCONCLUSIVE = "inconclusive"


class IntervalColor(Enum):
    """Bar color of a laned interval.

    A won/lost result takes precedence over the running status color.
    """

    DEFAULT = "rgb(136, 132, 216)"
    RUNNING = "rgb(206, 181, 20)"
    WON = "rgb(20, 206, 134)"
    LOST = "rgb(199, 51, 51)"

    @classmethod
    def from_status_and_result(cls, status: str | None, result: str | None) -> "IntervalColor":
        """Pick the bar color for a status/result pair.

        Args:
            status: Experiment status string
            result: Experiment result string (optional)

        Returns:
            IntervalColor: Result color when won/lost, else status color
        """
        if result == ExperimentResult.WON.value:
            return cls.WON
        if result == ExperimentResult.LOST.value:
            return cls.LOST
        if status == ExperimentStatus.RUNNING.value:
            return cls.RUNNING
        return cls.DEFAULT
