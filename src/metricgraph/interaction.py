"""
Pointer interaction state.

``PointerProbe`` answers pointer moves with the nearest display sample.
``HighlightState`` tracks which experiment is highlighted and clears it a short
while after the pointer leaves, unless the pointer comes back first. Both live
on the presentation side; the core functions only ever receive a highlight id.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from metricgraph.models import DisplaySample
from metricgraph.scales import ScaleMapper

logger = logging.getLogger(__name__)

__all__ = ["HighlightState", "PointerProbe", "ProbeResult"]


class ProbeResult(BaseModel):
    """Pointer probe answer: indicator position and the probed sample."""

    model_config = ConfigDict(frozen=True)

    pixel_x: float
    pixel_y: float
    index: int
    sample: DisplaySample


class PointerProbe:
    """Maps pointer positions to display samples for one render pass.

    Attributes:
        current: Result of the last pointer move, None after the pointer left.
    """

    def __init__(self, samples: Sequence[DisplaySample], mapper: ScaleMapper) -> None:
        self._samples = samples
        self._mapper = mapper
        self.current: ProbeResult | None = None

    def on_pointer_move(self, pixel_x: float) -> ProbeResult | None:
        """Probe the sample under ``pixel_x`` (relative to the plotting area).

        Returns:
            ProbeResult, or None when there are no samples
        """
        count = len(self._samples)
        index = self._mapper.pixel_x_to_sample(pixel_x, count)
        if index is None:
            self.current = None
            return None

        sample = self._samples[index]
        self.current = ProbeResult(
            pixel_x=self._mapper.sample_x(index, count),
            pixel_y=self._mapper.value_to_y(sample.value),
            index=index,
            sample=sample,
        )
        return self.current

    def on_pointer_leave(self) -> None:
        """Hide the probe."""
        self.current = None


class HighlightState:
    """Highlighted experiment id with a delayed, cancellable clear.

    ``leave`` schedules the clear on the running asyncio loop, so it must be
    called from within one.
    """

    def __init__(self, delay: float = 0.6, on_change: Callable[[str | None], None] | None = None) -> None:
        """Initialize the highlight state.

        Args:
            delay: Seconds between ``leave`` and the highlight clearing
            on_change: Called with the new highlight id whenever it changes
        """
        self._delay = delay
        self._on_change = on_change
        self._highlight_id: str | None = None
        self._pending: asyncio.TimerHandle | None = None

    @property
    def highlight_id(self) -> str | None:
        """Currently highlighted experiment id."""
        return self._highlight_id

    @property
    def delay(self) -> float:
        """Seconds between ``leave`` and the highlight clearing."""
        return self._delay

    @delay.setter
    def delay(self, delay: float) -> None:
        # Takes effect on the next leave
        self._delay = delay

    @property
    def clear_pending(self) -> bool:
        """True while a delayed clear is scheduled."""
        return self._pending is not None

    def enter(self, interval_id: str) -> None:
        """Pointer entered an experiment bar."""
        self.cancel()
        self._set(interval_id)

    def hold(self) -> None:
        """Pointer entered the tooltip or overlay; keep the current highlight."""
        self.cancel()

    def leave(self) -> None:
        """Pointer left a highlight target; clear after the delay."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._pending = loop.call_later(self._delay, self._expire)

    def cancel(self) -> None:
        """Drop a scheduled clear, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _expire(self) -> None:
        self._pending = None
        self._set(None)

    def _set(self, interval_id: str | None) -> None:
        if interval_id == self._highlight_id:
            return
        logger.debug("Highlight changed: %s -> %s", self._highlight_id, interval_id)
        self._highlight_id = interval_id
        if self._on_change is not None:
            self._on_change(interval_id)
