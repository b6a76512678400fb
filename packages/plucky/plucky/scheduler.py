"""Frame schedulers: the one-shot "call me on the next frame" capability.

Callbacks receive the frame timestamp in milliseconds. A callback scheduled
while a frame is being dispatched runs on the following frame, never the
current one.
"""
from __future__ import annotations

import time
from typing import Callable, Protocol, runtime_checkable

from plucky.types import FrameCallback, FrameHandle


@runtime_checkable
class FrameScheduler(Protocol):
    def schedule(self, callback: FrameCallback) -> FrameHandle: ...

    def cancel(self, handle: FrameHandle) -> None: ...


class _FrameQueue:
    """Pending callbacks keyed by handle. Stale handles cancel as no-ops."""

    def __init__(self) -> None:
        self._next_handle: FrameHandle = 0
        self._pending: dict[FrameHandle, FrameCallback] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle: FrameHandle) -> None:
        self._pending.pop(handle, None)

    def _dispatch(self, timestamp: float) -> int:
        batch = self._pending
        self._pending = {}
        for callback in batch.values():
            callback(timestamp)
        return len(batch)


class ManualScheduler(_FrameQueue):
    """Deterministic scheduler driven by explicit timestamps.

    Used by tests and offline rendering: nothing happens until ``advance``
    or ``run`` is called.
    """

    def advance(self, timestamp: float) -> int:
        """Run every callback pending right now. Returns how many ran."""
        return self._dispatch(timestamp)

    def run(self, start: float = 0.0, step: float = 16.0, max_frames: int = 10_000) -> int:
        """Advance by ``step`` ms from ``start`` until idle. Returns frame count."""
        frames = 0
        timestamp = start
        while self._pending and frames < max_frames:
            self._dispatch(timestamp)
            timestamp += step
            frames += 1
        return frames


class FrameLoop(_FrameQueue):
    """Real-time frame loop with fixed pacing.

    Timestamps are milliseconds since the loop was created, read from
    ``clock`` (seconds). ``clock`` and ``sleep`` are injectable so tests can
    drive the loop without waiting.
    """

    def __init__(
        self,
        fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        super().__init__()
        self._fps = fps
        self._dt = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._origin = clock()

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    def now(self) -> float:
        return (self._clock() - self._origin) * 1000.0

    def step(self) -> int:
        """Dispatch one frame at the current time."""
        return self._dispatch(self.now())

    def _paced_step(self) -> None:
        start = self._clock()
        self.step()
        sleep_time = self._dt - (self._clock() - start)
        if sleep_time > 0:
            self._sleep(sleep_time)

    def run(self, n: int) -> int:
        """Run up to ``n`` paced frames, stopping early once idle."""
        frames = 0
        while frames < n and self._pending:
            self._paced_step()
            frames += 1
        return frames

    def run_until_idle(self, max_frames: int | None = None) -> int:
        frames = 0
        while self._pending:
            if max_frames is not None and frames >= max_frames:
                break
            self._paced_step()
            frames += 1
        return frames
