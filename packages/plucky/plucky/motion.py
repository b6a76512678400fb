"""Reduced-motion preference and the amplitude scaling it implies."""
from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

REDUCED_MOTION_SCALE = 1 / 3

_Handler = Callable[[bool], None]


def effective_max_amplitude(amplitude: float, reduced_motion: bool) -> float:
    """Peak amplitude actually used, scaled down under reduced motion."""
    return amplitude * (REDUCED_MOTION_SCALE if reduced_motion else 1)


@runtime_checkable
class ReducedMotionSource(Protocol):
    """Anything exposing the current preference and change notifications."""

    @property
    def active(self) -> bool: ...

    def subscribe(self, handler: _Handler) -> None: ...

    def unsubscribe(self, handler: _Handler) -> None: ...


class ReducedMotionPolicy:
    """In-process reduced-motion flag with change subscribers.

    Handlers are called synchronously, in subscription order, with the new
    value. Setting the current value again does not notify.
    """

    def __init__(self, active: bool = False) -> None:
        self._active = active
        self._subscribers: list[_Handler] = []

    @property
    def active(self) -> bool:
        return self._active

    def set(self, active: bool) -> None:
        if active == self._active:
            return
        self._active = active
        logger.debug("reduced motion %s", "on" if active else "off")
        for handler in list(self._subscribers):
            handler(active)

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: _Handler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass
