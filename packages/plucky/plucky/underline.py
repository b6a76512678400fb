"""Host-facing glue: event dispatch, attribute updates and SVG output."""
from __future__ import annotations

import logging
from html import escape

from plucky.config import ATTRIBUTE_FIELDS, PluckConfig
from plucky.controller import AnimationController
from plucky.motion import ReducedMotionSource
from plucky.scheduler import FrameLoop, FrameScheduler
from plucky.types import ConfigError

logger = logging.getLogger(__name__)

OBSERVED_ATTRIBUTES: tuple[str, ...] = (*ATTRIBUTE_FIELDS, "touch-demo")

SVG_TEMPLATE = (
    '<svg viewBox="0 0 1 1" preserveAspectRatio="none" part="line-svg">'
    '<path part="line-path" d="{d}" /></svg>'
)


class SvgPathSink:
    """Path sink that keeps the latest path and renders it as SVG markup."""

    def __init__(self) -> None:
        self.path = ""
        self.updates = 0

    def __call__(self, path: str) -> None:
        self.path = path
        self.updates += 1

    def render(self) -> str:
        return SVG_TEMPLATE.format(d=escape(self.path, quote=True))


class PluckyUnderline:
    """One underline instance wired to its controller.

    Pointer events map onto the two triggers through ``EVENT_TRIGGERS``;
    anything else is ignored.
    """

    EVENT_TRIGGERS = {
        "pointerenter": "pull",
        "pointerleave": "release",
    }

    def __init__(
        self,
        config: PluckConfig | None = None,
        scheduler: FrameScheduler | None = None,
        reduced_motion: ReducedMotionSource | None = None,
    ) -> None:
        self.sink = SvgPathSink()
        self.scheduler = scheduler if scheduler is not None else FrameLoop()
        self.controller = AnimationController(
            (config or PluckConfig()).validate(),
            self.scheduler,
            self.sink,
            reduced_motion,
        )

    @property
    def config(self) -> PluckConfig:
        return self.controller.config

    def connected(self) -> None:
        self.controller.connect()

    def disconnected(self) -> None:
        self.controller.disconnect()

    def handle_event(self, event_type: str) -> bool:
        """Dispatch a pointer event. Returns False for unhandled types."""
        trigger = self.EVENT_TRIGGERS.get(event_type)
        if trigger is None:
            return False
        getattr(self.controller, trigger)()
        return True

    def attribute_changed(self, name: str, old: str | None, new: str | None) -> None:
        """Apply a changed host attribute. Rejected values raise ConfigError."""
        if new == old or new is None:
            return
        try:
            config = self.controller.config.with_attribute(name, new)
        except ConfigError:
            logger.warning("rejected %s=%r", name, new)
            raise
        self.controller.config = config

    def render(self) -> str:
        return self.sink.render()
