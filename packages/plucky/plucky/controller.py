"""Pull/release amplitude state machine.

The per-frame math is kept in two pure step functions so a harness can
drive it with synthetic timestamps. ``AnimationController`` owns the state,
talks to the scheduler and the sink, and guarantees that at most one frame
callback is outstanding: every trigger cancels before it schedules.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from plucky.config import PluckConfig
from plucky.motion import ReducedMotionPolicy, ReducedMotionSource, effective_max_amplitude
from plucky.scheduler import FrameScheduler
from plucky.timing import decay, make_linear_interpolator, pull_ease
from plucky.types import FrameHandle, PathSink, Phase
from plucky.waveform import generate_wave_path

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    phase: Phase = Phase.IDLE
    amplitude: float = 0.0
    max_amplitude: float = 0.0
    interpolator: Callable[[float], float] | None = None
    started_at: float | None = None
    handle: FrameHandle | None = None


@dataclass(frozen=True)
class StepResult:
    """Outcome of one frame: next state, paths to emit, keep going or not."""

    state: AnimationState
    paths: tuple[str, ...]
    running: bool


def _settle(state: AnimationState, amplitude: float, path: str, config: PluckConfig) -> StepResult:
    final = replace(
        state,
        phase=Phase.IDLE,
        amplitude=amplitude,
        interpolator=None,
        started_at=None,
        handle=None,
    )
    return StepResult(
        final, (path, generate_wave_path(amplitude, config.num_half_waves)), False
    )


def step_pull(state: AnimationState, timestamp: float, config: PluckConfig) -> StepResult:
    started_at = timestamp if state.started_at is None else state.started_at
    elapsed = timestamp - started_at
    interpolate = state.interpolator or make_linear_interpolator(
        state.amplitude, state.max_amplitude
    )

    amplitude = interpolate(pull_ease(elapsed / config.pull_duration))
    path = generate_wave_path(amplitude, config.num_half_waves)
    state = replace(state, amplitude=amplitude, started_at=started_at)

    if elapsed < config.pull_duration and amplitude < state.max_amplitude:
        return StepResult(state, (path,), True)
    return _settle(state, state.max_amplitude, path, config)


def step_release(
    state: AnimationState,
    timestamp: float,
    config: PluckConfig,
    reduced_motion: bool,
) -> StepResult:
    started_at = timestamp if state.started_at is None else state.started_at
    elapsed = timestamp - started_at

    if reduced_motion:
        # plain ease back to rest, no oscillation
        release_time = config.pull_duration
        progress = min(elapsed / release_time, 1.0)
        amplitude = pull_ease(1 - progress) * state.max_amplitude
    else:
        release_time = config.release_duration
        interpolate = state.interpolator or make_linear_interpolator(state.amplitude, 0.0)
        amplitude = interpolate(1 - decay(elapsed / release_time, config.decay_freq))

    path = generate_wave_path(amplitude, config.num_half_waves)
    state = replace(state, amplitude=amplitude, started_at=started_at)

    if elapsed < release_time:
        return StepResult(state, (path,), True)
    return _settle(state, 0.0, path, config)


class AnimationController:
    """Drives the underline amplitude through pull and release phases.

    Args:
        config: Animation settings; replace via the ``config`` property.
        scheduler: Frame scheduler providing ``schedule``/``cancel``.
        sink: Receives every path description produced.
        reduced_motion: Preference source. Read live on every release frame.
    """

    def __init__(
        self,
        config: PluckConfig,
        scheduler: FrameScheduler,
        sink: PathSink,
        reduced_motion: ReducedMotionSource | None = None,
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._sink = sink
        self._reduced_motion = (
            reduced_motion if reduced_motion is not None else ReducedMotionPolicy()
        )
        self._state = AnimationState()
        self._subscribed = False
        self._refresh_max_amplitude()
        self._subscribe()

    # --- Queries ---

    @property
    def amplitude(self) -> float:
        return self._state.amplitude

    @property
    def max_amplitude(self) -> float:
        return self._state.max_amplitude

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def is_animating(self) -> bool:
        return self._state.handle is not None

    @property
    def reduced_motion(self) -> ReducedMotionSource:
        return self._reduced_motion

    @property
    def config(self) -> PluckConfig:
        return self._config

    @config.setter
    def config(self, config: PluckConfig) -> None:
        self._config = config
        self._refresh_max_amplitude()

    # --- Triggers ---

    def connect(self) -> None:
        """Reset to rest and emit the flat baseline once."""
        self._cancel()
        self._subscribe()
        self._refresh_max_amplitude()
        self._state = replace(
            self._state, phase=Phase.IDLE, amplitude=0.0, interpolator=None
        )
        self._sink(generate_wave_path(0.0, self._config.num_half_waves))

    def disconnect(self) -> None:
        """Stop following the reduced-motion source.

        An in-flight phase is left to finish; ``connect`` subscribes again.
        """
        if self._subscribed:
            self._reduced_motion.unsubscribe(self._on_reduced_motion)
            self._subscribed = False

    def pull(self) -> None:
        self._start(Phase.PULLING, self._state.max_amplitude, self._tick_pull)

    def release(self) -> None:
        self._start(Phase.RELEASING, 0.0, self._tick_release)

    # --- Internal ---

    def _refresh_max_amplitude(self) -> None:
        self._state.max_amplitude = effective_max_amplitude(
            self._config.amplitude, self._reduced_motion.active
        )

    def _subscribe(self) -> None:
        if not self._subscribed:
            self._reduced_motion.subscribe(self._on_reduced_motion)
            self._subscribed = True

    def _on_reduced_motion(self, active: bool) -> None:
        self._refresh_max_amplitude()

    def _cancel(self) -> None:
        if self._state.handle is not None:
            self._scheduler.cancel(self._state.handle)
        self._state.handle = None
        self._state.started_at = None

    def _start(self, phase: Phase, target: float, tick: Callable[[float], None]) -> None:
        self._cancel()
        self._state.interpolator = make_linear_interpolator(self._state.amplitude, target)
        self._state.phase = phase
        logger.debug(
            "%s from %.4f to %.4f", phase.value, self._state.amplitude, target
        )
        self._state.handle = self._scheduler.schedule(tick)

    def _apply(self, result: StepResult, tick: Callable[[float], None]) -> None:
        self._state = result.state
        for path in result.paths:
            self._sink(path)
        if result.running:
            self._state.handle = self._scheduler.schedule(tick)
        else:
            logger.debug("settled at %.4f", self._state.amplitude)

    def _tick_pull(self, timestamp: float) -> None:
        self._state.handle = None
        self._apply(step_pull(self._state, timestamp, self._config), self._tick_pull)

    def _tick_release(self, timestamp: float) -> None:
        self._state.handle = None
        result = step_release(
            self._state, timestamp, self._config, self._reduced_motion.active
        )
        self._apply(result, self._tick_release)
