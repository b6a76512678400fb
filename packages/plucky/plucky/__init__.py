"""plucky - A wavy underline that is plucked on hover and rings out on leave."""
from __future__ import annotations

from plucky.config import PluckConfig
from plucky.controller import AnimationController, AnimationState, StepResult, step_pull, step_release
from plucky.motion import ReducedMotionPolicy, ReducedMotionSource, effective_max_amplitude
from plucky.scheduler import FrameLoop, FrameScheduler, ManualScheduler
from plucky.timing import decay, make_linear_interpolator, pull_ease
from plucky.types import ConfigError, Phase
from plucky.underline import PluckyUnderline, SvgPathSink
from plucky.waveform import CubicSegment, generate_wave_path, wave_segments

__all__ = [
    "AnimationController",
    "AnimationState",
    "StepResult",
    "step_pull",
    "step_release",
    "PluckConfig",
    "ConfigError",
    "Phase",
    "ReducedMotionPolicy",
    "ReducedMotionSource",
    "effective_max_amplitude",
    "FrameScheduler",
    "ManualScheduler",
    "FrameLoop",
    "pull_ease",
    "decay",
    "make_linear_interpolator",
    "CubicSegment",
    "generate_wave_path",
    "wave_segments",
    "PluckyUnderline",
    "SvgPathSink",
]
