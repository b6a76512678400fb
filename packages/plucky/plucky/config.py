"""Underline configuration and host-attribute parsing."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace

from plucky.types import ConfigError

# host attribute name -> config field
ATTRIBUTE_FIELDS: dict[str, str] = {
    "amplitude": "amplitude",
    "num-half-waves": "num_half_waves",
    "pull-duration": "pull_duration",
    "release-duration": "release_duration",
    "decay-freq": "decay_freq",
}


@dataclass(frozen=True)
class PluckConfig:
    """Immutable animation settings, swapped wholesale between sessions.

    Attributes:
        amplitude: Maximum wave amplitude, in the host's length unit (em).
        num_half_waves: Number of half wavelengths across the underline.
        pull_duration: Duration of the pull (pointer enter), ms.
        release_duration: Duration of the release (pointer leave), ms.
        decay_freq: Oscillation cycles before the release is fully damped.
    """

    amplitude: float = 0.3
    num_half_waves: int = 4
    pull_duration: float = 120.0
    release_duration: float = 3500.0
    decay_freq: float = 8.0

    def validate(self) -> PluckConfig:
        """Return self, or raise ConfigError on the first bad field."""
        if not math.isfinite(self.amplitude) or self.amplitude < 0:
            raise ConfigError(
                "amplitude", f"amplitude must be a finite number >= 0, got {self.amplitude!r}"
            )
        if isinstance(self.num_half_waves, bool) or not isinstance(self.num_half_waves, int):
            raise ConfigError(
                "num_half_waves",
                f"num_half_waves must be an integer, got {self.num_half_waves!r}",
            )
        if self.num_half_waves <= 0:
            raise ConfigError(
                "num_half_waves", f"num_half_waves must be positive, got {self.num_half_waves}"
            )
        for name in ("pull_duration", "release_duration", "decay_freq"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(name, f"{name} must be a finite number > 0, got {value!r}")
        return self

    def with_attribute(self, name: str, raw: str) -> PluckConfig:
        """Apply one host attribute, returning a new validated config.

        Unknown attribute names leave the config unchanged.
        """
        field = ATTRIBUTE_FIELDS.get(name)
        if field is None:
            return self
        value = _parse_number(field, raw)
        if field == "num_half_waves":
            if not value.is_integer():
                raise ConfigError(field, f"{name} must be a whole number, got {raw!r}")
            return replace(self, num_half_waves=int(value)).validate()
        return replace(self, **{field: value}).validate()


def _parse_number(field: str, raw: str) -> float:
    try:
        return float(raw.strip())
    except (AttributeError, ValueError):
        raise ConfigError(field, f"{field} is not a number: {raw!r}") from None
