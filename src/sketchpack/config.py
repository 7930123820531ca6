"""
Configuration and type definitions for circle packing.
"""

import numpy as np
from dataclasses import dataclass, replace
from numbers import Integral, Real
from typing import Any, Optional, Tuple

# Type aliases
Point = np.ndarray
Color = Tuple[float, float, float, float]  # (r, g, b, a)


class PackingConfigError(ValueError):
    """Raised when a packing configuration violates its ordering constraints."""


# External option names mapped onto config fields
OPTION_NAMES = {
    "line_width": "stroke_weight",
    "min_radius": "min_radius",
    "max_radius": "max_radius",
    "total_circles": "target_count",
    "create_circle_attempts": "max_attempts_per_circle",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class PackingConfig:
    """
    Configuration parameters for the circle packing algorithm.

    Basic parameters:
        min_radius: Radius every seed is placed at, and the smallest accepted radius
        max_radius: Exclusive upper bound for grown radii
        stroke_weight: Line width handed through to the drawing side

    Budget:
        target_count: Number of placement slots attempted in one run
        max_attempts_per_circle: Random tries per slot before giving up on it

    Reproducibility:
        seed: Seed for the default random generator (None draws fresh entropy)

    Output:
        verbose: Log progress at INFO level
    """
    # Basic parameters
    min_radius: int = 2
    max_radius: int = 250
    stroke_weight: float = 2.0

    # Budget
    target_count: int = 1000
    max_attempts_per_circle: int = 500

    # Reproducibility
    seed: Optional[int] = None

    # Output
    verbose: bool = False

    def __post_init__(self) -> None:
        for name in ("min_radius", "max_radius", "target_count", "max_attempts_per_circle"):
            value = getattr(self, name)
            if not _is_int(value):
                raise PackingConfigError(f"{name} must be an integer, got {value!r}")

        if self.min_radius < 1:
            raise PackingConfigError(f"min_radius must be >= 1, got {self.min_radius}")
        if self.max_radius <= self.min_radius:
            raise PackingConfigError(
                f"max_radius ({self.max_radius}) must be greater than min_radius ({self.min_radius})"
            )
        if self.target_count < 0:
            raise PackingConfigError(f"target_count must be >= 0, got {self.target_count}")
        if self.max_attempts_per_circle < 1:
            raise PackingConfigError(
                f"max_attempts_per_circle must be >= 1, got {self.max_attempts_per_circle}"
            )
        if not isinstance(self.stroke_weight, Real) or isinstance(self.stroke_weight, bool):
            raise PackingConfigError(f"stroke_weight must be a number, got {self.stroke_weight!r}")
        if self.stroke_weight < 0:
            raise PackingConfigError(f"stroke_weight must be >= 0, got {self.stroke_weight}")
        if self.seed is not None and not _is_int(self.seed):
            raise PackingConfigError(f"seed must be an integer or None, got {self.seed!r}")

    @classmethod
    def from_options(cls, **options: Any) -> "PackingConfig":
        """Build a config from the user-facing option names.

        ``line_width``, ``total_circles`` and ``create_circle_attempts`` are
        translated to their field names; anything else is passed through.
        """
        kwargs = {OPTION_NAMES.get(key, key): value for key, value in options.items()}
        return cls(**kwargs)

    def replace(self, **changes: Any) -> "PackingConfig":
        """Return a new, re-validated config with some fields replaced."""
        return replace(self, **changes)

    @property
    def radius_steps(self) -> int:
        return self.max_radius - self.min_radius


@dataclass
class PackingProgress:
    """Tracks the current state of a packing run."""
    target_count: int = 0
    attempted: int = 0
    circles_placed: int = 0
    failed_slots: int = 0

    @property
    def progress_ratio(self) -> float:
        """Share of the slot budget used (0.0 = just started, 1.0 = done)."""
        return self.attempted / self.target_count if self.target_count > 0 else 1.0

    @property
    def done(self) -> bool:
        return self.attempted >= self.target_count

    def __str__(self) -> str:
        return (
            f"Placed: {self.circles_placed} | Failed: {self.failed_slots} | "
            f"Slots: {self.attempted}/{self.target_count} ({self.progress_ratio:.0%})"
        )
