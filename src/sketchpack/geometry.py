"""
Geometry utilities for circle packing.

Contains:
- Region: the axis-aligned rectangle circles are packed into
- Circle: immutable circle value with copy-on-write builders
- PlacedSet: append-only collection of accepted circles with cached arrays
- collides: the collision test shared by placement and growth
"""

import numpy as np
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .config import Color, Point

BLACK: Color = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle with y growing upward (top > bottom)."""
    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self) -> None:
        if not self.left < self.right:
            raise ValueError(f"Region left ({self.left}) must be less than right ({self.right})")
        if not self.bottom < self.top:
            raise ValueError(f"Region bottom ({self.bottom}) must be less than top ({self.top})")

    @classmethod
    def from_size(cls, width: float, height: float) -> "Region":
        """Region of the given size centered on the origin, like a window rect."""
        half_w, half_h = width / 2, height / 2
        return cls(left=-half_w, right=half_w, top=half_h, bottom=-half_h)

    @classmethod
    def from_bounds(cls, x_min: float, y_min: float, x_max: float, y_max: float) -> "Region":
        return cls(left=x_min, right=x_max, top=y_max, bottom=y_min)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return np.array([(self.left + self.right) / 2, (self.bottom + self.top) / 2])

    def sample_point(self, rng: np.random.Generator) -> Tuple[float, float]:
        """Draw a uniformly random point inside the region's extents (x first, then y)."""
        x = float(rng.uniform(self.left, self.right))
        y = float(rng.uniform(self.bottom, self.top))
        return x, y

    def contains(self, circle: "Circle") -> bool:
        """True if the circle lies strictly inside; touching an edge does not count."""
        return (
            circle.x + circle.radius < self.right
            and circle.x - circle.radius > self.left
            and circle.y + circle.radius < self.top
            and circle.y - circle.radius > self.bottom
        )


@dataclass(frozen=True)
class Circle:
    """A circle value. Builders return new circles and never touch the receiver."""
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    weight: float = 1.0
    color: Color = BLACK

    @classmethod
    def new(cls, radius: float) -> "Circle":
        return cls(radius=radius)

    @property
    def center(self) -> Point:
        return np.array([self.x, self.y])

    def with_radius(self, radius: float) -> "Circle":
        return replace(self, radius=radius)

    def with_position(self, x: float, y: float) -> "Circle":
        return replace(self, x=x, y=y)

    def with_weight(self, weight: float) -> "Circle":
        return replace(self, weight=weight)

    def with_color(self, color: Color) -> "Circle":
        return replace(self, color=color)

    def outline(self, segments: int = 360) -> np.ndarray:
        """Closed polyline around the circle, one point per step of 360/segments degrees."""
        if segments < 3:
            raise ValueError(f"segments must be >= 3, got {segments}")
        theta = np.deg2rad(np.linspace(0.0, 360.0, segments + 1))
        xs = np.sin(theta) * self.radius + self.x
        ys = np.cos(theta) * self.radius + self.y
        return np.column_stack([xs, ys])

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.radius)


class PlacedSet:
    """Insertion-ordered, append-only collection of accepted circles."""

    def __init__(self, circles: Sequence[Circle] = ()):
        self._circles: List[Circle] = list(circles)

        # Cache for numpy arrays
        self._centers_arr: Optional[np.ndarray] = None
        self._radii_arr: Optional[np.ndarray] = None
        self._cache_valid = False

    def add(self, circle: Circle) -> None:
        self._circles.append(circle)
        self._cache_valid = False

    @property
    def circles(self) -> Tuple[Circle, ...]:
        return tuple(self._circles)

    def arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Centers as an (n, 2) array and radii as an (n,) array."""
        if not self._cache_valid or self._centers_arr is None:
            self._centers_arr, self._radii_arr = _to_arrays(self._circles)
            self._cache_valid = True
        return self._centers_arr, self._radii_arr

    def __len__(self) -> int:
        return len(self._circles)

    def __iter__(self) -> Iterator[Circle]:
        return iter(self._circles)

    def __getitem__(self, index):
        return self._circles[index]

    def __repr__(self) -> str:
        return f"PlacedSet({len(self._circles)} circles)"


def _to_arrays(circles: Sequence[Circle]) -> Tuple[np.ndarray, np.ndarray]:
    if len(circles) == 0:
        return np.empty((0, 2)), np.empty(0)
    centers = np.array([(c.x, c.y) for c in circles], dtype=float)
    radii = np.array([c.radius for c in circles], dtype=float)
    return centers, radii


def overlaps_any(candidate: Circle, placed: Union[PlacedSet, Sequence[Circle]]) -> bool:
    """True if the candidate touches or overlaps any placed circle."""
    if len(placed) == 0:
        return False

    if isinstance(placed, PlacedSet):
        centers, radii = placed.arrays()
    else:
        centers, radii = _to_arrays(placed)

    distances = np.hypot(centers[:, 0] - candidate.x, centers[:, 1] - candidate.y)
    return bool(np.any(distances <= radii + candidate.radius))


def crosses_boundary(candidate: Circle, region: Region) -> bool:
    """True if the candidate touches or crosses any region edge."""
    r = candidate.radius
    if candidate.x + r >= region.right or candidate.x - r <= region.left:
        return True
    if candidate.y + r >= region.top or candidate.y - r <= region.bottom:
        return True
    return False


def collides(candidate: Circle, placed: Union[PlacedSet, Sequence[Circle]], region: Region) -> bool:
    """
    Check a candidate against the placed circles, then against the region.

    Tangency counts as a collision in both tests, so accepted circles always
    keep a strictly positive gap to each other and to the region edges.
    """
    return overlaps_any(candidate, placed) or crosses_boundary(candidate, region)
