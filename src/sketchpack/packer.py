import logging
import numpy as np
from typing import Iterator, List, Optional, Sequence, Union

from .config import PackingConfig, PackingProgress
from .geometry import Circle, PlacedSet, Region, collides

logger = logging.getLogger(__name__)

# How often (in attempted slots) verbose runs report progress
PROGRESS_INTERVAL = 50

Placed = Union[PlacedSet, Sequence[Circle]]


def find_seed(
    region: Region,
    placed: Placed,
    config: PackingConfig,
    rng: np.random.Generator,
) -> Optional[Circle]:
    """
    Look for a spot where a minimum-radius circle fits.

    Returns the first random candidate that passes the collision test, or
    None once ``config.max_attempts_per_circle`` candidates have all failed.
    """
    template = Circle.new(float(config.min_radius)).with_weight(config.stroke_weight)

    for _ in range(config.max_attempts_per_circle):
        x, y = region.sample_point(rng)
        candidate = template.with_position(x, y)
        if not collides(candidate, placed, region):
            return candidate

    return None


def grow(seed: Circle, region: Region, placed: Placed, config: PackingConfig) -> Circle:
    """
    Enlarge a seed one unit at a time until it first collides, then back off a step.

    A seed that never collides below ``config.max_radius`` ends at
    ``max_radius - 1``. The result is never smaller than ``config.min_radius``.
    """
    circle = seed
    for radius in range(config.min_radius, config.max_radius):
        candidate = seed.with_radius(float(radius))
        if collides(candidate, placed, region):
            # Clamp: a collision at min_radius itself keeps the seed's radius
            accepted = max(radius - 1, config.min_radius)
            return seed.with_radius(float(accepted))
        circle = candidate

    return circle


class CirclePacker:
    """Greedily packs randomly seeded, grown circles into a rectangular region."""

    def __init__(
        self,
        region: Region,
        config: Optional[PackingConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.region = region
        self.config = config or PackingConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.placed = PlacedSet()
        self.progress = PackingProgress(target_count=self.config.target_count)

    def _reset(self) -> None:
        self.placed = PlacedSet()
        self.progress = PackingProgress(target_count=self.config.target_count)

    def _try_create_circle(self) -> Optional[Circle]:
        seed = find_seed(self.region, self.placed, self.config, self.rng)
        if seed is None:
            return None

        circle = grow(seed, self.region, self.placed, self.config)

        assert self.config.min_radius <= circle.radius < self.config.max_radius, \
            f"grown radius {circle.radius} outside [{self.config.min_radius}, {self.config.max_radius})"
        assert not collides(circle, self.placed, self.region), \
            f"grown circle {circle.as_tuple()} collides with the placed set"

        return circle

    def generate(self) -> Iterator[Circle]:
        """
        Attempt exactly ``target_count`` slots, yielding each circle as it is placed.

        A slot whose seed search runs out of attempts is skipped, not retried,
        so a saturated region simply yields fewer circles.
        """
        self._reset()

        for _ in range(self.config.target_count):
            circle = self._try_create_circle()
            self.progress.attempted += 1

            if circle is not None:
                self.placed.add(circle)
                self.progress.circles_placed += 1
                yield circle
            else:
                self.progress.failed_slots += 1

            if self.config.verbose and self.progress.attempted % PROGRESS_INTERVAL == 0:
                logger.info("%s", self.progress)

        if self.config.verbose:
            logger.info("Done! %s", self.progress)
        else:
            logger.debug("Done! %s", self.progress)

    def pack(self) -> List[Circle]:
        """Pack circles and return them as a list."""
        return list(self.generate())


def pack(
    region: Region,
    config: Optional[PackingConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Circle]:
    """Run one packing pass over ``region`` and return the placed circles in order."""
    return CirclePacker(region, config, rng).pack()
