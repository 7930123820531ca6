"""
sketchpack - Greedy random circle packing for generative-art sketches.

Usage:
    from sketchpack import Region, PackingConfig, pack

    # Basic usage
    circles = pack(Region.from_size(800, 600), PackingConfig())

    # With configuration (option names as a sketch exposes them)
    config = PackingConfig.from_options(
        line_width=2.0, min_radius=2, max_radius=250,
        total_circles=1000, create_circle_attempts=500,
    )
    circles = pack(Region.from_size(800, 600), config)

    # Reproducible runs
    packer = CirclePacker(Region.from_bounds(0, 0, 100, 100), config, rng=np.random.default_rng(7))
    for circle in packer.generate():
        draw(circle.outline(), circle.weight, circle.color)

Each placement slot seeds a minimum-radius circle at a random collision-free
spot, then grows it one unit at a time until it would touch a neighbor or
the region edge. Drawing is left to the caller.
"""

from .config import PackingConfig, PackingConfigError, PackingProgress, Color, Point
from .geometry import Circle, PlacedSet, Region, collides
from .packer import CirclePacker, find_seed, grow, pack

__all__ = [
    "CirclePacker",
    "PackingConfig",
    "PackingConfigError",
    "PackingProgress",
    "Circle",
    "PlacedSet",
    "Region",
    "collides",
    "find_seed",
    "grow",
    "pack",
    "Color",
    "Point",
]

__version__ = "0.1.0"
