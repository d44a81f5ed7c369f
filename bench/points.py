"""Reproducible point-set generators for benchmarks and randomized tests."""

from core import rng
from core.point import Point

X_RANGE = 100.0
Y_RANGE = 100.0


def random_points(count: int) -> list[Point]:
    """`count` points with x and y uniform in [0, 100); x-values are unique."""
    used_x = set()
    points = []
    while len(points) < count:
        x = rng.random() * X_RANGE
        if x in used_x:
            continue
        used_x.add(x)
        points.append(Point(x, rng.random() * Y_RANGE))
    return points


def spaced_points(count: int) -> list[Point]:
    """`count` points with one x per bucket of width 100/count.

    Each x is jittered within the first 80% of its bucket, so neighbours are
    always at least 20% of a bucket apart.
    """
    step = X_RANGE / count
    points = []
    for i in range(count):
        x = i * step + rng.random() * (step * 0.8)
        points.append(Point(x, rng.random() * Y_RANGE))
    return points
