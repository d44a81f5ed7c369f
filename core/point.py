"""Immutable 2D interpolation node."""

from core.config import EPSILON
from core.formatting import format_fixed


class Point:
    """Sample point (x, y). Equality is epsilon-tolerant on both coordinates."""

    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (abs(self._x - other._x) < EPSILON
                and abs(self._y - other._y) < EPSILON)

    def __hash__(self):
        # Epsilon equality is not transitive, so no coordinate-derived hash can
        # agree with it; every point shares one bucket.
        return hash(Point)

    def __str__(self):
        return f"({format_fixed(self._x)}, {format_fixed(self._y)})"

    def __repr__(self):
        return f"Point(x={self._x!r}, y={self._y!r})"
