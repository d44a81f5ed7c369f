"""Shared pieces of the interpolation engines: cache state, node set, interface."""

import bisect
from abc import ABC, abstractmethod
from enum import Enum

from core.config import EPSILON
from core.errors import DuplicateXError, NullInputError
from core.point import Point


class CacheState(Enum):
    FRESH = "fresh"
    DIRTY = "dirty"


def sort_points(points) -> list[Point]:
    """Validate a point collection and return it as a new list sorted by x."""
    if points is None:
        raise NullInputError("Points list cannot be None")
    points = list(points)
    if any(p is None for p in points):
        raise NullInputError("Points list cannot contain None")
    return sorted(points, key=lambda p: p.x)


def check_distinct_x(sorted_points: list[Point], epsilon: float = EPSILON):
    """Raise DuplicateXError if two adjacent x-values are within epsilon."""
    for prev, cur in zip(sorted_points, sorted_points[1:]):
        if abs(cur.x - prev.x) < epsilon:
            raise DuplicateXError(cur.x)


class NodeSet:
    """Points kept sorted ascending by x, with no two x-values within epsilon.

    Validation always happens before mutation, so a failed insert leaves
    the set untouched.
    """

    def __init__(self, sorted_points: list[Point] | None = None, epsilon: float = EPSILON):
        self.epsilon = epsilon
        self._points: list[Point] = list(sorted_points or [])
        self._xs: list[float] = [p.x for p in self._points]

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    @property
    def xs(self) -> list[float]:
        return list(self._xs)

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self._points]

    def to_list(self) -> list[Point]:
        return list(self._points)

    def insertion_index(self, x: float) -> int:
        return bisect.bisect_left(self._xs, x)

    def find_x(self, x: float) -> int | None:
        """Index of the node whose x is within epsilon of x, if any."""
        i = self.insertion_index(x)
        for j in (i - 1, i):
            if 0 <= j < len(self._xs) and abs(self._xs[j] - x) < self.epsilon:
                return j
        return None

    def value_at_node(self, x: float) -> float | None:
        """y of the node sitting at x, or None when x is not a node."""
        j = self.find_x(x)
        return None if j is None else self._points[j].y

    def constant_y(self) -> bool:
        """True when every y is within epsilon of the first one."""
        if not self._points:
            return True
        first = self._points[0].y
        return all(abs(p.y - first) <= self.epsilon for p in self._points)

    def check_insertable(self, point: Point) -> int:
        """Sorted index `point` would take; raises if it cannot be inserted."""
        if point is None:
            raise NullInputError("Point cannot be None")
        if self.find_x(point.x) is not None:
            raise DuplicateXError(point.x)
        return self.insertion_index(point.x)

    def insert(self, point: Point) -> int:
        """Insert at the sorted position and return that index."""
        i = self.check_insertable(point)
        self._points.insert(i, point)
        self._xs.insert(i, point.x)
        return i

    def merge(self, sorted_points: list[Point]):
        """Merge an already validated, sorted batch that collides with nothing."""
        merged = sorted(self._points + sorted_points, key=lambda p: p.x)
        self._points = merged
        self._xs = [p.x for p in merged]

    def remove(self, point: Point) -> bool:
        """Remove the first point equal to `point`; report whether one was found."""
        for i, p in enumerate(self._points):
            if p == point:
                del self._points[i]
                del self._xs[i]
                return True
        return False


class Interpolator(ABC):
    """What every interpolation engine offers its callers."""

    @abstractmethod
    def evaluate(self, x: float) -> float:
        ...

    @property
    @abstractmethod
    def degree(self) -> int:
        ...

    @property
    @abstractmethod
    def coefficients(self) -> list[float]:
        ...

    @property
    @abstractmethod
    def points(self) -> list[Point]:
        ...

    @abstractmethod
    def add_point(self, point: Point):
        ...

    def __call__(self, x: float) -> float:
        return self.evaluate(x)
