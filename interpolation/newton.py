"""Newton interpolation via divided differences.

Single inserts only mark the cached standard form stale; batch inserts and
removals rebuild right away. A rebuild is O(n^2): one pass for the divided
differences and one for the expansion to standard form.
"""

import logging

from core.config import EPSILON
from core.errors import DuplicateXError, NullInputError
from core.point import Point
from core.polynomial import Polynomial, format_polynomial
from interpolation.base import (CacheState, Interpolator, NodeSet,
                                check_distinct_x, sort_points)

logger = logging.getLogger(__name__)


def divided_differences(xs: list[float], ys: list[float]) -> list[float]:
    """Top row of the divided-difference table, f[x_0..x_i] for each i.

    Computed in place, column by column, walking i downwards so each step
    still sees the previous order's value at i - 1.
    """
    n = len(xs)
    d = list(ys)
    for j in range(1, n):
        for i in range(n - 1, j - 1, -1):
            d[i] = (d[i] - d[i - 1]) / (xs[i] - xs[i - j])
    return d


def newton_expand(xs: list[float], dd: list[float]) -> list[float]:
    """Expand sum_i dd[i] * prod_{j<i} (x - x_j) into standard form.

    `basis` holds prod_{j<i} (x - x_j); each row is the previous one shifted
    up a degree minus x_{i-1} times the previous one.
    """
    n = len(dd)
    if n == 0:
        return [0.0]
    result = [0.0] * n
    basis = [1.0]
    result[0] = dd[0]
    for i in range(1, n):
        shift = xs[i - 1]
        row = [0.0] * (i + 1)
        for k, c in enumerate(basis):
            row[k + 1] += c
            row[k] -= shift * c
        basis = row
        for k, c in enumerate(basis):
            result[k] += dd[i] * c
    return result


class NewtonPolynomial(Interpolator):
    """Interpolating polynomial that can grow or shrink one node at a time."""

    def __init__(self, points: list[Point] | None = None, *, epsilon: float = EPSILON):
        self.epsilon = epsilon
        self._nodes = NodeSet(epsilon=epsilon)
        self._dd: list[float] = []
        self._poly = Polynomial(epsilon=epsilon)
        self.state = CacheState.FRESH
        if points:
            self.add_points(points)

    def _rebuild(self):
        if not self._nodes:
            self._dd = []
            self._poly._replace_coefficients([0.0])
        else:
            xs = self._nodes.xs
            self._dd = divided_differences(xs, self._nodes.ys)
            self._poly._replace_coefficients(newton_expand(xs, self._dd))
        self.state = CacheState.FRESH
        logger.debug("Rebuilt Newton form for %d points", len(self._nodes))

    def _ensure_fresh(self):
        if self.state is CacheState.DIRTY:
            self._rebuild()

    def _check_new_x(self, x: float):
        if self._nodes.find_x(x) is not None:
            raise DuplicateXError(x)
        for existing in self._nodes:
            if abs(existing.x - x) < self.epsilon:
                raise DuplicateXError(x)

    def add_point(self, point: Point):
        """Insert a node at its sorted position. The rebuild is deferred."""
        if point is None:
            raise NullInputError("Point cannot be None")
        self._check_new_x(point.x)
        index = self._nodes.insert(point)
        self.state = CacheState.DIRTY
        logger.debug("Inserted %s at index %d", point, index)

    def add_points(self, points: list[Point] | None):
        """Insert a batch atomically and rebuild once.

        The whole batch is checked (None entries, duplicates within the
        batch and against stored nodes) before anything is inserted.
        """
        if not points:
            return
        batch = sort_points(points)
        check_distinct_x(batch, self.epsilon)
        for p in batch:
            self._check_new_x(p.x)

        self._nodes.merge(batch)
        self.state = CacheState.DIRTY
        logger.debug("Merged %d points", len(batch))
        self._rebuild()

    def remove_point(self, point: Point) -> bool:
        """Remove the first node equal to `point` and rebuild immediately."""
        if point is None:
            raise NullInputError("Point cannot be None")
        removed = self._nodes.remove(point)
        if removed:
            self.state = CacheState.DIRTY
            logger.debug("Removed %s", point)
            self._rebuild()
        return removed

    def evaluate(self, x: float) -> float:
        self._ensure_fresh()
        if not self._nodes:
            return 0.0
        y = self._nodes.value_at_node(x)
        if y is not None:
            return y
        return self._poly.evaluate(x)

    @property
    def degree(self) -> int:
        self._ensure_fresh()
        return max(0, len(self._nodes) - 1)

    @property
    def coefficients(self) -> list[float]:
        self._ensure_fresh()
        return self._poly.coefficients

    @property
    def points(self) -> list[Point]:
        return self._nodes.to_list()

    @property
    def divided_differences(self) -> list[float]:
        self._ensure_fresh()
        return list(self._dd)

    def __len__(self):
        return len(self._nodes)

    def __str__(self):
        self._ensure_fresh()
        if not self._nodes:
            return "0.00"
        return format_polynomial(self._poly.coefficients, self.epsilon)

    def __repr__(self):
        return f"NewtonPolynomial({self._nodes.to_list()!r})"
