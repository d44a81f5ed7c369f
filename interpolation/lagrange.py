"""Lagrange interpolation in barycentric form.

Evaluation goes through the barycentric formula

    L(x) = sum_i (w_i * y_i / (x - x_i)) / sum_i (w_i / (x - x_i))

with w_i proportional to 1 / prod_{j!=i} (x_i - x_j). This costs O(n) per
call and never needs the standard form. The standard form is expanded
from the Lagrange basis in O(n^3), so it is only built when coefficients or
the string form are requested.
"""

import logging
import math

from core.config import EPSILON
from core.errors import EmptyInputError
from core.point import Point
from core.polynomial import Polynomial, format_polynomial
from interpolation.base import (CacheState, Interpolator, NodeSet,
                                check_distinct_x, sort_points)

logger = logging.getLogger(__name__)


def barycentric_weights(xs: list[float]) -> list[float]:
    """Return weights proportional to w_i = 1 / prod_{j!=i} (x_i - x_j).

    The barycentric quotient is unchanged by a common factor, so each
    difference is scaled by 4 / (x_max - x_min) and the products are carried
    as (mantissa, exponent) pairs. The result is normalised so the largest
    weight has magnitude in (1, 2]; no product can overflow or underflow on
    the way there.
    """
    n = len(xs)
    if n == 1:
        return [1.0]
    scale = 4.0 / (max(xs) - min(xs))
    mantissas = []
    exponents = []
    for i in range(n):
        mantissa, exponent = 1.0, 0
        for j in range(n):
            if i != j:
                mantissa, shift = math.frexp(mantissa * (xs[i] - xs[j]) * scale)
                exponent += shift
        mantissas.append(1.0 / mantissa)
        exponents.append(-exponent)
    top = max(exponents)
    return [math.ldexp(m, e - top) for m, e in zip(mantissas, exponents)]


def barycentric_evaluate(x: float, xs: list[float], ys: list[float],
                         weights: list[float]) -> float:
    """Second barycentric formula. x must not coincide with a node."""
    numerator = 0.0
    denominator = 0.0
    for xi, yi, wi in zip(xs, ys, weights):
        term = wi / (x - xi)
        numerator += term * yi
        denominator += term
    return numerator / denominator


def lagrange_basis(xs: list[float], i: int, epsilon: float = EPSILON) -> Polynomial:
    """l_i(x) = prod_{j!=i} (x - x_j) / (x_i - x_j), one linear factor at a time."""
    xi = xs[i]
    basis = Polynomial([1.0], epsilon=epsilon)
    for j, xj in enumerate(xs):
        if j == i:
            continue
        scale = 1.0 / (xi - xj)
        basis = basis.multiply(Polynomial([-xj * scale, scale], epsilon=epsilon))
    return basis


def lagrange_expand(xs: list[float], ys: list[float], epsilon: float = EPSILON) -> list[float]:
    """Standard-form coefficients of the polynomial through (xs[i], ys[i])."""
    n = len(xs)
    if n == 1:
        return [ys[0]]
    if n == 2:
        slope = (ys[1] - ys[0]) / (xs[1] - xs[0])
        return Polynomial([ys[0] - slope * xs[0], slope], epsilon=epsilon).coefficients
    if all(abs(y - ys[0]) <= epsilon for y in ys):
        return [ys[0]]

    result = Polynomial(epsilon=epsilon)
    for i in range(n):
        result = result.add(lagrange_basis(xs, i, epsilon).multiply(ys[i]))
    return result.coefficients


class LagrangePolynomial(Interpolator):
    """Interpolating polynomial through a non-empty set of points."""

    def __init__(self, points: list[Point], *, epsilon: float = EPSILON):
        sorted_points = sort_points(points)
        if not sorted_points:
            raise EmptyInputError("Points list cannot be empty")
        check_distinct_x(sorted_points, epsilon)

        self.epsilon = epsilon
        self._nodes = NodeSet(sorted_points, epsilon)
        self._weights = barycentric_weights(self._nodes.xs)
        self._poly = Polynomial(epsilon=epsilon)
        self.state = CacheState.DIRTY
        self._rebuild()

    def _rebuild(self):
        logger.debug("Expanding Lagrange basis for %d points", len(self._nodes))
        self._poly._replace_coefficients(
            lagrange_expand(self._nodes.xs, self._nodes.ys, self.epsilon))
        self.state = CacheState.FRESH

    def _ensure_fresh(self):
        if self.state is CacheState.DIRTY:
            self._rebuild()

    def add_point(self, point: Point):
        """Insert a node; weights are recomputed now, the standard form later."""
        index = self._nodes.check_insertable(point)
        xs = self._nodes.xs
        xs.insert(index, point.x)
        weights = barycentric_weights(xs)
        self._nodes.insert(point)
        self._weights = weights
        self.state = CacheState.DIRTY
        logger.debug("Inserted %s at index %d", point, index)

    def evaluate(self, x: float) -> float:
        if self._nodes.constant_y():
            return self._nodes[0].y
        y = self._nodes.value_at_node(x)
        if y is not None:
            return y
        return barycentric_evaluate(x, self._nodes.xs, self._nodes.ys, self._weights)

    @property
    def degree(self) -> int:
        self._ensure_fresh()
        return len(self._nodes) - 1

    @property
    def coefficients(self) -> list[float]:
        self._ensure_fresh()
        return self._poly.coefficients

    @property
    def points(self) -> list[Point]:
        return self._nodes.to_list()

    @property
    def weights(self) -> list[float]:
        return list(self._weights)

    def __len__(self):
        return len(self._nodes)

    def __str__(self):
        self._ensure_fresh()
        return format_polynomial(self._poly.coefficients, self.epsilon)

    def __repr__(self):
        return f"LagrangePolynomial({self._nodes.to_list()!r})"
