"""Dense standard-form polynomials over the reals."""

from numbers import Real

from core.config import EPSILON
from core.errors import DivisionByZeroError
from core.formatting import format_fixed


def trim_coefficients(coeffs: list[float], epsilon: float = EPSILON) -> list[float]:
    """Drop trailing near-zero coefficients; the zero polynomial is [0.0]."""
    last = len(coeffs) - 1
    while last > 0 and abs(coeffs[last]) < epsilon:
        last -= 1
    if last < 0:
        return [0.0]
    return [float(c) for c in coeffs[:last + 1]]


def format_polynomial(coeffs: list[float], epsilon: float = EPSILON) -> str:
    """Canonical string form, highest power first.

    Terms below epsilon are omitted, magnitudes use two decimals and unit
    coefficients keep their "1.00" prefix: [1, -1, 1] -> "1.00x^2 - 1.00x + 1.00".
    """
    if len(coeffs) == 1:
        return format_fixed(coeffs[0])

    parts = []
    for power in range(len(coeffs) - 1, -1, -1):
        coeff = coeffs[power]
        if abs(coeff) < epsilon:
            continue
        if parts:
            parts.append(" + " if coeff > 0 else " - ")
        elif coeff < 0:
            parts.append("-")

        term = format_fixed(abs(coeff))
        if power == 1:
            term += "x"
        elif power > 1:
            term += f"x^{power}"
        parts.append(term)

    if not parts:
        return format_fixed(0.0)
    return "".join(parts)


class Polynomial:
    """Polynomial with float coefficients. coeffs[0] = constant term."""

    def __init__(self, coeffs: list[float] | None = None, *, epsilon: float = EPSILON):
        self.epsilon = epsilon
        self._coeffs = trim_coefficients(list(coeffs or [0.0]), epsilon)

    @staticmethod
    def zero() -> 'Polynomial':
        return Polynomial()

    @staticmethod
    def constant(c: float) -> 'Polynomial':
        return Polynomial([c])

    @staticmethod
    def linear(intercept: float, slope: float) -> 'Polynomial':
        """intercept + slope * x"""
        return Polynomial([intercept, slope])

    def _replace_coefficients(self, coeffs: list[float]):
        """Swap in a new coefficient vector. Only owners of this value call this."""
        self._coeffs = trim_coefficients(list(coeffs), self.epsilon)

    @property
    def coefficients(self) -> list[float]:
        return list(self._coeffs)

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def leading_coefficient(self) -> float:
        return self._coeffs[-1]

    def is_zero(self) -> bool:
        return self.degree == 0 and abs(self._coeffs[0]) < self.epsilon

    def evaluate(self, x: float) -> float:
        """Evaluate polynomial at x using Horner's method."""
        coeffs = self._coeffs
        if len(coeffs) == 1 or abs(x) < self.epsilon:
            return coeffs[0]
        result = coeffs[-1]
        for coeff in reversed(coeffs[:-1]):
            result = result * x + coeff
        return result

    __call__ = evaluate

    # --- Algebra ---

    def add(self, other: 'Polynomial') -> 'Polynomial':
        size = max(len(self._coeffs), len(other._coeffs))
        result = [0.0] * size
        for i, c in enumerate(self._coeffs):
            result[i] = c
        for i, c in enumerate(other._coeffs):
            result[i] += c
        return Polynomial(result, epsilon=self.epsilon)

    def subtract(self, other: 'Polynomial') -> 'Polynomial':
        size = max(len(self._coeffs), len(other._coeffs))
        result = [0.0] * size
        for i, c in enumerate(self._coeffs):
            result[i] = c
        for i, c in enumerate(other._coeffs):
            result[i] -= c
        return Polynomial(result, epsilon=self.epsilon)

    def multiply(self, other) -> 'Polynomial':
        """Product with another polynomial (convolution) or with a scalar."""
        if isinstance(other, Real):
            return self.scale(other)

        eps = self.epsilon
        result = [0.0] * (len(self._coeffs) + len(other._coeffs) - 1)
        for i, a in enumerate(self._coeffs):
            if abs(a) < eps:
                continue
            for j, b in enumerate(other._coeffs):
                if abs(b) < eps:
                    continue
                result[i + j] += a * b
        return Polynomial(result, epsilon=eps)

    def scale(self, scalar: float) -> 'Polynomial':
        if abs(scalar) < self.epsilon:
            return Polynomial(epsilon=self.epsilon)
        return Polynomial([c * scalar for c in self._coeffs], epsilon=self.epsilon)

    def divide(self, scalar: float) -> 'Polynomial':
        if abs(scalar) < self.epsilon:
            raise DivisionByZeroError("Division by zero")
        return Polynomial([c / scalar for c in self._coeffs], epsilon=self.epsilon)

    def equals(self, other: 'Polynomial') -> bool:
        if self.degree != other.degree:
            return False
        return all(abs(a - b) <= self.epsilon
                   for a, b in zip(self._coeffs, other._coeffs))

    # --- Operators ---

    def __add__(self, other):
        if isinstance(other, Real):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Real):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if isinstance(other, Real):
            return Polynomial([other]).subtract(self)
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, (Real, Polynomial)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return Polynomial([-c for c in self._coeffs], epsilon=self.epsilon)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return format_polynomial(self._coeffs, self.epsilon)

    def __repr__(self):
        return f"Polynomial({self._coeffs!r})"
