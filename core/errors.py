"""Error kinds raised by the polynomial and interpolation modules."""


class InterpolationError(Exception):
    """Base class for all errors raised by this package."""


class NullInputError(InterpolationError, TypeError):
    """A point or point collection was None, or a collection contained None."""


class EmptyInputError(InterpolationError, ValueError):
    """An operation that needs at least one point received none."""


class DuplicateXError(InterpolationError, ValueError):
    """Two interpolation nodes share an x-value (within epsilon)."""

    def __init__(self, x: float):
        super().__init__(f"Duplicate x value is not allowed: {x}")
        self.x = x


class DivisionByZeroError(InterpolationError, ZeroDivisionError):
    """Scalar division by a value whose magnitude is below epsilon."""
