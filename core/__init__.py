"""Core primitives: points, standard-form polynomials, shared tolerance, deterministic RNG."""

from core.config import EPSILON
from core.errors import (InterpolationError, NullInputError, EmptyInputError,
                         DuplicateXError, DivisionByZeroError)
from core.formatting import format_fixed
from core.point import Point
from core.polynomial import Polynomial, format_polynomial
from core import rng
