"""Tests for standard-form polynomial algebra and formatting."""

import pytest
from core.errors import DivisionByZeroError
from core.formatting import format_fixed
from core.polynomial import Polynomial, format_polynomial, trim_coefficients


def test_evaluate_constant():
    p = Polynomial([42.0])
    assert p.evaluate(0) == 42
    assert p.evaluate(99) == 42

def test_evaluate_linear():
    p = Polynomial([3.0, 2.0])
    assert p.evaluate(0) == 3
    assert p.evaluate(1) == 5
    assert p.evaluate(5) == 13

def test_evaluate_quadratic():
    p = Polynomial([1.0, 0.0, 1.0])
    assert p.evaluate(0) == 1
    assert p.evaluate(3) == 10
    assert p.evaluate(-2) == 5

def test_evaluate_near_zero_returns_constant_term():
    p = Polynomial([3.0, 2.0, 7.0])
    assert p.evaluate(1e-12) == 3.0

def test_call_is_evaluate():
    p = Polynomial([1.0, -2.0, 4.0, 6.0])
    assert p(2.0) == 61.0


def test_empty_and_none_are_zero():
    assert Polynomial().coefficients == [0.0]
    assert Polynomial([]).coefficients == [0.0]
    assert Polynomial.zero().is_zero()

def test_trailing_near_zero_trimmed():
    p = Polynomial([1.0, 2.0, 0.0, 1e-12])
    assert p.coefficients == [1.0, 2.0]
    assert p.degree == 1
    assert p.leading_coefficient == 2.0

def test_all_zero_trims_to_single_zero():
    assert trim_coefficients([0.0, 1e-11, 0.0]) == [0.0]

def test_coefficients_are_a_copy():
    p = Polynomial([1.0, 2.0])
    p.coefficients.append(5.0)
    assert p.coefficients == [1.0, 2.0]

def test_convenience_constructors():
    assert Polynomial.constant(4.0).coefficients == [4.0]
    assert Polynomial.linear(1.0, 2.0).coefficients == [1.0, 2.0]


def test_add():
    p = Polynomial([1.0, 2.0]).add(Polynomial([3.0, 0.0, 4.0]))
    assert p.coefficients == [4.0, 2.0, 4.0]

def test_subtract_cancels_leading_term():
    p = Polynomial([1.0, 2.0, 3.0]).subtract(Polynomial([0.0, 0.0, 3.0]))
    assert p.coefficients == [1.0, 2.0]
    assert p.degree == 1

def test_subtract_self_is_zero():
    p = Polynomial([1.0, 2.0, 3.0])
    assert (p - p).coefficients == [0.0]

def test_multiply_polynomials():
    # (x + 1)(x - 1) = x^2 - 1
    p = Polynomial([1.0, 1.0]).multiply(Polynomial([-1.0, 1.0]))
    assert p.coefficients == [-1.0, 0.0, 1.0]

def test_multiply_by_zero_polynomial():
    p = Polynomial([1.0, 2.0]).multiply(Polynomial())
    assert p.coefficients == [0.0]

def test_multiply_scalar():
    assert Polynomial([1.0, -2.0]).multiply(3.0).coefficients == [3.0, -6.0]

def test_multiply_tiny_scalar_is_zero():
    assert Polynomial([1.0, 2.0, 3.0]).multiply(1e-11).coefficients == [0.0]

def test_divide_scalar():
    assert Polynomial([2.0, 4.0]).divide(2.0).coefficients == [1.0, 2.0]

def test_divide_by_near_zero():
    p = Polynomial([1.0, 2.0])
    with pytest.raises(DivisionByZeroError):
        p.divide(1e-11)
    with pytest.raises(ZeroDivisionError):
        p / 0.0


def test_operators():
    p = Polynomial([1.0, 2.0])
    assert (p + 1).coefficients == [2.0, 2.0]
    assert (1 + p).coefficients == [2.0, 2.0]
    assert (1 - p).coefficients == [0.0, -2.0]
    assert (-p).coefficients == [-1.0, -2.0]
    assert (p * 2).coefficients == [2.0, 4.0]
    assert (2 * p).coefficients == [2.0, 4.0]
    assert (p * p).coefficients == [1.0, 4.0, 4.0]
    assert (p / 2).coefficients == [0.5, 1.0]


def test_equals_within_epsilon():
    assert Polynomial([1.0, 2.0]) == Polynomial([1.0 + 1e-12, 2.0 - 1e-12])

def test_not_equal():
    assert Polynomial([1.0, 2.0]) != Polynomial([1.0, 2.1])
    assert Polynomial([1.0, 2.0]) != Polynomial([1.0, 2.0, 3.0])

def test_epsilon_is_configurable():
    p = Polynomial([1.0, 1e-6], epsilon=1e-5)
    assert p.coefficients == [1.0]
    assert p.multiply(1e-6).coefficients == [0.0]


@pytest.mark.parametrize("coeffs, expected", [
    ([5.0], "5.00"),
    ([-3.5], "-3.50"),
    ([0.0], "0.00"),
    ([0.0, 1.0], "1.00x"),
    ([1.0, 2.0, 3.0], "3.00x^2 + 2.00x + 1.00"),
    ([1.0, -1.0, 1.0], "1.00x^2 - 1.00x + 1.00"),
    ([-1.0, 0.0, -2.0], "-2.00x^2 - 1.00"),
    ([0.0, 0.0, 0.0, 1.0], "1.00x^3"),
    ([2.5, 1e-12, -1.0], "-1.00x^2 + 2.50"),
])
def test_format(coeffs, expected):
    assert str(Polynomial(coeffs)) == expected
    assert format_polynomial(trim_coefficients(coeffs)) == expected

def test_format_rounds_half_up():
    assert str(Polynomial([0.125])) == "0.13"
    assert str(Polynomial([-0.125])) == "-0.13"
    assert str(Polynomial([2.675, 0.005])) == "0.01x + 2.68"

def test_format_fixed():
    assert format_fixed(1.0) == "1.00"
    assert format_fixed(-0.001) == "-0.00"
    assert format_fixed(1e30) == "1000000000000000000000000000000.00"
    assert format_fixed(float("inf")) == "inf"

def test_repr():
    assert repr(Polynomial([1.0, 2.0])) == "Polynomial([1.0, 2.0])"
