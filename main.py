"""Newton vs. Lagrange interpolation benchmark: entry point.

Times construction, evaluation and single-point insertion for both engines
over several point-set sizes, then prints a short demonstration.

Usage: python main.py [seed] [-v]
"""

import logging
import sys

from bench.metrics import format_duration, timed, trimmed_mean
from bench.points import random_points, spaced_points
from core import rng
from core.point import Point
from core.polynomial import Polynomial
from interpolation import LagrangePolynomial, NewtonPolynomial


WARM_UP_ITERATIONS = 5
BENCHMARK_ITERATIONS = 10
EVALUATION_POINT = 0.5
DEFAULT_SEED = 42
BENCHMARK_SIZES = (10, 25, 50, 100)  # degrees; each run uses degree + 1 points
LARGE_SIZE = 200


def warm_up(points: list[Point]):
    for i in range(WARM_UP_ITERATIONS):
        lagrange = LagrangePolynomial(points)
        lagrange.evaluate(EVALUATION_POINT)
        lagrange.add_point(Point(1001 + i, 1001 + i))
        newton = NewtonPolynomial(points)
        newton.evaluate(EVALUATION_POINT)
        newton.add_point(Point(2001 + i, 2001 + i))


def run_benchmark(degree: int, seed: int) -> dict[str, float]:
    """Time both engines on degree + 1 random points; return trimmed means in ns."""
    rng.set_seed(seed)
    points = random_points(degree + 1)
    warm_up(points)

    samples = {name: [] for name in (
        "lagrange_create", "lagrange_eval", "lagrange_add",
        "newton_create", "newton_eval", "newton_add")}

    for i in range(BENCHMARK_ITERATIONS):
        lagrange, t = timed(LagrangePolynomial, points)
        samples["lagrange_create"].append(t)
        _, t = timed(lagrange.evaluate, EVALUATION_POINT)
        samples["lagrange_eval"].append(t)
        _, t = timed(lagrange.add_point, Point(1000 + i, 2000 + i))
        samples["lagrange_add"].append(t)

        newton, t = timed(NewtonPolynomial, points)
        samples["newton_create"].append(t)
        _, t = timed(newton.evaluate, EVALUATION_POINT)
        samples["newton_eval"].append(t)
        _, t = timed(newton.add_point, Point(2000 + i, 3000 + i))
        samples["newton_add"].append(t)

    return {name: trimmed_mean(values) for name, values in samples.items()}


def _ratio(a: float, b: float) -> str:
    return f"{a / b:.2f}" if b else "n/a"


def print_report(degree: int, means: dict[str, float]):
    print(f"Degree {degree} ({degree + 1} points)")
    print("-" * 50)
    print(f"  Lagrange construction: {format_duration(means['lagrange_create'])}")
    print(f"  Newton construction:   {format_duration(means['newton_create'])}")
    print(f"  Newton/Lagrange:       {_ratio(means['newton_create'], means['lagrange_create'])}")
    print()
    print(f"  Lagrange evaluation:   {format_duration(means['lagrange_eval'])}")
    print(f"  Newton evaluation:     {format_duration(means['newton_eval'])}")
    print(f"  Newton/Lagrange:       {_ratio(means['newton_eval'], means['lagrange_eval'])}")
    print()
    print(f"  Lagrange add_point:    {format_duration(means['lagrange_add'])}")
    print(f"  Newton add_point:      {format_duration(means['newton_add'])}")
    print(f"  Lagrange/Newton:       {_ratio(means['lagrange_add'], means['newton_add'])}")
    print()


def demonstration(seed: int):
    print("=" * 50)
    print("DEMONSTRATION")
    print("=" * 50)
    print(f"Sample polynomial: {Polynomial([1.0, 2.0, 3.0])}")

    newton, t = timed(NewtonPolynomial, [Point(1, 2), Point(2, 3), Point(4, 7)])
    print(f"\nNewton polynomial (built in {format_duration(t)}):")
    print(f"  {newton}")
    value, t = timed(newton.evaluate, 3)
    print(f"  p(3) = {value} (evaluated in {format_duration(t)})")

    lagrange, t = timed(LagrangePolynomial, [Point(1, 2), Point(3, 4), Point(5, 6)])
    print(f"\nLagrange polynomial (built in {format_duration(t)}):")
    for x in (2, 4):
        value, t = timed(lagrange.evaluate, x)
        print(f"  p({x}) = {value} (evaluated in {format_duration(t)})")
    print(f"  {lagrange}")

    rng.set_seed(seed)
    large = spaced_points(LARGE_SIZE)
    _, newton_time = timed(NewtonPolynomial, large)
    _, lagrange_time = timed(LagrangePolynomial, large)
    print(f"\nLarge data set ({LARGE_SIZE} points):")
    print(f"  Newton construction:   {format_duration(newton_time)}")
    print(f"  Lagrange construction: {format_duration(lagrange_time)}")
    print(f"  Newton/Lagrange:       {_ratio(newton_time, lagrange_time)}")
    print()


def main():
    args = sys.argv[1:]
    if "-v" in args:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")
        args = [a for a in args if a != "-v"]
    seed = int(args[0]) if args else DEFAULT_SEED

    print("=" * 50)
    print("Newton vs. Lagrange interpolation")
    print(f"Seed: {seed}")
    print("=" * 50)
    print()
    for degree in BENCHMARK_SIZES:
        print_report(degree, run_benchmark(degree, seed))

    demonstration(seed)


if __name__ == "__main__":
    main()
