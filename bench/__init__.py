"""Benchmark helpers: reproducible point sets and timing statistics."""

from bench.points import random_points, spaced_points
from bench.metrics import Timer, trimmed_mean, format_duration
