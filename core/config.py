"""Shared numeric tolerance for point equality, trimming and duplicate detection."""

EPSILON = 1e-10
