"""Interpolation engines: Lagrange (barycentric) and Newton (divided differences)."""

from interpolation.base import CacheState, Interpolator, NodeSet
from interpolation.lagrange import (LagrangePolynomial, barycentric_weights,
                                    barycentric_evaluate, lagrange_basis,
                                    lagrange_expand)
from interpolation.newton import (NewtonPolynomial, divided_differences,
                                  newton_expand)
