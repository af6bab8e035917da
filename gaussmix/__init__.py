"""
gaussmix: Gaussian mixture component densities.

Evaluates the multivariate normal density of a mixture component at a
batch of points, reusing a Cholesky factorization computed once per
covariance update.

Key features:
- Mutable :class:`Component` with cached Cholesky factor and normalizer
- Determinant-based degeneracy check with structured diagnostics
- Batched density evaluation through a Cholesky solve (no matrix inverse)
- Frozen dataclass parameter snapshots (gaussmix.params)
"""

from gaussmix.params import ComponentParams
from gaussmix.errors import GaussmixError, DegenerateCovarianceError
from gaussmix.component import Component, format_component, print_component
from gaussmix.density import (
    EPSILON,
    DENSITY_FLOOR,
    DENSITY_CEILING_TOL,
    prepare_covariance,
    evaluate_density,
)

__all__ = [
    # Data model
    "Component",
    "ComponentParams",
    # Density evaluation
    "prepare_covariance",
    "evaluate_density",
    "EPSILON",
    "DENSITY_FLOOR",
    "DENSITY_CEILING_TOL",
    # Diagnostics
    "format_component",
    "print_component",
    # Errors
    "GaussmixError",
    "DegenerateCovarianceError",
]
