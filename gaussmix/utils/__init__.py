"""Utility functions for gaussmix package."""

from .linalg import cholesky_factorize, solve_positive_semidefinite
from .logging import setup_logging, verbosity_to_level

__all__ = [
    'cholesky_factorize', 'solve_positive_semidefinite',
    'setup_logging', 'verbosity_to_level',
]
