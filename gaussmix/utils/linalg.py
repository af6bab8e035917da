"""Linear algebra primitives for gaussmix.

Thin wrappers around LAPACK (through :mod:`scipy.linalg`) used by the
covariance preparation and density evaluation steps. Both work from the
lower Cholesky factor and never form :math:`\\Sigma^{-1}` explicitly.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import cho_solve, cholesky


def cholesky_factorize(matrix: ArrayLike, dim: int) -> NDArray:
    r"""
    Compute the lower Cholesky factor of a covariance matrix.

    Parameters
    ----------
    matrix : array_like, shape (dim, dim)
        Symmetric positive definite matrix. A flat row-major buffer of
        length ``dim * dim`` is accepted as well.
    dim : int
        Dimension of the matrix.

    Returns
    -------
    L : ndarray, shape (dim, dim)
        Lower triangular factor with :math:`L L^T = A`. The strict upper
        triangle is zero.

    Raises
    ------
    LinAlgError
        If ``matrix`` is not positive definite.

    Notes
    -----
    LAPACK's ``dpotrf`` only reads the lower triangle, so the input is not
    symmetrized first.

    Examples
    --------
    >>> import numpy as np
    >>> A = np.array([[4.0, 2.0], [2.0, 3.0]])
    >>> L = cholesky_factorize(A, 2)
    >>> np.allclose(L @ L.T, A)
    True
    """
    A = np.asarray(matrix, dtype=float).reshape(dim, dim)
    return cholesky(A, lower=True)


def solve_positive_semidefinite(
    cholesky_factor: NDArray, rhs: ArrayLike, dim: int, num_points: int
) -> NDArray:
    r"""
    Solve :math:`\Sigma x_p = b_p` for a batch of right-hand sides.

    Uses the cached factor :math:`\Sigma = L L^T` and two triangular solves
    per right-hand side.

    Parameters
    ----------
    cholesky_factor : ndarray, shape (dim, dim)
        Lower Cholesky factor of :math:`\Sigma`.
    rhs : array_like, shape (num_points, dim)
        One right-hand side per row.
    dim : int
        Dimension of :math:`\Sigma`.
    num_points : int
        Number of right-hand sides.

    Returns
    -------
    x : ndarray, shape (num_points, dim)
        Solutions, one per row of ``rhs``.
    """
    B = np.asarray(rhs, dtype=float).reshape(num_points, dim)
    # cho_solve works on columns
    X = cho_solve((cholesky_factor, True), B.T, check_finite=False)
    return X.T
