"""Exceptions raised by gaussmix."""

from typing import Optional

from numpy.typing import NDArray

from gaussmix.params import ComponentParams


class GaussmixError(Exception):
    """Base class for gaussmix errors."""


class DegenerateCovarianceError(GaussmixError, ValueError):
    """
    Covariance matrix is singular to working precision.

    Raised by :func:`~gaussmix.density.prepare_covariance` when
    :math:`\\det(\\Sigma)` falls below machine epsilon, or when the Cholesky
    factorization rejects the matrix outright. The component cannot be used
    for density evaluation; the trainer has to reinitialize or drop it.

    Parameters
    ----------
    determinant : float
        :math:`\\det(\\Sigma)` computed from the factor, ``nan`` if the
        factorization itself failed.
    sigma_L : ndarray or None
        Lower Cholesky factor that produced ``determinant``.
    params : ComponentParams or None
        Snapshot of the offending component.
    eps : float
        Threshold the determinant was compared against.
    """

    def __init__(
        self,
        determinant: float,
        sigma_L: Optional[NDArray],
        params: Optional[ComponentParams],
        eps: float,
    ):
        self.determinant = determinant
        self.sigma_L = sigma_L
        self.params = params
        self.eps = eps
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.sigma_L is None:
            return "Covariance matrix is not positive definite (Cholesky factorization failed)"
        rows = "\n".join(
            " ".join(f"{v:f}" for v in row) for row in self.sigma_L
        )
        return (
            f"Degenerate covariance: det(sigma) = {self.determinant:.6e} < eps = {self.eps:.6e}\n"
            f"sigma_L:\n{rows}"
        )


__all__ = [
    "GaussmixError",
    "DegenerateCovarianceError",
]
