"""
Multivariate normal density of a mixture component.

The density of component :math:`k` at :math:`x \\in \\mathbb{R}^d` is

.. math::
    p(x|\\mu,\\Sigma) = \\frac{\\exp\\left(-\\frac{1}{2}
    (x-\\mu)^T \\Sigma^{-1} (x-\\mu)\\right)}{\\sqrt{(2\\pi)^d |\\Sigma|}}

Evaluation is split in two steps:

1. :func:`prepare_covariance` factorizes :math:`\\Sigma = L L^T` once per
   covariance update, checks the determinant and caches the normalizer.
2. :func:`evaluate_density` reuses the cached factor for a whole batch of
   points. The quadratic form comes from a Cholesky solve, so
   :math:`\\Sigma^{-1}` is never formed.

Both steps treat caller mistakes (``None`` component, dimension mismatch,
empty batch, unprepared component) as programming errors and raise
``ValueError``.
"""

import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgError

from gaussmix.component import Component
from gaussmix.errors import DegenerateCovarianceError
from gaussmix.utils.linalg import cholesky_factorize, solve_positive_semidefinite

logger = logging.getLogger(__name__)

#: Smallest admissible :math:`\det(\Sigma)`.
EPSILON = float(np.finfo(np.float64).eps)

#: Densities below this value are reported as 0.
DENSITY_FLOOR = 1e-8

#: Densities within this distance of 1 are reported as 1.
DENSITY_CEILING_TOL = 1e-8

_TWO_PI = 2.0 * np.pi


def _check_component(component: Optional[Component], point_dim: int) -> None:
    if component is None:
        raise ValueError("component must not be None")
    if point_dim < 1:
        raise ValueError(f"point_dim must be positive, got {point_dim}")
    if component.d != point_dim:
        raise ValueError(
            f"point_dim {point_dim} doesn't match component dimension {component.d}"
        )


def prepare_covariance(
    component: Component, point_dim: int, *, eps: float = EPSILON
) -> Component:
    r"""
    Factorize the component covariance and cache the normalizer.

    Must run after every change to ``component.sigma`` and before
    :func:`evaluate_density`.

    .. math::
        |\Sigma| = |L L^T| = \left(\prod_{i=1}^d L_{ii}\right)^2

    Parameters
    ----------
    component : Component
        Component whose ``sigma`` holds the candidate covariance.
    point_dim : int
        Dimension of the component.
    eps : float, optional
        Smallest admissible determinant. Default is machine epsilon.

    Returns
    -------
    component : Component
        The same component, with ``sigma_L`` and ``normalizer`` set.

    Raises
    ------
    DegenerateCovarianceError
        If :math:`|\Sigma| < \varepsilon` or the factorization fails. The
        component's cached fields are left unchanged.
    ValueError
        If the component is ``None`` or ``point_dim`` is inconsistent.
    """
    _check_component(component, point_dim)

    try:
        sigma_L = cholesky_factorize(component.sigma, point_dim)
    except LinAlgError:
        logger.error(
            "Cholesky factorization failed for component:\n%s", component
        )
        raise DegenerateCovarianceError(
            float('nan'), None, component.classical_params, eps
        ) from None

    # det(Sigma) = det(L L^T) = det(L)^2
    det = float(np.prod(np.diag(sigma_L))) ** 2

    if not det >= eps:
        err = DegenerateCovarianceError(det, sigma_L, component.classical_params, eps)
        logger.error("%s", err)
        raise err

    component.sigma_L = sigma_L
    component.normalizer = float(np.sqrt(_TWO_PI ** point_dim * det))

    logger.debug(
        "Prepared covariance: d=%d, det=%.6e, normalizer=%.6e",
        point_dim, det, component.normalizer,
    )
    return component


def evaluate_density(
    component: Component,
    point_dim: int,
    points: ArrayLike,
    num_points: Optional[int] = None,
    *,
    floor: float = DENSITY_FLOOR,
    ceiling_tol: float = DENSITY_CEILING_TOL,
) -> NDArray:
    r"""
    Density of a prepared component at a batch of points.

    Parameters
    ----------
    component : Component
        Component prepared by :func:`prepare_covariance`.
    point_dim : int
        Dimension of each point.
    points : array_like
        Shape ``(num_points, point_dim)``, or a flat row-major buffer of
        ``num_points * point_dim`` values.
    num_points : int, optional
        Number of points. Inferred from ``points`` when omitted.
    floor : float, optional
        Densities below ``floor`` are set to 0. Default ``1e-8``.
    ceiling_tol : float, optional
        Densities with :math:`1 - p < \text{ceiling\_tol}` are set to 1.
        Default ``1e-8``.

    Returns
    -------
    densities : ndarray, shape ``(num_points,)``

    Raises
    ------
    ValueError
        On ``None`` component, dimension mismatch, empty batch or an
        unprepared component.
    """
    _check_component(component, point_dim)
    if not component.is_prepared:
        raise ValueError(
            "Component covariance not prepared. Call prepare_covariance() first."
        )

    X = np.asarray(points, dtype=float)
    if X.ndim == 2:
        if X.shape[1] != point_dim:
            raise ValueError(
                f"Expected {point_dim}-dimensional points, got {X.shape[1]}"
            )
        if num_points is not None and X.shape[0] != num_points:
            raise ValueError(f"Expected {num_points} points, got {X.shape[0]}")
    if num_points is None:
        num_points = X.size // point_dim
    if num_points < 1:
        raise ValueError(f"num_points must be positive, got {num_points}")
    if X.size != num_points * point_dim:
        raise ValueError(
            f"Expected {num_points} points of dimension {point_dim}, "
            f"got {X.size} values"
        )
    X = X.reshape(num_points, point_dim)

    logger.debug("Evaluating density: d=%d, n=%d", point_dim, num_points)

    # XM = X - mu
    XM = X - component.mu

    # Sigma SXM = XM => SXM = Sigma^{-1} XM
    SXM = solve_positive_semidefinite(component.sigma_L, XM, point_dim, num_points)

    with np.errstate(under='ignore', over='ignore', invalid='ignore'):
        # (x - mu)^T Sigma^{-1} (x - mu), one per point
        mahal = np.einsum('ij,ij->i', XM, SXM)
        # inf - inf from overflowing products of finite far points
        mahal[np.isnan(mahal) & np.isfinite(X).all(axis=1)] = np.inf
        P = np.exp(-0.5 * mahal) / component.normalizer

    P[P < floor] = 0.0
    P[1.0 - P < ceiling_tol] = 1.0
    return P


__all__ = [
    "EPSILON",
    "DENSITY_FLOOR",
    "DENSITY_CEILING_TOL",
    "prepare_covariance",
    "evaluate_density",
]
