"""
Gaussian mixture component.

A component holds the classical parameters of one Gaussian in a mixture,

- ``pi``: mixing weight
- ``mu``: mean vector, shape ``(d,)``
- ``sigma``: covariance matrix, shape ``(d, d)``

plus two quantities derived from ``sigma`` by
:func:`~gaussmix.density.prepare_covariance`:

- ``sigma_L``: lower Cholesky factor, :math:`\\Sigma = L L^T`
- ``normalizer``: :math:`\\sqrt{(2\\pi)^d |\\Sigma|}`

The derived fields are not invalidated automatically. The trainer that
rewrites ``sigma`` must call ``prepare_covariance`` again before the next
density evaluation.
"""

import sys
from typing import Optional, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gaussmix.params import ComponentParams


class Component:
    """
    One Gaussian component of a mixture model.

    Parameters
    ----------
    pi : float
        Mixing weight.
    mu : array_like
        Mean vector, shape ``(d,)``.
    sigma : array_like
        Covariance matrix, shape ``(d, d)``. A flat row-major buffer of
        length ``d * d`` is reshaped; a scalar is accepted for ``d = 1``.

    Attributes
    ----------
    sigma_L : ndarray or None
        Lower Cholesky factor of ``sigma``, set by ``prepare_covariance``.
    normalizer : float or None
        Normalization constant, set by ``prepare_covariance``.

    Examples
    --------
    >>> from gaussmix import Component, prepare_covariance, evaluate_density
    >>> comp = Component(pi=1.0, mu=[0.0], sigma=[[1.0]])
    >>> _ = prepare_covariance(comp, 1)
    >>> evaluate_density(comp, 1, [[0.0]])
    array([0.39894228])
    """

    def __init__(self, pi: float, mu: ArrayLike, sigma: ArrayLike):
        mu = np.asarray(mu, dtype=float).flatten()
        sigma = np.asarray(sigma, dtype=float)
        d = len(mu)

        # Handle scalar input for 1D case
        if sigma.ndim == 0:
            sigma = sigma.reshape(1, 1)
        elif sigma.ndim == 1 and sigma.size == d * d:
            sigma = sigma.reshape(d, d)

        if d == 0:
            raise ValueError("mu must have at least one element")
        if sigma.shape != (d, d):
            raise ValueError(f"sigma shape {sigma.shape} doesn't match mu dimension {d}")

        self.pi = float(pi)
        self.mu: NDArray = mu.copy()
        self.sigma: NDArray = np.ascontiguousarray(sigma)
        self.sigma_L: Optional[NDArray] = None
        self.normalizer: Optional[float] = None

    @classmethod
    def from_classical_params(cls, *, pi: float, mu: ArrayLike, sigma: ArrayLike) -> 'Component':
        """Create a component from keyword classical parameters."""
        return cls(pi, mu, sigma)

    @property
    def d(self) -> int:
        """Dimension of the component."""
        return len(self.mu)

    @property
    def is_prepared(self) -> bool:
        """Whether ``sigma_L`` and ``normalizer`` have been computed."""
        return self.sigma_L is not None and self.normalizer is not None

    @property
    def classical_params(self) -> ComponentParams:
        """Snapshot of ``pi``, ``mu`` and ``sigma`` (arrays are copied)."""
        return ComponentParams(
            pi=self.pi, mu=self.mu.copy(), sigma=self.sigma.copy()
        )

    def __str__(self) -> str:
        return format_component(self)

    def __repr__(self) -> str:
        state = "prepared" if self.is_prepared else "not prepared"
        if self.d <= 3:
            mu_str = ", ".join(f"{x:.4f}" for x in self.mu)
            return f"Component(π={self.pi:.4f}, μ=[{mu_str}], {state})"
        return f"Component(π={self.pi:.4f}, d={self.d}, {state})"


def format_component(component: Optional[Component], point_dim: Optional[int] = None) -> str:
    """
    Render a component's parameters as diagnostic text.

    The layout is one line for the weight, one for the mean and one for the
    flattened covariance, every value with three decimals::

        pi: 0.500
        mu: 0.000 1.000
        sigma: 1.000 0.000 0.000 1.000

    This is a debugging aid, not a serialization format.

    Parameters
    ----------
    component : Component or None
        Component to render. ``None`` renders as ``"NULL"``.
    point_dim : int, optional
        Number of dimensions to render. Defaults to ``component.d``.

    Returns
    -------
    text : str
    """
    if component is None:
        return "NULL\n"

    if point_dim is None:
        point_dim = component.d

    mu = component.mu[:point_dim]
    sigma = component.sigma.ravel()[:point_dim * point_dim]

    lines = [
        f"pi: {component.pi:.3f}\n",
        "mu: " + "".join(f"{v:.3f} " for v in mu) + "\n",
        "sigma: " + "".join(f"{v:.3f} " for v in sigma) + "\n",
    ]
    return "".join(lines)


def print_component(
    component: Optional[Component],
    point_dim: Optional[int] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write :func:`format_component` output to ``file`` (default stdout)."""
    if file is None:
        file = sys.stdout
    file.write(format_component(component, point_dim))


__all__ = [
    "Component",
    "format_component",
    "print_component",
]
