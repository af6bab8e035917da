"""
Frozen dataclass parameter containers for mixture components.

A :class:`~gaussmix.component.Component` is mutable: the EM trainer rewrites
its weight, mean and covariance every iteration. :class:`ComponentParams` is
the read-only snapshot handed out by ``Component.classical_params`` and
attached to failure signals, so diagnostics never alias the live arrays.

Examples
--------
>>> import numpy as np
>>> from gaussmix.params import ComponentParams
>>> p = ComponentParams(pi=0.5, mu=np.zeros(2), sigma=np.eye(2))
>>> p['pi']
0.5
>>> p.pi = 1.0  # Raises FrozenInstanceError

Notes
-----
The ``frozen=True`` flag prevents attribute reassignment, but numpy arrays
are internally mutable. ``Component.classical_params`` returns copies, so
modifying them never touches the component.
"""

from dataclasses import dataclass, fields
import numpy as np


class _ParamsBase:
    """Mixin providing dict-style access on frozen dataclass params.

    Allows both ``params.mu`` and ``params['mu']`` access styles,
    plus ``items()``, ``keys()``, ``values()`` for iteration.
    """

    __slots__ = ()

    def __getitem__(self, key: str):
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key)

    def __contains__(self, key: str) -> bool:
        return hasattr(self, key)

    def keys(self):
        """Yield field names."""
        return (f.name for f in fields(self))

    def values(self):
        """Yield field values."""
        return (getattr(self, f.name) for f in fields(self))

    def items(self):
        """Yield ``(name, value)`` pairs."""
        return ((f.name, getattr(self, f.name)) for f in fields(self))


@dataclass(frozen=True, slots=True)
class ComponentParams(_ParamsBase):
    """
    Classical parameters of one Gaussian mixture component.

    Attributes
    ----------
    pi : float
        Mixing weight :math:`\\pi \\in [0, 1]`.
    mu : np.ndarray
        Mean vector, shape ``(d,)``.
    sigma : np.ndarray
        Covariance matrix, shape ``(d, d)``.
    """
    pi: float
    mu: np.ndarray
    sigma: np.ndarray


__all__ = [
    "ComponentParams",
]
