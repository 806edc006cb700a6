"""Data of a quadratic program with simple bounds.

The problem is ``min 0.5 * x' H x + g' x`` subject to ``lb <= x <= ub``.
Instead of the Hessian a Cholesky factor ``R`` with ``R' R = H`` may be
given; without a Hessian the factor stands in for it.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np

INFTY = 1.0e20
"""Magnitude treated as an infinite bound."""

EPS = sys.float_info.epsilon
"""Tolerance for comparing matrix entries and bound shifts."""

BOUNDTOL = 1.0e-10
"""Distance below which a lower and an upper bound count as equal."""

BOUNDRELAXATION = 1.0e3
"""Distance by which inactive bounds are relaxed for an auxiliary QP."""

ZERO = 1.0e-25
"""Magnitude below which a number counts as zero."""


class QPError(Exception):
    """Raised when QP data are missing, malformed or a QP step fails."""


def _vector(values: Sequence[float] | np.ndarray, size: int, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (size,):
        raise QPError(f"{name} must have {size} entries, got shape {array.shape}")
    return array


def _matrix(values: Sequence[Sequence[float]] | np.ndarray, size: int, name: str) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (size, size):
        raise QPError(f"{name} must be {size}x{size}, got shape {array.shape}")
    return array


class QPData:
    """Hessian, Cholesky factor, gradient and bounds of a bound-constrained QP."""

    def __init__(
        self,
        hessian: Sequence[Sequence[float]] | np.ndarray | None,
        gradient: Sequence[float] | np.ndarray | None,
        lower: Sequence[float] | np.ndarray | None = None,
        upper: Sequence[float] | np.ndarray | None = None,
        cholesky: Sequence[Sequence[float]] | np.ndarray | None = None,
    ) -> None:
        if gradient is None:
            raise QPError("a gradient vector is required")
        if hessian is None and cholesky is None:
            raise QPError("either a Hessian or its Cholesky factor is required")

        self.gradient = np.array(gradient, dtype=float)
        if self.gradient.ndim != 1 or self.gradient.size == 0:
            raise QPError("the gradient must be a non-empty vector")
        nv = self.gradient.size

        self.has_hessian = hessian is not None
        self.has_cholesky = cholesky is not None
        self.cholesky = _matrix(cholesky, nv, "cholesky") if cholesky is not None else np.zeros((nv, nv))
        if hessian is not None:
            self.hessian = _matrix(hessian, nv, "hessian")
        else:
            self.hessian = self.cholesky.copy()

        self.lower = _vector(lower, nv, "lower") if lower is not None else np.full(nv, -INFTY)
        self.upper = _vector(upper, nv, "upper") if upper is not None else np.full(nv, INFTY)

    @property
    def nv(self) -> int:
        """Number of variables."""
        return int(self.gradient.size)

    def objective(self, x: Sequence[float] | np.ndarray) -> float:
        """Return ``0.5 * x' H x + g' x``."""
        point = _vector(x, self.nv, "x")
        return float(point @ self.gradient + 0.5 * point @ self.hessian @ point)

    def is_identity_hessian(self) -> bool:
        """True when the Hessian equals the identity up to ``EPS``."""
        if np.any(np.abs(np.diag(self.hessian) - 1.0) > EPS):
            return False
        off_diagonal = self.hessian - np.diag(np.diag(self.hessian))
        return not np.any(np.abs(off_diagonal) > EPS)

    def bounds_consistent(
        self,
        delta_lower: Sequence[float] | np.ndarray,
        delta_upper: Sequence[float] | np.ndarray,
    ) -> bool:
        """False when a shift would lift a fixed variable's lower bound above its upper bound."""
        dlb = _vector(delta_lower, self.nv, "delta_lower")
        dub = _vector(delta_upper, self.nv, "delta_upper")
        fixed = self.lower > self.upper - BOUNDTOL
        crossing = dlb > dub + EPS
        return not bool(np.any(fixed & crossing))