"""Cholesky factors of projected Hessians and triangular solves with them.

The factor ``R`` is upper triangular with ``R' R`` equal to the Hessian
restricted to the free variables, taken in the order of the free list.  It
is kept in an ``nv x nv`` array whose leading ``nfree x nfree`` block holds
the factor and whose other entries are zero.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from .qp_data import ZERO, QPError


def _square(matrix: Sequence[Sequence[float]] | np.ndarray, name: str) -> np.ndarray:
    array = np.asarray(matrix, dtype=float)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise QPError(f"{name} must be a square matrix, got shape {array.shape}")
    return array


def cholesky_free(
    hessian: Sequence[Sequence[float]] | np.ndarray, free: Iterable[int]
) -> np.ndarray:
    """Return the upper triangular factor of the Hessian projected to ``free``.

    Raises :class:`QPError` when the projected Hessian is not positive
    definite or a free index is out of range.
    """
    h = _square(hessian, "hessian")
    nv = h.shape[0]
    idx = [int(i) for i in free]
    if any(not 0 <= i < nv for i in idx):
        raise QPError(f"free indices {idx} out of range for {nv} variables")
    if len(set(idx)) != len(idx):
        raise QPError(f"free indices {idx} contain duplicates")

    n = len(idx)
    r = np.zeros((nv, nv))
    for i, ii in enumerate(idx):
        pivot = h[ii, ii] - r[:i, i] @ r[:i, i]
        if not pivot > 0.0:
            raise QPError(f"Hessian is not positive definite at free variable {ii}")
        r[i, i] = math.sqrt(pivot)
        if i + 1 < n:
            rest = idx[i + 1:]
            column = h[rest, ii] - r[:i, i] @ r[:i, i + 1:n]
            r[i, i + 1:n] = column / r[i, i]
    return r


def backsolve(
    r: Sequence[Sequence[float]] | np.ndarray,
    b: Sequence[float] | np.ndarray,
    transposed: bool = False,
    size: int | None = None,
) -> np.ndarray:
    """Solve ``R a = b`` (or ``R' a = b``) on the leading ``size`` block of ``R``.

    ``size`` defaults to the length of ``b``; a size of zero or less gives
    an empty result.  Raises :class:`QPError` on a vanishing diagonal entry.
    """
    factor = _square(r, "r")
    rhs = np.asarray(b, dtype=float)
    n = rhs.size if size is None else int(size)
    if n <= 0:
        return np.zeros(0)
    if n > factor.shape[0] or n > rhs.size:
        raise QPError(f"size {n} exceeds the factor or right-hand side")

    a = np.zeros(n)
    order = range(n) if transposed else reversed(range(n))
    for i in order:
        if transposed:
            total = rhs[i] - factor[:i, i] @ a[:i]
        else:
            total = rhs[i] - factor[i, i + 1:n] @ a[i + 1:n]
        diagonal = factor[i, i]
        if abs(diagonal) <= ZERO:
            raise QPError(f"division by zero at diagonal entry {i}")
        a[i] = total / diagonal
    return a