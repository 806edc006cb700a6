"""Givens plane rotations."""

from __future__ import annotations

import math
from typing import NamedTuple

ZERO = 1.0e-25
"""Magnitude below which the second component counts as already zero."""


class Givens(NamedTuple):
    """A rotation ``(c, s)`` and the rotated pair ``(x, y)``."""

    x: float
    y: float
    c: float
    s: float


def compute_givens(xold: float, yold: float) -> Givens:
    """Return the rotation that zeroes ``yold`` and the rotated pair.

    The rotated first component keeps the sign of ``xold``.
    """
    if abs(yold) <= ZERO:
        return Givens(xold, yold, 1.0, 0.0)

    mu = max(abs(xold), abs(yold))
    t = mu * math.sqrt((xold / mu) ** 2 + (yold / mu) ** 2)
    if xold < 0.0:
        t = -t
    return Givens(t, 0.0, xold / t, yold / t)


def apply_givens(c: float, s: float, xold: float, yold: float) -> tuple[float, float]:
    """Rotate the pair ``(xold, yold)`` by the rotation ``(c, s)``."""
    return c * xold + s * yold, -s * xold + c * yold