"""Real roots of a polynomial inside an open interval."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .closed_form import solve_quartic
from .isolation import eigen_solve_real_roots, isolate_real_roots
from .polynomial import EPSILON


def solve_polynomial(
    coeffs: Sequence[float],
    lbound: float,
    ubound: float,
    tol: float,
    isolation: bool = True,
) -> list[float]:
    """Return the distinct real roots of ``coeffs`` inside ``(lbound, ubound)``, sorted.

    Leading and trailing near-zero coefficients are removed first; zero
    trailing coefficients contribute a root at zero.  Reduced polynomials of
    degree four or less are solved in closed form.  Higher degrees use Sturm
    isolation with safeguarded Newton steps, or the eigenvalues of the
    companion matrix when ``isolation`` is false.
    """
    c = [float(v) for v in coeffs]
    size = len(c)

    start = next((i for i, v in enumerate(c) if abs(v) >= EPSILON), size)
    valid = size - start

    offset = 0
    for v in reversed(c[start:]):
        if abs(v) >= EPSILON:
            break
        offset += 1
    nonzeros = valid - offset

    roots: set[float]
    if nonzeros == 0:
        roots = {math.inf, -math.inf}
    elif nonzeros == 1 and offset == 0:
        roots = set()
    else:
        reduced = c[start:start + nonzeros]
        padded = [0.0] * (max(5, nonzeros) - nonzeros) + reduced
        if nonzeros <= 5:
            roots = set(solve_quartic(*padded))
        elif isolation:
            roots = set(isolate_real_roots(padded, lbound, ubound, tol))
        else:
            roots = set(eigen_solve_real_roots(padded, lbound, ubound, tol))
        if offset > 0:
            roots.add(0.0)

    return sorted(r for r in roots if lbound < r < ubound)