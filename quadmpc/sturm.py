"""Sturm sequences and counting of distinct real roots.

Coefficient sequences run from the highest degree down to the constant
term, as everywhere in this package.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .polynomial import EPSILON, poly_eval, poly_mod


def _chain(monic: Sequence[float], zero_lead: float) -> list[list[float]]:
    """Build a Sturm chain; ``zero_lead`` replaces a vanishing final remainder."""
    first = [float(v) for v in monic]
    if len(first) < 2:
        raise ValueError("a Sturm sequence needs a polynomial of degree one or more")
    if first[0] != 1.0:
        raise ValueError("the polynomial must be monic")

    order = len(first) - 1
    sequences = [first, [(order - i) * v / order for i, v in enumerate(first[:-1])]]

    while True:
        remainder = poly_mod(sequences[-2], sequences[-1])
        lead = remainder[0]
        scale = abs(lead)
        normalised = [v / -scale for v in remainder[1:]]
        if lead > 0.0:
            head = -1.0
        elif lead < 0.0:
            head = 1.0
        else:
            head = zero_lead
        sequences.append([head, *normalised])
        if len(remainder) == 1:
            return sequences


def sturm_sequence(monic: Sequence[float]) -> list[list[float]]:
    """Return the Sturm sequence of a monic polynomial.

    The first entry is the polynomial itself, the second its derivative
    scaled to be monic, and every further entry the negated remainder,
    scaled so that its leading coefficient is 1 or -1.  The sequence ends
    with a constant.
    """
    return _chain(monic, 1.0)


def num_sign_var(x: float, sequences: Sequence[Sequence[float]]) -> int:
    """Count the sign variations of the Sturm sequence evaluated at ``x``."""
    values = (poly_eval(seq, x) for seq in sequences)
    try:
        last = next(values)
    except StopIteration:
        return 0
    variations = 0
    for value in values:
        if last == 0.0 or last * value < 0.0:
            variations += 1
        last = value
    return variations


def count_roots(coeffs: Sequence[float], l: float, r: float) -> int:
    """Count the distinct real roots of ``coeffs`` inside ``(l, r)``.

    Both ``coeffs(l)`` and ``coeffs(r)`` must be nonzero.  A polynomial
    whose constant term vanishes, or that is constant, yields zero.
    """
    c = [float(v) for v in coeffs]
    start = next((i for i, v in enumerate(c) if abs(v) >= EPSILON), len(c))
    valid = len(c) - start
    if valid == 0 or abs(c[-1]) <= EPSILON or valid == 1:
        return 0

    lead = c[start]
    monic = [1.0, *(v / lead for v in c[start + 1:])]
    sequences = _chain(monic, math.nan)
    return num_sign_var(l, sequences) - num_sign_var(r, sequences)