"""Real-root isolation by Sturm bisection and safeguarded Newton steps."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import numpy as np

from .polynomial import EPSILON, poly_deri, poly_eval
from .sturm import num_sign_var, sturm_sequence

_MAX_ITERATIONS = 128


def safe_newton(
    func: Callable[[float], float],
    dfunc: Callable[[float], float],
    low: float,
    high: float,
    tol: float,
    max_its: int,
) -> float:
    """Find a zero of ``func`` in ``[low, high]`` by Newton steps guarded by bisection.

    Requires ``func(low) * func(high) <= 0``.
    """
    f_low = func(low)
    f_high = func(high)
    if f_low == 0.0:
        return low
    if f_high == 0.0:
        return high
    if f_low < 0.0:
        xl, xh = low, high
    else:
        xl, xh = high, low

    rts = 0.5 * (xl + xh)
    dx_old = abs(xh - xl)
    dx = dx_old
    f = func(rts)
    df = dfunc(rts)
    for _ in range(max_its):
        if ((rts - xh) * df - f) * ((rts - xl) * df - f) > 0.0 or abs(2.0 * f) > abs(dx_old * df):
            dx_old = dx
            dx = 0.5 * (xh - xl)
            rts = xl + dx
            if xl == rts:
                break
        else:
            dx_old = dx
            dx = f / df if df != 0.0 else math.nan
            previous = rts
            rts -= dx
            if previous == rts:
                break

        if abs(dx) < tol:
            break

        f = func(rts)
        df = dfunc(rts)
        if f < 0.0:
            xl = rts
        else:
            xh = rts

    return rts


def shrink_interval(coeffs: Sequence[float], lbound: float, ubound: float, tol: float) -> float:
    """Return the single zero of ``coeffs`` bracketed by ``[lbound, ubound]``.

    Requires ``coeffs(lbound) * coeffs(ubound) < 0`` and ``lbound < ubound``.
    """
    c = [float(v) for v in coeffs]
    dc = poly_deri(c)
    return safe_newton(
        lambda x: poly_eval(c, x),
        lambda x: poly_eval(dc, x),
        lbound,
        ubound,
        tol,
        _MAX_ITERATIONS,
    )


def _recur_isolate(
    l: float,
    r: float,
    fl: float,
    fr: float,
    lnv: int,
    rnv: int,
    tol: float,
    sequences: list[list[float]],
    roots: set[float],
) -> None:
    """Collect every root of ``sequences[0]`` inside ``(l, r)`` into ``roots``."""
    count = lnv - rnv
    if count == 1:
        if fl * fr < 0:
            roots.add(shrink_interval(sequences[0], l, r, tol))
            return
        m = l
        for _ in range(_MAX_ITERATIONS):
            if fl * fr < 0:
                # A root of even multiplicity is a sign change of the derivative.
                roots.add(shrink_interval(sequences[1], l, r, tol))
                return
            m = (l + r) / 2.0
            fm = poly_eval(sequences[0], m)
            if fm == 0 or abs(r - l) < tol:
                roots.add(m)
                return
            if lnv == num_sign_var(m, sequences):
                l, fl = m, fm
            else:
                r, fr = m, fm
        roots.add(m)
    elif count > 1:
        m = l
        bias = 0
        biased = False
        for _ in range(_MAX_ITERATIONS):
            if not biased:
                bias = 0
                m = (l + r) / 2.0
            else:
                m = (r - l) / math.pow(2.0, bias + 1.0) + l
                biased = False
            mnv = num_sign_var(m, sequences)

            if abs(r - l) < tol:
                roots.add(m)
                return
            fm = poly_eval(sequences[0], m)
            if fm == 0:
                bias += 1
                biased = True
            elif lnv != mnv and rnv != mnv:
                _recur_isolate(l, m, fl, fm, lnv, mnv, tol, sequences, roots)
                _recur_isolate(m, r, fm, fr, mnv, rnv, tol, sequences, roots)
                return
            elif lnv == mnv:
                l, fl = m, fm
            else:
                r, fr = m, fm
        roots.add(m)


def _check_coeffs(coeffs: Sequence[float]) -> list[float]:
    c = [float(v) for v in coeffs]
    if len(c) < 2:
        raise ValueError("the polynomial must have degree one or more")
    if c[0] == 0.0:
        raise ValueError("the leading coefficient must be nonzero")
    return c


def isolate_real_roots(
    coeffs: Sequence[float], lbound: float, ubound: float, tol: float
) -> list[float]:
    """Return the distinct real roots inside ``(lbound, ubound)``, sorted.

    Uses Sturm's theorem to bracket each root.  The leading coefficient
    must be nonzero, the polynomial must not vanish at either bound and
    ``lbound < ubound``.
    """
    c = _check_coeffs(coeffs)
    monic = [1.0, *(v / c[0] for v in c[1:])]

    cauchy = 1.0 + max(abs(v) for v in monic[1:])
    nonzero = [v for v in monic if abs(v) >= EPSILON]
    ratios = [abs(b / a) for a, b in zip(nonzero, nonzero[1:])]
    if ratios:
        ratios[-1] /= 2.0
        rho = min(cauchy, 2.0 * max(ratios)) + 1.0
    else:
        rho = cauchy + 1.0

    lbound = max(lbound, -rho)
    ubound = min(ubound, rho)

    sequences = sturm_sequence(monic)
    roots: set[float] = set()
    _recur_isolate(
        lbound,
        ubound,
        poly_eval(sequences[0], lbound),
        poly_eval(sequences[0], ubound),
        num_sign_var(lbound, sequences),
        num_sign_var(ubound, sequences),
        tol,
        sequences,
        roots,
    )
    return sorted(roots)


def eigen_solve_real_roots(
    coeffs: Sequence[float], lbound: float, ubound: float, tol: float
) -> list[float]:
    """Return real roots inside ``(lbound, ubound)`` from the companion matrix, sorted.

    Eigenvalues whose imaginary part is below ``tol`` are taken as real.
    """
    c = _check_coeffs(coeffs)
    order = len(c) - 1
    tail = np.asarray(c[1:]) / c[0]

    companion = np.zeros((order, order))
    companion[np.arange(1, order), np.arange(order - 1)] = 1.0
    companion[:, order - 1] = -tail[::-1]

    roots = {
        float(value.real)
        for value in np.linalg.eigvals(companion)
        if value.imag < tol and lbound < value.real < ubound
    }
    return sorted(roots)