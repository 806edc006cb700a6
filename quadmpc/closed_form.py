"""Closed-form real roots of polynomials up to degree four."""

from __future__ import annotations

import math
import sys

EPSILON = sys.float_info.epsilon

_COS120 = -0.5
_SIN120 = 0.866025403784438646764


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


def _signed_cbrt(value: float) -> float:
    return -math.pow(abs(value), 1.0 / 3.0) if value < 0.0 else math.pow(value, 1.0 / 3.0)


def solve_cubic(a: float, b: float, c: float, d: float) -> list[float]:
    """Return the distinct real roots of ``a*x**3 + b*x**2 + c*x + d``, sorted."""
    roots: set[float] = set()

    if abs(d) < EPSILON:
        roots.add(0.0)
        a, b, c, d = 0.0, a, b, c

    if abs(a) < EPSILON:
        if abs(b) < EPSILON:
            if abs(c) > EPSILON:
                roots.add(-d / c)
        else:
            discriminant = c * c - 4.0 * b * d
            if discriminant >= 0:
                inv2b = 1.0 / (2.0 * b)
                y = math.sqrt(discriminant)
                roots.add((-c + y) * inv2b)
                roots.add((-c - y) * inv2b)
        return sorted(roots)

    inva = 1.0 / a
    invaa = inva * inva
    bb = b * b
    bover3a = b * (1.0 / 3.0) * inva
    p = (3.0 * a * c - bb) * (1.0 / 3.0) * invaa
    halfq = (2.0 * bb * b - 9.0 * a * b * c + 27.0 * a * a * d) * (0.5 / 27.0) * invaa * inva
    yy = p * p * p / 27.0 + halfq * halfq

    if yy > EPSILON:
        y = math.sqrt(yy)
        uuu = -halfq + y
        vvv = -halfq - y
        www = uuu if abs(uuu) > abs(vvv) else vvv
        w = _signed_cbrt(www)
        roots.add(w - p / (3.0 * w) - bover3a)
    elif yy < -EPSILON:
        x = -halfq
        y = math.sqrt(-yy)
        if abs(x) > EPSILON:
            theta = math.atan(y / x) if x > 0.0 else math.atan(y / x) + math.pi
            r = math.sqrt(x * x - yy)
        else:
            theta = math.pi / 2.0
            r = y
        theta /= 3.0
        r = math.pow(r, 1.0 / 3.0)
        ux = math.cos(theta) * r
        uyi = math.sin(theta) * r
        roots.add(ux + ux - bover3a)
        roots.add(2.0 * (ux * _COS120 - uyi * _SIN120) - bover3a)
        roots.add(2.0 * (ux * _COS120 + uyi * _SIN120) - bover3a)
    else:
        w = _signed_cbrt(-halfq)
        roots.add(w + w - bover3a)
        roots.add(2.0 * w * _COS120 - bover3a)

    return sorted(roots)


def solve_resolvent(a: float, b: float, c: float) -> list[float]:
    """Return the real roots of the monic cubic ``y**3 + a*y**2 + b*y + c``.

    Three roots are returned when all are real, two when a double root
    exists, and one otherwise.
    """
    a2 = a * a
    q = (a2 - 3.0 * b) / 9.0
    r = (a * (2.0 * a2 - 9.0 * b) + 27.0 * c) / 54.0
    r2 = r * r
    q3 = q * q * q

    if r2 < q3:
        t = min(max(r / math.sqrt(q3), -1.0), 1.0)
        t = math.acos(t)
        a /= 3.0
        q = -2.0 * math.sqrt(q)
        return [
            q * math.cos(t / 3.0) - a,
            q * math.cos((t + math.pi * 2.0) / 3.0) - a,
            q * math.cos((t - math.pi * 2.0) / 3.0) - a,
        ]

    big_a = -math.pow(abs(r) + math.sqrt(r2 - q3), 1.0 / 3.0)
    if r < 0.0:
        big_a = -big_a
    big_b = 0.0 if big_a == 0.0 else q / big_a

    a /= 3.0
    first = (big_a + big_b) - a
    second = -0.5 * (big_a + big_b) - a
    imaginary = 0.5 * math.sqrt(3.0) * (big_a - big_b)
    if abs(imaginary) < EPSILON:
        return [first, second]
    return [first]


def solve_quartic_monic(a: float, b: float, c: float, d: float) -> list[float]:
    """Return the distinct real roots of ``x**4 + a*x**3 + b*x**2 + c*x + d``, sorted."""
    roots: set[float] = set()

    resolvent = solve_resolvent(-b, a * c - 4.0 * d, -a * a * d - c * c + 4.0 * b * d)
    y = resolvent[0]
    for candidate in resolvent[1:]:
        if abs(candidate) > abs(y):
            y = candidate

    discriminant = y * y - 4.0 * d
    if abs(discriminant) < EPSILON:
        q1 = q2 = y * 0.5
        discriminant = a * a - 4.0 * (b - y)
        if abs(discriminant) < EPSILON:
            p1 = p2 = a * 0.5
        else:
            sqrt_d = _sqrt(discriminant)
            p1 = (a + sqrt_d) * 0.5
            p2 = (a - sqrt_d) * 0.5
    else:
        sqrt_d = _sqrt(discriminant)
        q1 = (y + sqrt_d) * 0.5
        q2 = (y - sqrt_d) * 0.5
        p1 = (a * q1 - c) / (q1 - q2)
        p2 = (c - a * q2) / (q1 - q2)

    for p, q in ((p1, q1), (p2, q2)):
        discriminant = p * p - 4.0 * q
        if abs(discriminant) < EPSILON:
            roots.add(-p * 0.5)
        elif discriminant > 0.0:
            sqrt_d = math.sqrt(discriminant)
            roots.add((-p + sqrt_d) * 0.5)
            roots.add((-p - sqrt_d) * 0.5)

    return sorted(roots)


def solve_quartic(a: float, b: float, c: float, d: float, e: float) -> list[float]:
    """Return the distinct real roots of ``a*x**4 + b*x**3 + c*x**2 + d*x + e``, sorted.

    Any coefficient may be zero; a vanishing leading term falls back to the
    cubic solver.
    """
    if abs(a) < EPSILON:
        return solve_cubic(b, c, d, e)
    return solve_quartic_monic(b / a, c / a, d / a, e / a)