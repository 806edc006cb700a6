"""Dense polynomial helpers.

Coefficient sequences are ordered from the highest degree down to the
constant term, so ``[1, 0, -1]`` stands for ``x**2 - 1``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

EPSILON = sys.float_info.epsilon


def _as_floats(coeffs: Sequence[float]) -> list[float]:
    return [float(c) for c in coeffs]


def poly_conv(lhs: Sequence[float], rhs: Sequence[float]) -> list[float]:
    """Return the coefficients of the product ``lhs(x) * rhs(x)``."""
    left = _as_floats(lhs)
    right = _as_floats(rhs)
    if not left or not right:
        raise ValueError("cannot multiply an empty polynomial")
    result = [0.0] * (len(left) + len(right) - 1)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            result[i + j] += a * b
    return result


def poly_sqr(coeffs: Sequence[float]) -> list[float]:
    """Return the coefficients of ``coeffs(x) ** 2``, using its symmetry."""
    c = _as_floats(coeffs)
    size = len(c)
    if not size:
        raise ValueError("cannot square an empty polynomial")
    result = []
    for i in range(2 * size - 1):
        low = max(i - size + 1, 0)
        high = min(size, i + 1) + low
        half = high >> 1
        total = c[half] * c[half] if high & 1 else 0.0
        for j in range(low, half):
            total += 2.0 * c[j] * c[i - j]
        result.append(total)
    return result


def poly_val(
    coeffs: Sequence[float], x: float, numerical_stability: bool = True
) -> float:
    """Evaluate the polynomial at ``x``.

    The stable form sums powers of ``x`` from the constant term up; the
    other form is the faster but less accurate Horner scheme.
    """
    c = _as_floats(coeffs)
    if not c:
        return 0.0
    if abs(x) < EPSILON:
        return c[-1]
    if x == 1.0:
        return sum(c)
    total = 0.0
    if numerical_stability:
        power = 1.0
        for coeff in reversed(c):
            total += coeff * power
            power *= x
    else:
        for coeff in c:
            total = total * x + coeff
    return total


def poly_eval(coeffs: Sequence[float], x: float) -> float:
    """Evaluate the polynomial at ``x`` without the Horner scheme.

    Used near roots, where Horner's cancellation errors slow root finding.
    """
    c = _as_floats(coeffs)
    if not c:
        return 0.0
    if abs(x) < EPSILON:
        return c[-1]
    total = 0.0
    if x == 1.0:
        for coeff in reversed(c):
            total += coeff
        return total
    power = 1.0
    for coeff in reversed(c):
        total += coeff * power
        power *= x
    return total


def poly_mod(u: Sequence[float], v: Sequence[float]) -> list[float]:
    """Return the remainder of ``u(x) / v(x)``.

    The leading coefficient of ``v`` must be 1 or -1.  Leading remainder
    coefficients below machine epsilon are dropped; a zero remainder is
    returned as ``[0.0]``.
    """
    r = _as_floats(u)
    divisor = _as_floats(v)
    if not divisor:
        raise ValueError("divisor must not be empty")
    if divisor[0] not in (1.0, -1.0):
        raise ValueError("leading coefficient of the divisor must be 1 or -1")
    if len(divisor) > len(r):
        raise ValueError("divisor must not have a higher degree than dividend")

    order_u = len(r) - 1
    order_v = len(divisor) - 1

    if divisor[0] < 0.0:
        for i in range(order_v + 1, order_u + 1, 2):
            r[i] = -r[i]
        for i in range(order_u - order_v + 1):
            for j in range(i + 1, order_v + i + 1):
                r[j] = -r[j] - r[i] * divisor[j - i]
    else:
        for i in range(order_u - order_v + 1):
            for j in range(i + 1, order_v + i + 1):
                r[j] = r[j] - r[i] * divisor[j - i]

    k = order_v - 1
    while k >= 0 and abs(r[order_u - k]) < EPSILON:
        r[order_u - k] = 0.0
        k -= 1

    size = 1 if k <= 0 else k + 1
    return r[len(r) - size:]


def poly_deri(coeffs: Sequence[float]) -> list[float]:
    """Return the coefficients of the derivative polynomial."""
    c = _as_floats(coeffs)
    order = len(c) - 1
    return [(order - i) * coeff for i, coeff in enumerate(c[:-1])]