"""
Floating-point reference oracles for the quartic integral.

These are independent of the ring backend and exist to validate it:
- `exact_integral()` evaluates the closed-form antiderivative,
- `trapezoid()` / `simpson()` are composite quadrature cross-checks,
- `exact_integral_fraction()` is the rational ground truth used by the integer
  property tests.

Every function is stateless and takes coefficients in `(a, b, c, d, e)` order.
Bounds may be any reals; the unsigned restriction applies only to the ring.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence

Coefficients = Sequence[float]


def _require_coefficients(coeffs: Coefficients) -> tuple:
    items = tuple(coeffs)
    if len(items) != 5:
        raise ValueError(f"expected 5 coefficients, got {len(items)}")
    return items


def _require_interval_count(n: int, *, even: bool = False) -> int:
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("interval count must be an int")
    if n < 1:
        raise ValueError(f"interval count must be at least 1: {n}")
    if even and n % 2:
        raise ValueError(f"interval count must be even: {n}")
    return n


def polynomial_value(coeffs: Coefficients, x: float) -> float:
    """f(x) by Horner's rule."""
    a, b, c, d, e = _require_coefficients(coeffs)
    return (((a * x + b) * x + c) * x + d) * x + e


def antiderivative_value(coeffs: Coefficients, x: float) -> float:
    """F(x) = (a/5)x^5 + (b/4)x^4 + (c/3)x^3 + (d/2)x^2 + e*x, with F(0) = 0."""
    a, b, c, d, e = _require_coefficients(coeffs)
    return ((((a / 5 * x + b / 4) * x + c / 3) * x + d / 2) * x + e) * x


def exact_integral(coeffs: Coefficients, x_start: float, x_end: float) -> float:
    return antiderivative_value(coeffs, x_end) - antiderivative_value(coeffs, x_start)


def exact_integral_fraction(
    coeffs: Iterable[int | Fraction], x_start: int | Fraction, x_end: int | Fraction
) -> Fraction:
    """Exact rational F(x_end) - F(x_start)."""
    a, b, c, d, e = (Fraction(v) for v in _require_coefficients(tuple(coeffs)))

    def F(x: Fraction) -> Fraction:
        x = Fraction(x)
        return a / 5 * x**5 + b / 4 * x**4 + c / 3 * x**3 + d / 2 * x**2 + e * x

    return F(x_end) - F(x_start)


def trapezoid(coeffs: Coefficients, x_start: float, x_end: float, n: int) -> float:
    """Composite trapezoidal rule over ``n`` equal subintervals."""
    n = _require_interval_count(n)
    h = (x_end - x_start) / n
    total = (polynomial_value(coeffs, x_start) + polynomial_value(coeffs, x_end)) / 2
    for i in range(1, n):
        total += polynomial_value(coeffs, x_start + i * h)
    return total * h


def simpson(coeffs: Coefficients, x_start: float, x_end: float, n: int) -> float:
    """Composite Simpson rule over an even ``n``; exact up to cubic terms."""
    n = _require_interval_count(n, even=True)
    h = (x_end - x_start) / n
    total = polynomial_value(coeffs, x_start) + polynomial_value(coeffs, x_end)
    for i in range(1, n):
        weight = 4 if i % 2 else 2
        total += weight * polynomial_value(coeffs, x_start + i * h)
    return total * h / 3


def trapezoid_errors(
    coeffs: Coefficients, x_start: float, x_end: float, counts: Iterable[int]
) -> list[tuple[int, float]]:
    """(n, |trapezoid - exact|) for each interval count, in the given order."""
    exact = exact_integral(coeffs, x_start, x_end)
    return [(n, abs(trapezoid(coeffs, x_start, x_end, n) - exact)) for n in counts]
