"""Exact scaling of rational coefficients for the antiderivative.

F(x) = (a/5)x^5 + (b/4)x^4 + (c/3)x^3 + (d/2)x^2 + e*x

Dividing each coefficient before multiplying truncates (`11 // 5 == 2`). Two
exact strategies are provided instead:

(a) `scale_exact()`: multiply `coefficient * power` first, then divide once and
    refuse a nonzero remainder.
(b) `antiderivative_terms()`: rewrite every term over the common denominator
    60 = lcm(5, 4, 3, 2, 1) so the numerators are plain integer products. The
    denominator is carried in `ScaledValue` and divided out once, by
    `divide_exact()`, at the very end.
"""

from __future__ import annotations

from .errors import PrecisionLossError
from .fixed_point import FixedPointMultiplier
from .types import Polynomial, Rounding, ScaledValue, require_int

ANTIDERIVATIVE_DIVISORS: tuple[int, int, int, int, int] = (5, 4, 3, 2, 1)
ANTIDERIVATIVE_DENOMINATOR: int = 60

# 60 / divisor for each term, paired with the power of x it multiplies.
_NUMERATOR_FACTORS: tuple[tuple[int, int], ...] = (
    (12, 5),
    (15, 4),
    (20, 3),
    (30, 2),
    (60, 1),
)


def scale_exact(
    coefficient: int,
    divisor: int,
    power: int,
    *,
    multiplier: FixedPointMultiplier | None = None,
) -> int:
    """Return ``(coefficient / divisor) * power`` when that is an integer.

    Raises:
        PrecisionLossError: ``coefficient * power`` is not a multiple of ``divisor``.
        RingOverflowError: the product does not fit in the register.
    """
    require_int("divisor", divisor)
    if divisor <= 0:
        raise ValueError(f"divisor must be positive: {divisor}")
    mul = multiplier if multiplier is not None else FixedPointMultiplier()
    product = mul.multiply_checked(coefficient, power)
    quotient, remainder = divmod(product, divisor)
    if remainder:
        raise PrecisionLossError(product, divisor)
    return quotient


def divide_exact(value: ScaledValue, rounding: Rounding = Rounding.EXACT) -> int:
    """Perform the deferred division of a scaled value."""
    quotient, remainder = divmod(value.numerator, value.denominator)
    if remainder and rounding is Rounding.EXACT:
        raise PrecisionLossError(value.numerator, value.denominator)
    return quotient


def antiderivative_terms(
    poly: Polynomial, x: int, *, multiplier: FixedPointMultiplier
) -> tuple[ScaledValue, ...]:
    """The five antiderivative terms at ``x``, each over the denominator 60."""
    x = multiplier.require_fits(x, what="x")
    terms = []
    for coefficient, (factor, exponent) in zip(poly.coefficients, _NUMERATOR_FACTORS):
        scaled_coefficient = multiplier.multiply_checked(coefficient, factor)
        numerator = multiplier.multiply_checked(
            scaled_coefficient, multiplier.power_checked(x, exponent)
        )
        terms.append(ScaledValue(numerator, ANTIDERIVATIVE_DENOMINATOR))
    return tuple(terms)


def exact_terms(
    poly: Polynomial, x: int, *, multiplier: FixedPointMultiplier
) -> tuple[int, ...]:
    """The five antiderivative terms at ``x``, each divided out individually."""
    x = multiplier.require_fits(x, what="x")
    return tuple(
        scale_exact(
            coefficient,
            divisor,
            multiplier.power_checked(x, exponent),
            multiplier=multiplier,
        )
        for coefficient, divisor, exponent in zip(
            poly.coefficients, ANTIDERIVATIVE_DIVISORS, (5, 4, 3, 2, 1)
        )
    )
