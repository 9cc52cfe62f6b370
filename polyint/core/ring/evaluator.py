"""Term-by-term evaluation of f(x) and F(x) in the fixed-width register."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable

from .fixed_point import FixedPointMultiplier
from .scaler import ANTIDERIVATIVE_DENOMINATOR, antiderivative_terms, divide_exact, exact_terms
from .types import Combinator, EvalMode, Polynomial, Rounding, ScaledValue

_VALUE_EXPONENTS: tuple[int, int, int, int, int] = (4, 3, 2, 1, 0)


def fold_terms(
    terms: Iterable[int], combinator: Combinator, multiplier: FixedPointMultiplier
) -> int:
    """Fold term values with a single combinator.

    `ADD` is a checked arithmetic sum. `XOR` is the historical XOR-as-addition
    fold: carries are dropped, so the result is not the sum of the terms.
    """
    if combinator is Combinator.ADD:
        return reduce(multiplier.add_checked, terms, 0)
    if combinator is Combinator.XOR:
        return reduce(lambda acc, term: acc ^ multiplier.require_fits(term, what="term"), terms, 0)
    raise TypeError(f"unsupported combinator: {combinator!r}")


@dataclass(frozen=True)
class RingPolynomialEvaluator:
    multiplier: FixedPointMultiplier = field(default_factory=FixedPointMultiplier)

    @property
    def width(self) -> int:
        return self.multiplier.width

    def value_terms(self, poly: Polynomial, x: int) -> tuple[int, ...]:
        """``a*x^4, b*x^3, c*x^2, d*x, e`` in the register."""
        mul = self.multiplier
        x = mul.require_fits(x, what="x")
        return tuple(
            mul.multiply_checked(coefficient, mul.power_checked(x, exponent))
            for coefficient, exponent in zip(poly.coefficients, _VALUE_EXPONENTS)
        )

    def evaluate_scaled(
        self, poly: Polynomial, x: int, combinator: Combinator = Combinator.ADD
    ) -> ScaledValue:
        """F(x) before the deferred division.

        Under `ADD` the numerators share the denominator 60 and are summed. Under
        `XOR` each term is divided out on its own first (a common denominator has
        no meaning for an XOR fold), so the denominator is 1.
        """
        mul = self.multiplier
        if combinator is Combinator.ADD:
            terms = antiderivative_terms(poly, x, multiplier=mul)
            numerator = fold_terms((t.numerator for t in terms), combinator, mul)
            return ScaledValue(numerator, ANTIDERIVATIVE_DENOMINATOR)
        return ScaledValue(fold_terms(exact_terms(poly, x, multiplier=mul), combinator, mul), 1)

    def evaluate(
        self,
        poly: Polynomial,
        x: int,
        mode: EvalMode = EvalMode.VALUE,
        combinator: Combinator = Combinator.ADD,
        *,
        rounding: Rounding = Rounding.EXACT,
    ) -> int:
        """Evaluate f(x) or F(x).

        Raises:
            RingOverflowError: a term or fold leaves the register.
            PrecisionLossError: F(x) is not an integer and ``rounding`` is EXACT.
        """
        if mode is EvalMode.VALUE:
            return fold_terms(self.value_terms(poly, x), combinator, self.multiplier)
        if mode is EvalMode.ANTIDERIVATIVE:
            return divide_exact(self.evaluate_scaled(poly, x, combinator), rounding)
        raise TypeError(f"unsupported mode: {mode!r}")
