"""Definite integral F(x_end) - F(x_start) in the fixed-width register.

``integrate()`` is the single entry point. It:

1. Refuses the XOR combinator unless the caller opts in with ``allow_unsafe``.
2. Evaluates both antiderivatives over the shared denominator.
3. Subtracts the numerators (unsigned; a negative result is an error, never a wrap).
4. Performs the one deferred division.

Under XOR the two evaluations are combined with XOR instead of subtraction; the
result is the historical defect and carries no mathematical meaning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .errors import InvalidModeError, RingOverflowError
from .evaluator import RingPolynomialEvaluator
from .fixed_point import FixedPointMultiplier
from .scaler import divide_exact
from .types import Backend, Combinator, IntegrationResult, Polynomial, Rounding, ScaledValue

_logger = logging.getLogger(__name__)

WIDENING_WIDTHS: tuple[int, ...] = (32, 64, 128)


@dataclass(frozen=True)
class DefiniteIntegralEngine:
    evaluator: RingPolynomialEvaluator = field(default_factory=RingPolynomialEvaluator)

    @classmethod
    def with_width(cls, width: int) -> "DefiniteIntegralEngine":
        return cls(RingPolynomialEvaluator(FixedPointMultiplier(width)))

    @property
    def width(self) -> int:
        return self.evaluator.width

    def integrate(
        self,
        poly: Polynomial,
        x_start: int,
        x_end: int,
        combinator: Combinator = Combinator.ADD,
        *,
        allow_unsafe: bool = False,
        rounding: Rounding = Rounding.EXACT,
    ) -> int:
        """Integrate ``poly`` over ``[x_start, x_end]``.

        Raises:
            InvalidModeError: XOR requested without ``allow_unsafe``.
            RingOverflowError: an intermediate value leaves the register.
            RingUnderflowError: ADD mode with F(x_end) < F(x_start).
            PrecisionLossError: the integral is not an integer and ``rounding`` is EXACT.
        """
        if not isinstance(combinator, Combinator):
            raise TypeError(f"unsupported combinator: {combinator!r}")
        if not combinator.is_arithmetic and not allow_unsafe:
            raise InvalidModeError(
                f"{combinator.value} combinator is not an arithmetic sum; pass allow_unsafe=True"
            )

        f_start = self.evaluator.evaluate_scaled(poly, x_start, combinator)
        f_end = self.evaluator.evaluate_scaled(poly, x_end, combinator)

        if combinator is Combinator.XOR:
            return f_end.numerator ^ f_start.numerator

        mul = self.evaluator.multiplier
        diff = mul.sub_checked(f_end.numerator, f_start.numerator)
        return divide_exact(ScaledValue(diff, f_end.denominator), rounding)

    def integrate_result(
        self,
        poly: Polynomial,
        x_start: int,
        x_end: int,
        combinator: Combinator = Combinator.ADD,
        *,
        allow_unsafe: bool = False,
        rounding: Rounding = Rounding.EXACT,
    ) -> IntegrationResult:
        value = self.integrate(
            poly, x_start, x_end, combinator, allow_unsafe=allow_unsafe, rounding=rounding
        )
        return IntegrationResult(
            value=value,
            backend=Backend.RING,
            x_start=x_start,
            x_end=x_end,
            combinator=combinator,
            width=self.width,
        )


def integrate(
    poly: Polynomial,
    x_start: int,
    x_end: int,
    combinator: Combinator = Combinator.ADD,
    *,
    width: int = 32,
    allow_unsafe: bool = False,
    rounding: Rounding = Rounding.EXACT,
) -> int:
    """Module-level convenience wrapper around `DefiniteIntegralEngine`."""
    engine = DefiniteIntegralEngine.with_width(width)
    return engine.integrate(
        poly, x_start, x_end, combinator, allow_unsafe=allow_unsafe, rounding=rounding
    )


def integrate_widening(
    poly: Polynomial,
    x_start: int,
    x_end: int,
    *,
    widths: Sequence[int] = WIDENING_WIDTHS,
    rounding: Rounding = Rounding.EXACT,
) -> IntegrationResult:
    """ADD-mode integral, promoting to the next register width on overflow.

    Only `RingOverflowError` triggers a retry; every other condition propagates.
    Re-raises the last overflow when the widest register is still too small.
    """
    if not widths:
        raise ValueError("widths must be non-empty")
    last_error: RingOverflowError | None = None
    for width in widths:
        engine = DefiniteIntegralEngine.with_width(width)
        try:
            return engine.integrate_result(poly, x_start, x_end, rounding=rounding)
        except RingOverflowError as exc:
            _logger.info("ring overflow at u%d, promoting: %s", width, exc)
            last_error = exc
    assert last_error is not None
    raise last_error
