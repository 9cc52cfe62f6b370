"""`ring`: fixed-width unsigned polynomial arithmetic.

Evaluates f(x) = a*x^4 + b*x^3 + c*x^2 + d*x + e and its antiderivative with
shift-and-add multiplication only:
- deterministic, integer-only,
- immutable inputs (frozen dataclasses),
- fail-closed on overflow, precision loss and unsigned underflow.

Public API:
- `FixedPointMultiplier(width).multiply(p, q)` / `.multiply_checked(p, q)`
- `scale_exact(coefficient, divisor, power)`
- `RingPolynomialEvaluator().evaluate(poly, x, mode, combinator)`
- `DefiniteIntegralEngine().integrate(poly, x_start, x_end, combinator)`
- `integrate(...)`, `integrate_widening(...)`
"""

from .engine import DefiniteIntegralEngine, integrate, integrate_widening
from .errors import (
    InvalidModeError,
    PrecisionLossError,
    RingArithmeticError,
    RingOverflowError,
    RingUnderflowError,
)
from .evaluator import RingPolynomialEvaluator, fold_terms
from .fixed_point import DEFAULT_WIDTH, FixedPointMultiplier
from .scaler import ANTIDERIVATIVE_DENOMINATOR, antiderivative_terms, divide_exact, scale_exact
from .types import (
    Backend,
    Combinator,
    EvalMode,
    IntegrationResult,
    Polynomial,
    Rounding,
    ScaledValue,
)

__all__ = [
    "DefiniteIntegralEngine",
    "integrate",
    "integrate_widening",
    "InvalidModeError",
    "PrecisionLossError",
    "RingArithmeticError",
    "RingOverflowError",
    "RingUnderflowError",
    "RingPolynomialEvaluator",
    "fold_terms",
    "DEFAULT_WIDTH",
    "FixedPointMultiplier",
    "ANTIDERIVATIVE_DENOMINATOR",
    "antiderivative_terms",
    "divide_exact",
    "scale_exact",
    "Backend",
    "Combinator",
    "EvalMode",
    "IntegrationResult",
    "Polynomial",
    "Rounding",
    "ScaledValue",
]
