"""Data types for the ring-arithmetic backend.

All types are frozen dataclasses (immutable) or enums. A `Polynomial` is built
once per run and passed explicitly; nothing in this package keeps coefficients
in module state.

Conventions:
- coefficients and bounds are non-negative Python ints (unsigned domain),
- `ScaledValue` carries a symbolic denominator until the final division,
- `Combinator.XOR` is the historical XOR-as-addition defect, kept for
  regression comparison only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from fractions import Fraction
from typing import Iterable


def require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_unsigned(name: str, value: int) -> int:
    """Validate a coefficient or bound: an int in the unsigned domain."""
    require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")
    return int(value)


@unique
class Combinator(Enum):
    """How term values are folded into a running total."""

    ADD = "add"
    XOR = "xor"

    @property
    def is_arithmetic(self) -> bool:
        """True only for the mode whose folds are real sums."""
        return self is Combinator.ADD


@unique
class EvalMode(Enum):
    VALUE = "value"
    ANTIDERIVATIVE = "antiderivative"


@unique
class Rounding(Enum):
    """Policy for the single deferred division."""

    EXACT = "exact"  # nonzero remainder -> PrecisionLossError
    FLOOR = "floor"


@unique
class Backend(Enum):
    RING = "ring"
    EXACT_ANTIDERIVATIVE = "exact"
    TRAPEZOID = "trapezoid"
    SIMPSON = "simpson"

    @property
    def claims_exactness(self) -> bool:
        """Quadrature rules are convergence cross-checks, not exact oracles."""
        return self in (Backend.RING, Backend.EXACT_ANTIDERIVATIVE)


@dataclass(frozen=True)
class Polynomial:
    """f(x) = a*x^4 + b*x^3 + c*x^2 + d*x + e over unsigned integer coefficients."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d", "e"):
            require_unsigned(name, getattr(self, name))

    @property
    def coefficients(self) -> tuple[int, int, int, int, int]:
        """Coefficients ordered from the x^4 term down to the constant."""
        return (self.a, self.b, self.c, self.d, self.e)

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> "Polynomial":
        items = tuple(values)
        if len(items) != 5:
            raise ValueError(f"expected 5 coefficients, got {len(items)}")
        return cls(*items)


@dataclass(frozen=True)
class ScaledValue:
    """numerator / denominator with the division not yet performed."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        require_int("numerator", self.numerator)
        require_int("denominator", self.denominator)
        if self.denominator <= 0:
            raise ValueError("denominator must be positive")

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


@dataclass(frozen=True)
class IntegrationResult:
    """A definite integral tagged with the backend that produced it."""

    value: int | float | Fraction
    backend: Backend
    x_start: int | float
    x_end: int | float
    combinator: Combinator | None = None
    width: int | None = None

    @property
    def label(self) -> str:
        if self.backend is not Backend.RING:
            return self.backend.value
        parts = [self.backend.value]
        if self.combinator is not None:
            parts.append(self.combinator.value)
        if self.width is not None:
            parts.append(f"u{self.width}")
        return "/".join(parts)
