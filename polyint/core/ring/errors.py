"""Exception types for the ring-arithmetic backend.

Every condition is local and recoverable: callers decide whether to reject the
input, retry at a wider register width, or fall back to a floating-point oracle.
"""

from __future__ import annotations


class RingArithmeticError(Exception):
    """Base class for fixed-width arithmetic failures."""


class RingOverflowError(RingArithmeticError):
    """Raised when a product, sum or bound does not fit in the register."""

    def __init__(self, message: str, *, width: int) -> None:
        self.width = width
        super().__init__(f"{message} (width={width})")


class PrecisionLossError(RingArithmeticError):
    """Raised when a division would discard a nonzero remainder."""

    def __init__(self, numerator: int, denominator: int) -> None:
        self.numerator = numerator
        self.denominator = denominator
        self.remainder = numerator % denominator
        super().__init__(
            f"{numerator} / {denominator} leaves remainder {self.remainder}"
        )


class RingUnderflowError(RingArithmeticError):
    """Raised when an unsigned subtraction would go negative."""


class InvalidModeError(RingArithmeticError):
    """Raised when the XOR combinator is used without the unsafe opt-in."""
