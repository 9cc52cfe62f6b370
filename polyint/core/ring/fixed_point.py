"""Shift-and-add multiplication over a fixed-width unsigned register.

The register is modelled explicitly: values live in `[0, 2**width)` and every
primitive is built from left/right shifts, a bit test and an arithmetic add.

Two flavours are provided:
- `multiply()` is the raw register primitive. It wraps modulo `2**width` and
  does not report overflow.
- `multiply_checked()`, `add_checked()`, `sub_checked()` and `power_checked()`
  fail closed with `RingOverflowError` / `RingUnderflowError`. The evaluator
  only uses these.

Partial products are accumulated with `+`, never `^`: XOR drops carries and is
not multiplication.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import RingOverflowError, RingUnderflowError
from .types import require_int

DEFAULT_WIDTH: int = 32


@dataclass(frozen=True)
class FixedPointMultiplier:
    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        require_int("width", self.width)
        if self.width < 1:
            raise ValueError(f"width must be at least 1: {self.width}")

    @property
    def mask(self) -> int:
        """Largest value the register can hold."""
        return (1 << self.width) - 1

    def fits(self, value: int) -> bool:
        return 0 <= value <= self.mask

    def require_fits(self, value: int, *, what: str = "value") -> int:
        require_int(what, value)
        if value < 0:
            raise ValueError(f"{what} must be non-negative: {value}")
        if value > self.mask:
            raise RingOverflowError(f"{what}={value} exceeds register", width=self.width)
        return value

    def multiply(self, multiplicand: int, multiplier: int) -> int:
        """Binary long multiplication with register wraparound.

        Equivalent to ``(multiplicand * multiplier) & mask``.
        """
        mask = self.mask
        shifted = self.require_fits(multiplicand, what="multiplicand")
        bits = self.require_fits(multiplier, what="multiplier")
        acc = 0
        while bits:
            if bits & 1:
                acc = (acc + shifted) & mask
            shifted = (shifted << 1) & mask
            bits >>= 1
        return acc

    def multiply_checked(self, multiplicand: int, multiplier: int) -> int:
        """Like `multiply()` but raises instead of wrapping."""
        mask = self.mask
        shifted = self.require_fits(multiplicand, what="multiplicand")
        bits = self.require_fits(multiplier, what="multiplier")
        acc = 0
        while bits:
            if bits & 1:
                acc += shifted
                if acc > mask:
                    raise RingOverflowError(
                        f"product {multiplicand}*{multiplier} overflows", width=self.width
                    )
            # A shifted copy past the mask only matters if a later set bit adds
            # it, and then the accumulator check fires.
            shifted <<= 1
            bits >>= 1
        return acc

    def add_checked(self, lhs: int, rhs: int) -> int:
        total = self.require_fits(lhs, what="lhs") + self.require_fits(rhs, what="rhs")
        if total > self.mask:
            raise RingOverflowError(f"sum {lhs}+{rhs} overflows", width=self.width)
        return total

    def sub_checked(self, lhs: int, rhs: int) -> int:
        lhs = self.require_fits(lhs, what="lhs")
        rhs = self.require_fits(rhs, what="rhs")
        if rhs > lhs:
            raise RingUnderflowError(f"{lhs} - {rhs} is negative in the unsigned domain")
        return lhs - rhs

    def power_checked(self, base: int, exponent: int) -> int:
        """base**exponent by repeated checked multiplication (no squaring shortcut)."""
        require_int("exponent", exponent)
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative: {exponent}")
        base = self.require_fits(base, what="base")
        result = 1
        for _ in range(exponent):
            result = self.multiply_checked(result, base)
        return result
