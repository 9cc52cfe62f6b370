"""Tests for polyint/core/ring/engine.py — definite integral in the register.

Covers the reference fixture end-to-end, the XOR regression mode, and the three
fail-closed conditions (overflow, underflow, precision loss).
"""

import logging

import pytest

from polyint.core.ring import (
    Backend,
    Combinator,
    DefiniteIntegralEngine,
    InvalidModeError,
    PrecisionLossError,
    Polynomial,
    RingOverflowError,
    RingUnderflowError,
    Rounding,
    integrate,
    integrate_widening,
)

FIXTURE = Polynomial(1, 2, 3, 4, 5)


class TestFixture:
    def test_add_reproduces_26250(self):
        assert integrate(FIXTURE, 0, 10) == 26_250

    def test_engine_object(self):
        engine = DefiniteIntegralEngine()
        assert engine.width == 32
        assert engine.integrate(FIXTURE, 0, 10, Combinator.ADD) == 26_250

    def test_result_is_tagged(self):
        result = DefiniteIntegralEngine().integrate_result(FIXTURE, 0, 10)
        assert result.value == 26_250
        assert result.backend is Backend.RING
        assert result.combinator is Combinator.ADD
        assert result.width == 32
        assert result.label == "ring/add/u32"
        assert (result.x_start, result.x_end) == (0, 10)


class TestAddMode:
    def test_empty_interval(self):
        assert integrate(FIXTURE, 7, 7) == 0

    def test_non_integral_endpoints_with_integral_difference(self):
        # F(1) = 8.7 and F(11) = 41158.7; only the difference is divided out.
        assert integrate(FIXTURE, 1, 11) == 41_150

    def test_single_term(self):
        assert integrate(Polynomial(a=1), 0, 5) == 625

    def test_precision_loss_is_reported(self):
        # F(2) - F(1) = 40.4 - 8.7 = 31.7
        with pytest.raises(PrecisionLossError):
            integrate(FIXTURE, 1, 2)

    def test_floor_rounding(self):
        # 31.7 -> 31
        assert integrate(FIXTURE, 1, 2, rounding=Rounding.FLOOR) == 31

    def test_reversed_bounds_underflow(self):
        with pytest.raises(RingUnderflowError):
            integrate(FIXTURE, 10, 0)

    def test_zero_polynomial(self):
        assert integrate(Polynomial(), 0, 1000) == 0


class TestXorMode:
    def test_refused_without_opt_in(self):
        with pytest.raises(InvalidModeError):
            integrate(FIXTURE, 0, 10, Combinator.XOR)

    def test_opt_in_diverges_from_add(self):
        xor_value = integrate(FIXTURE, 0, 10, Combinator.XOR, allow_unsafe=True)
        assert xor_value == 20_000 ^ 5_000 ^ 1_000 ^ 200 ^ 50
        assert xor_value != 26_250

    def test_xor_of_endpoints(self):
        # XOR pairing has no notion of a negative result: reversed bounds give
        # the same value instead of an underflow.
        forward = integrate(FIXTURE, 0, 10, Combinator.XOR, allow_unsafe=True)
        backward = integrate(FIXTURE, 10, 0, Combinator.XOR, allow_unsafe=True)
        assert forward == backward

    def test_result_label(self):
        result = DefiniteIntegralEngine().integrate_result(
            FIXTURE, 0, 10, Combinator.XOR, allow_unsafe=True
        )
        assert result.label == "ring/xor/u32"

    def test_rejects_non_enum_combinator(self):
        with pytest.raises(TypeError):
            integrate(FIXTURE, 0, 10, "xor")  # type: ignore[arg-type]


class TestOverflow:
    def test_32_bit_overflow(self):
        # 12 * 100^5 = 1.2e11 does not fit in 32 bits.
        with pytest.raises(RingOverflowError) as excinfo:
            integrate(Polynomial(a=5), 0, 100)
        assert excinfo.value.width == 32

    def test_64_bit_fits(self):
        assert integrate(Polynomial(a=5), 0, 100, width=64) == 100**5

    def test_with_width(self):
        assert DefiniteIntegralEngine.with_width(64).width == 64


class TestWidening:
    def test_no_promotion_needed(self):
        result = integrate_widening(FIXTURE, 0, 10)
        assert result.value == 26_250
        assert result.width == 32

    def test_promotes_on_overflow(self, caplog):
        with caplog.at_level(logging.INFO, logger="polyint.core.ring.engine"):
            result = integrate_widening(Polynomial(a=5), 0, 100)
        assert result.value == 100**5
        assert result.width == 64
        assert "promoting" in caplog.text

    def test_reraises_when_widest_overflows(self):
        with pytest.raises(RingOverflowError):
            integrate_widening(Polynomial(a=5), 0, 100, widths=(8, 16))

    def test_other_errors_are_not_retried(self):
        with pytest.raises(RingUnderflowError):
            integrate_widening(FIXTURE, 10, 0)

    def test_empty_widths(self):
        with pytest.raises(ValueError):
            integrate_widening(FIXTURE, 0, 10, widths=())
