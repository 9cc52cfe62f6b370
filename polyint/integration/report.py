"""
Backend harness and result sinks.

`run_backends()` runs the selected backends against one config and hands every
`IntegrationResult` to a `ResultSink`. Rendering is the sink's concern; the core
never formats anything.

Ring failures (overflow, precision loss, underflow, refused mode) are logged and
that backend is skipped, so the floating-point oracles still report.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Sequence

from ..core.config import IntegrationConfig
from ..core.oracles import exact_integral, simpson, trapezoid
from ..core.ring import Backend, DefiniteIntegralEngine, IntegrationResult, RingArithmeticError

_logger = logging.getLogger(__name__)

DEFAULT_BACKENDS: tuple[Backend, ...] = (
    Backend.RING,
    Backend.EXACT_ANTIDERIVATIVE,
    Backend.TRAPEZOID,
)


class ResultSink(Protocol):
    def emit(self, result: IntegrationResult) -> None: ...


class LoggingResultSink:
    """Writes each result to a logger at INFO."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger

    def emit(self, result: IntegrationResult) -> None:
        self._logger.info(
            "[%s] integral over [%s, %s] = %s",
            result.label,
            result.x_start,
            result.x_end,
            result.value,
        )


class CollectingResultSink:
    def __init__(self) -> None:
        self.results: list[IntegrationResult] = []

    def emit(self, result: IntegrationResult) -> None:
        self.results.append(result)


def _run_one(config: IntegrationConfig, backend: Backend) -> IntegrationResult:
    if backend is Backend.RING:
        engine = DefiniteIntegralEngine.with_width(config.width)
        return engine.integrate_result(
            config.polynomial,
            config.x_start,
            config.x_end,
            config.combinator,
            allow_unsafe=config.allow_unsafe,
        )

    coeffs = config.coefficients
    if backend is Backend.EXACT_ANTIDERIVATIVE:
        value = exact_integral(coeffs, config.x_start, config.x_end)
    elif backend is Backend.TRAPEZOID:
        value = trapezoid(coeffs, config.x_start, config.x_end, config.interval_count)
    elif backend is Backend.SIMPSON:
        # Simpson needs an even count; round up rather than reject the config.
        n = config.interval_count + (config.interval_count % 2)
        value = simpson(coeffs, config.x_start, config.x_end, n)
    else:
        raise ValueError(f"unknown backend: {backend!r}")
    return IntegrationResult(
        value=value, backend=backend, x_start=config.x_start, x_end=config.x_end
    )


def run_backends(
    config: IntegrationConfig,
    sink: ResultSink,
    *,
    backends: Iterable[Backend] | None = None,
) -> list[IntegrationResult]:
    """Run each backend once and emit its result. Returns the emitted results."""
    results: list[IntegrationResult] = []
    for backend in backends if backends is not None else DEFAULT_BACKENDS:
        try:
            result = _run_one(config, backend)
        except RingArithmeticError as exc:
            _logger.warning("%s backend failed, skipping: %s", backend.value, exc)
            continue
        sink.emit(result)
        results.append(result)
    return results


def results_agree(results: Sequence[IntegrationResult], *, tolerance: float = 1e-6) -> bool:
    """True when every exact backend is within ``tolerance`` of the first one.

    Quadrature results and XOR-mode ring results never take part: the former
    only converge, the latter are not arithmetic values. Fewer than two comparable
    results never count as agreement.
    """
    values = [
        float(r.value)
        for r in results
        if r.backend.claims_exactness
        and (r.combinator is None or r.combinator.is_arithmetic)
    ]
    if len(values) < 2:
        return False
    reference = values[0]
    return all(abs(v - reference) <= tolerance for v in values[1:])
