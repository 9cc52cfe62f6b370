"""
Core integration algorithms
"""

from .config import (
    REFERENCE_FIXTURE,
    ConfigError,
    IntegrationConfig,
    config_from_dict,
    config_to_dict,
    load_config,
)
from .oracles import (
    exact_integral,
    exact_integral_fraction,
    simpson,
    trapezoid,
    trapezoid_errors,
)
from .ring import (
    Backend,
    Combinator,
    DefiniteIntegralEngine,
    EvalMode,
    IntegrationResult,
    Polynomial,
    RingPolynomialEvaluator,
    Rounding,
    integrate,
    integrate_widening,
)

__all__ = [
    "REFERENCE_FIXTURE",
    "ConfigError",
    "IntegrationConfig",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    "exact_integral",
    "exact_integral_fraction",
    "simpson",
    "trapezoid",
    "trapezoid_errors",
    "Backend",
    "Combinator",
    "DefiniteIntegralEngine",
    "EvalMode",
    "IntegrationResult",
    "Polynomial",
    "RingPolynomialEvaluator",
    "Rounding",
    "integrate",
    "integrate_widening",
]
