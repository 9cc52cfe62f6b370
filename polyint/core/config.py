"""
Run configuration: coefficients, bounds and backend knobs.

A config is an immutable snapshot read once per run. YAML files are parsed with
`yaml.safe_load` and converted strictly: unknown keys, missing keys and wrong
types are rejected rather than defaulted.

Round-trip property (tested): `config_from_dict(config_to_dict(c)) == c`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .ring.fixed_point import DEFAULT_WIDTH
from .ring.types import Combinator, Polynomial, require_unsigned

DEFAULT_INTERVAL_COUNT: int = 1000

_REQUIRED_KEYS: tuple[str, ...] = ("a", "b", "c", "d", "e", "x_start", "x_end")


class ConfigError(ValueError):
    """Raised for malformed configuration input."""


@dataclass(frozen=True)
class IntegrationConfig:
    a: int
    b: int
    c: int
    d: int
    e: int
    x_start: int
    x_end: int
    interval_count: int = DEFAULT_INTERVAL_COUNT
    width: int = DEFAULT_WIDTH
    combinator: Combinator = Combinator.ADD
    allow_unsafe: bool = False

    def __post_init__(self) -> None:
        for name in _REQUIRED_KEYS:
            require_unsigned(name, getattr(self, name))
        for name in ("interval_count", "width"):
            value = getattr(self, name)
            require_unsigned(name, value)
            if value < 1:
                raise ValueError(f"{name} must be at least 1: {value}")
        if not isinstance(self.combinator, Combinator):
            raise TypeError("combinator must be a Combinator")
        if not isinstance(self.allow_unsafe, bool):
            raise TypeError("allow_unsafe must be a bool")

    @property
    def polynomial(self) -> Polynomial:
        return Polynomial(self.a, self.b, self.c, self.d, self.e)

    @property
    def coefficients(self) -> tuple[int, int, int, int, int]:
        return self.polynomial.coefficients


CONFIG_KEYS: tuple[str, ...] = tuple(IntegrationConfig.__dataclass_fields__)

REFERENCE_FIXTURE = IntegrationConfig(a=1, b=2, c=3, d=4, e=5, x_start=0, x_end=10)


def config_to_dict(config: IntegrationConfig) -> dict[str, Any]:
    out: dict[str, Any] = {name: getattr(config, name) for name in CONFIG_KEYS}
    out["combinator"] = config.combinator.value
    return out


def _parse_combinator(value: Any) -> Combinator:
    if isinstance(value, Combinator):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"combinator must be a string, got {type(value).__name__}")
    try:
        return Combinator(value.strip().lower())
    except ValueError:
        choices = ", ".join(c.value for c in Combinator)
        raise ConfigError(f"unknown combinator {value!r} (expected one of: {choices})") from None


def config_from_dict(d: Mapping[str, Any]) -> IntegrationConfig:
    """Build a config from a plain mapping. Raises ConfigError on bad input."""
    if not isinstance(d, Mapping):
        raise ConfigError("config must be a mapping")
    unknown = sorted(set(d) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(map(str, unknown))}")
    missing = [name for name in _REQUIRED_KEYS if name not in d]
    if missing:
        raise ConfigError(f"missing config keys: {', '.join(missing)}")

    kwargs: dict[str, Any] = {}
    for name, val in d.items():
        if name == "combinator":
            kwargs[name] = _parse_combinator(val)
        elif name == "allow_unsafe":
            if not isinstance(val, bool):
                raise ConfigError("allow_unsafe must be a bool")
            kwargs[name] = val
        elif isinstance(val, int) and not isinstance(val, bool):
            kwargs[name] = int(val)
        else:
            raise ConfigError(f"config key {name!r} must be an int, got {type(val).__name__}")
    try:
        return IntegrationConfig(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path | str) -> IntegrationConfig:
    """Read a YAML config file."""
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise ConfigError("config YAML must be a mapping")
    return config_from_dict(obj)
