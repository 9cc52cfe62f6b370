"""Tests for polyint/core/config.py — config construction, dict and YAML loading."""

from pathlib import Path

import pytest

from polyint.core.config import (
    CONFIG_KEYS,
    DEFAULT_INTERVAL_COUNT,
    REFERENCE_FIXTURE,
    ConfigError,
    IntegrationConfig,
    config_from_dict,
    config_to_dict,
    load_config,
)
from polyint.core.ring.types import Combinator, Polynomial

REPO_ROOT = Path(__file__).resolve().parents[2]


class TestIntegrationConfig:
    def test_reference_fixture(self):
        assert REFERENCE_FIXTURE.polynomial == Polynomial(1, 2, 3, 4, 5)
        assert (REFERENCE_FIXTURE.x_start, REFERENCE_FIXTURE.x_end) == (0, 10)

    def test_defaults(self):
        cfg = IntegrationConfig(a=0, b=0, c=0, d=0, e=1, x_start=0, x_end=1)
        assert cfg.interval_count == DEFAULT_INTERVAL_COUNT
        assert cfg.width == 32
        assert cfg.combinator is Combinator.ADD
        assert cfg.allow_unsafe is False

    def test_frozen(self):
        with pytest.raises(AttributeError):
            REFERENCE_FIXTURE.a = 9  # type: ignore[misc]

    def test_negative_bound_rejected(self):
        with pytest.raises(ValueError):
            IntegrationConfig(a=1, b=0, c=0, d=0, e=0, x_start=-1, x_end=1)

    def test_zero_interval_count_rejected(self):
        with pytest.raises(ValueError):
            IntegrationConfig(a=1, b=0, c=0, d=0, e=0, x_start=0, x_end=1, interval_count=0)

    def test_coefficients(self):
        assert REFERENCE_FIXTURE.coefficients == (1, 2, 3, 4, 5)


class TestDictRoundTrip:
    def test_round_trip(self):
        assert config_from_dict(config_to_dict(REFERENCE_FIXTURE)) == REFERENCE_FIXTURE

    def test_to_dict_keys(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        assert tuple(d) == CONFIG_KEYS
        assert d["combinator"] == "add"

    def test_combinator_parsing(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["combinator"] = " XOR "
        assert config_from_dict(d).combinator is Combinator.XOR

    def test_unknown_combinator(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["combinator"] = "lfsr"
        with pytest.raises(ConfigError, match="unknown combinator"):
            config_from_dict(d)

    def test_unknown_key(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["taps"] = [1, 3]
        with pytest.raises(ConfigError, match="unknown config keys: taps"):
            config_from_dict(d)

    def test_missing_key(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        del d["x_end"]
        with pytest.raises(ConfigError, match="missing config keys: x_end"):
            config_from_dict(d)

    def test_float_coefficient_rejected(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["a"] = 1.5
        with pytest.raises(ConfigError):
            config_from_dict(d)

    def test_bool_coefficient_rejected(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["a"] = True
        with pytest.raises(ConfigError):
            config_from_dict(d)

    def test_negative_value_becomes_config_error(self):
        d = config_to_dict(REFERENCE_FIXTURE)
        d["x_start"] = -5
        with pytest.raises(ConfigError):
            config_from_dict(d)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            config_from_dict([1, 2, 3])  # type: ignore[arg-type]


class TestLoadConfig:
    def test_shipped_fixture(self):
        assert load_config(REPO_ROOT / "configs" / "reference_fixture.yaml") == REFERENCE_FIXTURE

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text(
            "a: 0\nb: 0\nc: 0\nd: 2\ne: 1\nx_start: 1\nx_end: 3\nwidth: 64\n",
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.polynomial == Polynomial(0, 0, 0, 2, 1)
        assert cfg.width == 64

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
