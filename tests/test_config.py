"""
Tests for flock configuration, validation and loading.
"""

import json
import logging

import pytest

from swarm.core.config import (
    FlockConfig,
    DEFAULT_CONFIG,
    BENCHMARK_CONFIG,
    SWARM_STRENGTH,
    load_config,
)
from swarm.core.errors import ConfigError, SwarmError


class TestDefaults:
    """Tests for default values."""

    def test_tunables_match_reference(self):
        """Defaults are the reference swarm constants."""
        config = FlockConfig()
        assert config.boundMax == 800
        assert config.boidCount == 950
        assert config.neighborRadius == 70.0
        assert config.personalSpaceRadius == 16.0
        assert config.speedCap == 6.0
        assert config.separationGain == pytest.approx(0.014 * 1.2)
        assert config.cohesionGain == pytest.approx(0.007 * 1.2)
        assert config.alignmentGain == pytest.approx(0.014 * 1.2)
        assert SWARM_STRENGTH == 1.2

    def test_default_modes(self):
        """Sequential update with brute-force search by default."""
        assert DEFAULT_CONFIG.updateMode == "sequential"
        assert DEFAULT_CONFIG.neighborSearch == "brute"

    def test_default_configs_are_valid(self):
        """Shipped configs pass validation."""
        DEFAULT_CONFIG.validate()
        BENCHMARK_CONFIG.validate()
        assert BENCHMARK_CONFIG.seed is not None

    def test_list_fields_not_shared(self):
        """Color lists are per-instance."""
        a = FlockConfig()
        b = FlockConfig()
        a.boidColor[0] = 255
        assert b.boidColor[0] != 255


class TestValidation:
    """Tests for validate()."""

    @pytest.mark.parametrize("overrides", [
        {"boundMax": 0},
        {"boidCount": -1},
        {"initialSpeedRange": 0},
        {"neighborRadius": 0},
        {"personalSpaceRadius": -1},
        {"personalSpaceRadius": 80.0},
        {"separationGain": -0.1},
        {"cohesionGain": -0.1},
        {"alignmentGain": -0.1},
        {"speedCap": -1},
        {"updateMode": "parallel"},
        {"neighborSearch": "quadtree"},
    ])
    def test_invalid_values_raise(self, overrides):
        """Out of range values raise ConfigError."""
        with pytest.raises(ConfigError):
            FlockConfig(**overrides).validate()

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as ValueError or SwarmError."""
        with pytest.raises(ValueError):
            FlockConfig(boundMax=-1).validate()
        with pytest.raises(SwarmError):
            FlockConfig(boundMax=-1).validate()

    def test_validate_returns_config(self):
        """validate() returns the config for chaining."""
        config = FlockConfig(boidCount=0)
        assert config.validate() is config

    def test_zero_gains_allowed(self):
        """Rules can be switched off with a zero gain."""
        FlockConfig(cohesionGain=0, separationGain=0, alignmentGain=0).validate()


class TestSerialization:
    """Tests for to_dict / from_dict / with_overrides."""

    def test_from_dict_restores_values(self):
        """from_dict reads back what to_dict wrote."""
        config = FlockConfig(boidCount=12, seed=3, updateMode="simultaneous")
        assert FlockConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self, caplog):
        """Unknown keys are dropped with a warning."""
        with caplog.at_level(logging.WARNING):
            config = FlockConfig.from_dict({"boidCount": 5, "predatorCount": 3})
        assert config.boidCount == 5
        assert "predatorCount" in caplog.text

    def test_with_overrides_copies(self):
        """with_overrides leaves the original untouched."""
        config = FlockConfig()
        other = config.with_overrides(speedCap=2.0)
        assert other.speedCap == 2.0
        assert config.speedCap == 6.0


class TestLoadConfig:
    """Tests for loading JSON config files."""

    def test_overlay_on_defaults(self, tmp_path):
        """Values in the file replace the defaults, the rest is kept."""
        path = tmp_path / "flock.json"
        path.write_text(json.dumps({"boidCount": 50, "neighborRadius": 40.0}))
        config = load_config(path)
        assert config.boidCount == 50
        assert config.neighborRadius == 40.0
        assert config.speedCap == DEFAULT_CONFIG.speedCap

    def test_overlay_on_custom_base(self, tmp_path):
        """A base config can be given."""
        path = tmp_path / "flock.json"
        path.write_text(json.dumps({"speedCap": 3.0}))
        config = load_config(path, BENCHMARK_CONFIG)
        assert config.seed == BENCHMARK_CONFIG.seed
        assert config.speedCap == 3.0

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        """Malformed JSON raises ConfigError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object_json(self, tmp_path):
        """A JSON list is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values_in_file(self, tmp_path):
        """Loaded values are validated."""
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"neighborRadius": -5}))
        with pytest.raises(ConfigError):
            load_config(path)
