"""Tests for configuration profiles and pyproject overrides."""

from pathlib import Path

import pytest

from merchandising.config import EngineConfig, apply_overrides, get_env_config, load_engine_config
from merchandising.errors import AnalyticsError, ConfigError


@pytest.fixture
def base() -> EngineConfig:
    return EngineConfig(default_days=30, top_n=5, data_dir=Path("data"), output_dir=Path("output"), log_level="INFO")


class TestProfiles:
    def test_development(self):
        config = load_engine_config("development")
        assert config.data_dir == Path("data")
        assert config.log_level == "DEBUG"
        assert config.default_days == 30
        assert config.top_n == 5

    def test_production(self):
        config = load_engine_config("production")
        assert config.data_dir == Path("/data/merchandising/raw")
        assert config.log_level == "INFO"

    def test_unknown_environment(self):
        with pytest.raises(ConfigError, match="Unknown environment"):
            load_engine_config("qa")

    def test_config_error_is_a_value_error(self):
        assert issubclass(ConfigError, ValueError)
        assert issubclass(ConfigError, AnalyticsError)


class TestOverrides:
    def test_values_are_applied(self, base):
        config = apply_overrides(base, {"default_days": 7, "top_n": 10, "data_dir": "/tmp/rows", "log_level": "warning"})
        assert config.default_days == 7
        assert config.top_n == 10
        assert config.data_dir == Path("/tmp/rows")
        assert config.log_level == "WARNING"

    def test_unrelated_keys_are_ignored(self, base):
        assert apply_overrides(base, {"owner": "merch-team"}) == base

    def test_default_days_above_maximum(self, base):
        with pytest.raises(ConfigError, match="at most"):
            apply_overrides(base, {"default_days": 100_000})

    @pytest.mark.parametrize("value", [0, -3, True, "7", 2.5])
    def test_invalid_days(self, base, value):
        with pytest.raises(ConfigError, match="default_days"):
            apply_overrides(base, {"default_days": value})


class TestPyproject:
    def test_missing_file(self, tmp_path):
        assert get_env_config(tmp_path / "pyproject.toml") == {}

    def test_reads_tool_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.merchandising]\ndefault_days = 14\n')
        assert get_env_config(path) == {"default_days": 14}

    def test_no_tool_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')
        assert get_env_config(path) == {}
