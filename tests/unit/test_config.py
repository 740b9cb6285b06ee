"""Tests for configuration module."""

from trustgate.config import Config, get_config, reload_config


class TestConfig:
    """Test Config class."""

    def test_default_config(self, monkeypatch):
        """Test default configuration values."""
        monkeypatch.delenv("TRUSTGATE_CHECKER", raising=False)
        monkeypatch.delenv("TRUSTGATE_CACHE_ENABLED", raising=False)
        config = Config()
        assert config.checker == "default"
        assert config.cache_enabled is True
        assert config.log_level == "INFO"
        assert config.checkers == {}
        assert config.log_format is None

    def test_config_with_custom_values(self):
        """Test configuration with custom values."""
        config = Config(checker="query", cache_enabled=False, log_level="DEBUG")
        assert config.checker == "query"
        assert config.cache_enabled is False
        assert config.log_level == "DEBUG"

    def test_env_prefix(self, monkeypatch):
        """Test values are read from TRUSTGATE_ environment variables."""
        monkeypatch.setenv("TRUSTGATE_CHECKER", "query")
        monkeypatch.setenv("TRUSTGATE_CACHE_ENABLED", "false")
        config = Config()
        assert config.checker == "query"
        assert config.cache_enabled is False

    def test_per_kind_checkers_from_env(self, monkeypatch):
        monkeypatch.setenv("TRUSTGATE_CHECKERS", '{"role": "query"}')
        assert Config().checkers == {"role": "query"}

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.delenv("TRUSTGATE_CHECKER", raising=False)
        monkeypatch.setenv("CHECKER", "query")
        assert Config().checker == "default"


class TestConfigGlobal:
    """Test global config functions."""

    def test_get_config(self):
        """Test get_config returns Config instance."""
        config = get_config()
        assert isinstance(config, Config)
        assert get_config() is config

    def test_reload_config(self, monkeypatch):
        """Test reload_config creates new Config."""
        config1 = get_config()
        monkeypatch.setenv("TRUSTGATE_CHECKER", "query")
        config2 = reload_config()
        assert config1 is not config2
        assert config2.checker == "query"
        assert get_config() is config2

        monkeypatch.delenv("TRUSTGATE_CHECKER")
        reload_config()
