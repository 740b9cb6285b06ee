"""Configuration management for TrustGate."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Access control configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TRUSTGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Checker strategy key, see trustgate.checkers.manager
    checker: str = "default"
    # Per-kind overrides ("user", "role", "group") falling back to checker
    checkers: dict[str, str] = Field(default_factory=dict)

    # Memoize resolved role/group/permission names per checker
    cache_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    # None selects the colored default format in trustgate.logger
    log_format: str | None = None
    log_rotation: str = "10 MB"
    log_retention: str = "7 days"


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    _config = Config()
    return _config
