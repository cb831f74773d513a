"""Typed accessors for configuration held in environment variables."""
from .core.config.env import EnvVar, get_env, get_required_env
from .domain.errors import ConfigError, ConfigErrorKind

__all__ = [
    "EnvVar",
    "ConfigError",
    "ConfigErrorKind",
    "get_env",
    "get_required_env",
]
