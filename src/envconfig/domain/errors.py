"""Configuration errors raised when an environment variable cannot be resolved."""
from enum import Enum
from typing import Optional


class ConfigErrorKind(str, Enum):
    """Configuration error kind enumeration."""
    NOT_FOUND = "NOT_FOUND"
    EMPTY_VALUE = "EMPTY_VALUE"
    INVALID_VALUE = "INVALID_VALUE"


class ConfigError(RuntimeError):
    """
    Raised when an environment variable violates its retrieval policy.

    Attributes:
        kind: Which condition failed
        key: Environment variable name
        reason: Conversion failure detail, only set for INVALID_VALUE
    """

    def __init__(self, kind: ConfigErrorKind, key: str, reason: Optional[str] = None):
        self.kind = kind
        self.key = key
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.kind == ConfigErrorKind.NOT_FOUND:
            return f"environment variable is required: {self.key}"
        if self.kind == ConfigErrorKind.EMPTY_VALUE:
            return f"environment variable '{self.key}' must not be empty"
        return f"Invalid value of environment variable '{self.key}': {self.reason}"

    @classmethod
    def not_found(cls, key: str) -> "ConfigError":
        return cls(ConfigErrorKind.NOT_FOUND, key)

    @classmethod
    def empty_value(cls, key: str) -> "ConfigError":
        return cls(ConfigErrorKind.EMPTY_VALUE, key)

    @classmethod
    def invalid_value(cls, key: str, reason: str) -> "ConfigError":
        return cls(ConfigErrorKind.INVALID_VALUE, key, reason)
