"""Environment variable utilities."""
import logging
import os
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.errors import ConfigError

logger = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
_INT32_MAX_DIGITS = len(str(INT32_MAX))

# Optional sign followed by ASCII digits only; int() would also accept
# whitespace, underscores and non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class EnvVar(BaseModel):
    """Describes one environment variable and how to retrieve it."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Name of the environment variable")
    required: bool = Field(
        False,
        description="Raise if the variable is not set; otherwise fall back to default_value"
    )
    not_empty: bool = Field(False, description="Raise if the resolved value is an empty string")
    default_value: str = Field("", description="Value used when the variable is not set and not required")

    def get_string(self) -> str:
        """
        Get the variable as a string.

        Returns:
            Environment value, or default_value when the variable is not set

        Raises:
            ConfigError: NOT_FOUND if required and not set,
                EMPTY_VALUE if not_empty and the resolved value is empty
        """
        value = os.environ.get(self.key)
        if value is None:
            if self.required:
                raise ConfigError.not_found(self.key)
            logger.debug("Environment variable %s not set, using default value", self.key)
            value = self.default_value
        if self.not_empty and len(value) == 0:
            raise ConfigError.empty_value(self.key)
        return value

    def get_int(self) -> int:
        """
        Get the variable as a base-10 integer in the signed 32-bit range.

        Raises:
            ConfigError: Anything raised by get_string, or INVALID_VALUE when
                the value is empty, malformed or out of range
        """
        str_value = self.get_string()
        if len(str_value) == 0:
            raise ConfigError.invalid_value(self.key, "cannot convert empty string into an integer")
        if not _INT_PATTERN.fullmatch(str_value):
            raise ConfigError.invalid_value(self.key, f'parsing "{str_value}": invalid syntax')
        # More than 10 significant digits is always out of range; int() would
        # also reject very long strings with ValueError on newer interpreters.
        digits = str_value.lstrip("+-").lstrip("0")
        if len(digits) > _INT32_MAX_DIGITS:
            raise ConfigError.invalid_value(self.key, f'parsing "{str_value}": value out of range')
        value = int(str_value)
        if value < INT32_MIN or value > INT32_MAX:
            raise ConfigError.invalid_value(self.key, f'parsing "{str_value}": value out of range')
        return value


def get_required_env(name: str) -> str:
    """
    Get required environment variable or raise error.

    Args:
        name: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ConfigError: If environment variable is missing or empty
    """
    return EnvVar(key=name, required=True, not_empty=True).get_string()


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Look up an optional variable, returning default when it is not set.

    A set but empty variable is returned as an empty string. Never raises ConfigError.
    """
    if default is None:
        if name not in os.environ:
            return None
        default = ""
    return EnvVar(key=name, default_value=default).get_string()
