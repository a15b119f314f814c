"""Base settings of the package.

Settings are read from environment variables prefixed with `STIX_SDK_`, then
from a `.env` file in the working directory, then default values.
"""

import logging
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from stix_sdk.exceptions import ConfigError

LogLevel = Literal["debug", "info", "warn", "warning", "error"]


class StixSdkSettings(BaseSettings):
    """Settings of the codec and of its command line.

    Attributes:
        log_level (Literal): The minimum level of logs to display. Options are 'debug',
            'info', 'warn', 'warning', 'error'.
        sort_keys (bool): Whether `dumps` sorts the keys of the JSON objects.
        indent (int | None): Indentation of `dumps` output, None for a compact form.
        ensure_ascii (bool): Whether `dumps` escapes non-ASCII characters.

    Examples:
        >>> StixSdkSettings(sort_keys=True, indent=2).indent
        2
        >>> StixSdkSettings(sort_keys=True).sort_keys
        True

    Raises:
        stix_sdk.exceptions.ConfigError: If a setting holds an invalid value.
    """

    model_config = SettingsConfigDict(
        env_prefix="STIX_SDK_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    log_level: LogLevel = Field(
        default="warning",
        description="The minimum level of logs to display.",
    )
    sort_keys: bool = Field(
        default=False,
        description="Whether `dumps` sorts the keys of the JSON objects.",
    )
    indent: int | None = Field(
        default=None,
        description="Indentation of the `dumps` output, None for a compact form.",
        ge=0,
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Whether `dumps` escapes non-ASCII characters.",
    )

    def __init__(self, **values: Any) -> None:
        """Initialize the settings and handle validation errors."""
        try:
            super().__init__(**values)
        except ValidationError as e:
            raise ConfigError("Error validating configuration.") from e


def configure_logging(level: LogLevel) -> None:
    """Apply `level` to the loggers of the package."""
    logging.getLogger("stix_sdk").setLevel(level.upper())
