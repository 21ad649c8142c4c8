"""
Generator settings - the tunable parameters of identifier generation

Defaults reproduce the classic behaviour: a suffix that is random once per
generator and then only ever incremented.
"""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from betterguid.kernel.errors import ConfigurationError

ENV_PREFIX = "BETTERGUID_"


class GeneratorSettings(BaseModel):
    """
    Parameters for a Generator

    Settings are frozen: a running generator never changes behaviour under
    its callers. Build a new generator to apply new settings.
    """

    seed: int | None = Field(
        default=None,
        description="Seed for the suffix random source (None seeds from the clock)",
    )

    refresh_suffix_per_ms: bool = Field(
        default=False,
        description=(
            "Draw a fresh random suffix whenever a new millisecond starts "
            "(False keeps the previous suffix, matching classic push IDs)"
        ),
    )

    metrics_enabled: bool = Field(
        default=True,
        description="Record Prometheus counters for generated identifiers",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "description": "Settings for sortable identifier generation"
        },
    }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GeneratorSettings":
        """
        Validate settings from a plain mapping

        Raises:
            ConfigurationError: If any field fails validation
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid generator settings: {e.error_count()} error(s)",
                errors=e.errors(),
            ) from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeneratorSettings":
        """
        Read settings from BETTERGUID_* environment variables

        Unset variables keep their defaults; values are coerced by pydantic
        ("true"/"1"/"yes" for booleans).
        """
        environ = os.environ if environ is None else environ
        data = {}
        for name in cls.model_fields:
            value = environ.get(ENV_PREFIX + name.upper())
            if value is not None and value != "":
                data[name] = value
        return cls.from_mapping(data)


# Default global settings instance
default_settings = GeneratorSettings()
