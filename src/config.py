"""Environment-derived configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from src.errors import ConfigurationError

_ENV_VARS = {
    "api_token": "API_TOKEN",
    "channel": "CHANNEL",
}


class Configuration(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_token: str = Field(repr=False)
    channel: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Configuration:
        """Create Configuration from environment variables.

        Raises ConfigurationError listing every variable that is not set.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in _ENV_VARS.values() if name not in env]
        if missing:
            raise ConfigurationError(missing)
        return cls(**{field: env[name] for field, name in _ENV_VARS.items()})
