"""Environment-driven configuration for the harness."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError, MissingEnvironmentVariableError


DEFAULT_API_VERSION = "3.0.0"

# Setting name -> environment variable(s), first match wins
ENV_VARS: Dict[str, tuple] = {
    "base_url": ("API_SERVER_BASE_URL",),
    "api_key": ("BROWSERBASE_API_KEY",),
    "project_id": ("BROWSERBASE_PROJECT_ID",),
    "model_api_key": ("MODEL_API_KEY", "OPENAI_API_KEY"),
    "model_name": ("API_SERVER_MODEL",),
    "api_version": ("API_SERVER_VERSION",),
    "timeout": ("API_SERVER_TIMEOUT",),
    "expect_cache_headers": ("API_SERVER_EXPECT_CACHE",),
    "verbose": ("API_SERVER_VERBOSE",),
}


class HarnessConfig(BaseModel):
    """Settings used to reach and exercise the API server."""
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    project_id: Optional[str] = None
    model_api_key: Optional[str] = None
    model_name: str = "gpt-4o"
    api_version: str = DEFAULT_API_VERSION
    timeout: float = Field(default=60.0, gt=0)
    # When set, a missing cache-status header fails a check instead of skipping it
    expect_cache_headers: bool = False
    verbose: int = Field(default=0, ge=0, le=3)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().rstrip("/")
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @property
    def is_configured(self) -> bool:
        """Check if a server to test against has been configured."""
        return self.base_url is not None

    def require_base_url(self) -> str:
        """Return the base URL or raise if it is not configured."""
        if self.base_url is None:
            raise MissingEnvironmentVariableError(ENV_VARS["base_url"][0])
        return self.base_url


def _read_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for setting, names in ENV_VARS.items():
        for name in names:
            value = os.getenv(name)
            if value:
                values[setting] = value
                break
    return values


def load_config(
    env_file: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> HarnessConfig:
    """
    Build a HarnessConfig from the environment.

    Args:
        env_file: Optional .env file to load before reading the environment
        **overrides: Explicit settings that take precedence over the environment

    Returns:
        Validated HarnessConfig

    Raises:
        ConfigurationError: If any value fails validation
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv(find_dotenv(usecwd=True))

    values = _read_env()
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return HarnessConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(str(e))
