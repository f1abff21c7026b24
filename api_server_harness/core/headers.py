"""Request header construction."""

from types import MappingProxyType
from typing import Mapping, Optional

from .config import HarnessConfig


CACHE_BYPASS_HEADER = "browserbase-cache-bypass"
CACHE_STATUS_HEADER = "browserbase-cache-status"


def get_headers(version: str, config: HarnessConfig) -> Mapping[str, str]:
    """
    Build the headers every request to the API server carries.

    Credentials are only included when configured. The version is passed
    through as given.

    Args:
        version: API version string sent as x-sdk-version
        config: Harness configuration holding credentials

    Returns:
        Read-only header mapping
    """
    headers = {
        "Content-Type": "application/json",
        "x-sdk-version": version,
        "x-language": "python",
    }
    if config.api_key:
        headers["x-bb-api-key"] = config.api_key
    if config.project_id:
        headers["x-bb-project-id"] = config.project_id
    if config.model_api_key:
        headers["x-model-api-key"] = config.model_api_key
    return MappingProxyType(headers)


def merge_headers(base: Mapping[str, str], extra: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Return a new read-only mapping of base overlaid with extra."""
    merged = dict(base)
    if extra:
        merged.update(extra)
    return MappingProxyType(merged)


def get_base_url(config: HarnessConfig) -> str:
    """Base URL of the API server, without a trailing slash."""
    return config.require_base_url()
