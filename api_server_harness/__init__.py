"""
api-server-harness - black-box checks for a browser-automation API server.

Creates sessions, drives navigate and extract requests over HTTP, and
asserts the server's caching behavior through response headers.
"""

__version__ = "0.1.0"

from .core import (
    HarnessConfig,
    load_config,
    SessionClient,
    SessionHandle,
    fetch_with_context,
    get_headers,
    get_base_url,
    merge_headers,
    assert_fetch_status,
    assert_fetch_ok,
    assert_cache_status,
    assert_not_cache_hit,
    HTTP_OK,
    CACHE_BYPASS_HEADER,
    CACHE_STATUS_HEADER,
    ApiServerHarnessError,
    FetchAssertionError,
    SessionSetupError,
    SessionEndedError,
)

from .types import (
    CacheStatus,
    FetchContext,
    SessionInfo,
)

__all__ = [
    # Version
    "__version__",
    # Main classes
    "HarnessConfig",
    "SessionClient",
    "SessionHandle",
    # Functions
    "load_config",
    "fetch_with_context",
    "get_headers",
    "get_base_url",
    "merge_headers",
    "assert_fetch_status",
    "assert_fetch_ok",
    "assert_cache_status",
    "assert_not_cache_hit",
    # Constants
    "HTTP_OK",
    "CACHE_BYPASS_HEADER",
    "CACHE_STATUS_HEADER",
    # Common types
    "CacheStatus",
    "FetchContext",
    "SessionInfo",
    # Common errors
    "ApiServerHarnessError",
    "FetchAssertionError",
    "SessionSetupError",
    "SessionEndedError",
]
