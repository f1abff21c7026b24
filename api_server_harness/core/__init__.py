"""Core harness components."""

from .config import HarnessConfig, load_config
from .headers import (
    CACHE_BYPASS_HEADER,
    CACHE_STATUS_HEADER,
    get_base_url,
    get_headers,
    merge_headers,
)
from .fetch import HTTP_OK, fetch_with_context
from .session import SessionClient, SessionHandle
from .assertions import (
    assert_cache_status,
    assert_fetch_ok,
    assert_fetch_status,
    assert_not_cache_hit,
)
from .errors import (
    ApiServerHarnessError,
    MissingEnvironmentVariableError,
    ConfigurationError,
    SessionSetupError,
    SessionEndedError,
    SessionTeardownError,
    FetchAssertionError,
)

__all__ = [
    # Main classes
    "HarnessConfig",
    "SessionClient",
    "SessionHandle",
    # Functions
    "load_config",
    "get_headers",
    "get_base_url",
    "merge_headers",
    "fetch_with_context",
    "assert_fetch_status",
    "assert_fetch_ok",
    "assert_cache_status",
    "assert_not_cache_hit",
    # Constants
    "HTTP_OK",
    "CACHE_BYPASS_HEADER",
    "CACHE_STATUS_HEADER",
    # Errors
    "ApiServerHarnessError",
    "MissingEnvironmentVariableError",
    "ConfigurationError",
    "SessionSetupError",
    "SessionEndedError",
    "SessionTeardownError",
    "FetchAssertionError",
]
