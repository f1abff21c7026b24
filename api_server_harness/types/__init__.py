"""Type definitions for the harness."""

from .models import CacheStatus, FetchContext, SessionInfo

__all__ = ["CacheStatus", "FetchContext", "SessionInfo"]
