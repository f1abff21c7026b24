"""Scenario checks composed from the core helpers."""

from .cache import (
    CACHE_CHECKS,
    LINK_COUNT_INSTRUCTION,
    NAVIGATE_URL,
    TITLE_INSTRUCTION,
    ScenarioContext,
    check_bypass_header,
    check_cache_status_shape,
    check_repeat_hits_cache,
    setup_session,
    teardown_session,
)

__all__ = [
    "CACHE_CHECKS",
    "LINK_COUNT_INSTRUCTION",
    "NAVIGATE_URL",
    "TITLE_INSTRUCTION",
    "ScenarioContext",
    "check_bypass_header",
    "check_cache_status_shape",
    "check_repeat_hits_cache",
    "setup_session",
    "teardown_session",
]
