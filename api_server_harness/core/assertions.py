"""Assertion helpers that report the captured HTTP exchange on failure."""

from typing import Iterable, Optional

from ..types.models import CacheStatus, FetchContext
from ..utils.logger import HarnessLogger
from .errors import FetchAssertionError
from .headers import CACHE_STATUS_HEADER


def assert_fetch_status(ctx: FetchContext, expected_status: int, message: str) -> None:
    """Fail unless the response status equals expected_status."""
    if ctx.status != expected_status:
        raise FetchAssertionError(
            f"{message} (expected status {expected_status}, got {ctx.status})",
            ctx.describe(),
        )


def assert_fetch_ok(condition: bool, message: str, ctx: FetchContext) -> None:
    """Fail with the exchange attached when condition is false."""
    if not condition:
        raise FetchAssertionError(message, ctx.describe())


def assert_cache_status(
    ctx: FetchContext,
    allowed: Iterable[CacheStatus],
    message: str,
    require: bool = False,
    logger: Optional[HarnessLogger] = None,
) -> Optional[CacheStatus]:
    """
    Check the cache-status response header against the allowed values.

    Args:
        ctx: Captured exchange
        allowed: Acceptable header values
        message: Failure message
        require: Fail when the header is missing instead of skipping the check
        logger: Optional logger for skipped checks

    Returns:
        The parsed status, or None when the header was absent and not required
    """
    raw = ctx.header(CACHE_STATUS_HEADER)
    if raw is None:
        if require:
            raise FetchAssertionError(
                f"{message} ({CACHE_STATUS_HEADER} header is missing)",
                ctx.describe(),
            )
        if logger:
            logger.debug(
                "assert:cache_status",
                "Cache status header absent, skipping check",
                url=ctx.url,
            )
        return None

    allowed_values = {CacheStatus(a).value for a in allowed}
    if raw not in allowed_values:
        raise FetchAssertionError(
            f"{message} ({CACHE_STATUS_HEADER} must be one of "
            f"{sorted(allowed_values)}, got: {raw!r})",
            ctx.describe(),
        )
    return CacheStatus(raw)


def assert_not_cache_hit(ctx: FetchContext, message: str) -> None:
    """Fail if the response reports a cache HIT. An absent header passes."""
    if ctx.header(CACHE_STATUS_HEADER) == CacheStatus.HIT.value:
        raise FetchAssertionError(message, ctx.describe())
