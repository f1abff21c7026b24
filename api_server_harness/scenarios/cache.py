"""Cache behavior checks for the extract endpoint.

Each check takes an explicit ScenarioContext instead of relying on
module-level session state, so checks can run in any order or alone.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from ..core.assertions import (
    assert_cache_status,
    assert_fetch_ok,
    assert_fetch_status,
    assert_not_cache_hit,
)
from ..core.config import HarnessConfig
from ..core.errors import SessionSetupError
from ..core.fetch import HTTP_OK
from ..core.headers import CACHE_BYPASS_HEADER, get_headers, merge_headers
from ..core.session import SessionClient, SessionHandle
from ..types.models import CacheStatus, FetchContext


NAVIGATE_URL = "https://example.com"
TITLE_INSTRUCTION = "extract the page title"
LINK_COUNT_INSTRUCTION = "count the number of links"


@dataclass
class ScenarioContext:
    """Everything a check needs: client, session, config and API version."""
    client: SessionClient
    session: SessionHandle
    config: HarnessConfig
    version: str

    @property
    def headers(self) -> Mapping[str, str]:
        return get_headers(self.version, self.config)

    async def extract(
        self,
        instruction: str = TITLE_INSTRUCTION,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> FetchContext:
        """Send one extract request on the shared session."""
        return await self.client.extract(
            self.session,
            instruction,
            merge_headers(self.headers, extra_headers),
        )


async def setup_session(
    client: SessionClient,
    config: HarnessConfig,
    version: Optional[str] = None,
    url: str = NAVIGATE_URL,
) -> ScenarioContext:
    """
    Create a session and navigate it to url.

    The session is ended before any failure after creation propagates,
    including transport errors and cancellation during navigation.

    Raises:
        SessionSetupError: If creation or navigation does not return 200
        httpx.HTTPError: On transport failures
    """
    version = version or config.api_version
    headers = get_headers(version, config)
    session = await client.create_session(headers)

    try:
        nav = await client.navigate_session(session, url, headers)
    except BaseException:
        await client.end_session(session, headers)
        raise

    if nav.status != HTTP_OK:
        await client.end_session(session, headers)
        raise SessionSetupError("navigate", nav.describe(), status=nav.status)

    return ScenarioContext(client=client, session=session, config=config, version=version)


async def teardown_session(ctx: ScenarioContext) -> bool:
    """End the scenario's session."""
    return await ctx.client.end_session(ctx.session, ctx.headers)


async def check_bypass_header(ctx: ScenarioContext) -> FetchContext:
    """A request carrying the bypass header must not be served as a cache HIT."""
    result = await ctx.extract(
        TITLE_INSTRUCTION,
        extra_headers={CACHE_BYPASS_HEADER: "true"},
    )

    assert_fetch_status(result, HTTP_OK, "Extract with bypass should succeed")
    assert_fetch_ok(result.body is not None, "Response should have body", result)
    assert_not_cache_hit(result, "A bypassed request must not return a cache HIT")
    if ctx.config.expect_cache_headers:
        assert_cache_status(
            result,
            [CacheStatus.MISS],
            "A bypassed request must report a cache MISS",
            require=True,
        )
    return result


async def check_cache_status_shape(ctx: ScenarioContext) -> Optional[CacheStatus]:
    """The cache-status header, when present, is exactly HIT or MISS."""
    result = await ctx.extract(TITLE_INSTRUCTION)

    assert_fetch_status(result, HTTP_OK, "Extract should succeed")
    return assert_cache_status(
        result,
        [CacheStatus.HIT, CacheStatus.MISS],
        "browserbase-cache-status must be HIT or MISS",
        require=ctx.config.expect_cache_headers,
        logger=ctx.client.logger,
    )


async def check_repeat_hits_cache(ctx: ScenarioContext) -> Tuple[FetchContext, FetchContext]:
    """A repeated identical extract is served from cache when caching is active."""
    # First call warms the cache; it must be fully captured before the second
    first = await ctx.extract(LINK_COUNT_INSTRUCTION)
    assert_fetch_status(first, HTTP_OK, "First extract should succeed")

    second = await ctx.extract(LINK_COUNT_INSTRUCTION)
    assert_fetch_status(second, HTTP_OK, "Second extract should succeed")

    assert_cache_status(
        second,
        [CacheStatus.HIT],
        "Repeated identical request should be a cache HIT",
        require=ctx.config.expect_cache_headers,
        logger=ctx.client.logger,
    )
    return first, second


CACHE_CHECKS = {
    "bypass_header": check_bypass_header,
    "cache_status_shape": check_cache_status_shape,
    "repeat_hits_cache": check_repeat_hits_cache,
}
