"""Single-request HTTP capture."""

import json
import time
from typing import Any, Mapping, Optional, Union

import httpx

from ..types.models import FetchContext
from ..utils.logger import HarnessLogger


HTTP_OK = 200

RequestBody = Union[str, bytes, dict, list, None]


def _encode_body(body: RequestBody) -> Optional[Union[str, bytes]]:
    if body is None:
        return None
    if isinstance(body, (dict, list)):
        return json.dumps(body)
    return body


def _describe_body(content: Optional[Union[str, bytes]]) -> Optional[str]:
    # Bytes are sent untouched; only the recorded copy is decoded
    if isinstance(content, bytes):
        return content.decode("utf-8", "replace")
    return content


def _parse_body(response: httpx.Response) -> Any:
    text = response.text
    if not text:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


async def fetch_with_context(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    headers: Optional[Mapping[str, str]] = None,
    body: RequestBody = None,
    logger: Optional[HarnessLogger] = None,
) -> FetchContext:
    """
    Perform exactly one HTTP request and capture the whole exchange.

    The response is read completely before this returns, so assertions
    made afterwards can report the original request and response. Nothing
    is retried and the arguments are not modified.

    Args:
        client: HTTP client to send the request with
        url: Absolute URL, or a path relative to the client's base_url
        method: HTTP method
        headers: Request headers
        body: Request body; dicts and lists are JSON-encoded

    Returns:
        FetchContext describing the request and response

    Raises:
        httpx.HTTPError: On transport failures
    """
    request_headers = dict(headers or {})
    content = _encode_body(body)
    method = method.upper()

    start = time.monotonic()
    response = await client.request(
        method,
        url,
        headers=request_headers,
        content=content,
    )
    await response.aread()
    elapsed_ms = (time.monotonic() - start) * 1000

    ctx = FetchContext(
        method=method,
        url=str(response.request.url),
        request_headers=request_headers,
        request_body=_describe_body(content),
        status=response.status_code,
        headers={name.lower(): value for name, value in response.headers.items()},
        text=response.text,
        body=_parse_body(response),
        elapsed_ms=elapsed_ms,
    )

    if logger:
        logger.for_request(method, ctx.url).debug(
            "fetch",
            "HTTP exchange captured",
            status=ctx.status,
            elapsed_ms=round(elapsed_ms, 1),
        )

    return ctx
