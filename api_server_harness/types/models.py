"""Core type definitions for the API server harness."""

import json
from typing import Optional, Dict, Any, Mapping
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class CacheStatus(str, Enum):
    """Values the server reports in the cache-status response header."""
    HIT = "HIT"
    MISS = "MISS"


# Request headers whose values never appear in failure output
REDACTED_HEADERS = frozenset({
    "x-bb-api-key",
    "x-bb-project-id",
    "x-model-api-key",
    "authorization",
})


def _redact(headers: Mapping[str, str]) -> Dict[str, str]:
    return {
        name: ("<redacted>" if name.lower() in REDACTED_HEADERS else value)
        for name, value in headers.items()
    }


class FetchContext(BaseModel):
    """A captured HTTP exchange: the request as sent and the response as received."""
    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    request_headers: Dict[str, str] = Field(default_factory=dict)
    request_body: Optional[str] = None
    status: int
    # Lower-cased names; use header() for lookups
    headers: Dict[str, str] = Field(default_factory=dict)
    text: str = ""
    body: Any = None
    elapsed_ms: Optional[float] = None

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive response header lookup."""
        return self.headers.get(name.lower())

    def describe(self, max_body: int = 2000) -> str:
        """Render the exchange for failure messages, with credentials redacted."""
        response_text = self.text
        if len(response_text) > max_body:
            response_text = response_text[:max_body] + "...<truncated>"
        lines = [
            f"Request: {self.method} {self.url}",
            f"Request headers: {json.dumps(_redact(self.request_headers), sort_keys=True)}",
        ]
        if self.request_body is not None:
            lines.append(f"Request body: {self.request_body}")
        lines.extend([
            f"Response status: {self.status}",
            f"Response headers: {json.dumps(self.headers, sort_keys=True)}",
            f"Response body: {response_text or '<empty>'}",
        ])
        return "\n".join(lines)


class SessionInfo(BaseModel):
    """Identity of a server-side browsing session."""
    session_id: str
    available: Optional[bool] = None
