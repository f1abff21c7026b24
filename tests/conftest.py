"""
Shared pytest fixtures for harness tests.

This module provides:
- FakeApiServer: an in-memory API server behind httpx.MockTransport
- Config and SessionClient fixtures wired to the fake server
"""

import json
import os
import sys
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api_server_harness import HarnessConfig, SessionClient
from api_server_harness.utils.logger import HarnessLogger, get_logger


FAKE_BASE_URL = "http://api.test"


# =============================================================================
# Fake API Server
# =============================================================================

@dataclass
class RecordedCall:
    """Record of a request the fake server received."""
    method: str
    path: str
    headers: Dict[str, str]
    body: Optional[Dict[str, Any]]


@dataclass
class FakeApiServer:
    """
    Minimal stand-in for the browser-automation API server.

    Extract results are cached per (session, request body). A request with
    the bypass header always computes fresh and never reads the cache.

    Usage:
        def test_something(fake_server, session_client):
            fake_server.emit_cache_headers = False
            ...
            assert fake_server.paths() == ["/v1/sessions", ...]
    """
    caching_enabled: bool = True
    emit_cache_headers: bool = True
    # Overrides the cache-status header value when set
    forced_cache_status: Optional[str] = None
    # path suffix ("create", "navigate", "extract", "end") -> status to return
    fail_with: Dict[str, int] = field(default_factory=dict)
    calls: List[RecordedCall] = field(default_factory=list)
    sessions: Dict[str, bool] = field(default_factory=dict)
    _cache: Dict[Tuple[str, str], Any] = field(default_factory=dict)

    def handler(self, request: httpx.Request) -> httpx.Response:
        raw = request.content.decode("utf-8") if request.content else ""
        body = json.loads(raw) if raw else None
        path = request.url.path
        self.calls.append(RecordedCall(
            method=request.method,
            path=path,
            headers={k.lower(): v for k, v in request.headers.items()},
            body=body,
        ))

        parts = path.strip("/").split("/")
        if parts == ["v1", "sessions"] and request.method == "POST":
            return self._create()
        if len(parts) == 4 and parts[:2] == ["v1", "sessions"] and request.method == "POST":
            session_id, action = parts[2], parts[3]
            if session_id not in self.sessions:
                return httpx.Response(404, json={"success": False, "message": "Unknown session"})
            if action in self.fail_with:
                return httpx.Response(self.fail_with[action], json={"success": False, "message": "Injected failure"})
            if action == "navigate":
                return httpx.Response(200, json={"success": True, "data": {"result": None}})
            if action == "extract":
                return self._extract(session_id, raw, request)
            if action == "end":
                self.sessions[session_id] = False
                return httpx.Response(200, json={"success": True})
        return httpx.Response(404, json={"success": False, "message": "Not found"})

    def _create(self) -> httpx.Response:
        if "create" in self.fail_with:
            return httpx.Response(self.fail_with["create"], json={"success": False, "message": "Injected failure"})
        session_id = str(uuid.uuid4())
        self.sessions[session_id] = True
        return httpx.Response(200, json={"success": True, "data": {"sessionId": session_id, "available": True}})

    def _extract(self, session_id: str, raw_body: str, request: httpx.Request) -> httpx.Response:
        bypass = request.headers.get("browserbase-cache-bypass") == "true"
        key = (session_id, raw_body)
        status = "MISS"
        if self.caching_enabled and not bypass and key in self._cache:
            data = self._cache[key]
            status = "HIT"
        else:
            data = {"extraction": f"result #{len(self.calls)}"}
            if self.caching_enabled:
                self._cache[key] = data

        headers = {}
        if self.emit_cache_headers:
            headers["browserbase-cache-status"] = self.forced_cache_status or status
        return httpx.Response(200, json={"success": True, "data": data}, headers=headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> List[str]:
        return [call.path for call in self.calls]

    def calls_to(self, action: str) -> List[RecordedCall]:
        return [call for call in self.calls if call.path.endswith(action)]


@pytest.fixture
def fake_server():
    """Fresh fake server per test."""
    return FakeApiServer()


@pytest.fixture
def harness_config():
    """Config pointing at the fake server, with credentials set."""
    return HarnessConfig(
        base_url=FAKE_BASE_URL,
        api_key="bb-test-key",
        project_id="proj-123",
        model_api_key="sk-test",
        timeout=5.0,
    )


@pytest.fixture
def harness_logger() -> HarnessLogger:
    return get_logger(verbose=0)


@pytest_asyncio.fixture
async def session_client(harness_config, fake_server, harness_logger):
    """SessionClient whose requests are served by fake_server."""
    async with SessionClient(harness_config, logger=harness_logger, transport=fake_server.transport) as client:
        yield client


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Tests requiring a running API server"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
