"""Session lifecycle client for the API server."""

from typing import Any, Mapping, Optional

import httpx

from ..types.models import FetchContext, SessionInfo
from ..utils.logger import HarnessLogger, get_logger
from .config import HarnessConfig
from .errors import SessionEndedError, SessionSetupError, SessionTeardownError
from .fetch import HTTP_OK, RequestBody, fetch_with_context


class SessionHandle:
    """
    A server-side session owned by one client.

    Ends exactly once. Any request made through a handle after it has
    ended raises SessionEndedError.
    """

    def __init__(self, info: SessionInfo):
        self.info = info
        self._ended = False

    @property
    def session_id(self) -> str:
        """Opaque server-assigned identifier."""
        return self.info.session_id

    @property
    def ended(self) -> bool:
        """Whether end_session has been called for this handle."""
        return self._ended

    def ensure_active(self) -> None:
        """Raise if the session has already been ended."""
        if self._ended:
            raise SessionEndedError(self.session_id)

    def mark_ended(self) -> None:
        self._ended = True

    def __repr__(self) -> str:
        return f"SessionHandle(session_id={self.session_id!r}, ended={self._ended})"


def _session_id_from(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    data = body.get("data")
    if isinstance(data, dict) and data.get("sessionId"):
        return str(data["sessionId"])
    if body.get("sessionId"):
        return str(body["sessionId"])
    return None


class SessionClient:
    """
    Thin async HTTP wrapper around the session endpoints.

    Owns a single httpx.AsyncClient bound to the configured base URL.
    Use it as an async context manager so the connection pool is closed.
    """

    def __init__(
        self,
        config: HarnessConfig,
        logger: Optional[HarnessLogger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize SessionClient.

        Args:
            config: Harness configuration; base_url must be set
            logger: Logger instance, built from config.verbose when omitted
            transport: Optional transport override, used by tests
        """
        self.config = config
        self.base_url = config.require_base_url()
        self._logger = (logger or get_logger(config.verbose)).child(component="session_client")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def logger(self) -> HarnessLogger:
        """Logger bound to this client."""
        return self._logger

    @property
    def http(self) -> httpx.AsyncClient:
        """Underlying HTTP client."""
        return self._client

    def sessions_url(self, *parts: str) -> str:
        """Absolute URL under /v1/sessions."""
        return "/".join([f"{self.base_url}/v1/sessions", *parts])

    async def fetch(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: RequestBody = None,
    ) -> FetchContext:
        """Send one request with this client's connection pool."""
        return await fetch_with_context(
            self._client,
            url,
            method=method,
            headers=headers,
            body=body,
            logger=self._logger,
        )

    async def create_session(self, headers: Mapping[str, str]) -> SessionHandle:
        """
        Create a session on the server.

        Raises:
            SessionSetupError: On a non-200 status or a response without a session id
            httpx.HTTPError: On transport failures
        """
        ctx = await self.fetch(
            self.sessions_url(),
            method="POST",
            headers=headers,
            body={"modelName": self.config.model_name},
        )
        if ctx.status != HTTP_OK:
            self._logger.error(
                "session:create",
                "Session creation failed",
                status=ctx.status,
            )
            raise SessionSetupError("create", ctx.describe(), status=ctx.status)

        session_id = _session_id_from(ctx.body)
        if not session_id:
            raise SessionSetupError("create", f"response carried no session id\n{ctx.describe()}", status=ctx.status)

        available = None
        if isinstance(ctx.body, dict) and isinstance(ctx.body.get("data"), dict):
            available = ctx.body["data"].get("available")

        session = SessionHandle(SessionInfo(session_id=session_id, available=available))
        self._logger.for_session(session_id).info("session:create", "Session created")
        return session

    async def navigate_session(
        self,
        session: SessionHandle,
        url: str,
        headers: Mapping[str, str],
    ) -> FetchContext:
        """Navigate the session's page to url. The caller checks the status."""
        session.ensure_active()
        ctx = await self.fetch(
            self.sessions_url(session.session_id, "navigate"),
            method="POST",
            headers=headers,
            body={"url": url},
        )
        self._logger.for_session(session.session_id).info(
            "session:navigate",
            "Navigation finished",
            target=url,
            status=ctx.status,
        )
        return ctx

    async def extract(
        self,
        session: SessionHandle,
        instruction: str,
        headers: Mapping[str, str],
    ) -> FetchContext:
        """Run an extract instruction against the session's current page."""
        session.ensure_active()
        return await self.fetch(
            self.sessions_url(session.session_id, "extract"),
            method="POST",
            headers=headers,
            body={"instruction": instruction},
        )

    async def end_session(
        self,
        session: SessionHandle,
        headers: Mapping[str, str],
        strict: bool = False,
    ) -> bool:
        """
        End the session. Best-effort unless strict is set.

        Ending an already-ended session is a no-op that returns False.

        Args:
            session: Session to end
            headers: Request headers
            strict: Raise SessionTeardownError instead of logging failures

        Returns:
            True if the server acknowledged the end request
        """
        log = self._logger.for_session(session.session_id)
        if session.ended:
            log.warn("session:end", "Session already ended")
            return False

        # Marked first so a failed end is never retried by a later teardown
        session.mark_ended()

        try:
            ctx = await self.fetch(
                self.sessions_url(session.session_id, "end"),
                method="POST",
                headers=headers,
            )
        except httpx.HTTPError as e:
            if strict:
                raise SessionTeardownError(session.session_id, str(e)) from e
            log.warn("session:end", f"Failed to end session: {e}")
            return False

        if ctx.status != HTTP_OK:
            if strict:
                raise SessionTeardownError(session.session_id, f"status {ctx.status}")
            log.warn("session:end", "Server rejected end request", status=ctx.status)
            return False

        log.info("session:end", "Session ended")
        return True

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> 'SessionClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
