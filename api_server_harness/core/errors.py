"""Custom exception hierarchy for the API server harness."""

from typing import Optional, Any, Dict


class ApiServerHarnessError(Exception):
    """Base exception for all harness errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingEnvironmentVariableError(ApiServerHarnessError):
    """Raised when required environment variables are missing."""

    def __init__(self, variable_name: str):
        super().__init__(
            f"Missing required environment variable: {variable_name}",
            {"variable": variable_name, "error_code": "MISSING_ENV_VAR"}
        )


class ConfigurationError(ApiServerHarnessError):
    """Raised when configuration is invalid."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid configuration: {reason}",
            {"reason": reason, "error_code": "CONFIGURATION_ERROR"}
        )


class SessionSetupError(ApiServerHarnessError):
    """Raised when a session cannot be created or prepared. Fatal to a suite."""

    def __init__(self, step: str, reason: str, status: Optional[int] = None):
        super().__init__(
            f"Session setup failed during {step}: {reason}",
            {"step": step, "reason": reason, "status": status, "error_code": "SESSION_SETUP_FAILED"}
        )


class SessionEndedError(ApiServerHarnessError):
    """Raised when a session is used after it has been ended."""

    def __init__(self, session_id: str):
        super().__init__(
            f"Session {session_id} has already been ended",
            {"session_id": session_id, "error_code": "SESSION_ENDED"}
        )


class SessionTeardownError(ApiServerHarnessError):
    """Raised when ending a session fails and the caller asked for strict cleanup."""

    def __init__(self, session_id: str, reason: str):
        super().__init__(
            f"Failed to end session {session_id}: {reason}",
            {"session_id": session_id, "reason": reason, "error_code": "SESSION_TEARDOWN_FAILED"}
        )


class FetchAssertionError(ApiServerHarnessError, AssertionError):
    """Raised when a captured HTTP exchange does not satisfy an expectation."""

    def __init__(self, message: str, context_description: str):
        super().__init__(
            f"{message}\n{context_description}",
            {"reason": message, "error_code": "FETCH_ASSERTION_FAILED"}
        )
