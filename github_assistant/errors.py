"""Errors raised by the assistant and the HTTP status each one maps to."""


class AssistantError(Exception):
    """Base error. Rendered as ``{"error": message}`` with ``status_code``."""
    status_code = 500


class AuthorizationError(AssistantError):
    """Missing or wrong API key."""
    status_code = 401


class ValidationError(AssistantError):
    """Required request fields are missing."""
    status_code = 400


class NotFoundError(AssistantError):
    """Path to delete does not exist in the repository."""
    status_code = 404


class RemoteError(AssistantError):
    """GitHub rejected the call or could not be reached."""
    status_code = 500
