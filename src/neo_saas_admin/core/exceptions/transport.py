"""Transport exceptions raised by request executors.

Anything the backend rejects (network failure, timeout, non-2xx status)
surfaces as a TransportError. Subclasses narrow the common cases but carry
the same shape, so facades only ever look at ``message``.
"""

from typing import Any, Dict, Optional

from .base import SaasAdminError


class TransportError(SaasAdminError):
    """Raised when a REST request fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)
        self.status_code = status_code


class NotFoundError(TransportError):
    """Raised when the backend reports a missing resource (HTTP 404)."""
    pass


class BackendValidationError(TransportError):
    """Raised when the backend rejects the input (HTTP 400/422)."""
    pass


class RequestTimeoutError(TransportError):
    """Raised when the request did not complete within the timeout."""
    pass


def error_for_status(status_code: int):
    """Pick the TransportError subclass for an HTTP status code."""
    if status_code == 404:
        return NotFoundError
    if status_code in (400, 422):
        return BackendValidationError
    return TransportError
