"""Base exceptions for neo-saas-admin.

All exceptions inherit from SaasAdminError and carry an error code, a
human-readable message and optional structured details.
"""

from typing import Any, Dict, Optional


class SaasAdminError(Exception):
    """Base exception for all neo-saas-admin errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class PreconditionError(SaasAdminError):
    """Raised when a caller omits a required parameter.

    This is a programming error, so facades let it propagate instead of
    turning it into a failed OperationResult.
    """
    pass
