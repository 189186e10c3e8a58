"""Exception hierarchy for neo-saas-admin."""

from .base import SaasAdminError, PreconditionError
from .transport import (
    TransportError,
    NotFoundError,
    BackendValidationError,
    RequestTimeoutError,
    error_for_status,
)

__all__ = [
    "SaasAdminError",
    "PreconditionError",
    "TransportError",
    "NotFoundError",
    "BackendValidationError",
    "RequestTimeoutError",
    "error_for_status",
]
