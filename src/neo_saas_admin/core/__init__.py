"""Core building blocks shared by every feature: exceptions, results, protocols."""

from .exceptions import (
    SaasAdminError,
    PreconditionError,
    TransportError,
    NotFoundError,
    BackendValidationError,
    RequestTimeoutError,
)
from .value_objects import Success, Failure, OperationResult
from .protocols import RestRequest, RequestExecutor
from .entities import ApiModel, resource_path

__all__ = [
    "SaasAdminError",
    "PreconditionError",
    "TransportError",
    "NotFoundError",
    "BackendValidationError",
    "RequestTimeoutError",
    "Success",
    "Failure",
    "OperationResult",
    "RestRequest",
    "RequestExecutor",
    "ApiModel",
    "resource_path",
]
