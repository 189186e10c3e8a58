"""Value objects for neo-saas-admin."""

from .operation_result import Success, Failure, OperationResult

__all__ = ["Success", "Failure", "OperationResult"]
