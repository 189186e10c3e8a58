"""Protocol interfaces for neo-saas-admin."""

from .request_executor import RestRequest, RequestExecutor

__all__ = ["RestRequest", "RequestExecutor"]
