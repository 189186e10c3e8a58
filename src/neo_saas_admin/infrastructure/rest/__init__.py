"""REST transport implementations."""

from .httpx_executor import HttpxRequestExecutor, build_async_client, extract_error_message

__all__ = ["HttpxRequestExecutor", "build_async_client", "extract_error_message"]
