"""Infrastructure adapters for neo-saas-admin."""

from .rest import HttpxRequestExecutor, build_async_client

__all__ = ["HttpxRequestExecutor", "build_async_client"]
