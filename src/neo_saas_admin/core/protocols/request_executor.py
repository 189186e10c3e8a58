"""Request executor protocol and request descriptor.

Entity services never talk to HTTP directly. They build a ``RestRequest``
and hand it to whatever ``RequestExecutor`` was injected.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ...config.constants import HttpMethod, ResponseType


@dataclass(frozen=True)
class RestRequest:
    """Description of a single REST call."""

    method: HttpMethod
    url: str
    params: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None
    response_type: ResponseType = ResponseType.JSON


@runtime_checkable
class RequestExecutor(Protocol):
    """Protocol for the REST transport consumed by entity services."""

    @abstractmethod
    async def request(self, descriptor: RestRequest) -> Any:
        """Execute the request and return the decoded response body.

        Raises:
            TransportError: on network failure, timeout or non-2xx status
        """
        ...
