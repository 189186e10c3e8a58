"""httpx-backed request executor.

Translates ``RestRequest`` descriptors into ``httpx.AsyncClient`` calls and
shapes every failure into a ``TransportError`` whose message is fit for
direct display.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from ...config.constants import ResponseType
from ...config.settings import SaasAdminSettings, get_settings
from ...core.exceptions import RequestTimeoutError, TransportError, error_for_status
from ...core.protocols import RestRequest


logger = logging.getLogger(__name__)


def build_async_client(
    settings: Optional[SaasAdminSettings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    extra_headers: Optional[Dict[str, str]] = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` configured from settings."""
    settings = settings or get_settings()
    headers = dict(settings.default_headers)
    if settings.tenant_id:
        headers[settings.tenant_header_name] = settings.tenant_id
    if extra_headers:
        headers.update(extra_headers)

    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        verify=settings.verify_ssl,
        headers=headers,
        transport=transport,
    )


def extract_error_message(response: httpx.Response) -> Tuple[str, Dict[str, Any]]:
    """Pull a display message out of an error response.

    Understands the ``{"error": {"message", "details", "code"}}`` envelope the
    backend uses; anything else falls back to the status line.
    """
    fallback = f"{response.status_code} {response.reason_phrase}".strip()
    try:
        payload = response.json()
    except ValueError:
        return fallback, {}

    if not isinstance(payload, dict):
        return fallback, {}

    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message") or fallback
        details = {k: v for k, v in error.items() if k != "message" and v is not None}
        return str(message), details
    if isinstance(payload.get("message"), str) and payload["message"]:
        return payload["message"], {}
    return fallback, {}


class HttpxRequestExecutor:
    """Request executor over a shared ``httpx.AsyncClient``.

    The executor owns the client it builds and closes it in ``aclose()``; a
    client passed in by the caller is left open.
    """

    def __init__(
        self,
        settings: Optional[SaasAdminSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._owns_client = client is None
        self._client = client or build_async_client(settings, transport=transport)

    async def request(self, descriptor: RestRequest) -> Any:
        """Execute the request and return the decoded body."""
        params = None
        if descriptor.params:
            params = {k: v for k, v in descriptor.params.items() if v is not None}

        method = descriptor.method.value
        logger.debug(f"{method} {descriptor.url} params={params}")

        try:
            response = await self._client.request(
                method,
                descriptor.url,
                params=params,
                json=descriptor.body,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {descriptor.url} timed out")
            raise RequestTimeoutError(f"Request timed out: {method} {descriptor.url}") from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {descriptor.url} failed: {e}")
            raise TransportError(str(e) or f"Request failed: {method} {descriptor.url}") from e

        if response.is_error:
            message, details = extract_error_message(response)
            logger.warning(f"{method} {descriptor.url} returned {response.status_code}: {message}")
            error_class = error_for_status(response.status_code)
            raise error_class(
                message,
                status_code=response.status_code,
                error_code=details.get("code"),
                details=details,
            )

        if descriptor.response_type == ResponseType.TEXT:
            return response.text
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def aclose(self) -> None:
        """Close the underlying client if this executor created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxRequestExecutor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
