"""Tenant entity service.

Stateless translation of typed tenant calls into REST requests. Failures
raised by the request executor propagate unchanged.
"""

from typing import Any, List, Optional

from ....config.constants import ApiPaths, HttpMethod, ResponseType
from ....core.entities import resource_path
from ....core.protocols import RequestExecutor, RestRequest
from ...pagination import PagedResult, QueryInput, to_query_params
from ..models import SaasTenantCreateDto, SaasTenantDto, SaasTenantUpdateDto


class TenantService:
    """REST wrapper for ``/api/saas/tenants``."""

    def __init__(self, executor: RequestExecutor):
        """Initialize with the injected request executor.

        Args:
            executor: Transport used for every call
        """
        self._executor = executor

    async def get_list(self, query: QueryInput = None) -> PagedResult[SaasTenantDto]:
        """Get a page of tenants (``GetTenantsInput`` or a wire-shaped mapping)."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.TENANTS,
            params=to_query_params(query),
        ))
        return PagedResult[SaasTenantDto].parse(raw)

    async def get(self, entity_id: str) -> SaasTenantDto:
        """Get a tenant by id."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=resource_path(ApiPaths.TENANT, id=entity_id),
        ))
        return SaasTenantDto.model_validate(raw)

    async def create(self, input: Any) -> SaasTenantDto:
        """Create a tenant with its admin user."""
        body = SaasTenantCreateDto.coerce(input).to_wire()
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.POST,
            url=ApiPaths.TENANTS,
            body=body,
        ))
        return SaasTenantDto.model_validate(raw)

    async def update(self, entity_id: str, input: Any) -> SaasTenantDto:
        """Update a tenant. The body never carries the id."""
        body = SaasTenantUpdateDto.coerce(input).to_wire()
        body.pop("id", None)
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.PUT,
            url=resource_path(ApiPaths.TENANT, id=entity_id),
            body=body,
        ))
        return SaasTenantDto.model_validate(raw)

    async def delete(self, entity_id: str) -> None:
        """Delete a tenant."""
        await self._executor.request(RestRequest(
            method=HttpMethod.DELETE,
            url=resource_path(ApiPaths.TENANT, id=entity_id),
        ))

    async def get_latest(self, count: Optional[int] = None) -> List[SaasTenantDto]:
        """Get the most recently created tenants (dashboard widget)."""
        params = {"count": count} if count is not None else None
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.TENANTS_LATEST,
            params=params,
        ))
        return [SaasTenantDto.model_validate(item) for item in raw or []]

    async def get_default_connection_string(self, entity_id: str) -> str:
        """Get the tenant's own connection string; empty means shared database."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=resource_path(ApiPaths.TENANT_DEFAULT_CONNECTION_STRING, id=entity_id),
            response_type=ResponseType.TEXT,
        ))
        return raw or ""

    async def update_default_connection_string(self, entity_id: str, default_connection_string: str) -> None:
        """Point the tenant at its own database."""
        await self._executor.request(RestRequest(
            method=HttpMethod.PUT,
            url=resource_path(ApiPaths.TENANT_DEFAULT_CONNECTION_STRING, id=entity_id),
            params={"defaultConnectionString": default_connection_string},
        ))

    async def delete_default_connection_string(self, entity_id: str) -> None:
        """Revert the tenant to the shared database."""
        await self._executor.request(RestRequest(
            method=HttpMethod.DELETE,
            url=resource_path(ApiPaths.TENANT_DEFAULT_CONNECTION_STRING, id=entity_id),
        ))
