"""Edition entity service."""

from typing import Any

from ....config.constants import ApiPaths, HttpMethod
from ....core.entities import resource_path
from ....core.protocols import RequestExecutor, RestRequest
from ...pagination import PagedResult, QueryInput, to_query_params
from ..models import EditionCreateDto, EditionDto, EditionUpdateDto, UsageStatisticsDto


class EditionService:
    """REST wrapper for ``/api/saas/editions``."""

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def get_list(self, query: QueryInput = None) -> PagedResult[EditionDto]:
        """Get a page of editions."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.EDITIONS,
            params=to_query_params(query),
        ))
        return PagedResult[EditionDto].parse(raw)

    async def get(self, entity_id: str) -> EditionDto:
        """Get an edition by id."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=resource_path(ApiPaths.EDITION, id=entity_id),
        ))
        return EditionDto.model_validate(raw)

    async def create(self, input: Any) -> EditionDto:
        """Create an edition."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.POST,
            url=ApiPaths.EDITIONS,
            body=EditionCreateDto.coerce(input).to_wire(),
        ))
        return EditionDto.model_validate(raw)

    async def update(self, entity_id: str, input: Any) -> EditionDto:
        """Update an edition. The body never carries the id."""
        body = EditionUpdateDto.coerce(input).to_wire()
        body.pop("id", None)
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.PUT,
            url=resource_path(ApiPaths.EDITION, id=entity_id),
            body=body,
        ))
        return EditionDto.model_validate(raw)

    async def delete(self, entity_id: str) -> None:
        """Delete an edition."""
        await self._executor.request(RestRequest(
            method=HttpMethod.DELETE,
            url=resource_path(ApiPaths.EDITION, id=entity_id),
        ))

    async def get_usage_statistics(self) -> UsageStatisticsDto:
        """Get the number of tenants per edition."""
        raw = await self._executor.request(RestRequest(
            method=HttpMethod.GET,
            url=ApiPaths.EDITION_USAGE_STATISTICS,
        ))
        if not raw or raw.get("data") is None:
            return UsageStatisticsDto()
        return UsageStatisticsDto.model_validate(raw)
