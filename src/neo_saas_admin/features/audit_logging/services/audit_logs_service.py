"""Audit log entity service.

Read-only: audit logs and entity changes are written by the backend's
auditing pipeline, never through this API.
"""

from typing import Any, List

from ....config.constants import ApiPaths, HttpMethod
from ....core.entities import resource_path
from ....core.protocols import RequestExecutor, RestRequest
from ...pagination import PagedResult, QueryInput, to_query_params
from ..models import (
    AuditLogDto,
    EntityChangeDto,
    EntityChangeFilter,
    EntityChangeWithUsernameDto,
    StatisticsFilter,
    StatisticsOutput,
)


class AuditLogsService:
    """REST wrapper for ``/api/audit-logging/audit-logs``."""

    def __init__(self, executor: RequestExecutor):
        self._executor = executor

    async def _get(self, url: str, params: Any = None) -> Any:
        return await self._executor.request(RestRequest(method=HttpMethod.GET, url=url, params=params))

    async def get_list(self, query: QueryInput = None) -> PagedResult[AuditLogDto]:
        """Get a page of audit logs (``GetAuditLogListInput`` or a mapping)."""
        raw = await self._get(ApiPaths.AUDIT_LOGS, to_query_params(query))
        return PagedResult[AuditLogDto].parse(raw)

    async def get(self, entity_id: str) -> AuditLogDto:
        """Get one audit log with its actions and entity changes."""
        raw = await self._get(resource_path(ApiPaths.AUDIT_LOG, id=entity_id))
        return AuditLogDto.model_validate(raw)

    async def get_average_execution_duration_per_day(self, filter: Any) -> StatisticsOutput:
        """Get the average request duration per day in a date range."""
        params = StatisticsFilter.coerce(filter).to_wire()
        raw = await self._get(ApiPaths.AUDIT_AVERAGE_EXECUTION_DURATION, params)
        return StatisticsOutput.model_validate(raw or {})

    async def get_error_rate(self, filter: Any) -> StatisticsOutput:
        """Get the failed/succeeded request counts in a date range."""
        params = StatisticsFilter.coerce(filter).to_wire()
        raw = await self._get(ApiPaths.AUDIT_ERROR_RATE, params)
        return StatisticsOutput.model_validate(raw or {})

    async def get_entity_changes(self, query: QueryInput = None) -> PagedResult[EntityChangeDto]:
        """Get a page of entity changes."""
        raw = await self._get(ApiPaths.AUDIT_ENTITY_CHANGES, to_query_params(query))
        return PagedResult[EntityChangeDto].parse(raw)

    async def get_entity_change(self, entity_change_id: str) -> EntityChangeDto:
        """Get one entity change."""
        raw = await self._get(resource_path(ApiPaths.AUDIT_ENTITY_CHANGE, id=entity_change_id))
        return EntityChangeDto.model_validate(raw)

    async def get_entity_changes_with_username(self, filter: Any) -> List[EntityChangeWithUsernameDto]:
        """Get the full change history of one entity, with user names."""
        params = EntityChangeFilter.coerce(filter).to_wire()
        raw = await self._get(ApiPaths.AUDIT_ENTITY_CHANGES_WITH_USERNAME, params)
        return [EntityChangeWithUsernameDto.model_validate(item) for item in raw or []]

    async def get_entity_change_with_username(self, entity_change_id: str) -> EntityChangeWithUsernameDto:
        """Get one entity change with the user name."""
        raw = await self._get(resource_path(ApiPaths.AUDIT_ENTITY_CHANGE_WITH_USERNAME, id=entity_change_id))
        return EntityChangeWithUsernameDto.model_validate(raw)
