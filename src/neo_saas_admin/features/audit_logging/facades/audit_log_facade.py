"""Audit log facades.

Audit logs are read-only, so the facade builds on ``PaginatedFacade`` and
adds the statistics and entity-change side channels.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from ....config.constants import DefaultSortKeys, FallbackMessages, SortOrder
from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import FacadeMessages, PaginatedFacade, SortableViewMixin, component_scope
from ...pagination import PagedResult, QueryInput
from ..models import (
    AuditLogDto,
    EntityChangeDto,
    EntityChangeWithUsernameDto,
    GetAuditLogListInput,
    StatisticsOutput,
)
from ..services import AuditLogsService

AUDIT_LOG_MESSAGES = FacadeMessages(
    fetch_list=FallbackMessages.FETCH_AUDIT_LOGS,
    get=FallbackMessages.FETCH_AUDIT_LOG,
)

INITIAL_SIDE_DATA = {
    "average_execution_stats": {},
    "error_rate_stats": {},
    "entity_changes": [],
    "entity_changes_total_count": 0,
    "selected_entity_change": None,
    "entity_change_history": [],
}


class AuditLogFacade(PaginatedFacade[AuditLogDto]):
    """Audit log list, selection, statistics and entity changes.

    The last list query is remembered so ``refresh()`` can repeat it.
    """

    def __init__(self, service: AuditLogsService):
        super().__init__(
            "audit_logs",
            service,
            messages=AUDIT_LOG_MESSAGES,
            initial_side_data=INITIAL_SIDE_DATA,
        )
        self._audit_service = service
        self.last_query: QueryInput = None

    @property
    def average_execution_stats(self) -> Dict[str, float]:
        return self.side_data["average_execution_stats"]

    @property
    def error_rate_stats(self) -> Dict[str, float]:
        return self.side_data["error_rate_stats"]

    @property
    def entity_changes(self) -> List[EntityChangeDto]:
        return self.side_data["entity_changes"]

    @property
    def entity_changes_total_count(self) -> int:
        return self.side_data["entity_changes_total_count"]

    @property
    def selected_entity_change(self) -> Optional[Any]:
        return self.side_data["selected_entity_change"]

    @property
    def entity_change_history(self) -> List[EntityChangeWithUsernameDto]:
        return self.side_data["entity_change_history"]

    async def fetch_list(self, query: QueryInput = None) -> OperationResult[PagedResult[AuditLogDto]]:
        self.last_query = query
        return await super().fetch_list(query)

    async def refresh(self) -> OperationResult[PagedResult[AuditLogDto]]:
        """Repeat the last list query."""
        return await self.fetch_list(self.last_query)

    def _apply_stats(self, key: str):
        def apply(response: StatisticsOutput) -> None:
            self._set_side_data(**{key: dict(response.data or {})})
        return apply

    async def fetch_average_execution_stats(self, filter: Any) -> OperationResult[StatisticsOutput]:
        """Load average request duration per day for a date range."""
        return await self.run(
            "fetch_average_execution_stats",
            lambda: self._audit_service.get_average_execution_duration_per_day(filter),
            fallback=FallbackMessages.FETCH_AVERAGE_EXECUTION_STATS,
            on_success=self._apply_stats("average_execution_stats"),
        )

    async def fetch_error_rate_stats(self, filter: Any) -> OperationResult[StatisticsOutput]:
        """Load failed/succeeded request counts for a date range."""
        return await self.run(
            "fetch_error_rate_stats",
            lambda: self._audit_service.get_error_rate(filter),
            fallback=FallbackMessages.FETCH_ERROR_RATE_STATS,
            on_success=self._apply_stats("error_rate_stats"),
        )

    async def fetch_entity_changes(self, query: QueryInput = None) -> OperationResult[PagedResult[EntityChangeDto]]:
        """Load one page of entity changes."""
        return await self.run(
            "fetch_entity_changes",
            lambda: self._audit_service.get_entity_changes(query),
            fallback=FallbackMessages.FETCH_ENTITY_CHANGES,
            on_success=lambda response: self._set_side_data(
                entity_changes=list(response.items or []),
                entity_changes_total_count=response.total_count or 0,
            ),
        )

    async def get_entity_change(self, entity_change_id: str) -> OperationResult[EntityChangeDto]:
        """Load one entity change and select it."""
        return await self.run(
            "get_entity_change",
            lambda: self._audit_service.get_entity_change(entity_change_id),
            fallback=FallbackMessages.FETCH_ENTITY_CHANGE,
            on_success=lambda change: self._set_side_data(selected_entity_change=change),
        )

    async def get_entity_change_with_username(
        self, entity_change_id: str
    ) -> OperationResult[EntityChangeWithUsernameDto]:
        """Load one entity change with its user name and select it."""
        return await self.run(
            "get_entity_change",
            lambda: self._audit_service.get_entity_change_with_username(entity_change_id),
            fallback=FallbackMessages.FETCH_ENTITY_CHANGE,
            on_success=lambda change: self._set_side_data(selected_entity_change=change),
        )

    async def fetch_entity_change_history(
        self, filter: Any
    ) -> OperationResult[List[EntityChangeWithUsernameDto]]:
        """Load every change of one entity (``EntityChangeFilter``)."""
        return await self.run(
            "fetch_entity_change_history",
            lambda: self._audit_service.get_entity_changes_with_username(filter),
            fallback=FallbackMessages.FETCH_ENTITY_CHANGES,
            on_success=lambda changes: self._set_side_data(entity_change_history=list(changes)),
        )

    def reset(self) -> None:
        self.last_query = None
        super().reset()


class AuditLogsFacade(SortableViewMixin, AuditLogFacade):
    """Component-scoped audit log facade, newest first by default."""

    default_sort_key = DefaultSortKeys.AUDIT_LOGS
    default_sort_order = SortOrder.DESC
    query_model = GetAuditLogListInput

    def __init__(self, service: AuditLogsService):
        self._init_sort_state()
        super().__init__(service)

    @property
    def audit_logs(self) -> List[AuditLogDto]:
        return self.items

    @property
    def selected_log(self) -> Optional[AuditLogDto]:
        return self.selected

    def set_selected_log(self, log: Optional[AuditLogDto]) -> None:
        self.select(log)

    def reset(self) -> None:
        self._init_sort_state()
        super().reset()


@asynccontextmanager
async def use_audit_logs(executor: RequestExecutor) -> AsyncIterator[AuditLogsFacade]:
    """Create an audit log facade that lives for the ``async with`` block."""
    async with component_scope(AuditLogsFacade(AuditLogsService(executor))) as facade:
        yield facade
