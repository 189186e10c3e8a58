"""Process-scoped audit logging state service."""

import logging
from typing import Any, Callable, Dict, List, Optional

from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import Listener
from ...pagination import PagedResult, QueryInput
from ..models import AuditLogDto, StatisticsOutput
from ..services import AuditLogsService
from .audit_log_facade import AuditLogFacade

logger = logging.getLogger(__name__)


class AuditLoggingStateService:
    """Dispatch/getter facade over audit logs and their statistics."""

    def __init__(self, executor: RequestExecutor):
        self.audit_logs = AuditLogFacade(AuditLogsService(executor))
        logger.debug("Created audit logging state service")

    # Getters

    def get_result(self) -> List[AuditLogDto]:
        return self.audit_logs.items

    def get_total_count(self) -> int:
        return self.audit_logs.total_count

    def get_selected_log(self) -> Optional[AuditLogDto]:
        return self.audit_logs.selected

    def get_average_execution_statistics(self) -> Dict[str, float]:
        return self.audit_logs.average_execution_stats

    def get_error_rate_statistics(self) -> Dict[str, float]:
        return self.audit_logs.error_rate_stats

    @property
    def is_loading(self) -> bool:
        return self.audit_logs.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.audit_logs.error

    # Dispatchers

    async def dispatch_get_audit_logs(self, query: QueryInput = None) -> OperationResult[PagedResult[AuditLogDto]]:
        return await self.audit_logs.fetch_list(query)

    async def dispatch_get_audit_log_by_id(self, entity_id: str) -> OperationResult[AuditLogDto]:
        return await self.audit_logs.get_by_id(entity_id)

    async def dispatch_get_average_execution_duration_per_day(
        self, filter: Any
    ) -> OperationResult[StatisticsOutput]:
        return await self.audit_logs.fetch_average_execution_stats(filter)

    async def dispatch_get_error_rate(self, filter: Any) -> OperationResult[StatisticsOutput]:
        return await self.audit_logs.fetch_error_rate_stats(filter)

    # Lifecycle

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.audit_logs.subscribe(listener)

    def reset(self) -> None:
        self.audit_logs.reset()
