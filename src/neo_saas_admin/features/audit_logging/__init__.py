"""Audit logging feature: request logs, statistics and entity changes."""

from .models import (
    EntityChangeType,
    GetAuditLogListInput,
    GetEntityChangesInput,
    EntityChangeFilter,
    StatisticsFilter,
    AuditLogDto,
    AuditLogActionDto,
    EntityChangeDto,
    EntityPropertyChangeDto,
    EntityChangeWithUsernameDto,
    StatisticsOutput,
)
from .services import AuditLogsService
from .facades import AuditLogFacade, AuditLogsFacade, use_audit_logs, AuditLoggingStateService

__all__ = [
    # Models
    "EntityChangeType",
    "GetAuditLogListInput",
    "GetEntityChangesInput",
    "EntityChangeFilter",
    "StatisticsFilter",
    "AuditLogDto",
    "AuditLogActionDto",
    "EntityChangeDto",
    "EntityPropertyChangeDto",
    "EntityChangeWithUsernameDto",
    "StatisticsOutput",

    # Services
    "AuditLogsService",

    # Facades
    "AuditLogFacade",
    "AuditLogsFacade",
    "use_audit_logs",
    "AuditLoggingStateService",
]
