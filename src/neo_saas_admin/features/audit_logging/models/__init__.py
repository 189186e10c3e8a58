"""Audit logging models."""

from .enums import EntityChangeType
from .requests import (
    GetAuditLogListInput,
    GetEntityChangesInput,
    EntityChangeFilter,
    StatisticsFilter,
    GetAverageExecutionDurationPerDayInput,
    GetErrorRateFilter,
)
from .responses import (
    EntityPropertyChangeDto,
    EntityChangeDto,
    EntityChangeWithUsernameDto,
    AuditLogActionDto,
    AuditLogDto,
    StatisticsOutput,
    GetAverageExecutionDurationPerDayOutput,
    GetErrorRateOutput,
)

__all__ = [
    "EntityChangeType",

    # Requests
    "GetAuditLogListInput",
    "GetEntityChangesInput",
    "EntityChangeFilter",
    "StatisticsFilter",
    "GetAverageExecutionDurationPerDayInput",
    "GetErrorRateFilter",

    # Responses
    "EntityPropertyChangeDto",
    "EntityChangeDto",
    "EntityChangeWithUsernameDto",
    "AuditLogActionDto",
    "AuditLogDto",
    "StatisticsOutput",
    "GetAverageExecutionDurationPerDayOutput",
    "GetErrorRateOutput",
]
