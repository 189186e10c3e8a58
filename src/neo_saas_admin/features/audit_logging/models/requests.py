"""Audit logging query models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ....core.entities import ApiModel
from ...pagination import PagedAndSortedRequest
from .enums import EntityChangeType


class GetAuditLogListInput(PagedAndSortedRequest):
    """Audit log list query."""

    url: Optional[str] = None
    user_name: Optional[str] = None
    application_name: Optional[str] = None
    correlation_id: Optional[str] = None
    http_method: Optional[str] = None
    http_status_code: Optional[int] = Field(None, ge=100, le=599)
    max_execution_duration: Optional[int] = Field(None, ge=0)
    min_execution_duration: Optional[int] = Field(None, ge=0)
    has_exception: Optional[bool] = None


class GetEntityChangesInput(PagedAndSortedRequest):
    """Entity change list query."""

    audit_log_id: Optional[str] = None
    entity_change_type: Optional[EntityChangeType] = None
    entity_id: Optional[str] = None
    entity_type_full_name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class EntityChangeFilter(ApiModel):
    """Selects the change history of one entity."""

    entity_id: str
    entity_type_full_name: str


class StatisticsFilter(ApiModel):
    """Date range of a statistics query."""

    start_date: datetime
    end_date: datetime


# Backend names of the two statistics inputs
GetAverageExecutionDurationPerDayInput = StatisticsFilter
GetErrorRateFilter = StatisticsFilter
