"""Audit logging response models."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from ....core.entities import ApiModel
from .enums import EntityChangeType


class EntityPropertyChangeDto(ApiModel):
    """One property's before/after values."""

    id: str
    tenant_id: Optional[str] = None
    entity_change_id: Optional[str] = None
    new_value: Optional[str] = None
    original_value: Optional[str] = None
    property_name: str = ""
    property_type_full_name: str = ""


class EntityChangeDto(ApiModel):
    """Change recorded for one entity within an audit log."""

    id: str
    extra_properties: Optional[Dict[str, Any]] = None
    audit_log_id: Optional[str] = None
    tenant_id: Optional[str] = None
    change_time: Optional[datetime] = None
    change_type: EntityChangeType = EntityChangeType.UPDATED
    entity_id: str = ""
    entity_type_full_name: str = ""
    property_changes: List[EntityPropertyChangeDto] = Field(default_factory=list)


class EntityChangeWithUsernameDto(ApiModel):
    """Entity change together with the user that made it."""

    entity_change: EntityChangeDto
    user_name: Optional[str] = None


class AuditLogActionDto(ApiModel):
    """Application service method executed during a request."""

    id: str
    extra_properties: Optional[Dict[str, Any]] = None
    tenant_id: Optional[str] = None
    audit_log_id: Optional[str] = None
    service_name: str = ""
    method_name: str = ""
    parameters: str = ""
    execution_time: Optional[datetime] = None
    execution_duration: int = 0


class AuditLogDto(ApiModel):
    """Audit log record of one request."""

    id: str
    extra_properties: Optional[Dict[str, Any]] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    tenant_id: Optional[str] = None
    impersonator_user_id: Optional[str] = None
    impersonator_tenant_id: Optional[str] = None
    execution_time: Optional[datetime] = None
    execution_duration: int = 0
    client_ip_address: Optional[str] = None
    client_name: Optional[str] = None
    browser_info: Optional[str] = None
    http_method: Optional[str] = None
    url: Optional[str] = None
    exceptions: Optional[str] = None
    comments: Optional[str] = None
    http_status_code: Optional[int] = None
    application_name: Optional[str] = None
    correlation_id: Optional[str] = None
    entity_changes: List[EntityChangeDto] = Field(default_factory=list)
    actions: List[AuditLogActionDto] = Field(default_factory=list)

    @property
    def has_exception(self) -> bool:
        return bool(self.exceptions)


class StatisticsOutput(ApiModel):
    """Per-day statistics: date label to value."""

    data: Dict[str, float] = Field(default_factory=dict)


GetAverageExecutionDurationPerDayOutput = StatisticsOutput
GetErrorRateOutput = StatisticsOutput
