"""SaaS response models."""

from typing import Any, Dict, Optional

from pydantic import Field

from ....core.entities import ApiModel


class EditionDto(ApiModel):
    """Edition record."""

    id: str
    display_name: str = ""
    concurrency_stamp: Optional[str] = None
    extra_properties: Optional[Dict[str, Any]] = None


class SaasTenantDto(ApiModel):
    """Tenant record."""

    id: str
    name: str = ""
    edition_id: Optional[str] = None
    edition_name: Optional[str] = None
    concurrency_stamp: Optional[str] = None
    extra_properties: Optional[Dict[str, Any]] = None


class UsageStatisticsDto(ApiModel):
    """Edition usage statistics: edition label to tenant count."""

    data: Dict[str, int] = Field(default_factory=dict)
