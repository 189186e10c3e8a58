"""SaaS request models (create/update inputs and list queries)."""

from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from ....core.entities import ApiModel
from ...pagination import PagedAndSortedRequest


class EditionCreateOrUpdateBase(ApiModel):
    """Fields shared by edition create and update inputs."""

    display_name: str = Field(..., min_length=1, description="Edition display name")
    extra_properties: Optional[Dict[str, Any]] = Field(None, description="Extension properties")


class EditionCreateDto(EditionCreateOrUpdateBase):
    """Input for creating an edition. Only the display name is required."""


class EditionUpdateDto(EditionCreateOrUpdateBase):
    """Input for updating an edition."""

    concurrency_stamp: str = Field(..., min_length=1, description="Current version token of the edition")


class GetEditionsInput(PagedAndSortedRequest):
    """Edition list query."""


class SaasTenantCreateOrUpdateBase(ApiModel):
    """Fields shared by tenant create and update inputs."""

    name: str = Field(..., min_length=1, description="Tenant name")
    edition_id: Optional[str] = Field(None, description="Edition assigned to the tenant")
    extra_properties: Optional[Dict[str, Any]] = Field(None, description="Extension properties")


class SaasTenantCreateDto(SaasTenantCreateOrUpdateBase):
    """Input for creating a tenant together with its admin user."""

    admin_email_address: str = Field(..., min_length=3, description="Admin user email")
    admin_password: str = Field(..., min_length=1, description="Admin user password")

    @field_validator("admin_email_address")
    @classmethod
    def validate_admin_email_address(cls, v):
        """Validate email shape."""
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("Admin email address must contain '@'")
        return v


class SaasTenantUpdateDto(SaasTenantCreateOrUpdateBase):
    """Input for updating a tenant."""

    concurrency_stamp: str = Field(..., min_length=1, description="Current version token of the tenant")


class GetTenantsInput(PagedAndSortedRequest):
    """Tenant list query."""

    get_edition_names: Optional[bool] = Field(None, description="Include edition names in the items")
