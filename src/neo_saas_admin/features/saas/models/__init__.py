"""SaaS request/response models."""

from .requests import (
    EditionCreateOrUpdateBase,
    EditionCreateDto,
    EditionUpdateDto,
    GetEditionsInput,
    SaasTenantCreateOrUpdateBase,
    SaasTenantCreateDto,
    SaasTenantUpdateDto,
    GetTenantsInput,
)
from .responses import EditionDto, SaasTenantDto, UsageStatisticsDto

__all__ = [
    # Requests
    "EditionCreateOrUpdateBase",
    "EditionCreateDto",
    "EditionUpdateDto",
    "GetEditionsInput",
    "SaasTenantCreateOrUpdateBase",
    "SaasTenantCreateDto",
    "SaasTenantUpdateDto",
    "GetTenantsInput",

    # Responses
    "EditionDto",
    "SaasTenantDto",
    "UsageStatisticsDto",
]
