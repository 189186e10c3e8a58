"""SaaS feature: tenant and edition management."""

from .models import (
    EditionCreateDto,
    EditionUpdateDto,
    GetEditionsInput,
    SaasTenantCreateDto,
    SaasTenantUpdateDto,
    GetTenantsInput,
    EditionDto,
    SaasTenantDto,
    UsageStatisticsDto,
)
from .services import TenantService, EditionService
from .facades import (
    TenantFacade,
    TenantsFacade,
    use_tenants,
    EditionFacade,
    EditionsFacade,
    use_editions,
    SaasStateService,
)

__all__ = [
    # Models
    "EditionCreateDto",
    "EditionUpdateDto",
    "GetEditionsInput",
    "SaasTenantCreateDto",
    "SaasTenantUpdateDto",
    "GetTenantsInput",
    "EditionDto",
    "SaasTenantDto",
    "UsageStatisticsDto",

    # Services
    "TenantService",
    "EditionService",

    # Facades
    "TenantFacade",
    "TenantsFacade",
    "use_tenants",
    "EditionFacade",
    "EditionsFacade",
    "use_editions",
    "SaasStateService",
]
