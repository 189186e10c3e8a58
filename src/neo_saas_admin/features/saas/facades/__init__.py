"""SaaS facades in both presentation shapes."""

from .tenant_facade import TenantFacade, TenantsFacade, use_tenants
from .edition_facade import EditionFacade, EditionsFacade, use_editions
from .state_service import SaasStateService

__all__ = [
    "TenantFacade",
    "TenantsFacade",
    "use_tenants",
    "EditionFacade",
    "EditionsFacade",
    "use_editions",
    "SaasStateService",
]
