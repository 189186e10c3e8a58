"""SaaS entity services."""

from .tenant_service import TenantService
from .edition_service import EditionService

__all__ = ["TenantService", "EditionService"]
