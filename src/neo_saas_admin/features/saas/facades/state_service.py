"""Process-scoped SaaS state service.

One instance per session, shared by every consumer. Holds a tenant and an
edition facade; every successful create/update/delete re-fetches the
affected list with the default query.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import Listener
from ...pagination import PagedResult, QueryInput
from ..models import EditionDto, SaasTenantDto, UsageStatisticsDto
from ..services import EditionService, TenantService
from .edition_facade import EditionFacade
from .tenant_facade import TenantFacade

logger = logging.getLogger(__name__)


class SaasStateService:
    """Dispatch/getter facade over tenants and editions.

    Example:
        >>> state = SaasStateService(executor)
        >>> await state.dispatch_get_tenants({"maxResultCount": 10})
        >>> state.get_tenants_total_count()
    """

    def __init__(self, executor: RequestExecutor):
        self.tenants = TenantFacade(TenantService(executor), refresh_after_mutation=True)
        self.editions = EditionFacade(EditionService(executor), refresh_after_mutation=True)
        logger.debug("Created SaaS state service")

    # Getters

    def get_tenants(self) -> List[SaasTenantDto]:
        return self.tenants.items

    def get_tenants_total_count(self) -> int:
        return self.tenants.total_count

    def get_selected_tenant(self) -> Optional[SaasTenantDto]:
        return self.tenants.selected

    def get_latest_tenants(self) -> List[SaasTenantDto]:
        return self.tenants.latest_tenants

    def get_editions(self) -> List[EditionDto]:
        return self.editions.items

    def get_editions_total_count(self) -> int:
        return self.editions.total_count

    def get_selected_edition(self) -> Optional[EditionDto]:
        return self.editions.selected

    def get_usage_statistics(self) -> Dict[str, int]:
        return self.editions.usage_statistics

    @property
    def is_loading(self) -> bool:
        return self.tenants.is_loading or self.editions.is_loading

    # Tenant dispatchers

    async def dispatch_get_tenants(self, query: QueryInput = None) -> OperationResult[PagedResult[SaasTenantDto]]:
        return await self.tenants.fetch_list(query)

    async def dispatch_get_tenant_by_id(self, entity_id: str) -> OperationResult[SaasTenantDto]:
        return await self.tenants.get_by_id(entity_id)

    async def dispatch_create_tenant(self, input: Any) -> OperationResult[SaasTenantDto]:
        return await self.tenants.create(input)

    async def dispatch_update_tenant(self, entity_id: str, input: Any) -> OperationResult[SaasTenantDto]:
        return await self.tenants.update(entity_id, input)

    async def dispatch_delete_tenant(self, entity_id: str) -> OperationResult[None]:
        return await self.tenants.delete(entity_id)

    async def dispatch_get_latest_tenants(self) -> OperationResult[List[SaasTenantDto]]:
        return await self.tenants.fetch_latest_tenants()

    # Edition dispatchers

    async def dispatch_get_editions(self, query: QueryInput = None) -> OperationResult[PagedResult[EditionDto]]:
        return await self.editions.fetch_list(query)

    async def dispatch_get_edition_by_id(self, entity_id: str) -> OperationResult[EditionDto]:
        return await self.editions.get_by_id(entity_id)

    async def dispatch_create_edition(self, input: Any) -> OperationResult[EditionDto]:
        return await self.editions.create(input)

    async def dispatch_update_edition(self, entity_id: str, input: Any) -> OperationResult[EditionDto]:
        return await self.editions.update(entity_id, input)

    async def dispatch_delete_edition(self, entity_id: str) -> OperationResult[None]:
        return await self.editions.delete(entity_id)

    async def dispatch_get_usage_statistics(self) -> OperationResult[UsageStatisticsDto]:
        return await self.editions.fetch_usage_statistics()

    # Lifecycle

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` on both facades.

        Returns:
            Callable removing the listener from both
        """
        unsubscribers = [self.tenants.subscribe(listener), self.editions.subscribe(listener)]

        def unsubscribe() -> None:
            for remove in unsubscribers:
                remove()

        return unsubscribe

    def reset(self) -> None:
        """Clear tenant and edition state."""
        self.tenants.reset()
        self.editions.reset()
