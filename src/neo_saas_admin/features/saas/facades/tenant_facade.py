"""Tenant facades.

``TenantFacade`` carries the tenant operations shared by both presentation
shapes. ``TenantsFacade`` is the component-scoped variant with the list and
features-modal UI state; ``use_tenants`` scopes one to an ``async with``
block.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from ....config.constants import DefaultSortKeys, FallbackMessages
from ....core.protocols import RequestExecutor
from ....core.value_objects import OperationResult
from ...facades import (
    CrudFacade,
    FacadeMessages,
    FeaturesModalMixin,
    SortableViewMixin,
    component_scope,
)
from ..models import GetTenantsInput, SaasTenantDto
from ..services import TenantService

TENANT_MESSAGES = FacadeMessages(
    fetch_list=FallbackMessages.FETCH_TENANTS,
    get=FallbackMessages.FETCH_TENANT,
    create=FallbackMessages.CREATE_TENANT,
    update=FallbackMessages.UPDATE_TENANT,
    delete=FallbackMessages.DELETE_TENANT,
)


class TenantFacade(CrudFacade[SaasTenantDto]):
    """Tenant list, selection and connection-string state.

    Side data:
        default_connection_string: Connection string of the last queried tenant
        use_shared_database: True while that tenant has no own database
        latest_tenants: Most recently created tenants
    """

    def __init__(self, service: TenantService, refresh_after_mutation: bool = False):
        super().__init__(
            "tenants",
            service,
            messages=TENANT_MESSAGES,
            initial_side_data={
                "default_connection_string": "",
                "use_shared_database": True,
                "latest_tenants": [],
            },
            refresh_after_mutation=refresh_after_mutation,
        )
        self._tenant_service = service

    @property
    def default_connection_string(self) -> str:
        return self.side_data["default_connection_string"]

    @property
    def use_shared_database(self) -> bool:
        return self.side_data["use_shared_database"]

    @property
    def latest_tenants(self) -> List[SaasTenantDto]:
        return self.side_data["latest_tenants"]

    def _apply_connection_string(self, value: Optional[str]) -> None:
        self._set_side_data(
            default_connection_string=value or "",
            use_shared_database=not value,
        )

    async def get_default_connection_string(self, entity_id: str) -> OperationResult[str]:
        """Load a tenant's connection string; empty means shared database."""
        return await self.run(
            "get_default_connection_string",
            lambda: self._tenant_service.get_default_connection_string(entity_id),
            fallback=FallbackMessages.FETCH_CONNECTION_STRING,
            on_success=self._apply_connection_string,
        )

    async def update_default_connection_string(
        self, entity_id: str, default_connection_string: str
    ) -> OperationResult[None]:
        """Move a tenant to its own database."""
        return await self.run(
            "update_default_connection_string",
            lambda: self._tenant_service.update_default_connection_string(
                entity_id, default_connection_string
            ),
            fallback=FallbackMessages.UPDATE_CONNECTION_STRING,
            on_success=lambda _: self._set_side_data(
                default_connection_string=default_connection_string,
                use_shared_database=False,
            ),
        )

    async def delete_default_connection_string(self, entity_id: str) -> OperationResult[None]:
        """Move a tenant back to the shared database."""
        return await self.run(
            "delete_default_connection_string",
            lambda: self._tenant_service.delete_default_connection_string(entity_id),
            fallback=FallbackMessages.DELETE_CONNECTION_STRING,
            on_success=lambda _: self._apply_connection_string(""),
        )

    async def fetch_latest_tenants(self) -> OperationResult[List[SaasTenantDto]]:
        """Load the latest tenants for the dashboard widget."""
        return await self.run(
            "fetch_latest_tenants",
            self._tenant_service.get_latest,
            fallback=FallbackMessages.FETCH_LATEST_TENANTS,
            on_success=lambda tenants: self._set_side_data(latest_tenants=list(tenants)),
        )


class TenantsFacade(SortableViewMixin, FeaturesModalMixin, TenantFacade):
    """Component-scoped tenant facade with list and modal UI state."""

    default_sort_key = DefaultSortKeys.TENANTS
    query_model = GetTenantsInput

    def __init__(self, service: TenantService):
        self._init_sort_state()
        self._init_features_modal()
        super().__init__(service, refresh_after_mutation=False)

    @property
    def tenants(self) -> List[SaasTenantDto]:
        return self.items

    @property
    def selected_tenant(self) -> Optional[SaasTenantDto]:
        return self.selected

    def set_selected_tenant(self, tenant: Optional[SaasTenantDto]) -> None:
        self.select(tenant)

    def reset(self) -> None:
        self._init_sort_state()
        self._init_features_modal()
        super().reset()


@asynccontextmanager
async def use_tenants(executor: RequestExecutor) -> AsyncIterator[TenantsFacade]:
    """Create a tenant facade that lives for the ``async with`` block."""
    async with component_scope(TenantsFacade(TenantService(executor))) as facade:
        yield facade
