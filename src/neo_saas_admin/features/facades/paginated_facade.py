"""Paginated list facades.

``PaginatedFacade`` adds list fetching and single-entity lookup to the
``EntityFacade`` runner; ``CrudFacade`` adds create/update/delete and the
optional refresh-after-mutation used by process-scoped state services.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from ...config.constants import FallbackMessages
from ...core.value_objects import OperationResult
from ..pagination import PagedResult, QueryInput
from .entity_facade import EntityFacade
from .protocols import CrudService, ReadableService

E = TypeVar("E")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacadeMessages:
    """Fallback error strings of the standard operations."""

    fetch_list: str = FallbackMessages.UNKNOWN
    get: str = FallbackMessages.UNKNOWN
    create: str = FallbackMessages.UNKNOWN
    update: str = FallbackMessages.UNKNOWN
    delete: str = FallbackMessages.UNKNOWN


class PaginatedFacade(EntityFacade[E], Generic[E]):
    """Facade over a readable, paged entity service."""

    def __init__(
        self,
        name: str,
        service: ReadableService[E],
        messages: Optional[FacadeMessages] = None,
        initial_side_data: Optional[dict] = None,
    ):
        super().__init__(name, initial_side_data)
        self._service = service
        self._messages = messages or FacadeMessages()

    @property
    def service(self) -> ReadableService[E]:
        return self._service

    def _total_count(self, response: PagedResult[E]) -> int:
        return response.total_count or 0

    def _apply_list(self, response: PagedResult[E]) -> None:
        self._replace(
            items=list(response.items or []),
            total_count=self._total_count(response),
        )

    async def fetch_list(self, query: QueryInput = None) -> OperationResult[PagedResult[E]]:
        """Fetch one page and replace ``items``/``total_count`` with it."""
        return await self.run(
            "fetch_list",
            lambda: self._service.get_list(query),
            fallback=self._messages.fetch_list,
            on_success=self._apply_list,
        )

    async def get_by_id(self, entity_id: str) -> OperationResult[E]:
        """Fetch one entity and make it the selected one."""
        return await self.run(
            "get",
            lambda: self._service.get(entity_id),
            fallback=self._messages.get,
            on_success=self.select,
        )


class CrudFacade(PaginatedFacade[E], Generic[E]):
    """Facade over an entity service with create/update/delete.

    Mutations never touch ``items`` themselves. With
    ``refresh_after_mutation`` the facade re-runs ``fetch_list()`` with the
    default query after every successful mutation; otherwise refreshing is
    left to the caller.
    """

    def __init__(
        self,
        name: str,
        service: CrudService[E],
        messages: Optional[FacadeMessages] = None,
        initial_side_data: Optional[dict] = None,
        refresh_after_mutation: bool = False,
    ):
        super().__init__(name, service, messages, initial_side_data)
        self._crud_service = service
        self.refresh_after_mutation = refresh_after_mutation

    async def _refresh(self, result: OperationResult[Any]) -> None:
        if result.success and self.refresh_after_mutation:
            refreshed = await self.fetch_list()
            if not refreshed.success:
                logger.warning(f"{self.name}: refresh after mutation failed: {refreshed.error}")

    async def create(self, input: Any) -> OperationResult[E]:
        """Create an entity."""
        result = await self.run(
            "create",
            lambda: self._crud_service.create(input),
            fallback=self._messages.create,
        )
        await self._refresh(result)
        return result

    async def update(self, entity_id: str, input: Any) -> OperationResult[E]:
        """Update an entity. ``input`` must carry the current concurrency stamp."""
        result = await self.run(
            "update",
            lambda: self._crud_service.update(entity_id, input),
            fallback=self._messages.update,
        )
        await self._refresh(result)
        return result

    async def delete(self, entity_id: str) -> OperationResult[None]:
        """Delete an entity."""
        result = await self.run(
            "delete",
            lambda: self._crud_service.delete(entity_id),
            fallback=self._messages.delete,
        )
        await self._refresh(result)
        return result
