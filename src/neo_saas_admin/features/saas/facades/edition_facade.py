"""Edition facades."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

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
from ..models import EditionDto, GetEditionsInput, UsageStatisticsDto
from ..services import EditionService

EDITION_MESSAGES = FacadeMessages(
    fetch_list=FallbackMessages.FETCH_EDITIONS,
    get=FallbackMessages.FETCH_EDITION,
    create=FallbackMessages.CREATE_EDITION,
    update=FallbackMessages.UPDATE_EDITION,
    delete=FallbackMessages.DELETE_EDITION,
)


class EditionFacade(CrudFacade[EditionDto]):
    """Edition list, selection and usage statistics.

    Side data:
        usage_statistics: Edition label to tenant count
    """

    def __init__(self, service: EditionService, refresh_after_mutation: bool = False):
        super().__init__(
            "editions",
            service,
            messages=EDITION_MESSAGES,
            initial_side_data={"usage_statistics": {}},
            refresh_after_mutation=refresh_after_mutation,
        )
        self._edition_service = service

    @property
    def usage_statistics(self) -> Dict[str, int]:
        return self.side_data["usage_statistics"]

    async def fetch_usage_statistics(self) -> OperationResult[UsageStatisticsDto]:
        """Load the number of tenants per edition."""
        return await self.run(
            "fetch_usage_statistics",
            self._edition_service.get_usage_statistics,
            fallback=FallbackMessages.FETCH_USAGE_STATISTICS,
            on_success=lambda response: self._set_side_data(
                usage_statistics=dict(response.data or {})
            ),
        )


class EditionsFacade(SortableViewMixin, FeaturesModalMixin, EditionFacade):
    """Component-scoped edition facade with list and modal UI state."""

    default_sort_key = DefaultSortKeys.EDITIONS
    query_model = GetEditionsInput

    def __init__(self, service: EditionService):
        self._init_sort_state()
        self._init_features_modal()
        super().__init__(service, refresh_after_mutation=False)

    @property
    def editions(self) -> List[EditionDto]:
        return self.items

    @property
    def selected_edition(self) -> Optional[EditionDto]:
        return self.selected

    def set_selected_edition(self, edition: Optional[EditionDto]) -> None:
        self.select(edition)

    def reset(self) -> None:
        self._init_sort_state()
        self._init_features_modal()
        super().reset()


@asynccontextmanager
async def use_editions(executor: RequestExecutor) -> AsyncIterator[EditionsFacade]:
    """Create an edition facade that lives for the ``async with`` block."""
    async with component_scope(EditionsFacade(EditionService(executor))) as facade:
        yield facade
