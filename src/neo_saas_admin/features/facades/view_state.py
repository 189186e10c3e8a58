"""UI-only state carried by component-scoped facades."""

from dataclasses import dataclass
from typing import Any, Optional, Type

from ...config.constants import SortOrder
from ...config.settings import get_settings
from ...core.value_objects import OperationResult
from ..pagination import PagedAndSortedRequest, PagedResult


@dataclass
class ListViewState:
    """Sort state of a list view."""

    sort_key: str = ""
    sort_order: SortOrder = SortOrder.NONE

    def set_sort_key(self, key: str) -> None:
        self.sort_key = key

    def set_sort_order(self, order: SortOrder) -> None:
        self.sort_order = SortOrder(order)


@dataclass
class FeaturesModalState:
    """Visibility of the feature-management modal and the entity it targets."""

    visible: bool = False
    provider_key: str = ""

    def open(self, provider_key: str) -> None:
        self.provider_key = provider_key
        self.visible = True

    def on_visible_change(self, value: bool) -> None:
        self.visible = value
        if not value:
            self.provider_key = ""


class SortableViewMixin:
    """Sort key/order accessors for component-scoped facades.

    Host classes set ``default_sort_key``/``default_sort_order`` and call
    ``_init_sort_state()`` from ``__init__`` and ``reset()``.
    """

    default_sort_key: str = ""
    default_sort_order: SortOrder = SortOrder.NONE
    query_model: Type[PagedAndSortedRequest] = PagedAndSortedRequest

    def _init_sort_state(self) -> None:
        self.list_view = ListViewState(self.default_sort_key, self.default_sort_order)

    @property
    def sort_key(self) -> str:
        return self.list_view.sort_key

    @property
    def sort_order(self) -> SortOrder:
        return self.list_view.sort_order

    def set_sort_key(self, key: str) -> None:
        self.list_view.set_sort_key(key)
        self._notify()

    def set_sort_order(self, order: SortOrder) -> None:
        self.list_view.set_sort_order(order)
        self._notify()

    def page_query(
        self, page: int = 1, per_page: Optional[int] = None, **filters: Any
    ) -> PagedAndSortedRequest:
        """Build the list query for a 1-based page in the current sort order.

        ``per_page`` defaults to the configured ``default_page_size``; extra
        keyword arguments become filters of ``query_model``.
        """
        if per_page is None:
            per_page = get_settings().default_page_size
        return self.query_model.for_page(
            page,
            per_page,
            sort_key=self.sort_key,
            sort_order=self.sort_order,
            **filters,
        )

    async def fetch_page(
        self, page: int = 1, per_page: Optional[int] = None, **filters: Any
    ) -> OperationResult[PagedResult]:
        """Fetch one page of the list using the view's sort state."""
        return await self.fetch_list(self.page_query(page, per_page, **filters))


class FeaturesModalMixin:
    """Feature-management modal accessors for tenant and edition facades."""

    def _init_features_modal(self) -> None:
        self.features_modal = FeaturesModalState()

    @property
    def visible_features(self) -> bool:
        return self.features_modal.visible

    @property
    def features_provider_key(self) -> str:
        return self.features_modal.provider_key

    def open_features_modal(self, provider_key: str) -> None:
        """Show the modal for the entity identified by ``provider_key``."""
        self.features_modal.open(provider_key)
        self._notify()

    def on_visible_features_change(self, value: bool) -> None:
        """Track modal visibility; closing it forgets the provider key."""
        self.features_modal.on_visible_change(value)
        self._notify()
