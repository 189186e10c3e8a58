"""Paged list request entities."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import Field

from ....config.constants import SortOrder
from ....core.entities import ApiModel


class PagedAndSortedRequest(ApiModel):
    """Base list query: free-text filter, offset paging and sorting."""

    filter: Optional[str] = None
    skip_count: Optional[int] = Field(default=None, ge=0)
    max_result_count: Optional[int] = Field(default=None, ge=1, le=1000)
    sorting: Optional[str] = None

    @classmethod
    def for_page(
        cls,
        page: int,
        per_page: int,
        sort_key: Optional[str] = None,
        sort_order: SortOrder = SortOrder.NONE,
        **filters: Any,
    ) -> "PagedAndSortedRequest":
        """Build a query for a 1-based page number."""
        if page < 1:
            raise ValueError("Page must be >= 1")
        return cls(
            skip_count=(page - 1) * per_page,
            max_result_count=per_page,
            sorting=build_sorting(sort_key, sort_order),
            **filters,
        )


def build_sorting(sort_key: Optional[str], sort_order: SortOrder = SortOrder.NONE) -> Optional[str]:
    """Render a ``sorting`` expression such as ``"name asc"``."""
    if not sort_key:
        return None
    order = SortOrder(sort_order)
    if order == SortOrder.NONE:
        return sort_key
    return f"{sort_key} {order.value}"


QueryInput = Union[ApiModel, Mapping[str, Any], None]


def to_query_params(query: QueryInput) -> Dict[str, Any]:
    """Turn a query model or plain mapping into request params.

    ``None`` becomes an empty dict; mappings are passed through with ``None``
    values dropped so callers may use either wire or model shapes.
    """
    if query is None:
        return {}
    if isinstance(query, ApiModel):
        return query.to_wire()
    return {key: value for key, value in query.items() if value is not None}
