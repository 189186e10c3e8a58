"""Pagination primitives shared by every list endpoint.

- ``PagedAndSortedRequest``: skip/max-count paging with filter and sorting
- ``PagedResult``: ``{items, totalCount}`` responses
"""

from .entities import (
    PagedAndSortedRequest,
    QueryInput,
    build_sorting,
    to_query_params,
    ListResult,
    PagedResult,
)

__all__ = [
    "PagedAndSortedRequest",
    "QueryInput",
    "build_sorting",
    "to_query_params",
    "ListResult",
    "PagedResult",
]
