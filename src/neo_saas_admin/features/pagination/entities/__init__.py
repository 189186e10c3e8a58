"""Pagination entities."""

from .requests import PagedAndSortedRequest, QueryInput, build_sorting, to_query_params
from .responses import ListResult, PagedResult

__all__ = [
    "PagedAndSortedRequest",
    "QueryInput",
    "build_sorting",
    "to_query_params",
    "ListResult",
    "PagedResult",
]
