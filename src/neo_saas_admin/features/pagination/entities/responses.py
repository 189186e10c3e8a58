"""Paged list response entities."""

from typing import Any, Generic, List, Optional, TypeVar

from ....core.entities import ApiModel

T = TypeVar("T")


class ListResult(ApiModel, Generic[T]):
    """Unpaged list response (``{items}``)."""

    items: List[T] = []

    @property
    def count(self) -> int:
        """Get number of items in the response."""
        return len(self.items)


class PagedResult(ListResult[T], Generic[T]):
    """Paged list response (``{items, totalCount}``)."""

    total_count: int = 0

    @property
    def has_items(self) -> bool:
        """Check if response has any items."""
        return len(self.items) > 0

    @classmethod
    def parse(cls, raw: Optional[Any]) -> "PagedResult[T]":
        """Validate a raw response, treating missing fields as empty/zero."""
        if raw is None:
            return cls()
        if isinstance(raw, dict):
            raw = {key: value for key, value in raw.items() if value is not None}
        return cls.model_validate(raw)
