"""Facade snapshot entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

E = TypeVar("E")


@dataclass(frozen=True)
class Snapshot(Generic[E]):
    """Immutable view of one entity kind's state.

    Facades never mutate a snapshot in place; every change produces a new
    one, so a reference handed out earlier keeps showing the old data.
    """

    items: List[E] = field(default_factory=list)
    total_count: int = 0
    selected: Optional[E] = None
    side_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        """Get number of items on the current page."""
        return len(self.items)
