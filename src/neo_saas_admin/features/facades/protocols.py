"""Protocol interfaces for the services a facade drives."""

from abc import abstractmethod
from typing import Any, Protocol, TypeVar, runtime_checkable

from ..pagination import PagedResult, QueryInput

E = TypeVar("E")


@runtime_checkable
class ReadableService(Protocol[E]):
    """Entity service exposing paged listing and lookup."""

    @abstractmethod
    async def get_list(self, query: QueryInput = None) -> PagedResult[E]:
        """Get one page of entities."""
        ...

    @abstractmethod
    async def get(self, entity_id: str) -> E:
        """Get a single entity by id (or name)."""
        ...


@runtime_checkable
class CrudService(ReadableService[E], Protocol[E]):
    """Entity service exposing the full create/update/delete set."""

    @abstractmethod
    async def create(self, input: Any) -> E:
        """Create an entity."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, input: Any) -> E:
        """Update an entity; ``input`` excludes the id."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete an entity."""
        ...
