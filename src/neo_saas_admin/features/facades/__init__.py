"""Stateful paginated entity facades.

The building blocks every entity kind shares:

- ``EntityFacade``: snapshot owner with the guarded operation runner
- ``PaginatedFacade`` / ``CrudFacade``: list, lookup and mutation operations
- ``component_scope``: lifetime of a component-scoped facade
"""

from .snapshot import Snapshot
from .protocols import ReadableService, CrudService
from .entity_facade import EntityFacade, Listener, error_message
from .paginated_facade import FacadeMessages, PaginatedFacade, CrudFacade
from .view_state import ListViewState, FeaturesModalState, SortableViewMixin, FeaturesModalMixin
from .scope import component_scope

__all__ = [
    "Snapshot",
    "ReadableService",
    "CrudService",
    "EntityFacade",
    "Listener",
    "error_message",
    "FacadeMessages",
    "PaginatedFacade",
    "CrudFacade",
    "ListViewState",
    "FeaturesModalState",
    "SortableViewMixin",
    "FeaturesModalMixin",
    "component_scope",
]
