"""Component-scoped facade lifetime.

A component-scoped facade lives exactly as long as the ``async with`` block
that owns it; leaving the block resets it, the Python counterpart of a UI
component unmounting.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, TypeVar

from .entity_facade import EntityFacade

F = TypeVar("F", bound=EntityFacade)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def component_scope(facade: F) -> AsyncIterator[F]:
    """Yield ``facade`` and reset it when the scope closes."""
    logger.debug(f"Mounted {facade.name} facade")
    try:
        yield facade
    finally:
        facade.reset()
        logger.debug(f"Unmounted {facade.name} facade")
