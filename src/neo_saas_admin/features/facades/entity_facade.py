"""Stateful entity facade.

An ``EntityFacade`` sits between an entity service and its UI consumers. It
owns one ``Snapshot``, a loading flag and an error string, and runs every
asynchronous operation through ``run()``:

- ``is_loading`` is raised for the duration of the call (in-flight counter,
  so overlapping calls keep it raised until the last one settles)
- ``error`` is cleared on start and set from the failure message
- each operation name has a monotonically increasing request token; a
  response whose token is no longer the latest is returned to its caller
  but never applied to the snapshot ("latest request wins")
- listeners registered with ``subscribe()`` are called after every change
"""

import copy
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar

from ...config.constants import FallbackMessages
from ...core.exceptions import PreconditionError
from ...core.value_objects import Failure, OperationResult, Success
from .snapshot import Snapshot

E = TypeVar("E")
T = TypeVar("T")

Listener = Callable[[Snapshot], None]

logger = logging.getLogger(__name__)


def error_message(error: BaseException, fallback: str) -> str:
    """Get a display message for a failure.

    Uses the exception's ``message`` attribute or its string form; a failure
    without any readable text yields the operation's fallback string.
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str) or not message.strip():
        message = str(error)
    return message if message.strip() else fallback


class EntityFacade(Generic[E]):
    """Snapshot owner and guarded operation runner for one entity kind."""

    def __init__(self, name: str, initial_side_data: Optional[Dict[str, Any]] = None):
        """Initialize with empty state.

        Args:
            name: Entity kind name, used in log messages
            initial_side_data: Construction-time defaults of the side channel
        """
        self._name = name
        self._initial_side_data = copy.deepcopy(dict(initial_side_data or {}))
        self._snapshot: Snapshot[E] = self._initial_snapshot()
        self._error: Optional[str] = None
        self._in_flight = 0
        self._generation = 0
        self._tokens: Dict[str, int] = {}
        self._listeners: List[Listener] = []

    def _initial_snapshot(self) -> Snapshot[E]:
        return Snapshot(side_data=copy.deepcopy(self._initial_side_data))

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def snapshot(self) -> Snapshot[E]:
        """Current snapshot."""
        return self._snapshot

    @property
    def items(self) -> List[E]:
        return self._snapshot.items

    @property
    def total_count(self) -> int:
        return self._snapshot.total_count

    @property
    def selected(self) -> Optional[E]:
        return self._snapshot.selected

    @property
    def side_data(self) -> Dict[str, Any]:
        return self._snapshot.side_data

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    @property
    def error(self) -> Optional[str]:
        return self._error

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with the snapshot after every change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._snapshot)

    # ------------------------------------------------------------------
    # Write accessors
    # ------------------------------------------------------------------

    def _replace(self, **changes: Any) -> None:
        self._snapshot = replace(self._snapshot, **changes)
        self._notify()

    def _set_side_data(self, **values: Any) -> None:
        side_data = dict(self._snapshot.side_data)
        side_data.update(values)
        self._replace(side_data=side_data)

    def select(self, entity: Optional[E]) -> None:
        """Set (or clear) the selected entity."""
        self._replace(selected=entity)

    def reset(self) -> None:
        """Restore construction-time state.

        Responses of calls issued before the reset are discarded when they
        arrive.
        """
        self._generation += 1
        self._tokens.clear()
        self._in_flight = 0
        self._error = None
        self._snapshot = self._initial_snapshot()
        self._notify()

    # ------------------------------------------------------------------
    # Operation runner
    # ------------------------------------------------------------------

    def _next_token(self, operation: str) -> int:
        token = self._tokens.get(operation, 0) + 1
        self._tokens[operation] = token
        return token

    def _is_current(self, operation: str, token: int, generation: int) -> bool:
        return generation == self._generation and self._tokens.get(operation) == token

    async def run(
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        *,
        fallback: str = FallbackMessages.UNKNOWN,
        on_success: Optional[Callable[[T], None]] = None,
    ) -> OperationResult[T]:
        """Run one service call under the loading/error/token discipline.

        Args:
            operation: Operation name; tokens are tracked per name
            call: Zero-argument coroutine factory performing the service call
            fallback: Error string used when the failure has no message
            on_success: Applies the response to the snapshot (latest call only)

        Returns:
            ``Success(data)`` or ``Failure(error)``
        """
        generation = self._generation
        token = self._next_token(operation)
        self._in_flight += 1
        self._error = None
        self._notify()

        try:
            data = await call()
        except PreconditionError:
            raise
        except Exception as e:
            message = error_message(e, fallback)
            if self._is_current(operation, token, generation):
                self._error = message
            logger.warning(f"{self._name}.{operation} failed: {message}")
            return Failure(message)
        else:
            if self._is_current(operation, token, generation):
                if on_success is not None:
                    on_success(data)
            else:
                logger.debug(f"{self._name}.{operation} discarded stale response (token {token})")
            return Success(data)
        finally:
            if generation == self._generation:
                self._in_flight -= 1
            self._notify()
