"""Operation result value objects.

Facade operations never raise for expected failures. They return either a
``Success`` carrying the payload or a ``Failure`` carrying a display string,
so callers branch on ``result.success`` instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful operation. ``data`` is None only for void operations."""

    data: T

    @property
    def success(self) -> bool:
        return True

    @property
    def error(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Failure:
    """Failed operation with a human-readable error message."""

    error: str

    @property
    def success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None


OperationResult = Union[Success[T], Failure]
