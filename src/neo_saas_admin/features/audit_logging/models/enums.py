"""Audit logging enums."""

from enum import IntEnum


class EntityChangeType(IntEnum):
    """Kind of change recorded for an entity."""

    CREATED = 0
    UPDATED = 1
    DELETED = 2
