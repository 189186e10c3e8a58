"""Base model for DTOs exchanged with the REST backend.

The backend speaks camelCase JSON; Python code uses snake_case attributes.
Unknown fields are kept so that records round-trip without loss.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Plain data record with camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize for a request body or query string (camelCase, no None values)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def coerce(cls, value: Any) -> "ApiModel":
        """Accept either an instance or a mapping (wire or attribute names)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True, exclude_none=True)
        return cls.model_validate(value)
