"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Type, TypeVar, Dict, Any

T = TypeVar('T', bound='BaseSchema')

class BaseSchema(BaseModel):
    """
    Base schema for all request/response shapes.

    Payloads arrive JSON-shaped with camelCase keys; snake_case field names
    are accepted as well.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    @classmethod
    def from_payload(cls: Type[T], payload: Any) -> T:
        """Validate a dict (or pass through an existing instance)"""
        if isinstance(payload, cls):
            return payload
        return cls.model_validate(payload)

    def to_payload(self) -> Dict[str, Any]:
        """Dump back to the camelCase wire shape, skipping unset fields"""
        return self.model_dump(by_alias=True, exclude_none=True)
