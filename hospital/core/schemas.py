"""
Shared Pydantic building blocks for request and response schemas.

All API payloads use camelCase keys on the wire while the Python side keeps
snake_case attribute names.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for every hospital schema.

    - Serializes and validates using camelCase aliases (``departmentId``)
    - Also accepts snake_case field names on input
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def patch_data(self) -> Dict[str, Any]:
        """
        Fields to merge over a stored record during a partial update.

        Omitted fields and fields explicitly sent as null both mean "unchanged".
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MessageResponse(BaseModel):
    """Error body returned by every failing endpoint."""
    message: str
    errors: Optional[List[Dict[str, Any]]] = None
