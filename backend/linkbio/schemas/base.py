"""
Shared pydantic base classes.
"""
from typing import Any, Iterable, List
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema exposing camelCase JSON while keeping snake_case attributes,
    so `model_dump(exclude_unset=True)` maps straight onto ORM columns.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MessageResponse(BaseModel):
    """Generic acknowledgement."""
    message: str


def reject_null(value: Any, field_name: str) -> Any:
    """Used by PATCH schemas: a field may be omitted but not set to null."""
    if value is None:
        raise ValueError(f"{field_name} may not be null")
    return value


def validate_http_url(value: Any) -> Any:
    if value is None or value == "":
        return value
    parsed = urlparse(str(value))
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("Must be a valid http(s) URL")
    return str(value)


def unique_ids(values: Iterable[int]) -> list:
    """Drop repeated ids, keeping the first occurrence."""
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class ReorderRequest(CamelModel):
    """Ids in their new order; position i becomes order i."""
    ordered_ids: List[int] = Field(..., description="Entity ids in display order")

    @field_validator("ordered_ids")
    def dedupe(cls, v: List[int]) -> List[int]:
        return unique_ids(v)
