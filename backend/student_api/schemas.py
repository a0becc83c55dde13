"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable. Clients speak camelCase
(`firstName`), the Python side uses snake_case; both spellings are
accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model mapping snake_case fields to camelCase JSON keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class StudentIn(CamelModel):
    """Payload for create and update. Any client-supplied `id` is ignored."""
    first_name: str
    last_name: str
    email: str


class StudentOut(CamelModel):
    """Student representation returned by every read and write endpoint."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
