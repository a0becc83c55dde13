"""SQLModel data models.

The service manages a single table, `students`. Uniqueness of `email` is
enforced by the database so concurrent creates cannot both succeed.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Student(SQLModel, table=True):
    """A student record.

    Fields:
    - `id`: generated primary key, never taken from client input
    - `first_name` / `last_name`: free-form names
    - `email`: unique across all students
    """
    __tablename__ = "students"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(nullable=False)
    last_name: str = Field(nullable=False)
    email: str = Field(index=True, nullable=False, unique=True)
