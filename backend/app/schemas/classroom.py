"""Class Schemas — create and membership payloads.

Invariants:
    - uid and name are non-empty after stripping
    - thumbnail bounds are checked by class_management (domain error, not 422 shape)
"""

from pydantic import BaseModel, Field, field_validator


class ClassCreate(BaseModel):
    uid: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    thumbnail: int = 0

    @field_validator("uid", "name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class ClassMembership(BaseModel):
    """Join / leave payload."""
    uid: str = Field(min_length=1)
