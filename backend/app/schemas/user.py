"""User Schemas — body of PUT /users/{uid}."""

from pydantic import BaseModel, Field, field_validator


class UserUpsert(BaseModel):
    """Create-or-replace payload. Link lists are managed by the server."""
    name: str = Field(min_length=1, max_length=200)
    email: str | None = Field(None, max_length=320)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v
