"""Program Schemas — create and partial-update payloads.

Invariants:
    - ProgramCreate.code may be empty: the language's starter code is used
    - ProgramUpdate.uid is required; every other field is optional
"""

from pydantic import BaseModel, Field


class ProgramCreate(BaseModel):
    uid: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    language: str
    thumbnail: int = 0
    code: str = ""


class ProgramUpdate(BaseModel):
    uid: str = Field(min_length=1)
    name: str | None = Field(None, min_length=1, max_length=200)
    language: str | None = None
    thumbnail: int | None = None
    code: str | None = None

    def changes(self) -> dict:
        """Fields the client actually sent, uid excluded."""
        return self.model_dump(exclude_unset=True, exclude={"uid"})
