"""Documents — User, Classroom and Program records and their link operations.

Invariants:
    - to_document() / from_document() round-trip through plain JSON dicts
    - Link lists (programs, classes, members, instructors) never hold duplicates
    - Link helpers mutate in place and report whether anything changed

Design Decisions:
    - Dataclasses, not ORM models: the store persists opaque JSON documents
    - Classroom instead of Class: `class` is a keyword
"""

import uuid
from dataclasses import dataclass, field, asdict, fields
from typing import Any

from app.core.domain_types import Language, DEFAULT_CODE


def new_document_id() -> str:
    return uuid.uuid4().hex


def _link(items: list[str], value: str) -> bool:
    if value in items:
        return False
    items.append(value)
    return True


def _unlink(items: list[str], value: str) -> bool:
    if value not in items:
        return False
    items.remove(value)
    return True


def _known_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys the dataclass does not declare (older documents)."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


@dataclass
class User:
    uid: str
    name: str
    email: str | None = None
    programs: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)

    def add_program(self, pid: str) -> bool:
        return _link(self.programs, pid)

    def remove_program(self, pid: str) -> bool:
        return _unlink(self.programs, pid)

    def add_class(self, cid: str) -> bool:
        return _link(self.classes, cid)

    def remove_class(self, cid: str) -> bool:
        return _unlink(self.classes, cid)

    def to_document(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "User":
        return cls(**_known_fields(cls, data))


@dataclass
class Classroom:
    cid: str
    name: str
    creator: str
    thumbnail: int = 0
    instructors: list[str] = field(default_factory=list)
    members: list[str] = field(default_factory=list)
    programs: list[str] = field(default_factory=list)

    def has_participant(self, uid: str) -> bool:
        """Members and instructors may read the class."""
        return uid in self.members or uid in self.instructors

    def participants(self) -> list[str]:
        """Instructors then members, each uid once."""
        seen: list[str] = []
        for uid in [*self.instructors, *self.members]:
            _link(seen, uid)
        return seen

    def add_member(self, uid: str) -> bool:
        return _link(self.members, uid)

    def remove_member(self, uid: str) -> bool:
        return _unlink(self.members, uid)

    def remove_participant(self, uid: str) -> bool:
        """Drop `uid` from both members and instructors."""
        removed_member = _unlink(self.members, uid)
        removed_instructor = _unlink(self.instructors, uid)
        return removed_member or removed_instructor

    def to_document(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "Classroom":
        return cls(**_known_fields(cls, data))


@dataclass
class Program:
    pid: str
    uid: str
    name: str
    language: str
    thumbnail: int = 0
    code: str = ""

    def to_document(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "Program":
        return cls(**_known_fields(cls, data))


def create_classroom(creator: str, name: str, thumbnail: int) -> Classroom:
    """New class owned and taught by its creator, with no members yet."""
    return Classroom(
        cid=new_document_id(),
        name=name,
        creator=creator,
        thumbnail=thumbnail,
        instructors=[creator],
    )


def create_program(
    uid: str, name: str, language: Language, thumbnail: int, code: str = "",
) -> Program:
    """New program; empty code is replaced by the language's starter code."""
    return Program(
        pid=new_document_id(),
        uid=uid,
        name=name,
        language=language.value,
        thumbnail=thumbnail,
        code=code or DEFAULT_CODE[language],
    )


def merge_program(program: Program, changes: dict[str, Any]) -> Program:
    """Apply a partial update. pid is immutable; unknown keys are ignored."""
    merged = program.to_document()
    merged.update(
        {k: v for k, v in _known_fields(Program, changes).items() if k != "pid"},
    )
    return Program.from_document(merged)
