"""Boundary Protocols — the document store contract between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - load_* returns None for a missing document (callers decide on 404)
    - store_* creates or replaces; delete_* of a missing document is a no-op
    - Atomicity across several calls is implementation-dependent

Design Decisions:
    - Protocol over ABC: SqlDocumentStore and MemoryDocumentStore share no base
"""

from typing import Protocol

from app.core.documents import User, Classroom, Program


class DocumentStore(Protocol):
    """Contract for user, class and program persistence, implemented by shell."""
    async def load_user(self, uid: str) -> User | None: ...
    async def store_user(self, user: User) -> None: ...
    async def delete_user(self, uid: str) -> None: ...

    async def load_class(self, cid: str) -> Classroom | None: ...
    async def store_class(self, classroom: Classroom) -> None: ...
    async def delete_class(self, cid: str) -> None: ...

    async def load_program(self, pid: str) -> Program | None: ...
    async def store_program(self, program: Program) -> None: ...
    async def delete_program(self, pid: str) -> None: ...
