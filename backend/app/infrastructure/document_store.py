"""Document Stores — SQL-backed and in-memory implementations of DocumentStore.

Invariants:
    - Both stores satisfy app.core.repository_protocols.DocumentStore
    - SqlDocumentStore commits after every store/delete (one operation, one transaction)
    - MemoryDocumentStore keeps copies: callers never share mutable state with it

Design Decisions:
    - One `documents` table for all collections: documents are opaque JSON
    - MemoryDocumentStore for tests and DOCUMENT_STORE=memory single-process runs
"""

import copy
from typing import Any, Callable, TypeVar

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.documents import User, Classroom, Program
from app.core.domain_types import Collection
from app.models.document import Document

T = TypeVar("T")


class SqlDocumentStore:
    """DocumentStore over the `documents` table of an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def _load(self, collection: Collection, doc_id: str) -> dict[str, Any] | None:
        row = await self._db.get(Document, (collection.value, doc_id))
        return copy.deepcopy(row.data) if row else None

    async def _store(self, collection: Collection, doc_id: str, data: dict[str, Any]) -> None:
        row = await self._db.get(Document, (collection.value, doc_id))
        if row is None:
            self._db.add(Document(collection=collection.value, doc_id=doc_id, data=data))
        else:
            row.data = data
        await self._db.commit()

    async def _delete(self, collection: Collection, doc_id: str) -> None:
        await self._db.execute(
            delete(Document).where(
                Document.collection == collection.value,
                Document.doc_id == doc_id,
            ),
        )
        await self._db.commit()

    async def load_user(self, uid: str) -> User | None:
        data = await self._load(Collection.USERS, uid)
        return User.from_document(data) if data else None

    async def store_user(self, user: User) -> None:
        await self._store(Collection.USERS, user.uid, user.to_document())

    async def delete_user(self, uid: str) -> None:
        await self._delete(Collection.USERS, uid)

    async def load_class(self, cid: str) -> Classroom | None:
        data = await self._load(Collection.CLASSES, cid)
        return Classroom.from_document(data) if data else None

    async def store_class(self, classroom: Classroom) -> None:
        await self._store(Collection.CLASSES, classroom.cid, classroom.to_document())

    async def delete_class(self, cid: str) -> None:
        await self._delete(Collection.CLASSES, cid)

    async def load_program(self, pid: str) -> Program | None:
        data = await self._load(Collection.PROGRAMS, pid)
        return Program.from_document(data) if data else None

    async def store_program(self, program: Program) -> None:
        await self._store(Collection.PROGRAMS, program.pid, program.to_document())

    async def delete_program(self, pid: str) -> None:
        await self._delete(Collection.PROGRAMS, pid)


class MemoryDocumentStore:
    """DocumentStore kept in process memory, one dict per collection."""

    def __init__(self) -> None:
        self._collections: dict[Collection, dict[str, dict[str, Any]]] = {
            collection: {} for collection in Collection
        }

    def _load(
        self, collection: Collection, doc_id: str,
        factory: Callable[[dict[str, Any]], T],
    ) -> T | None:
        data = self._collections[collection].get(doc_id)
        return factory(copy.deepcopy(data)) if data is not None else None

    def _store(self, collection: Collection, doc_id: str, data: dict[str, Any]) -> None:
        self._collections[collection][doc_id] = copy.deepcopy(data)

    def _delete(self, collection: Collection, doc_id: str) -> None:
        self._collections[collection].pop(doc_id, None)

    def count(self, collection: Collection) -> int:
        return len(self._collections[collection])

    async def load_user(self, uid: str) -> User | None:
        return self._load(Collection.USERS, uid, User.from_document)

    async def store_user(self, user: User) -> None:
        self._store(Collection.USERS, user.uid, user.to_document())

    async def delete_user(self, uid: str) -> None:
        self._delete(Collection.USERS, uid)

    async def load_class(self, cid: str) -> Classroom | None:
        return self._load(Collection.CLASSES, cid, Classroom.from_document)

    async def store_class(self, classroom: Classroom) -> None:
        self._store(Collection.CLASSES, classroom.cid, classroom.to_document())

    async def delete_class(self, cid: str) -> None:
        self._delete(Collection.CLASSES, cid)

    async def load_program(self, pid: str) -> Program | None:
        return self._load(Collection.PROGRAMS, pid, Program.from_document)

    async def store_program(self, program: Program) -> None:
        self._store(Collection.PROGRAMS, program.pid, program.to_document())

    async def delete_program(self, pid: str) -> None:
        self._delete(Collection.PROGRAMS, pid)
