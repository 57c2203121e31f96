"""API Dependencies — document store and service providers for routes.

Invariants:
    - DOCUMENT_STORE=memory shares one MemoryDocumentStore per process
    - DOCUMENT_STORE=sql opens one session per request (auto-rollback on error)
    - Routes depend on services, never on a store directly
"""

from typing import AsyncGenerator

from fastapi import Depends

from app.config import get_settings
from app.core.repository_protocols import DocumentStore
from app.infrastructure import database
from app.infrastructure.document_store import MemoryDocumentStore, SqlDocumentStore
from app.services.class_management import ClassManagement
from app.services.program_management import ProgramManagement
from app.services.user_management import UserManagement

_memory_store: MemoryDocumentStore | None = None


def get_memory_store() -> MemoryDocumentStore:
    global _memory_store
    if _memory_store is None:
        _memory_store = MemoryDocumentStore()
    return _memory_store


async def get_store() -> AsyncGenerator[DocumentStore, None]:
    """FastAPI dependency yielding the configured DocumentStore."""
    if get_settings().document_store == "memory":
        yield get_memory_store()
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield SqlDocumentStore(db)


def get_user_management(store: DocumentStore = Depends(get_store)) -> UserManagement:
    return UserManagement(store)


def get_class_management(store: DocumentStore = Depends(get_store)) -> ClassManagement:
    return ClassManagement(store)


def get_program_management(store: DocumentStore = Depends(get_store)) -> ProgramManagement:
    return ProgramManagement(store)
