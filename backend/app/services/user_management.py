"""User Management — create/replace, read and delete user documents.

Invariants:
    - upsert keeps an existing user's program and class links
    - get/delete of a missing user raise ResourceNotFoundError
    - delete removes the uid from every linked class and deletes owned programs
    - Classes the user created survive deletion; their creator field is kept
"""

import logging

from app.core.documents import User
from app.core.errors import ResourceNotFoundError, ErrorContext
from app.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)


class UserManagement:
    """User document operations over a DocumentStore."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_user(self, uid: str) -> User:
        user = await self.store.load_user(uid)
        if user is None:
            raise ResourceNotFoundError("User", uid, ErrorContext(uid=uid))
        return user

    async def upsert_user(self, uid: str, name: str, email: str | None) -> User:
        """Create the user, or replace its profile fields if it exists."""
        user = await self.store.load_user(uid)
        if user is None:
            user = User(uid=uid, name=name, email=email)
            logger.info(f"Creating user {uid}", extra={"uid": uid})
        else:
            user.name = name
            user.email = email
        await self.store.store_user(user)
        return user

    async def delete_user(self, uid: str) -> None:
        """Delete the user, its memberships and the programs it owns."""
        user = await self.get_user(uid)

        for cid in user.classes:
            classroom = await self.store.load_class(cid)
            if classroom is not None and classroom.remove_participant(uid):
                await self.store.store_class(classroom)
        for pid in user.programs:
            program = await self.store.load_program(pid)
            if program is not None and program.uid == uid:
                await self.store.delete_program(pid)

        await self.store.delete_user(uid)
        logger.info(f"Deleted user {uid}", extra={"uid": uid})
