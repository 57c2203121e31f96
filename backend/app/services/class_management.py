"""Class Management — create, read, join, leave and delete classes.

Invariants:
    - The creator is the first instructor and gets the class linked on creation
    - Only members and instructors may read a class
    - join/leave keep Classroom.members and User.classes in step
    - User.classes holds cid exactly while the user is a member or instructor
    - Only the creator may delete a class; deletion unlinks every participant

Design Decisions:
    - Two documents per membership change (class, then user): the store offers
      no multi-document transaction, so a failure between writes leaves the
      class side updated first
"""

import logging

from app.core.documents import User, Classroom, create_classroom
from app.core.domain_types import thumbnail_in_range, THUMBNAIL_COUNT
from app.core.errors import (
    ErrorContext, InvalidFieldError, NotAMemberError, NotPermittedError,
    ResourceNotFoundError,
)
from app.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)


class ClassManagement:
    """Class document operations over a DocumentStore."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _class_or_404(self, cid: str) -> Classroom:
        classroom = await self.store.load_class(cid)
        if classroom is None:
            raise ResourceNotFoundError("Class", cid, ErrorContext(cid=cid))
        return classroom

    async def _user_or_404(self, uid: str) -> User:
        user = await self.store.load_user(uid)
        if user is None:
            raise ResourceNotFoundError("User", uid, ErrorContext(uid=uid))
        return user

    async def create_class(self, uid: str, name: str, thumbnail: int) -> Classroom:
        """Create a class taught by `uid` and link it to the user."""
        if not thumbnail_in_range(thumbnail):
            raise InvalidFieldError(
                f"thumbnail must be between 0 and {THUMBNAIL_COUNT - 1}",
                "thumbnail", ErrorContext(uid=uid),
            )
        user = await self._user_or_404(uid)

        classroom = create_classroom(uid, name, thumbnail)
        await self.store.store_class(classroom)
        user.add_class(classroom.cid)
        await self.store.store_user(user)

        logger.info(
            f"Class {classroom.cid} created by {uid}",
            extra={"uid": uid, "cid": classroom.cid},
        )
        return classroom

    async def get_class(self, cid: str, uid: str) -> Classroom:
        classroom = await self._class_or_404(cid)
        if not classroom.has_participant(uid):
            raise NotAMemberError(uid, cid)
        return classroom

    async def join_class(self, cid: str, uid: str) -> Classroom:
        """Add `uid` to the class members. Joining twice is a no-op."""
        classroom = await self._class_or_404(cid)
        user = await self._user_or_404(uid)

        if classroom.add_member(uid):
            await self.store.store_class(classroom)
        if user.add_class(cid):
            await self.store.store_user(user)
        return classroom

    async def leave_class(self, cid: str, uid: str) -> User:
        """Remove `uid` from the class members; returns the updated user.

        Instructors are not members: leaving keeps their link to the class.
        """
        classroom = await self._class_or_404(cid)
        user = await self._user_or_404(uid)

        if classroom.remove_member(uid):
            await self.store.store_class(classroom)
        if not classroom.has_participant(uid) and user.remove_class(cid):
            await self.store.store_user(user)
        return user

    async def delete_class(self, cid: str, uid: str) -> None:
        classroom = await self._class_or_404(cid)
        if classroom.creator != uid:
            raise NotPermittedError(
                "Only the class creator may delete it",
                ErrorContext(uid=uid, cid=cid),
            )

        for participant in classroom.participants():
            user = await self.store.load_user(participant)
            if user is not None and user.remove_class(cid):
                await self.store.store_user(user)
        await self.store.delete_class(cid)
        logger.info(f"Class {cid} deleted", extra={"uid": uid, "cid": cid})
