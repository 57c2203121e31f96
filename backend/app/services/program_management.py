"""Program Management — create, read, update and delete programs.

Invariants:
    - A program always belongs to an existing user and is linked from User.programs
    - language is one of core.domain_types.Language
    - thumbnail satisfies thumbnail_in_range
    - Updates are merges and only the owner may apply them
"""

import logging
from typing import Any

from app.core.documents import Program, create_program, merge_program
from app.core.domain_types import Language, thumbnail_in_range, THUMBNAIL_COUNT
from app.core.errors import (
    ErrorContext, InvalidFieldError, NotPermittedError,
    ResourceNotFoundError, UnsupportedLanguageError,
)
from app.core.repository_protocols import DocumentStore

logger = logging.getLogger(__name__)


def _parse_language(language: str) -> Language:
    try:
        return Language(language)
    except ValueError:
        raise UnsupportedLanguageError(language)


def _check_thumbnail(thumbnail: int, context: ErrorContext) -> None:
    if not thumbnail_in_range(thumbnail):
        raise InvalidFieldError(
            f"thumbnail must be between 0 and {THUMBNAIL_COUNT - 1}",
            "thumbnail", context,
        )


class ProgramManagement:
    """Program document operations over a DocumentStore."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_program(self, pid: str) -> Program:
        program = await self.store.load_program(pid)
        if program is None:
            raise ResourceNotFoundError("Program", pid, ErrorContext(pid=pid))
        return program

    async def create_program(
        self, uid: str, name: str, language: str, thumbnail: int, code: str = "",
    ) -> Program:
        """Create a program for `uid` and link it to the user."""
        lang = _parse_language(language)
        user = await self.store.load_user(uid)
        if user is None:
            raise ResourceNotFoundError("User", uid, ErrorContext(uid=uid))
        _check_thumbnail(thumbnail, ErrorContext(uid=uid))

        program = create_program(uid, name, lang, thumbnail, code)
        await self.store.store_program(program)
        user.add_program(program.pid)
        await self.store.store_user(user)

        logger.info(
            f"Program {program.pid} created for {uid}",
            extra={"uid": uid, "pid": program.pid},
        )
        return program

    async def update_program(
        self, pid: str, uid: str, changes: dict[str, Any],
    ) -> Program:
        program = await self.get_program(pid)
        context = ErrorContext(uid=uid, pid=pid)
        if program.uid != uid:
            raise NotPermittedError("Only the program owner may update it", context)
        if changes.get("language") is not None:
            _parse_language(changes["language"])
        if changes.get("thumbnail") is not None:
            _check_thumbnail(changes["thumbnail"], context)

        merged = merge_program(
            program, {k: v for k, v in changes.items() if v is not None},
        )
        await self.store.store_program(merged)
        return merged

    async def delete_program(self, pid: str, uid: str) -> None:
        """Delete program `pid` and unlink it from user `uid`."""
        user = await self.store.load_user(uid)
        if user is None:
            raise ResourceNotFoundError("User", uid, ErrorContext(uid=uid))
        if pid not in user.programs:
            raise ResourceNotFoundError("Program", pid, ErrorContext(uid=uid, pid=pid))

        await self.store.delete_program(pid)
        user.remove_program(pid)
        await self.store.store_user(user)
        logger.info(f"Program {pid} deleted", extra={"uid": uid, "pid": pid})
