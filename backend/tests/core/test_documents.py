"""Documents — tests for record round-trips and link helpers.

Tests cover:
    - to_document / from_document round-trip and ignore unknown keys
    - link helpers refuse duplicates and report changes
    - create_classroom / create_program defaults
    - merge_program keeps pid and ignores unknown keys
"""

from app.core.documents import (
    User, Classroom, Program,
    create_classroom, create_program, merge_program,
)
from app.core.domain_types import Language, DEFAULT_CODE


def test_user_round_trip_ignores_unknown_keys():
    data = {"uid": "u1", "name": "Ada", "email": None,
            "programs": ["p1"], "classes": [], "legacy": True}
    user = User.from_document(data)
    assert user.programs == ["p1"]
    assert "legacy" not in user.to_document()


def test_user_links_are_deduplicated():
    user = User(uid="u1", name="Ada")
    assert user.add_program("p1") is True
    assert user.add_program("p1") is False
    assert user.programs == ["p1"]
    assert user.remove_program("p1") is True
    assert user.remove_program("p1") is False


def test_user_class_links():
    user = User(uid="u1", name="Ada")
    user.add_class("c1")
    user.add_class("c2")
    user.remove_class("c1")
    assert user.classes == ["c2"]


def test_create_classroom_makes_creator_instructor():
    classroom = create_classroom("u1", "Intro", 3)
    assert classroom.creator == "u1"
    assert classroom.instructors == ["u1"]
    assert classroom.members == []
    assert classroom.programs == []
    assert classroom.cid


def test_create_classroom_ids_are_unique():
    assert create_classroom("u1", "A", 0).cid != create_classroom("u1", "A", 0).cid


def test_classroom_participants_are_unique_and_ordered():
    classroom = Classroom(
        cid="c1", name="Intro", creator="u1",
        instructors=["u1", "u2"], members=["u3", "u1"],
    )
    assert classroom.participants() == ["u1", "u2", "u3"]


def test_classroom_remove_participant_covers_both_roles():
    classroom = Classroom(
        cid="c1", name="Intro", creator="u1",
        instructors=["u1", "u2"], members=["u3", "u1"],
    )
    assert classroom.remove_participant("u1") is True
    assert classroom.instructors == ["u2"]
    assert classroom.members == ["u3"]
    assert classroom.remove_participant("u1") is False


def test_classroom_has_participant():
    classroom = Classroom(cid="c1", name="Intro", creator="u1", instructors=["u1"])
    classroom.add_member("u2")
    assert classroom.has_participant("u1")
    assert classroom.has_participant("u2")
    assert not classroom.has_participant("u3")


def test_create_program_uses_starter_code_when_empty():
    program = create_program("u1", "hello", Language.PYTHON, 0)
    assert program.code == DEFAULT_CODE[Language.PYTHON]
    assert program.language == "python"


def test_create_program_keeps_given_code():
    program = create_program("u1", "hello", Language.JAVA, 0, code="// mine")
    assert program.code == "// mine"


def test_merge_program_keeps_pid():
    program = Program(pid="p1", uid="u1", name="a", language="python")
    merged = merge_program(program, {"pid": "p2", "name": "b", "bogus": 1})
    assert merged.pid == "p1"
    assert merged.name == "b"
    assert program.name == "a"
