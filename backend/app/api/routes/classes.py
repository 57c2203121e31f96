"""Class Routes — create, read, join, leave and delete classes.

Invariants:
    - GET and DELETE identify the caller with the `uid` query parameter
    - join returns the class, leave returns the user (clients refresh their own doc)
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_class_management
from app.schemas.classroom import ClassCreate, ClassMembership
from app.services.class_management import ClassManagement

router = APIRouter(prefix="/api/v1/classes", tags=["classes"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_class(
    body: ClassCreate, classes: ClassManagement = Depends(get_class_management),
):
    """Create a class; the caller becomes its creator and first instructor."""
    classroom = await classes.create_class(body.uid, body.name, body.thumbnail)
    return classroom.to_document()


@router.get("/{cid}")
async def get_class(
    cid: str,
    uid: str = Query(..., min_length=1),
    classes: ClassManagement = Depends(get_class_management),
):
    classroom = await classes.get_class(cid, uid)
    return classroom.to_document()


@router.post("/{cid}/join")
async def join_class(
    cid: str, body: ClassMembership,
    classes: ClassManagement = Depends(get_class_management),
):
    classroom = await classes.join_class(cid, body.uid)
    return classroom.to_document()


@router.post("/{cid}/leave")
async def leave_class(
    cid: str, body: ClassMembership,
    classes: ClassManagement = Depends(get_class_management),
):
    user = await classes.leave_class(cid, body.uid)
    return user.to_document()


@router.delete("/{cid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(
    cid: str,
    uid: str = Query(..., min_length=1),
    classes: ClassManagement = Depends(get_class_management),
):
    await classes.delete_class(cid, uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
