"""User Routes — create/replace, read and delete user documents."""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_user_management
from app.schemas.user import UserUpsert
from app.services.user_management import UserManagement

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/{uid}")
async def get_user(
    uid: str, users: UserManagement = Depends(get_user_management),
):
    user = await users.get_user(uid)
    return user.to_document()


@router.put("/{uid}")
async def upsert_user(
    uid: str, body: UserUpsert,
    users: UserManagement = Depends(get_user_management),
):
    """Create the user or replace its profile; links are preserved."""
    user = await users.upsert_user(uid, body.name, body.email)
    return user.to_document()


@router.delete("/{uid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    uid: str, users: UserManagement = Depends(get_user_management),
):
    await users.delete_user(uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
