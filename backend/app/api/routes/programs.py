"""Program Routes — create, read, update and delete programs."""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_program_management
from app.schemas.program import ProgramCreate, ProgramUpdate
from app.services.program_management import ProgramManagement

router = APIRouter(prefix="/api/v1/programs", tags=["programs"])


@router.get("/{pid}")
async def get_program(
    pid: str, programs: ProgramManagement = Depends(get_program_management),
):
    program = await programs.get_program(pid)
    return program.to_document()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_program(
    body: ProgramCreate,
    programs: ProgramManagement = Depends(get_program_management),
):
    """Create a program; empty code falls back to the language starter."""
    program = await programs.create_program(
        body.uid, body.name, body.language, body.thumbnail, body.code,
    )
    return program.to_document()


@router.put("/{pid}")
async def update_program(
    pid: str, body: ProgramUpdate,
    programs: ProgramManagement = Depends(get_program_management),
):
    """Merge the sent fields into the stored program."""
    program = await programs.update_program(pid, body.uid, body.changes())
    return program.to_document()


@router.delete("/{pid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_program(
    pid: str,
    user_id: str = Query(..., min_length=1),
    programs: ProgramManagement = Depends(get_program_management),
):
    await programs.delete_program(pid, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
