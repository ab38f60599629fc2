"""
Assignment (trabalho) CRUD endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Response

from app.core.config import settings
from app.core.database import QueryExecutor
from app.schemas.school import AssignmentCreate, AssignmentUpdate, AssignmentResponse
from app.services.assignments import AssignmentService
from app.utils.deps import get_executor

router = APIRouter()


def assignment_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Trabalho não encontrado"
    )


@router.get("/trabalhos", response_model=List[AssignmentResponse])
async def list_assignments(
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    nome: Optional[str] = Query(None, description="Case-insensitive name filter"),
    db: QueryExecutor = Depends(get_executor)
):
    """List assignments with their students, optionally filtered by name"""
    if nome:
        return await AssignmentService.list_assignments_by_name(db, nome, page, limit)
    return await AssignmentService.list_assignments(db, page, limit)


@router.get("/trabalhos/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: int,
    db: QueryExecutor = Depends(get_executor)
):
    assignment = await AssignmentService.get_assignment(db, assignment_id)
    if not assignment:
        raise assignment_not_found()
    return assignment


@router.post("/trabalhos", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    payload: AssignmentCreate,
    db: QueryExecutor = Depends(get_executor)
):
    return await AssignmentService.create_assignment(db, payload)


@router.put("/trabalhos/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: int,
    payload: AssignmentUpdate,
    db: QueryExecutor = Depends(get_executor)
):
    assignment = await AssignmentService.update_assignment(db, assignment_id, payload)
    if not assignment:
        raise assignment_not_found()
    return assignment


@router.delete("/trabalhos/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(
    assignment_id: int,
    db: QueryExecutor = Depends(get_executor)
):
    if not await AssignmentService.delete_assignment(db, assignment_id):
        raise assignment_not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
