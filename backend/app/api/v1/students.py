"""
Student (aluno) CRUD endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query, Response

from app.core.config import settings
from app.core.database import QueryExecutor
from app.schemas.school import StudentCreate, StudentUpdate, StudentResponse
from app.services.students import StudentService
from app.utils.deps import get_executor

router = APIRouter()


@router.get("/alunos", response_model=List[StudentResponse])
async def list_students(
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    nome: Optional[str] = Query(None, description="Case-insensitive name filter"),
    db: QueryExecutor = Depends(get_executor)
):
    """List students with their assignments, optionally filtered by name"""
    if nome:
        return await StudentService.list_students_by_name(db, nome, page, limit)
    return await StudentService.list_students(db, page, limit)


@router.get("/alunos/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    db: QueryExecutor = Depends(get_executor)
):
    student = await StudentService.get_student(db, student_id)
    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Aluno não encontrado"
        )
    return student


@router.post("/alunos", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: StudentCreate,
    db: QueryExecutor = Depends(get_executor)
):
    return await StudentService.create_student(db, payload)


@router.put("/alunos/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    payload: StudentUpdate,
    db: QueryExecutor = Depends(get_executor)
):
    student = await StudentService.update_student(db, student_id, payload)
    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Aluno não encontrado"
        )
    return student


@router.delete("/alunos/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: int,
    db: QueryExecutor = Depends(get_executor)
):
    deleted = await StudentService.delete_student(db, student_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Aluno não encontrado"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
