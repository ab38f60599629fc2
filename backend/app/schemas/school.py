from typing import List, Optional
from pydantic import BaseModel, Field


# Summaries embedded on the other side of Alunos_Trabalhos
class StudentSummary(BaseModel):
    id: int
    nome: str


class AssignmentSummary(BaseModel):
    id: int
    nome: str


# Student schemas
class StudentBase(BaseModel):
    nome: str
    email: str


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentResponse(StudentBase):
    id: int
    trabalhos: List[AssignmentSummary] = []


# Assignment schemas
class AssignmentBase(BaseModel):
    nome: str
    descricao: str
    disciplina_id: int = Field(..., alias="disciplinaId")

    class Config:
        populate_by_name = True


class AssignmentCreate(AssignmentBase):
    pass


class AssignmentUpdate(AssignmentBase):
    pass


class AssignmentResponse(BaseModel):
    # Descricao and DisciplinaID are nullable in Trabalhos
    id: int
    nome: str
    descricao: Optional[str] = None
    disciplina_id: Optional[int] = Field(None, alias="disciplinaId")
    alunos: List[StudentSummary] = []

    class Config:
        populate_by_name = True
