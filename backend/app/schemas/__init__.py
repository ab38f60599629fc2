from .school import (
    StudentSummary,
    AssignmentSummary,
    StudentCreate,
    StudentUpdate,
    StudentResponse,
    AssignmentCreate,
    AssignmentUpdate,
    AssignmentResponse
)

__all__ = [
    "StudentSummary",
    "AssignmentSummary",
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "AssignmentCreate",
    "AssignmentUpdate",
    "AssignmentResponse"
]
