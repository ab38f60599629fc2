from .row_folder import RowFolder, STUDENT_FOLDER, ASSIGNMENT_FOLDER
from .students import StudentService
from .assignments import AssignmentService

__all__ = ["RowFolder", "STUDENT_FOLDER", "ASSIGNMENT_FOLDER", "StudentService", "AssignmentService"]
