import logging
from typing import Any, Dict, List, Optional

from app.core.database import QueryExecutor
from app.schemas.school import StudentCreate, StudentUpdate
from app.services.filters import contains_pattern
from app.services.pagination import page_offset
from app.services.row_folder import STUDENT_FOLDER

logger = logging.getLogger(__name__)

# The page window is applied to students before joining, so a student's
# assignments never straddle two pages.
LIST_STUDENTS_SQL = """
    SELECT A."ID", A."Nome", A."Email", T."ID" AS "TrabalhoID", T."Nome" AS "TrabalhoNome"
    FROM (
        SELECT "ID", "Nome", "Email" FROM "Alunos"
        ORDER BY "ID"
        LIMIT :limit OFFSET :offset
    ) A
    LEFT JOIN "Alunos_Trabalhos" TA ON A."ID" = TA."AlunoID"
    LEFT JOIN "Trabalhos" T ON TA."TrabalhoID" = T."ID"
    ORDER BY A."ID", TA."TrabalhoID"
"""

LIST_STUDENTS_BY_NAME_SQL = """
    SELECT A."ID", A."Nome", A."Email", T."ID" AS "TrabalhoID", T."Nome" AS "TrabalhoNome"
    FROM (
        SELECT "ID", "Nome", "Email" FROM "Alunos"
        WHERE UPPER("Nome") LIKE UPPER(:pattern) ESCAPE '\\'
        ORDER BY "ID"
        LIMIT :limit OFFSET :offset
    ) A
    LEFT JOIN "Alunos_Trabalhos" TA ON A."ID" = TA."AlunoID"
    LEFT JOIN "Trabalhos" T ON TA."TrabalhoID" = T."ID"
    ORDER BY A."ID", TA."TrabalhoID"
"""

GET_STUDENT_SQL = """
    SELECT A."ID", A."Nome", A."Email", T."ID" AS "TrabalhoID", T."Nome" AS "TrabalhoNome"
    FROM "Alunos" A
    LEFT JOIN "Alunos_Trabalhos" TA ON A."ID" = TA."AlunoID"
    LEFT JOIN "Trabalhos" T ON TA."TrabalhoID" = T."ID"
    WHERE A."ID" = :id
    ORDER BY TA."TrabalhoID"
"""

INSERT_STUDENT_SQL = """
    INSERT INTO "Alunos" ("Nome", "Email") VALUES (:nome, :email)
    RETURNING "ID"
"""

UPDATE_STUDENT_SQL = """
    UPDATE "Alunos" SET "Nome" = :nome, "Email" = :email WHERE "ID" = :id
"""

DELETE_STUDENT_SQL = """
    DELETE FROM "Alunos" WHERE "ID" = :id
"""


class StudentService:
    """Student reads and writes against the Alunos table"""

    @staticmethod
    async def list_students(db: QueryExecutor, page: int, limit: int) -> List[Dict[str, Any]]:
        rows = await db.fetch_all(
            LIST_STUDENTS_SQL,
            {"limit": limit, "offset": page_offset(page, limit)}
        )
        return STUDENT_FOLDER.fold(rows)

    @staticmethod
    async def list_students_by_name(
        db: QueryExecutor,
        nome: str,
        page: int,
        limit: int
    ) -> List[Dict[str, Any]]:
        """Students whose name contains ``nome``, ignoring case"""
        rows = await db.fetch_all(
            LIST_STUDENTS_BY_NAME_SQL,
            {
                "pattern": contains_pattern(nome),
                "limit": limit,
                "offset": page_offset(page, limit)
            }
        )
        return STUDENT_FOLDER.fold(rows)

    @staticmethod
    async def get_student(db: QueryExecutor, student_id: int) -> Optional[Dict[str, Any]]:
        rows = await db.fetch_all(GET_STUDENT_SQL, {"id": student_id})
        return STUDENT_FOLDER.fold_one(rows)

    @staticmethod
    async def create_student(db: QueryExecutor, data: StudentCreate) -> Dict[str, Any]:
        """Insert a student; the database assigns the ID"""
        rows = await db.fetch_all(
            INSERT_STUDENT_SQL,
            {"nome": data.nome, "email": data.email}
        )
        student_id = rows[0]["ID"]
        logger.info(f"Created student {student_id}")
        return {
            "id": student_id,
            "nome": data.nome,
            "email": data.email,
            "trabalhos": []
        }

    @staticmethod
    async def update_student(
        db: QueryExecutor,
        student_id: int,
        data: StudentUpdate
    ) -> Optional[Dict[str, Any]]:
        updated = await db.execute(
            UPDATE_STUDENT_SQL,
            {"id": student_id, "nome": data.nome, "email": data.email}
        )
        if not updated:
            return None

        logger.info(f"Updated student {student_id}")
        return await StudentService.get_student(db, student_id)

    @staticmethod
    async def delete_student(db: QueryExecutor, student_id: int) -> bool:
        deleted = await db.execute(DELETE_STUDENT_SQL, {"id": student_id})
        if deleted:
            logger.info(f"Deleted student {student_id}")
        return deleted > 0
