import logging
from typing import Any, Dict, List, Optional

from app.core.database import QueryExecutor
from app.schemas.school import AssignmentCreate, AssignmentUpdate
from app.services.filters import contains_pattern
from app.services.pagination import page_offset
from app.services.row_folder import ASSIGNMENT_FOLDER

logger = logging.getLogger(__name__)

LIST_ASSIGNMENTS_SQL = """
    SELECT T."ID", T."Nome", T."Descricao", T."DisciplinaID",
           A."ID" AS "AlunoID", A."Nome" AS "AlunoNome"
    FROM (
        SELECT "ID", "Nome", "Descricao", "DisciplinaID" FROM "Trabalhos"
        ORDER BY "ID"
        LIMIT :limit OFFSET :offset
    ) T
    LEFT JOIN "Alunos_Trabalhos" TA ON T."ID" = TA."TrabalhoID"
    LEFT JOIN "Alunos" A ON TA."AlunoID" = A."ID"
    ORDER BY T."ID", TA."AlunoID"
"""

LIST_ASSIGNMENTS_BY_NAME_SQL = """
    SELECT T."ID", T."Nome", T."Descricao", T."DisciplinaID",
           A."ID" AS "AlunoID", A."Nome" AS "AlunoNome"
    FROM (
        SELECT "ID", "Nome", "Descricao", "DisciplinaID" FROM "Trabalhos"
        WHERE UPPER("Nome") LIKE UPPER(:pattern) ESCAPE '\\'
        ORDER BY "ID"
        LIMIT :limit OFFSET :offset
    ) T
    LEFT JOIN "Alunos_Trabalhos" TA ON T."ID" = TA."TrabalhoID"
    LEFT JOIN "Alunos" A ON TA."AlunoID" = A."ID"
    ORDER BY T."ID", TA."AlunoID"
"""

GET_ASSIGNMENT_SQL = """
    SELECT T."ID", T."Nome", T."Descricao", T."DisciplinaID",
           A."ID" AS "AlunoID", A."Nome" AS "AlunoNome"
    FROM "Trabalhos" T
    LEFT JOIN "Alunos_Trabalhos" TA ON T."ID" = TA."TrabalhoID"
    LEFT JOIN "Alunos" A ON TA."AlunoID" = A."ID"
    WHERE T."ID" = :id
    ORDER BY TA."AlunoID"
"""

INSERT_ASSIGNMENT_SQL = """
    INSERT INTO "Trabalhos" ("Nome", "Descricao", "DisciplinaID")
    VALUES (:nome, :descricao, :disciplina_id)
    RETURNING "ID"
"""

UPDATE_ASSIGNMENT_SQL = """
    UPDATE "Trabalhos"
    SET "Nome" = :nome, "Descricao" = :descricao, "DisciplinaID" = :disciplina_id
    WHERE "ID" = :id
"""

DELETE_ASSIGNMENT_SQL = """
    DELETE FROM "Trabalhos" WHERE "ID" = :id
"""


class AssignmentService:

    @staticmethod
    async def list_assignments(db: QueryExecutor, page: int, limit: int) -> List[Dict[str, Any]]:
        """Page of assignments, each with the students linked to it"""
        rows = await db.fetch_all(
            LIST_ASSIGNMENTS_SQL,
            {"limit": limit, "offset": page_offset(page, limit)}
        )
        return ASSIGNMENT_FOLDER.fold(rows)

    @staticmethod
    async def list_assignments_by_name(
        db: QueryExecutor,
        nome: str,
        page: int,
        limit: int
    ) -> List[Dict[str, Any]]:
        rows = await db.fetch_all(
            LIST_ASSIGNMENTS_BY_NAME_SQL,
            {
                "pattern": contains_pattern(nome),
                "limit": limit,
                "offset": page_offset(page, limit)
            }
        )
        return ASSIGNMENT_FOLDER.fold(rows)

    @staticmethod
    async def get_assignment(db: QueryExecutor, assignment_id: int) -> Optional[Dict[str, Any]]:
        rows = await db.fetch_all(GET_ASSIGNMENT_SQL, {"id": assignment_id})
        return ASSIGNMENT_FOLDER.fold_one(rows)

    @staticmethod
    async def create_assignment(db: QueryExecutor, data: AssignmentCreate) -> Dict[str, Any]:
        rows = await db.fetch_all(
            INSERT_ASSIGNMENT_SQL,
            {
                "nome": data.nome,
                "descricao": data.descricao,
                "disciplina_id": data.disciplina_id
            }
        )
        assignment_id = rows[0]["ID"]
        logger.info(f"Created assignment {assignment_id}")
        return {
            "id": assignment_id,
            "nome": data.nome,
            "descricao": data.descricao,
            "disciplinaId": data.disciplina_id,
            "alunos": []
        }

    @staticmethod
    async def update_assignment(
        db: QueryExecutor,
        assignment_id: int,
        data: AssignmentUpdate
    ) -> Optional[Dict[str, Any]]:
        """Overwrite an assignment's fields; None when the ID does not exist"""
        updated = await db.execute(
            UPDATE_ASSIGNMENT_SQL,
            {
                "id": assignment_id,
                "nome": data.nome,
                "descricao": data.descricao,
                "disciplina_id": data.disciplina_id
            }
        )
        if not updated:
            return None

        logger.info(f"Updated assignment {assignment_id}")
        return await AssignmentService.get_assignment(db, assignment_id)

    @staticmethod
    async def delete_assignment(db: QueryExecutor, assignment_id: int) -> bool:
        deleted = await db.execute(DELETE_ASSIGNMENT_SQL, {"id": assignment_id})
        if deleted:
            logger.info(f"Deleted assignment {assignment_id}")
        return deleted > 0
