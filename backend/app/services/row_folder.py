"""
Folding of flat left-join results into nested parent records.

A query such as ``Alunos LEFT JOIN Alunos_Trabalhos LEFT JOIN Trabalhos``
yields one row per student x assignment pair. ``RowFolder`` collapses those
rows into one record per parent, each carrying the list of related child
summaries in the order the rows arrived.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional


class RowFolder:
    """Describes how to read one join direction out of a flat row.

    parent_key      column holding the parent id
    parent_fields   output field name -> column, scalar parent fields
    child_key       column holding the related child id (null when unmatched)
    child_name      column holding the related child display name
    children_field  output field name for the child summary list
    """

    def __init__(
        self,
        parent_key: str,
        parent_fields: Dict[str, str],
        child_key: str,
        child_name: str,
        children_field: str,
    ):
        self.parent_key = parent_key
        self.parent_fields = parent_fields
        self.child_key = child_key
        self.child_name = child_name
        self.children_field = children_field

    def _new_parent(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        record = {field: row[column] for field, column in self.parent_fields.items()}
        record[self.children_field] = []
        return record

    def fold(self, rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """Group rows by parent id, keeping first-seen parent order.

        Rows without a parent id are skipped. A row whose child id is null
        adds no child, so unmatched parents end up with an empty list.
        """
        parents: Dict[Any, Dict[str, Any]] = {}

        for row in rows:
            parent_id = row[self.parent_key]
            if parent_id is None:
                continue

            record = parents.get(parent_id)
            if record is None:
                record = self._new_parent(row)
                parents[parent_id] = record

            child_id = row[self.child_key]
            if child_id is not None:
                record[self.children_field].append({
                    "id": child_id,
                    "nome": row[self.child_name],
                })

        return list(parents.values())

    def fold_one(self, rows: Iterable[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Fold rows of a single-id lookup; None when nothing matched"""
        folded = self.fold(rows)
        if not folded:
            return None
        return folded[0]


# Student -> assignments
STUDENT_FOLDER = RowFolder(
    parent_key="ID",
    parent_fields={"id": "ID", "nome": "Nome", "email": "Email"},
    child_key="TrabalhoID",
    child_name="TrabalhoNome",
    children_field="trabalhos",
)

# Assignment -> students
ASSIGNMENT_FOLDER = RowFolder(
    parent_key="ID",
    parent_fields={
        "id": "ID",
        "nome": "Nome",
        "descricao": "Descricao",
        "disciplinaId": "DisciplinaID",
    },
    child_key="AlunoID",
    child_name="AlunoNome",
    children_field="alunos",
)
