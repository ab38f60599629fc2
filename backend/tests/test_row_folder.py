from app.services.row_folder import ASSIGNMENT_FOLDER, STUDENT_FOLDER, RowFolder


def student_row(student_id, nome, email, trabalho_id=None, trabalho_nome=None):
    return {
        "ID": student_id,
        "Nome": nome,
        "Email": email,
        "TrabalhoID": trabalho_id,
        "TrabalhoNome": trabalho_nome,
    }


def test_fold_empty_input():
    assert STUDENT_FOLDER.fold([]) == []


def test_fold_accepts_any_iterable():
    rows = (row for row in [student_row(1, "Ana", "a@x.com", 10, "HW1")])

    assert [s["id"] for s in STUDENT_FOLDER.fold(rows)] == [1]


def test_fold_students_with_and_without_assignments():
    rows = [
        student_row(1, "Ana", "a@x.com", 10, "HW1"),
        student_row(1, "Ana", "a@x.com", 11, "HW2"),
        student_row(2, "Bo", "b@x.com"),
    ]

    assert STUDENT_FOLDER.fold(rows) == [
        {
            "id": 1,
            "nome": "Ana",
            "email": "a@x.com",
            "trabalhos": [{"id": 10, "nome": "HW1"}, {"id": 11, "nome": "HW2"}],
        },
        {"id": 2, "nome": "Bo", "email": "b@x.com", "trabalhos": []},
    ]


def test_fold_keeps_first_seen_parent_order():
    rows = [
        student_row(1, "Ana", "a@x.com", 10, "HW1"),
        student_row(2, "Bo", "b@x.com", 10, "HW1"),
        student_row(1, "Ana", "a@x.com", 11, "HW2"),
    ]

    folded = STUDENT_FOLDER.fold(rows)

    assert [s["id"] for s in folded] == [1, 2]
    assert folded[0]["trabalhos"] == [{"id": 10, "nome": "HW1"}, {"id": 11, "nome": "HW2"}]


def test_fold_does_not_sort_parents():
    rows = [student_row(5, "Eva", "e@x.com"), student_row(3, "Caio", "c@x.com")]

    assert [s["id"] for s in STUDENT_FOLDER.fold(rows)] == [5, 3]


def test_fold_one_entry_per_distinct_parent():
    rows = [
        student_row(parent, f"Aluno {parent}", f"{parent}@x.com", child, f"T{child}")
        for parent in (3, 1, 2)
        for child in (7, 8, 9)
    ]

    folded = STUDENT_FOLDER.fold(rows)

    assert len(folded) == 3
    assert {s["id"] for s in folded} == {1, 2, 3}
    for student in folded:
        assert [t["id"] for t in student["trabalhos"]] == [7, 8, 9]


def test_fold_keeps_duplicate_children():
    rows = [
        student_row(1, "Ana", "a@x.com", 10, "HW1"),
        student_row(1, "Ana", "a@x.com", 10, "HW1"),
    ]

    assert STUDENT_FOLDER.fold(rows)[0]["trabalhos"] == [
        {"id": 10, "nome": "HW1"},
        {"id": 10, "nome": "HW1"},
    ]


def test_fold_null_child_rows_add_nothing():
    rows = [
        student_row(1, "Ana", "a@x.com"),
        student_row(1, "Ana", "a@x.com", 10, "HW1"),
        student_row(1, "Ana", "a@x.com"),
    ]

    assert STUDENT_FOLDER.fold(rows)[0]["trabalhos"] == [{"id": 10, "nome": "HW1"}]


def test_fold_child_id_zero_is_not_null():
    rows = [student_row(1, "Ana", "a@x.com", 0, "Intro")]

    assert STUDENT_FOLDER.fold(rows)[0]["trabalhos"] == [{"id": 0, "nome": "Intro"}]


def test_fold_skips_rows_without_parent_id():
    rows = [student_row(None, None, None, 10, "HW1"), student_row(2, "Bo", "b@x.com")]

    assert [s["id"] for s in STUDENT_FOLDER.fold(rows)] == [2]


def test_fold_child_summaries_only_carry_id_and_name():
    rows = [student_row(1, "Ana", "a@x.com", 10, "HW1")]

    (child,) = STUDENT_FOLDER.fold(rows)[0]["trabalhos"]

    assert set(child) == {"id", "nome"}


def test_fold_returns_fresh_records_each_call():
    rows = [student_row(1, "Ana", "a@x.com")]

    first = STUDENT_FOLDER.fold(rows)
    first[0]["trabalhos"].append({"id": 99, "nome": "x"})

    assert STUDENT_FOLDER.fold(rows)[0]["trabalhos"] == []


def test_fold_one_empty_is_not_found():
    assert STUDENT_FOLDER.fold_one([]) is None


def test_fold_one_found_without_children():
    student = STUDENT_FOLDER.fold_one([student_row(2, "Bo", "b@x.com")])

    assert student is not None
    assert student["trabalhos"] == []


def test_assignment_folder():
    rows = [
        {"ID": 10, "Nome": "HW1", "Descricao": "Lista 1", "DisciplinaID": 3,
         "AlunoID": 1, "AlunoNome": "Ana"},
        {"ID": 10, "Nome": "HW1", "Descricao": "Lista 1", "DisciplinaID": 3,
         "AlunoID": 2, "AlunoNome": "Bo"},
        {"ID": 11, "Nome": "HW2", "Descricao": "Lista 2", "DisciplinaID": 3,
         "AlunoID": None, "AlunoNome": None},
    ]

    assert ASSIGNMENT_FOLDER.fold(rows) == [
        {
            "id": 10,
            "nome": "HW1",
            "descricao": "Lista 1",
            "disciplinaId": 3,
            "alunos": [{"id": 1, "nome": "Ana"}, {"id": 2, "nome": "Bo"}],
        },
        {"id": 11, "nome": "HW2", "descricao": "Lista 2", "disciplinaId": 3, "alunos": []},
    ]


def test_custom_folder():
    folder = RowFolder(
        parent_key="pid",
        parent_fields={"id": "pid"},
        child_key="cid",
        child_name="cname",
        children_field="itens",
    )

    assert folder.fold([{"pid": "a", "cid": "x", "cname": "X"}]) == [
        {"id": "a", "itens": [{"id": "x", "nome": "X"}]}
    ]
