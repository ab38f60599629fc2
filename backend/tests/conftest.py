import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app import models  # noqa: F401  Import to register models
from app.core.database import Base, QueryExecutor, get_db
from main import app


@pytest.fixture
def engine(tmp_path):
    """SQLite database file with the Alunos/Trabalhos schema and FKs enforced"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'escola.db'}",
        poolclass=NullPool
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async def create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def run_db(session_factory):
    """Run ``fn(executor)`` in its own committed session and return its result"""
    def run(fn):
        async def go():
            async with session_factory() as session:
                result = await fn(QueryExecutor(session))
                await session.commit()
                return result
        return asyncio.run(go())
    return run


@pytest.fixture
def seed(run_db):
    """Insert students, assignments and links straight into the tables"""
    def insert(students=(), assignments=(), links=()):
        async def go(db):
            for student_id, nome, email in students:
                await db.execute(
                    'INSERT INTO "Alunos" ("ID", "Nome", "Email") VALUES (:id, :nome, :email)',
                    {"id": student_id, "nome": nome, "email": email}
                )
            for assignment_id, nome, descricao, disciplina_id in assignments:
                await db.execute(
                    'INSERT INTO "Trabalhos" ("ID", "Nome", "Descricao", "DisciplinaID") '
                    'VALUES (:id, :nome, :descricao, :disciplina_id)',
                    {
                        "id": assignment_id,
                        "nome": nome,
                        "descricao": descricao,
                        "disciplina_id": disciplina_id
                    }
                )
            for student_id, assignment_id in links:
                await db.execute(
                    'INSERT INTO "Alunos_Trabalhos" ("AlunoID", "TrabalhoID") VALUES (:a, :t)',
                    {"a": student_id, "t": assignment_id}
                )
        run_db(go)
    return insert


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
