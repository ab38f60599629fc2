from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship

from app.core.database import Base


# Join table, never loaded as an object of its own
alunos_trabalhos = Table(
    "Alunos_Trabalhos",
    Base.metadata,
    Column("AlunoID", Integer, ForeignKey("Alunos.ID"), primary_key=True),
    Column("TrabalhoID", Integer, ForeignKey("Trabalhos.ID"), primary_key=True),
)


class Aluno(Base):
    __tablename__ = "Alunos"

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    nome = Column("Nome", String(255), nullable=False)
    email = Column("Email", String(255), nullable=False)

    # Relationships
    trabalhos = relationship("Trabalho", secondary=alunos_trabalhos, back_populates="alunos")


class Trabalho(Base):
    __tablename__ = "Trabalhos"

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    nome = Column("Nome", String(255), nullable=False)
    descricao = Column("Descricao", Text, nullable=True)
    # Discipline rows live outside this service, so no FK constraint here
    disciplina_id = Column("DisciplinaID", Integer, nullable=True)

    # Relationships
    alunos = relationship("Aluno", secondary=alunos_trabalhos, back_populates="trabalhos")
