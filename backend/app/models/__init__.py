from .school import Aluno, Trabalho, alunos_trabalhos

__all__ = ["Aluno", "Trabalho", "alunos_trabalhos"]
