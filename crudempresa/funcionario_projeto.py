"""Employee-to-project assignments and their storage."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from crudempresa.storage import (
    DEFAULT_DATA_DIR,
    CrudError,
    DuplicateIdError,
    JsonTable,
    NotFoundError,
)


@dataclass
class FuncionarioProjeto:
    """Links one employee to one project."""

    id: str
    funcionario_id: str = ""
    projeto_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "funcionario_id": self.funcionario_id, "projeto_id": self.projeto_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FuncionarioProjeto":
        return cls(
            id=data.get("id", ""),
            funcionario_id=data.get("funcionario_id", ""),
            projeto_id=data.get("projeto_id", 0),
        )

    def txt_line(self) -> str:
        return f"ID: {self.id}, FuncionarioID: {self.funcionario_id}, ProjetoID: {self.projeto_id}"

    def save(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Store a new assignment; its id must be free."""
        try:
            funcionario_projeto_table(data_dir).insert(self)
        except DuplicateIdError:
            raise DuplicateIdError(
                f"Erro: já existe uma relação com o ID {self.id}. Ação não realizada."
            ) from None
        return f"Relação funcionário-projeto com ID {self.id} salva com sucesso."

    def update(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Replace the stored assignment with the same id."""
        try:
            funcionario_projeto_table(data_dir).update(self)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: relação funcionário-projeto com ID {self.id} não encontrada para atualização. "
                "Ação não realizada."
            ) from None
        return f"Relação funcionário-projeto com ID {self.id} atualizada com sucesso."

    def delete(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Remove the stored assignment with this id."""
        try:
            funcionario_projeto_table(data_dir).delete(self.id)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: relação funcionário-projeto com ID {self.id} não encontrada para exclusão. "
                "Ação não realizada."
            ) from None
        return f"Relação funcionário-projeto com ID {self.id} deletada com sucesso."


def funcionario_projeto_table(
    data_dir: str | Path = DEFAULT_DATA_DIR,
) -> JsonTable[FuncionarioProjeto]:
    return JsonTable("funcionarios_projetos", FuncionarioProjeto.from_dict, data_dir)


def load_funcionarios_projetos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[FuncionarioProjeto]:
    return funcionario_projeto_table(data_dir).load()


def list_funcionarios_projetos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[FuncionarioProjeto]:
    """Print every assignment and return them; on a load error print it and return []."""
    try:
        relacoes = load_funcionarios_projetos(data_dir)
    except CrudError as exc:
        print(f"Erro ao carregar relações funcionário-projeto: {exc}")
        return []
    print("Lista de relações funcionário-projeto:")
    for relacao in relacoes:
        print(relacao.txt_line())
    return list(relacoes)