"""Projects and their storage."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from crudempresa.storage import (
    DEFAULT_DATA_DIR,
    CrudError,
    DuplicateIdError,
    InvalidReferenceError,
    JsonTable,
    NotFoundError,
)


@dataclass
class Projeto:
    """A project run by a department."""

    id: int
    nome: str = ""
    local: str = ""
    departamento_id: int = 0
    funcionarios_projetos_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nome": self.nome,
            "local": self.local,
            "departamento_id": self.departamento_id,
            "funcionarios_projetos_id": self.funcionarios_projetos_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Projeto":
        return cls(
            id=data.get("id", 0),
            nome=data.get("nome", ""),
            local=data.get("local", ""),
            departamento_id=data.get("departamento_id", 0),
            funcionarios_projetos_id=data.get("funcionarios_projetos_id", ""),
        )

    def txt_line(self) -> str:
        return (
            f"ID: {self.id}, Nome: {self.nome}, Local: {self.local}, "
            f"DepartamentoID: {self.departamento_id}, "
            f"FuncionariosProjetosID: {self.funcionarios_projetos_id}"
        )

    def save(
        self,
        departamento_ids: Iterable[int],
        funcionario_ids: Iterable[str],
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ) -> str:
        """Store a new project.

        The id must be free, the department must be one of
        ``departamento_ids`` and the linked id one of ``funcionario_ids``.
        """
        table = projeto_table(data_dir)
        projetos = table.load()
        if any(existing.id == self.id for existing in projetos):
            raise DuplicateIdError(f"Erro: já existe um projeto com o ID {self.id}. Ação não realizada.")
        if self.departamento_id not in set(departamento_ids):
            raise InvalidReferenceError(
                f"Erro: DepartamentoID {self.departamento_id} não encontrado. Ação não realizada."
            )
        if self.funcionarios_projetos_id not in set(funcionario_ids):
            raise InvalidReferenceError(
                f"Erro: FuncionarioID {self.funcionarios_projetos_id} não encontrado. Ação não realizada."
            )
        projetos.append(self)
        table.save(projetos)
        return f"Projeto com ID {self.id} salvo com sucesso."

    def update(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Replace the stored project with the same id."""
        try:
            projeto_table(data_dir).update(self)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: projeto com ID {self.id} não encontrado para atualização. Ação não realizada."
            ) from None
        return f"Projeto com ID {self.id} atualizado com sucesso."

    def delete(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Remove the stored project with this id."""
        try:
            projeto_table(data_dir).delete(self.id)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: projeto com ID {self.id} não encontrado para exclusão. Ação não realizada."
            ) from None
        return f"Projeto com ID {self.id} deletado com sucesso."


def projeto_table(data_dir: str | Path = DEFAULT_DATA_DIR) -> JsonTable[Projeto]:
    return JsonTable("projetos", Projeto.from_dict, data_dir)


def load_projetos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Projeto]:
    return projeto_table(data_dir).load()


def list_projetos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Projeto]:
    """Print every project and return them; on a load error print it and return []."""
    try:
        projetos = load_projetos(data_dir)
    except CrudError as exc:
        print(f"Erro ao carregar projetos: {exc}")
        return []
    print("Lista de projetos:")
    for projeto in projetos:
        print(projeto.txt_line())
    return list(projetos)