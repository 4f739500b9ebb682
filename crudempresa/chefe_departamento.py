"""Department heads and their storage."""

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
    MissingFieldsError,
    NotFoundError,
)


@dataclass
class ChefeDepartamento:
    """A department head, pointing at the employee who holds the post."""

    id: int
    funcionario_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "funcionario_id": self.funcionario_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChefeDepartamento":
        return cls(id=data.get("id", 0), funcionario_id=data.get("funcionario_id", ""))

    def txt_line(self) -> str:
        return f"ID: {self.id}, FuncionarioID: {self.funcionario_id}"

    def save(
        self,
        funcionario_ids: Iterable[str],
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ) -> str:
        """Store a new department head.

        When other heads exist, both fields must be filled and the id must
        be free. The employee must be one of ``funcionario_ids``.
        """
        table = chefe_table(data_dir)
        chefes = table.load()
        if chefes and (self.id == 0 or not self.funcionario_id):
            raise MissingFieldsError("Erro: todos os campos devem ser preenchidos. Ação não realizada.")
        if any(existing.id == self.id for existing in chefes):
            raise DuplicateIdError(
                f"Erro: já existe um chefe de departamento com o ID {self.id}. Ação não realizada."
            )
        if self.funcionario_id not in set(funcionario_ids):
            raise InvalidReferenceError(
                f"Erro: FuncionarioID {self.funcionario_id} não encontrado. Ação não realizada."
            )
        chefes.append(self)
        table.save(chefes)
        return f"Chefe de departamento com ID {self.id} salvo com sucesso."

    def update(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Replace the stored department head with the same id."""
        try:
            chefe_table(data_dir).update(self)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: chefe de departamento com ID {self.id} não encontrado para atualização. "
                "Ação não realizada."
            ) from None
        return f"Chefe de departamento com ID {self.id} atualizado com sucesso."

    def delete(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Remove the stored department head with this id."""
        try:
            chefe_table(data_dir).delete(self.id)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: chefe de departamento com ID {self.id} não encontrado para exclusão. "
                "Ação não realizada."
            ) from None
        return f"Chefe de departamento com ID {self.id} deletado com sucesso."


def chefe_table(data_dir: str | Path = DEFAULT_DATA_DIR) -> JsonTable[ChefeDepartamento]:
    return JsonTable("chefes_departamento", ChefeDepartamento.from_dict, data_dir)


def load_chefes(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[ChefeDepartamento]:
    return chefe_table(data_dir).load()


def list_chefes(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[ChefeDepartamento]:
    """Print every department head and return them; on a load error print it and return []."""
    try:
        chefes = load_chefes(data_dir)
    except CrudError as exc:
        print(f"Erro ao carregar chefes de departamento: {exc}")
        return []
    print("Lista de chefes de departamento:")
    for chefe in chefes:
        print(chefe.txt_line())
    return list(chefes)