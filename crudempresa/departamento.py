"""Departments and their storage."""

from __future__ import annotations

import logging
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

logger = logging.getLogger(__name__)


@dataclass
class Departamento:
    """A department, optionally led by a department head."""

    id: int
    nome: str = ""
    chefe_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "nome": self.nome, "chefe_id": self.chefe_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Departamento":
        return cls(
            id=data.get("id", 0),
            nome=data.get("nome", ""),
            chefe_id=data.get("chefe_id", 0),
        )

    def txt_line(self) -> str:
        return f"ID: {self.id}, Nome: {self.nome}, ChefeID: {self.chefe_id}"

    def save(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Store a new department; its id must be free."""
        try:
            departamento_table(data_dir).insert(self)
        except DuplicateIdError:
            raise DuplicateIdError(
                f"Erro: já existe um departamento com o ID {self.id}. Ação não realizada."
            ) from None
        return f"Departamento com ID {self.id} salvo com sucesso."

    def update(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Replace the stored department with the same id."""
        try:
            departamento_table(data_dir).update(self)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: departamento com ID {self.id} não encontrado para atualização. Ação não realizada."
            ) from None
        return f"Departamento com ID {self.id} atualizado com sucesso."

    def delete(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Remove the stored department with this id."""
        try:
            departamento_table(data_dir).delete(self.id)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: departamento com ID {self.id} não encontrado para exclusão. Ação não realizada."
            ) from None
        return f"Departamento com ID {self.id} deletado com sucesso."


def departamento_table(data_dir: str | Path = DEFAULT_DATA_DIR) -> JsonTable[Departamento]:
    return JsonTable("departamentos", Departamento.from_dict, data_dir)


def load_departamentos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Departamento]:
    return departamento_table(data_dir).load()


def list_departamentos(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Departamento]:
    """Print every department and return them; on a load error print it and return []."""
    try:
        departamentos = load_departamentos(data_dir)
    except CrudError as exc:
        print(exc)
        return []
    print("Lista de funcionários:")
    for departamento in departamentos:
        print(departamento.txt_line())
    return list(departamentos)


def departamento_ids(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[int]:
    """Return the ids of all departments, or [] if they cannot be loaded."""
    try:
        return departamento_table(data_dir).ids()
    except CrudError as exc:
        logger.error("Erro ao carregar departamentos: %s", exc)
        return []