"""Employees and their storage."""

from __future__ import annotations

import logging
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

logger = logging.getLogger(__name__)


@dataclass
class Funcionario:
    """An employee assigned to a department."""

    id: str
    nome: str = ""
    cpf: str = ""
    cep: str = ""
    salario: str = ""
    data_nascimento: str = ""
    sexo: str = ""
    departamento_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "nome": self.nome,
            "cpf": self.cpf,
            "cep": self.cep,
            "salario": self.salario,
            "data_nascimento": self.data_nascimento,
            "sexo": self.sexo,
            "departamento_id": self.departamento_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Funcionario":
        return cls(
            id=data.get("id", ""),
            nome=data.get("nome", ""),
            cpf=data.get("cpf", ""),
            cep=data.get("cep", ""),
            salario=data.get("salario", ""),
            data_nascimento=data.get("data_nascimento", ""),
            sexo=data.get("sexo", ""),
            departamento_id=data.get("departamento_id", 0),
        )

    def txt_line(self) -> str:
        return (
            f"ID: {self.id}, Nome: {self.nome}, CPF: {self.cpf}, CEP: {self.cep}, "
            f"Salário: {self.salario}, Data de Nascimento: {self.data_nascimento}, "
            f"Sexo: {self.sexo}, DepartamentoID: {self.departamento_id}"
        )

    def _has_required_fields(self) -> bool:
        return all((self.nome, self.cpf, self.cep, self.salario, self.data_nascimento, self.sexo))

    def save(
        self,
        departamento_ids: Iterable[int],
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ) -> str:
        """Store a new employee.

        When other employees exist, all fields must be filled and neither
        the id nor the CPF may be taken. The department must be one of
        ``departamento_ids``.
        """
        table = funcionario_table(data_dir)
        funcionarios = table.load()
        if funcionarios and not self._has_required_fields():
            raise MissingFieldsError("Erro: todos os campos devem ser preenchidos. Ação não realizada.")
        for existing in funcionarios:
            if existing.id == self.id:
                raise DuplicateIdError(
                    f"Erro: já existe um funcionário com o ID {self.id}. Ação não realizada."
                )
            if existing.cpf == self.cpf:
                raise DuplicateIdError(
                    f"Erro: já existe um funcionário com o CPF {self.cpf}. Ação não realizada."
                )
        if self.departamento_id not in set(departamento_ids):
            raise InvalidReferenceError(f"DepartamentoID {self.departamento_id} não encontrado")
        funcionarios.append(self)
        table.save(funcionarios)
        return f"Funcionário com ID {self.id} salvo com sucesso."

    def update(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Replace the stored employee with the same id."""
        try:
            funcionario_table(data_dir).update(self)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: funcionário com ID {self.id} não encontrado para atualização. Ação não realizada."
            ) from None
        return f"Funcionário com ID {self.id} atualizado com sucesso."

    def delete(self, data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
        """Remove the stored employee with this id."""
        try:
            funcionario_table(data_dir).delete(self.id)
        except NotFoundError:
            raise NotFoundError(
                f"Erro: funcionário com ID {self.id} não encontrado para exclusão. Ação não realizada."
            ) from None
        return f"Funcionário com ID {self.id} deletado com sucesso."


def funcionario_table(data_dir: str | Path = DEFAULT_DATA_DIR) -> JsonTable[Funcionario]:
    return JsonTable("funcionarios", Funcionario.from_dict, data_dir)


def load_funcionarios(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Funcionario]:
    return funcionario_table(data_dir).load()


def list_funcionarios(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[Funcionario]:
    """Print every employee and return them; on a load error print it and return []."""
    try:
        funcionarios = load_funcionarios(data_dir)
    except CrudError as exc:
        print(exc)
        return []
    print("Lista de funcionários:")
    for funcionario in funcionarios:
        print(funcionario.txt_line())
    return list(funcionarios)


def funcionario_ids(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[str]:
    """Return the ids of all employees, or [] if they cannot be loaded."""
    try:
        return funcionario_table(data_dir).ids()
    except CrudError as exc:
        logger.error("Erro ao carregar funcionarios: %s", exc)
        return []