"""Form page for employees."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from crudempresa.departamento import departamento_ids
from crudempresa.fields import FieldKind
from crudempresa.funcionario import Funcionario, load_funcionarios
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError
from crudempresa.views.base import Card, TablePage, _atoi, _empty_files

FUNCIONARIO_FIELDS = [
    ("id", FieldKind.LETTERS_NUMBERS, "ID"),
    ("nome", FieldKind.LETTERS_NUMBERS, "Nome"),
    ("cpf", FieldKind.NUMBERS, "CPF"),
    ("cep", FieldKind.NUMBERS, "CEP"),
    ("salario", FieldKind.NUMBERS, "Salário"),
    ("data_nascimento", FieldKind.DATE, "Data de Nascimento"),
    ("sexo", FieldKind.LETTERS, "Sexo"),
    ("departamento_id", FieldKind.NUMBERS, "ID do Departamento"),
]

_FILES_TO_EMPTY = (
    "funcionarios.json",
    "departamentos.json",
    "chefes_departamento.json",
    "funcionarios_projetos.json",
    "projetos.json",
)


def funcionario_from_form(form: Mapping[str, str]) -> Funcionario:
    """Build an employee from form text; raise ValueError on a bad department id."""
    departamento = _atoi(form.get("departamento_id", ""), "ID do departamento")
    return Funcionario(
        id=form.get("id", ""),
        nome=form.get("nome", ""),
        cpf=form.get("cpf", ""),
        cep=form.get("cep", ""),
        salario=form.get("salario", ""),
        data_nascimento=form.get("data_nascimento", ""),
        sexo=form.get("sexo", ""),
        departamento_id=departamento,
    )


def create_funcionario(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    funcionario = funcionario_from_form(form)
    return funcionario.save(departamento_ids(data_dir), data_dir)


def update_funcionario(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    return funcionario_from_form(form).update(data_dir)


def delete_funcionario(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    """Delete the employee named by the form's id; an empty id raises ValueError."""
    funcionario_id = form.get("id", "")
    if not funcionario_id:
        raise ValueError("Erro: ID do funcionário não pode ser vazio.")
    funcionario = Funcionario(
        id=funcionario_id,
        nome=form.get("nome", ""),
        cpf=form.get("cpf", ""),
        cep=form.get("cep", ""),
        salario=form.get("salario", ""),
        data_nascimento=form.get("data_nascimento", ""),
        sexo=form.get("sexo", ""),
        departamento_id=0,
    )
    return funcionario.delete(data_dir)


def funcionario_card(funcionario: Funcionario) -> Card:
    body = (
        f"ID: {funcionario.id}\nDepartamento: {funcionario.departamento_id}\n"
        f"CPF: {funcionario.cpf}\nCEP: {funcionario.cep}\nSalário: {funcionario.salario}\n"
        f"Nascimento: {funcionario.data_nascimento}\nSexo: {funcionario.sexo}"
    )
    return funcionario.nome, body


def empty_funcionario_files(data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
    """Reset the data files that the employees page clears on close."""
    _empty_files(data_dir, _FILES_TO_EMPTY)


class FuncionariosPage(TablePage):
    """Create, update, list and delete employees."""

    def __init__(self, root: Any, main_window: Any, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        super().__init__(
            root,
            main_window,
            "Tabela de Funcionários",
            "Funcionários Existentes",
            FUNCIONARIO_FIELDS,
            data_dir,
        )
        self._add_button("Criar funcionário", lambda: self._perform(create_funcionario))
        self._add_button("Alterar funcionários", lambda: self._perform(update_funcionario))
        self._add_button("Listar Funcionários", self._list)
        self._add_button("Deletar funcionário", self._delete)
        self.show()

    def _list(self) -> None:
        try:
            funcionarios = load_funcionarios(self.data_dir)
        except CrudError as exc:
            print("Erro:", exc)
            return
        self.show_list(funcionario_card(funcionario) for funcionario in funcionarios)

    def _delete(self) -> None:
        try:
            message = delete_funcionario(self.form(), self.data_dir)
        except ValueError as exc:
            self.result.set(str(exc))
            return
        except CrudError as exc:
            message = str(exc)
        self.set_result(message)
        self.clear_fields()

    def _empty_files(self) -> None:
        empty_funcionario_files(self.data_dir)