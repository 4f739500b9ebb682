"""Form page for projects."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from crudempresa.departamento import departamento_ids
from crudempresa.fields import FieldKind
from crudempresa.funcionario import funcionario_ids
from crudempresa.projeto import Projeto, load_projetos
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError
from crudempresa.views.base import Card, TablePage, _atoi, _empty_files

PROJETO_FIELDS = [
    ("id", FieldKind.NUMBERS, "ID"),
    ("nome", FieldKind.LETTERS_NUMBERS, "Nome do Projeto"),
    ("local", FieldKind.LETTERS_NUMBERS, "Local"),
    ("departamento_id", FieldKind.NUMBERS, "ID do Departamento"),
    ("funcionarios_projetos_id", FieldKind.LETTERS_NUMBERS, "ID dos Funcionários do Projeto"),
]

_FILES_TO_EMPTY = (
    "funcionarios.json",
    "departamentos.json",
    "chefes_departamento.json",
    "funcionarios_projetos.json",
    "projetos.json",
)


def projeto_from_form(form: Mapping[str, str]) -> Projeto:
    """Build a project from form text; raise ValueError on a bad id."""
    projeto_id = _atoi(form.get("id", ""), "ID do projeto")
    departamento = _atoi(form.get("departamento_id", ""), "ID do departamento")
    return Projeto(
        id=projeto_id,
        nome=form.get("nome", ""),
        local=form.get("local", ""),
        departamento_id=departamento,
        funcionarios_projetos_id=form.get("funcionarios_projetos_id", ""),
    )


def create_projeto(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    projeto = projeto_from_form(form)
    return projeto.save(departamento_ids(data_dir), funcionario_ids(data_dir), data_dir)


def update_projeto(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    return projeto_from_form(form).update(data_dir)


def delete_projeto(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    """Delete the project named by the form's id."""
    projeto_id = _atoi(form.get("id", ""), "ID do projeto")
    projeto = Projeto(
        id=projeto_id,
        nome=form.get("nome", ""),
        local=form.get("local", ""),
        departamento_id=0,
        funcionarios_projetos_id=form.get("funcionarios_projetos_id", ""),
    )
    return projeto.delete(data_dir)


def projeto_card(projeto: Projeto) -> Card:
    body = (
        f"ID: {projeto.id}\nLocal: {projeto.local}\n"
        f"ID do Departamento: {projeto.departamento_id}\n"
        f"ID dos Funcionários do Projeto: {projeto.funcionarios_projetos_id}"
    )
    return projeto.nome, body


def empty_projeto_files(data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
    """Reset the data files that the projects page clears on close."""
    _empty_files(data_dir, _FILES_TO_EMPTY)


class ProjetosPage(TablePage):
    """Create, update, list and delete projects."""

    def __init__(self, root: Any, main_window: Any, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        super().__init__(
            root,
            main_window,
            "Tabela de Projetos",
            "Projetos Existentes",
            PROJETO_FIELDS,
            data_dir,
        )
        self._add_button("Criar projeto", lambda: self._perform(create_projeto))
        self._add_button("Alterar projetos", lambda: self._perform(update_projeto))
        self._add_button("Listar Projetos", self._list)
        self._add_button("Deletar projeto", lambda: self._perform(delete_projeto))
        self.show()

    def _list(self) -> None:
        try:
            projetos = load_projetos(self.data_dir)
        except CrudError as exc:
            print("Erro:", exc)
            return
        self.show_list(projeto_card(projeto) for projeto in projetos)

    def _empty_files(self) -> None:
        empty_projeto_files(self.data_dir)