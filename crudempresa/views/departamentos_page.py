"""Form page for departments."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from crudempresa.departamento import Departamento, load_departamentos
from crudempresa.fields import FieldKind
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError
from crudempresa.views.base import Card, TablePage, _atoi, _empty_files

DEPARTAMENTO_FIELDS = [
    ("id", FieldKind.NUMBERS, "ID"),
    ("nome", FieldKind.LETTERS_NUMBERS, "Nome do Departamento"),
    ("chefe_id", FieldKind.NUMBERS, "ID do Chefe"),
]

_FILES_TO_EMPTY = (
    "Departamentos.json",
    "departamentos.json",
    "chefes_departamento.json",
    "Departamentos_projetos.json",
    "projetos.json",
)


def departamento_from_form(form: Mapping[str, str]) -> Departamento:
    """Build a department from form text; raise ValueError on a bad id."""
    chefe_id = _atoi(form.get("chefe_id", ""), "ID do Chefe")
    departamento_id = _atoi(form.get("id", ""), "ID do Departamento")
    return Departamento(id=departamento_id, nome=form.get("nome", ""), chefe_id=chefe_id)


def create_departamento(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    return departamento_from_form(form).save(data_dir)


def update_departamento(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    return departamento_from_form(form).update(data_dir)


def delete_departamento(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    """Delete the department named by the form's id."""
    departamento_id = _atoi(form.get("id", ""), "ID do Departamento")
    return Departamento(id=departamento_id, nome=form.get("nome", ""), chefe_id=0).delete(data_dir)


def departamento_card(departamento: Departamento) -> Card:
    return departamento.nome, f"ID: {departamento.id}\nDepartamentoID: {departamento.chefe_id}"


def empty_departamento_files(data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
    """Reset the data files that the departments page clears on close."""
    _empty_files(data_dir, _FILES_TO_EMPTY)


class DepartamentosPage(TablePage):
    """Create, update, list and delete departments."""

    def __init__(self, root: Any, main_window: Any, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        super().__init__(
            root,
            main_window,
            "Tabela de Departamentos",
            "Departamentos Existentes",
            DEPARTAMENTO_FIELDS,
            data_dir,
        )
        self._add_button("Criar departamento", lambda: self._perform(create_departamento))
        self._add_button("Alterar departamento", lambda: self._perform(update_departamento))
        self._add_button("Listar Departamentos", self._list)
        self._add_button("Deletar departamento", lambda: self._perform(delete_departamento))
        self.show()

    def _list(self) -> None:
        try:
            departamentos = load_departamentos(self.data_dir)
        except CrudError as exc:
            print("Erro:", exc)
            return
        self.show_list(departamento_card(departamento) for departamento in departamentos)

    def _empty_files(self) -> None:
        empty_departamento_files(self.data_dir)