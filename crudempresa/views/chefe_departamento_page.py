"""Form page for department heads."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from crudempresa.chefe_departamento import ChefeDepartamento, load_chefes
from crudempresa.fields import FieldKind
from crudempresa.funcionario import funcionario_ids
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError
from crudempresa.views.base import Card, TablePage, _atoi, _empty_files

CHEFE_FIELDS = [
    ("id", FieldKind.NUMBERS, "ID"),
    ("funcionario_id", FieldKind.LETTERS_NUMBERS, "ID do Funcionário"),
]

_FILES_TO_EMPTY = (
    "Departamentos.json",
    "departamentos.json",
    "chefes_departamento.json",
    "Departamentos_projetos.json",
    "projetos.json",
)


def chefe_from_form(form: Mapping[str, str]) -> ChefeDepartamento:
    """Build a department head from form text; raise ValueError on a bad id."""
    chefe_id = _atoi(form.get("id", ""), "ID do Chefe")
    return ChefeDepartamento(id=chefe_id, funcionario_id=form.get("funcionario_id", ""))


def create_chefe(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    chefe = chefe_from_form(form)
    return chefe.save(funcionario_ids(data_dir), data_dir)


def update_chefe(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    return chefe_from_form(form).update(data_dir)


def delete_chefe(form: Mapping[str, str], data_dir: str | Path = DEFAULT_DATA_DIR) -> str:
    """Delete the department head named by the form's id."""
    chefe_id = _atoi(form.get("id", ""), "ID do Chefe")
    return ChefeDepartamento(id=chefe_id).delete(data_dir)


def chefe_card(chefe: ChefeDepartamento) -> Card:
    return f"ID do Chefe: {chefe.id}", f"FuncionárioID: {chefe.funcionario_id}"


def empty_chefe_files(data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
    """Reset the data files that the department heads page clears on close."""
    _empty_files(data_dir, _FILES_TO_EMPTY)


class ChefeDepartamentoPage(TablePage):
    """Create, update, list and delete department heads."""

    def __init__(self, root: Any, main_window: Any, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        super().__init__(
            root,
            main_window,
            "Tabela de Chefes de Departamento",
            "Chefes de Departamento Existentes",
            CHEFE_FIELDS,
            data_dir,
        )
        self._add_button("Criar chefe de departamento", lambda: self._perform(create_chefe))
        self._add_button("Alterar chefe de departamento", lambda: self._perform(update_chefe))
        self._add_button("Listar Chefes de Departamentos", self._list)
        self._add_button("Deletar chefe de departamento", lambda: self._perform(delete_chefe))
        self.show()

    def _list(self) -> None:
        try:
            chefes = load_chefes(self.data_dir)
        except CrudError as exc:
            print("Erro:", exc)
            return
        self.show_list(chefe_card(chefe) for chefe in chefes)

    def _empty_files(self) -> None:
        empty_chefe_files(self.data_dir)