"""Application entry point: demo data seeding and the main window."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path

from crudempresa.chefe_departamento import ChefeDepartamento
from crudempresa.departamento import Departamento, departamento_ids
from crudempresa.funcionario import Funcionario, funcionario_ids
from crudempresa.funcionario_projeto import FuncionarioProjeto
from crudempresa.projeto import Projeto
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError


def seed_demo_data(data_dir: str | Path = DEFAULT_DATA_DIR) -> list[str]:
    """Run the demo sequence of creates, updates and deletes.

    Returns the message of every step, successful or not, in order.
    """
    messages: list[str] = []

    def attempt(action: Callable[[], str]) -> None:
        try:
            messages.append(action())
        except CrudError as exc:
            messages.append(str(exc))

    alice = Funcionario("A", "Alice", "123.456.789-00", "12345-678", "5000.00", "1990-01-01", "Feminino", 1)
    bob = Funcionario("B", "Bob", "987.654.321-00", "87654-321", "6000.00", "1985-05-05", "Masculino", 2)
    attempt(lambda: alice.save(departamento_ids(data_dir), data_dir))
    attempt(lambda: bob.save(departamento_ids(data_dir), data_dir))

    vendas = Departamento(1, "Vendas", 4)
    marketing = Departamento(2, "Marketing", 5)
    pesquisa = Departamento(3, "P&D", 6)
    for departamento in (vendas, marketing, pesquisa):
        attempt(lambda d=departamento: d.save(data_dir))
    attempt(lambda: Departamento(2, "Marketing Digital", 5).update(data_dir))
    attempt(lambda: pesquisa.delete(data_dir))

    chefes = [ChefeDepartamento(1, "A"), ChefeDepartamento(2, "B"), ChefeDepartamento(3, "C")]
    for chefe in chefes:
        attempt(lambda c=chefe: c.save(funcionario_ids(data_dir), data_dir))
    attempt(lambda: ChefeDepartamento(2, "D").update(data_dir))
    attempt(lambda: chefes[2].delete(data_dir))

    relacoes = [
        FuncionarioProjeto("D", "A", 201),
        FuncionarioProjeto("E", "B", 202),
        FuncionarioProjeto("F", "C", 203),
    ]
    for relacao in relacoes:
        attempt(lambda r=relacao: r.save(data_dir))
    attempt(lambda: FuncionarioProjeto("G", "D", 204).update(data_dir))
    attempt(lambda: relacoes[2].delete(data_dir))

    projetos = [
        Projeto(1, "Projeto Alpha", "São Paulo", 10, "D"),
        Projeto(2, "Projeto Beta", "Rio de Janeiro", 20, "E"),
        Projeto(3, "Projeto Gamma", "Belo Horizonte", 30, "F"),
    ]
    for projeto in projetos:
        attempt(lambda p=projeto: p.save(departamento_ids(data_dir), funcionario_ids(data_dir), data_dir))
    attempt(lambda: Projeto(2, "Projeto Beta Atualizado", "Curitiba", 25, "G").update(data_dir))
    attempt(lambda: projetos[2].delete(data_dir))

    return messages


def run_gui(data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
    """Open the main window and run the event loop until it is closed."""
    import tkinter as tk

    from crudempresa.views.main_page import MainWindow

    root = tk.Tk()
    MainWindow(root, data_dir)
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="crudempresa", description="CRUD Empresarial")
    parser.add_argument("--data-dir", default=str(DEFAULT_DATA_DIR), help="directory holding the data files")
    parser.add_argument("--no-gui", action="store_true", help="only seed the demo data")
    args = parser.parse_args(argv)

    for message in seed_demo_data(args.data_dir):
        print(message)
    if not args.no_gui:
        run_gui(args.data_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())