"""The main window: navigation bar and a tree of the mirrored TXT files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from crudempresa.storage import DEFAULT_DATA_DIR
from crudempresa.views.base import WINDOW_SIZE, _set_icon

ROOT_NODE = "CRUD Empresarial"


def load_tree_data(txt_dir: str | Path) -> dict[str, list[str]]:
    """Map the root to the .txt file names and each file name to its lines."""
    directory = Path(txt_dir)
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        print("Erro ao ler o diretório:", exc)
        return {}

    data: dict[str, list[str]] = {ROOT_NODE: []}
    for entry in entries:
        if not entry.name.endswith(".txt"):
            continue
        try:
            content = entry.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            print("Erro ao ler o arquivo:", entry.name, exc)
            continue
        data[ROOT_NODE].append(entry.name)
        data.setdefault(entry.name, []).extend(content.strip().split("\n"))
    return data


class MainWindow:
    """The application's first window."""

    def __init__(self, root: Any, data_dir: str | Path = DEFAULT_DATA_DIR) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.data_dir = Path(data_dir)

        root.title(ROOT_NODE)
        root.geometry(WINDOW_SIZE)
        _set_icon(root)

        bar = tk.Frame(root)
        bar.pack(side="top", fill="x")
        for text, opener in (
            ("Funcionários", self._open_funcionarios),
            ("Departamentos", self._open_departamentos),
            ("Chefes de Departamentos", self._open_chefes),
            ("Projetos", self._open_projetos),
        ):
            tk.Button(bar, text=text, command=opener).pack(side="left")

        self.tree = ttk.Treeview(root, show="tree")
        self.tree.pack(side="top", fill="both", expand=True)
        root.protocol("WM_DELETE_WINDOW", root.destroy)
        self.refresh_tree()

    def refresh_tree(self) -> None:
        """Rebuild the tree from the TXT files on disk."""
        self.tree.delete(*self.tree.get_children())
        data = load_tree_data(self.data_dir / "txt")
        top = self.tree.insert("", "end", text=ROOT_NODE, open=True)
        for name in data.get(ROOT_NODE, []):
            node = self.tree.insert(top, "end", text=name)
            for line in data.get(name, []):
                self.tree.insert(node, "end", text=line)

    def show(self) -> None:
        self.refresh_tree()
        self.root.deiconify()
        self.root.lift()

    def hide(self) -> None:
        self.root.withdraw()

    def _open_funcionarios(self) -> None:
        from crudempresa.views.funcionarios_page import FuncionariosPage

        self.hide()
        FuncionariosPage(self.root, self, self.data_dir)

    def _open_departamentos(self) -> None:
        from crudempresa.views.departamentos_page import DepartamentosPage

        self.hide()
        DepartamentosPage(self.root, self, self.data_dir)

    def _open_chefes(self) -> None:
        from crudempresa.views.chefe_departamento_page import ChefeDepartamentoPage

        self.hide()
        ChefeDepartamentoPage(self.root, self, self.data_dir)

    def _open_projetos(self) -> None:
        from crudempresa.views.projetos_page import ProjetosPage

        self.hide()
        ProjetosPage(self.root, self, self.data_dir)