"""Shared window layout and helpers for the table pages."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from crudempresa.fields import FieldKind, placeholder, validate_field
from crudempresa.storage import DEFAULT_DATA_DIR, CrudError, empty_json_file

logger = logging.getLogger(__name__)

ICON_PATH = Path("assets/imgs/CRUD_IMAGE.png")
WINDOW_SIZE = "800x600"

Field = tuple[str, FieldKind, str]
Card = tuple[str, str]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _Showable(Protocol):
    def show(self) -> None: ...


def result_text(message: str) -> str:
    """Return the text shown in a page's result label."""
    return f"Resultado: {message}"


def _atoi(text: str, label: str) -> int:
    """Parse a plain decimal integer, with no surrounding spaces allowed."""
    if _INTEGER.fullmatch(text) is None:
        raise ValueError(f"{label}: valor inteiro inválido {text!r}")
    return int(text)


def _empty_files(data_dir: str | Path, names: Iterable[str]) -> None:
    for name in names:
        try:
            empty_json_file(Path(data_dir) / name)
        except OSError as exc:
            logger.warning("Erro ao esvaziar %s: %s", name, exc)


def _set_icon(window: Any) -> None:
    import tkinter as tk

    try:
        icon = tk.PhotoImage(master=window, file=str(ICON_PATH))
        window.iconphoto(False, icon)
    except tk.TclError as exc:
        print("Erro ao carregar o ícone:", exc)


class TablePage:
    """A form window for one table plus a window listing its records."""

    def __init__(
        self,
        root: Any,
        main_window: _Showable,
        title: str,
        list_title: str,
        fields: Sequence[Field],
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ) -> None:
        import tkinter as tk

        self.root = root
        self.main_window = main_window
        self.fields = list(fields)
        self.data_dir = Path(data_dir)

        self.window = tk.Toplevel(root)
        self.window.title(title)
        self.window.geometry(WINDOW_SIZE)

        self.list_window = tk.Toplevel(root)
        self.list_window.title(list_title)
        self.list_window.geometry(WINDOW_SIZE)
        self.list_window.withdraw()
        self.list_window.protocol("WM_DELETE_WINDOW", self.list_window.withdraw)

        _set_icon(self.window)
        _set_icon(self.list_window)

        form_frame = tk.Frame(self.window)
        form_frame.pack(side="top", fill="x", padx=8, pady=8)
        form_frame.columnconfigure(1, weight=1)
        self._values: dict[str, tk.StringVar] = {}
        for row, (key, kind, label) in enumerate(self.fields):
            value = tk.StringVar(master=self.window)
            error = tk.StringVar(master=self.window)
            tk.Label(form_frame, text=placeholder(kind, label)).grid(row=row, column=0, sticky="w")
            tk.Entry(form_frame, textvariable=value).grid(row=row, column=1, sticky="ew")
            tk.Label(form_frame, textvariable=error, fg="red").grid(row=row, column=2, sticky="w")
            value.trace_add("write", self._validator(value, error, kind, label))
            self._values[key] = value

        tk.Button(self.window, text="Voltar", command=self.go_back).pack(side="bottom", fill="x")

        body = tk.Frame(self.window)
        body.pack(side="top", fill="both", expand=True, padx=8)
        self._buttons = tk.Frame(body)
        self._buttons.pack(side="top", fill="x")
        self.result = tk.StringVar(master=self.window, value=result_text("nenhum"))
        tk.Label(body, textvariable=self.result, anchor="w", justify="left").pack(side="top", fill="x")

        canvas = tk.Canvas(self.list_window, highlightthickness=0)
        scrollbar = tk.Scrollbar(self.list_window, orient="vertical", command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        canvas.pack(side="left", fill="both", expand=True)
        self._cards = tk.Frame(canvas)
        canvas.create_window((0, 0), window=self._cards, anchor="nw")
        self._cards.bind("<Configure>", lambda _event: canvas.configure(scrollregion=canvas.bbox("all")))

        self.window.protocol("WM_DELETE_WINDOW", self._on_close)

    @staticmethod
    def _validator(value: Any, error: Any, kind: FieldKind, label: str) -> Callable[..., None]:
        def check(*_args: object) -> None:
            text = value.get()
            try:
                if text:
                    validate_field(kind, text, label)
            except ValueError as exc:
                error.set(str(exc))
            else:
                error.set("")

        return check

    def _add_button(self, text: str, command: Callable[[], None]) -> None:
        import tkinter as tk

        tk.Button(self._buttons, text=text, command=command).pack(side="top", fill="x")

    def _perform(self, action: Callable[[Mapping[str, str], Path], str]) -> None:
        """Run a form action; conversion errors are printed, model errors shown."""
        try:
            message = action(self.form(), self.data_dir)
        except ValueError as exc:
            print("Erro ao converter", exc)
            return
        except CrudError as exc:
            message = str(exc)
        self.set_result(message)
        self.clear_fields()

    def _empty_files(self) -> None:
        """Hook run when the form window is closed."""

    def _on_close(self) -> None:
        self._empty_files()
        self.list_window.destroy()
        self.window.destroy()
        self.main_window.show()

    def form(self) -> dict[str, str]:
        """Return the current text of every field, keyed by field name."""
        return {key: value.get() for key, value in self._values.items()}

    def clear_fields(self) -> None:
        for value in self._values.values():
            value.set("")

    def show(self) -> None:
        self.window.deiconify()
        self.window.lift()

    def go_back(self) -> None:
        """Hide this page and its list and bring back the main window."""
        self.window.withdraw()
        self.list_window.withdraw()
        self.main_window.show()

    def show_list(self, cards: Iterable[Card]) -> None:
        """Replace the list window's content with the given (title, body) cards."""
        import tkinter as tk

        for child in self._cards.winfo_children():
            child.destroy()
        for title, body in cards:
            card = tk.LabelFrame(self._cards, text=title)
            tk.Label(card, text=body, justify="left", anchor="w").pack(fill="x", padx=6, pady=4)
            card.pack(fill="x", padx=8, pady=4)
        self.list_window.deiconify()
        self.list_window.lift()

    def set_result(self, message: str) -> None:
        self.result.set(result_text(message))