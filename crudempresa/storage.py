"""JSON-backed tables with a plain-text mirror of their contents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path("data")


class CrudError(Exception):
    """Base error for every failed create, read, update or delete."""


class DuplicateIdError(CrudError):
    """A record with the same key already exists."""


class NotFoundError(CrudError):
    """No record with the requested id exists."""


class MissingFieldsError(CrudError):
    """A required field was left empty."""


class InvalidReferenceError(CrudError):
    """A record refers to an id that does not exist."""


class Record(Protocol):
    id: Any

    def to_dict(self) -> dict[str, Any]: ...

    def txt_line(self) -> str: ...


R = TypeVar("R", bound=Record)


class JsonTable(Generic[R]):
    """A list of records stored as ``<data_dir>/json/<name>.json``.

    Every save also rewrites ``<data_dir>/txt/<name>.txt`` with one line
    per record.
    """

    def __init__(
        self,
        name: str,
        from_dict: Callable[[dict[str, Any]], R],
        data_dir: str | Path = DEFAULT_DATA_DIR,
    ) -> None:
        self.name = name
        self.from_dict = from_dict
        self.data_dir = Path(data_dir)

    @property
    def json_path(self) -> Path:
        return self.data_dir / "json" / f"{self.name}.json"

    @property
    def txt_path(self) -> Path:
        return self.data_dir / "txt" / f"{self.name}.txt"

    def load(self) -> list[R]:
        """Return all records; a missing file means an empty table."""
        try:
            text = self.json_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise CrudError(f"Erro ao carregar {self.name}: {exc}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CrudError(f"Erro ao carregar {self.name}: {exc}") from exc
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise CrudError(f"Erro ao carregar {self.name}: esperada uma lista JSON")
        try:
            return [self.from_dict(item) for item in raw]
        except (TypeError, ValueError, AttributeError, KeyError) as exc:
            raise CrudError(f"Erro ao carregar {self.name}: {exc}") from exc

    def save(self, records: list[R]) -> None:
        """Write the records to the JSON file and mirror them to the TXT file."""
        payload = json.dumps([record.to_dict() for record in records], indent=2, ensure_ascii=False)
        try:
            self.json_path.parent.mkdir(parents=True, exist_ok=True)
            self.json_path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            raise CrudError(f"Erro ao salvar {self.name}: {exc}") from exc
        self._sync_txt(records)

    def _sync_txt(self, records: list[R]) -> None:
        try:
            self.txt_path.parent.mkdir(parents=True, exist_ok=True)
            with self.txt_path.open("w", encoding="utf-8") as handle:
                for record in records:
                    handle.write(record.txt_line() + "\n")
        except OSError as exc:
            logger.warning("Erro ao escrever o arquivo TXT %s: %s", self.txt_path, exc)
            return
        logger.info("Arquivo TXT sincronizado com sucesso.")

    def insert(self, record: R) -> None:
        """Append a record whose id is not yet taken."""
        records = self.load()
        if any(existing.id == record.id for existing in records):
            raise DuplicateIdError(f"Erro: já existe um registro com o ID {record.id} em {self.name}.")
        records.append(record)
        self.save(records)

    def update(self, record: R) -> None:
        """Replace the record that has the same id."""
        records = self.load()
        position = next((pos for pos, existing in enumerate(records) if existing.id == record.id), None)
        if position is None:
            raise NotFoundError(f"Erro: registro com ID {record.id} não encontrado em {self.name}.")
        records[position] = record
        self.save(records)

    def delete(self, record_id: Any) -> R:
        """Remove and return the record with the given id."""
        records = self.load()
        position = next((pos for pos, existing in enumerate(records) if existing.id == record_id), None)
        if position is None:
            raise NotFoundError(f"Erro: registro com ID {record_id} não encontrado em {self.name}.")
        removed = records.pop(position)
        self.save(records)
        return removed

    def ids(self) -> list[Any]:
        """Return the ids of all records, in stored order."""
        return [record.id for record in self.load()]


def empty_json_file(path: str | Path) -> None:
    """Overwrite the file at ``path`` with an empty JSON list."""
    target = Path(path)
    target.write_text("[]", encoding="utf-8")
    logger.info("Arquivo %s esvaziado com sucesso.", target)