"""Shared plumbing for the JSON-file-backed repositories.

Each repository keeps one JSON array in one file.  Reads and writes go
through a per-file lock so read-modify-write cycles inside one process
never interleave; I/O and decode failures surface as ``FatalError``.
"""

from __future__ import annotations

import json
import threading
from abc import abstractmethod
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Generic, TypeVar

from linkit.domain.exceptions import ConflictError, FatalError
from linkit.domain.model.value_objects import Money

T = TypeVar("T")

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(path.resolve(), threading.RLock())


# --- Field codecs -------------------------------------------------------------


def money_to_raw(money: Money | None) -> dict | None:
    if money is None:
        return None
    return {"amount": str(money.amount), "currency": money.currency}


def money_from_raw(raw: dict | None) -> Money | None:
    if raw is None:
        return None
    return Money(Decimal(raw["amount"]), raw["currency"])


def dt_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def dt_from_raw(raw: str | None) -> datetime | None:
    return datetime.fromisoformat(raw) if raw else None


# --- Base repository ----------------------------------------------------------


class JsonFileStore(Generic[T]):
    """Load/persist helpers plus the CRUD every JSON repository shares."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path)
        self._ensure_file()

    # --- Serialization hooks ---------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(entity: T) -> dict:
        ...

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T:
        ...

    # --- Shared queries --------------------------------------------------------

    def get_by_id(self, entity_id: Any, include_deleted: bool = False) -> T | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                if raw.get("isDeleted") and not include_deleted:
                    return None
                return self._to_domain(raw)
        return None

    def list_all(self, include_deleted: bool = False) -> list[T]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if include_deleted or not raw.get("isDeleted")
        ]

    def delete(self, entity_id: Any) -> None:
        with self._lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != entity_id]
            if len(remaining) != len(records):
                self._persist_raw(remaining)

    def _find(self, predicate: Callable[[dict], bool]) -> T | None:
        for raw in self._load_raw():
            if not raw.get("isDeleted") and predicate(raw):
                return self._to_domain(raw)
        return None

    # --- Writes ----------------------------------------------------------------

    def _upsert(self, entity: Any) -> None:
        """Replace the record with the same id, otherwise append."""
        with self._lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == entity.id:
                    records[i] = self._to_raw(entity)
                    break
            else:
                records.append(self._to_raw(entity))
            self._persist_raw(records)

    def _save_versioned(self, entity: Any, next_id: Callable[[], int]) -> None:
        """Conditional write: the stored version must match the entity's."""
        with self._lock:
            records = self._load_raw()
            if entity.id is None:
                entity.id = next_id()
                entity.version += 1
                records.append(self._to_raw(entity))
                self._persist_raw(records)
                return

            for i, raw in enumerate(records):
                if raw["id"] == entity.id:
                    if raw.get("version", 0) != entity.version:
                        raise ConflictError(
                            f"{type(entity).__name__} #{entity.id} was modified "
                            "by someone else; reload and retry"
                        )
                    entity.version += 1
                    records[i] = self._to_raw(entity)
                    break
            else:
                entity.version += 1
                records.append(self._to_raw(entity))
            self._persist_raw(records)

    def _next_int_id(self) -> int:
        records = self._load_raw()
        if not records:
            return 1
        return max(int(raw["id"]) for raw in records) + 1

    # --- File helpers ----------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._lock:
            try:
                return json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise FatalError(f"Cannot read {self._file_path.name}: {exc}") from exc

    def _persist_raw(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            raise FatalError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise FatalError(f"Cannot create {self._file_path}: {exc}") from exc
