# loanbook/store/base.py

from abc import ABC, abstractmethod
from typing import Any, List, Optional

COLLECTIONS = ("customers", "bills", "payments")


class BaseStore(ABC):
    """
    Whole-collection repository for the three bookkeeping collections.

    Implementations only have to read and overwrite a full collection; the
    row-level helpers below are built on those two primitives, so every write
    is last-write-wins on the entire collection.
    """

    @staticmethod
    def check_collection(name: str) -> str:
        if name not in COLLECTIONS:
            raise ValueError(f"Unknown collection {name!r}")
        return name

    @abstractmethod
    def ensure_collection(self, name: str) -> None:
        """Create the collection, empty, if it does not exist yet."""

    @abstractmethod
    def read_all(self, name: str) -> List[dict]:
        """Return every record in order; unreadable storage reads as empty."""

    @abstractmethod
    def write_all(self, name: str, records: List[dict]) -> None:
        """Replace the whole collection with ``records``."""

    def ensure_all(self) -> None:
        for name in COLLECTIONS:
            self.ensure_collection(name)

    def append(self, name: str, record: dict) -> dict:
        records = self.read_all(name)
        records.append(record)
        self.write_all(name, records)
        return record

    def update(self, name: str, key_field: str, key: Any, changes: dict) -> Optional[dict]:
        records = self.read_all(name)
        for record in records:
            if record.get(key_field) == key:
                record.update(changes)
                self.write_all(name, records)
                return record
        return None

    def next_sequence_id(self, name: str, key_field: str, prefix: str, width: int) -> str:
        """
        Next identifier after the highest one already stored, e.g. CUST004.

        Keys without the prefix or with a non-numeric suffix count as 0.
        """
        highest = 0
        for record in self.read_all(name):
            key = str(record.get(key_field) or "")
            suffix = key[len(prefix):] if key.startswith(prefix) else ""
            try:
                number = int(suffix)
            except ValueError:
                number = 0
            highest = max(highest, number)

        return f"{prefix}{highest + 1:0{width}d}"
