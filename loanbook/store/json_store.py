# loanbook/store/json_store.py

import json
import logging
from pathlib import Path
from typing import List

from loanbook.store.base import BaseStore

logger = logging.getLogger(__name__)


class JsonFileStore(BaseStore):
    """One pretty-printed JSON array file per collection, e.g. data/customers.json."""

    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{self.check_collection(name)}.json"

    def ensure_collection(self, name: str) -> None:
        path = self.path_for(name)
        if path.exists():
            return
        self._dump(path, [])
        logger.info("Created empty collection file %s", path)

    def read_all(self, name: str) -> List[dict]:
        path = self.path_for(name)
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Collection file %s is missing; reading it as empty", path)
            return []
        except (OSError, ValueError):
            logger.exception("Could not read collection file %s; reading it as empty", path)
            return []

        if not isinstance(data, list):
            logger.error("Collection file %s does not hold a JSON array; reading it as empty", path)
            return []

        records = [record for record in data if isinstance(record, dict)]
        dropped = len(data) - len(records)
        if dropped:
            # the next write_all of this collection removes them from the file
            logger.warning(
                "Dropping %d non-object entries from collection file %s", dropped, path
            )
        return records

    def write_all(self, name: str, records: List[dict]) -> None:
        self._dump(self.path_for(name), records)

    def _dump(self, path: Path, records: List[dict]) -> None:
        # plain overwrite: a crash mid-write can leave a truncated file behind
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
