"""JSON-file keyed collections (the persistence collaborator).

One file per collection, holding a JSON list of objects keyed by 'id'.
Writes go to a temp file in the same directory and are then moved into
place, so a single collection is never half-written. There is no
atomicity across collections. Write errors propagate to the caller.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from homechef.infra import paths

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_json(path: Path, default: Any, missing_ok: bool = False):
    """Load JSON from `path`; a missing file yields `default`, invalid JSON is logged and re-raised.

    missing_ok: the file is normally absent (e.g. undo history), so its absence is logged at debug.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        if missing_ok:
            logger.debug(f"Data file not found: {path}. Using default.")
        else:
            logger.warning(f"Data file not found: {path}. Using empty collection.")
        return default
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise


def atomic_write_json(path: Path, data: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class JsonCollection(Generic[T]):
    """A keyed store of entities serialized through from_dict/to_dict."""

    def __init__(self, file_name: str, from_dict: Callable[[dict], T], path: Optional[Path] = None):
        self.file_name = file_name
        self._from_dict = from_dict
        self._path = Path(path) if path else None

    @property
    def path(self) -> Path:
        return self._path or paths.data_file(self.file_name)

    def _load_raw(self) -> List[Dict[str, Any]]:
        data = read_json(self.path, [])
        return data if isinstance(data, list) else []

    def _write_raw(self, rows: List[Dict[str, Any]]) -> None:
        atomic_write_json(self.path, rows)

    def get_all(self) -> List[T]:
        return [self._from_dict(row) for row in self._load_raw()]

    def get(self, item_id: int) -> Optional[T]:
        for row in self._load_raw():
            if row.get("id") == item_id:
                return self._from_dict(row)
        return None

    def save(self, item) -> None:
        '''Insert or replace by id (put semantics).'''
        row = item.to_dict()
        rows = self._load_raw()
        for idx, existing in enumerate(rows):
            if existing.get("id") == row["id"]:
                rows[idx] = row
                break
        else:
            rows.append(row)
        self._write_raw(rows)

    def delete(self, item_id: int) -> None:
        rows = [r for r in self._load_raw() if r.get("id") != item_id]
        self._write_raw(rows)

    def clear(self) -> None:
        self._write_raw([])

    def is_empty(self) -> bool:
        return not self._load_raw()
