"""Single JSON document holding every table of the storefront.

Writes go to a temp file in the same directory and are moved into place
with ``os.replace``, so readers only ever see a complete document.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

TABLES = ("products", "cart_items", "orders", "addresses")


class JsonDocumentStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(f".{file_path.name}.lock")

    @property
    def file_path(self) -> Path:
        return self._file_path

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold an exclusive lock on the document for the whole block."""
        self._ensure_dir()
        with open(self._lock_path, "w") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def load(self) -> dict[str, list[dict[str, Any]]]:
        if not self._file_path.exists():
            return {table: [] for table in TABLES}
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        for table in TABLES:
            document.setdefault(table, [])
        return document

    def save(self, document: dict[str, list[dict[str, Any]]]) -> None:
        self._ensure_dir()
        fd, temp_path = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.stem}_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(temp_path, self._file_path)
        except BaseException:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def _ensure_dir(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)


def next_id(records: list[dict[str, Any]]) -> int:
    if not records:
        return 1
    return max(r["id"] for r in records) + 1
