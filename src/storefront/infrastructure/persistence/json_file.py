"""A JSON array on disk, shared by every JSON repository.

Each ``transaction()`` holds a per-path lock for the whole
read-modify-write, so a conditional update (check a field, then write it)
is atomic with respect to every other repository instance in the process.
Writes go to a temporary file that replaces the store in one rename, so a
crash mid-write leaves the previous contents intact.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    def read(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Yield the records for in-place mutation; write them back on success."""
        with self._lock:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
            yield records
            self._write(json.dumps(records, indent=2) + "\n")

    def _write(self, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._write("[]")
