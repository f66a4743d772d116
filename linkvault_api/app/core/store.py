"""
JSON file storage for users and links.

The whole database is a single JSON document with two top‑level
mappings::

    {"users": {"<username>": {...}}, "links": {"<id>": {...}}}

``JsonStore`` keeps both mappings in memory and rewrites the document
after every mutation.  Mutations run inside ``transaction()``, which
holds a per‑store lock across mutate‑then‑persist and rolls the
in‑memory state back if the write fails.  Writes go to a temporary
file in the target directory which is then atomically moved over the
previous snapshot, so readers never observe a half‑written file.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from .config import Settings, settings as default_settings
from .errors import StorageError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def get_database_path(config: Optional[Settings] = None) -> str:
    """Compute the path to the JSON database file.

    If ``database_path`` is absolute it is used as is; otherwise it is
    resolved relative to the project root, the directory holding
    ``run.py`` and ``pyproject.toml``.
    """
    config = config or default_settings
    db_path = config.database_path
    if os.path.isabs(db_path):
        return db_path
    base_dir = Path(__file__).resolve().parents[3]  # repository root
    return str((base_dir / db_path).resolve())


def utc_timestamp() -> str:
    """Return the current UTC time as ISO‑8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonStore:
    """In‑memory users/links mappings backed by a JSON file."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.users: Dict[str, Record] = {}
        self.links: Dict[str, Record] = {}
        self._lock = threading.RLock()

    def load(self) -> None:
        """Replace the in‑memory state with the file contents.

        A missing file leaves the store empty.  Records are not
        validated; a top‑level key that is absent becomes an empty
        mapping.
        """
        if not self.path.is_file():
            logger.info("No database at %s, starting empty", self.path)
            return
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot load database {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Database {self.path} is not a JSON object")
        with self._lock:
            self.users = data.get("users") or {}
            self.links = data.get("links") or {}
        logger.info(
            "Loaded %d users and %d links from %s",
            len(self.users),
            len(self.links),
            self.path,
        )

    def snapshot(self) -> Dict[str, Dict[str, Record]]:
        """Return the document that ``save`` would write."""
        return {"users": self.users, "links": self.links}

    def save(self) -> None:
        """Write the full snapshot to disk atomically."""
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(self.snapshot(), fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write database {self.path}: {exc}") from exc
        logger.debug("Saved database to %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator["JsonStore"]:
        """Hold the store lock, yield, then persist.

        If the body raises, nothing is written and the in‑memory state
        is restored.  If the write itself fails, the state is restored
        and ``StorageError`` propagates.
        """
        with self._lock:
            users_before = copy.deepcopy(self.users)
            links_before = copy.deepcopy(self.links)
            try:
                yield self
                self.save()
            except Exception:
                self.users = users_before
                self.links = links_before
                raise
