"""Storage backends for rendered documents."""

import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog

from ..config.defaults import EditorParams
from ..errors import PersistenceError, UnknownVariantError

logger = structlog.get_logger(__name__)


class Persistence(ABC):
    """Somewhere a rendered document can be saved to and read back from."""

    @abstractmethod
    def save(self, data: str, name: str = "document") -> str:
        """Store ``data`` under ``name`` and return where it went."""

    @abstractmethod
    def load(self, name: str = "document") -> Optional[str]:
        pass


class FileStorage(Persistence):
    """
    Plain-text files. With a directory as ``path`` every document gets its
    own ``<name>.txt``; otherwise ``path`` is the single output file.
    """

    def __init__(self, path: str = "document.txt", create_dirs: bool = True) -> None:
        self.path = Path(path)
        self.create_dirs = create_dirs

    def _target(self, name: str) -> Path:
        if self.path.is_dir():
            return self.path / f"{name}.txt"
        return self.path

    def save(self, data: str, name: str = "document") -> str:
        target = self._target(name)
        try:
            if self.create_dirs:
                target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(data, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write document", target=str(target), error=str(e))
            raise PersistenceError(f"Could not save document: {e}",
                                   operation="save", target=str(target)) from e

        logger.info("Document saved to file", target=str(target), size=len(data))
        return str(target)

    def load(self, name: str = "document") -> Optional[str]:
        target = self._target(name)
        if not target.exists():
            return None
        try:
            return target.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Could not load document: {e}",
                                   operation="load", target=str(target)) from e


class DbStorage(Persistence):
    """SQLite-backed storage; saving an existing name replaces it."""

    def __init__(self, db_path: str = "documents.db") -> None:
        self.db_path = Path(db_path)
        self._lock = threading.Lock()
        self._init_database()

    def _init_database(self) -> None:
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    name TEXT PRIMARY KEY,
                    content TEXT NOT NULL,
                    saved_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection, mapping sqlite failures to PersistenceError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise PersistenceError(f"Database error: {e}", operation="sqlite",
                                   target=str(self.db_path)) from e
        finally:
            if conn:
                conn.close()

    def save(self, data: str, name: str = "document") -> str:
        with self._lock:
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO documents (name, content, saved_at) VALUES (?, ?, ?)",
                    (name, data, datetime.now(timezone.utc).isoformat())
                )
                conn.commit()

        logger.info("Document saved to database", db_path=str(self.db_path), name=name)
        return f"{self.db_path}#{name}"

    def load(self, name: str = "document") -> Optional[str]:
        with self._lock:
            with self._get_connection() as conn:
                row = conn.execute(
                    "SELECT content FROM documents WHERE name = ?", (name,)
                ).fetchone()
        return row[0] if row else None


STORAGE_KINDS = ("db", "file")


def create_storage(kind: str = "file", params: Optional[EditorParams] = None,
                   base_dir: Optional[str] = None) -> Persistence:
    """
    Build a storage backend from editor parameters.

    Args:
        kind: "file" or "db"
        params: Editor parameters; defaults when omitted
        base_dir: Directory that relative configured paths are resolved against

    Returns:
        FileStorage or DbStorage pointed at the configured path
    """
    params = params or EditorParams()
    key = kind.lower()
    if key not in STORAGE_KINDS:
        raise UnknownVariantError(
            f"Unknown storage kind: {kind}",
            kind="storage",
            requested=kind,
            available=list(STORAGE_KINDS)
        )

    path = Path(params.db_path if key == "db" else params.storage_path)
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path

    if key == "db":
        return DbStorage(str(path))
    return FileStorage(str(path))
