"""SQLite store for persisted request processors."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional

from valuefuzz.exceptions import LoadFailedError, PersistFailedError
from valuefuzz.utils.logger import get_logger
from .base_store import ProcessorStore

logger = get_logger(__name__)


class SqliteProcessorStore(ProcessorStore):
    def __init__(self, db_path: str = "data/valuefuzz.db") -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            cur = conn.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS processors (
                    id TEXT PRIMARY KEY,
                    state TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )

    def put(self, key: str, blob: str) -> None:
        self.check_key(key)
        now = datetime.now(timezone.utc).isoformat()
        try:
            with self._connect() as conn:
                cur = conn.cursor()
                cur.execute(
                    """
                    INSERT INTO processors (id, state, created_at, updated_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET state = excluded.state, updated_at = excluded.updated_at
                    """,
                    (key, blob, now, now),
                )
        except sqlite3.Error as e:
            logger.error(f"Failed to store processor {key}: {e}")
            raise PersistFailedError(f"Could not write processor {key} to {self.db_path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        self.check_key(key)
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT state FROM processors WHERE id = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read processor {key}: {e}")
            raise LoadFailedError(key, LoadFailedError.CORRUPT, str(e)) from e
        return None if row is None else row["state"]

    def exists(self, key: str) -> bool:
        self.check_key(key)
        with self._connect() as conn:
            row = conn.execute("SELECT 1 FROM processors WHERE id = ?", (key,)).fetchone()
        return row is not None

    def delete(self, key: str) -> bool:
        self.check_key(key)
        try:
            with self._connect() as conn:
                cur = conn.execute("DELETE FROM processors WHERE id = ?", (key,))
                return cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Failed to delete processor {key}: {e}")
            return False

    def keys(self) -> List[str]:
        with self._connect() as conn:
            rows = conn.execute("SELECT id FROM processors ORDER BY id").fetchall()
        return [row["id"] for row in rows]
