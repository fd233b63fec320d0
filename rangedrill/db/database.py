"""SQLite-backed durable key-value slots.

Each slot holds one opaque text blob that is always overwritten whole.
"""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path


SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class Database:
    """SQLite database wrapper with thread-local connection pooling."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._local = threading.local()
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create a thread-local database connection."""
        if not hasattr(self._local, "conn") or self._local.conn is None:
            self._local.conn = sqlite3.connect(self.db_path)
            self._local.conn.row_factory = sqlite3.Row
        return self._local.conn

    @contextmanager
    def connection(self):
        """Get a database connection (reuses thread-local connection).

        Nested blocks join the outermost one: only it commits or rolls back,
        so several writes can be grouped into a single transaction.
        """
        conn = self._get_connection()
        depth = getattr(self._local, "depth", 0)
        self._local.depth = depth + 1
        try:
            yield conn
            if depth == 0:
                conn.commit()
        except Exception:
            if depth == 0:
                conn.rollback()
            raise
        finally:
            self._local.depth = depth

    def close(self) -> None:
        """Close the thread-local connection if open."""
        if hasattr(self._local, "conn") and self._local.conn is not None:
            self._local.conn.close()
            self._local.conn = None

    def init_schema(self) -> None:
        """Initialize the database schema."""
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    # Slot operations
    def get_blob(self, key: str) -> str | None:
        """Return the blob stored under key, or None if the slot is empty.

        Raises UnicodeDecodeError if the stored text is not valid UTF-8.
        """
        with self.connection() as conn:
            # Read raw bytes; sqlite3 would raise OperationalError on bad text
            row = conn.execute(
                "SELECT CAST(value AS BLOB) AS value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return bytes(row["value"]).decode("utf-8") if row else None

    def set_blob(self, key: str, value: str) -> None:
        """Replace the blob stored under key."""
        with self.connection() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def delete_blob(self, key: str) -> None:
        """Clear the slot. Deleting an empty slot is a no-op."""
        with self.connection() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def list_keys(self) -> list[str]:
        """Return the keys of all occupied slots, sorted."""
        with self.connection() as conn:
            rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
            return [row["key"] for row in rows]
