"""SQLite-backed vector store for memories."""

import re
import sqlite3
import time
import uuid
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from .models import MemoryEntry, MemorySearchResult

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

_COLUMNS = "id, text, vector, importance, category, created_at, username, channel, chat_id"


class MemoryStore:
    """Persistent storage for memory vectors using SQLite.

    Vectors are stored as float32 blobs. Search is exact: L2 distance is
    computed against every stored vector and converted to a similarity
    score with ``1 / (1 + distance)``.
    """

    def __init__(self, db_path: Path, vector_dim: int) -> None:
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
            vector_dim: Dimension every stored vector must have.
        """
        self.db_path = db_path
        self.vector_dim = vector_dim
        self._conn: sqlite3.Connection | None = None

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def init_db(self) -> None:
        """Create the memories table if it doesn't exist."""
        conn = self._get_connection()
        conn.execute("""
            CREATE TABLE IF NOT EXISTS memories (
                id          TEXT PRIMARY KEY,
                text        TEXT NOT NULL,
                vector      BLOB NOT NULL,
                importance  REAL NOT NULL DEFAULT 0.7,
                category    TEXT NOT NULL DEFAULT 'other',
                created_at  INTEGER NOT NULL,
                username    TEXT,
                channel     TEXT,
                chat_id     TEXT
            )
        """)
        conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_memories_created ON memories(created_at)"
        )
        conn.commit()

    def _encode_vector(self, vector: Sequence[float]) -> bytes:
        array = np.asarray(vector, dtype=np.float32)
        if array.ndim != 1 or array.shape[0] != self.vector_dim:
            raise ValueError(
                f"Vector dimension mismatch: expected {self.vector_dim}, got {array.size}"
            )
        return array.tobytes()

    def store(
        self,
        text: str,
        vector: Sequence[float],
        importance: float = 0.7,
        category: str = "other",
        username: str | None = None,
        channel: str | None = None,
        chat_id: str | None = None,
    ) -> MemoryEntry:
        """Store a new memory.

        Returns:
            The stored entry with its generated id and timestamp.
        """
        blob = self._encode_vector(vector)
        entry = MemoryEntry(
            id=str(uuid.uuid4()),
            text=text,
            vector=tuple(float(v) for v in vector),
            importance=importance,
            category=category,
            created_at=int(time.time() * 1000),
            username=username,
            channel=channel,
            chat_id=chat_id,
        )

        conn = self._get_connection()
        conn.execute(
            f"INSERT INTO memories ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                entry.id,
                entry.text,
                blob,
                entry.importance,
                entry.category,
                entry.created_at,
                entry.username,
                entry.channel,
                entry.chat_id,
            ),
        )
        conn.commit()
        return entry

    def search(
        self,
        vector: Sequence[float],
        limit: int = 5,
        min_score: float = 0.5,
    ) -> list[MemorySearchResult]:
        """Find the memories nearest to a vector.

        Args:
            vector: Query embedding.
            limit: Maximum number of nearest rows considered.
            min_score: Hits scoring below this are dropped after the limit.

        Returns:
            Results ordered by descending score.
        """
        query = np.frombuffer(self._encode_vector(vector), dtype=np.float32)

        conn = self._get_connection()
        rows = conn.execute(f"SELECT {_COLUMNS} FROM memories").fetchall()
        if not rows or limit <= 0:
            return []

        matrix = np.stack([np.frombuffer(row["vector"], dtype=np.float32) for row in rows])
        distances = np.linalg.norm(matrix - query, axis=1)
        order = np.argsort(distances, kind="stable")[:limit]

        results = []
        for index in order:
            score = float(1.0 / (1.0 + distances[index]))
            if score >= min_score:
                results.append(
                    MemorySearchResult(entry=self._row_to_entry(rows[index]), score=score)
                )
        return results

    def delete(self, memory_id: str) -> bool:
        """Delete a memory by id.

        Raises:
            ValueError: If memory_id is not a UUID.

        Returns:
            True if a row was deleted.
        """
        if not _UUID_RE.match(memory_id):
            raise ValueError(f"Invalid memory ID format: {memory_id}")

        conn = self._get_connection()
        cursor = conn.execute("DELETE FROM memories WHERE id = ?", (memory_id,))
        conn.commit()
        return cursor.rowcount > 0

    def count(self) -> int:
        """Number of stored memories."""
        conn = self._get_connection()
        return conn.execute("SELECT COUNT(*) FROM memories").fetchone()[0]

    def list(self, limit: int = 20, offset: int = 0) -> list[MemoryEntry]:
        """List memories, newest first."""
        conn = self._get_connection()
        cursor = conn.execute(
            f"SELECT {_COLUMNS} FROM memories ORDER BY created_at DESC, rowid DESC "
            "LIMIT ? OFFSET ?",
            (limit, offset),
        )
        return [self._row_to_entry(row) for row in cursor.fetchall()]

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _row_to_entry(self, row: sqlite3.Row) -> MemoryEntry:
        """Convert a database row to a MemoryEntry."""
        vector = np.frombuffer(row["vector"], dtype=np.float32)
        return MemoryEntry(
            id=row["id"],
            text=row["text"],
            vector=tuple(float(v) for v in vector),
            importance=row["importance"],
            category=row["category"],
            created_at=row["created_at"],
            username=row["username"],
            channel=row["channel"],
            chat_id=row["chat_id"],
        )
