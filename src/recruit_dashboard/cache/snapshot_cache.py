"""SQLite cache for fetched candidate snapshots, keyed by store-side filters."""

from __future__ import annotations

import logging
import sqlite3
import time
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from recruit_dashboard.models.candidate import Candidate

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".recruit-dashboard" / "cache.db"
DEFAULT_TTL_MINUTES = 15

_CANDIDATE_LIST = TypeAdapter(list[Candidate])


def snapshot_key(status: str | None, looking_for: str | None, scope: str = "") -> str:
    key = f"status={status or '*'}|looking_for={looking_for or '*'}"
    return f"{scope}|{key}" if scope else key


class SnapshotCache:
    """SQLite-backed candidate snapshot cache with TTL expiration.

    ``scope`` names the data source (store URL and tables) so snapshots from
    different stores sharing one database file never collide.
    """

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_PATH,
        ttl_minutes: int = DEFAULT_TTL_MINUTES,
        scope: str = "",
    ):
        self.db_path = Path(db_path)
        self.scope = scope
        self.ttl_seconds = ttl_minutes * 60
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS candidate_snapshots (
                    snapshot_key TEXT PRIMARY KEY,
                    candidates_json TEXT NOT NULL,
                    cached_at REAL NOT NULL
                )
            """)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def get(
        self, status: str | None = None, looking_for: str | None = None
    ) -> list[Candidate] | None:
        """Get a cached snapshot if not expired."""
        key = snapshot_key(status, looking_for, self.scope)
        with self._connect() as conn:
            row = conn.execute(
                "SELECT candidates_json, cached_at FROM candidate_snapshots WHERE snapshot_key = ?",
                (key,),
            ).fetchone()

        if row is None:
            return None

        candidates_json, cached_at = row
        if time.time() - cached_at >= self.ttl_seconds:
            self.delete(status, looking_for)
            return None

        try:
            return _CANDIDATE_LIST.validate_json(candidates_json)
        except ValidationError as exc:
            logger.warning(
                "Dropping unreadable cached snapshot %s: %d validation error(s)",
                key,
                exc.error_count(),
            )
            self.delete(status, looking_for)
            return None

    def put(
        self,
        candidates: list[Candidate],
        status: str | None = None,
        looking_for: str | None = None,
    ) -> None:
        """Cache a fetched snapshot."""
        key = snapshot_key(status, looking_for, self.scope)
        with self._connect() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO candidate_snapshots
                   (snapshot_key, candidates_json, cached_at)
                   VALUES (?, ?, ?)""",
                (key, _CANDIDATE_LIST.dump_json(candidates).decode(), time.time()),
            )

    def delete(self, status: str | None = None, looking_for: str | None = None) -> None:
        key = snapshot_key(status, looking_for, self.scope)
        with self._connect() as conn:
            conn.execute(
                "DELETE FROM candidate_snapshots WHERE snapshot_key = ?", (key,)
            )

    def clear(self) -> int:
        """Clear all cached entries. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM candidate_snapshots")
            return cursor.rowcount

    def stats(self) -> dict:
        """Return cache statistics."""
        with self._connect() as conn:
            total = conn.execute(
                "SELECT COUNT(*) FROM candidate_snapshots"
            ).fetchone()[0]
            expired = conn.execute(
                "SELECT COUNT(*) FROM candidate_snapshots WHERE ? - cached_at >= ?",
                (time.time(), self.ttl_seconds),
            ).fetchone()[0]
        return {"total": total, "expired": expired, "active": total - expired}
