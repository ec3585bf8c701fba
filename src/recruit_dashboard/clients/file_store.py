"""Candidate store backed by a JSON export of the applications table."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from recruit_dashboard.clients.store_client import StoreError, parse_candidate_rows
from recruit_dashboard.models.candidate import Candidate, CandidateDocument

logger = logging.getLogger(__name__)


class FileStore:
    """Serve the same queries as StoreClient from a local JSON file.

    The file holds a list of application rows in the shape the API returns
    (analysis and documents embedded), or an object with a "candidates" list.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> list[Candidate]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read candidate file %s", self.path, exc_info=True)
            raise StoreError(f"Could not read {self.path}: {exc}") from exc

        rows = raw.get("candidates", []) if isinstance(raw, dict) else raw
        if not isinstance(rows, list):
            raise StoreError(f"{self.path}: expected a list of applications")
        return parse_candidate_rows(rows)

    def fetch_candidates(
        self,
        status: str | None = None,
        looking_for: str | None = None,
    ) -> list[Candidate]:
        candidates = [
            c
            for c in self._load()
            if (not status or c.status == status)
            and (not looking_for or c.looking_for == looking_for)
        ]
        candidates.sort(key=lambda c: c.created_at.timestamp(), reverse=True)
        return candidates

    def fetch_documents(self, candidate_id: str) -> list[CandidateDocument]:
        for candidate in self._load():
            if candidate.id == candidate_id:
                return list(candidate.documents)
        return []
