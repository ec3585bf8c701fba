"""Dashboard session: owns the candidate snapshot and the filter state.

Only ``status`` and ``looking_for`` are applied by the data store, so only a
change to one of them triggers a refetch. Everything else is recomputed over
the snapshot already in memory.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from recruit_dashboard.cache.snapshot_cache import SnapshotCache
from recruit_dashboard.clients.store_client import StoreError
from recruit_dashboard.models.candidate import Candidate, CandidateDocument
from recruit_dashboard.models.filters import FilterState
from recruit_dashboard.search.pipeline import apply_filters
from recruit_dashboard.stats import DashboardStats, compute_stats

logger = logging.getLogger(__name__)


class CandidateSource(Protocol):
    def fetch_candidates(
        self, status: str | None = None, looking_for: str | None = None
    ) -> list[Candidate]: ...

    def fetch_documents(self, candidate_id: str) -> list[CandidateDocument]: ...


class DashboardSession:
    """Candidate list plus filter state for one reviewer."""

    def __init__(
        self,
        source: CandidateSource,
        state: FilterState | None = None,
        *,
        cache: SnapshotCache | None = None,
    ):
        self.source = source
        self.state = state or FilterState()
        self.cache = cache
        self.candidates: list[Candidate] = []
        self.last_error: StoreError | None = None
        self.loading = False
        self._generation = 0

    async def refresh(self, *, use_cache: bool = True) -> bool:
        """Fetch a new snapshot for the current store-side filters.

        Returns True if the result was applied. A response that arrives after
        a newer fetch has started is dropped.
        """
        self._generation += 1
        generation = self._generation
        status, looking_for = self.state.fetch_key()

        if use_cache and self.cache is not None:
            cached = self.cache.get(status, looking_for)
            if cached is not None:
                logger.debug("Using cached snapshot (%d candidates)", len(cached))
                self.candidates = cached
                self.last_error = None
                self.loading = False
                return True

        self.loading = True
        try:
            candidates = await asyncio.to_thread(
                self.source.fetch_candidates, status, looking_for
            )
        except StoreError as exc:
            if generation == self._generation:
                logger.error("Error fetching candidates: %s", exc)
                self.last_error = exc
            return False
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.debug(
                "Discarding stale fetch (generation %d, latest %d)",
                generation,
                self._generation,
            )
            return False

        self.candidates = candidates
        self.last_error = None
        if self.cache is not None:
            self.cache.put(candidates, status, looking_for)
        return True

    async def update_filters(self, **changes: Any) -> FilterState:
        """Apply filter changes, refetching only when the store-side key changes."""
        if changes.get("specialization"):
            changes.setdefault("specialization_enhanced", None)
        if changes.get("specialization_enhanced"):
            changes.setdefault("specialization", None)

        previous_key = self.state.fetch_key()
        self.state = FilterState.model_validate({**self.state.model_dump(), **changes})
        if self.state.fetch_key() != previous_key:
            await self.refresh()
        return self.state

    def visible(self) -> list[Candidate]:
        """The snapshot filtered and sorted by the current state."""
        return apply_filters(self.candidates, self.state)

    def stats(self) -> DashboardStats:
        return compute_stats(self.candidates)

    def find(self, candidate_id: str) -> Candidate | None:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    async def documents_for(self, candidate_id: str) -> list[CandidateDocument]:
        return await asyncio.to_thread(self.source.fetch_documents, candidate_id)
