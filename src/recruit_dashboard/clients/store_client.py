"""Read-only client for the hosted application store (Supabase PostgREST API)."""

from __future__ import annotations

import logging
import os
from typing import Any

import requests
from pydantic import ValidationError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from recruit_dashboard.models.candidate import Candidate, CandidateDocument

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the data store cannot be reached or rejects a request."""


class _TransientStoreError(StoreError):
    """Server-side failure worth retrying."""


_RETRYABLE = (requests.ConnectionError, requests.Timeout, _TransientStoreError)


def parse_candidate_row(row: dict[str, Any]) -> Candidate:
    """Flatten the embedded analysis list to a single analysis and validate."""
    data = dict(row)
    analysis = data.get("candidate_analysis")
    if isinstance(analysis, list):
        data["candidate_analysis"] = analysis[0] if analysis else None
    if data.get("documents") is None:
        data["documents"] = []
    return Candidate.model_validate(data)


def parse_candidate_rows(rows: list[dict[str, Any]]) -> list[Candidate]:
    """Validate rows, skipping (and logging) any that do not fit the model."""
    candidates: list[Candidate] = []
    for row in rows:
        if not isinstance(row, dict):
            logger.warning("Skipping application row of type %s", type(row).__name__)
            continue
        try:
            candidates.append(parse_candidate_row(row))
        except ValidationError as exc:
            logger.warning(
                "Skipping application %s: %d validation error(s)",
                row.get("id", "?"),
                exc.error_count(),
            )
    return candidates


class StoreClient:
    """Fetch applications, analyses and documents over the PostgREST API."""

    def __init__(
        self,
        url: str | None = None,
        api_key: str | None = None,
        *,
        applications_table: str = "applications",
        analyses_table: str = "candidate_analyses",
        documents_table: str = "candidate_documents",
        timeout: float = 30,
        max_retries: int = 3,
        retry_wait: wait_base | None = None,
        session: requests.Session | None = None,
    ):
        base = url or os.environ.get("SUPABASE_URL")
        key = api_key or os.environ.get("SUPABASE_ANON_KEY")
        if not base or not key:
            raise ValueError(
                "Store credentials required. Set SUPABASE_URL and SUPABASE_ANON_KEY "
                "env vars or pass url and api_key."
            )
        self.base_url = base.rstrip("/") + "/rest/v1"
        self.applications_table = applications_table
        self.analyses_table = analyses_table
        self.documents_table = documents_table
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait = retry_wait or wait_exponential(min=1, max=10)
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            }
        )

    def _get(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        url = f"{self.base_url}/{table}"
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_retries),
                wait=self.retry_wait,
                retry=retry_if_exception_type(_RETRYABLE),
                reraise=True,
            ):
                with attempt:
                    response = self.session.get(url, params=params, timeout=self.timeout)
                    if response.status_code >= 500:
                        raise _TransientStoreError(
                            f"{table}: server error {response.status_code}"
                        )
                    if response.status_code >= 400:
                        raise StoreError(
                            f"{table}: request rejected ({response.status_code}): "
                            f"{response.text[:200]}"
                        )
                    return response.json()
        except (requests.RequestException, StoreError) as exc:
            logger.error("Store request failed: %s", table, exc_info=True)
            if isinstance(exc, StoreError):
                raise
            raise StoreError(f"{table}: {exc}") from exc
        return []

    def fetch_candidates(
        self,
        status: str | None = None,
        looking_for: str | None = None,
    ) -> list[Candidate]:
        """Applications with analysis and documents, newest first."""
        params = {
            "select": (
                f"*,candidate_analysis:{self.analyses_table}(*),"
                f"documents:{self.documents_table}(*)"
            ),
            "order": "created_at.desc",
        }
        if status:
            params["status"] = f"eq.{status}"
        if looking_for:
            params["looking_for"] = f"eq.{looking_for}"

        logger.info("Fetching candidates: status=%s looking_for=%s", status, looking_for)
        rows = self._get(self.applications_table, params)
        candidates = parse_candidate_rows(rows)
        logger.debug("Fetched %d candidates (%d rows)", len(candidates), len(rows))
        return candidates

    def fetch_documents(self, candidate_id: str) -> list[CandidateDocument]:
        """All documents uploaded for one application."""
        rows = self._get(
            self.documents_table,
            {"select": "*", "application_id": f"eq.{candidate_id}"},
        )
        documents: list[CandidateDocument] = []
        for row in rows:
            try:
                documents.append(CandidateDocument.model_validate(row))
            except ValidationError:
                logger.warning("Skipping document %s for %s", row.get("id", "?"), candidate_id)
        return documents
