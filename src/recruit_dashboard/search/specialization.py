"""Specialization filter: direct form-field match OR keyword match in free text."""

from __future__ import annotations

from typing import Mapping

from recruit_dashboard.models.candidate import Candidate
from recruit_dashboard.search.keywords import (
    ENHANCED_SPECIALIZATION_KEYWORDS,
    SPECIALIZATION_KEYWORDS,
)
from recruit_dashboard.search.probe import as_strings


def _first_token(value: str) -> str:
    parts = value.lower().split()
    return parts[0] if parts else ""


def _specialization_entries(candidate: Candidate) -> list[str]:
    form = candidate.form_data or {}
    return as_strings(form.get("marketingChannels")) + as_strings(
        form.get("marketingServices")
    )


def candidate_corpus(candidate: Candidate) -> str:
    """Lowercased, space-joined free text the keyword tables are matched against."""
    parts: list[str] = []
    parts.extend(as_strings(candidate.scraped_content))
    analysis = candidate.candidate_analysis
    if analysis is not None:
        parts.extend(as_strings(analysis.fit_assessment))
        parts.extend(as_strings(analysis.strengths))
        parts.extend(as_strings(analysis.weaknesses))
    for document in candidate.documents:
        parts.extend(as_strings(document.extracted_content))
    return " ".join(parts).lower()


def matches_form_fields(candidate: Candidate, value: str) -> bool:
    """Direct match: the value's first word inside any channel/service entry."""
    token = _first_token(value)
    if not token:
        return False
    return any(token in entry.lower() for entry in _specialization_entries(candidate))


def matches_keywords(
    candidate: Candidate,
    key: str,
    table: Mapping[str, frozenset[str]],
) -> bool:
    """Keyword match: any associated phrase inside the candidate's free text.

    Unknown keys never match.
    """
    phrases = table.get(key.strip().lower())
    if not phrases:
        return False
    corpus = candidate_corpus(candidate)
    if not corpus:
        return False
    return any(phrase in corpus for phrase in phrases)


def matches_specialization(
    candidate: Candidate,
    specialization: str | None = None,
    specialization_enhanced: str | None = None,
) -> bool:
    """Evaluate the active specialization filter against one candidate.

    Basic mode takes a short category ("SEO", "Social"); enhanced mode takes
    a descriptive phrase. Both share the direct form-field check and differ
    only in which keyword table backs the free-text check. With neither set
    every candidate matches.
    """
    if specialization_enhanced:
        value, table = specialization_enhanced, ENHANCED_SPECIALIZATION_KEYWORDS
    elif specialization:
        value, table = specialization, SPECIALIZATION_KEYWORDS
    else:
        return True
    return matches_form_fields(candidate, value) or matches_keywords(
        candidate, value, table
    )
