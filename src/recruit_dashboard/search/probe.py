"""Match expanded search terms against a candidate's searchable text fields."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from recruit_dashboard.models.candidate import Candidate

FORM_LIST_FIELDS = ("marketingChannels", "marketingServices", "handsOnExpertise")


def as_strings(value: Any) -> list[str]:
    """Coerce a loosely-typed form value to a list of strings.

    ``None`` and non-text values give an empty list; a bare string counts as
    a single entry.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return []


def searchable_fields(candidate: Candidate) -> Iterator[str]:
    """Yield every searchable text field, cheapest first."""
    yield from as_strings(candidate.first_name)
    yield from as_strings(candidate.last_name)
    yield from as_strings(candidate.email)
    form = candidate.form_data or {}
    for key in FORM_LIST_FIELDS:
        yield from as_strings(form.get(key))
    for document in candidate.documents:
        yield from as_strings(document.extracted_content)
    yield from as_strings(candidate.scraped_content)
    analysis = candidate.candidate_analysis
    if analysis is not None:
        yield from as_strings(analysis.strengths)
        yield from as_strings(analysis.weaknesses)
        yield from as_strings(analysis.fit_assessment)


def matches_any(candidate: Candidate, terms: Iterable[str]) -> bool:
    """True if any term is a case-insensitive substring of any searchable field."""
    lowered_terms = [term.lower() for term in terms]
    if not lowered_terms:
        return False
    for text in searchable_fields(candidate):
        haystack = text.lower()
        if any(term in haystack for term in lowered_terms):
            return True
    return False
