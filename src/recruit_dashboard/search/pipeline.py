"""Filter and sort the in-memory candidate list.

Both steps are pure: they read the candidates and the filter state and
return a new list. Sorting always runs after filtering.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from typing import Any, Callable

from recruit_dashboard.models.candidate import Candidate
from recruit_dashboard.models.filters import FilterState, SortKey, SortOrder
from recruit_dashboard.search.expander import expand_query
from recruit_dashboard.search.probe import matches_any
from recruit_dashboard.search.rates import candidate_rate, rate_in_bucket
from recruit_dashboard.search.specialization import matches_specialization


def _in_score_range(candidate: Candidate, state: FilterState) -> bool:
    score = candidate.overall_score
    if score is None:
        return False
    if state.score_min is not None and score < state.score_min:
        return False
    if state.score_max is not None and score > state.score_max:
        return False
    return True


def build_predicates(state: FilterState) -> list[Callable[[Candidate], bool]]:
    """One predicate per active filter; an empty list keeps everything."""
    predicates: list[Callable[[Candidate], bool]] = []

    if state.search:
        terms = expand_query(state.search)
        predicates.append(lambda c: matches_any(c, terms))

    if state.specialization or state.specialization_enhanced:
        predicates.append(
            lambda c: matches_specialization(
                c,
                specialization=state.specialization,
                specialization_enhanced=state.specialization_enhanced,
            )
        )

    if state.rate_range is not None:
        bucket = state.rate_range
        predicates.append(lambda c: rate_in_bucket(candidate_rate(c), bucket))

    if state.status:
        predicates.append(lambda c: c.status == state.status)

    if state.looking_for:
        predicates.append(lambda c: c.looking_for == state.looking_for)

    if state.score_min is not None or state.score_max is not None:
        predicates.append(lambda c: _in_score_range(c, state))

    return predicates


def filter_candidates(
    candidates: Iterable[Candidate],
    state: FilterState | None = None,
) -> list[Candidate]:
    """Keep the candidates that pass every active filter in ``state``."""
    if state is None:
        return list(candidates)
    predicates = build_predicates(state)
    return [c for c in candidates if all(p(c) for p in predicates)]


def _name_key(value: str | None) -> tuple[str, str]:
    # Accent-insensitive primary key, accent-aware tiebreak.
    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), text.casefold())


def sort_key(sort_by: SortKey) -> Callable[[Candidate], Any]:
    if sort_by == "overall_score":
        return lambda c: c.overall_score or 0
    if sort_by == "first_name":
        return lambda c: _name_key(c.first_name)
    if sort_by == "last_name":
        return lambda c: _name_key(c.last_name)
    if sort_by == "created_at":
        return lambda c: c.created_at.timestamp()
    raise ValueError(f"Unknown sort key: {sort_by}")


def sort_candidates(
    candidates: Iterable[Candidate],
    sort_by: SortKey = "created_at",
    sort_order: SortOrder = "desc",
) -> list[Candidate]:
    """Stable sort; equal keys keep their input order in either direction."""
    return sorted(
        candidates,
        key=sort_key(sort_by),
        reverse=sort_order == "desc",
    )


def apply_filters(
    candidates: Iterable[Candidate],
    state: FilterState,
) -> list[Candidate]:
    """Filter, then sort by the state's sort key and order."""
    return sort_candidates(
        filter_candidates(candidates, state),
        sort_by=state.sort_by,
        sort_order=state.sort_order,
    )
