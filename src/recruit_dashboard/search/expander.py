"""Expand a free-text search query into the set of terms to look for."""

from __future__ import annotations

from typing import Mapping

from recruit_dashboard.search.keywords import TERM_EXPANSIONS


def expand_query(
    query: str,
    table: Mapping[str, frozenset[str]] = TERM_EXPANSIONS,
) -> set[str]:
    """Return the lowercased query plus the phrases of every seed it contains.

    Seeds match as substrings of the query, so "leads" picks up the
    expansions of "lead". The raw query is always part of the result.
    """
    lowered = (query or "").lower()
    terms = {lowered}
    for seed, phrases in table.items():
        if seed in lowered:
            terms.update(phrases)
    return terms
