"""Keyword-expanded search, structured filters and sorting over candidates."""

from recruit_dashboard.search.expander import expand_query
from recruit_dashboard.search.pipeline import (
    apply_filters,
    filter_candidates,
    sort_candidates,
)
from recruit_dashboard.search.probe import matches_any
from recruit_dashboard.search.rates import bucket_of, parse_rate, rate_in_bucket
from recruit_dashboard.search.specialization import matches_specialization

__all__ = [
    "apply_filters",
    "bucket_of",
    "expand_query",
    "filter_candidates",
    "matches_any",
    "matches_specialization",
    "parse_rate",
    "rate_in_bucket",
    "sort_candidates",
]
