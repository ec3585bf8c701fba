"""Data models for the recruiting dashboard."""

from recruit_dashboard.models.candidate import (
    Candidate,
    CandidateAnalysis,
    CandidateDocument,
)
from recruit_dashboard.models.filters import FilterState, RateBucket

__all__ = [
    "Candidate",
    "CandidateAnalysis",
    "CandidateDocument",
    "FilterState",
    "RateBucket",
]
