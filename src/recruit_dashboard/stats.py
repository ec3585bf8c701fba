"""Headline numbers for the dashboard and score banding."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from recruit_dashboard.models.candidate import Candidate

# (minimum score, band) checked top-down
SCORE_BANDS: list[tuple[int, str]] = [
    (90, "excellent"),
    (80, "strong"),
    (70, "good"),
    (60, "fair"),
]


@dataclass(frozen=True)
class DashboardStats:
    total: int
    analyzed: int
    average_score: int
    pending: int


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def average_score(candidates: Sequence[Candidate]) -> int:
    """Rounded mean over scored candidates only; 0 when none are scored."""
    scores = [c.overall_score for c in candidates if c.overall_score is not None]
    if not scores:
        return 0
    return round_half_up(sum(scores) / len(scores))


def compute_stats(candidates: Sequence[Candidate]) -> DashboardStats:
    return DashboardStats(
        total=len(candidates),
        analyzed=sum(1 for c in candidates if c.overall_score is not None),
        average_score=average_score(candidates),
        pending=sum(1 for c in candidates if c.status == "pending"),
    )


def score_band(score: float | None) -> str:
    if score is None:
        return "unscored"
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return "weak"
