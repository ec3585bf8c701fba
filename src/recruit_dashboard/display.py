"""Formatting helpers for candidate rows and detail views."""

from __future__ import annotations

import re
from datetime import datetime

from recruit_dashboard.models.candidate import Candidate
from recruit_dashboard.search.probe import as_strings

NOT_SPECIFIED = "Not specified"

_CATEGORY_PREFIX = re.compile(
    r"^(Content Marketing & |Social Media |Email Marketing & |SEO/SEM & |Brand & |Marketing |& )"
)


def display_rate(candidate: Candidate) -> str:
    """Rate column text. Prefers hourlyRate, unlike bucketing."""
    form = candidate.form_data or {}
    return str(form.get("hourlyRate") or form.get("desiredSalary") or NOT_SPECIFIED)


def specialization_labels(candidate: Candidate, limit: int = 3) -> list[str]:
    """Short chip labels from the first channel/service entries."""
    form = candidate.form_data or {}
    entries = as_strings(form.get("marketingChannels")) + as_strings(
        form.get("marketingServices")
    )
    return [_CATEGORY_PREFIX.sub("", entry, count=1).strip() for entry in entries[:limit]]


def key_skills(candidate: Candidate, limit: int = 2) -> list[str]:
    form = candidate.form_data or {}
    return [skill.strip() for skill in as_strings(form.get("handsOnExpertise"))[:limit]]


def looking_for_label(candidate: Candidate) -> str:
    return "Full-time" if candidate.looking_for == "fulltime" else "Freelance"


def community_label(candidate: Candidate) -> str:
    form = candidate.form_data or {}
    return "Yes" if form.get("communityParticipation") else "No"


def category_label(key: str) -> str:
    return key.replace("_", " ", 1)


def format_score(score: float | None) -> str:
    if score is None:
        return "N/A"
    return f"{score:g}"


def format_date(value: datetime) -> str:
    """e.g. "Mar 4, 2025"."""
    return f"{value:%b} {value.day}, {value.year}"


def format_datetime(value: datetime) -> str:
    """e.g. "Mar 4, 2025, 09:05 AM"."""
    return f"{format_date(value)}, {value:%I:%M %p}"
