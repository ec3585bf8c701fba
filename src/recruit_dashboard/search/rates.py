"""Parse free-text compensation fields and place them in rate buckets."""

from __future__ import annotations

import re

from recruit_dashboard.models.candidate import Candidate
from recruit_dashboard.models.filters import RateBucket

_NON_DIGITS = re.compile(r"[^0-9]")

# Inclusive on both ends, open at the top. Adjacent ranges share their
# boundary value, so e.g. 30000 falls in both B0_30K and B30_50K.
BUCKET_RANGES: dict[RateBucket, tuple[int, int | None]] = {
    RateBucket.B0_30K: (0, 30_000),
    RateBucket.B30_50K: (30_000, 50_000),
    RateBucket.B50_75K: (50_000, 75_000),
    RateBucket.B75_100K: (75_000, 100_000),
    RateBucket.B100K_PLUS: (100_000, None),
}


def rate_text(candidate: Candidate) -> str:
    """Raw rate string: desiredSalary, else hourlyRate, else empty."""
    form = candidate.form_data or {}
    for key in ("desiredSalary", "hourlyRate"):
        value = form.get(key)
        if value:
            return str(value)
    return ""


def parse_rate(text: str | None) -> int:
    """Strip everything but ASCII digits and read the rest as an integer.

    Nothing left over reads as 0. "$45,000" -> 45000, "$50/hr" -> 50.
    """
    digits = _NON_DIGITS.sub("", text or "")
    return int(digits) if digits else 0


def candidate_rate(candidate: Candidate) -> int:
    return parse_rate(rate_text(candidate))


def rate_in_bucket(rate: int, bucket: RateBucket) -> bool:
    """True if ``rate`` lies within ``bucket``'s inclusive range."""
    if bucket not in BUCKET_RANGES:
        return False
    low, high = BUCKET_RANGES[bucket]
    if rate < low:
        return False
    return high is None or rate <= high


def bucket_of(candidate: Candidate) -> RateBucket:
    """Lowest bucket the candidate's rate falls in.

    Returns ``RateBucket.UNKNOWN`` when the candidate gave neither a desired
    salary nor an hourly rate. Filtering still reads such a candidate as 0.
    """
    if not rate_text(candidate):
        return RateBucket.UNKNOWN
    rate = candidate_rate(candidate)
    for bucket in BUCKET_RANGES:
        if rate_in_bucket(rate, bucket):
            return bucket
    return RateBucket.UNKNOWN


def matching_buckets(candidate: Candidate) -> list[RateBucket]:
    """Every bucket filter this candidate passes; two on a shared boundary."""
    rate = candidate_rate(candidate)
    return [bucket for bucket in BUCKET_RANGES if rate_in_bucket(rate, bucket)]
