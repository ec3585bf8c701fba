"""Tests for rate parsing and bucketing."""

import pytest

from recruit_dashboard.models.filters import RateBucket
from recruit_dashboard.search.rates import (
    bucket_of,
    candidate_rate,
    matching_buckets,
    parse_rate,
    rate_in_bucket,
    rate_text,
)


class TestParseRate:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$45,000", 45000),
            ("45000", 45000),
            ("$50/hr", 50),
            ("USD 120 000 per year", 120000),
            ("negotiable", 0),
            ("", 0),
            (None, 0),
            ("١٢٣", 0),  # non-ASCII digits are stripped
        ],
    )
    def test_parse(self, text, expected):
        assert parse_rate(text) == expected

    def test_range_text_concatenates_digits(self):
        """'40-50k' keeps every digit: 4050."""
        assert parse_rate("40-50k") == 4050


class TestRateText:
    def test_prefers_desired_salary(self, candidate_factory):
        c = candidate_factory(form_data={"desiredSalary": "$45,000", "hourlyRate": "$60"})
        assert rate_text(c) == "$45,000"

    def test_falls_back_to_hourly_rate(self, candidate_factory):
        c = candidate_factory(form_data={"desiredSalary": "", "hourlyRate": "$60"})
        assert rate_text(c) == "$60"
        assert candidate_rate(c) == 60

    def test_missing(self, candidate_factory):
        assert rate_text(candidate_factory()) == ""
        assert candidate_rate(candidate_factory()) == 0


class TestRateInBucket:
    def test_inside(self):
        assert rate_in_bucket(45000, RateBucket.B30_50K)
        assert not rate_in_bucket(45000, RateBucket.B0_30K)

    def test_open_top(self):
        assert rate_in_bucket(10_000_000, RateBucket.B100K_PLUS)

    @pytest.mark.parametrize(
        "rate,lower,upper",
        [
            (30000, RateBucket.B0_30K, RateBucket.B30_50K),
            (50000, RateBucket.B30_50K, RateBucket.B50_75K),
            (75000, RateBucket.B50_75K, RateBucket.B75_100K),
            (100000, RateBucket.B75_100K, RateBucket.B100K_PLUS),
        ],
    )
    def test_boundary_values_match_both_adjacent_buckets(self, rate, lower, upper):
        """Known ambiguity: shared boundaries are inclusive on both sides."""
        assert rate_in_bucket(rate, lower)
        assert rate_in_bucket(rate, upper)

    def test_unknown_bucket_never_matches(self):
        assert not rate_in_bucket(0, RateBucket.UNKNOWN)


class TestBucketOf:
    def test_basic(self, ana):
        assert bucket_of(ana) == RateBucket.B30_50K

    def test_boundary_returns_lowest(self, candidate_factory):
        c = candidate_factory(form_data={"desiredSalary": "$30,000"})
        assert bucket_of(c) == RateBucket.B0_30K
        assert matching_buckets(c) == [RateBucket.B0_30K, RateBucket.B30_50K]

    def test_unparseable_is_lowest_bucket(self, candidate_factory):
        c = candidate_factory(form_data={"desiredSalary": "depends on scope"})
        assert bucket_of(c) == RateBucket.B0_30K

    def test_no_rate_given_is_unknown(self, candidate_factory):
        c = candidate_factory()
        assert bucket_of(c) == RateBucket.UNKNOWN
        # still filters as 0
        assert matching_buckets(c) == [RateBucket.B0_30K]

    @pytest.mark.parametrize("value", ["", "   ", "$", "∞", "1e9", "--", "0"])
    def test_total(self, candidate_factory, value):
        c = candidate_factory(form_data={"hourlyRate": value})
        assert isinstance(bucket_of(c), RateBucket)

    def test_non_string_rate(self, candidate_factory):
        c = candidate_factory(form_data={"desiredSalary": 95000})
        assert bucket_of(c) == RateBucket.B75_100K
