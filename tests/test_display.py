"""Tests for row formatting helpers."""

from datetime import datetime

from recruit_dashboard.display import (
    NOT_SPECIFIED,
    category_label,
    community_label,
    display_rate,
    format_date,
    format_datetime,
    format_score,
    key_skills,
    looking_for_label,
    specialization_labels,
)


class TestDisplayRate:
    def test_prefers_hourly_rate(self, candidate_factory):
        c = candidate_factory(form_data={"hourlyRate": "$60", "desiredSalary": "$45,000"})
        assert display_rate(c) == "$60"

    def test_falls_back_to_salary(self, ana):
        assert display_rate(ana) == "$45,000"

    def test_not_specified(self, candidate_factory):
        assert display_rate(candidate_factory()) == NOT_SPECIFIED


class TestSpecializationLabels:
    def test_prefixes_stripped(self, candidate_factory):
        c = candidate_factory(
            form_data={
                "marketingChannels": ["Social Media Advertising"],
                "marketingServices": ["SEO/SEM & Performance", "Content Marketing & Copywriting"],
            }
        )
        assert specialization_labels(c) == ["Advertising", "Performance", "Copywriting"]

    def test_limit(self, candidate_factory):
        c = candidate_factory(form_data={"marketingChannels": ["A", "B", "C", "D"]})
        assert specialization_labels(c) == ["A", "B", "C"]
        assert specialization_labels(c, limit=1) == ["A"]

    def test_none(self, candidate_factory):
        assert specialization_labels(candidate_factory()) == []


class TestLabels:
    def test_key_skills(self, candidate_factory):
        c = candidate_factory(form_data={"handsOnExpertise": [" GA4 ", "Figma", "SQL"]})
        assert key_skills(c) == ["GA4", "Figma"]

    def test_looking_for(self, candidate_factory):
        assert looking_for_label(candidate_factory(looking_for="fulltime")) == "Full-time"
        assert looking_for_label(candidate_factory(looking_for="freelance")) == "Freelance"

    def test_community(self, candidate_factory):
        assert community_label(candidate_factory(form_data={"communityParticipation": True})) == "Yes"
        assert community_label(candidate_factory()) == "No"

    def test_category_label_replaces_first_underscore(self):
        assert category_label("technical_skills") == "technical skills"
        assert category_label("data_driven_mindset") == "data driven_mindset"

    def test_format_score(self):
        assert format_score(None) == "N/A"
        assert format_score(82.0) == "82"
        assert format_score(82.5) == "82.5"


class TestDates:
    def test_format_date(self):
        assert format_date(datetime(2025, 3, 4, 9, 5)) == "Mar 4, 2025"

    def test_format_datetime(self):
        assert format_datetime(datetime(2025, 3, 4, 14, 5)) == "Mar 4, 2025, 02:05 PM"
