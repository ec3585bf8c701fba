"""Shared test fixtures."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from recruit_dashboard.models.candidate import (
    Candidate,
    CandidateAnalysis,
    CandidateDocument,
)

BASE_TIME = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_candidate(
    id: str = "c1",
    *,
    first_name: str | None = "Ana",
    last_name: str | None = "Lopez",
    email: str | None = None,
    status: str = "analyzed",
    looking_for: str = "freelance",
    form_data: dict | None = None,
    scraped_content: str | None = None,
    score: float | None = None,
    strengths: list[str] | None = None,
    weaknesses: list[str] | None = None,
    fit_assessment: str | None = None,
    documents: list[str] | None = None,
    days_ago: int = 0,
    with_analysis: bool | None = None,
) -> Candidate:
    analysis = None
    if with_analysis or (
        with_analysis is None
        and any(v is not None for v in (score, strengths, weaknesses, fit_assessment))
    ):
        analysis = CandidateAnalysis(
            overall_score=score,
            strengths=strengths,
            weaknesses=weaknesses,
            fit_assessment=fit_assessment,
        )
    return Candidate(
        id=id,
        created_at=BASE_TIME - timedelta(days=days_ago),
        first_name=first_name,
        last_name=last_name,
        email=email if email is not None else f"{id}@example.com",
        status=status,
        looking_for=looking_for,
        form_data=form_data or {},
        scraped_content=scraped_content,
        candidate_analysis=analysis,
        documents=[
            CandidateDocument(id=f"{id}-doc{i}", extracted_content=text)
            for i, text in enumerate(documents or [])
        ],
    )


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def ana() -> Candidate:
    return make_candidate(
        "ana",
        first_name="Ana",
        last_name="Lopez",
        form_data={
            "marketingServices": ["SEO/SEM & Performance"],
            "desiredSalary": "$45,000",
        },
        score=82,
    )


@pytest.fixture
def sample_candidates() -> list[Candidate]:
    return [
        make_candidate(
            "c1",
            first_name="Ana",
            last_name="Lopez",
            looking_for="freelance",
            status="analyzed",
            form_data={
                "marketingChannels": ["Social Media Advertising"],
                "marketingServices": ["SEO/SEM & Performance"],
                "handsOnExpertise": ["Google Ads", "Looker Studio"],
                "hourlyRate": "$60/hr",
                "communityParticipation": True,
            },
            score=82,
            strengths=["Strong paid social background"],
            days_ago=1,
        ),
        make_candidate(
            "c2",
            first_name="bruno",
            last_name="Keller",
            looking_for="fulltime",
            status="pending",
            form_data={"desiredSalary": "$85,000"},
            scraped_content="Led lead generation campaigns for B2B SaaS.",
            days_ago=3,
        ),
        make_candidate(
            "c3",
            first_name="Chloé",
            last_name="Dubois",
            looking_for="fulltime",
            status="analyzed",
            form_data={
                "marketingServices": ["Email Marketing & Automation"],
                "desiredSalary": "120k",
            },
            score=91,
            fit_assessment="Excellent lifecycle marketer.",
            documents=["Built Klaviyo flows for 40 ecommerce brands."],
            days_ago=2,
        ),
        make_candidate(
            "c4",
            first_name="Dev",
            last_name="Patel",
            looking_for="freelance",
            status="failed",
            form_data={"marketingChannels": ["Content"], "desiredSalary": "$30,000"},
            score=58,
            days_ago=5,
        ),
    ]


@pytest.fixture
def store_rows() -> list[dict]:
    """Application rows as the PostgREST endpoint returns them."""
    return [
        {
            "id": "app-1",
            "created_at": "2025-03-02T10:00:00+00:00",
            "updated_at": "2025-03-02T10:05:00+00:00",
            "first_name": "Ana",
            "last_name": "Lopez",
            "email": "ana@example.com",
            "linkedin_url": "https://linkedin.com/in/ana",
            "status": "analyzed",
            "looking_for": "freelance",
            "form_data": {
                "marketingServices": ["SEO/SEM & Performance"],
                "desiredSalary": "$45,000",
            },
            "scraped_content": None,
            "candidate_analysis": [
                {
                    "id": "an-1",
                    "application_id": "app-1",
                    "overall_score": 82,
                    "category_scores": {"technical_skills": 85, "communication": 78},
                    "strengths": ["SEO audits"],
                    "weaknesses": [],
                    "fit_assessment": "Solid SEO strategy development experience.",
                    "created_at": "2025-03-02T10:05:00+00:00",
                }
            ],
            "documents": [
                {
                    "id": "doc-1",
                    "application_id": "app-1",
                    "file_type": "application/pdf",
                    "original_filename": "ana_cv.pdf",
                    "extracted_content": "Technical SEO, content audits",
                    "processing_status": "completed",
                }
            ],
        },
        {
            "id": "app-2",
            "created_at": "2025-03-01T08:00:00+00:00",
            "first_name": "Bruno",
            "last_name": "Keller",
            "email": "bruno@example.com",
            "status": "pending",
            "looking_for": "fulltime",
            "form_data": {"hourlyRate": "$70"},
            "candidate_analysis": [],
            "documents": None,
        },
    ]


@pytest.fixture
def candidates_file(tmp_path, store_rows) -> Path:
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps(store_rows), encoding="utf-8")
    return path
