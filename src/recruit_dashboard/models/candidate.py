"""Pydantic models for applications, their AI analysis and uploaded documents."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

Status = Literal["pending", "processing", "analyzed", "failed"]
LookingFor = Literal["freelance", "fulltime"]
DocumentStatus = Literal["pending", "processing", "completed", "failed"]


class CandidateAnalysis(BaseModel):
    id: str | None = None
    application_id: str | None = None
    overall_score: float | None = Field(default=None, ge=0, le=100)
    category_scores: dict[str, Any] | None = None
    strengths: list[str] | None = None
    weaknesses: list[str] | None = None
    red_flags: list[str] | None = None
    next_steps: list[str] | None = None
    fit_assessment: str | None = None
    recommendations: str | None = None
    model_used: str | None = None
    analysis_version: str | None = None
    created_at: datetime | None = None


class CandidateDocument(BaseModel):
    id: str
    application_id: str | None = None
    file_url: str | None = None
    file_type: str | None = None
    original_filename: str | None = None
    file_size_bytes: int | None = None
    extracted_content: str | None = None
    processing_status: DocumentStatus = "pending"
    created_at: datetime | None = None


class Candidate(BaseModel):
    """One application row joined with its analysis and documents."""

    id: str
    created_at: datetime
    updated_at: datetime | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    linkedin_url: str | None = None
    status: Status = "pending"
    looking_for: LookingFor
    form_data: dict[str, Any] = Field(default_factory=dict)
    scraped_content: str | None = None
    candidate_analysis: CandidateAnalysis | None = None
    documents: list[CandidateDocument] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def overall_score(self) -> float | None:
        """Analysis score, or None when the candidate is unscored."""
        if self.candidate_analysis is None:
            return None
        return self.candidate_analysis.overall_score
