"""Tests for the submission snapshot export."""

import json
from datetime import datetime

from recruit_dashboard.clients.store_client import parse_candidate_row
from recruit_dashboard.export.submission import (
    build_submission_snapshot,
    submission_to_json,
)


class TestSubmissionSnapshot:
    def test_fields(self, store_rows):
        candidate = parse_candidate_row(store_rows[0])
        snap = build_submission_snapshot(candidate)
        assert snap["id"] == "app-1"
        assert snap["name"] == "Ana Lopez"
        assert snap["form_data"]["desiredSalary"] == "$45,000"
        assert snap["analysis"]["overall_score"] == 82
        assert "id" not in snap["analysis"]
        assert snap["documents"] == [
            {
                "filename": "ana_cv.pdf",
                "file_type": "application/pdf",
                "processing_status": "completed",
                "has_extracted_content": True,
            }
        ]
        assert "exported_at" not in snap

    def test_without_analysis(self, candidate_factory):
        snap = build_submission_snapshot(candidate_factory())
        assert snap["analysis"] is None
        assert snap["documents"] == []

    def test_exported_at(self, candidate_factory):
        snap = build_submission_snapshot(
            candidate_factory(), exported_at=datetime(2025, 1, 2, 3, 4)
        )
        assert snap["exported_at"] == "2025-01-02T03:04:00"

    def test_json_text(self, store_rows):
        candidate = parse_candidate_row(store_rows[0])
        data = json.loads(submission_to_json(candidate))
        assert data["email"] == "ana@example.com"
        assert data["analysis"]["category_scores"]["technical_skills"] == 85
        assert "exported_at" in data

    def test_does_not_mutate_candidate(self, ana):
        before = ana.model_dump()
        build_submission_snapshot(ana)
        assert ana.model_dump() == before
