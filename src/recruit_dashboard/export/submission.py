"""Build the JSON snapshot of a submission that reviewers copy to the clipboard."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from recruit_dashboard.models.candidate import Candidate


def build_submission_snapshot(
    candidate: Candidate,
    *,
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    """Collect identity, form answers, analysis and document metadata."""
    analysis = candidate.candidate_analysis
    snapshot: dict[str, Any] = {
        "id": candidate.id,
        "name": candidate.full_name,
        "email": candidate.email,
        "linkedin_url": candidate.linkedin_url,
        "looking_for": candidate.looking_for,
        "status": candidate.status,
        "applied_at": candidate.created_at.isoformat(),
        "form_data": candidate.form_data,
        "analysis": (
            analysis.model_dump(
                mode="json",
                exclude_none=True,
                exclude={"id", "application_id"},
            )
            if analysis is not None
            else None
        ),
        "documents": [
            {
                "filename": doc.original_filename,
                "file_type": doc.file_type,
                "processing_status": doc.processing_status,
                "has_extracted_content": bool(doc.extracted_content),
            }
            for doc in candidate.documents
        ],
    }
    if exported_at is not None:
        snapshot["exported_at"] = exported_at.isoformat()
    return snapshot


def submission_to_json(candidate: Candidate, *, indent: int = 2) -> str:
    return json.dumps(
        build_submission_snapshot(candidate, exported_at=datetime.now()),
        indent=indent,
        ensure_ascii=False,
        default=str,
    )
