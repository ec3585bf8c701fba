"""Export helpers for candidate submissions."""
from recruit_dashboard.export.submission import (
    build_submission_snapshot,
    submission_to_json,
)

__all__ = ["build_submission_snapshot", "submission_to_json"]
