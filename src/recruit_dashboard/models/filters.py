"""Filter and sort state for the candidate list."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from recruit_dashboard.models.candidate import LookingFor, Status

SortKey = Literal["created_at", "overall_score", "first_name", "last_name"]
SortOrder = Literal["asc", "desc"]


class RateBucket(str, Enum):
    """Compensation buckets, valued by the option strings the dashboard sends."""

    B0_30K = "0-30000"
    B30_50K = "30000-50000"
    B50_75K = "50000-75000"
    B75_100K = "75000-100000"
    B100K_PLUS = "100000+"
    UNKNOWN = "unknown"


class FilterState(BaseModel):
    """Ephemeral dashboard filter state. Every field is optional."""

    search: str = ""
    status: Status | None = None
    looking_for: LookingFor | None = None
    specialization: str | None = None
    specialization_enhanced: str | None = None
    rate_range: RateBucket | None = None
    score_min: float | None = None
    score_max: float | None = None
    sort_by: SortKey = "created_at"
    sort_order: SortOrder = "desc"

    model_config = {"frozen": True}

    @field_validator(
        "status",
        "looking_for",
        "specialization",
        "specialization_enhanced",
        "rate_range",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value):
        # select boxes send "" for "All ..."
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("search", mode="before")
    @classmethod
    def _none_search_is_empty(cls, value):
        return "" if value is None else value

    @model_validator(mode="after")
    def _check_exclusive(self) -> FilterState:
        if self.specialization and self.specialization_enhanced:
            raise ValueError(
                "specialization and specialization_enhanced are mutually exclusive"
            )
        if self.rate_range is RateBucket.UNKNOWN:
            raise ValueError("rate_range 'unknown' cannot be used as a filter")
        return self

    def with_specialization(self, value: str | None) -> FilterState:
        """Select a basic specialization, clearing any enhanced one."""
        return self.model_copy(
            update={"specialization": value or None, "specialization_enhanced": None}
        )

    def with_enhanced_specialization(self, value: str | None) -> FilterState:
        """Select an enhanced specialization, clearing any basic one."""
        return self.model_copy(
            update={"specialization_enhanced": value or None, "specialization": None}
        )

    def fetch_key(self) -> tuple[str | None, str | None]:
        """The part of the state the data store filters on."""
        return (self.status, self.looking_for)

    @property
    def is_empty(self) -> bool:
        return not (
            self.search
            or self.status
            or self.looking_for
            or self.specialization
            or self.specialization_enhanced
            or self.rate_range
            or self.score_min is not None
            or self.score_max is not None
        )
