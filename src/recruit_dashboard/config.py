"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_SORT_KEYS = ("created_at", "overall_score", "first_name", "last_name")


@dataclass(frozen=True)
class StoreConfig:
    url: str = ""
    applications_table: str = "applications"
    analyses_table: str = "candidate_analyses"
    documents_table: str = "candidate_documents"
    timeout: int = 30
    max_retries: int = 3

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 300:
            raise ValueError(f"store.timeout must be between 1 and 300, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(
                f"store.max_retries must be between 1 and 10, got {self.max_retries}"
            )

    @property
    def resolved_url(self) -> str:
        return (self.url or os.environ.get("SUPABASE_URL", "")).rstrip("/")


@dataclass(frozen=True)
class DashboardConfig:
    sort_by: str = "created_at"
    sort_order: str = "desc"
    specializations_shown: int = 3
    skills_shown: int = 2

    def __post_init__(self) -> None:
        if self.sort_by not in _SORT_KEYS:
            raise ValueError(f"dashboard.sort_by must be one of {_SORT_KEYS}, got {self.sort_by!r}")
        if self.sort_order not in ("asc", "desc"):
            raise ValueError(f"dashboard.sort_order must be 'asc' or 'desc', got {self.sort_order!r}")
        if self.specializations_shown < 0 or self.skills_shown < 0:
            raise ValueError("dashboard.specializations_shown and skills_shown must be >= 0")


@dataclass(frozen=True)
class CacheConfig:
    ttl_minutes: int = 15
    db_path: str = "~/.recruit-dashboard/cache.db"

    def __post_init__(self) -> None:
        if not 0 <= self.ttl_minutes <= 10080:
            raise ValueError(
                f"cache.ttl_minutes must be between 0 and 10080, got {self.ttl_minutes}"
            )

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        store=StoreConfig(**raw.get("store", {})),
        dashboard=DashboardConfig(**raw.get("dashboard", {})),
        cache=CacheConfig(**raw.get("cache", {})),
    )
