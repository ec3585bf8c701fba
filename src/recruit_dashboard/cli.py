"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from recruit_dashboard.cache.snapshot_cache import SnapshotCache
from recruit_dashboard.clients.file_store import FileStore
from recruit_dashboard.clients.store_client import StoreClient
from recruit_dashboard.config import AppConfig, load_config
from recruit_dashboard.display import (
    category_label,
    community_label,
    display_rate,
    format_datetime,
    format_score,
    key_skills,
    looking_for_label,
    specialization_labels,
)
from recruit_dashboard.export.submission import submission_to_json
from recruit_dashboard.models.candidate import Candidate
from recruit_dashboard.models.filters import FilterState
from recruit_dashboard.search.rates import bucket_of, candidate_rate, matching_buckets, rate_text
from recruit_dashboard.session import DashboardSession
from recruit_dashboard.stats import score_band

app = typer.Typer(
    name="recruit-dashboard",
    help="Review job applicants: search, filter, sort and inspect AI analysis.",
    no_args_is_help=True,
)
console = Console()

BAND_STYLES = {
    "excellent": "bold green",
    "strong": "green",
    "good": "yellow",
    "fair": "dark_orange",
    "weak": "red",
    "unscored": "dim",
}

STATUS_STYLES = {
    "analyzed": "green",
    "processing": "blue",
    "pending": "yellow",
    "failed": "red",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _cache_scope(config: AppConfig) -> str:
    store = config.store
    return "|".join(
        (store.resolved_url, store.applications_table, store.analyses_table, store.documents_table)
    )


def _open_session(
    config: AppConfig,
    file: Path | None,
    state: FilterState,
) -> DashboardSession:
    if file is not None:
        if not file.exists():
            console.print(f"[red]Candidate file not found: {file}[/red]")
            raise typer.Exit(1)
        return DashboardSession(FileStore(file), state)

    try:
        source = StoreClient(
            url=config.store.resolved_url or None,
            applications_table=config.store.applications_table,
            analyses_table=config.store.analyses_table,
            documents_table=config.store.documents_table,
            timeout=config.store.timeout,
            max_retries=config.store.max_retries,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    cache = SnapshotCache(
        db_path=config.cache.resolved_db_path,
        ttl_minutes=config.cache.ttl_minutes,
        scope=_cache_scope(config),
    )
    return DashboardSession(source, state, cache=cache)


def _load(session: DashboardSession, refresh: bool) -> None:
    asyncio.run(session.refresh(use_cache=not refresh))
    if session.last_error is not None:
        console.print(f"[red]Error fetching candidates: {session.last_error}[/red]")
        raise typer.Exit(1)


def _score_text(score: float | None) -> str:
    style = BAND_STYLES[score_band(score)]
    return f"[{style}]{format_score(score)}[/{style}]"


def _find_or_exit(session: DashboardSession, candidate_id: str) -> Candidate:
    candidate = session.find(candidate_id)
    if candidate is None:
        console.print(f"[red]No candidate with id {candidate_id}[/red]")
        raise typer.Exit(1)
    return candidate


@app.command("list")
def list_candidates(
    search: str = typer.Option("", "--search", "-s", help="Free-text search (keyword expanded)"),
    status: str = typer.Option(None, "--status", help="pending | processing | analyzed | failed"),
    looking_for: str = typer.Option(None, "--type", help="fulltime | freelance"),
    specialization: str = typer.Option(None, "--specialization", help="Basic category, e.g. SEO"),
    enhanced: str = typer.Option(None, "--enhanced", help="Enhanced specialization phrase"),
    rate: str = typer.Option(None, "--rate", help="0-30000 | 30000-50000 | 50000-75000 | 75000-100000 | 100000+"),
    min_score: float = typer.Option(None, "--min-score", help="Minimum overall score"),
    max_score: float = typer.Option(None, "--max-score", help="Maximum overall score"),
    sort_by: str = typer.Option(None, "--sort", help="created_at | overall_score | first_name | last_name"),
    sort_order: str = typer.Option(None, "--order", help="asc | desc"),
    file: Path = typer.Option(None, "--file", "-f", help="JSON export to read instead of the store"),
    refresh: bool = typer.Option(False, "--refresh", help="Bypass the snapshot cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List candidates matching the given filters."""
    _configure_logging(verbose)
    config = load_config()
    try:
        state = FilterState(
            search=search,
            status=status,
            looking_for=looking_for,
            specialization=specialization,
            specialization_enhanced=enhanced,
            rate_range=rate,
            score_min=min_score,
            score_max=max_score,
            sort_by=sort_by or config.dashboard.sort_by,
            sort_order=sort_order or config.dashboard.sort_order,
        )
    except ValidationError as exc:
        console.print(f"[red]Invalid filters:[/red] {exc}")
        raise typer.Exit(2)

    session = _open_session(config, file, state)
    _load(session, refresh)

    stats = session.stats()
    console.print(
        f"Total [bold]{stats.total}[/bold] | Analyzed [bold]{stats.analyzed}[/bold] | "
        f"Avg score {_score_text(stats.average_score if stats.analyzed else None)} | "
        f"Pending [bold]{stats.pending}[/bold]"
    )

    rows = session.visible()
    if not rows:
        if session.state.is_empty:
            hint = "The store returned no applications."
        elif session.state.search:
            hint = "Try adjusting your search terms."
        else:
            hint = "No candidates match the current filters."
        console.print(f"[yellow]No candidates found.[/yellow] {hint}")
        return

    table = Table(show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Candidate")
    table.add_column("Type")
    table.add_column("Specializations")
    table.add_column("Key Skills")
    table.add_column("Rate/Salary")
    table.add_column("Community")
    table.add_column("Score", justify="right")

    for candidate in rows:
        specs = specialization_labels(candidate, config.dashboard.specializations_shown)
        skills = key_skills(candidate, config.dashboard.skills_shown)
        table.add_row(
            candidate.id,
            f"{candidate.full_name}\n[dim]{candidate.email or ''}[/dim]",
            looking_for_label(candidate),
            ", ".join(specs) or "[dim]No specializations[/dim]",
            "\n".join(f"- {s}" for s in skills) or "[dim]No key skills listed[/dim]",
            display_rate(candidate),
            community_label(candidate),
            _score_text(candidate.overall_score),
        )
    console.print(table)
    console.print(f"[dim]{len(rows)} of {len(session.candidates)} shown[/dim]")


@app.command()
def show(
    candidate_id: str = typer.Argument(help="Application id"),
    file: Path = typer.Option(None, "--file", "-f", help="JSON export to read instead of the store"),
    refresh: bool = typer.Option(False, "--refresh", help="Bypass the snapshot cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show one candidate with analysis and documents."""
    _configure_logging(verbose)
    session = _open_session(load_config(), file, FilterState())
    _load(session, refresh)
    candidate = _find_or_exit(session, candidate_id)

    status_style = STATUS_STYLES.get(candidate.status, "white")
    console.print(
        Panel(
            f"{candidate.email or ''}\n"
            f"{looking_for_label(candidate)} | [{status_style}]{candidate.status}[/{status_style}] | "
            f"Applied {format_datetime(candidate.created_at)}\n"
            f"Score: {_score_text(candidate.overall_score)}"
            + (f"\nLinkedIn: {candidate.linkedin_url}" if candidate.linkedin_url else ""),
            title=candidate.full_name or candidate.id,
        )
    )

    analysis = candidate.candidate_analysis
    if analysis is None:
        console.print("[dim]No analysis available yet.[/dim]")
    else:
        if analysis.fit_assessment:
            console.print(Panel(analysis.fit_assessment, title="Fit Assessment"))
        for title, items, style in (
            ("Strengths", analysis.strengths, "green"),
            ("Weaknesses", analysis.weaknesses, "yellow"),
            ("Red Flags", analysis.red_flags, "red"),
            ("Next Steps", analysis.next_steps, "blue"),
        ):
            if items:
                console.print(f"\n[{style}]{title}:[/{style}]")
                for item in items:
                    console.print(f"  - {item}")
        if analysis.category_scores:
            console.print("\n[bold]Category Scores:[/bold]")
            for category, score in analysis.category_scores.items():
                value = score if isinstance(score, (int, float)) else None
                console.print(f"  {category_label(category)}: {_score_text(value)}")
        if analysis.recommendations:
            console.print(Panel(analysis.recommendations, title="Recommendations"))

    documents = asyncio.run(session.documents_for(candidate.id))
    console.print(f"\n[bold]Documents ({len(documents)}):[/bold]")
    for doc in documents:
        chars = len(doc.extracted_content or "")
        console.print(
            f"  - {doc.original_filename or doc.id} "
            f"[dim]{doc.file_type or '?'} | {doc.processing_status} | {chars} chars extracted[/dim]"
        )


@app.command()
def snapshot(
    candidate_id: str = typer.Argument(help="Application id"),
    file: Path = typer.Option(None, "--file", "-f", help="JSON export to read instead of the store"),
    output: Path = typer.Option(None, "--output", "-o", help="Write JSON here instead of stdout"),
) -> None:
    """Print the submission snapshot JSON for copy/paste."""
    session = _open_session(load_config(), file, FilterState())
    _load(session, refresh=False)
    candidate = _find_or_exit(session, candidate_id)
    text = submission_to_json(candidate)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Snapshot saved: {output}[/green]")


@app.command()
def bucket(
    candidate_id: str = typer.Argument(help="Application id"),
    file: Path = typer.Option(None, "--file", "-f", help="JSON export to read instead of the store"),
) -> None:
    """Show how a candidate's rate is parsed and bucketed."""
    session = _open_session(load_config(), file, FilterState())
    _load(session, refresh=False)
    candidate = _find_or_exit(session, candidate_id)
    matches = ", ".join(b.value for b in matching_buckets(candidate))
    console.print(
        f"raw: {rate_text(candidate)!r}\n"
        f"parsed: {candidate_rate(candidate)}\n"
        f"bucket: {bucket_of(candidate).value}\n"
        f"passes filters: {matches}"
    )


@app.command("cache-clear")
def cache_clear() -> None:
    """Delete all cached candidate snapshots."""
    config = load_config()
    cache = SnapshotCache(
        db_path=config.cache.resolved_db_path,
        ttl_minutes=config.cache.ttl_minutes,
    )
    count = cache.clear()
    console.print(f"[green]Cleared {count} cached snapshot(s)[/green]")


if __name__ == "__main__":
    app()
