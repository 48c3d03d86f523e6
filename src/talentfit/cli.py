"""Typer CLI entrypoint for candidate shortlisting."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from dependency_injector import providers
from pydantic import ValidationError

from .container import ScoringContainer, create_container
from .logging import configure_logging
from .repositories import CandidateRepository, JobRepository, NotFoundError, ScoreRecordStore
from .schemas import ScoringWeights
from .schemas.config import load_config

app = typer.Typer(help="Candidate fit scoring and shortlisting CLI.")


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle)
    try:
        return load_config(loaded).to_settings()
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_hint="config") from exc


def _parse_weights(values: list[str] | None) -> dict[str, float] | None:
    if not values:
        return None
    overrides: dict[str, float] = {}
    for item in values:
        name, sep, raw = item.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected name=value, got {item!r}", param_hint="weight")
        try:
            overrides[name.strip()] = float(raw)
        except ValueError as exc:
            raise typer.BadParameter(f"Weight {name!r} is not a number", param_hint="weight") from exc
    try:
        ScoringWeights.from_overrides(overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="weight") from exc
    return overrides


def _build_container(config: Path | None, log_level: str) -> ScoringContainer:
    settings = _load_settings(config)
    configure_logging(log_level)
    return create_container(settings=settings)


def _emit(payload: dict[str, Any], output: Path | None) -> None:
    rendered = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(rendered)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")


@app.command()
def shortlist(
    job_id: str = typer.Option(..., help="Job identifier to rank candidates for."),
    jobs: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Jobs JSON path."),
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."),
    records: Optional[Path] = typer.Option(None, dir_okay=False, help="Score record log (JSONL) to append to."),
    limit: Optional[int] = typer.Option(None, min=1, help="Number of candidates to return."),
    weight: Optional[List[str]] = typer.Option(None, help="Weight override as name=value; repeatable."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, resolve_path=True, help="Output JSON path."),
    percent: bool = typer.Option(False, help="Render scores as rounded percentages."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Rank the active candidate pool for a job."""
    overrides = _parse_weights(weight)
    container = _build_container(config, log_level)
    if records:
        container.record_store.override(providers.Object(ScoreRecordStore(records)))

    service = container.shortlist_service(
        jobs=JobRepository(jobs),
        candidates=CandidateRepository(candidates),
    )
    try:
        result = service.shortlist(job_id, weights=overrides, limit=limit)
    except NotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _emit(result.to_dict(percent=percent), output)
    if output is not None:
        typer.echo(f"Shortlisted {len(result.entries)} of {result.pool_size} candidates. Results saved to {output}.")


@app.command()
def score(
    job_id: str = typer.Option(..., help="Job identifier."),
    candidate_id: str = typer.Option(..., help="Candidate identifier."),
    jobs: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Jobs JSON path."),
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."),
    weight: Optional[List[str]] = typer.Option(None, help="Weight override as name=value; repeatable."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, resolve_path=True, help="Output JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score a single candidate against a job."""
    overrides = _parse_weights(weight)
    container = _build_container(config, log_level)
    service = container.shortlist_service(
        jobs=JobRepository(jobs),
        candidates=CandidateRepository(candidates),
    )
    try:
        result = service.score_candidate(job_id, candidate_id, weights=overrides)
    except NotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _emit(result.to_dict(), output)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
