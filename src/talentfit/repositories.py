"""File-backed candidate/job repositories and the score record store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from .schemas import CandidateProfile, JobRequisition


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""


class JobNotFoundError(NotFoundError):
    def __init__(self, job_id: str):
        super().__init__(f"Job not found: {job_id!r}")
        self.job_id = job_id


class CandidateNotFoundError(NotFoundError):
    def __init__(self, candidate_id: str):
        super().__init__(f"Candidate not found: {candidate_id!r}")
        self.candidate_id = candidate_id


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[CandidateProfile]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class CandidateRepository:
    """Read-only candidate store backed by a JSONL file."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def load(self) -> list[CandidateProfile]:
        candidates: list[CandidateProfile] = []
        errors: list[str] = []
        seen: set[str] = set()
        with self._path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected an object")
                    continue
                try:
                    candidate = CandidateProfile.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                # first record wins; ids key the ranking and the score records
                if candidate.candidate_id in seen:
                    errors.append(f"line {idx}: duplicate candidate_id {candidate.candidate_id!r}")
                    continue
                seen.add(candidate.candidate_id)
                candidates.append(candidate)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates

    def get(self, candidate_id: str) -> CandidateProfile:
        for candidate in self._load_tolerant():
            if candidate.candidate_id == candidate_id:
                return candidate
        raise CandidateNotFoundError(candidate_id)

    def list_pool(self, exclude_statuses: Iterable[str] = ("not_looking",)) -> list[CandidateProfile]:
        """Return the rankable pool, dropping candidates with an excluded status.

        Load problems raise :class:`CandidateLoadError` whose ``partial`` is
        the already filtered pool.
        """
        excluded = set(exclude_statuses)
        try:
            candidates = self.load()
        except CandidateLoadError as exc:
            raise CandidateLoadError(exc.errors, _filter_pool(exc.partial, excluded)) from exc
        return _filter_pool(candidates, excluded)

    def _load_tolerant(self) -> list[CandidateProfile]:
        try:
            return self.load()
        except CandidateLoadError as exc:
            return exc.partial


class JobRepository:
    """Read-only job store backed by a JSON file of one job or a list of jobs."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def load(self) -> list[JobRequisition]:
        with self._path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid job JSON: {exc}") from exc
        records = data if isinstance(data, list) else [data]
        return [JobRequisition.model_validate(record) for record in records]

    def get(self, job_id: str) -> JobRequisition:
        for job in self.load():
            if job.job_id == job_id:
                return job
        raise JobNotFoundError(job_id)


class ScoreRecordStore:
    """Append-only score record log writing JSON lines."""

    def __init__(self, path: Path):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict[str, Any]) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")

    def read(self) -> list[dict[str, Any]]:
        if not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]


def _filter_pool(candidates: list[CandidateProfile], excluded: set[str]) -> list[CandidateProfile]:
    return [candidate for candidate in candidates if candidate.availability_status not in excluded]
