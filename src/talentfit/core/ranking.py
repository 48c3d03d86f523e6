"""Pool ranking with bounded concurrent scoring."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, Protocol

import pendulum
import structlog

from ..schemas import CandidateProfile, JobRequisition, ScoringWeights
from .scoring import FitResult, FitScorer

DEFAULT_LIMIT = 10
DEFAULT_MAX_WORKERS = 4


class RecordSink(Protocol):
    """Append-only destination for score records."""

    def append(self, record: dict[str, Any]) -> None:
        """Persist one immutable score record."""


class Ranker:
    """Scores a candidate pool against one job and keeps the top entries.

    Candidates are scored in a worker pool of at most ``max_workers``
    threads, which bounds the number of in-flight skill-match calls.
    Results are ordered by fit score descending, then candidate id
    ascending.
    """

    def __init__(
        self,
        *,
        scorer: FitScorer,
        record_store: RecordSink | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._scorer = scorer
        self._record_store = record_store
        self._max_workers = max_workers
        self._now_provider = now_provider or (lambda: pendulum.now("UTC"))
        self._logger = structlog.get_logger(__name__)

    @property
    def scorer(self) -> FitScorer:
        return self._scorer

    def rank(
        self,
        *,
        job: JobRequisition,
        candidates: Iterable[CandidateProfile],
        weights: ScoringWeights | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[FitResult]:
        if limit < 1:
            raise ValueError("limit must be at least 1")

        pool = list(candidates)
        results = self._score_pool(job, pool, weights)
        results.sort(key=lambda result: (-result.fit_score, result.candidate_id))
        top = results[:limit]

        if self._record_store is not None:
            created_at = self._now_provider().to_iso8601_string()
            for result in top:
                record = result.to_dict()
                record["created_at"] = created_at
                self._record_store.append(record)

        fallback_count = sum(1 for result in results if result.skill_match_source == "keyword")
        self._logger.info(
            "ranking.completed",
            job_id=job.job_id,
            pool_size=len(pool),
            returned=len(top),
            keyword_skill_scores=fallback_count,
        )
        return top

    def _score_pool(
        self,
        job: JobRequisition,
        pool: list[CandidateProfile],
        weights: ScoringWeights | None,
    ) -> list[FitResult]:
        if not pool:
            return []

        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(pool)),
            thread_name_prefix="fit-score",
        )
        try:
            futures = [
                executor.submit(self._scorer.score, candidate=candidate, job=job, weights=weights)
                for candidate in pool
            ]
            results = [future.result() for future in futures]
        except BaseException:
            # abandon queued and in-flight work; nothing from this request is kept
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown(wait=True)
        return results
