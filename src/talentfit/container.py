"""Dependency injection container for the fit scoring engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    AvailabilityScorer,
    ExperienceScorer,
    FitScorer,
    KeywordSkillMatcher,
    Ranker,
    SalaryScorer,
    SkillMatchScorer,
    TimezoneScorer,
)
from .core.ranking import DEFAULT_LIMIT, DEFAULT_MAX_WORKERS
from .core.scorers.availability import AvailabilityConfig
from .core.scorers.experience import ExperienceConfig
from .core.scorers.salary import SalaryConfig
from .core.scorers.timezone import TimezoneConfig
from .llm import create_llm_matcher
from .pipeline import DEFAULT_EXCLUDED_STATUSES, ShortlistService

_CORE_DEFAULTS = {
    "weights": None,
    "limit": DEFAULT_LIMIT,
    "max_workers": DEFAULT_MAX_WORKERS,
    "exclude_statuses": list(DEFAULT_EXCLUDED_STATUSES),
}


class ScoringContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    keyword_matcher = providers.Singleton(KeywordSkillMatcher)
    skill_matcher = providers.Singleton(KeywordSkillMatcher)

    skill_scorer = providers.Singleton(
        SkillMatchScorer,
        matcher=skill_matcher,
        fallback=keyword_matcher,
    )
    experience_scorer = providers.Singleton(ExperienceScorer)
    timezone_scorer = providers.Singleton(TimezoneScorer)
    availability_scorer = providers.Singleton(AvailabilityScorer)
    salary_scorer = providers.Singleton(SalaryScorer)

    fit_scorer = providers.Singleton(
        FitScorer,
        skill_scorer=skill_scorer,
        experience_scorer=experience_scorer,
        timezone_scorer=timezone_scorer,
        availability_scorer=availability_scorer,
        salary_scorer=salary_scorer,
        weights=config.weights,
    )

    # replaced with a ScoreRecordStore when records should be persisted
    record_store = providers.Object(None)

    ranker = providers.Factory(
        Ranker,
        scorer=fit_scorer,
        record_store=record_store,
        max_workers=config.max_workers.as_int(),
    )

    shortlist_service = providers.Factory(
        ShortlistService,
        ranker=ranker,
        default_weights=fit_scorer.provided.weights,
        default_limit=config.limit.as_int(),
        exclude_statuses=config.exclude_statuses,
    )


def create_container(*, settings: dict | None = None) -> ScoringContainer:
    """Instantiate container with optional overrides."""

    container = ScoringContainer()
    settings = settings if isinstance(settings, dict) else {}

    core_settings = settings.get("core") or {}
    container.config.from_dict({**_CORE_DEFAULTS, **core_settings})

    scorer_settings = settings.get("scorers") or {}

    if "experience" in scorer_settings:
        experience_config = ExperienceConfig(**scorer_settings["experience"])
        container.experience_scorer.override(
            providers.Singleton(ExperienceScorer, config=experience_config)
        )

    if "timezone" in scorer_settings:
        timezone_config = TimezoneConfig(**scorer_settings["timezone"])
        container.timezone_scorer.override(
            providers.Singleton(TimezoneScorer, config=timezone_config)
        )

    if "availability" in scorer_settings:
        availability_config = AvailabilityConfig(**scorer_settings["availability"])
        container.availability_scorer.override(
            providers.Singleton(AvailabilityScorer, config=availability_config)
        )

    if "salary" in scorer_settings:
        salary_config = SalaryConfig(**scorer_settings["salary"])
        container.salary_scorer.override(providers.Singleton(SalaryScorer, config=salary_config))

    llm_settings = settings.get("llm") or {}
    if llm_settings.get("enabled"):
        container.skill_matcher.override(providers.Singleton(create_llm_matcher, llm_settings))
        if "resume_excerpt_chars" in llm_settings:
            container.skill_scorer.override(
                providers.Singleton(
                    SkillMatchScorer,
                    matcher=container.skill_matcher,
                    fallback=container.keyword_matcher,
                    resume_excerpt_chars=int(llm_settings["resume_excerpt_chars"]),
                )
            )

    return container
