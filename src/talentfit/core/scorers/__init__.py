"""Sub-scorer implementations for the fit scoring engine."""

from .availability import AvailabilityConfig, AvailabilityScorer
from .experience import ExperienceConfig, ExperienceScorer
from .salary import SalaryConfig, SalaryScorer
from .skills import (
    KeywordMatchConfig,
    KeywordSkillMatcher,
    SkillMatcher,
    SkillMatchError,
    SkillMatchScorer,
)
from .timezone import TimezoneConfig, TimezoneScorer

__all__ = [
    "AvailabilityConfig",
    "AvailabilityScorer",
    "ExperienceConfig",
    "ExperienceScorer",
    "KeywordMatchConfig",
    "KeywordSkillMatcher",
    "SalaryConfig",
    "SalaryScorer",
    "SkillMatchError",
    "SkillMatchScorer",
    "SkillMatcher",
    "TimezoneConfig",
    "TimezoneScorer",
]
