"""Data models for the application assistant pipeline."""

from cv_copilot.models.application import ApplicationRequest, ApplicationResults
from cv_copilot.models.cv import CVAnalysis, CVSection, ExperienceFacts, SkillFacts
from cv_copilot.models.document import FileValidation, ParseResult
from cv_copilot.models.job import JobAnalysis
from cv_copilot.models.suggestion import SpecificSuggestion

__all__ = [
    "ApplicationRequest",
    "ApplicationResults",
    "CVAnalysis",
    "CVSection",
    "ExperienceFacts",
    "FileValidation",
    "JobAnalysis",
    "ParseResult",
    "SkillFacts",
    "SpecificSuggestion",
]
