"""Suggestion Generator - cross-references a CV and a job posting into concrete edits."""

from __future__ import annotations

import logging
import re

from cv_copilot.analysis.extractors import contains_skill
from cv_copilot.analysis.vocabulary import (
    CONTEXT_METRICS,
    DEFAULT_STRONG_VERBS,
    METRIC_CONTEXTS,
    STRONG_VERBS,
    WEAK_PHRASES,
)
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import JobAnalysis
from cv_copilot.models.suggestion import SpecificSuggestion, sort_by_priority

logger = logging.getLogger(__name__)

_DIGIT = re.compile(r"\d")


def strong_verbs_for(text: str) -> tuple[str, ...]:
    """Pick replacement verbs from the domain words a bullet mentions."""
    lowered = text.lower()
    for triggers, verbs in STRONG_VERBS:
        if any(trigger in lowered for trigger in triggers):
            return verbs
    return DEFAULT_STRONG_VERBS


def metric_context(text: str) -> str:
    lowered = text.lower()
    for context, triggers in METRIC_CONTEXTS:
        if any(trigger in lowered for trigger in triggers):
            return context
    return "general"


def suggest_metric(text: str) -> str:
    """Canned metric phrase matching what the text talks about."""
    return CONTEXT_METRICS.get(metric_context(text), CONTEXT_METRICS["general"])


class SuggestionGenerator:
    """Runs four independent checks and returns their findings, high priority first."""

    def generate(self, cv: CVAnalysis, job: JobAnalysis) -> list[SpecificSuggestion]:
        suggestions = [
            *self.experience_suggestions(cv),
            *self.skills_suggestions(cv, job),
            *self.summary_suggestions(cv, job),
            *self.achievement_suggestions(cv),
        ]
        logger.debug("Generated %d suggestions", len(suggestions))
        return sort_by_priority(suggestions)

    @staticmethod
    def experience_suggestions(cv: CVAnalysis) -> list[SpecificSuggestion]:
        section = cv.find_section("experience")
        if section is None:
            return []

        suggestions = []
        for bullet in section.bullet_points:
            if not bullet:
                continue
            lowered = bullet.lower()
            weak = next((phrase for phrase in WEAK_PHRASES if phrase in lowered), None)
            if weak:
                verb = strong_verbs_for(bullet)[0]
                suggestions.append(
                    SpecificSuggestion(
                        category="Action Verbs",
                        original=bullet,
                        suggested=re.sub(re.escape(weak), verb, bullet, flags=re.IGNORECASE),
                        reasoning=f'Replace weak verb "{weak}" with stronger action verb "{verb}" to show direct impact',
                        priority="high",
                    )
                )
            if not _DIGIT.search(bullet):
                suggestions.append(
                    SpecificSuggestion(
                        category="Quantification",
                        original=bullet,
                        suggested=f"{bullet} ({suggest_metric(bullet)})",
                        reasoning="Add specific metrics to demonstrate measurable impact",
                        priority="high",
                    )
                )
        return suggestions

    @staticmethod
    def skills_suggestions(cv: CVAnalysis, job: JobAnalysis) -> list[SpecificSuggestion]:
        technical = cv.skills.technical
        missing = [skill for skill in job.required_skills if not contains_skill(technical, skill)]
        matched = [skill for skill in job.required_skills if contains_skill(technical, skill)]

        suggestions = []
        if missing:
            section = cv.find_section("skills")
            if section is not None and section.content:
                original = f"Current skills section: {section.content[:100]}"
                if len(section.content) > 100:
                    original += "..."
            else:
                original = "No dedicated skills section found"
            suggestions.append(
                SpecificSuggestion(
                    category="Skills Alignment",
                    original=original,
                    suggested=f"Add these job-critical skills if you have experience: {', '.join(missing[:3])}",
                    reasoning="These skills are specifically mentioned as requirements in the job posting",
                    priority="high",
                )
            )
        if matched:
            suggestions.append(
                SpecificSuggestion(
                    category="Skills Priority",
                    original="Current skills order",
                    suggested=f"Reorder skills to lead with: {', '.join(matched[:5])}",
                    reasoning="Place job-relevant skills first to catch recruiter attention",
                    priority="medium",
                )
            )
        return suggestions

    @staticmethod
    def summary_suggestions(cv: CVAnalysis, job: JobAnalysis) -> list[SpecificSuggestion]:
        section = cv.find_section("summary")
        if section is None:
            highlights = [f"{job.role_title} experience"]
            if job.required_skills:
                highlights.append(" and ".join(job.required_skills[:2]))
            highlights.append("relevant achievements")
            return [
                SpecificSuggestion(
                    category="Professional Summary",
                    original="Missing professional summary",
                    suggested=f"Add a 2-3 line summary highlighting: {', '.join(highlights)}",
                    reasoning="A targeted summary immediately shows alignment with the role",
                    priority="high",
                )
            ]

        summary_text = section.content.lower()
        missing = [kw for kw in job.keywords if kw.lower() not in summary_text][:3]
        if not missing:
            return []
        return [
            SpecificSuggestion(
                category="Summary Keywords",
                original=f"Current summary: {section.content or '(empty)'}",
                suggested=f"Incorporate these job-relevant terms: {', '.join(missing)}",
                reasoning="Including job-specific keywords helps pass ATS screening",
                priority="medium",
            )
        ]

    @staticmethod
    def achievement_suggestions(cv: CVAnalysis) -> list[SpecificSuggestion]:
        suggestions = []
        for achievement in cv.experience.achievements:
            if _DIGIT.search(achievement):
                continue
            trimmed = achievement[:-1] if achievement.endswith(".") else achievement
            suggestions.append(
                SpecificSuggestion(
                    category="Achievement Quantification",
                    original=achievement,
                    suggested=f"{trimmed} - {suggest_metric(achievement)}",
                    reasoning="Add specific numbers to make achievements more impactful",
                    priority="medium",
                )
            )
        return suggestions


def generate_suggestions(cv: CVAnalysis, job: JobAnalysis) -> list[SpecificSuggestion]:
    return SuggestionGenerator().generate(cv, job)
