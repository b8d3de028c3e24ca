"""Formats suggestions and analyses into the human-readable CV report."""

from __future__ import annotations

from cv_copilot.analysis.extractors import contains_skill
from cv_copilot.config import ReportConfig
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import JobAnalysis
from cv_copilot.models.suggestion import SpecificSuggestion

NEXT_STEPS = (
    "Apply the high-priority changes above first",
    "Mirror the job posting's terminology in your summary and experience bullets",
    "Quantify every achievement you can with numbers, percentages or timeframes",
    "Re-read the final CV against the job requirements before submitting",
)


def missing_keywords(cv: CVAnalysis, job: JobAnalysis, limit: int = 3) -> list[str]:
    """Job keywords that appear in none of the CV's sections."""
    cv_text = "\n".join(section.content for section in cv.sections).lower()
    return [kw for kw in job.keywords if kw.lower() not in cv_text][:limit]


def build_report(
    cv: CVAnalysis,
    job: JobAnalysis,
    suggestions: list[SpecificSuggestion],
    config: ReportConfig | None = None,
) -> str:
    cfg = config or ReportConfig()
    high = [s for s in suggestions if s.priority == "high"][: cfg.max_high_priority]
    medium = [s for s in suggestions if s.priority == "medium"][: cfg.max_medium_priority]

    parts = [f"# CV Enhancement Suggestions: {job.role_title} at {job.company_name}", ""]

    if high:
        parts += ["## High Priority Improvements", ""]
        for i, s in enumerate(high, 1):
            parts += [
                f"{i}. **{s.category}**",
                f'   Current: "{s.original}"',
                f'   Improved: "{s.suggested}"',
                f"   Why: {s.reasoning}",
                "",
            ]

    if medium:
        parts += ["## Additional Suggestions", ""]
        for i, s in enumerate(medium, 1):
            parts += [f"{i}. **{s.category}**: {s.suggested}", f"   {s.reasoning}", ""]

    if not high and not medium:
        parts += ["No specific improvements found. Your CV already lines up well with this posting.", ""]

    matched = [skill for skill in job.required_skills if contains_skill(cv.skills.technical, skill)]
    technologies = ", ".join(cv.experience.technologies[:5]) or "none detected"
    keywords = ", ".join(missing_keywords(cv, job, cfg.max_missing_keywords)) or "none"
    parts += [
        "## Analysis Summary",
        "",
        f"- Required skills in the job posting: {len(job.required_skills)}",
        f"- Your matching technical skills: {len(matched)}",
        f"- Experience level: {job.experience_level}",
        f"- Industry: {job.industry}",
        f"- Top technologies in your CV: {technologies}",
        f"- Missing keywords to consider: {keywords}",
        "",
        "## Next Steps",
        "",
    ]
    parts += [f"{i}. {step}" for i, step in enumerate(NEXT_STEPS, 1)]
    return "\n".join(parts)
