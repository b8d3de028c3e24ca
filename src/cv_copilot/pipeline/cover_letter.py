"""Rule-based cover letter assembly."""

from __future__ import annotations

from cv_copilot.analysis.extractors import contains_skill
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import DEFAULT_INDUSTRY, JobAnalysis

CLOSING = (
    "I would welcome the opportunity to discuss how my skills and experience can "
    "contribute to your team's success. Thank you for considering my application."
)
SIGNATURE = "Best regards,\n[Your Name]"


def _sentence(text: str) -> str:
    text = text.strip()
    return text if text.endswith((".", "!", "?")) else f"{text}."


def matching_technologies(cv: CVAnalysis, job: JobAnalysis) -> list[str]:
    """CV technologies that cover a required skill, matched the same way as the report."""
    return [
        tech
        for tech in cv.experience.technologies
        if any(contains_skill([tech], skill) for skill in job.required_skills)
    ]


def relevant_achievements(cv: CVAnalysis, job: JobAnalysis) -> list[str]:
    """CV achievements that mention a required skill."""
    return [
        achievement
        for achievement in cv.experience.achievements
        if any(contains_skill([achievement], skill) for skill in job.required_skills)
    ]


def build_cover_letter(job: JobAnalysis, cv: CVAnalysis, personal_touch: str = "") -> str:
    matched = matching_technologies(cv, job)

    opening = (
        f"I am writing to express my strong interest in the {job.role_title} position "
        f"at {job.company_name}."
    )
    if matched:
        opening += (
            f" With hands-on experience in {' and '.join(matched[:2])}, I am confident I can "
            "contribute to your team from day one."
        )
    paragraphs = ["Dear Hiring Manager,", opening]

    achievements = relevant_achievements(cv, job)[:2]
    if achievements:
        body = f"In my recent work, I {_sentence(achievements[0].lower())}"
        if len(achievements) > 1:
            body += f" I also {_sentence(achievements[1].lower())}"
        paragraphs.append(body)

    if matched:
        tech = (
            f"My technical expertise in {', '.join(matched[:4])} aligns closely with the "
            "requirements of this role."
        )
        if cv.experience.metrics:
            tech += (
                " I focus on measurable outcomes, and my work has delivered results such as "
                f"{cv.experience.metrics[0]}."
            )
        paragraphs.append(tech)

    if job.industry != DEFAULT_INDUSTRY:
        paragraphs.append(
            f"I am particularly drawn to the {job.industry} space and excited about the chance "
            f"to help {job.company_name} build on its work there."
        )

    if personal_touch.strip():
        paragraphs.append(personal_touch)

    paragraphs += [CLOSING, SIGNATURE]
    return "\n\n".join(paragraphs)
