"""CV Analyzer - segments a CV into sections and derives experience/skill facts."""

from __future__ import annotations

import logging
import re

from cv_copilot.analysis.extractors import (
    find_certifications,
    find_soft_skills,
    find_technologies,
    is_bullet,
    strip_bullet,
    unique,
)
from cv_copilot.analysis.vocabulary import (
    ACHIEVEMENT_PATTERN,
    COMPANY_MENTION_PATTERN,
    GENERIC_PHRASES,
    METRIC_PATTERN,
    ROLE_PATTERN,
    SECTION_HEADER_KEYWORDS,
    WEAK_PHRASES,
)
from cv_copilot.config import AnalysisConfig
from cv_copilot.models.cv import CVAnalysis, CVSection, ExperienceFacts, SectionType, SkillFacts

logger = logging.getLogger(__name__)

MISSING_METRICS = "Missing quantifiable achievements and metrics"
WEAK_VERBS = "Using weak action verbs instead of strong impact-focused verbs"
MISSING_SUMMARY = "Missing professional summary or objective section"
GENERIC_LANGUAGE = "Contains generic phrases that lack specificity"


def classify_header(line: str) -> SectionType | None:
    """Return the section type a line announces, or None for ordinary content."""
    normalized = re.sub(r"[^\w\s]", "", line.lower())
    for section_type, keywords in SECTION_HEADER_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return section_type  # type: ignore[return-value]
    return None


def split_sections(cv_text: str) -> list[CVSection]:
    """Partition the CV line-wise into typed sections.

    Lines before the first recognised header belong to no section and are
    dropped. Blank lines are ignored and every kept line is stripped.
    """
    sections: list[CVSection] = []
    current_type: SectionType | None = None
    current_lines: list[str] = []

    def _close() -> None:
        if current_type is not None:
            sections.append(
                CVSection(
                    type=current_type,
                    content="\n".join(current_lines),
                    bullet_points=[strip_bullet(line) for line in current_lines if is_bullet(line)],
                )
            )

    for raw_line in cv_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        header = classify_header(line)
        if header is not None:
            _close()
            current_type = header
            current_lines = []
        elif current_type is not None:
            current_lines.append(line)

    _close()
    return sections


class CVAnalyzer:
    """Turns raw CV text into a CVAnalysis."""

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or AnalysisConfig()

    def analyze(self, cv_text: str) -> CVAnalysis:
        sections = split_sections(cv_text)
        analysis = CVAnalysis(
            sections=sections,
            experience=self._experience(cv_text),
            skills=self._skills(cv_text),
            weaknesses=self._weaknesses(cv_text, sections),
        )
        logger.debug(
            "CV analysis: %d sections, %d technologies, %d achievements, %d weaknesses",
            len(analysis.sections),
            len(analysis.experience.technologies),
            len(analysis.experience.achievements),
            len(analysis.weaknesses),
        )
        return analysis

    def _experience(self, cv_text: str) -> ExperienceFacts:
        roles = unique(m.group(0).strip() for m in ROLE_PATTERN.finditer(cv_text))
        companies = unique(
            m.group(1).strip().rstrip(".,") for m in COMPANY_MENTION_PATTERN.finditer(cv_text)
        )
        metrics = unique(m.group(0).strip() for m in METRIC_PATTERN.finditer(cv_text))
        achievements = unique(m.group(1).strip() for m in ACHIEVEMENT_PATTERN.finditer(cv_text))
        return ExperienceFacts(
            roles=roles,
            companies=companies,
            achievements=achievements[: self.config.max_achievements],
            technologies=find_technologies(cv_text),
            metrics=metrics,
        )

    @staticmethod
    def _skills(cv_text: str) -> SkillFacts:
        return SkillFacts(
            technical=find_technologies(cv_text),
            soft=find_soft_skills(cv_text),
            certifications=find_certifications(cv_text),
        )

    @staticmethod
    def _weaknesses(cv_text: str, sections: list[CVSection]) -> list[str]:
        lowered = cv_text.lower()
        weaknesses = []
        if not METRIC_PATTERN.search(cv_text):
            weaknesses.append(MISSING_METRICS)
        if any(phrase in lowered for phrase in WEAK_PHRASES):
            weaknesses.append(WEAK_VERBS)
        if not any(section.type == "summary" for section in sections):
            weaknesses.append(MISSING_SUMMARY)
        if any(phrase in lowered for phrase in GENERIC_PHRASES):
            weaknesses.append(GENERIC_LANGUAGE)
        return weaknesses


def analyze_cv(cv_text: str, config: AnalysisConfig | None = None) -> CVAnalysis:
    return CVAnalyzer(config).analyze(cv_text)
