"""Job Analyzer - derives a structured profile from a job posting."""

from __future__ import annotations

import logging
import re

from cv_copilot.analysis.extractors import (
    extract_company_name,
    extract_keywords,
    extract_role_title,
    find_technologies,
    is_bullet,
    strip_bullet,
    unique,
)
from cv_copilot.analysis.vocabulary import (
    BENEFIT_HEADERS,
    ENTRY_CUES,
    EXECUTIVE_CUES,
    INDUSTRIES,
    LEAD_CUES,
    PREFERRED_HEADERS,
    REQUIRED_HEADERS,
    REQUIREMENT_HEADERS,
    RESPONSIBILITY_HEADERS,
    SENIOR_CUES,
    YEARS_EXPERIENCE_PATTERN,
)
from cv_copilot.config import AnalysisConfig
from cv_copilot.models.job import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_INDUSTRY,
    DEFAULT_ROLE_TITLE,
    ExperienceLevel,
    JobAnalysis,
)

logger = logging.getLogger(__name__)

# A capitalised, colon-terminated line without a period starts a new block.
_SPAN_BREAK = re.compile(r"^[A-Z][^.]*:$")


def _cue_pattern(cues: tuple[str, ...]) -> re.Pattern[str]:
    # Plural and -ing forms count ("graduates", "leading"); "internal" and
    # "leadership" do not.
    alternation = "|".join(re.escape(cue) for cue in cues)
    return re.compile(rf"(?<!\w)(?:{alternation})(?:s|es|ing)?(?!\w)")


_SENIOR = _cue_pattern(SENIOR_CUES)
_LEAD = _cue_pattern(LEAD_CUES)
_EXECUTIVE = _cue_pattern(EXECUTIVE_CUES)
_ENTRY = _cue_pattern(ENTRY_CUES)


def find_spans(text: str, headers: tuple[str, ...], max_lines: int = 20) -> list[str]:
    """Collect the blocks of text that follow any line mentioning one of ``headers``.

    Each span holds the header line plus up to ``max_lines`` following
    non-blank lines, stopping early at the next header-looking line.
    """
    lines = text.splitlines()
    spans = []
    for i, line in enumerate(lines):
        lowered = line.lower()
        if not any(header in lowered for header in headers):
            continue
        collected: list[str] = []
        for following in lines[i + 1 :]:
            if len(collected) >= max_lines:
                break
            stripped = following.strip()
            if not stripped:
                continue
            if _SPAN_BREAK.match(stripped):
                break
            collected.append(stripped)
        spans.append("\n".join([line.strip(), *collected]))
    return spans


class JobAnalyzer:
    """Turns raw job-posting text into a JobAnalysis."""

    def __init__(self, config: AnalysisConfig | None = None):
        self.config = config or AnalysisConfig()

    def analyze(self, job_text: str) -> JobAnalysis:
        cfg = self.config
        analysis = JobAnalysis(
            role_title=extract_role_title(job_text) or DEFAULT_ROLE_TITLE,
            company_name=extract_company_name(job_text) or DEFAULT_COMPANY_NAME,
            required_skills=self.required_skills(job_text),
            preferred_skills=self.preferred_skills(job_text),
            keywords=extract_keywords(
                job_text, min_length=4, rank_by_frequency=True, limit=cfg.max_keywords
            ),
            responsibilities=self._bullets(job_text, RESPONSIBILITY_HEADERS, cfg.max_responsibilities),
            requirements=self._bullets(job_text, REQUIREMENT_HEADERS, cfg.max_requirements),
            experience_level=self.experience_level(job_text),
            industry=determine_industry(job_text),
            benefits=self._bullets(job_text, BENEFIT_HEADERS, cfg.max_benefits),
        )
        logger.debug(
            "Job analysis: role=%r company=%r level=%s industry=%s required=%d",
            analysis.role_title,
            analysis.company_name,
            analysis.experience_level,
            analysis.industry,
            len(analysis.required_skills),
        )
        return analysis

    def required_skills(self, job_text: str) -> list[str]:
        skills = find_technologies(job_text)
        for span in find_spans(job_text, REQUIRED_HEADERS, self.config.max_span_lines):
            skills.extend(find_technologies(span))
        return unique(skills)

    def preferred_skills(self, job_text: str) -> list[str]:
        skills: list[str] = []
        for span in find_spans(job_text, PREFERRED_HEADERS, self.config.max_span_lines):
            skills.extend(find_technologies(span))
        return unique(skills)

    def _bullets(self, job_text: str, headers: tuple[str, ...], limit: int) -> list[str]:
        items = []
        for span in find_spans(job_text, headers, self.config.max_span_lines):
            for line in span.splitlines():
                if not is_bullet(line):
                    continue
                item = strip_bullet(line)
                if len(item) > self.config.min_bullet_length:
                    items.append(item)
        return unique(items)[:limit]

    def experience_level(self, job_text: str) -> ExperienceLevel:
        """Classify seniority. Rules run in order and the first hit wins."""
        text = job_text.lower()
        years = [int(m.group(1)) for m in YEARS_EXPERIENCE_PATTERN.finditer(text)]

        if _SENIOR.search(text) or (years and years[0] >= 5):
            return "senior"
        if self.config.lead_counts_as_senior:
            # Plain containment, so "leadership" counts too
            if any(cue in text for cue in LEAD_CUES):
                return "senior"
        elif _LEAD.search(text):
            return "lead"
        if _EXECUTIVE.search(text):
            return "executive"
        if _ENTRY.search(text) or any(n <= 2 for n in years):
            return "entry"
        return "mid"


def determine_industry(job_text: str) -> str:
    text = job_text.lower()
    for name, keywords in INDUSTRIES:
        if any(keyword in text for keyword in keywords):
            return name
    return DEFAULT_INDUSTRY


def analyze_job(job_text: str, config: AnalysisConfig | None = None) -> JobAnalysis:
    return JobAnalyzer(config).analyze(job_text)
