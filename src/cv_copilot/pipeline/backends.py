"""Interchangeable generators for the two user-facing artifacts.

``RuleBasedBackend`` is the deterministic default. ``LLMBackend`` asks Claude
for the same artifacts and falls back to the rule-based path whenever the
call fails or returns nothing usable.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from cv_copilot.clients.llm_client import LLMClient
from cv_copilot.config import AppConfig
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import JobAnalysis
from cv_copilot.models.suggestion import SpecificSuggestion, sort_by_priority
from cv_copilot.pipeline.cover_letter import build_cover_letter
from cv_copilot.pipeline.suggestion_generator import SuggestionGenerator

logger = logging.getLogger(__name__)

SUGGEST_SYSTEM = """\
You are an expert CV reviewer. Compare a candidate's CV with a job posting and
propose specific, actionable edits to the CV.

Rules:
1. Quote the CV text you want to change in "original"
2. Give the rewritten text in "suggested"
3. Explain the change in one sentence in "reasoning"
4. Never invent experience the candidate does not have
5. priority is "high", "medium" or "low"

Reply with a JSON array only:
[{"category": "...", "original": "...", "suggested": "...", "reasoning": "...", "priority": "high|medium|low"}]"""

COVER_LETTER_SYSTEM = """\
You write concise, professional cover letters. Use only facts present in the
candidate's CV. Start with "Dear Hiring Manager," and end with
"Best regards,\\n[Your Name]". Reply with the letter text only."""


class RuleBasedBackend:
    """Pattern-matching generator; pure and deterministic."""

    name = "rule"

    def __init__(self, generator: SuggestionGenerator | None = None):
        self.generator = generator or SuggestionGenerator()

    async def suggest(
        self, cv: CVAnalysis, job: JobAnalysis, cv_text: str = "", job_text: str = ""
    ) -> list[SpecificSuggestion]:
        return self.generator.generate(cv, job)

    async def cover_letter(
        self,
        job: JobAnalysis,
        cv: CVAnalysis,
        personal_touch: str = "",
        cv_text: str = "",
        job_text: str = "",
    ) -> str:
        return build_cover_letter(job, cv, personal_touch)


class LLMBackend:
    """Claude-backed generator with a rule-based fallback."""

    name = "llm"

    def __init__(
        self,
        llm: LLMClient,
        *,
        fallback: RuleBasedBackend | None = None,
        max_suggestions: int = 10,
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.fallback = fallback or RuleBasedBackend()
        self.max_suggestions = max_suggestions
        self.max_tokens = max_tokens

    async def suggest(
        self, cv: CVAnalysis, job: JobAnalysis, cv_text: str = "", job_text: str = ""
    ) -> list[SpecificSuggestion]:
        prompt = f"""Review this CV against the job posting.

Job posting ({job.role_title} at {job.company_name}):
---
{job_text}
---

Required skills: {', '.join(job.required_skills) or 'none listed'}
Known CV weaknesses: {'; '.join(cv.weaknesses) or 'none'}

CV:
---
{cv_text}
---

Return at most {self.max_suggestions} suggestions as a JSON array."""

        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=SUGGEST_SYSTEM,
                max_tokens=self.max_tokens,
            )
        except Exception:
            logger.warning("LLM suggestion call failed, using rule-based suggestions", exc_info=True)
            return await self.fallback.suggest(cv, job, cv_text, job_text)

        suggestions = self._parse_suggestions(data, self.max_suggestions)
        if not suggestions:
            logger.warning("LLM returned no usable suggestions, using rule-based suggestions")
            return await self.fallback.suggest(cv, job, cv_text, job_text)
        return sort_by_priority(suggestions)

    async def cover_letter(
        self,
        job: JobAnalysis,
        cv: CVAnalysis,
        personal_touch: str = "",
        cv_text: str = "",
        job_text: str = "",
    ) -> str:
        prompt = f"""Write a cover letter for the {job.role_title} position at {job.company_name}.

Job posting:
---
{job_text}
---

CV:
---
{cv_text}
---"""
        if personal_touch.strip():
            prompt += (
                "\n\nInclude this paragraph from the candidate word for word:\n"
                f"{personal_touch}"
            )

        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=COVER_LETTER_SYSTEM,
                temperature=0.3,
                max_tokens=self.max_tokens,
            )
        except Exception:
            logger.warning("LLM cover letter call failed, using rule-based letter", exc_info=True)
            return await self.fallback.cover_letter(job, cv, personal_touch, cv_text, job_text)

        letter = response.text.strip()
        if not letter:
            return await self.fallback.cover_letter(job, cv, personal_touch, cv_text, job_text)
        return letter

    @staticmethod
    def _parse_suggestions(data, max_count: int) -> list[SpecificSuggestion]:
        """Parse LLM response into a SpecificSuggestion list, skipping bad items."""
        if isinstance(data, dict):
            for key in ("suggestions", "items"):
                if key in data and isinstance(data[key], list):
                    data = data[key]
                    break
            else:
                return []

        if not isinstance(data, list):
            return []

        result = []
        for item in data[:max_count]:
            if not isinstance(item, dict):
                continue
            try:
                result.append(SpecificSuggestion(**item))
            except ValidationError:
                continue
        return result


def create_backend(config: AppConfig, llm: LLMClient | None = None) -> RuleBasedBackend | LLMBackend:
    """Build the backend selected by ``config.backend.kind``."""
    if config.backend.kind == "llm":
        client = llm or LLMClient(timeout=config.backend.timeout, model=config.backend.model)
        return LLMBackend(client, max_tokens=config.backend.max_tokens)
    return RuleBasedBackend()
