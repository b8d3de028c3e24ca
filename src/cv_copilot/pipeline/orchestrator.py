"""Main pipeline orchestrator - turns a CV and a job posting into the two artifacts."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from cv_copilot.analysis.cv_analyzer import CVAnalyzer
from cv_copilot.analysis.job_analyzer import JobAnalyzer
from cv_copilot.config import AppConfig
from cv_copilot.models.application import ApplicationRequest, ApplicationResults
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import JobAnalysis
from cv_copilot.models.suggestion import SpecificSuggestion
from cv_copilot.pipeline.backends import LLMBackend, RuleBasedBackend, create_backend
from cv_copilot.pipeline.report_builder import build_report

logger = logging.getLogger(__name__)

NO_CV_PLACEHOLDER = "No CV content available"


class ProcessingError(RuntimeError):
    """Raised when the pipeline cannot produce results. Retry the whole request."""


@dataclass
class PipelineResult:
    """Complete result from the application pipeline."""

    cv: CVAnalysis
    job: JobAnalysis
    suggestions: list[SpecificSuggestion]
    results: ApplicationResults
    backend: str = "rule"
    elapsed_seconds: float = 0.0
    metadata: dict = field(default_factory=dict)


class ApplicationOrchestrator:
    """Fans out CV and job analysis, then builds the report and cover letter."""

    def __init__(
        self,
        backend: RuleBasedBackend | LLMBackend | None = None,
        *,
        config: AppConfig | None = None,
    ):
        self.config = config or AppConfig()
        self.backend = backend or create_backend(self.config)
        self.cv_analyzer = CVAnalyzer(self.config.analysis)
        self.job_analyzer = JobAnalyzer(self.config.analysis)

    async def run(
        self,
        request: ApplicationRequest,
        *,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> PipelineResult:
        """Run the full pipeline.

        Args:
            request: Job description, CV text and optional personal note.
            on_phase: Optional callback(phase_name, detail) for progress.

        Raises:
            ProcessingError: if any stage fails. No partial result is returned.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = "") -> None:
            logger.info("%s: %s", phase, detail)
            if on_phase:
                on_phase(phase, detail)

        cv_text = request.cv_text or NO_CV_PLACEHOLDER
        job_text = request.job_description
        logger.debug(
            "Job description: %d chars, CV: %d chars, personal touch: %s",
            len(job_text),
            len(cv_text),
            "provided" if request.personal_touch.strip() else "not provided",
        )

        try:
            # --- Phase 1: Parallel CV + job analysis ---
            _notify("phase1", "Analyzing CV and job description")
            cv, job = await asyncio.gather(
                asyncio.to_thread(self.cv_analyzer.analyze, cv_text),
                asyncio.to_thread(self.job_analyzer.analyze, job_text),
            )
            _notify("phase1_done", f"Role: {job.role_title}, company: {job.company_name}")

            if self.config.pipeline.processing_delay:
                await asyncio.sleep(self.config.pipeline.processing_delay)

            # --- Phase 2: Suggestions + report, cover letter in parallel ---
            _notify("phase2", "Generating suggestions and cover letter")
            suggestions, cover_letter = await asyncio.gather(
                self.backend.suggest(cv, job, cv_text, job_text),
                self.backend.cover_letter(job, cv, request.personal_touch, cv_text, job_text),
            )
            report = build_report(cv, job, suggestions, self.config.report)
        except Exception as exc:
            logger.error("Application processing failed", exc_info=True)
            raise ProcessingError("Failed to process application data") from exc

        elapsed = time.monotonic() - start
        _notify("done", f"{len(suggestions)} suggestions in {elapsed:.2f}s")

        metadata = {
            "experience_level": job.experience_level,
            "industry": job.industry,
            "weaknesses": len(cv.weaknesses),
        }
        if isinstance(self.backend, LLMBackend):
            tokens = self.backend.llm.get_token_summary()
            metadata["input_tokens"] = tokens["input"]
            metadata["output_tokens"] = tokens["output"]
            metadata["llm_calls"] = len(tokens["calls"])

        return PipelineResult(
            cv=cv,
            job=job,
            suggestions=suggestions,
            results=ApplicationResults(cv_suggestions=report, cover_letter=cover_letter),
            backend=self.backend.name,
            elapsed_seconds=elapsed,
            metadata=metadata,
        )


def process_application(
    request: ApplicationRequest, config: AppConfig | None = None
) -> ApplicationResults:
    """Synchronous convenience wrapper returning only the two artifacts."""
    orchestrator = ApplicationOrchestrator(config=config)
    return asyncio.run(orchestrator.run(request)).results
