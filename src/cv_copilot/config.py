"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value!r}")


@dataclass(frozen=True)
class AnalysisConfig:
    max_span_lines: int = 20
    max_achievements: int = 10
    max_responsibilities: int = 10
    max_requirements: int = 10
    max_benefits: int = 8
    max_keywords: int = 20
    min_bullet_length: int = 10
    # When set, any "lead" wording in a posting is treated as a senior cue.
    lead_counts_as_senior: bool = False

    def __post_init__(self) -> None:
        _check_range("max_span_lines", self.max_span_lines, 1, 500)
        _check_range("max_achievements", self.max_achievements, 0, 100)
        _check_range("max_responsibilities", self.max_responsibilities, 0, 100)
        _check_range("max_requirements", self.max_requirements, 0, 100)
        _check_range("max_benefits", self.max_benefits, 0, 100)
        _check_range("max_keywords", self.max_keywords, 0, 200)
        _check_range("min_bullet_length", self.min_bullet_length, 0, 200)


@dataclass(frozen=True)
class ReportConfig:
    max_high_priority: int = 5
    max_medium_priority: int = 3
    max_missing_keywords: int = 3

    def __post_init__(self) -> None:
        _check_range("max_high_priority", self.max_high_priority, 0, 50)
        _check_range("max_medium_priority", self.max_medium_priority, 0, 50)
        _check_range("max_missing_keywords", self.max_missing_keywords, 0, 20)


@dataclass(frozen=True)
class UploadConfig:
    max_file_size_mb: int = 10

    def __post_init__(self) -> None:
        _check_range("max_file_size_mb", self.max_file_size_mb, 1, 100)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass(frozen=True)
class BackendConfig:
    kind: str = "rule"  # "rule" or "llm"
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 60
    max_tokens: int = 4096

    def __post_init__(self) -> None:
        if self.kind not in ("rule", "llm"):
            raise ValueError(f"kind must be 'rule' or 'llm', got {self.kind!r}")
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_tokens", self.max_tokens, 256, 64000)


@dataclass(frozen=True)
class PipelineConfig:
    processing_delay: float = 0.0  # seconds, optional pacing for UIs

    def __post_init__(self) -> None:
        _check_range("processing_delay", self.processing_delay, 0.0, 30.0)


@dataclass(frozen=True)
class AppConfig:
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        analysis=AnalysisConfig(**raw.get("analysis", {})),
        report=ReportConfig(**raw.get("report", {})),
        upload=UploadConfig(**raw.get("upload", {})),
        backend=BackendConfig(**raw.get("backend", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
    )
