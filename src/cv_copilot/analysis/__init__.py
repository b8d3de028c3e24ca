"""Rule-based text analysis of CVs and job postings."""

from cv_copilot.analysis.cv_analyzer import CVAnalyzer, analyze_cv
from cv_copilot.analysis.job_analyzer import JobAnalyzer, analyze_job

__all__ = ["CVAnalyzer", "JobAnalyzer", "analyze_cv", "analyze_job"]
