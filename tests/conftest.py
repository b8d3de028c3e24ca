"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from cv_copilot.analysis import CVAnalyzer, JobAnalyzer
from cv_copilot.clients.llm_client import LLMClient, LLMResponse
from cv_copilot.models.cv import CVAnalysis
from cv_copilot.models.job import JobAnalysis


@pytest.fixture
def sample_job_text() -> str:
    return """Role: Senior Backend Engineer
Acme Payments is looking for a Senior Backend Engineer to join our fintech platform team.

Responsibilities:
- Design and build scalable payment APIs in Python
- Mentor engineers and review code across the team

Requirements:
- 5+ years of experience with Python and Django
- Hands-on experience with Docker and Kubernetes
- Strong communication skills

Nice to have:
- Terraform and AWS experience
- Exposure to GraphQL

Benefits:
- Remote-first culture with flexible hours
- Annual learning budget of $2,000
"""


@pytest.fixture
def sample_cv_text() -> str:
    return """Jane Doe
Senior Software Engineer at Acme Corp (2019 - Present)

PROFESSIONAL SUMMARY
Backend engineer focused on Python services and cloud infrastructure.

EXPERIENCE
- Responsible for maintaining the payments API
- Developed REST services in Python and Django serving 2 million users
- Led migration to Kubernetes, reducing deployment time by 40%

SKILLS
Python, Django, PostgreSQL, Docker, AWS
Leadership, communication, problem solving

EDUCATION
BSc Computer Science
"""


@pytest.fixture
def sample_cv(sample_cv_text) -> CVAnalysis:
    return CVAnalyzer().analyze(sample_cv_text)


@pytest.fixture
def sample_job(sample_job_text) -> JobAnalysis:
    return JobAnalyzer().analyze(sample_job_text)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value=[])
    client.get_token_summary = MagicMock(
        return_value={"input": 100, "output": 50, "calls": [("claude-test-model", 100, 50)]}
    )
    return client
