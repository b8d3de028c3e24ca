"""Pydantic models for Job Analyzer output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ExperienceLevel = Literal["entry", "mid", "senior", "lead", "executive"]

DEFAULT_ROLE_TITLE = "Position"
DEFAULT_COMPANY_NAME = "Company"
DEFAULT_INDUSTRY = "Technology"


class JobAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    role_title: str = Field(default=DEFAULT_ROLE_TITLE, min_length=1)
    company_name: str = Field(default=DEFAULT_COMPANY_NAME, min_length=1)
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = "mid"
    industry: str = DEFAULT_INDUSTRY
    benefits: list[str] = Field(default_factory=list)
