"""Pydantic models for CV Analyzer output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SectionType = Literal["summary", "experience", "skills", "education", "projects", "achievements"]


class CVSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SectionType
    content: str = ""  # newline-joined lines between this header and the next
    bullet_points: list[str] = Field(default_factory=list)


class ExperienceFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    roles: list[str] = Field(default_factory=list)
    companies: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    metrics: list[str] = Field(default_factory=list)


class SkillFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)


class CVAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: list[CVSection] = Field(default_factory=list)
    experience: ExperienceFacts = Field(default_factory=ExperienceFacts)
    skills: SkillFacts = Field(default_factory=SkillFacts)
    weaknesses: list[str] = Field(default_factory=list)

    def find_section(self, section_type: SectionType) -> CVSection | None:
        """Return the first section of the given type, if any."""
        for section in self.sections:
            if section.type == section_type:
                return section
        return None
