"""Request/result models for the application pipeline."""

from __future__ import annotations

from pydantic import BaseModel


class ApplicationRequest(BaseModel):
    job_description: str
    personal_touch: str = ""
    cv_text: str = ""


class ApplicationResults(BaseModel):
    cv_suggestions: str  # formatted report
    cover_letter: str
