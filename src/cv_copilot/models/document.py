"""Result models for the document-to-text collaborator."""

from __future__ import annotations

from pydantic import BaseModel


class ParseResult(BaseModel):
    text: str = ""
    success: bool
    error: str | None = None


class FileValidation(BaseModel):
    valid: bool
    error: str | None = None
