"""Pydantic models for Suggestion Generator output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Priority = Literal["high", "medium", "low"]

PRIORITY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


class SpecificSuggestion(BaseModel):
    """A single concrete CV edit."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(min_length=1)
    original: str = Field(min_length=1)
    suggested: str = Field(min_length=1)
    reasoning: str = Field(min_length=1)
    priority: Priority


def sort_by_priority(suggestions: list[SpecificSuggestion]) -> list[SpecificSuggestion]:
    """Stable sort, high first. Ties keep their incoming order."""
    return sorted(suggestions, key=lambda s: PRIORITY_RANK[s.priority], reverse=True)
