"""Regex-driven keyword and entity extraction shared by both analyzers.

None of these functions raise on odd input: no match means ``None`` or an
empty list.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from cv_copilot.analysis.vocabulary import (
    BULLET_PATTERN,
    CERTIFICATION_PATTERN,
    SOFT_SKILL_PATTERN,
    STOP_WORDS,
    TECH_PATTERN,
    canonical_soft_skill,
    canonical_tech,
)

# Capitalized words on one line; dots only inside a word ("Booking.com").
_WORD = r"[A-Z][\w&'-]*(?:\.[\w&'-]+)*"
_NAME = rf"{_WORD}(?:[ \t]+{_WORD})*"

# Tried in order; the first pattern that matches anywhere wins.
COMPANY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\b[Aa]t[ \t]+({_NAME})"),
    re.compile(rf"(?i:\bcompany):[ \t]*({_NAME})"),
    re.compile(rf"({_NAME})[ \t]+is[ \t]+looking\b"),
)

ROLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"(?i:\bposition):[ \t]*({_NAME})"),
    re.compile(rf"(?i:\brole):[ \t]*({_NAME})"),
    re.compile(rf"(?i:\bhiring)[ \t]+(?:(?i:an?|the)[ \t]+)?({_NAME})"),
)


def unique(items: Iterable[str]) -> list[str]:
    """De-duplicate, keeping the first occurrence."""
    return list(dict.fromkeys(item for item in items if item))


def find_technologies(text: str) -> list[str]:
    return unique(canonical_tech(m.group(0)) for m in TECH_PATTERN.finditer(text))


def find_soft_skills(text: str) -> list[str]:
    return unique(canonical_soft_skill(m.group(0)) for m in SOFT_SKILL_PATTERN.finditer(text))


def find_certifications(text: str) -> list[str]:
    return unique(m.group(0).strip() for m in CERTIFICATION_PATTERN.finditer(text))


def extract_keywords(
    text: str,
    *,
    min_length: int = 3,
    rank_by_frequency: bool = False,
    limit: int = 20,
) -> list[str]:
    """Pull content words out of free text.

    Tokens are lower-cased words with punctuation removed. Tokens shorter than
    ``min_length`` and stop words are dropped. With ``rank_by_frequency`` the
    most frequent words come first (ties keep first-seen order); otherwise
    words appear in document order.
    """
    tokens = [
        word
        for word in re.sub(r"[^\w\s]", " ", text.lower()).split()
        if len(word) >= min_length and word not in STOP_WORDS
    ]
    if rank_by_frequency:
        return [word for word, _ in Counter(tokens).most_common(limit)]
    return unique(tokens)[:limit]


def _first_match(patterns: tuple[re.Pattern[str], ...], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            value = match.group(1).strip().rstrip(".,")
            if value:
                return value
    return None


def extract_company_name(text: str) -> str | None:
    """Company name from "at X", "company: X" or "X is looking", in that order."""
    return _first_match(COMPANY_PATTERNS, text)


def extract_role_title(text: str) -> str | None:
    """Role title from "position: X", "role: X" or "hiring X", in that order."""
    return _first_match(ROLE_PATTERNS, text)


def is_bullet(line: str) -> bool:
    return BULLET_PATTERN.match(line) is not None


def strip_bullet(line: str) -> str:
    return BULLET_PATTERN.sub("", line, count=1).strip()


def contains_skill(candidates: Iterable[str], skill: str) -> bool:
    """Fuzzy-contains match: ``skill`` is a case-insensitive substring of a candidate."""
    needle = skill.lower()
    return any(needle in candidate.lower() for candidate in candidates)
