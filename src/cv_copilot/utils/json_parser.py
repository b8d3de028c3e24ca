"""Pull a JSON value out of free-form model output."""

from __future__ import annotations

import json
import re

_FENCE = re.compile(r"```(?:json)?\s*\n(.*?)\n?```", re.DOTALL)


def _loads(candidate: str) -> dict | list | None:
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, (dict, list)) else None


def _between(text: str, opener: str, closer: str) -> dict | list | None:
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end <= start:
        return None
    return _loads(text[start : end + 1])


def extract_json(text: str) -> dict | list:
    """Return the first JSON object or array found in ``text``.

    Tries, in order: the whole text, any fenced ```json block, then the
    widest bracketed span, starting with whichever of ``[`` / ``{`` opens
    first.
    """
    text = (text or "").strip()

    for candidate in (text, *(m.group(1) for m in _FENCE.finditer(text))):
        value = _loads(candidate.strip())
        if value is not None:
            return value

    pairs = [("[", "]"), ("{", "}")]
    pairs.sort(key=lambda pair: text.find(pair[0]) if pair[0] in text else len(text))
    for opener, closer in pairs:
        value = _between(text, opener, closer)
        if value is not None:
            return value

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")
