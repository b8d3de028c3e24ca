import re
from pathlib import Path

# Contact icons common in exported CVs
EMOJI_PATTERN = (
    r"[\U0001f4e7\U0001f4de\U0001f4cd\U0001f4bc\U0001f4c5\U0001f393"
    r"\U0001f3e2\U0001f517\U0001f310\U0001f4f1\u260e\u2709]\s*"
)


def clean_text(text: str) -> str:
    """Normalise extracted document text.

    Strips invisible unicode and contact icons, maps bullet glyphs the
    analyzers do not know to "-", collapses runs of spaces and limits
    blank lines to one.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(EMOJI_PATTERN, "", text)

    # "•" is left alone, the CV analyzer already reads it as a bullet
    text = re.sub(r"^(\s*)[\u25cf\u25e6\u25c6\u25a0\u25aa\u2605\u25cb\u2023]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def load_text_file(file_path: str | Path) -> str:
    """Load a plain-text CV or job posting."""
    return clean_text(Path(file_path).read_text(encoding="utf-8"))
