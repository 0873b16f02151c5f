from __future__ import annotations

import re

from ats_scorer.schemas.document import DocumentStats, NormalizedDocument

HEADING_TOKENS = ("SUMMARY", "SKILLS", "EDUCATION", "EXPERIENCE", "PROJECTS")

_HEADING_RES = tuple((token, re.compile(rf"\s+{token}\s+")) for token in HEADING_TOKENS)
# Horizontal space and at most one newline before the glyph are absorbed so a
# second pass leaves already split bullets untouched.
_INLINE_BULLET_RE = re.compile(r"[ \t]*\n?[ \t]*•\s+")
_HYPHEN_BULLET_RE = re.compile(r"\n\s*-\s+")
_HORIZONTAL_SPACE_RE = re.compile(r"[ \t]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(raw: str) -> str:
    """Canonicalize extracted resume text into heading-delimited lines.

    Steps run in a fixed order:

    1. carriage returns become newlines
    2. inline SUMMARY/SKILLS/EDUCATION/EXPERIENCE/PROJECTS headings are moved
       onto their own line after a blank line
    3. every ``•`` bullet starts a new line
    4. hyphen bullets at a line start are rewritten to ``- ``
    5. runs of spaces and tabs collapse to one space
    6. three or more newlines collapse to a blank line
    7. the whole document is stripped
    """
    text = (raw or "").replace("\r", "\n")

    for token, pattern in _HEADING_RES:
        text = pattern.sub(f"\n\n{token}\n", text)

    text = _INLINE_BULLET_RE.sub("\n• ", text)
    text = _HYPHEN_BULLET_RE.sub("\n- ", text)
    text = _HORIZONTAL_SPACE_RE.sub(" ", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def compute_stats(text: str) -> DocumentStats:
    return DocumentStats(
        chars=len(text),
        words=len(text.split()),
        lines=len(text.split("\n")),
    )


def normalize_document(raw: str) -> NormalizedDocument:
    text = normalize_text(raw)
    return NormalizedDocument(text=text, stats=compute_stats(text))
