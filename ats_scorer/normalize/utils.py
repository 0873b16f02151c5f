from __future__ import annotations

import re

BULLET_GLYPHS = "•-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*[{re.escape(BULLET_GLYPHS)}]\s+")
_BULLET_START_PATTERN = re.compile(rf"^\s*[{re.escape(BULLET_GLYPHS)}]")
_WHITESPACE_RE = re.compile(r"\s+")

# PDF text layers sometimes split "at" into "a t"; this also rewrites a
# genuine "a t" bigram (e.g. initials), so it is applied only to entry headers.
_SPLIT_AT_RE = re.compile(r"\ba\s+t\b", re.IGNORECASE)


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n")]


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def is_bullet_line(line: str) -> bool:
    """True for a glyph from BULLET_GLYPHS followed by whitespace."""
    return bool(_BULLET_PATTERN.match(line))


def starts_with_bullet_glyph(line: str) -> bool:
    return bool(_BULLET_START_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def repair_split_at(text: str) -> str:
    return _SPLIT_AT_RE.sub("at", text)
