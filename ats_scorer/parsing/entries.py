from __future__ import annotations

import re
from enum import Enum
from typing import Literal

from ats_scorer.normalize.utils import (
    is_bullet_line,
    normalize_line,
    repair_split_at,
    split_lines,
    strip_bullet_prefix,
)
from ats_scorer.schemas.document import EducationEntry, ExperienceEntry

ENTRY_SECTIONS = ("EDUCATION", "EXPERIENCE", "PROJECTS")

# "<title> at <institution> (<dates>)"; entries without parenthesized dates never match.
_EDUCATION_RE = re.compile(r"(.*?)(?:\s+at\s+)(.*?)(?:\s*\(([^)]+)\))", re.IGNORECASE)
# "<role> at <org> (<dates>)" or "<role> - extra at <org> (<dates>)"
_EXPERIENCE_HEADER_RE = re.compile(
    r"^(.*?)(?:\s*-\s*.*?)?\s+at\s+(.*?)(?:\s*\(([^)]+)\))?\s*$",
    re.IGNORECASE,
)

LineKind = Literal["blank", "bullet", "header", "continuation"]


def extract_section_lines(text: str) -> dict[str, list[str]]:
    """Bucket lines under the EDUCATION/EXPERIENCE/PROJECTS heading they follow."""
    sections: dict[str, list[str]] = {}
    current: str | None = None

    for line in split_lines(text):
        if not line:
            continue
        upper = line.upper()
        if upper in ENTRY_SECTIONS:
            current = upper
            sections.setdefault(current, [])
            continue
        if current is None:
            continue
        sections[current].append(line)

    return sections


def _clean_header(line: str) -> str:
    return normalize_line(repair_split_at(normalize_line(line)))


def parse_education_lines(lines: list[str]) -> list[EducationEntry]:
    joined = " ".join(line.strip() for line in lines if line.strip())
    if not joined:
        return []

    # extractors often run several entries together on one line
    joined = _clean_header(joined)
    entries: list[EducationEntry] = []
    for match in _EDUCATION_RE.finditer(joined):
        entries.append(
            EducationEntry(
                title=match.group(1).strip(),
                institution=match.group(2).strip(),
                dates=match.group(3).strip() if match.group(3) else None,
                raw=match.group(0).strip(),
            )
        )
    return entries


def classify_line(line: str) -> LineKind:
    trimmed = line.strip()
    if not trimmed:
        return "blank"
    if is_bullet_line(trimmed):
        return "bullet"
    if _EXPERIENCE_HEADER_RE.match(_clean_header(trimmed)):
        return "header"
    return "continuation"


class ParserState(str, Enum):
    NO_ENTRY = "no_entry"
    ENTRY_OPEN = "entry_open"


class ExperienceParser:
    """Line-driven parser for EXPERIENCE and PROJECTS buckets.

    A header line opens a new entry and supersedes the previous one. Bullet
    lines attach to the open entry and other lines extend its ``raw`` text.
    Without an open entry, bullets and continuations are dropped.
    """

    def __init__(self) -> None:
        self.state = ParserState.NO_ENTRY
        self.entries: list[ExperienceEntry] = []
        self._current: ExperienceEntry | None = None

    @property
    def current(self) -> ExperienceEntry | None:
        return self._current

    def feed(self, line: str) -> ParserState:
        kind = classify_line(line)
        if kind == "bullet":
            self.on_bullet(strip_bullet_prefix(line.strip()))
        elif kind == "header":
            self.on_header(_clean_header(line))
        elif kind == "continuation":
            self.on_continuation(_clean_header(line))
        return self.state

    def on_bullet(self, text: str) -> None:
        if self.state is ParserState.NO_ENTRY or self._current is None:
            return
        if text:
            self._current.bullets.append(text)

    def on_header(self, line: str) -> None:
        match = _EXPERIENCE_HEADER_RE.match(line)
        if match is None:
            self.on_continuation(line)
            return
        entry = ExperienceEntry(
            role=match.group(1).strip(),
            organization=match.group(2).strip(),
            dates=match.group(3).strip() if match.group(3) else None,
            raw=line,
        )
        self.entries.append(entry)
        self._current = entry
        self.state = ParserState.ENTRY_OPEN

    def on_continuation(self, line: str) -> None:
        if self.state is ParserState.NO_ENTRY or self._current is None:
            return
        self._current.raw = f"{self._current.raw} {line}"


def parse_experience_lines(lines: list[str]) -> list[ExperienceEntry]:
    parser = ExperienceParser()
    for line in lines:
        parser.feed(line)
    return parser.entries
