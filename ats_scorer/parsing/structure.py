from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from ats_scorer.normalize.utils import (
    is_bullet_line,
    split_lines,
    starts_with_bullet_glyph,
    strip_bullet_prefix,
)
from ats_scorer.schemas.document import ContactInfo, ParsedStructure, SectionFlags

from .entries import extract_section_lines, parse_education_lines, parse_experience_lines

logger = logging.getLogger(__name__)

NAME_SCAN_CHARS = 400
HEADLINE_WINDOW_CHARS = 260
HEADING_MAX_CHARS = 50
BULLET_SCOPE_MARKERS = ("\nEXPERIENCE", "\nPROJECTS")

# Each field is resolved by trying its patterns in order; the first hit wins.
_NAME_PATTERNS = (re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)+"),)
_EMAIL_PATTERNS = (re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE),)
_PHONE_PATTERNS = (re.compile(r"\+?\d[\d\s\-]{7,}\d"),)
_URL_RE = re.compile(r"https?://\S+", re.IGNORECASE)
_URL_TRAILING_RE = re.compile(r"[.,);]+$")

_SPACED_HYPHEN_RE = re.compile(r"\s*-\s*")
_MIDDOT_RE = re.compile(r"\s+·\s+")
_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_END_RE = re.compile(r"[.!?]$")
_TRAILING_COLONS_RE = re.compile(r":+$")


def build_structure_text(text: str) -> str:
    """Flatten normalized text into one line for contact-field matching."""
    flattened = _SPACED_HYPHEN_RE.sub("-", text)
    flattened = _MIDDOT_RE.sub(" · ", flattened)
    return _WHITESPACE_RE.sub(" ", flattened)


def _first_match(patterns: Sequence[re.Pattern[str]], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return None


def extract_name(leading_text: str) -> str | None:
    return _first_match(_NAME_PATTERNS, leading_text)


def derive_headline(leading_text: str, name: str | None) -> str | None:
    if not name:
        return None

    idx = leading_text.find(name)
    if idx == -1:
        return None

    after = leading_text[idx + len(name) : idx + HEADLINE_WINDOW_CHARS]
    segment = after.split("|", 1)[0]
    cleaned = _WHITESPACE_RE.sub(" ", segment).strip()
    return cleaned or None


def extract_email(structure_text: str) -> str | None:
    return _first_match(_EMAIL_PATTERNS, structure_text)


def extract_phone(structure_text: str) -> str | None:
    return _first_match(_PHONE_PATTERNS, structure_text)


def extract_urls(structure_text: str) -> list[str]:
    urls: list[str] = []
    for match in _URL_RE.finditer(structure_text):
        url = _URL_TRAILING_RE.sub("", match.group(0))
        if url and url not in urls:
            urls.append(url)
    return urls


def extract_locations(structure_text: str, location_names: Iterable[str]) -> list[str]:
    lowered = structure_text.lower()
    locations: list[str] = []
    for place in location_names:
        if place.lower() in lowered:
            label = place.title()
            if label not in locations:
                locations.append(label)
    return locations


def extract_contact(text: str, location_names: Iterable[str] = ()) -> ContactInfo:
    structure_text = build_structure_text(text)
    leading = structure_text[:NAME_SCAN_CHARS]
    name = extract_name(leading)
    return ContactInfo(
        name=name,
        headline=derive_headline(leading, name),
        email=extract_email(structure_text),
        phone=extract_phone(structure_text),
        urls=extract_urls(structure_text),
        locations=extract_locations(structure_text, location_names),
    )


def bullet_region(text: str) -> str:
    """Return the text from the first EXPERIENCE/PROJECTS heading onward.

    A summary mentioning "experience" must not pull its lines into the bullet
    list, so only headings placed on their own line by the normalizer count.
    """
    positions = [idx for idx in (text.find(marker) for marker in BULLET_SCOPE_MARKERS) if idx != -1]
    if not positions:
        return text
    return text[min(positions) :]


def extract_bullets(text: str) -> list[str]:
    bullets: list[str] = []
    for line in split_lines(bullet_region(text)):
        if is_bullet_line(line):
            content = strip_bullet_prefix(line)
            if content:
                bullets.append(content)
            continue

        # fallback for bullets the normalizer could not split onto their own line
        if "•" in line:
            bullets.extend(part.strip() for part in line.split("•") if part.strip())
    return bullets


def is_heading_candidate(line: str) -> bool:
    trimmed = line.strip()
    if not trimmed or len(trimmed) > HEADING_MAX_CHARS:
        return False

    no_punctuation = not _SENTENCE_END_RE.search(trimmed)
    upperish = trimmed == trimmed.upper() and any("A" <= ch <= "Z" for ch in trimmed)
    return no_punctuation or upperish


def extract_section_headings(text: str) -> list[str]:
    headings: list[str] = []
    seen: set[str] = set()
    for line in split_lines(text):
        if not is_heading_candidate(line) or starts_with_bullet_glyph(line):
            continue
        clean = _TRAILING_COLONS_RE.sub("", line).strip()
        if not clean:
            continue
        lowered = clean.lower()
        if lowered in seen:
            continue
        seen.add(lowered)
        headings.append(clean)
    return headings


def parse_structure(
    text: str,
    section_flags: SectionFlags,
    *,
    location_names: Iterable[str] = (),
) -> ParsedStructure:
    sections = extract_section_lines(text)
    structure = ParsedStructure(
        contact=extract_contact(text, location_names),
        bullets=extract_bullets(text),
        section_headings=extract_section_headings(text),
        section_flags=section_flags,
        education_entries=parse_education_lines(sections.get("EDUCATION", [])),
        experience_entries=parse_experience_lines(sections.get("EXPERIENCE", [])),
        project_entries=parse_experience_lines(sections.get("PROJECTS", [])),
    )
    logger.debug(
        "structure_parsed bullets=%d headings=%d education=%d experience=%d projects=%d",
        len(structure.bullets),
        len(structure.section_headings),
        len(structure.education_entries),
        len(structure.experience_entries),
        len(structure.project_entries),
    )
    return structure
