from __future__ import annotations

import logging
import re

from ats_scorer.normalize.utils import split_lines
from ats_scorer.schemas.document import SectionFlags

logger = logging.getLogger(__name__)

SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("education", re.compile(r"\beducation\b", re.IGNORECASE)),
    ("experience", re.compile(r"\bexperience\b|\bwork history\b|\bemployment\b", re.IGNORECASE)),
    ("skills", re.compile(r"\bskills\b|\btechnical skills\b|\bkey skills\b", re.IGNORECASE)),
    ("projects", re.compile(r"\bprojects\b|\bpersonal projects\b|\bselected projects\b", re.IGNORECASE)),
)


def detect_sections(text: str) -> SectionFlags:
    found = {name: False for name, _ in SECTION_PATTERNS}
    for line in split_lines(text):
        for name, pattern in SECTION_PATTERNS:
            if not found[name] and pattern.search(line):
                found[name] = True

    logger.debug("sections_detected flags=%s", found)
    return SectionFlags(**found)
