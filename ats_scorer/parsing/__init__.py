from .entries import (
    ExperienceParser,
    ParserState,
    classify_line,
    extract_section_lines,
    parse_education_lines,
    parse_experience_lines,
)
from .sections import detect_sections
from .structure import extract_bullets, extract_contact, extract_section_headings, parse_structure

__all__ = [
    "detect_sections",
    "extract_contact",
    "extract_bullets",
    "extract_section_headings",
    "parse_structure",
    "extract_section_lines",
    "parse_education_lines",
    "parse_experience_lines",
    "classify_line",
    "ExperienceParser",
    "ParserState",
]
