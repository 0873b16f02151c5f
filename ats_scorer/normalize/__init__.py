from .text import HEADING_TOKENS, compute_stats, normalize_document, normalize_text
from .utils import (
    BULLET_GLYPHS,
    is_bullet_line,
    normalize_line,
    repair_split_at,
    split_lines,
    starts_with_bullet_glyph,
    strip_bullet_prefix,
)

__all__ = [
    "HEADING_TOKENS",
    "BULLET_GLYPHS",
    "normalize_text",
    "normalize_document",
    "compute_stats",
    "split_lines",
    "normalize_line",
    "is_bullet_line",
    "starts_with_bullet_glyph",
    "strip_bullet_prefix",
    "repair_split_at",
]
