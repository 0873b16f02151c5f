from __future__ import annotations

import logging
import re

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.schemas.matching import JdMatchResult
from ats_scorer.taxonomy import Taxonomy, get_default_taxonomy

from .keywords import KeywordMatcher

logger = logging.getLogger(__name__)

# keeps tokens such as "c++", "node.js" and "c#" intact
_NON_TOKEN_RE = re.compile(r"[^a-z0-9+.# ]")


def extract_jd_keywords(jd_text: str, *, taxonomy: Taxonomy | None = None) -> list[str]:
    """Return known skill tokens from a job description in first-seen order."""
    taxonomy = taxonomy or get_default_taxonomy()
    min_length = int(get_scoring_value("jd.min_token_length", 3))

    cleaned = _NON_TOKEN_RE.sub(" ", (jd_text or "").lower())
    keywords: list[str] = []
    seen: set[str] = set()
    for token in cleaned.split():
        if len(token) < min_length or token in taxonomy.stopwords or token in seen:
            continue
        seen.add(token)
        if token in taxonomy.skill_vocab:
            keywords.append(token)

    logger.debug("jd_keywords_extracted count=%d", len(keywords))
    return keywords


def compute_jd_match(
    jd_keywords: list[str],
    resume_text: str,
    *,
    matcher: KeywordMatcher | None = None,
) -> JdMatchResult:
    if not jd_keywords:
        return JdMatchResult(match_ratio=0.0, missing=[], overlap_count=0)

    matcher = matcher or KeywordMatcher.from_taxonomy(get_default_taxonomy())
    lowered = resume_text.lower()
    present: list[str] = []
    missing: list[str] = []
    for keyword in jd_keywords:
        if matcher.present_in_lowered(keyword, lowered):
            present.append(keyword)
        else:
            missing.append(keyword)

    return JdMatchResult(
        match_ratio=len(present) / len(jd_keywords),
        missing=missing,
        overlap_count=len(present),
    )
