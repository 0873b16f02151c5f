from __future__ import annotations

import logging

from ats_scorer.schemas.matching import CategoryStat, CoverageResult, KeywordPresence
from ats_scorer.taxonomy import Taxonomy, get_default_taxonomy

from .keywords import KeywordMatcher

logger = logging.getLogger(__name__)


def compute_profile_coverage(
    profile_key: str,
    resume_text: str,
    *,
    taxonomy: Taxonomy | None = None,
    matcher: KeywordMatcher | None = None,
) -> CoverageResult:
    taxonomy = taxonomy or get_default_taxonomy()
    matcher = matcher or KeywordMatcher.from_taxonomy(taxonomy)
    profile = taxonomy.get_profile(profile_key)
    if not profile.categories:
        return CoverageResult()

    lowered = resume_text.lower()
    category_stats: list[CategoryStat] = []
    detailed: list[KeywordPresence] = []
    total_keywords = 0
    total_present = 0

    for category, keywords in profile.categories.items():
        category_present = 0
        for keyword in keywords:
            present = matcher.present_in_lowered(keyword, lowered)
            if present:
                category_present += 1
            detailed.append(KeywordPresence(category=category, keyword=keyword, present=present))

        total_keywords += len(keywords)
        total_present += category_present
        category_stats.append(
            CategoryStat(category=category, present=category_present, total=len(keywords))
        )

    overall = total_present / total_keywords if total_keywords > 0 else 0.0
    logger.debug(
        "profile_coverage profile=%s present=%d total=%d",
        profile.key,
        total_present,
        total_keywords,
    )
    return CoverageResult(
        category_stats=category_stats,
        overall_coverage=overall,
        detailed=detailed,
        total_keywords=total_keywords,
    )
