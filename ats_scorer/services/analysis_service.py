from __future__ import annotations

import logging

from ats_scorer.core.config import settings
from ats_scorer.features import KeywordMatcher, compute_jd_match, compute_profile_coverage, extract_jd_keywords
from ats_scorer.normalize import normalize_document
from ats_scorer.parsing import detect_sections, parse_structure
from ats_scorer.schemas import CoverageResult, JdMatchResult, ResumeAnalysis, ScoreFeatures
from ats_scorer.scoring import ScoringWeights, score_resume
from ats_scorer.taxonomy import NONE_PROFILE_KEY, Taxonomy, get_default_taxonomy

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "\n\n[truncated...]"


class EmptyDocumentError(ValueError):
    """Raised when normalization leaves no text to evaluate."""

    def __init__(self, message: str = "No text could be extracted from the resume.") -> None:
        super().__init__(message)


def truncate_display_text(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def _jd_summary(jd_keywords: list[str], jd_match: JdMatchResult) -> str:
    if not jd_keywords:
        return "no relevant jd keywords were detected using the current heuristic."
    return f"extracted {len(jd_keywords)} jd keywords, {jd_match.overlap_count} found in the resume."


class ResumeAnalyzer:
    def __init__(
        self,
        taxonomy: Taxonomy | None = None,
        weights: ScoringWeights | None = None,
        *,
        display_text_max_chars: int | None = None,
    ) -> None:
        self.taxonomy = taxonomy or get_default_taxonomy()
        self.weights = weights or ScoringWeights.from_config()
        self.matcher = KeywordMatcher.from_taxonomy(self.taxonomy)
        self.display_text_max_chars = display_text_max_chars or settings.display_text_max_chars

    def analyze(
        self,
        resume_text: str,
        *,
        profile_key: str = NONE_PROFILE_KEY,
        use_profile: bool = False,
        job_description_text: str | None = None,
        use_jd: bool = False,
    ) -> ResumeAnalysis:
        document = normalize_document(resume_text)
        if not document.text:
            logger.warning("resume_analysis_empty raw_chars=%d", len(resume_text or ""))
            raise EmptyDocumentError()

        text = document.text
        stats = document.stats
        section_flags = detect_sections(text)

        profile = self.taxonomy.get_profile(profile_key)
        use_profile = use_profile and profile.key != NONE_PROFILE_KEY
        coverage = (
            compute_profile_coverage(profile.key, text, taxonomy=self.taxonomy, matcher=self.matcher)
            if use_profile
            else CoverageResult()
        )
        include_profile = use_profile and coverage.total_keywords > 0

        jd_text = (job_description_text or "").strip()
        jd_provided = use_jd and bool(jd_text)
        jd_keywords: list[str] = []
        jd_match = JdMatchResult()
        if jd_provided:
            jd_keywords = extract_jd_keywords(jd_text, taxonomy=self.taxonomy)
            jd_match = compute_jd_match(jd_keywords, text, matcher=self.matcher)

        features = ScoreFeatures(
            has_education=section_flags.education,
            has_experience=section_flags.experience,
            has_skills=section_flags.skills,
            word_count=stats.words,
            line_count=stats.lines,
            profile_coverage=coverage.overall_coverage if include_profile else 0.0,
            jd_match=jd_match.match_ratio if jd_provided else 0.0,
            include_profile=include_profile,
            jd_provided=jd_provided,
        )
        score = score_resume(features, profile.label, self.weights)

        summary = [
            f"characters: {stats.chars}",
            f"words: {stats.words}",
            f"lines: {stats.lines}",
        ]
        if include_profile:
            summary.append(f"profile: {profile.label}")
            summary.append(f"profile keyword coverage: {coverage.overall_coverage * 100:.1f} %")
        if jd_provided:
            summary.append(f"jd match coverage: {jd_match.match_ratio * 100:.1f} %")

        structure = parse_structure(text, section_flags, location_names=self.taxonomy.locations)

        logger.info(
            "resume_analysis_completed score=%d words=%d lines=%d profile=%s jd=%s",
            score.value,
            stats.words,
            stats.lines,
            profile.key if include_profile else NONE_PROFILE_KEY,
            jd_provided,
        )
        return ResumeAnalysis(
            profile_key=profile.key,
            profile_label=profile.label,
            stats=stats,
            section_flags=section_flags,
            structure=structure,
            coverage=coverage if include_profile else None,
            jd_keywords=jd_keywords,
            jd_match=jd_match if jd_provided else None,
            jd_summary=_jd_summary(jd_keywords, jd_match) if jd_provided else None,
            jd_missing_sorted=sorted(jd_match.missing) if jd_provided else [],
            score=score,
            summary=summary,
            display_text=truncate_display_text(text, self.display_text_max_chars),
        )
