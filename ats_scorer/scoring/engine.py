from __future__ import annotations

import math
from dataclasses import dataclass

from ats_scorer.core.config.scoring import get_scoring_value
from ats_scorer.schemas.scoring import ScoreFeatures, ScoreResult


@dataclass(frozen=True)
class ScoringWeights:
    section_points: int = 10
    length_band_points: int = 10
    word_range: tuple[int, int] = (300, 900)
    line_range: tuple[int, int] = (30, 120)
    profile_max_points: int = 25
    jd_max_points: int = 25

    @property
    def base_weight(self) -> int:
        return 3 * self.section_points + 2 * self.length_band_points

    @classmethod
    def from_config(cls) -> "ScoringWeights":
        defaults = cls()
        words = get_scoring_value("scoring.length.words", list(defaults.word_range))
        lines = get_scoring_value("scoring.length.lines", list(defaults.line_range))
        return cls(
            section_points=int(get_scoring_value("scoring.structure.points_per_section", defaults.section_points)),
            length_band_points=int(get_scoring_value("scoring.length.points_per_band", defaults.length_band_points)),
            word_range=(int(words[0]), int(words[1])),
            line_range=(int(lines[0]), int(lines[1])),
            profile_max_points=int(get_scoring_value("scoring.profile.max_points", defaults.profile_max_points)),
            jd_max_points=int(get_scoring_value("scoring.jd.max_points", defaults.jd_max_points)),
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    structure: int
    length: int
    profile: int
    jd: int
    subtotal: int
    total_weight: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_breakdown(features: ScoreFeatures, weights: ScoringWeights | None = None) -> ScoreBreakdown:
    weights = weights or ScoringWeights()

    structure = weights.section_points * sum(
        (features.has_education, features.has_experience, features.has_skills)
    )

    length = 0
    if weights.word_range[0] <= features.word_count <= weights.word_range[1]:
        length += weights.length_band_points
    if weights.line_range[0] <= features.line_count <= weights.line_range[1]:
        length += weights.length_band_points

    profile = round_half_up(features.profile_coverage * weights.profile_max_points)
    jd = round_half_up(features.jd_match * weights.jd_max_points)

    # optional signals only count, and only widen the denominator, when active
    subtotal = structure + length
    total_weight = weights.base_weight
    if features.include_profile:
        subtotal += profile
        total_weight += weights.profile_max_points
    if features.jd_provided:
        subtotal += jd
        total_weight += weights.jd_max_points

    return ScoreBreakdown(
        structure=structure,
        length=length,
        profile=profile,
        jd=jd,
        subtotal=subtotal,
        total_weight=total_weight,
    )


def compute_score(features: ScoreFeatures, weights: ScoringWeights | None = None) -> int:
    breakdown = score_breakdown(features, weights)
    if breakdown.total_weight <= 0:
        return 0
    scaled = round_half_up(breakdown.subtotal * 100 / breakdown.total_weight)
    return max(0, min(100, scaled))


def explain_score(features: ScoreFeatures, profile_label: str) -> str:
    parts: list[str] = []

    if features.include_profile:
        parts.append(
            f"Profile: {profile_label}. Structure score is based on having education, "
            "experience, and skills sections."
        )
    else:
        parts.append(
            "No specific job profile selected. Structure score is based on having education, "
            "experience, and skills sections."
        )

    parts.append(
        "Length is evaluated by word and line count to keep the resume within a typical "
        "one to two page range."
    )

    if features.include_profile:
        parts.append(
            "Profile keyword coverage captures how many core technologies and concepts for the "
            "chosen profile appear in the resume."
        )
    else:
        parts.append(
            "Because no job profile was selected, profile-specific keyword coverage is not "
            "included in the score."
        )

    if features.jd_provided:
        parts.append(
            "Job description match compares extracted keywords from the JD with those present "
            "in the resume."
        )
    else:
        parts.append("No job description was provided, so JD matching is not included in the score.")

    return " ".join(parts)


def score_resume(
    features: ScoreFeatures,
    profile_label: str,
    weights: ScoringWeights | None = None,
) -> ScoreResult:
    return ScoreResult(
        value=compute_score(features, weights),
        explanation=explain_score(features, profile_label),
    )
