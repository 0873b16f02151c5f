from .engine import (
    ScoreBreakdown,
    ScoringWeights,
    compute_score,
    explain_score,
    round_half_up,
    score_breakdown,
    score_resume,
)

__all__ = [
    "ScoringWeights",
    "ScoreBreakdown",
    "score_breakdown",
    "compute_score",
    "explain_score",
    "score_resume",
    "round_half_up",
]
