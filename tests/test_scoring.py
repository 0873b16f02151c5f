import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from itertools import product  # noqa: E402

from ats_scorer.schemas import ScoreFeatures  # noqa: E402
from ats_scorer.scoring import (  # noqa: E402
    ScoringWeights,
    compute_score,
    explain_score,
    round_half_up,
    score_breakdown,
    score_resume,
)


def _features(**overrides) -> ScoreFeatures:
    base = {
        "has_education": True,
        "has_experience": True,
        "has_skills": True,
        "word_count": 500,
        "line_count": 60,
        "profile_coverage": 0.0,
        "jd_match": 0.0,
        "include_profile": False,
        "jd_provided": False,
    }
    base.update(overrides)
    return ScoreFeatures(**base)


class ScoringEngineTests(unittest.TestCase):
    def test_structure_and_length_only(self):
        self.assertEqual(compute_score(_features()), 100)
        self.assertEqual(compute_score(_features(has_skills=False)), 80)
        self.assertEqual(compute_score(_features(word_count=100, line_count=10)), 60)

    def test_length_band_edges_are_inclusive(self):
        breakdown = score_breakdown(_features(word_count=300, line_count=120))
        self.assertEqual(breakdown.length, 20)
        breakdown = score_breakdown(_features(word_count=901, line_count=29))
        self.assertEqual(breakdown.length, 0)

    def test_optional_signals_widen_the_denominator(self):
        without_profile = score_breakdown(_features(profile_coverage=0.4))
        with_profile = score_breakdown(_features(profile_coverage=0.4, include_profile=True))
        with_both = score_breakdown(
            _features(profile_coverage=0.4, include_profile=True, jd_match=0.5, jd_provided=True)
        )

        self.assertEqual(without_profile.total_weight, 50)
        self.assertEqual(with_profile.total_weight, 75)
        self.assertEqual(with_both.total_weight, 100)
        self.assertEqual(without_profile.subtotal, 50)
        self.assertEqual(with_profile.subtotal, 60)
        self.assertEqual(with_both.subtotal, 73)
        self.assertEqual(compute_score(_features(profile_coverage=0.4)), 100)
        self.assertEqual(compute_score(_features(profile_coverage=0.4, include_profile=True)), 80)

    def test_inactive_signal_values_are_ignored(self):
        self.assertEqual(
            compute_score(_features(jd_match=1.0, jd_provided=False)),
            compute_score(_features(jd_match=0.0, jd_provided=False)),
        )

    def test_component_points_round_half_up(self):
        breakdown = score_breakdown(_features(profile_coverage=0.5, include_profile=True))
        self.assertEqual(breakdown.profile, 13)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.4), 2)

    def test_score_is_integer_in_range_for_all_combinations(self):
        for edu, exp, skills, include_profile, jd_provided, coverage, jd in product(
            (True, False), (True, False), (True, False), (True, False), (True, False), (0.0, 0.37, 1.0), (0.0, 0.5, 1.0)
        ):
            score = compute_score(
                _features(
                    has_education=edu,
                    has_experience=exp,
                    has_skills=skills,
                    word_count=0,
                    line_count=0,
                    include_profile=include_profile,
                    jd_provided=jd_provided,
                    profile_coverage=coverage,
                    jd_match=jd,
                )
            )
            self.assertIsInstance(score, int)
            self.assertGreaterEqual(score, 0)
            self.assertLessEqual(score, 100)

    def test_custom_weights(self):
        weights = ScoringWeights(section_points=5, length_band_points=5, profile_max_points=10, jd_max_points=10)
        self.assertEqual(weights.base_weight, 25)
        self.assertEqual(compute_score(_features(has_skills=False), weights), 80)


class ScoreExplanationTests(unittest.TestCase):
    def test_explanation_branches_on_active_signals(self):
        text = explain_score(_features(include_profile=True, jd_provided=True), "junior data / ml")
        self.assertIn("Profile: junior data / ml.", text)
        self.assertIn("Job description match compares", text)
        self.assertNotIn("No job description was provided", text)

        text = explain_score(_features(), "ignored label")
        self.assertTrue(text.startswith("No specific job profile selected."))
        self.assertIn("profile-specific keyword coverage is not included", text)
        self.assertIn("No job description was provided", text)
        self.assertNotIn("ignored label", text)

    def test_explanation_is_deterministic(self):
        features = _features(include_profile=True)
        self.assertEqual(explain_score(features, "x"), explain_score(features, "x"))

    def test_score_resume_bundles_value_and_explanation(self):
        result = score_resume(_features(), "none")
        self.assertEqual(result.value, 100)
        self.assertIn("Length is evaluated", result.explanation)


if __name__ == "__main__":
    unittest.main()
