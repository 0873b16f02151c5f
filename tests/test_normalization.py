import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scorer.normalize import compute_stats, normalize_document, normalize_text, repair_split_at  # noqa: E402
from tests.sample_data import SAMPLE_RESUME  # noqa: E402


class NormalizationTests(unittest.TestCase):
    def test_carriage_returns_become_newlines(self):
        self.assertEqual(normalize_text("Line one\r\nLine two"), "Line one\n\nLine two")

    def test_inline_heading_is_moved_to_its_own_line(self):
        self.assertEqual(
            normalize_text("Intro text EXPERIENCE Engineer at X"),
            "Intro text\n\nEXPERIENCE\nEngineer at X",
        )

    def test_lowercase_heading_words_are_left_inline(self):
        self.assertEqual(normalize_text("my experience here"), "my experience here")

    def test_concatenated_bullets_are_split_one_per_line(self):
        self.assertEqual(normalize_text("Skills • Python • SQL"), "Skills\n• Python\n• SQL")

    def test_hyphen_bullets_get_canonical_prefix(self):
        self.assertEqual(normalize_text("Intro\n   -   item"), "Intro\n- item")

    def test_horizontal_whitespace_and_blank_runs_collapse(self):
        self.assertEqual(normalize_text("a  \t b\n\n\n\nc"), "a b\n\nc")

    def test_whitespace_only_input_normalizes_to_empty(self):
        self.assertEqual(normalize_text("  \n\t \r "), "")
        self.assertEqual(normalize_text(""), "")

    def test_normalization_is_idempotent(self):
        samples = [
            SAMPLE_RESUME,
            "a • b • c",
            "Line one\r\nLine two",
            "Intro - item one\n - item two",
            "X SKILLS\n• a\n\n\n\nEDUCATION   BSc at U (2020)",
            "   ",
        ]
        for sample in samples:
            once = normalize_text(sample)
            self.assertEqual(normalize_text(once), once, msg=repr(sample))

    def test_stats_count_chars_words_and_lines(self):
        stats = compute_stats("one two\n\nthree")
        self.assertEqual((stats.chars, stats.words, stats.lines), (14, 3, 3))

    def test_normalize_document_bundles_text_and_stats(self):
        document = normalize_document(SAMPLE_RESUME)
        self.assertEqual(document.stats.lines, len(document.text.split("\n")))
        self.assertEqual(document.stats.words, len(document.text.split()))
        self.assertIn("\nEXPERIENCE\n", document.text)

    def test_split_at_repair_is_narrow(self):
        self.assertEqual(repair_split_at("Engineer a t Acme"), "Engineer at Acme")
        self.assertEqual(repair_split_at("Data team"), "Data team")


if __name__ == "__main__":
    unittest.main()
