import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scorer.normalize import normalize_text  # noqa: E402
from ats_scorer.parsing import detect_sections, extract_bullets, extract_contact, extract_section_headings, parse_structure  # noqa: E402
from ats_scorer.parsing.structure import derive_headline, extract_urls, is_heading_candidate  # noqa: E402
from tests.sample_data import SAMPLE_RESUME  # noqa: E402


class ContactExtractionTests(unittest.TestCase):
    def setUp(self):
        self.text = normalize_text(SAMPLE_RESUME)

    def test_contact_fields_from_sample(self):
        contact = extract_contact(self.text, ["israel", "netherlands"])
        self.assertEqual(contact.name, "Jane Doe")
        self.assertEqual(contact.headline, "junior data analyst")
        self.assertEqual(contact.email, "jane.doe@example.com")
        self.assertEqual(contact.phone, "+1 555 123 4567")
        self.assertEqual(contact.urls, ["https://github.com/janedoe"])
        self.assertEqual(contact.locations, ["Netherlands"])

    def test_missing_fields_are_absent_not_errors(self):
        contact = extract_contact("john doe writes code", [])
        self.assertIsNone(contact.name)
        self.assertIsNone(contact.headline)
        self.assertIsNone(contact.email)
        self.assertIsNone(contact.phone)
        self.assertEqual(contact.urls, [])
        self.assertEqual(contact.locations, [])

    def test_name_must_lead_the_document(self):
        self.assertIsNone(extract_contact("resume of Jane Doe").name)

    def test_headline_requires_name(self):
        self.assertIsNone(derive_headline("Jane Doe engineer", None))
        self.assertIsNone(derive_headline("Jane Doe | engineer", "Jane Doe"))

    def test_urls_are_deduplicated_and_trimmed(self):
        urls = extract_urls("see https://a.com, and https://a.com) again http://b.io;")
        self.assertEqual(urls, ["https://a.com", "http://b.io"])


class BulletExtractionTests(unittest.TestCase):
    def test_bullets_are_scoped_to_experience_and_projects(self):
        bullets = extract_bullets(normalize_text(SAMPLE_RESUME))
        self.assertEqual(
            bullets,
            ["Built pipelines in pandas", "Reduced latency by 30%", "Trained a classifier with sklearn"],
        )

    def test_summary_bullets_before_experience_heading_are_ignored(self):
        text = "Intro\n- summary point\n\nEXPERIENCE\n- real bullet"
        self.assertEqual(extract_bullets(text), ["real bullet"])

    def test_whole_document_is_scanned_without_headings(self):
        self.assertEqual(extract_bullets("- a\n* b\n– c"), ["a", "b", "c"])

    def test_mid_line_bullets_are_split(self):
        self.assertEqual(extract_bullets("Did things • more things"), ["Did things", "more things"])


class HeadingExtractionTests(unittest.TestCase):
    def test_heading_candidates(self):
        self.assertTrue(is_heading_candidate("Skills"))
        self.assertTrue(is_heading_candidate("ALL CAPS TITLE."))
        self.assertFalse(is_heading_candidate("This is a sentence."))
        self.assertFalse(is_heading_candidate(""))
        self.assertFalse(is_heading_candidate("x" * 51))

    def test_headings_are_deduplicated_case_insensitively(self):
        text = "\n".join(["Skills:", "skills", "- bullet", "This is a sentence.", "ALL CAPS TITLE.", "x" * 51])
        self.assertEqual(extract_section_headings(text), ["Skills", "ALL CAPS TITLE."])


class ParseStructureTests(unittest.TestCase):
    def test_parse_structure_collects_entries(self):
        text = normalize_text(SAMPLE_RESUME)
        structure = parse_structure(text, detect_sections(text), location_names=["netherlands"])

        self.assertEqual(structure.contact.name, "Jane Doe")
        self.assertEqual(len(structure.education_entries), 1)
        self.assertEqual(structure.education_entries[0].institution, "State University")
        self.assertEqual(structure.experience_entries[0].organization, "Acme Corp")
        self.assertEqual(structure.experience_entries[0].bullets, ["Built pipelines in pandas", "Reduced latency by 30%"])
        self.assertEqual(structure.project_entries[0].role, "Churn Model")
        self.assertEqual(structure.project_entries[0].bullets, ["Trained a classifier with sklearn"])
        self.assertIn("EXPERIENCE", structure.section_headings)
        self.assertNotIn("Built pipelines in pandas", structure.section_headings)


if __name__ == "__main__":
    unittest.main()
