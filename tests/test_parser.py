import unittest

from grading.data import GradeRecordParser, LineKind, classify_line
from grading.models import FetchResult


class ClassifyLineTests(unittest.TestCase):
    def test_colon_form(self):
        parsed = classify_line("  14021 : BB  ")
        self.assertEqual(parsed.kind, LineKind.COLON)
        self.assertEqual((parsed.student_id, parsed.grade), ("14021", "BB"))

    def test_colon_form_uses_first_two_fields(self):
        parsed = classify_line("14021:AA:retake")
        self.assertEqual(parsed.kind, LineKind.COLON)
        self.assertEqual((parsed.student_id, parsed.grade), ("14021", "AA"))

    def test_whitespace_form(self):
        parsed = classify_line("33039 AA")
        self.assertEqual(parsed.kind, LineKind.WHITESPACE)
        self.assertEqual((parsed.student_id, parsed.grade), ("33039", "AA"))

    def test_whitespace_form_is_strict(self):
        self.assertEqual(classify_line("33039 aa").kind, LineKind.UNRECOGNIZED)
        self.assertEqual(classify_line("S33039 AA").kind, LineKind.UNRECOGNIZED)
        self.assertEqual(classify_line("33039 AA extra").kind, LineKind.UNRECOGNIZED)

    def test_colon_line_with_empty_field_is_not_retried_as_whitespace(self):
        self.assertEqual(classify_line("33039 AA:").kind, LineKind.UNRECOGNIZED)
        self.assertEqual(classify_line(":AA").kind, LineKind.UNRECOGNIZED)

    def test_blank_and_free_text(self):
        self.assertEqual(classify_line("").kind, LineKind.UNRECOGNIZED)
        self.assertEqual(classify_line("   ").kind, LineKind.UNRECOGNIZED)
        self.assertEqual(classify_line("not a record").kind, LineKind.UNRECOGNIZED)


class GradeRecordParserTests(unittest.TestCase):
    def setUp(self):
        self.parser = GradeRecordParser()

    def test_colon_sheet(self):
        self.assertEqual(self.parser.parse("33039:AA\n14021 : BB\n"), {"33039": "AA", "14021": "BB"})

    def test_whitespace_sheet(self):
        self.assertEqual(self.parser.parse("33039 AA\n14021 BB\n"), {"33039": "AA", "14021": "BB"})

    def test_mixed_sheet_with_noise(self):
        text = "Final grades - Math1\r\n\r\n33039:AA\r\nnot a record\r\n14021 BB\r\n"
        self.assertEqual(self.parser.parse(text), {"33039": "AA", "14021": "BB"})

    def test_leading_byte_order_mark(self):
        self.assertEqual(self.parser.parse("\ufeff14021:AA\n20001 BB"), {"14021": "AA", "20001": "BB"})
        self.assertEqual(self.parser.parse("\ufeff14021 AA\n"), {"14021": "AA"})

    def test_unrecognized_line_is_skipped(self):
        self.assertEqual(self.parser.parse("not a record"), {})

    def test_later_duplicate_wins(self):
        self.assertEqual(self.parser.parse("14021:CC\n14021 BB\n"), {"14021": "BB"})

    def test_empty_input(self):
        self.assertEqual(self.parser.parse(""), {})
        self.assertEqual(self.parser.parse(None), {})

    def test_parse_result_from_failed_fetch(self):
        records = self.parser.parse_result(FetchResult(location="mem://x", error="direct: HTTP 500"))
        self.assertEqual(records.grades, {})
        self.assertEqual(records.raw_text, "")
        self.assertEqual(records.error, "direct: HTTP 500")

    def test_parse_result_keeps_raw_text(self):
        records = self.parser.parse_result(FetchResult(location="mem://x", text="14021 AA\n"))
        self.assertEqual(records.get("14021"), "AA")
        self.assertIn("14021", records)
        self.assertEqual(records.raw_text, "14021 AA\n")
        self.assertIsNone(records.error)


if __name__ == "__main__":
    unittest.main()
