import unittest

from grading import GPACalculator
from grading.calculator import is_privacy_protected
from grading.config import PRIVACY_NOTICE
from grading.exceptions import InvalidStudentIdError, PrivacyProtectedError, NoGradesFoundError
from grading.models import GradeSystem, format_gpa
from tests.fakes import FakeFetcher, make_curriculum, SHEETS


class GPACalculatorTests(unittest.TestCase):
    def setUp(self):
        self.fetcher = FakeFetcher(SHEETS)
        self.calculator = GPACalculator(make_curriculum(), fetcher=self.fetcher)

    def test_privacy_protected_student_is_blocked_before_any_fetch(self):
        with self.assertRaises(PrivacyProtectedError) as ctx:
            self.calculator.calculate(" 33039 ")
        self.assertEqual(str(ctx.exception), PRIVACY_NOTICE)
        self.assertEqual(self.fetcher.calls, [])

    def test_is_privacy_protected(self):
        self.assertTrue(is_privacy_protected("33039"))
        self.assertTrue(is_privacy_protected(" 33039\n"))
        self.assertFalse(is_privacy_protected("330390"))
        self.assertFalse(is_privacy_protected(None))

    def test_empty_student_number(self):
        with self.assertRaises(InvalidStudentIdError):
            self.calculator.calculate("   ")
        self.assertEqual(self.fetcher.calls, [])

    def test_full_report(self):
        report = self.calculator.calculate("14021")

        sem1 = report.semester(1)
        self.assertEqual(
            [(r.course_name, r.grade, r.system, r.points) for r in sem1.rows],
            [("Math1", "AA", GradeSystem.CURRENT, 4), ("Physics1", "BB", GradeSystem.LEGACY, 3)],
        )
        self.assertEqual(format_gpa(sem1.gpa.value), "3.50")
        self.assertEqual(sem1.gpa.units_used, 24)

        sem2 = report.semester(2)
        self.assertEqual([r.course_name for r in sem2.rows], ["Math2"])
        self.assertEqual(format_gpa(sem2.gpa.value), "2.00")

        # (3.50 * 24 + 2.00 * 12) / 36
        self.assertEqual(format_gpa(report.overall_gpa), "3.00")

    def test_debug_trace_covers_every_course_in_order(self):
        report = self.calculator.calculate("14021")
        self.assertEqual(list(report.debug_trace), [
            "Math1: AA (current)",
            "Physics1: BB (legacy)",
            "Math2: CC (single)",
            "Drawing: Not Found (N/A)",
        ])

    def test_one_semester_only(self):
        report = self.calculator.calculate("20002")
        self.assertFalse(report.semester(2).has_courses)
        self.assertIsNone(report.semester(2).gpa.value)
        self.assertEqual(format_gpa(report.semester(1).gpa.value), "1.00")
        self.assertEqual(format_gpa(report.overall_gpa), "1.00")

    def test_no_grades_anywhere(self):
        with self.assertRaises(NoGradesFoundError) as ctx:
            self.calculator.calculate("99999")

        payload = ctx.exception.to_payload()
        self.assertIn("No grades found for student number: 99999", payload["error"])
        self.assertEqual(payload["debug"], [
            "Math1: Not Found (N/A)",
            "Physics1: Not Found (N/A)",
            "Math2: Not Found (N/A)",
            "Drawing: Not Found (N/A)",
        ])

    def test_unknown_letters_only_give_zero_overall(self):
        fetcher = FakeFetcher({**SHEETS, "mem://math2": "55555 XX\n"})
        report = GPACalculator(make_curriculum(), fetcher=fetcher).calculate("55555")

        self.assertEqual([(r.grade, r.points) for r in report.semester(2).rows], [("XX", None)])
        self.assertIsNone(report.semester(2).gpa.value)
        self.assertEqual(format_gpa(report.overall_gpa), "0.00")

    def test_runs_are_independent_and_refetch(self):
        first = self.calculator.calculate("14021")
        calls_after_first = len(self.fetcher.calls)
        second = self.calculator.calculate("14021")

        self.assertEqual(first, second)
        self.assertEqual(calls_after_first, 6)
        self.assertEqual(len(self.fetcher.calls), 12)

    def test_other_student_is_unaffected_by_previous_run(self):
        self.calculator.calculate("14021")
        report = self.calculator.calculate("20001")
        self.assertEqual(
            [(r.course_name, r.grade, r.system) for r in report.semester(1).rows],
            [("Math1", "BB", GradeSystem.CURRENT), ("Physics1", "CC", GradeSystem.CURRENT)],
        )
        self.assertEqual(format_gpa(report.semester(1).gpa.value), "2.50")
        self.assertEqual(format_gpa(report.semester(2).gpa.value), "4.00")
        # (2.50 * 24 + 4.00 * 12) / 36
        self.assertEqual(format_gpa(report.overall_gpa), "3.00")

    def test_to_dict(self):
        data = self.calculator.calculate("14021").to_dict()
        self.assertEqual(data["overall_gpa"], "3.00")
        self.assertEqual(data["semesters"][1]["gpa"], "2.00")
        self.assertEqual(data["semesters"][0]["courses"][1], {
            "course": "Physics1", "grade": "BB", "system": "legacy", "points": 3,
        })


if __name__ == "__main__":
    unittest.main()
