"""
GPA Calculator - Main Orchestrator.

This module contains the GPACalculator class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Use the command line entry point:
    python -m grading 12345
"""

import logging

from .config import PRIVACY_PROTECTED_ID, PRIVACY_NOTICE
from .data import CurriculumLoader, RemoteTextFetcher, GradeRecordParser
from .engines import CourseGradeResolver, GPAAggregator
from .exceptions import InvalidStudentIdError, PrivacyProtectedError, NoGradesFoundError
from .models import Curriculum, CourseResult, SemesterReport, GPAReport
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def is_privacy_protected(student_id: str) -> bool:
    """True for the student whose grades must never be looked up."""
    return (student_id or "").strip() == PRIVACY_PROTECTED_ID


class GPACalculator:
    """
    Main interface for the GPA calculator.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives a student number
    2. Refuses privacy-protected students before anything is fetched
    3. Resolves every course of every semester, one at a time, in order
    4. Computes semester and overall GPA
    5. Returns a GPAReport (calculate) or also prints it (run)

    Every call starts from scratch: sheets are re-fetched and nothing from
    a previous student is reused.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        calculator = GPACalculator()

        # Just the data
        report = calculator.calculate("14021")
        print(report.overall_gpa)

        # Data + terminal output
        calculator.run("14021")
    """

    def __init__(self, curriculum: Curriculum = None, fetcher: RemoteTextFetcher = None,
                 parser: GradeRecordParser = None):
        self.curriculum = curriculum if curriculum is not None else CurriculumLoader().load()
        self.resolver = CourseGradeResolver(self.curriculum, fetcher, parser)
        self.aggregator = GPAAggregator(self.curriculum.grade_scale)
        self.display = TerminalDisplay()

    def calculate(self, student_id: str) -> GPAReport:
        """
        Resolve all grades for a student and compute their GPA.

        Raises:
            PrivacyProtectedError: the student asked for their grades to be hidden
            InvalidStudentIdError: the student number is empty
            NoGradesFoundError: no course in any semester had a grade
        """
        # Checked before anything else, including the empty-id check
        if is_privacy_protected(student_id):
            logger.info("privacy_blocked")
            raise PrivacyProtectedError(PRIVACY_NOTICE)

        student_id = (student_id or "").strip()
        if not student_id:
            raise InvalidStudentIdError("Please enter a student number")

        logger.info("resolution_start student=%s", student_id)

        debug_trace = []
        resolved_by_semester = []
        any_found = False

        for semester in self.curriculum.semesters:
            resolved = self.resolver.resolve_semester(semester.courses, student_id)
            for course_name, result in resolved.items():
                debug_trace.append(result.trace_line(course_name))
                any_found = any_found or result.found
            resolved_by_semester.append((semester, resolved))

        if not any_found:
            logger.warning("no_grades_found student=%s courses=%d", student_id, len(debug_trace))
            raise NoGradesFoundError(student_id, debug_trace)

        semester_reports = []
        for semester, resolved in resolved_by_semester:
            rows = tuple(
                CourseResult(
                    course_name=course.name,
                    grade=resolved[course.name].grade,
                    system=resolved[course.name].system,
                    points=self.curriculum.grade_scale.get(resolved[course.name].grade),
                )
                for course in semester.courses
                if resolved[course.name].found
            )
            gpa = self.aggregator.semester_gpa(semester.courses, resolved)
            semester_reports.append(SemesterReport(semester, rows, gpa))

        overall = self.aggregator.combine(r.gpa for r in semester_reports)
        logger.info("resolution_done student=%s overall_gpa=%s", student_id, overall)

        return GPAReport(
            student_id=student_id,
            semesters=tuple(semester_reports),
            overall_gpa=overall,
            debug_trace=tuple(debug_trace),
        )

    def run(self, student_id: str) -> GPAReport:
        """
        Calculate and print a student's results.

        Errors are not printed here; the caller decides how to present them
        (see cli.main).
        """
        report = self.calculate(student_id)
        self.display.print_report(report)
        return report
