"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the grading package.

To create a different UI (web, JSON API, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..config import NOT_APPLICABLE
from ..models import GPAReport, SemesterReport, CourseResult, format_gpa


class TerminalDisplay:
    """
    Pretty terminal output for GPA results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Semesters without courses should be hidden, not shown empty.

    2. FOR API RESPONSE:
       Skip the display entirely and use GPAReport.to_dict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_report(cls, report: GPAReport):
        """Print every semester that has courses, then the GPA summary."""
        cls.print_header(f"GPA RESULTS: STUDENT {report.student_id}")

        for semester_report in report.semesters:
            # Semesters with nothing resolved are hidden
            if semester_report.has_courses:
                cls.print_semester(semester_report)

        cls.print_gpa_summary(report)

    @classmethod
    def print_semester(cls, semester_report: SemesterReport):
        cls.print_subheader(semester_report.semester.title)

        print(f"\n  {cls.BOLD}{'COURSE':<20} {'GRADE':<8} {'SYSTEM':<10} {'POINTS'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 50}{cls.RESET}")

        for row in semester_report.rows:
            cls._print_course_row(row)

    @classmethod
    def _print_course_row(cls, row: CourseResult):
        system = row.system.label if row.system else NOT_APPLICABLE
        # Letters that aren't on the scale show 0 points but don't count towards the GPA
        points = row.points if row.points is not None else 0
        color = cls.GREEN if row.points is not None else cls.YELLOW
        print(f"  {row.course_name:<20} {color}{row.grade:<8}{cls.RESET} {cls.BLUE}{system:<10}{cls.RESET} {cls.DIM}({points} pts){cls.RESET}")

    @classmethod
    def print_gpa_summary(cls, report: GPAReport):
        cls.print_subheader("GPA")
        for semester_report in report.semesters:
            value = format_gpa(semester_report.gpa.value)
            color = cls.GREEN if semester_report.gpa.available else cls.DIM
            print(f"  {cls.BOLD}{semester_report.semester.title + ':':<14}{cls.RESET} {color}{value}{cls.RESET}")
        print(f"  {cls.BOLD}{'Overall:':<14}{cls.RESET} {cls.CYAN}{cls.BOLD}{format_gpa(report.overall_gpa)}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str, debug_trace=None):
        """Print a user-facing error, with the per-course debug trace if there is one."""
        cls.print_header("ERROR")
        print(f"\n  {cls.RED}{message}{cls.RESET}")
        if debug_trace:
            print(f"\n  {cls.BOLD}Debug info:{cls.RESET}")
            for line in debug_trace:
                print(f"    {cls.DIM}{line}{cls.RESET}")

    @classmethod
    def print_privacy_notice(cls, notice: str):
        print(f"\n  {cls.YELLOW}{cls.BOLD}🔒 {notice}{cls.RESET}")
