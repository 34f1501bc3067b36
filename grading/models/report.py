"""
GPA report data models.

These are what the calculator hands to the presentation layer. The
terminal UI prints them; `GPAReport.to_dict()` turns them into plain
JSON-ready data for any other consumer.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from ..config import UNAVAILABLE_GPA
from .course import GradeSystem, Semester


def format_gpa(value: Optional[Decimal], unavailable: str = UNAVAILABLE_GPA) -> str:
    """Render a GPA as "3.50", or the placeholder when it is unavailable."""
    if value is None:
        return unavailable
    return f"{value:.2f}"


@dataclass(frozen=True)
class CourseResult:
    """One row of a semester listing."""
    course_name: str
    grade: str
    system: GradeSystem
    points: Optional[Union[int, float]]    # None when the letter isn't on the grading scale

    def to_dict(self) -> dict:
        return {
            "course": self.course_name,
            "grade": self.grade,
            "system": self.system.value,
            "points": self.points,
        }


@dataclass(frozen=True)
class SemesterGPA:
    """
    GPA for one semester.

    value is None ("unavailable") when no course contributed units.
    units_used is the unit total of the courses that have a resolved grade;
    the overall GPA weighs each semester by it.
    """
    value: Optional[Decimal]
    units_used: int = 0

    @property
    def available(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return format_gpa(self.value)


@dataclass(frozen=True)
class SemesterReport:
    semester: Semester
    rows: tuple
    gpa: SemesterGPA

    @property
    def has_courses(self) -> bool:
        return bool(self.rows)

    def to_dict(self) -> dict:
        return {
            "semester": self.semester.number,
            "title": self.semester.title,
            "courses": [row.to_dict() for row in self.rows],
            "gpa": format_gpa(self.gpa.value),
            "units_used": self.gpa.units_used,
        }


@dataclass(frozen=True)
class GPAReport:
    """
    Complete result for one student.

    Attributes:
        student_id: The student number that was resolved
        semesters: Tuple of SemesterReport in curriculum order
        overall_gpa: Decimal, "0.00" when no semester had a usable grade
        debug_trace: One line per course, in the order they were resolved
    """
    student_id: str
    semesters: tuple
    overall_gpa: Decimal
    debug_trace: tuple = ()

    def semester(self, number: int) -> Optional[SemesterReport]:
        for report in self.semesters:
            if report.semester.number == number:
                return report
        return None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "semesters": [s.to_dict() for s in self.semesters],
            "overall_gpa": format_gpa(self.overall_gpa),
            "debug": list(self.debug_trace),
        }
