"""
Data models for the GPA calculator.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, CourseKind, GradeSystem, Semester, Curriculum
from .grade import FetchAttempt, FetchResult, GradeRecordSet, ResolvedGrade
from .report import (
    CourseResult,
    SemesterGPA,
    SemesterReport,
    GPAReport,
    format_gpa,
)

__all__ = [
    # Curriculum models
    "Course",
    "CourseKind",
    "GradeSystem",
    "Semester",
    "Curriculum",
    # Per-run grade records
    "FetchAttempt",
    "FetchResult",
    "GradeRecordSet",
    "ResolvedGrade",
    # Report models
    "CourseResult",
    "SemesterGPA",
    "SemesterReport",
    "GPAReport",
    "format_gpa",
]
