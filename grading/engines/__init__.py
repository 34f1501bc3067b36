"""
Resolution and aggregation engines.

This package contains the engines that perform the core business logic:
picking a grade per course and turning grades into GPA values.
"""

from .resolver import CourseGradeResolver
from .gpa import GPAAggregator, round_gpa, ZERO_GPA

__all__ = [
    "CourseGradeResolver",
    "GPAAggregator",
    "round_gpa",
    "ZERO_GPA",
]
