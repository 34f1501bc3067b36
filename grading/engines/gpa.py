"""
GPA Aggregation Engine.

This module converts resolved letter grades into semester and overall
GPA values using credit-unit weighting.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional

from ..models import SemesterGPA

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO_GPA = Decimal("0.00")


def round_gpa(value: Decimal) -> Decimal:
    """Two decimals, halves rounded up (same as JavaScript's toFixed(2))."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class GPAAggregator:
    """
    Computes weighted GPA values from resolved grades.

    SEMESTER GPA:
    -------------
        sum(points(grade) * units) / sum(units)

    over the courses that have a resolved grade whose letter is on the
    grading scale. Courses without a grade, or with an unknown letter, are
    left out entirely. No counted units means the GPA is unavailable (None).

    OVERALL GPA:
    ------------
    - Both semesters available: unit-weighted mean of the two (already
      rounded) semester values
    - One semester available: that semester's value unchanged
    - Neither: 0.00, which is NOT the same as unavailable

    Arithmetic is done with Decimal so 3.125 rounds to 3.13 every time.
    """

    def __init__(self, grade_scale: Mapping):
        self.grade_scale = grade_scale

    def grade_point(self, grade: Optional[str]) -> Optional[Decimal]:
        """Point value for a letter grade, None if it isn't on the scale."""
        if grade is None or grade not in self.grade_scale:
            return None
        return Decimal(str(self.grade_scale[grade]))

    def semester_gpa(self, courses, resolved: Mapping) -> SemesterGPA:
        """
        GPA for one semester.

        Args:
            courses: The semester's Course objects
            resolved: course name -> ResolvedGrade (missing names count as not found)

        Returns:
            SemesterGPA; units_used is the unit total of every course with a
            resolved grade, including letters that aren't on the scale
        """
        total_points = Decimal(0)
        total_units = 0
        units_used = 0

        for course in courses:
            result = resolved.get(course.name)
            if result is None or not result.found:
                continue
            units_used += course.units

            points = self.grade_point(result.grade)
            if points is None:
                logger.debug("grade_not_on_scale course=%s grade=%s", course.name, result.grade)
                continue
            total_points += points * course.units
            total_units += course.units

        if total_units == 0:
            return SemesterGPA(value=None, units_used=units_used)
        return SemesterGPA(value=round_gpa(total_points / total_units), units_used=units_used)

    @staticmethod
    def overall_gpa(sem1: Optional[Decimal], sem1_units: int,
                    sem2: Optional[Decimal], sem2_units: int) -> Decimal:
        """
        Overall GPA from the two semester values.

        sem1_units / sem2_units are the units of the courses that had a
        resolved grade in that semester, not the curriculum totals.
        """
        if sem1 is not None and sem2 is not None:
            weighted = sem1 * sem1_units + sem2 * sem2_units
            return round_gpa(weighted / (sem1_units + sem2_units))
        if sem1 is not None:
            return sem1
        if sem2 is not None:
            return sem2
        return ZERO_GPA

    def combine(self, semester_gpas) -> Decimal:
        """Overall GPA for any number of semesters, folded pairwise in order."""
        overall = None
        overall_units = 0
        for gpa in semester_gpas:
            if gpa.value is None:
                continue
            if overall is None:
                overall, overall_units = gpa.value, gpa.units_used
            else:
                overall = self.overall_gpa(overall, overall_units, gpa.value, gpa.units_used)
                overall_units += gpa.units_used
        return overall if overall is not None else ZERO_GPA
