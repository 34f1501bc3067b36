"""
Course Grade Resolution Engine.

This module decides, for one course and one student, which grade sheets
to read and which grade wins.
"""

import logging

from ..models import Course, Curriculum, GradeRecordSet, ResolvedGrade
from ..data import RemoteTextFetcher, GradeRecordParser

logger = logging.getLogger(__name__)


class CourseGradeResolver:
    """
    Resolves a student's grade for a single course.

    SINGLE VS SPLIT COURSES:
    ------------------------
    SINGLE: One sheet. If the student is on it, the grade is tagged SINGLE.

    SPLIT:  Courses graded during the systems transition have an old-system
            sheet and a new-system sheet. BOTH are always fetched (the new
            one first) so the debug output shows what each sheet said,
            even when the first one already has the student.

            Priority: CURRENT > LEGACY. The two sheets are never blended;
            the grade comes from exactly one of them.

    FAILURES:
    ---------
    A sheet that can't be fetched is read as an empty sheet. The course
    then resolves to "not found" and the other courses carry on.
    """

    def __init__(self, curriculum: Curriculum, fetcher: RemoteTextFetcher = None,
                 parser: GradeRecordParser = None):
        self.curriculum = curriculum
        self.fetcher = fetcher if fetcher is not None else RemoteTextFetcher()
        self.parser = parser if parser is not None else GradeRecordParser()

    def fetch_records(self, location: str) -> GradeRecordSet:
        """Fetch and parse one sheet."""
        records = self.parser.parse_result(self.fetcher.fetch_text(location))
        if records.error:
            logger.warning("sheet_unavailable location=%s err=%s", location, records.error)
        else:
            logger.debug("sheet_loaded location=%s students=%d", location, len(records))
        return records

    def resolve(self, course: Course, student_id: str) -> ResolvedGrade:
        # Fetch every sheet first, in priority order, then pick
        consulted = []
        for system in course.systems:
            location = self.curriculum.source_for(course, system)
            consulted.append((system, self.fetch_records(location)))

        records = tuple(r for _, r in consulted)
        for system, record_set in consulted:
            grade = record_set.get(student_id)
            if grade:
                logger.info("course_resolved course=%s grade=%s system=%s", course.name, grade, system.value)
                return ResolvedGrade(grade=grade, system=system, records=records)

        logger.info("course_not_found course=%s kind=%s", course.name, course.kind.value)
        return ResolvedGrade(records=records)

    def resolve_semester(self, courses, student_id: str) -> dict:
        """Resolve courses one at a time, in order. Returns {course name: ResolvedGrade}."""
        return {course.name: self.resolve(course, student_id) for course in courses}
