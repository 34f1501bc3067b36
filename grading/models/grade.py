"""
Grade record data models.

These are produced per run and thrown away afterwards: a fetch outcome,
the grades parsed out of one sheet, and the grade picked for one course.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config import NOT_FOUND, NOT_APPLICABLE
from .course import GradeSystem


@dataclass(frozen=True)
class FetchAttempt:
    """One retrieval strategy tried against one location."""
    strategy: str              # Strategy name, e.g. "allorigins" or "direct"
    url: str                   # The URL actually requested
    ok: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of fetching one grade sheet.

    `text` is None when every strategy failed; `error` then holds the
    last failure reason. `strategy` names the strategy that succeeded.
    """
    location: str
    text: Optional[str] = None
    error: Optional[str] = None
    strategy: Optional[str] = None
    attempts: tuple = ()

    @property
    def ok(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class GradeRecordSet:
    """
    Grades parsed from one sheet.

    Attributes:
        location: Where the sheet was fetched from
        grades: student number -> letter grade
        raw_text: The sheet as fetched ("" if the fetch failed)
        error: Fetch failure reason, None on success
    """
    location: str
    grades: dict = field(default_factory=dict)
    raw_text: str = ""
    error: Optional[str] = None

    def get(self, student_id: str) -> Optional[str]:
        return self.grades.get(student_id)

    def __contains__(self, student_id) -> bool:
        return student_id in self.grades

    def __len__(self) -> int:
        return len(self.grades)


@dataclass(frozen=True)
class ResolvedGrade:
    """
    The grade picked for one student in one course.

    grade and system are both None when no consulted sheet had the student.
    `records` keeps every GradeRecordSet that was consulted, in query order.
    """
    grade: Optional[str] = None
    system: Optional[GradeSystem] = None
    records: tuple = ()

    @property
    def found(self) -> bool:
        return self.grade is not None

    def trace_line(self, course_name: str, not_found: str = NOT_FOUND, not_applicable: str = NOT_APPLICABLE) -> str:
        """Debug line in the form "Math1: AA (current)"."""
        system = self.system.value if self.system else not_applicable
        return f"{course_name}: {self.grade or not_found} ({system})"
