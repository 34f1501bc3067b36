"""
Curriculum data models.

Contains the Course, Semester and Curriculum dataclasses plus the
CourseKind and GradeSystem enums. These are loaded once and never change
while grades are being resolved.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from collections.abc import Mapping

from ..exceptions import ConfigurationError


class CourseKind(Enum):
    """
    How many grade sheets a course has.

    SINGLE: One sheet for everybody
    SPLIT: An old-system sheet and a new-system sheet (systems transition)
    """
    SINGLE = "single"
    SPLIT = "split"


class GradeSystem(Enum):
    """
    Provenance of a resolved grade.

    LEGACY and CURRENT only exist for SPLIT courses; SINGLE is the tag
    for the one sheet of a SINGLE course.
    """
    LEGACY = "legacy"
    CURRENT = "current"
    SINGLE = "single"

    @property
    def label(self) -> str:
        return _SYSTEM_LABELS[self]


_SYSTEM_LABELS = {
    GradeSystem.LEGACY: "Old",
    GradeSystem.CURRENT: "New",
    GradeSystem.SINGLE: "Current",
}


@dataclass(frozen=True)
class Course:
    """
    A single course in the curriculum.

    Attributes:
        name: Course name, unique within its semester (e.g., "Math1")
        units: Credit units used as the GPA weight, always positive
        kind: CourseKind telling the resolver which sheets to read
    """
    name: str
    units: int
    kind: CourseKind = CourseKind.SINGLE

    def __post_init__(self):
        if isinstance(self.units, bool) or not isinstance(self.units, int) or self.units <= 0:
            raise ConfigurationError(f"Course {self.name!r} must have a positive integer unit count, got {self.units!r}")

    @property
    def systems(self) -> tuple:
        """Systems to query, in priority order."""
        if self.kind == CourseKind.SPLIT:
            return (GradeSystem.CURRENT, GradeSystem.LEGACY)
        return (GradeSystem.SINGLE,)


@dataclass(frozen=True)
class Semester:
    number: int
    title: str
    courses: tuple = ()

    def __post_init__(self):
        names = [c.name for c in self.courses]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(f"{self.title} lists {', '.join(duplicates)} more than once")


@dataclass(frozen=True)
class Curriculum:
    """
    Everything the resolver needs to know up front.

    Built once (usually by CurriculumLoader) and handed to the resolver,
    aggregator and calculator at construction time. Nothing in here is
    modified while a student is being resolved.

    Attributes:
        semesters: Ordered tuple of Semester
        grade_scale: Read-only mapping of letter grade -> grade points
        sources: Read-only mapping of (course name, GradeSystem) -> location
    """
    semesters: tuple
    grade_scale: Mapping = field(default_factory=dict)
    sources: Mapping = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.grade_scale, Mapping):
            raise ConfigurationError(f"Grading scale must be a mapping of letter -> points, got {self.grade_scale!r}")
        bad = [
            f"{letter!r}: {points!r}"
            for letter, points in self.grade_scale.items()
            if not isinstance(letter, str) or isinstance(points, bool) or not isinstance(points, (int, float))
        ]
        if bad:
            raise ConfigurationError(f"Grading scale entries must map a letter to a number: {', '.join(bad)}")

        # Freeze the mappings so a shared curriculum can't drift between runs
        object.__setattr__(self, "grade_scale", MappingProxyType(dict(self.grade_scale)))
        object.__setattr__(self, "sources", MappingProxyType(dict(self.sources)))

        missing = []
        for semester in self.semesters:
            for course in semester.courses:
                for system in course.systems:
                    if (course.name, system) not in self.sources:
                        missing.append(f"{course.name} ({system.value})")
        if missing:
            raise ConfigurationError(f"No grade sheet configured for: {', '.join(missing)}")

    def source_for(self, course: Course, system: GradeSystem) -> str:
        try:
            return self.sources[(course.name, system)]
        except KeyError:
            raise ConfigurationError(f"No grade sheet configured for {course.name} ({system.value})") from None
