"""
Curriculum loading.

This module builds the immutable Curriculum the rest of the package works
from, either from the built-in tables in config.py or from a JSON file.
"""

import json
from pathlib import Path

from ..config import (
    GRADE_POINTS,
    SEMESTER_1_COURSES,
    SEMESTER_2_COURSES,
    SEMESTER_TITLES,
    SPLIT_SYSTEM_COURSES,
    SOURCE_LINKS,
    LEGACY_SUFFIX,
    CURRENT_SUFFIX,
)
from ..exceptions import ConfigurationError
from ..models import Course, CourseKind, GradeSystem, Semester, Curriculum


class CurriculumLoader:
    """
    Loads and caches the curriculum.

    DATA SOURCES:
    - Built-in: config.py tables (two semesters, pastebin grade sheets)
    - JSON file: same information, for another year or department

    JSON SHAPE:
        {
            "grade_scale": {"AA": 4, "BB": 3, ...},
            "semesters": [
                {
                    "number": 1,
                    "title": "Semester 1",
                    "courses": [
                        {"name": "Math1", "units": 12, "kind": "split",
                         "sources": {"current": "https://...", "legacy": "https://..."}},
                        {"name": "Math2", "units": 12,
                         "sources": {"single": "https://..."}}
                    ]
                }
            ]
        }

    "kind" defaults to "single". "grade_scale" defaults to GRADE_POINTS.

    Usage:
        loader = CurriculumLoader()
        curriculum = loader.load()                      # built-in tables
        curriculum = loader.load("curriculum_2025.json")
    """

    def __init__(self):
        # Keyed by resolved path, None for the built-in tables
        self._cache = {}

    def load(self, path=None) -> Curriculum:
        key = str(Path(path).resolve()) if path is not None else None
        if key not in self._cache:
            if path is None:
                self._cache[key] = self.build_default()
            else:
                self._cache[key] = self.load_file(path)
        return self._cache[key]

    @staticmethod
    def build_default() -> Curriculum:
        """Curriculum from the tables in config.py."""
        semesters = []
        sources = {}

        for number, table in ((1, SEMESTER_1_COURSES), (2, SEMESTER_2_COURSES)):
            courses = []
            for name, units in table:
                if name in SPLIT_SYSTEM_COURSES:
                    course = Course(name, units, CourseKind.SPLIT)
                    sources[(name, GradeSystem.LEGACY)] = SOURCE_LINKS[f"{name}{LEGACY_SUFFIX}"]
                    sources[(name, GradeSystem.CURRENT)] = SOURCE_LINKS[f"{name}{CURRENT_SUFFIX}"]
                else:
                    course = Course(name, units, CourseKind.SINGLE)
                    sources[(name, GradeSystem.SINGLE)] = SOURCE_LINKS[name]
                courses.append(course)
            semesters.append(Semester(number, SEMESTER_TITLES[number], tuple(courses)))

        return Curriculum(tuple(semesters), GRADE_POINTS, sources)

    def load_file(self, path) -> Curriculum:
        filepath = Path(path)
        if not filepath.exists():
            raise ConfigurationError(f"Curriculum file not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Curriculum file {filepath} is not valid JSON: {e}") from e
        return self.from_dict(data)

    @staticmethod
    def from_dict(data: dict) -> Curriculum:
        """Build a Curriculum from already-parsed JSON data."""
        semesters = []
        sources = {}

        # Curriculum() validates the grading scale and raises ConfigurationError itself
        try:
            for index, sem in enumerate(data["semesters"], 1):
                number = sem.get("number", index)
                courses = []
                for c in sem.get("courses", []):
                    kind = CourseKind(c.get("kind", CourseKind.SINGLE.value))
                    course = Course(c["name"], c["units"], kind)
                    for system in course.systems:
                        location = c.get("sources", {}).get(system.value)
                        if location:
                            sources[(course.name, system)] = location
                    courses.append(course)
                semesters.append(Semester(number, sem.get("title", f"Semester {number}"), tuple(courses)))
            return Curriculum(tuple(semesters), data.get("grade_scale", GRADE_POINTS), sources)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Malformed curriculum data: {e!r}") from e
