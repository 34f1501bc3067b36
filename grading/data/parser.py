"""
Grade sheet parsing.

This module turns the raw text of a grade sheet into a mapping of
student number -> letter grade.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import FetchResult, GradeRecordSet

logger = logging.getLogger(__name__)

# "33039 AA": digits, whitespace, uppercase letters, nothing else
WHITESPACE_RECORD = re.compile(r"^\d+\s+[A-Z]+$")


class LineKind(Enum):
    """
    Which record format a line matched.

    COLON: "33039:AA" or "14021 : BB"
    WHITESPACE: "33039 AA"
    UNRECOGNIZED: anything else (headers, blank lines, notes)
    """
    COLON = "colon"
    WHITESPACE = "whitespace"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParsedLine:
    kind: LineKind
    student_id: Optional[str] = None
    grade: Optional[str] = None

    @property
    def is_record(self) -> bool:
        return self.kind != LineKind.UNRECOGNIZED


UNRECOGNIZED = ParsedLine(LineKind.UNRECOGNIZED)


def classify_line(line: str) -> ParsedLine:
    """
    Classify one line of a grade sheet.

    FORMAT ORDER:
    -------------
    1. Any line containing a colon is read as "<id>:<grade>". It is split on
       every colon and the first two fields are used, so "1:AA:extra" still
       gives ("1", "AA"). If either field is empty after trimming the line is
       UNRECOGNIZED; it is NOT retried as the whitespace format.
    2. Otherwise the whole trimmed line must look like "33039 AA".
    """
    trimmed = line.strip()
    if not trimmed:
        return UNRECOGNIZED

    if ":" in trimmed:
        parts = trimmed.split(":")
        student_id = parts[0].strip()
        grade = parts[1].strip()
        if student_id and grade:
            return ParsedLine(LineKind.COLON, student_id, grade)
        return UNRECOGNIZED

    if WHITESPACE_RECORD.match(trimmed):
        student_id, grade = trimmed.split()
        return ParsedLine(LineKind.WHITESPACE, student_id, grade)

    return UNRECOGNIZED


class GradeRecordParser:
    """
    Best-effort extraction of grades from unstructured text.

    Grade sheets are pasted by hand, so they mix both record formats with
    headers, notes and blank lines. Anything that isn't a record is skipped.
    If a student appears twice, the later line wins.

    Usage:
        parser = GradeRecordParser()
        parser.parse("33039:AA\\n14021 BB\\n")   # {"33039": "AA", "14021": "BB"}
    """

    def parse(self, text: Optional[str]) -> dict:
        grades = {}
        if not text:
            return grades

        # Sheets saved from Windows editors can start with a byte-order mark
        text = text.lstrip("\ufeff")

        skipped = 0
        for line in text.split("\n"):
            parsed = classify_line(line)
            if parsed.is_record:
                grades[parsed.student_id] = parsed.grade
            elif line.strip():
                skipped += 1

        logger.debug("parsed_sheet students=%d skipped_lines=%d", len(grades), skipped)
        return grades

    def parse_result(self, result: FetchResult) -> GradeRecordSet:
        """Wrap a fetch outcome. A failed fetch becomes an empty record set."""
        if not result.ok:
            return GradeRecordSet(location=result.location, error=result.error)

        return GradeRecordSet(
            location=result.location,
            grades=self.parse(result.text),
            raw_text=result.text,
        )
