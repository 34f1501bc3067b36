"""
Student GPA Calculator Package
==============================

Looks up one student's letter grades across a two-semester curriculum and
computes a credit-weighted GPA per semester and overall.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌───────────────────┐  ┌──────────────────┐  ┌──────────────────────┐  │
│  │ RemoteTextFetcher │  │GradeRecordParser │  │  CurriculumLoader    │  │
│  │ (proxy chain I/O) │  │ (sheet parsing)  │  │  (static tables)     │  │
│  └───────────────────┘  └──────────────────┘  └──────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │  CourseGradeResolver    │  │         GPAAggregator               │  │
│  │ (new > old priority)    │  │   (credit-weighted GPA)             │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  │  • Can be replaced with: WebDisplay, APIResponse                │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        GPACalculator                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

grading/
├── __init__.py          # This file - main exports
├── config.py            # Grading scale, curriculum, sheet links, proxies
├── exceptions.py        # GradingError hierarchy
├── calculator.py        # GPACalculator orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, Semester, Curriculum, CourseKind, GradeSystem
│   ├── grade.py         # FetchResult, GradeRecordSet, ResolvedGrade
│   └── report.py        # CourseResult, SemesterGPA, GPAReport
│
├── data/                # Network, parsing and loading
│   ├── fetcher.py       # RemoteTextFetcher
│   ├── parser.py        # GradeRecordParser
│   └── loader.py        # CurriculumLoader
│
├── engines/
│   ├── resolver.py      # CourseGradeResolver
│   └── gpa.py           # GPAAggregator
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from grading import GPACalculator

    calculator = GPACalculator()
    report = calculator.calculate("14021")
    report.to_dict()

Running from command line:

    python -m grading 14021

"""

# Version
__version__ = "1.0.0"

# Main exports
from .calculator import GPACalculator
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    CourseKind,
    GradeSystem,
    Semester,
    Curriculum,
    FetchAttempt,
    FetchResult,
    GradeRecordSet,
    ResolvedGrade,
    CourseResult,
    SemesterGPA,
    SemesterReport,
    GPAReport,
    format_gpa,
)

# Engine exports (for advanced use)
from .engines import CourseGradeResolver, GPAAggregator

# Data exports
from .data import (
    RemoteTextFetcher,
    RetrievalStrategy,
    prefix_strategy,
    GradeRecordParser,
    LineKind,
    classify_line,
    CurriculumLoader,
)

# Error exports
from .exceptions import (
    GradingError,
    ConfigurationError,
    InvalidStudentIdError,
    PrivacyProtectedError,
    NoGradesFoundError,
)

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    GRADE_POINTS,
    PROXY_PREFIXES,
    REQUEST_TIMEOUT,
    PRIVACY_PROTECTED_ID,
    PRIVACY_NOTICE,
    UNAVAILABLE_GPA,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GPACalculator",
    "main",
    # Models
    "Course",
    "CourseKind",
    "GradeSystem",
    "Semester",
    "Curriculum",
    "FetchAttempt",
    "FetchResult",
    "GradeRecordSet",
    "ResolvedGrade",
    "CourseResult",
    "SemesterGPA",
    "SemesterReport",
    "GPAReport",
    "format_gpa",
    # Engines
    "CourseGradeResolver",
    "GPAAggregator",
    # Data
    "RemoteTextFetcher",
    "RetrievalStrategy",
    "prefix_strategy",
    "GradeRecordParser",
    "LineKind",
    "classify_line",
    "CurriculumLoader",
    # Errors
    "GradingError",
    "ConfigurationError",
    "InvalidStudentIdError",
    "PrivacyProtectedError",
    "NoGradesFoundError",
    # UI
    "TerminalDisplay",
    # Config
    "GRADE_POINTS",
    "PROXY_PREFIXES",
    "REQUEST_TIMEOUT",
    "PRIVACY_PROTECTED_ID",
    "PRIVACY_NOTICE",
    "UNAVAILABLE_GPA",
]
