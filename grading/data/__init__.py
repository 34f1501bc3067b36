"""
Data retrieval, parsing and loading module.

This package handles all network I/O, grade sheet parsing and curriculum
loading.
"""

from .fetcher import RemoteTextFetcher, RetrievalStrategy, prefix_strategy, default_strategies, DIRECT
from .parser import GradeRecordParser, LineKind, ParsedLine, classify_line
from .loader import CurriculumLoader

__all__ = [
    "RemoteTextFetcher",
    "RetrievalStrategy",
    "prefix_strategy",
    "default_strategies",
    "DIRECT",
    "GradeRecordParser",
    "LineKind",
    "ParsedLine",
    "classify_line",
    "CurriculumLoader",
]
