"""
Configuration constants for the GPA calculator.

This module contains the static reference data (grading scale, curriculum,
source links) and the network settings used throughout the package.
Centralizing these makes it easy to adjust when the department publishes
a new grade sheet or a proxy service goes away.
"""

# =============================================================================
# GRADING SCALE
# =============================================================================

# Letter grade -> grade points. Symbols not listed here are never counted
# towards a GPA (they are still shown if a record contains them).
GRADE_POINTS = {
    "F": 0,
    "D": 0.5,
    "DD": 1,
    "C": 1.5,
    "CC": 2,
    "B": 2.5,
    "BB": 3,
    "A": 3.5,
    "AA": 4,
}


# =============================================================================
# CURRICULUM
# =============================================================================
# (course name, credit units) in display order.

SEMESTER_1_COURSES = [
    ("Math1", 12),
    ("Physics1", 12),
    ("English1", 9),
    ("Statistics", 9),
    ("Arabic", 6),
    ("Computer", 9),
]

SEMESTER_2_COURSES = [
    ("Math2", 12),
    ("Physics2", 12),
    ("Chemistry", 9),
    ("Drawing", 6),
    ("English2", 9),
]

SEMESTER_TITLES = {
    1: "Semester 1",
    2: "Semester 2",
}

# Semester 1 grades were published during the move to the new grading
# system, so each of these courses has an old-system AND a new-system sheet.
# Every other course has exactly one sheet.
SPLIT_SYSTEM_COURSES = {name for name, _ in SEMESTER_1_COURSES}


# =============================================================================
# GRADE SHEET LOCATIONS
# =============================================================================
# Keys: "<course>_old" / "<course>_new" for split courses, "<course>" otherwise.

SOURCE_LINKS = {
    "Math1_old": "https://pastebin.com/raw/4WscJMh0",
    "Math1_new": "https://pastebin.com/raw/1NcsJK7g",
    "Physics1_old": "https://pastebin.com/raw/VsZXLGnF",
    "Physics1_new": "https://pastebin.com/raw/XZeQHFSs",
    "English1_old": "https://pastebin.com/raw/AxmBtNeE",
    "English1_new": "https://pastebin.com/raw/ZZsjVX30",
    "Statistics_old": "https://pastebin.com/raw/DY08wqAx",
    "Statistics_new": "https://pastebin.com/raw/2WeYNGM2",
    "Arabic_old": "https://pastebin.com/raw/pUdtTdDC",
    "Arabic_new": "https://pastebin.com/raw/S5R0pKKn",
    "Computer_old": "https://pastebin.com/raw/xM78SjCp",
    "Computer_new": "https://pastebin.com/raw/8fZNVW1s",
    "Math2": "https://pastebin.com/raw/eSiuC5ML",
    "Physics2": "https://pastebin.com/raw/e3FQwB9q",
    "Chemistry": "https://pastebin.com/raw/izG7PzL5",
    "Drawing": "https://pastebin.com/raw/QGnc3Duj",
    "English2": "https://pastebin.com/raw/yBdzjstv",
}

LEGACY_SUFFIX = "_old"
CURRENT_SUFFIX = "_new"


# =============================================================================
# NETWORK
# =============================================================================

# Tried in order; the first one that returns a non-empty body wins.
# The empty prefix means a direct request to the sheet itself.
PROXY_PREFIXES = [
    ("allorigins", "https://api.allorigins.win/raw?url="),
    ("corsproxy", "https://corsproxy.io/?"),
    ("cors-anywhere", "https://cors-anywhere.herokuapp.com/"),
    ("direct", ""),
]

# Seconds per attempt. A hung request otherwise blocks the whole run.
REQUEST_TIMEOUT = 15

USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


# =============================================================================
# PRIVACY
# =============================================================================

# This student asked for their grades to be hidden. The check happens
# before anything is fetched.
PRIVACY_PROTECTED_ID = "33039"
PRIVACY_NOTICE = "This student has requested privacy protection and their grades cannot be displayed."


# =============================================================================
# DISPLAY PLACEHOLDERS
# =============================================================================

UNAVAILABLE_GPA = "No courses available"
NOT_FOUND = "Not Found"
NOT_APPLICABLE = "N/A"
