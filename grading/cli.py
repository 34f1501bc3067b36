"""
Command-Line Interface for the GPA calculator.

This module handles user input, logging setup and error presentation.
The calculation itself lives in GPACalculator.

USAGE:
------
    python -m grading 14021
    python -m grading 14021 --json
    python -m grading              # prompts for the student number
"""

import argparse
import json
import logging
import sys

from .config import REQUEST_TIMEOUT, PRIVACY_NOTICE
from .calculator import GPACalculator, is_privacy_protected
from .data import CurriculumLoader, RemoteTextFetcher
from .exceptions import GradingError, PrivacyProtectedError, NoGradesFoundError
from .ui import TerminalDisplay

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_PRIVACY = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grading",
        description="Look up a student's grades and compute semester and overall GPA.",
    )
    parser.add_argument("student_id", nargs="?", help="Student number (prompted for if omitted)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON instead of a table")
    parser.add_argument("--curriculum", type=str, help="Curriculum JSON file (defaults to the built-in tables)")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT,
                        help=f"Seconds per request attempt (default: {REQUEST_TIMEOUT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every fetch attempt")
    return parser


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # urllib3 is noisy at DEBUG and our fetch log already covers each request
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _prompt_student_id() -> str:
    try:
        return input(f"{TerminalDisplay.BOLD}Student number: {TerminalDisplay.RESET}").strip()
    except EOFError:
        return ""


def _report_error(error: GradingError, as_json: bool):
    if as_json:
        print(json.dumps(error.to_payload(), indent=2))
    elif isinstance(error, PrivacyProtectedError):
        TerminalDisplay.print_privacy_notice(str(error))
    elif isinstance(error, NoGradesFoundError):
        TerminalDisplay.print_error(error.message, error.debug_trace)
    else:
        TerminalDisplay.print_error(str(error))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    student_id = args.student_id if args.student_id is not None else _prompt_student_id()

    # Before the curriculum is even loaded
    if is_privacy_protected(student_id):
        _report_error(PrivacyProtectedError(PRIVACY_NOTICE), args.json)
        return EXIT_PRIVACY

    try:
        curriculum = CurriculumLoader().load(args.curriculum)
        calculator = GPACalculator(curriculum, fetcher=RemoteTextFetcher(timeout=args.timeout))

        if args.json:
            report = calculator.calculate(student_id)
            print(json.dumps(report.to_dict(), indent=2))
        else:
            calculator.run(student_id)
    except PrivacyProtectedError as e:
        _report_error(e, args.json)
        return EXIT_PRIVACY
    except GradingError as e:
        _report_error(e, args.json)
        return EXIT_NOT_FOUND

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
