"""
Exceptions for the GPA calculator.

Only configuration problems and the final user-facing outcomes are raised.
Network and parsing problems inside a single course never surface as
exceptions: they degrade that course to "not found" instead.
"""


class GradingError(Exception):
    """Base class for every error the calculator reports to a user."""

    def to_payload(self) -> dict:
        return {"error": str(self)}


class ConfigurationError(GradingError):
    """The curriculum, source table or strategy list is unusable."""


class InvalidStudentIdError(GradingError):
    """No student number was given."""


class PrivacyProtectedError(GradingError):
    """The student asked for their grades to be hidden."""


class NoGradesFoundError(GradingError):
    """
    No course in any semester had a grade for the student.

    Carries the per-course debug trace so the user can see which sheets
    were checked and what came back.
    """

    def __init__(self, student_id: str, debug_trace: list):
        self.student_id = student_id
        self.debug_trace = list(debug_trace)
        message = (
            f"No grades found for student number: {student_id}. "
            "Please check if your student number is correct."
        )
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]

    def to_payload(self) -> dict:
        return {"error": self.message, "debug": list(self.debug_trace)}
