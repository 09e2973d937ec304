"""
Custom exceptions for the DNA Spectrum Engine.

All exceptions inherit from DNASpectrumError to enable unified error handling
across the application.
"""


class DNASpectrumError(Exception):
    """Base exception for all DNA Spectrum Engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DNASpectrumError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Missing settings file
        - Invalid YAML syntax
        - Bundled interpretation content missing a profile type
    """

    pass


class AssessmentValidationError(DNASpectrumError):
    """Base class for rejected assessment submissions.

    Raised by the boundary layer before responses reach the scoring core.
    """

    pass


class InvalidResponseCountError(AssessmentValidationError):
    """Raised when the number of responses is not the catalog size.

    Attributes:
        expected: Number of responses required.
        received: Number of responses supplied.
    """

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid responses. Expected {expected} answers.",
            details={"expected": expected, "received": received},
        )


class InvalidScoreRangeError(AssessmentValidationError):
    """Raised when any score falls outside the Likert range.

    Attributes:
        question_ids: Ids of the questions carrying out-of-range scores.
    """

    def __init__(
        self,
        question_ids: list[int],
        minimum: int,
        maximum: int,
    ) -> None:
        self.question_ids = question_ids
        super().__init__(
            f"Invalid scores. All responses must be between {minimum} and {maximum}.",
            details={"question_ids": question_ids},
        )


class InvalidQuestionSetError(AssessmentValidationError):
    """Raised when responses do not cover every question exactly once.

    Attributes:
        missing: Catalog ids with no response.
        duplicates: Ids answered more than once.
        unknown: Ids not present in the catalog.
    """

    def __init__(
        self,
        missing: list[int],
        duplicates: list[int],
        unknown: list[int],
    ) -> None:
        self.missing = missing
        self.duplicates = duplicates
        self.unknown = unknown
        super().__init__(
            "Invalid responses. Each question must be answered exactly once.",
            details={
                "missing": missing,
                "duplicates": duplicates,
                "unknown": unknown,
            },
        )


class AssessmentNotFoundError(DNASpectrumError):
    """Raised when a requested assessment result has no stored record.

    Attributes:
        assessment_id: The identifier that was looked up.
    """

    def __init__(self, assessment_id: str) -> None:
        self.assessment_id = assessment_id
        super().__init__(
            "Assessment not found",
            details={"assessment_id": assessment_id},
        )


class PersistenceError(DNASpectrumError):
    """Raised when the storage collaborator fails.

    On submission this is logged and swallowed by the Orchestrator so the
    computed result still reaches the caller.

    Examples:
        - Output directory cannot be created
        - Result file cannot be written
        - Stored file is not valid JSON/YAML
    """

    pass


class ReportGenerationError(DNASpectrumError):
    """Raised when a PDF or HTML report cannot be rendered."""

    pass
