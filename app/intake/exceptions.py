class IntakeError(Exception):
    """Base exception for all intake pipeline errors.

    ``str(exc)`` is the human-readable message surfaced to the user; the
    technical cause, when there is one, is chained as ``__cause__``.
    """


class ReadError(IntakeError):
    """Raised when the selected file cannot be read into memory."""

    DEFAULT_MESSAGE = "Failed to read image file"

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class AnalysisError(IntakeError):
    """Raised when the analysis provider rejects the request or errors."""

    DEFAULT_MESSAGE = "Failed to analyze image"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)
        self.status_code = status_code


class MalformedResponseError(AnalysisError):
    """Raised when the provider succeeded but its payload has no usable text."""

    DEFAULT_MESSAGE = "Invalid response format"


class PersistenceError(IntakeError):
    """Raised when an object storage or record store operation fails."""


class PipelineBusyError(IntakeError):
    """Raised when a run is started while another one is still in flight."""
