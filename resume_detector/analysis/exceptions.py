class AnalysisError(Exception):
    """Base exception for client-fault analysis failures.

    The exception message is the text returned to the client.
    """

    default_message: str = "Failed to analyze resume"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingFileError(AnalysisError):
    """Raised when the request carries no file."""

    default_message = "No file provided"


class UnsupportedMediaTypeError(AnalysisError):
    """Raised when the uploaded file is not declared as a PDF."""

    default_message = "File must be a PDF"


class FileTooLargeError(AnalysisError):
    """Raised when the uploaded file exceeds the size limit."""

    default_message = "File size must be less than 10MB"


class TextExtractionError(AnalysisError):
    """Raised when no usable text could be recovered from the PDF."""

    default_message = "Could not extract text from PDF"
