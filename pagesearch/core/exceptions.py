"""
Custom exception hierarchy for the page search engine.

Provides specific exception types for different failure modes:
configuration errors, input validation, page parsing, database issues,
and search problems.
"""


class PageSearchError(Exception):
    """Base exception for all page search errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PageSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class ValidationError(PageSearchError):
    """Raised when a source file fails a precondition before indexing."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        """
        Initialize validation error.

        Args:
            message: Error description.
            filepath: Path of the rejected file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath


class PageParseError(PageSearchError):
    """Raised when a page marker line cannot be parsed."""

    def __init__(
        self,
        message: str,
        filepath: str = None,
        line_number: int = None,
        line: str = None,
        details: dict = None
    ):
        """
        Initialize parse error.

        Args:
            message: Error description.
            filepath: File key being indexed.
            line_number: 1-based line number of the offending line.
            line: The offending line.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath
        self.line_number = line_number
        self.line = line


class DatabaseError(PageSearchError):
    """Raised when SQLite operations fail."""
    pass
