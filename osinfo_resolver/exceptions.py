"""
Custom exceptions for the osinfo resolver.
"""


class OsinfoResolverError(Exception):
    """Base exception class for all osinfo resolver errors."""
    pass


class InsufficientDataError(OsinfoResolverError):
    """Raised when a fact required for resolution is absent or unparsable.

    This is distinct from an ``"unknown"`` result: the resolver never got far
    enough to classify the installation.
    """

    def __init__(self, message: str, field: str = None, root: str = None):
        self.field = field
        self.root = root

        if root:
            message = f"Insufficient data for root '{root}': {message}"

        super().__init__(message)


class FactsParseError(OsinfoResolverError):
    """Raised when a facts document cannot be parsed."""

    def __init__(self, message: str, file_path: str = None, entry_index: int = None):
        self.file_path = file_path
        self.entry_index = entry_index

        if file_path:
            message = f"Error parsing facts file '{file_path}': {message}"
            if entry_index is not None:
                message += f" (entry {entry_index})"

        super().__init__(message)


class FactsNotFoundError(OsinfoResolverError):
    """Raised when a facts provider has nothing recorded for a root."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"No facts recorded for root '{root}'")


class ConfigurationError(OsinfoResolverError):
    """Raised when configuration is invalid."""
    pass


class ReportGenerationError(OsinfoResolverError):
    """Raised when report generation fails."""

    def __init__(self, message: str, format_name: str = None, output_path: str = None):
        self.format_name = format_name
        self.output_path = output_path

        if format_name:
            message = f"Report generation error for format '{format_name}': {message}"
            if output_path:
                message += f" (output: {output_path})"

        super().__init__(message)
