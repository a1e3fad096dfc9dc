"""xlformat exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class FormatError(Exception):
    """Base exception for all xlformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class FormatSyntaxError(FormatError):
    """Format string syntax error.

    Only raised in strict mode. By default the parser reports syntax
    errors through FormatSpec.errors and keeps the sections parsed
    before the failure.
    """


class LocaleIdError(FormatError):
    """Locale identifier from a [$-XXXX] bracket cannot be decoded or resolved."""
