"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (format string tokenizer and section parser)
        4000-4999: Locale identifier errors
    """

    # Syntax errors (3000-3999)
    # 3001: UNEXPECTED_EOF - cursor signals early end of input
    # 3002: LEXICAL_ERROR - no tokenizer alternative matched
    # 3003: MIXED_SECTION_KINDS - date, General and text tokens in one section
    # 3004: INVALID_NUMBER_LAYOUT - no fraction/exponential/decimal layout fits
    # 3005: TRAILING_SEPARATOR - ';' followed by end of input
    UNEXPECTED_EOF = 3001
    LEXICAL_ERROR = 3002
    MIXED_SECTION_KINDS = 3003
    INVALID_NUMBER_LAYOUT = 3004
    TRAILING_SEPARATOR = 3005

    # Locale identifier errors (4000-4999)
    LOCALE_ID_INVALID = 4001
    LOCALE_ID_UNKNOWN = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Format strings often contain multi-byte currency symbols
        such as U+20AC, so character offset differs from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start (format strings are single-line)."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors without a position)
        hint: Suggestion for fixing the error
        section_index: Index of the section the error belongs to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    section_index: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[LEXICAL_ERROR]: Unrecognized character 'x' at position 2
              --> column 3
              = section: 0
              = help: Quote literal text ("x") or escape it (\\x)

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
