"""Format string parser entry point.

This module provides the FormatParser class that splits a complete
format string into sections by calling
:func:`~xlformat.syntax.parser.rules.parse_section` until the input is
exhausted.

Architecture:
    The parser uses an immutable cursor pattern (:class:`~xlformat.syntax.cursor.Cursor`)
    to traverse the source. Each rule returns a
    :class:`~xlformat.syntax.cursor.ParseResult` with the parsed value and
    the updated cursor position.

Error model:
    Malformed input never raises by default. The first section-level
    error ends parsing; every section accepted before it is kept and the
    error is recorded in :attr:`FormatSpec.errors`. With ``strict=True``
    the error is raised as :class:`~xlformat.diagnostics.FormatSyntaxError`
    instead.

    An attempt that produces no output tokens also ends parsing. It is an
    error only when it starts at end of input right after a ';' (a
    dangling separator); ";;" and "[Red];" end parsing silently.

Security:
    Includes configurable input size limit to bound work on hostile input.
"""

import logging

from xlformat.constants import MAX_SOURCE_SIZE
from xlformat.diagnostics import Diagnostic, ErrorTemplate, FormatSyntaxError
from xlformat.syntax.ast import Annotation, FormatSpec, Section, Span
from xlformat.syntax.cursor import Cursor
from xlformat.syntax.parser.rules import parse_section

__all__ = ["FormatParser"]

logger = logging.getLogger(__name__)

# Maximum source length included in log messages.
_LOG_TRUNCATE: int = 80


def _annotation_from(diagnostic: Diagnostic) -> Annotation:
    span = None
    if diagnostic.span is not None:
        span = Span(start=diagnostic.span.start, end=diagnostic.span.end)
    return Annotation(code=diagnostic.code.name, message=diagnostic.message, span=span)


class FormatParser:
    """Spreadsheet number format parser.

    Design:
    - Immutable after construction, safe to share between threads
    - Never raises for malformed input unless strict mode is enabled
    - Syntax errors carry a code, message and span

    Attributes:
        max_source_size: Maximum allowed source length in characters (default: 64 KB)
        strict: Raise FormatSyntaxError instead of recording errors
    """

    __slots__ = ("_max_source_size", "_strict")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        strict: bool = False,
    ) -> None:
        """Initialize parser with optional size limit and error mode.

        Args:
            max_source_size: Maximum source length (default: 64 KB).
                            Set to 0 to disable the limit.
            strict: Raise on the first syntax error instead of recording it.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._strict = strict

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source length in characters."""
        return self._max_source_size

    @property
    def strict(self) -> bool:
        """Whether syntax errors are raised."""
        return self._strict

    def parse(self, source: str) -> FormatSpec:
        """Parse a format string into sections.

        Args:
            source: Format string such as ``#,##0.00;[Red]-#,##0.00;;@``

        Returns:
            :class:`~xlformat.syntax.ast.FormatSpec` with the sections
            parsed before the first error (all of them if there is none)

        Raises:
            ValueError: If source exceeds max_source_size
            FormatSyntaxError: On the first syntax error, in strict mode only

        Example:
            >>> spec = FormatParser().parse("0.00;[Red]-0.00")
            >>> [str(section.type) for section in spec.sections]
            ['number', 'number']
            >>> spec.has_syntax_error
            False
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in FormatParser constructor to increase limit."
            )
            raise ValueError(msg)

        cursor = Cursor(source, 0)
        sections: list[Section] = []
        error: Diagnostic | None = None
        after_separator = False

        while True:
            result = parse_section(cursor, len(sections))
            outcome = result.value

            if outcome.error is not None:
                error = outcome.error
                break

            if outcome.section is None:
                if after_separator and cursor.is_eof:
                    error = ErrorTemplate.trailing_separator(cursor.pos - 1, len(sections))
                break

            sections.append(outcome.section)
            after_separator = outcome.closed_by_separator
            cursor = result.cursor

        errors: tuple[Annotation, ...] = ()
        if error is not None:
            logger.debug(
                "Syntax error in format %r: %s", source[:_LOG_TRUNCATE], error.message
            )
            if self._strict:
                raise FormatSyntaxError(error)
            errors = (_annotation_from(error),)

        return FormatSpec(sections=tuple(sections), errors=errors, source=source)
