"""Format string syntax package.

Provides the parser, syntax tree definitions and serialization.
Separate from any renderer so tooling (validators, normalizers,
spreadsheet writers) can use it on its own.

Python 3.13+.
"""

from .ast import (
    Annotation,
    Color,
    Condition,
    DecimalLayout,
    ExponentialLayout,
    FormatSpec,
    FractionLayout,
    Layout,
    Section,
    Span,
    TokenRun,
)
from .cursor import Cursor, ParseResult
from .parser import FormatParser
from .serializer import serialize

__all__ = [
    "Annotation",
    "Color",
    "Condition",
    "Cursor",
    "DecimalLayout",
    "ExponentialLayout",
    "FormatParser",
    "FormatSpec",
    "FractionLayout",
    "Layout",
    "ParseResult",
    "Section",
    "Span",
    "TokenRun",
    "parse",
    "serialize",
]


def parse(source: str, *, strict: bool = False) -> FormatSpec:
    """Parse a format string into sections.

    Convenience function for FormatParser.parse().

    Args:
        source: Format string
        strict: Raise FormatSyntaxError instead of recording syntax errors

    Returns:
        FormatSpec containing parsed sections

    Example:
        >>> from xlformat.syntax import parse
        >>> spec = parse("[>=100]0")
        >>> spec.sections[0].condition.value
        100.0
    """
    parser = FormatParser(strict=strict)
    return parser.parse(source)
