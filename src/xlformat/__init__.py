"""xlformat - spreadsheet number format parser.

Parses custom number format strings such as ``#,##0.00;[Red]-#,##0.00;;@``
into immutable, typed sections that a renderer uses to format dates,
numbers and text.

Public API:
    parse_format - Parse a format string into a FormatSpec
    serialize_format - Rebuild a format string from a FormatSpec or Section
    FormatParser - Configurable parser (size limit, strict mode)
    FormatSpec, Section - Parse results
    SectionType, ConditionOperator - Enumerations

Exceptions:
    FormatError - Base exception class
    FormatSyntaxError - Syntax errors (strict mode only)
    LocaleIdError - Undecodable [$-XXXX] locale ids

Submodules:
    xlformat.syntax.ast - Syntax tree node types (Section, layouts, Condition, Color)
    xlformat.diagnostics - Error codes, templates and formatting
    xlformat.locale_utils - Locale id decoding and optional Babel resolution
"""

from .diagnostics import FormatError, FormatSyntaxError, LocaleIdError
from .enums import ConditionOperator, SectionType
from .syntax import FormatParser, FormatSpec, Section
from .syntax import parse as parse_format
from .syntax import serialize as serialize_format

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("xlformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConditionOperator",
    "FormatError",
    "FormatParser",
    "FormatSpec",
    "FormatSyntaxError",
    "LocaleIdError",
    "Section",
    "SectionType",
    "__version__",
    "parse_format",
    "serialize_format",
]
