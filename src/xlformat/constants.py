"""Shared constants for xlformat.

This module provides centralized configuration constants used across
the syntax layer. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Tokenizer alphabets: Characters accepted by the format tokenizer
- Bracket vocabularies: Colors and condition operators

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Tokenizer alphabets
    "SYMBOL_CHARS",
    "ESCAPE_PREFIXES",
    "DATE_LETTERS",
    "DURATION_LETTERS",
    "ASCII_DIGITS",
    # Bracket vocabularies
    "COLOR_NAMES",
    "CONDITION_OPERATORS",
    # Tokens
    "SECTION_SEPARATOR",
    "DECIMAL_POINT",
    "TEXT_PLACEHOLDER",
    "DIGIT_PLACEHOLDERS",
    "GENERAL_KEYWORD",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Real-world format strings are well under 256 characters (Excel caps the
# number format field at 255). 64 KB leaves generous headroom while
# bounding work for hostile input.
MAX_SOURCE_SIZE: int = 64 * 1024

# ============================================================================
# TOKENIZER ALPHABETS
# ============================================================================

# Single-character symbol tokens. Space is a literal, not a separator.
SYMBOL_CHARS: str = "#?,!&%+-$€£0123456789{}():;/.@ "

# Characters that take the following character as a literal (two-char token).
# \x escapes, *x repeats x to fill, _x pads with the width of x.
ESCAPE_PREFIXES: str = "\\*_"

# Letters whose runs form date/time tokens, in tokenizer priority order.
DATE_LETTERS: str = "yYmMdDhHsSgGe"

# Letters allowed inside elapsed-time brackets: [h], [mm], [ss].
DURATION_LETTERS: str = "hmsHMS"

# ASCII digits only; str.isdigit() accepts superscripts and other scripts.
ASCII_DIGITS: str = "0123456789"

# ============================================================================
# BRACKET VOCABULARIES
# ============================================================================

# Fixed 8-color palette. Numbered palette entries ([Color1] and up) are
# not recognized.
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "blue",
    "cyan",
    "green",
    "magenta",
    "red",
    "white",
    "yellow",
)

# Longest match first: "<=" and "<>" must be tried before "<".
CONDITION_OPERATORS: tuple[str, ...] = ("<=", "<>", "<", ">=", ">", "=")

# ============================================================================
# TOKENS
# ============================================================================

SECTION_SEPARATOR: str = ";"
DECIMAL_POINT: str = "."
TEXT_PLACEHOLDER: str = "@"
DIGIT_PLACEHOLDERS: str = "0#?"
GENERAL_KEYWORD: str = "General"
