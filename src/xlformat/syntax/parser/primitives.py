"""Primitive tokenizer for format strings.

This module provides the low-level token reader: an ordered list of
independent attempt functions, each taking a Cursor and returning the
advanced Cursor on a match or None otherwise. read_token() commits to
the first attempt that matches, which fixes the tie-break between
overlapping token shapes:

    1. Literals      \\x  *x  _x  "quoted text"
    2. Brackets      [...]  (conditions, colors, currency, locale, [h])
    3. Symbols       # ? , ! & % + - $ € £ 0-9 { } ( ) : ; / . @ space
    4. Keywords      e+  e-  General        (case-insensitive)
    5. Date markers  am/pm  a/p             (case-insensitive)
    6. Date runs     y Y m M d D h H s S g G e  (one or more of the same letter)

Because "e+" is tried before the run of "e", "0.0e+0" yields an
exponent marker while "yyyy e" yields an era date part.
"""

from collections.abc import Callable
from functools import partial

from xlformat.constants import DATE_LETTERS, ESCAPE_PREFIXES, SYMBOL_CHARS
from xlformat.syntax.cursor import Cursor, ParseResult

__all__ = ["TOKEN_READERS", "read_literal", "read_token"]

type TokenReader = Callable[[Cursor], Cursor | None]


def read_literal(cursor: Cursor) -> Cursor | None:
    """Read an escaped, fill, padding or quoted literal.

    Escape-style prefixes consume exactly two characters (clamped at end
    of input, so a trailing backslash is still a token). Quoted text
    runs to the next double quote.

    Example:
        >>> read_literal(Cursor('\\\\x0', 0)).pos
        2
        >>> read_literal(Cursor('"km"0', 0)).pos
        4
    """
    if cursor.peek() is not None and cursor.current in ESCAPE_PREFIXES:
        return cursor.advance(2)
    return cursor.read_enclosed('"', '"')


def _read_keyword(literal: str) -> TokenReader:
    return partial(Cursor.read_string, literal=literal, ignore_case=True)


def _read_run(letter: str) -> TokenReader:
    return partial(Cursor.read_one_or_more, char=letter)


TOKEN_READERS: tuple[TokenReader, ...] = (
    read_literal,
    partial(Cursor.read_enclosed, open_char="[", close_char="]"),
    partial(Cursor.read_one_of, charset=SYMBOL_CHARS),
    _read_keyword("e+"),
    _read_keyword("e-"),
    _read_keyword("General"),
    _read_keyword("am/pm"),
    _read_keyword("a/p"),
    *(_read_run(letter) for letter in DATE_LETTERS),
)


def read_token(cursor: Cursor) -> ParseResult[str] | None:
    """Read the next token.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult(token_text, new_cursor) on success, None if no
        alternative matches (at EOF, or a lexical error if input remains)

    Example:
        >>> result = read_token(Cursor("[Red]0", 0))
        >>> result.value, result.cursor.pos
        ('[Red]', 5)
    """
    if cursor.is_eof:
        return None
    for reader in TOKEN_READERS:
        new_cursor = reader(cursor)
        if new_cursor is not None:
            return ParseResult(cursor.slice_to(new_cursor.pos), new_cursor)
    return None
