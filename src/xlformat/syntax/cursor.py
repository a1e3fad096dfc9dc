"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for format string tokenizing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - read_* primitives return the advanced cursor on a match and None
      otherwise, so a failed alternative never moves the position

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from xlformat.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("0.00", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance().current
        '.'
        >>> cursor.current  # Original unchanged (immutability)
        '0'
        >>> Cursor("0", 1).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions, clamped to source length.

        Example:
            >>> Cursor("ab", 1).advance(5).pos
            2
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Usage:
            >>> start = Cursor("yyyy-mm", 0)
            >>> end = start.read_one_or_more("y")
            >>> start.slice_to(end.pos)
            'yyyy'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def read_one_of(self, charset: str) -> "Cursor | None":
        """Consume one character if it is a member of charset.

        Args:
            charset: Accepted characters

        Returns:
            New cursor advanced by 1, or None if no match or at EOF

        Example:
            >>> Cursor("#,##0", 0).read_one_of("#0").pos
            1
            >>> Cursor("x", 0).read_one_of("#0") is None
            True
        """
        if not self.is_eof and self.current in charset:
            return self.advance()
        return None

    def read_string(self, literal: str, ignore_case: bool = False) -> "Cursor | None":
        """Consume literal if the upcoming text matches it.

        Args:
            literal: Text to match
            ignore_case: Compare case-insensitively

        Returns:
            New cursor advanced past the literal, or None if no match

        Example:
            >>> Cursor("AM/PM", 0).read_string("am/pm", ignore_case=True).pos
            5
            >>> Cursor("AM/PM", 0).read_string("am/pm") is None
            True
        """
        ahead = self.slice_ahead(len(literal))
        if len(ahead) < len(literal):
            return None
        if ignore_case:
            matched = ahead.casefold() == literal.casefold()
        else:
            matched = ahead == literal
        return self.advance(len(literal)) if matched else None

    def read_one_or_more(self, char: str) -> "Cursor | None":
        """Consume a run of one or more occurrences of char (case-sensitive).

        Example:
            >>> Cursor("mmmyy", 0).read_one_or_more("m").pos
            3
            >>> Cursor("Mm", 0).read_one_or_more("m") is None
            True
        """
        if self.peek() != char:
            return None
        cursor = self
        while cursor.peek() == char:
            cursor = cursor.advance()
        return cursor

    def read_enclosed(self, open_char: str, close_char: str) -> "Cursor | None":
        """Consume open_char, content, and the first following close_char.

        Delimiters do not nest; the first close_char ends the run.

        Returns:
            New cursor after close_char, or None if open_char does not
            match or close_char never occurs

        Example:
            >>> Cursor('"a"b"', 0).read_enclosed('"', '"').pos
            3
            >>> Cursor("[Red", 0).read_enclosed("[", "]") is None
            True
        """
        if self.peek() != open_char:
            return None
        close_pos = self.source.find(close_char, self.pos + 1)
        if close_pos < 0:
            return None
        return Cursor(self.source, close_pos + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = Cursor("0.00", 0)
        >>> result = ParseResult("0", cursor.advance())
        >>> result.value
        '0'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
