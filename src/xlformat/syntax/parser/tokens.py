"""Token classification predicates.

Stateless checks over raw token strings produced by read_token(). The
section parser uses them to decide which kind of section a token run
belongs to; the layout parsers use them to split number runs.

Lexical overlap resolved here:
    - "e+"/"e-" are exponent markers, a bare run of "e" is an era date part
    - "[h]", "[mm]", "[ss]" are bracket tokens but classify as duration
      (and therefore date) parts, never as conditions or colors
    - "General" starts with "G" but is not a date part
"""

from xlformat.constants import (
    DATE_LETTERS,
    DECIMAL_POINT,
    DIGIT_PLACEHOLDERS,
    DURATION_LETTERS,
    ESCAPE_PREFIXES,
    GENERAL_KEYWORD,
    TEXT_PLACEHOLDER,
)

__all__ = [
    "is_date_part",
    "is_digit09",
    "is_digit19",
    "is_digit_placeholder",
    "is_duration_part",
    "is_exponent",
    "is_general",
    "is_literal",
    "is_number_literal",
    "is_placeholder",
]

# Single-character tokens that render as themselves inside a number layout.
_LITERAL_SYMBOLS = frozenset(",!&%+-$€£{}() 123456789")

_AM_PM = ("am/pm", "a/p")


def is_placeholder(token: str) -> bool:
    """Check for a digit placeholder (0 # ?) or the text placeholder (@)."""
    return is_digit_placeholder(token) or token == TEXT_PLACEHOLDER


def is_digit_placeholder(token: str) -> bool:
    """Check for a digit placeholder: 0, # or ?."""
    return len(token) == 1 and token in DIGIT_PLACEHOLDERS


def is_general(token: str) -> bool:
    """Check for the General keyword (case-insensitive)."""
    return token.casefold() == GENERAL_KEYWORD.casefold()


def is_exponent(token: str) -> bool:
    """Check for an exponent marker: e+, e-, E+, E-."""
    return token.casefold() in ("e+", "e-")


def is_duration_part(token: str) -> bool:
    """Check for an elapsed-time token: [h], [hh], [mm], [SS], ...

    The bracket must hold a run of a single unit letter; [Magenta] and
    [h:mm] are not duration parts.
    """
    if len(token) < 3 or token[0] != "[" or token[-1] != "]":
        return False
    inner = token[1:-1]
    return inner[0] in DURATION_LETTERS and inner == inner[0] * len(inner)


def is_date_part(token: str) -> bool:
    """Check for a date/time token.

    Covers letter runs (yyyy, mmm, d, hh, ss, ggg, e), am/pm, a/p and
    elapsed-time brackets.

    Example:
        >>> is_date_part("yyyy"), is_date_part("E+"), is_date_part("General")
        (True, False, False)
    """
    if is_duration_part(token):
        return True
    if token.casefold() in _AM_PM:
        return True
    if not token or token[0] not in DATE_LETTERS:
        return False
    return token == token[0] * len(token)


def is_literal(token: str) -> bool:
    """Check for a token that renders as literal text.

    Escaped (\\x), fill (*x), padding (_x) and quoted ("...") tokens plus
    single-character literal symbols.
    """
    if not token:
        return False
    if token[0] in ESCAPE_PREFIXES or token[0] == '"':
        return True
    return len(token) == 1 and token in _LITERAL_SYMBOLS


def is_number_literal(token: str) -> bool:
    """Check for a token usable inside a plain number layout.

    Digit placeholders, literal text, literal digits and the decimal point.
    """
    return is_digit_placeholder(token) or is_literal(token) or token == DECIMAL_POINT


def is_digit09(token: str) -> bool:
    """Check for a single literal digit 0-9."""
    return token == "0" or is_digit19(token)


def is_digit19(token: str) -> bool:
    """Check for a single literal digit 1-9."""
    return len(token) == 1 and token in "123456789"
