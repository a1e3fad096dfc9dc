"""Bracket expression parsers.

Interprets the inner text of a ``[...]`` token. Elapsed-time brackets
([h], [mm], [ss]) never reach this module: the classifier routes them
as duration parts first.

Priority order, first success wins:
    1. Condition        [>=100]  [<>0]  [<=-1.5e+3]
    2. Color            [Red]  [BLUE]
    3. Currency symbol  [$€-407]  [$USD]
    4. Locale id        [$-411]  [$-F800]

Anything else is silently ignored: forward-compatible handling for
directives this parser does not know ([Color10], [DBNum1], ...).
"""

import logging
from dataclasses import dataclass

from xlformat.constants import ASCII_DIGITS, COLOR_NAMES, CONDITION_OPERATORS
from xlformat.enums import ConditionOperator
from xlformat.syntax.ast import Color, Condition
from xlformat.syntax.cursor import Cursor

__all__ = [
    "BracketExpression",
    "CurrencySymbol",
    "LocaleTag",
    "parse_bracket",
    "parse_color",
    "parse_condition",
    "parse_currency",
    "parse_locale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CurrencySymbol:
    """Currency directive: [$€-407] gives symbol "€", locale_id "407"."""

    symbol: str
    locale_id: str | None = None

    @property
    def literal_token(self) -> str:
        """The symbol as a quoted literal token for the section output."""
        return f'"{self.symbol}"'


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Locale directive without a symbol: [$-411] gives locale_id "411"."""

    locale_id: str


type BracketExpression = Condition | Color | CurrencySymbol | LocaleTag


def _skip_digits(cursor: Cursor) -> tuple[Cursor, int]:
    count = 0
    while (advanced := cursor.read_one_of(ASCII_DIGITS)) is not None:
        cursor = advanced
        count += 1
    return cursor, count


def _read_condition_value(cursor: Cursor) -> Cursor | None:
    """Read -?digits(.digits)?([eE][+-]digits)? with at least one mantissa digit."""
    cursor = cursor.read_string("-") or cursor
    cursor, int_digits = _skip_digits(cursor)

    frac_digits = 0
    if (after_point := cursor.read_string(".")) is not None:
        cursor, frac_digits = _skip_digits(after_point)

    if int_digits + frac_digits == 0:
        return None

    exponent = cursor.read_string("e+", ignore_case=True) or cursor.read_string(
        "e-", ignore_case=True
    )
    if exponent is not None:
        cursor, exp_digits = _skip_digits(exponent)
        if exp_digits == 0:
            return None

    return cursor


def parse_condition(expression: str) -> Condition | None:
    """Parse a condition: operator followed by a number.

    The number always uses '.' as decimal point, independent of the
    process locale. The longest valid number after the operator is used
    and anything after it is ignored; an exponent marker without digits
    rejects the condition.

    Example:
        >>> parse_condition(">=100")
        Condition(operator=<ConditionOperator.GE: '>='>, value=100.0)
        >>> parse_condition(">1e5")
        Condition(operator=<ConditionOperator.GT: '>'>, value=1.0)
        >>> parse_condition(">=1e+") is None
        True
    """
    cursor = Cursor(expression, 0)
    for operator in CONDITION_OPERATORS:
        after_operator = cursor.read_string(operator)
        if after_operator is not None:
            break
    else:
        return None

    end = _read_condition_value(after_operator)
    if end is None:
        return None

    value = float(after_operator.slice_to(end.pos))
    return Condition(operator=ConditionOperator(operator), value=value)


def parse_color(expression: str) -> Color | None:
    """Parse a palette color, case-insensitively, keeping the spelling used.

    Example:
        >>> parse_color("RED")
        Color(value='RED')
        >>> parse_color("Color3") is None
        True
    """
    if expression.lower() in COLOR_NAMES:
        return Color(value=expression)
    return None


def parse_currency(expression: str) -> CurrencySymbol | None:
    """Parse a currency directive: $ then the symbol, optionally -locale.

    The symbol is everything between '$' and the first '-' (or the end).
    An empty symbol is not a currency directive.

    Example:
        >>> parse_currency("$€-407")
        CurrencySymbol(symbol='€', locale_id='407')
        >>> parse_currency("$-411") is None
        True
    """
    if not expression.startswith("$"):
        return None
    symbol, dash, locale_id = expression[1:].partition("-")
    if not symbol:
        return None
    return CurrencySymbol(symbol=symbol, locale_id=locale_id if dash and locale_id else None)


def parse_locale(expression: str) -> LocaleTag | None:
    """Parse a bare locale directive: $-XXXX.

    Example:
        >>> parse_locale("$-F800")
        LocaleTag(locale_id='F800')
    """
    if not expression.startswith("$-"):
        return None
    locale_id = expression[2:]
    if not locale_id:
        return None
    return LocaleTag(locale_id=locale_id)


_BRACKET_PARSERS = (parse_condition, parse_color, parse_currency, parse_locale)


def parse_bracket(token: str) -> BracketExpression | None:
    """Interpret a complete bracket token such as "[Red]".

    Args:
        token: Bracket token including the delimiters

    Returns:
        The first matching expression, or None for unrecognized content
    """
    expression = token[1:-1]
    for parser in _BRACKET_PARSERS:
        result = parser(expression)
        if result is not None:
            return result
    logger.debug("Ignoring unrecognized bracket expression %r", token)
    return None
