"""Number layout parsers.

Classifies the flat token run of a number section. The section parser
tries the layouts in a fixed order and keeps the first that fits:

    1. parse_fraction     # ?/?    # ??/100    ?/8
    2. parse_exponential  0.00E+00 ##0.0e-0
    3. parse_decimal      #,##0.00 0%  #,##0,"K"

All three share split_decimal(), which partitions a run around its
first decimal point.
"""

from dataclasses import dataclass

from xlformat.constants import DECIMAL_POINT
from xlformat.syntax.ast import DecimalLayout, ExponentialLayout, FractionLayout, TokenRun
from xlformat.syntax.parser.tokens import (
    is_digit09,
    is_digit19,
    is_digit_placeholder,
    is_exponent,
    is_number_literal,
)

__all__ = [
    "NumberTokens",
    "parse_decimal",
    "parse_exponential",
    "parse_fraction",
    "split_decimal",
]


@dataclass(frozen=True, slots=True)
class NumberTokens:
    """Result of split_decimal().

    Attributes:
        count: Number of tokens consumed from the start of the run
        before_decimal: Number tokens before the decimal point (None if empty)
        decimal_separator: True if a decimal point was consumed
        after_decimal: Number tokens after the decimal point (None if empty)
    """

    count: int
    before_decimal: TokenRun | None
    decimal_separator: bool
    after_decimal: TokenRun | None


def _or_none(tokens: list[str] | tuple[str, ...]) -> TokenRun | None:
    return tuple(tokens) if tokens else None


def split_decimal(tokens: TokenRun) -> NumberTokens:
    """Consume the leading number tokens of a run, splitting at the decimal point.

    Scans left to right. The first '.' becomes the decimal point; number
    literals accumulate; bracket tokens are skipped; any other token
    stops the scan. A later '.' is not a second decimal point: it is a
    plain number literal and lands in the after-decimal group.

    Example:
        >>> split_decimal(("#", ",", "0", ".", "0", "0"))
        NumberTokens(count=6, before_decimal=('#', ',', '0'), decimal_separator=True, after_decimal=('0', '0'))
        >>> split_decimal(("0", "E+", "0")).count
        1
    """
    before: list[str] | None = None
    remainder: list[str] = []
    count = len(tokens)

    for index, token in enumerate(tokens):
        if token == DECIMAL_POINT and before is None:
            before = remainder
            remainder = []
        elif is_number_literal(token):
            remainder.append(token)
        elif token.startswith("["):
            continue
        else:
            count = index
            break

    if before is None:
        return NumberTokens(count, _or_none(remainder), False, None)
    return NumberTokens(count, _or_none(before), True, _or_none(remainder))


# ============================================================================
# DECIMAL
# ============================================================================


def _thousands_scaling(tokens: TokenRun) -> tuple[bool, float]:
    """Scan commas around the last digit placeholder.

    Each comma directly after the last digit placeholder divides the value
    by 1000. Any comma before it turns on the thousands separator.

    Returns:
        (thousands_separator, thousand_divisor)
    """
    last_placeholder = next(
        (i for i in range(len(tokens) - 1, -1, -1) if is_digit_placeholder(tokens[i])),
        None,
    )
    if last_placeholder is None:
        return False, 1.0

    divisor = 1.0
    for token in tokens[last_placeholder + 1 :]:
        if token != ",":
            break
        divisor *= 1000.0

    thousands_separator = "," in tokens[:last_placeholder]
    return thousands_separator, divisor


def parse_decimal(tokens: TokenRun) -> DecimalLayout | None:
    """Parse a plain decimal layout; every token must be a number token.

    Example:
        >>> layout = parse_decimal(("#", ",", "#", "#", "0", ".", "0", "0"))
        >>> layout.thousands_separator, layout.fraction_digits
        (True, 2)
    """
    split = split_decimal(tokens)
    if split.count != len(tokens):
        return None

    thousands_separator, divisor = _thousands_scaling(tokens)
    return DecimalLayout(
        before_decimal=split.before_decimal,
        decimal_separator=split.decimal_separator,
        after_decimal=split.after_decimal,
        thousands_separator=thousands_separator,
        thousand_divisor=divisor,
        percent_multiplier=100.0 if "%" in tokens else 1.0,
    )


# ============================================================================
# EXPONENTIAL
# ============================================================================


def parse_exponential(tokens: TokenRun) -> ExponentialLayout | None:
    """Parse a scientific layout: mantissa, exponent marker, power.

    Example:
        >>> layout = parse_exponential(("0", ".", "0", "0", "E+", "0", "0"))
        >>> layout.exponential_token, layout.power
        ('E+', ('0', '0'))
    """
    split = split_decimal(tokens)
    if split.count == 0 or split.count >= len(tokens):
        return None
    marker = tokens[split.count]
    if not is_exponent(marker):
        return None

    return ExponentialLayout(
        before_decimal=split.before_decimal,
        decimal_separator=split.decimal_separator,
        after_decimal=split.after_decimal,
        exponential_token=marker,
        power=tokens[split.count + 1 :],
    )


# ============================================================================
# FRACTION
# ============================================================================


def _split_numerator(tokens: TokenRun) -> tuple[TokenRun | None, TokenRun]:
    """Split the integer part off the numerator.

    Scanning backwards, the first non-placeholder after some placeholders
    ends the numerator; if more placeholders precede it, those tokens form
    the integer part ("# ?" gives integer "# " and numerator "?").
    """
    seen_placeholder = False
    numerator_start: int | None = None

    for index in range(len(tokens) - 1, -1, -1):
        if is_digit_placeholder(tokens[index]):
            seen_placeholder = True
            if numerator_start is not None:
                return tokens[:numerator_start], tokens[numerator_start:]
        elif seen_placeholder and numerator_start is None:
            numerator_start = index + 1

    return None, tokens


def _parse_denominator(tokens: TokenRun) -> FractionLayout | None:
    """Parse everything after '/'; the numerator fields are filled in by the caller."""
    start = next(
        (i for i, token in enumerate(tokens) if is_digit_placeholder(token) or is_digit19(token)),
        None,
    )
    if start is None:
        return None

    has_constant = is_digit19(tokens[start])
    end = start
    while end < len(tokens):
        token = tokens[end]
        if has_constant and not is_digit09(token):
            break
        if not has_constant and not is_digit_placeholder(token):
            break
        end += 1

    # Trailing tokens after the last placeholder form the fraction suffix;
    # anything between the denominator and that suffix is the denominator suffix.
    suffix_start = len(tokens)
    while suffix_start > end and not is_digit_placeholder(tokens[suffix_start - 1]):
        suffix_start -= 1

    denominator = tokens[start:end]
    return FractionLayout(
        integer_part=None,
        numerator=(),
        denominator_prefix=_or_none(tokens[:start]),
        denominator=denominator,
        denominator_constant=int("".join(denominator)) if has_constant else 0,
        denominator_suffix=_or_none(tokens[end:suffix_start]),
        fraction_suffix=_or_none(tokens[suffix_start:]),
    )


def parse_fraction(tokens: TokenRun) -> FractionLayout | None:
    """Parse a fraction layout split at the first '/'.

    The denominator is either a run of digit placeholders or a constant
    starting with 1-9 (# ?/8, # ??/100).

    Example:
        >>> layout = parse_fraction(("#", " ", "?", "/", "?"))
        >>> layout.integer_part, layout.numerator, layout.denominator
        (('#', ' '), ('?',), ('?',))
    """
    if "/" not in tokens:
        return None
    slash = tokens.index("/")

    denominator = _parse_denominator(tokens[slash + 1 :])
    if denominator is None:
        return None

    integer_part, numerator = _split_numerator(tokens[:slash])
    return FractionLayout(
        integer_part=integer_part,
        numerator=numerator,
        denominator_prefix=denominator.denominator_prefix,
        denominator=denominator.denominator,
        denominator_constant=denominator.denominator_constant,
        denominator_suffix=denominator.denominator_suffix,
        fraction_suffix=denominator.fraction_suffix,
    )
