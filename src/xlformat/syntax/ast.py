"""Format string syntax tree node definitions.

A parsed format string is a FormatSpec holding an ordered tuple of
Section nodes. Every node is a frozen dataclass: produced once by the
parser and never mutated afterwards.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from xlformat.constants import COLOR_NAMES, DIGIT_PLACEHOLDERS
from xlformat.enums import ConditionOperator, SectionType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    "Annotation",
    # Bracket directives
    "Condition",
    "Color",
    # Number layouts
    "DecimalLayout",
    "ExponentialLayout",
    "FractionLayout",
    # Structure
    "Section",
    "FormatSpec",
    # Type aliases
    "TokenRun",
    "Layout",
]

type TokenRun = tuple[str, ...]


def _count_digit_placeholders(tokens: TokenRun | None) -> int:
    if not tokens:
        return 0
    return sum(1 for token in tokens if token in DIGIT_PLACEHOLDERS)


# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "0.00;[Red]-0.00"
        Second section span: Span(start=5, end=15)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Annotation:
    """Section-level parse error annotation.

    Attributes:
        code: Error code name (e.g., "LEXICAL_ERROR")
        message: Human-readable error message
        span: Location of the error (optional)

    Example:
        Annotation(
            code="MIXED_SECTION_KINDS",
            message="Section 0 mixes date and text tokens",
            span=Span(start=0, end=6),
        )
    """

    code: str
    message: str
    span: Span | None = None


# ============================================================================
# BRACKET DIRECTIVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Condition:
    """Section condition: [>=100], [<>0], [<=-1.5E+3]

    Attributes:
        operator: Relational operator
        value: Right-hand operand
    """

    operator: ConditionOperator
    value: float

    def evaluate(self, number: float) -> bool:
        """Check whether number satisfies this condition.

        Example:
            >>> Condition(ConditionOperator.GE, 100.0).evaluate(150)
            True
        """
        match self.operator:
            case ConditionOperator.LE:
                return number <= self.value
            case ConditionOperator.NE:
                return number != self.value
            case ConditionOperator.LT:
                return number < self.value
            case ConditionOperator.GE:
                return number >= self.value
            case ConditionOperator.GT:
                return number > self.value
            case ConditionOperator.EQ:
                return number == self.value


@dataclass(frozen=True, slots=True)
class Color:
    """Section color: [Red], [BLUE]

    Attributes:
        value: Palette name as written in the format string
    """

    value: str

    def __post_init__(self) -> None:
        """Validate palette membership."""
        if self.value.lower() not in COLOR_NAMES:
            msg = f"Unknown color {self.value!r}; expected one of {', '.join(COLOR_NAMES)}"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Lowercase palette name, independent of how it was written."""
        return self.value.lower()


# ============================================================================
# NUMBER LAYOUTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class DecimalLayout:
    """Plain number layout: #,##0.00, 0%, #,##0,"K"

    Attributes:
        before_decimal: Tokens before the decimal point (None if empty)
        decimal_separator: True if the layout contains a decimal point
        after_decimal: Tokens after the decimal point (None if empty)
        thousands_separator: True if a comma appears before the last digit placeholder
        thousand_divisor: 1000 ** (commas directly after the last digit placeholder)
        percent_multiplier: 100 if the layout contains '%', else 1
    """

    before_decimal: TokenRun | None
    decimal_separator: bool
    after_decimal: TokenRun | None
    thousands_separator: bool = False
    thousand_divisor: float = 1.0
    percent_multiplier: float = 1.0

    @property
    def integer_digits(self) -> int:
        """Number of digit placeholders before the decimal point."""
        return _count_digit_placeholders(self.before_decimal)

    @property
    def fraction_digits(self) -> int:
        """Number of digit placeholders after the decimal point."""
        return _count_digit_placeholders(self.after_decimal)


@dataclass(frozen=True, slots=True)
class ExponentialLayout:
    """Scientific layout: 0.00E+00, ##0.0e-0

    Attributes:
        before_decimal: Mantissa tokens before the decimal point
        decimal_separator: True if the mantissa has a decimal point
        after_decimal: Mantissa tokens after the decimal point
        exponential_token: The marker as written (E+, e-, ...)
        power: Tokens after the marker
    """

    before_decimal: TokenRun | None
    decimal_separator: bool
    after_decimal: TokenRun | None
    exponential_token: str
    power: TokenRun

    @property
    def exponent_sign_required(self) -> bool:
        """True for E+ (sign always shown), False for E- (minus only)."""
        return self.exponential_token[1] == "+"

    @property
    def exponent_digits(self) -> int:
        """Number of digit placeholders in the exponent."""
        return _count_digit_placeholders(self.power)


@dataclass(frozen=True, slots=True)
class FractionLayout:
    """Vulgar fraction layout: # ?/?, # ??/100, 0 "pts" ?/8

    Attributes:
        integer_part: Tokens for the whole-number part (None for pure fractions)
        numerator: Numerator tokens
        denominator_prefix: Literal tokens between '/' and the denominator
        denominator: Denominator placeholder or constant digit tokens
        denominator_constant: Fixed denominator (0 when placeholders are used)
        denominator_suffix: Tokens between the denominator and the fraction suffix
        fraction_suffix: Trailing literal tokens
    """

    integer_part: TokenRun | None
    numerator: TokenRun
    denominator_prefix: TokenRun | None
    denominator: TokenRun
    denominator_constant: int
    denominator_suffix: TokenRun | None
    fraction_suffix: TokenRun | None


type Layout = DecimalLayout | ExponentialLayout | FractionLayout


# ============================================================================
# STRUCTURE
# ============================================================================

_TOKEN_SECTION_TYPES = frozenset(
    {SectionType.GENERAL, SectionType.TEXT, SectionType.DATE, SectionType.DURATION}
)


@dataclass(frozen=True, slots=True)
class Section:
    """One semicolon-delimited part of a format string.

    Exactly one payload is populated, chosen by ``type``:
    GENERAL, TEXT, DATE and DURATION carry ``tokens``; FRACTION carries
    ``fraction``; EXPONENTIAL carries ``exponential``; NUMBER carries
    ``number``.

    Attributes:
        type: Section kind
        index: 0-based position in the format string
        tokens: Output tokens in render order (token-based kinds)
        condition: Bracketed condition, if any
        color: Bracketed color, if any
        locale_id: Opaque locale id from [$-XXXX] or [$sym-XXXX], if any
        fraction: Fraction payload
        exponential: Exponential payload
        number: Decimal payload
        span: Location of the section in the source (optional)
    """

    type: SectionType
    index: int
    tokens: TokenRun | None = None
    condition: Condition | None = None
    color: Color | None = None
    locale_id: str | None = None
    fraction: FractionLayout | None = None
    exponential: ExponentialLayout | None = None
    number: DecimalLayout | None = None
    span: Span | None = None

    def __post_init__(self) -> None:
        """Validate that the payload matches the section type."""
        if self.index < 0:
            msg = f"Section index must be >= 0, got {self.index}"
            raise ValueError(msg)

        expected = {
            "tokens": self.type in _TOKEN_SECTION_TYPES,
            "fraction": self.type is SectionType.FRACTION,
            "exponential": self.type is SectionType.EXPONENTIAL,
            "number": self.type is SectionType.NUMBER,
        }
        for field_name, required in expected.items():
            present = getattr(self, field_name) is not None
            if present != required:
                state = "requires" if required else "must not have"
                msg = f"{self.type.name} section {state} a '{field_name}' payload"
                raise ValueError(msg)

    @property
    def layout(self) -> Layout | None:
        """The number layout payload, or None for token-based sections."""
        return self.fraction or self.exponential or self.number

    @staticmethod
    def guard(node: object) -> TypeIs["Section"]:
        """Type guard for Section."""
        return isinstance(node, Section)


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Root node: every section parsed from one format string.

    Attributes:
        sections: Successfully parsed sections, in source order
        errors: Section-level syntax errors (parsing stops at the first one)
        source: The original format string
    """

    sections: tuple[Section, ...]
    errors: tuple[Annotation, ...] = ()
    source: str = ""

    @property
    def has_syntax_error(self) -> bool:
        """True if at least one section failed to parse."""
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.sections)

    def __getitem__(self, index: int) -> Section:
        return self.sections[index]
