"""Serialize parsed sections back to format string syntax.

Converts syntax tree nodes to format string text. Useful for:
- Normalizing format strings (drops ignored brackets, quotes currency symbols)
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

import math

from xlformat.constants import DECIMAL_POINT, SECTION_SEPARATOR
from xlformat.syntax.ast import (
    Condition,
    DecimalLayout,
    ExponentialLayout,
    FormatSpec,
    FractionLayout,
    Section,
    TokenRun,
)

__all__ = ["FormatSerializer", "serialize"]


def _format_condition_value(value: float) -> str:
    """Shortest text that parses back to value ("100" rather than "100.0").

    Infinite values (from overflowing literals such as 1e+400) are written
    as an overflowing literal again, since "inf" is not condition syntax.
    """
    if math.isinf(value):
        return "-1e+999" if value < 0 else "1e+999"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _tokens(*runs: TokenRun | None) -> list[str]:
    output: list[str] = []
    for run in runs:
        if run:
            output.extend(run)
    return output


class FormatSerializer:
    """Converts a FormatSpec or Section back to a format string.

    Thread-safe serializer with no mutable instance state.

    Usage:
        >>> from xlformat import parse_format
        >>> FormatSerializer().serialize(parse_format("[red][>=10]0.0"))
        '[>=10][red]0.0'
    """

    def serialize(self, node: FormatSpec | Section) -> str:
        """Serialize a whole FormatSpec or a single Section."""
        match node:
            case FormatSpec():
                return SECTION_SEPARATOR.join(
                    self._serialize_section(section) for section in node.sections
                )
            case Section():
                return self._serialize_section(node)
            case _:
                msg = f"Cannot serialize {type(node).__name__}"
                raise TypeError(msg)

    def _serialize_section(self, section: Section) -> str:
        output: list[str] = []
        if section.condition is not None:
            output.append(self._serialize_condition(section.condition))
        if section.color is not None:
            output.append(f"[{section.color.value}]")
        if section.locale_id is not None:
            output.append(f"[$-{section.locale_id}]")

        match section.layout:
            case FractionLayout() as fraction:
                output.extend(self._serialize_fraction(fraction))
            case ExponentialLayout() as exponential:
                output.extend(self._serialize_exponential(exponential))
            case DecimalLayout() as number:
                output.extend(self._serialize_decimal(number))
            case None:
                output.extend(section.tokens or ())
        return "".join(output)

    @staticmethod
    def _serialize_condition(condition: Condition) -> str:
        return f"[{condition.operator}{_format_condition_value(condition.value)}]"

    @staticmethod
    def _serialize_decimal(layout: DecimalLayout) -> list[str]:
        point = (DECIMAL_POINT,) if layout.decimal_separator else None
        return _tokens(layout.before_decimal, point, layout.after_decimal)

    @staticmethod
    def _serialize_exponential(layout: ExponentialLayout) -> list[str]:
        point = (DECIMAL_POINT,) if layout.decimal_separator else None
        return _tokens(
            layout.before_decimal,
            point,
            layout.after_decimal,
            (layout.exponential_token,),
            layout.power,
        )

    @staticmethod
    def _serialize_fraction(layout: FractionLayout) -> list[str]:
        return _tokens(
            layout.integer_part,
            layout.numerator,
            ("/",),
            layout.denominator_prefix,
            layout.denominator,
            layout.denominator_suffix,
            layout.fraction_suffix,
        )


def serialize(node: FormatSpec | Section) -> str:
    """Serialize a FormatSpec or Section to a format string.

    Convenience function for FormatSerializer.serialize().

    Example:
        >>> from xlformat.syntax import parse, serialize
        >>> serialize(parse('[$€-407]#,##0.00'))
        '[$-407]"€"#,##0.00'
    """
    return FormatSerializer().serialize(node)
