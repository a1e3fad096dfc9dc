"""Tests for syntax tree node invariants."""

from __future__ import annotations

import dataclasses

import pytest

from xlformat.enums import ConditionOperator, SectionType
from xlformat.syntax.ast import (
    Color,
    Condition,
    DecimalLayout,
    ExponentialLayout,
    FormatSpec,
    FractionLayout,
    Section,
    Span,
)


def _fraction() -> FractionLayout:
    return FractionLayout(
        integer_part=None,
        numerator=("?",),
        denominator_prefix=None,
        denominator=("?",),
        denominator_constant=0,
        denominator_suffix=None,
        fraction_suffix=None,
    )


class TestSpan:
    """Span validation."""

    def test_valid(self) -> None:
        assert Span(start=0, end=0).end == 0

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="Span start"):
            Span(start=-1, end=0)
        with pytest.raises(ValueError, match="Span end"):
            Span(start=2, end=1)


class TestCondition:
    """Condition.evaluate for every operator."""

    @pytest.mark.parametrize(
        ("operator", "number", "expected"),
        [
            (ConditionOperator.LT, 99, True),
            (ConditionOperator.LT, 100, False),
            (ConditionOperator.LE, 100, True),
            (ConditionOperator.GT, 100, False),
            (ConditionOperator.GT, 101, True),
            (ConditionOperator.GE, 100, True),
            (ConditionOperator.EQ, 100, True),
            (ConditionOperator.EQ, 100.5, False),
            (ConditionOperator.NE, 100, False),
            (ConditionOperator.NE, 0, True),
        ],
    )
    def test_evaluate(self, operator: ConditionOperator, number: float, expected: bool) -> None:
        assert Condition(operator, 100.0).evaluate(number) is expected


class TestColor:
    """Palette validation."""

    def test_keeps_spelling(self) -> None:
        color = Color("YeLLow")
        assert color.value == "YeLLow"
        assert color.name == "yellow"

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown color"):
            Color("Orange")


class TestLayoutProperties:
    """Derived digit counts."""

    def test_decimal_digits(self) -> None:
        layout = DecimalLayout(
            before_decimal=("#", ",", "#", "#", "0"),
            decimal_separator=True,
            after_decimal=("0", "0", "#"),
        )
        assert layout.integer_digits == 4
        assert layout.fraction_digits == 3

    def test_decimal_without_groups(self) -> None:
        layout = DecimalLayout(before_decimal=None, decimal_separator=False, after_decimal=None)
        assert layout.integer_digits == 0
        assert layout.fraction_digits == 0

    def test_exponent(self) -> None:
        layout = ExponentialLayout(
            before_decimal=("0",),
            decimal_separator=False,
            after_decimal=None,
            exponential_token="e-",
            power=("0", "0", "0"),
        )
        assert not layout.exponent_sign_required
        assert layout.exponent_digits == 3


class TestSection:
    """Payload must match the section type."""

    def test_token_section(self) -> None:
        section = Section(type=SectionType.TEXT, index=0, tokens=("@",))
        assert section.layout is None

    def test_fraction_section(self) -> None:
        fraction = _fraction()
        section = Section(type=SectionType.FRACTION, index=1, fraction=fraction)
        assert section.layout is fraction

    def test_missing_payload(self) -> None:
        with pytest.raises(ValueError, match="requires a 'number' payload"):
            Section(type=SectionType.NUMBER, index=0)

    def test_extra_payload(self) -> None:
        with pytest.raises(ValueError, match="must not have a 'tokens' payload"):
            Section(type=SectionType.FRACTION, index=0, tokens=(), fraction=_fraction())

    def test_negative_index(self) -> None:
        with pytest.raises(ValueError, match="index"):
            Section(type=SectionType.TEXT, index=-1, tokens=())

    def test_frozen(self) -> None:
        section = Section(type=SectionType.GENERAL, index=0, tokens=("General",))
        with pytest.raises(dataclasses.FrozenInstanceError):
            section.index = 1  # type: ignore[misc]

    def test_guard(self) -> None:
        assert Section.guard(Section(type=SectionType.TEXT, index=0, tokens=()))
        assert not Section.guard("0")


class TestFormatSpec:
    """Sequence access and error flag."""

    def test_sequence_protocol(self) -> None:
        section = Section(type=SectionType.TEXT, index=0, tokens=("@",))
        spec = FormatSpec(sections=(section,))
        assert len(spec) == 1
        assert spec[0] is section
        assert not spec.has_syntax_error
