"""Tests for single-section parsing: classification, brackets, sub-second merge."""

from __future__ import annotations

import pytest

from xlformat.diagnostics import DiagnosticCode
from xlformat.enums import ConditionOperator, SectionType
from xlformat.syntax.ast import Condition, Section, Span
from xlformat.syntax.cursor import Cursor
from xlformat.syntax.parser.rules import SectionParse, merge_subseconds, parse_section


def parse_one(source: str, start: int = 0, index: int = 0) -> SectionParse:
    return parse_section(Cursor(source, start), index).value


def section_of(source: str) -> Section:
    outcome = parse_one(source)
    assert outcome.error is None
    assert outcome.section is not None
    return outcome.section


# ============================================================================
# SUB-SECOND MERGE
# ============================================================================


class TestMergeSubseconds:
    """'.' followed by zeros becomes one token."""

    def test_merges_zeros(self) -> None:
        assert merge_subseconds(("ss", ".", "0", "0", "0")) == ("ss", ".000")

    def test_lone_point_is_kept(self) -> None:
        assert merge_subseconds(("ss", ".")) == ("ss", ".")

    def test_point_followed_by_other_token(self) -> None:
        assert merge_subseconds(("ss", ".", " ", "0")) == ("ss", ".", " ", "0")

    def test_no_point(self) -> None:
        assert merge_subseconds(("hh", ":", "mm")) == ("hh", ":", "mm")


# ============================================================================
# CLASSIFICATION
# ============================================================================


class TestClassification:
    """Section kind resolution."""

    @pytest.mark.parametrize(
        ("source", "section_type"),
        [
            ("yyyy-mm-dd", SectionType.DATE),
            ("h:mm AM/PM", SectionType.DATE),
            ("[h]:mm:ss", SectionType.DURATION),
            ("[mm]:ss", SectionType.DURATION),
            ("General", SectionType.GENERAL),
            ("@", SectionType.TEXT),
            ('"N/A"', SectionType.TEXT),
            ("\\-", SectionType.TEXT),
            ("# ?/?", SectionType.FRACTION),
            ("0.00E+00", SectionType.EXPONENTIAL),
            ("#,##0.00", SectionType.NUMBER),
            ("0%", SectionType.NUMBER),
        ],
    )
    def test_section_type(self, source: str, section_type: SectionType) -> None:
        assert section_of(source).type is section_type

    def test_date_tokens(self) -> None:
        section = section_of("hh:mm:ss.000")
        assert section.tokens == ("hh", ":", "mm", ":", "ss", ".000")

    def test_date_lone_point(self) -> None:
        section = section_of("hh:mm:ss.")
        assert section.tokens == ("hh", ":", "mm", ":", "ss", ".")

    def test_text_tokens(self) -> None:
        section = section_of('"Total: "@')
        assert section.tokens == ('"Total: "', "@")

    def test_number_payload(self) -> None:
        section = section_of("#,##0.00")
        assert section.number is not None
        assert section.tokens is None
        assert section.layout is section.number

    def test_fraction_wins_over_decimal(self) -> None:
        assert section_of("0/0").type is SectionType.FRACTION

    @pytest.mark.parametrize(
        ("source", "kinds"),
        [
            ("yyyy@", "date and text"),
            ("General@", "General and text"),
            ("d General", "date and General"),
        ],
    )
    def test_mixed_kinds_are_errors(self, source: str, kinds: str) -> None:
        outcome = parse_one(source)
        assert outcome.section is None
        assert outcome.error is not None
        assert outcome.error.code is DiagnosticCode.MIXED_SECTION_KINDS
        assert kinds in outcome.error.message

    def test_invalid_number_layout(self) -> None:
        outcome = parse_one("0:0")
        assert outcome.section is None
        assert outcome.error is not None
        assert outcome.error.code is DiagnosticCode.INVALID_NUMBER_LAYOUT


# ============================================================================
# BRACKETS
# ============================================================================


class TestSectionBrackets:
    """Bracket tokens attach to the section instead of its tokens."""

    def test_condition_and_color(self) -> None:
        section = section_of("[>=100][Red]0")
        assert section.condition is not None
        assert section.condition.value == 100.0
        assert section.color is not None
        assert section.color.value == "Red"
        assert section.number is not None
        assert section.number.before_decimal == ("0",)

    def test_currency_emits_literal(self) -> None:
        section = section_of("[$€-407]#,##0")
        assert section.locale_id == "407"
        assert section.number is not None
        assert section.number.before_decimal == ('"€"', "#", ",", "#", "#", "0")

    def test_locale_only(self) -> None:
        section = section_of("[$-411]yyyy")
        assert section.locale_id == "411"
        assert section.tokens == ("yyyy",)

    def test_unknown_bracket_dropped(self) -> None:
        section = section_of("[DBNum1]0")
        assert section.number is not None
        assert section.number.before_decimal == ("0",)

    def test_last_color_wins(self) -> None:
        section = section_of("[Red][Blue]0")
        assert section.color is not None
        assert section.color.value == "Blue"

    def test_last_condition_wins(self) -> None:
        section = section_of("[>1][<5]0")
        assert section.condition == Condition(ConditionOperator.LT, 5.0)

    def test_bracket_only_section_ends_parsing(self) -> None:
        assert parse_one("[Red]") == SectionParse(section=None)

    def test_bracket_only_section_before_separator(self) -> None:
        assert parse_one("[>1][Red];0") == SectionParse(section=None, closed_by_separator=True)


# ============================================================================
# BOUNDARIES
# ============================================================================


class TestSectionBoundaries:
    """Cursor movement, spans and separators."""

    def test_stops_after_separator(self) -> None:
        result = parse_section(Cursor("[Red]0.00;@", 0), 0)
        assert result.cursor.pos == 10
        assert result.value.closed_by_separator
        assert result.value.section is not None
        assert result.value.section.span == Span(start=0, end=9)

    def test_last_section_runs_to_end(self) -> None:
        result = parse_section(Cursor("0;@", 2), 1)
        assert result.cursor.pos == 3
        assert not result.value.closed_by_separator
        assert result.value.section is not None
        assert result.value.section.index == 1
        assert result.value.section.span == Span(start=2, end=3)

    def test_empty_section_before_separator(self) -> None:
        outcome = parse_one("0;;@", start=2, index=1)
        assert outcome.section is None
        assert outcome.error is None
        assert outcome.closed_by_separator

    def test_eof_is_no_section(self) -> None:
        outcome = parse_one("0", start=1)
        assert outcome == SectionParse(section=None)

    def test_lexical_error_keeps_cursor_at_character(self) -> None:
        result = parse_section(Cursor("0x", 0), 0)
        assert result.cursor.pos == 1
        error = result.value.error
        assert error is not None
        assert error.code is DiagnosticCode.LEXICAL_ERROR
        assert error.span is not None
        assert error.span.start == 1
        assert error.section_index == 0
