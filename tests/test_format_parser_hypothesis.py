"""Property-based tests for the format parser and serializer.

Properties:
- Literal-only strings parse to exactly one TEXT section
- Well-formed format strings parse without errors, one section per ';'
- parse -> serialize -> parse preserves section structure
- Arbitrary input never raises and always terminates
"""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import event, given, settings

from tests.strategies import chaos_formats, format_strings, literal_only_formats
from xlformat import FormatParser, FormatSyntaxError, parse_format, serialize_format
from xlformat.enums import SectionType
from xlformat.syntax.ast import FormatSpec, Section


def _structure(spec: FormatSpec) -> tuple[Section, ...]:
    """Sections without source positions, for structural comparison."""
    return tuple(dataclasses.replace(section, span=None) for section in spec.sections)


# ============================================================================
# WELL-FORMED INPUT
# ============================================================================


class TestParserProperties:
    """Invariants over generated well-formed format strings."""

    @given(literal_only_formats())
    def test_literal_only_is_single_text_section(self, source: str) -> None:
        spec = parse_format(source)

        assert not spec.has_syntax_error
        assert len(spec) == 1
        assert spec[0].type is SectionType.TEXT
        assert "".join(spec[0].tokens or ()) == source

    @given(format_strings())
    def test_well_formed_formats_parse(self, source: str) -> None:
        spec = parse_format(source)

        assert not spec.has_syntax_error, spec.errors
        assert len(spec) == source.count(";") + 1
        assert [section.index for section in spec.sections] == list(range(len(spec)))
        for section in spec.sections:
            event(f"section_type={section.type}")

    @given(format_strings())
    def test_spans_are_ordered_and_disjoint(self, source: str) -> None:
        spec = parse_format(source)

        previous_end = -1
        for section in spec.sections:
            assert section.span is not None
            assert section.span.start > previous_end
            previous_end = section.span.end
        assert previous_end == len(source)


class TestRoundtripProperties:
    """Reparsing the serialized form yields the same structure."""

    @given(format_strings())
    def test_roundtrip(self, source: str) -> None:
        spec = parse_format(source)
        reparsed = parse_format(serialize_format(spec))

        assert not reparsed.has_syntax_error
        assert _structure(reparsed) == _structure(spec)

    @given(format_strings())
    def test_serialization_is_idempotent(self, source: str) -> None:
        once = serialize_format(parse_format(source))
        twice = serialize_format(parse_format(once))

        assert once == twice


# ============================================================================
# ARBITRARY INPUT
# ============================================================================


class TestRobustness:
    """The parser never raises for malformed input in the default mode."""

    @given(chaos_formats())
    @settings(max_examples=300)
    def test_never_raises(self, source: str) -> None:
        spec = parse_format(source)

        assert len(spec.errors) <= 1
        event(f"has_error={spec.has_syntax_error}")

    @given(chaos_formats())
    def test_section_spans_within_source(self, source: str) -> None:
        spec = parse_format(source)
        for section in spec.sections:
            assert section.span is not None
            assert 0 <= section.span.start <= section.span.end <= len(source)

    @pytest.mark.fuzz
    @given(chaos_formats())
    @settings(max_examples=2000)
    def test_strict_mode_agrees_with_default(self, source: str) -> None:
        spec = parse_format(source)
        parser = FormatParser(strict=True)
        if spec.has_syntax_error:
            with pytest.raises(FormatSyntaxError) as exc_info:
                parser.parse(source)
            assert exc_info.value.diagnostic is not None
            assert exc_info.value.diagnostic.message == spec.errors[0].message
        else:
            assert parser.parse(source) == spec
