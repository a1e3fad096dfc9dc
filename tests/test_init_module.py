"""Tests for the top-level package API."""

from __future__ import annotations

import xlformat
from xlformat import FormatParser, SectionType, parse_format, serialize_format


class TestPublicApi:
    """Exports and convenience functions."""

    def test_all_exports_resolve(self) -> None:
        for name in xlformat.__all__:
            assert hasattr(xlformat, name), name

    def test_version(self) -> None:
        assert isinstance(xlformat.__version__, str)
        assert xlformat.__version__

    def test_parse_format_matches_parser(self) -> None:
        source = "#,##0.00;[Red]-#,##0.00"
        assert parse_format(source) == FormatParser().parse(source)

    def test_end_to_end(self) -> None:
        spec = parse_format('[$-409]mmm d, yyyy;@;"n/a"')

        assert [section.type for section in spec.sections] == [
            SectionType.DATE,
            SectionType.TEXT,
            SectionType.TEXT,
        ]
        assert spec[0].locale_id == "409"
        assert serialize_format(spec) == '[$-409]mmm d, yyyy;@;"n/a"'
