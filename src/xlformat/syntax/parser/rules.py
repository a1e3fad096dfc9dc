"""Grammar rules for format sections.

This module drives the tokenizer over one semicolon-delimited section:
it classifies every token, routes bracket tokens to the bracket parsers,
resolves the section kind and builds the matching payload.

Kind resolution order:
    date part seen       -> DURATION if an elapsed-time part was seen, else DATE
    General seen         -> GENERAL
    '@' or no placeholder -> TEXT
    otherwise            -> FRACTION, EXPONENTIAL or NUMBER, first layout that fits

Date, General and '@' are mutually exclusive within one section. A section
that yields no output tokens (end of input, ";;", "[Red];") is not a
section at all: it ends the format string.
"""

import logging
from dataclasses import dataclass, field

from xlformat.constants import DECIMAL_POINT, SECTION_SEPARATOR, TEXT_PLACEHOLDER
from xlformat.diagnostics import Diagnostic, ErrorTemplate
from xlformat.enums import SectionType
from xlformat.syntax.ast import Color, Condition, Section, Span, TokenRun
from xlformat.syntax.cursor import Cursor, ParseResult
from xlformat.syntax.parser.brackets import CurrencySymbol, LocaleTag, parse_bracket
from xlformat.syntax.parser.layouts import parse_decimal, parse_exponential, parse_fraction
from xlformat.syntax.parser.primitives import read_token
from xlformat.syntax.parser.tokens import (
    is_date_part,
    is_duration_part,
    is_general,
    is_placeholder,
)

__all__ = ["SectionParse", "merge_subseconds", "parse_section"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SectionParse:
    """Outcome of one parse_section() call.

    Attributes:
        section: The parsed section, or None if it had no output tokens or an error occurred
        error: Diagnostic for a section-level syntax error
        closed_by_separator: True if the section ended at a ';'
    """

    section: Section | None
    error: Diagnostic | None = None
    closed_by_separator: bool = False


@dataclass(slots=True)
class _SectionState:
    """Accumulator threaded through the token loop of one section."""

    tokens: list[str] = field(default_factory=list)
    has_placeholders: bool = False
    has_date: bool = False
    has_duration: bool = False
    has_general: bool = False
    has_text: bool = False
    condition: Condition | None = None
    color: Color | None = None
    locale_id: str | None = None

    def add(self, token: str) -> None:
        self.has_placeholders |= is_placeholder(token)

        if is_date_part(token):
            self.has_date = True
            self.has_duration |= is_duration_part(token)
            self.tokens.append(token)
        elif is_general(token):
            self.has_general = True
            self.tokens.append(token)
        elif token == TEXT_PLACEHOLDER:
            self.has_text = True
            self.tokens.append(token)
        elif token.startswith("["):
            self._add_bracket(token)
        else:
            self.tokens.append(token)

    def _add_bracket(self, token: str) -> None:
        match parse_bracket(token):
            case Condition() as condition:
                self.condition = condition
            case Color() as color:
                self.color = color
            case CurrencySymbol() as currency:
                self.tokens.append(currency.literal_token)
                if currency.locale_id is not None:
                    self.locale_id = currency.locale_id
            case LocaleTag() as locale:
                self.locale_id = locale.locale_id
            case None:
                pass

    def kinds(self) -> tuple[str, ...]:
        """Names of the mutually exclusive kinds present in this section."""
        flags = (("date", self.has_date), ("General", self.has_general), ("text", self.has_text))
        return tuple(name for name, present in flags if present)


def merge_subseconds(tokens: TokenRun) -> TokenRun:
    """Collapse '.' followed by '0' tokens into one sub-second token.

    A lone '.' is kept as is.

    Example:
        >>> merge_subseconds(("ss", ".", "0", "0", "0"))
        ('ss', '.000')
        >>> merge_subseconds(("ss", "."))
        ('ss', '.')
    """
    merged: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token == DECIMAL_POINT:
            zeros = 0
            while index < len(tokens) and tokens[index] == "0":
                zeros += 1
                index += 1
            token = DECIMAL_POINT + "0" * zeros
        merged.append(token)
    return tuple(merged)


def _classify(state: _SectionState, index: int, span: Span) -> Section | None:
    """Resolve the section kind and build the section; None if no layout fits."""
    tokens = tuple(state.tokens)
    common = {
        "index": index,
        "condition": state.condition,
        "color": state.color,
        "locale_id": state.locale_id,
        "span": span,
    }

    if state.has_date:
        section_type = SectionType.DURATION if state.has_duration else SectionType.DATE
        return Section(type=section_type, tokens=merge_subseconds(tokens), **common)
    if state.has_general:
        return Section(type=SectionType.GENERAL, tokens=tokens, **common)
    if state.has_text or not state.has_placeholders:
        return Section(type=SectionType.TEXT, tokens=tokens, **common)
    if (fraction := parse_fraction(tokens)) is not None:
        return Section(type=SectionType.FRACTION, fraction=fraction, **common)
    if (exponential := parse_exponential(tokens)) is not None:
        return Section(type=SectionType.EXPONENTIAL, exponential=exponential, **common)
    if (number := parse_decimal(tokens)) is not None:
        return Section(type=SectionType.NUMBER, number=number, **common)
    return None


def parse_section(cursor: Cursor, index: int) -> ParseResult[SectionParse]:
    """Parse one section, up to and including its ';' separator.

    Args:
        cursor: Position of the first character of the section
        index: 0-based index the section will receive

    Returns:
        ParseResult holding the SectionParse and the cursor after the
        section (after the ';' if there was one). On a lexical error the
        cursor stays at the offending character.

    Example:
        >>> result = parse_section(Cursor("[Red]0.00;@", 0), 0)
        >>> result.value.section.color, result.cursor.pos
        (Color(value='Red'), 10)
    """
    start = cursor.pos
    state = _SectionState()
    closed = False

    while not cursor.is_eof:
        token_result = read_token(cursor)
        if token_result is None:
            error = ErrorTemplate.lexical_error(cursor.current, cursor.pos, index)
            logger.debug("Section %d: %s", index, error.message)
            return ParseResult(SectionParse(section=None, error=error), cursor)

        token = token_result.value
        cursor = token_result.cursor
        if token == SECTION_SEPARATOR:
            closed = True
            break
        state.add(token)

    end = cursor.pos - 1 if closed else cursor.pos
    if not state.tokens:
        # End of input, ";;" or bracket-only content: parsing ends here.
        logger.debug("Section %d has no output tokens; no more sections", index)
        return ParseResult(SectionParse(section=None, closed_by_separator=closed), cursor)

    span = Span(start=start, end=end)
    kinds = state.kinds()
    if len(kinds) > 1:
        error = ErrorTemplate.mixed_section_kinds(kinds, index, start, end)
        logger.debug("Section %d: %s", index, error.message)
        return ParseResult(SectionParse(section=None, error=error, closed_by_separator=closed), cursor)

    section = _classify(state, index, span)
    if section is None:
        error = ErrorTemplate.invalid_number_layout(index, start, end)
        logger.debug("Section %d: %s", index, error.message)
        return ParseResult(SectionParse(section=None, error=error, closed_by_separator=closed), cursor)

    logger.debug("Section %d parsed as %s", index, section.type)
    return ParseResult(SectionParse(section=section, closed_by_separator=closed), cursor)
