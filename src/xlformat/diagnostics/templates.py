"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of format string.

        Args:
            position: Character offset where input ended

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=SourceSpan(start=position, end=position),
        )

    @staticmethod
    def lexical_error(char: str, position: int, section_index: int) -> Diagnostic:
        """No token alternative matches the input at position.

        Args:
            char: The offending character
            position: Character offset of the offending character
            section_index: Index of the section being parsed

        Returns:
            Diagnostic for LEXICAL_ERROR
        """
        msg = f"Unrecognized character {char!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.LEXICAL_ERROR,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint=f'Quote literal text ("{char}") or escape it (\\{char})',
            section_index=section_index,
        )

    @staticmethod
    def mixed_section_kinds(
        kinds: tuple[str, ...], section_index: int, start: int, end: int
    ) -> Diagnostic:
        """Section combines date, General and/or text tokens.

        Args:
            kinds: The conflicting kinds found, e.g. ("date", "text")
            section_index: Index of the offending section
            start: Section start offset
            end: Section end offset (exclusive)

        Returns:
            Diagnostic for MIXED_SECTION_KINDS
        """
        msg = f"Section {section_index} mixes {' and '.join(kinds)} tokens"
        return Diagnostic(
            code=DiagnosticCode.MIXED_SECTION_KINDS,
            message=msg,
            span=SourceSpan(start=start, end=end),
            hint="Date parts, General and '@' cannot share a section",
            section_index=section_index,
        )

    @staticmethod
    def invalid_number_layout(section_index: int, start: int, end: int) -> Diagnostic:
        """Placeholder section matches no fraction, exponential or decimal layout.

        Args:
            section_index: Index of the offending section
            start: Section start offset
            end: Section end offset (exclusive)

        Returns:
            Diagnostic for INVALID_NUMBER_LAYOUT
        """
        msg = f"Section {section_index} is not a valid number layout"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER_LAYOUT,
            message=msg,
            span=SourceSpan(start=start, end=end),
            hint="Quote literal text that follows an exponent or sits between placeholders",
            section_index=section_index,
        )

    @staticmethod
    def trailing_separator(position: int, section_index: int | None = None) -> Diagnostic:
        """Section separator at the very end of the format string.

        Args:
            position: Offset of the dangling ';'
            section_index: Index the missing section would have had

        Returns:
            Diagnostic for TRAILING_SEPARATOR
        """
        msg = f"Section separator ';' at position {position} is not followed by a section"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_SEPARATOR,
            message=msg,
            span=SourceSpan(start=position, end=position + 1),
            hint="Remove the trailing ';' or add the missing section",
            section_index=section_index,
        )

    @staticmethod
    def locale_id_invalid(locale_id: str) -> Diagnostic:
        """Locale identifier is not a hexadecimal number.

        Args:
            locale_id: The identifier text captured from [$-XXXX]

        Returns:
            Diagnostic for LOCALE_ID_INVALID
        """
        msg = f"Locale identifier {locale_id!r} is not a hexadecimal number"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_ID_INVALID,
            message=msg,
            hint="Locale identifiers are Windows LCIDs in hex, e.g. [$-409]",
        )

    @staticmethod
    def locale_id_unknown(lcid: int) -> Diagnostic:
        """LCID has no known language tag.

        Args:
            lcid: The numeric Windows locale id

        Returns:
            Diagnostic for LOCALE_ID_UNKNOWN
        """
        msg = f"No language tag known for LCID 0x{lcid:04X}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_ID_UNKNOWN,
            message=msg,
        )
