"""Format string parser module.

This module provides the main FormatParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: FormatParser class and parse() entry point
- rules.py: Section parser (token loop, kind resolution, sub-second merge)
- primitives.py: Tokenizer (ordered token readers)
- tokens.py: Token classification predicates
- brackets.py: [...] expressions (condition, color, currency, locale)
- layouts.py: Number layouts (fraction, exponential, decimal)

Public API:
    FormatParser: Main parser class
"""

from xlformat.syntax.parser.core import FormatParser

__all__ = ["FormatParser"]
