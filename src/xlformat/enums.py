"""Enumerations for xlformat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SectionType(StrEnum):
    """Kind of a parsed format section.

    The kind decides which payload a Section carries:
    token-based kinds (GENERAL, TEXT, DATE, DURATION) keep their output
    tokens, the number kinds carry a layout object.

    StrEnum provides automatic string conversion: str(SectionType.DATE) == "date"
    """

    GENERAL = "general"
    """The General keyword: General, "Total: "General"""

    NUMBER = "number"
    """Plain decimal layout: #,##0.00"""

    FRACTION = "fraction"
    """Vulgar fraction layout: # ?/?"""

    EXPONENTIAL = "exponential"
    """Scientific layout: 0.00E+00"""

    DATE = "date"
    """Calendar date/time: yyyy-mm-dd hh:mm"""

    DURATION = "duration"
    """Elapsed time: [h]:mm:ss"""

    TEXT = "text"
    """Text or literal-only section: @ or a quoted literal such as "N/A" """


class ConditionOperator(StrEnum):
    """Relational operator of a bracketed section condition.

    StrEnum provides automatic string conversion: str(ConditionOperator.GE) == ">="
    """

    LE = "<="
    """Less than or equal: [<=0]"""

    NE = "<>"
    """Not equal: [<>0]"""

    LT = "<"
    """Less than: [<0]"""

    GE = ">="
    """Greater than or equal: [>=100]"""

    GT = ">"
    """Greater than: [>999999]"""

    EQ = "="
    """Equal: [=1]"""


__all__ = [
    "ConditionOperator",
    "SectionType",
]
