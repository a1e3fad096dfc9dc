"""Tests for enumerations."""

from __future__ import annotations

from xlformat.constants import CONDITION_OPERATORS
from xlformat.enums import ConditionOperator, SectionType


class TestSectionType:
    """Section kinds."""

    def test_members(self) -> None:
        assert {member.value for member in SectionType} == {
            "general",
            "number",
            "fraction",
            "exponential",
            "date",
            "duration",
            "text",
        }

    def test_str_value(self) -> None:
        assert str(SectionType.DURATION) == "duration"


class TestConditionOperator:
    """Operators match the tokenizer vocabulary."""

    def test_every_operator_has_a_member(self) -> None:
        assert {ConditionOperator(op) for op in CONDITION_OPERATORS} == set(ConditionOperator)

    def test_two_character_operators_come_first(self) -> None:
        for index, operator in enumerate(CONDITION_OPERATORS):
            for later in CONDITION_OPERATORS[index + 1 :]:
                assert not later.startswith(operator) or len(later) <= len(operator)
