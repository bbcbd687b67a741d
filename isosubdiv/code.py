"""
Base class for the generated subdivision Code enumeration.
"""

from __future__ import annotations

from enum import StrEnum
from functools import cache
from typing import Dict

from .errors import InvalidCode


@cache
def _ordinals(enum_cls: type) -> Dict[str, int]:
    return {name: index for index, name in enumerate(enum_cls._member_names_)}


class CodeBase(StrEnum):
    """
    A closed set of ISO 3166-2 subdivision codes.

    Members are named by identifier (``US_NY``) and valued by canonical code
    (``"US-NY"``). StrEnum gives members direct string behavior, so
    ``str(Code.US_NY)`` is ``"US-NY"``. Lookup is exact and case-sensitive:

        >>> Code("US-NY")  # Code.US_NY
        >>> Code("us-ny")  # raises InvalidCode

    Ordering follows declaration order, which is the dataset order, rather
    than string order. Members only order against members of the same
    enumeration; comparing with a plain str raises TypeError.
    """

    @classmethod
    def _missing_(cls, value: object) -> None:
        raise InvalidCode(value)

    @classmethod
    def from_str(cls, value: str) -> CodeBase:
        """
        Raises:
            InvalidCode: If value is not exactly one of the generated codes
        """
        if not isinstance(value, str):
            raise InvalidCode(value)
        return cls(value)

    @property
    def ordinal(self) -> int:
        """Position of this member in declaration order."""
        return _ordinals(type(self))[self._name_]

    @property
    def country_code(self) -> str:
        return self._value_[:2]

    def _ordinal_of(self, other: object, op: str) -> int:
        # Ordering is only defined between members of one enumeration
        if type(other) is not type(self):
            raise TypeError(
                f"'{op}' not supported between instances of '{type(self).__name__}' and '{type(other).__name__}'"
            )
        return other.ordinal

    def __lt__(self, other: object) -> bool:
        return self.ordinal < self._ordinal_of(other, "<")

    def __le__(self, other: object) -> bool:
        return self.ordinal <= self._ordinal_of(other, "<=")

    def __gt__(self, other: object) -> bool:
        return self.ordinal > self._ordinal_of(other, ">")

    def __ge__(self, other: object) -> bool:
        return self.ordinal >= self._ordinal_of(other, ">=")
