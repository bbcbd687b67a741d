"""
Runtime access to ISO 3166-2 subdivisions backed by the generated table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._table import TABLE, Code
from .errors import InvalidCode


@dataclass(frozen=True, order=True)
class Subdivision:
    """An administrative subdivision as specified by the ISO 3166-2 standard."""

    code: Code
    # Name in the language corresponding to the subdivision's country
    name: str
    # Subdivision type specific to the country (e.g. "State", "Province")
    type: str
    parent_code: Optional[Code] = None

    @property
    def country_code(self) -> str:
        """ISO 3166-1 alpha-2 code of the country this subdivision belongs to."""
        return self.code.country_code

    @property
    def parent(self) -> Optional[Subdivision]:
        if self.parent_code is None:
            return None
        return SUBDIVISIONS[self.parent_code.ordinal]

    @classmethod
    def from_code(cls, code: Code) -> Subdivision:
        return SUBDIVISIONS[code.ordinal]

    @classmethod
    def parse(cls, value: str) -> Subdivision:
        """
        Raises:
            InvalidCode: If value is not exactly one of the generated codes
        """
        return cls.from_code(parse(value))

    def __str__(self) -> str:
        return str(self.code)


def _build() -> Tuple[Subdivision, ...]:
    # TABLE is parallel to Code: entry i describes the member with ordinal i
    return tuple(
        Subdivision(
            code=code,
            name=name,
            type=type_,
            parent_code=Code(parent) if parent is not None else None,
        )
        for code, (name, type_, parent) in zip(Code, TABLE, strict=True)
    )


SUBDIVISIONS: Tuple[Subdivision, ...] = _build()


def _group_by_country(subdivisions: Tuple[Subdivision, ...]) -> Dict[str, List[Subdivision]]:
    by_country: Dict[str, List[Subdivision]] = {}
    for subdivision in subdivisions:
        by_country.setdefault(subdivision.country_code, []).append(subdivision)
    return by_country


_BY_COUNTRY = _group_by_country(SUBDIVISIONS)


def parse(value: str) -> Code:
    """
    Parse a canonical subdivision code string such as "US-NY".

    The match is exact and case-sensitive; no trimming or normalization is
    done, so "us-ny", "US_NY" and " US-NY" are all rejected.

    Raises:
        InvalidCode: If value does not match any known subdivision code
    """
    if not isinstance(value, str):
        raise InvalidCode(value)
    return Code(value)


def lookup(value: str) -> Subdivision:
    """Parse a code string and return its Subdivision."""
    return Subdivision.parse(value)


def for_country(alpha_2: str) -> List[Subdivision]:
    """Return the subdivisions of a country in declaration order (empty if unknown)."""
    return list(_BY_COUNTRY.get(alpha_2, ()))
