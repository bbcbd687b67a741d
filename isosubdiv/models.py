"""
Data models for the ISO 3166-1 and ISO 3166-2 dataset records.
"""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass
from typing import Optional

from .errors import DatasetError

CODE_PATTERN = re.compile(r"^[A-Z]{2}-[A-Z0-9]{1,3}$")


def _required_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise DatasetError(f"Missing or invalid '{key}' field in entry: {data}")
    return value


@dataclass(frozen=True)
class CountryRecord:
    """A country as represented by the ISO 3166-1 standard."""

    alpha_2: str
    alpha_3: str
    name: str
    numeric: int

    @classmethod
    def from_dict(cls, data: dict) -> CountryRecord:
        """
        Create a CountryRecord from a dictionary (typically from JSON).

        The published dataset stores ``numeric`` as a digit string ("840"),
        so both strings and integers are accepted.

        Raises:
            DatasetError: If a field is missing or has an invalid format
        """
        if not isinstance(data, dict):
            raise DatasetError(f"Country entry is not an object: {data!r}")
        raw_numeric = data.get("numeric")
        try:
            if isinstance(raw_numeric, bool):
                raise TypeError(raw_numeric)
            numeric = int(raw_numeric)
        except (ValueError, TypeError) as e:
            raise DatasetError(f"Invalid numeric code '{raw_numeric}' in entry: {data}") from e
        if not 0 <= numeric <= 0xFFFF:
            raise DatasetError(f"Numeric code '{raw_numeric}' out of range in entry: {data}")

        alpha_2 = _required_str(data, "alpha_2")
        alpha_3 = _required_str(data, "alpha_3")
        if len(alpha_2) != 2 or len(alpha_3) != 3:
            raise DatasetError(f"Invalid alpha codes in entry: {data}")

        return cls(
            alpha_2=alpha_2,
            alpha_3=alpha_3,
            name=_required_str(data, "name"),
            numeric=numeric,
        )


@dataclass(frozen=True)
class SubdivisionRecord:
    """A country subdivision as represented by the ISO 3166-2 standard."""

    code: str
    name: str
    type: str
    parent: Optional[str] = None

    @property
    def country_code(self) -> str:
        return self.code[:2]

    @classmethod
    def from_dict(cls, data: dict) -> SubdivisionRecord:
        """
        Create a SubdivisionRecord from a dictionary (typically from JSON).

        Raises:
            DatasetError: If a field is missing or the code is malformed
        """
        if not isinstance(data, dict):
            raise DatasetError(f"Subdivision entry is not an object: {data!r}")
        code = _required_str(data, "code")
        if not CODE_PATTERN.match(code):
            raise DatasetError(f"Invalid subdivision code '{code}' in entry: {data}")

        parent = data.get("parent")
        if parent is not None and (not isinstance(parent, str) or not parent):
            raise DatasetError(f"Invalid 'parent' field in entry: {data}")

        return cls(
            code=code,
            name=_required_str(data, "name"),
            type=_required_str(data, "type"),
            parent=parent,
        )

    def parent_code(self) -> Optional[str]:
        """
        Return the parent as a full code.

        The dataset writes parents either as a full code ("GB-NIR") or as a
        suffix within the same country ("IDF" under "FR-75").
        """
        if self.parent is None:
            return None
        if "-" in self.parent:
            return self.parent
        return f"{self.country_code}-{self.parent}"


@dataclass(frozen=True)
class GeneratedVariant:
    """One member of the generated Code enumeration, as exposed to the template."""

    code: str
    code_identifier: str
    name: str
    type: str
    parent: Optional[str]

    @classmethod
    def from_record(cls, record: SubdivisionRecord) -> GeneratedVariant:
        identifier = record.code.replace("-", "_")
        if not identifier.isidentifier() or keyword.iskeyword(identifier):
            raise DatasetError(f"Code '{record.code}' does not produce a valid identifier")

        return cls(
            code=record.code,
            code_identifier=identifier,
            name=record.name,
            type=record.type,
            parent=record.parent_code(),
        )
