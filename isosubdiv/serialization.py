"""
Wire (de)serialization of subdivisions.

A Subdivision or Code is always written as its canonical dash-separated code
string ("US-AZ"), never as an object and never in identifier form ("US_AZ").
"""

from __future__ import annotations

import json
from typing import Any, Union

from ._table import Code
from .errors import InvalidCode, InvalidValue
from .subdivision import Subdivision, parse


def serialize(value: Union[Subdivision, Code]) -> str:
    if isinstance(value, Subdivision):
        return str(value.code)
    if isinstance(value, Code):
        return str(value)
    raise TypeError(f"Cannot serialize {type(value).__name__} as a subdivision code")


def deserialize_code(value: Any) -> Code:
    """
    Deserialize a wire value into a Code.

    Raises:
        InvalidValue: If value is not a string, or is not a known code
    """
    if not isinstance(value, str):
        raise InvalidValue(value)
    try:
        return parse(value)
    except InvalidCode as e:
        raise InvalidValue(value) from e


def deserialize(value: Any) -> Subdivision:
    return Subdivision.from_code(deserialize_code(value))


class SubdivisionEncoder(json.JSONEncoder):
    """JSON encoder writing Subdivision values as their canonical code string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Subdivision):
            return serialize(o)
        return super().default(o)
