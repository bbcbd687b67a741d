"""
ISO 3166-2 subdivision codes as a closed, generated enumeration.
"""

from ._table import Code
from .errors import InvalidCode, InvalidValue, SubdivisionCodeParseError
from .serialization import SubdivisionEncoder, deserialize, deserialize_code, serialize
from .subdivision import SUBDIVISIONS, Subdivision, for_country, lookup, parse

__all__ = [
    "Code",
    "InvalidCode",
    "InvalidValue",
    "SUBDIVISIONS",
    "Subdivision",
    "SubdivisionCodeParseError",
    "SubdivisionEncoder",
    "deserialize",
    "deserialize_code",
    "for_country",
    "lookup",
    "parse",
    "serialize",
]
