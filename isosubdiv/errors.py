"""
Errors raised while generating the subdivision table and while parsing codes.
"""

from __future__ import annotations

EXPECTED = "an ISO 3166-1/3166-2 compliant subdivision code"


class GenerationError(Exception):
    """Base class for fatal errors raised while generating the table."""


class DatasetError(GenerationError, ValueError):
    """The dataset could not be read, parsed or validated."""


class TemplateError(GenerationError):
    """The template could not be compiled or rendered."""


class SubdivisionCodeParseError(ValueError):
    """Errors that might arise when converting raw data into a subdivision code."""


class InvalidCode(SubdivisionCodeParseError):
    """The string does not match any known subdivision code."""

    def __init__(self, value: object) -> None:
        super().__init__("invalid iso subdivision code string")
        self.value = value


class InvalidValue(ValueError):
    """A wire value could not be deserialized into a subdivision code."""

    def __init__(self, value: object, expected: str = EXPECTED) -> None:
        if isinstance(value, str):
            message = f"invalid value: string {value!r}, expected {expected}"
        else:
            message = f"invalid type: {type(value).__name__}, expected {expected}"
        super().__init__(message)
        self.value = value
        self.expected = expected
