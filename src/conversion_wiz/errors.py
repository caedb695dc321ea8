"""Error message catalogue and exception hierarchy for the conversion core."""

from __future__ import annotations

from typing import Any, Final

ERROR_MESSAGES: Final[dict[str, str]] = {
    "EMPTY_UNIT_NAME": "Unit name cannot be empty",
    "EMPTY_ALIAS": "Unit alias cannot be empty",
    "DUPLICATE_UNIT": "Unit {name} already exists",
    "DUPLICATE_ALIAS": "Alias {alias} already exists",
    "UNIT_NOT_FOUND": "Cannot find unit {token}",
    "CONVERSION_RATE_ZERO": "Conversion rate cannot be 0",
    "CONVERSION_RATE_BOTH_VALUES": "One of the conversion rates must be unchanged (1 for scale, 0 for offset)",
    "NON_FINITE_CONVERSION_RATE": "Conversion rate must be a finite number, got {value}",
    "CONVERSION_PATH_NOT_FOUND": "No conversion path found from '{source}' to '{target}'",
    "MISSING_CONVERSION_FACTOR": "Conversion factor missing in the graph",
    "INVALID_DEFINITION": "Invalid unit definition: {detail}",
}


def format_error(code: str, **context: Any) -> str:
    """Return the catalogue message for *code* filled in with *context*."""

    template = ERROR_MESSAGES.get(code, code)
    return template.format(**context)


class ConversionError(ValueError):
    """Base class for every error raised by the conversion core."""

    code: str = ""

    def __init__(self, **context: Any) -> None:
        self.context = context
        super().__init__(format_error(self.code, **context))


class EmptyUnitName(ConversionError):
    code = "EMPTY_UNIT_NAME"

    def __init__(self) -> None:
        super().__init__()


class EmptyAlias(ConversionError):
    code = "EMPTY_ALIAS"

    def __init__(self) -> None:
        super().__init__()


class DuplicateUnit(ConversionError):
    code = "DUPLICATE_UNIT"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name=name)


class DuplicateAlias(ConversionError):
    code = "DUPLICATE_ALIAS"

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(alias=alias)


class UnitNotFound(ConversionError):
    """Raised when a token does not resolve to any registered unit."""

    code = "UNIT_NOT_FOUND"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(token=token)


class ConversionRateZero(ConversionError):
    code = "CONVERSION_RATE_ZERO"

    def __init__(self) -> None:
        super().__init__()


class ConversionRateBothValues(ConversionError):
    """Raised when an edge carries a non-unity scale and a non-zero offset."""

    code = "CONVERSION_RATE_BOTH_VALUES"

    def __init__(self) -> None:
        super().__init__()


class NonFiniteConversionRate(ConversionError):
    """Raised when a scale or offset is infinite or NaN."""

    code = "NON_FINITE_CONVERSION_RATE"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(value=value)


class ConversionPathNotFound(ConversionError):
    """Raised when no chain of edges links the two units."""

    code = "CONVERSION_PATH_NOT_FOUND"

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(source=source, target=target)


class MissingConversionFactor(ConversionError):
    """Raised when an edge discovered during the search is absent from the edge table."""

    code = "MISSING_CONVERSION_FACTOR"

    def __init__(self) -> None:
        super().__init__()


class DefinitionError(ConversionError):
    """Raised when a unit definition document is malformed."""

    code = "INVALID_DEFINITION"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail=detail)


__all__ = [
    "ERROR_MESSAGES",
    "format_error",
    "ConversionError",
    "EmptyUnitName",
    "EmptyAlias",
    "DuplicateUnit",
    "DuplicateAlias",
    "UnitNotFound",
    "ConversionRateZero",
    "ConversionRateBothValues",
    "NonFiniteConversionRate",
    "ConversionPathNotFound",
    "MissingConversionFactor",
    "DefinitionError",
]
