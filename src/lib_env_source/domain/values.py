"""Typed configuration values and best-effort scalar inference.

Purpose
-------
Describe the tagged values the environment adapter hands to aggregators and
convert raw environment strings into them.

Contents
--------
* :data:`ENV_ORIGIN` – provenance tag attached to every environment value.
* :class:`ValueKind` – the four scalar variants.
* :class:`TypedValue` – frozen value + kind + origin triple.
* :func:`infer_value` – strict ``bool → int → float → str`` inference.
* :func:`parse_bool` / :func:`parse_int` / :func:`parse_float` – the
  individual strict parsers, returning ``None`` when the text does not match.
* :func:`plain_values` – unwrap a result mapping into Python primitives.

System Role
-----------
Inference never raises. A failed parse falls through to the next candidate
and the final fallback (a string) cannot fail, so no variable can abort
configuration loading.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping

ENV_ORIGIN: Final[str] = "the environment"

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_BOOL_LITERALS: Final[dict[str, bool]] = {"true": True, "false": False}
_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_INT64_DIGITS: Final[int] = len(str(INT64_MAX))
_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class ValueKind(str, Enum):
    """Scalar variant carried by a :class:`TypedValue`."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class TypedValue:
    """A scalar configuration value tagged with its kind and origin.

    Why
    ----
    Aggregators merge values from several sources and need to explain where a
    value came from when reporting errors. ``origin`` is diagnostic only.

    Examples
    --------
    >>> value = TypedValue.integer(8080)
    >>> value.kind, value.value, value.origin
    (<ValueKind.INTEGER: 'integer'>, 8080, 'the environment')
    >>> value.to_python()
    8080
    """

    kind: ValueKind
    value: bool | int | float | str
    origin: str | None = ENV_ORIGIN

    @classmethod
    def boolean(cls, value: bool, origin: str | None = ENV_ORIGIN) -> TypedValue:
        """Return a boolean value tagged with *origin*."""

        return cls(ValueKind.BOOLEAN, value, origin)

    @classmethod
    def integer(cls, value: int, origin: str | None = ENV_ORIGIN) -> TypedValue:
        """Return a 64-bit integer value tagged with *origin*."""

        return cls(ValueKind.INTEGER, value, origin)

    @classmethod
    def float_(cls, value: float, origin: str | None = ENV_ORIGIN) -> TypedValue:
        """Return a float value tagged with *origin*."""

        return cls(ValueKind.FLOAT, value, origin)

    @classmethod
    def string(cls, value: str, origin: str | None = ENV_ORIGIN) -> TypedValue:
        """Return a verbatim string value tagged with *origin*."""

        return cls(ValueKind.STRING, value, origin)

    def to_python(self) -> bool | int | float | str:
        """Return the bare Python value without kind or origin."""

        return self.value


def parse_bool(text: str) -> bool | None:
    """Return the boolean spelled by *text* (any case) or ``None``.

    Examples
    --------
    >>> parse_bool("TRUE"), parse_bool("false"), parse_bool("yes")
    (True, False, None)
    """

    return _BOOL_LITERALS.get(text.lower())


def parse_int(text: str) -> int | None:
    """Return *text* as a signed 64-bit integer or ``None``.

    Only an optional sign followed by ASCII digits is accepted. Whitespace,
    underscores and values outside the 64-bit range are rejected.

    Examples
    --------
    >>> parse_int("42"), parse_int("-7"), parse_int("+3")
    (42, -7, 3)
    >>> parse_int(" 42") is None, parse_int("1_000") is None
    (True, True)
    >>> parse_int("9223372036854775808") is None
    True
    >>> parse_int("9" * 5000) is None
    True
    """

    if not _INT_PATTERN.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
        return None
    number = int(text)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def parse_float(text: str) -> float | None:
    """Return *text* as a float or ``None``.

    Accepts integer-looking text, decimals (``1.``, ``.5``), exponents and the
    case-insensitive specials ``inf``, ``infinity`` and ``nan``.

    Examples
    --------
    >>> parse_float("3.14"), parse_float("1e3"), parse_float("5")
    (3.14, 1000.0, 5.0)
    >>> parse_float("1_0") is None, parse_float("abc") is None
    (True, True)
    """

    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


def infer_value(raw: str, try_parsing: bool) -> TypedValue:
    """Convert *raw* into a :class:`TypedValue`.

    With ``try_parsing`` disabled the value is kept verbatim as a string.
    Otherwise booleans are tried first (case-insensitively), then integers,
    then floats; the first success wins and the original text is the
    fallback.

    Examples
    --------
    >>> infer_value("TRUE", True).value
    True
    >>> infer_value("42", True).kind.value
    'integer'
    >>> infer_value("3.14", True).value
    3.14
    >>> infer_value("Hello", True).value
    'Hello'
    >>> infer_value("42", False).value
    '42'
    """

    if not try_parsing:
        return TypedValue.string(raw)
    flag = parse_bool(raw)
    if flag is not None:
        return TypedValue.boolean(flag)
    number = parse_int(raw)
    if number is not None:
        return TypedValue.integer(number)
    real = parse_float(raw)
    if real is not None:
        return TypedValue.float_(real)
    return TypedValue.string(raw)


def plain_values(values: Mapping[str, TypedValue]) -> dict[str, bool | int | float | str]:
    """Unwrap *values* into a mapping of bare Python primitives.

    Examples
    --------
    >>> plain_values({"port": TypedValue.integer(80)})
    {'port': 80}
    """

    return {key: value.to_python() for key, value in values.items()}
