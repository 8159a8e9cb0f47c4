"""ValueKind StrEnum plus classification and text coercion for traversal values.

The engine only needs to know which of five shapes it is looking at:

- NULL     -> "null"     : None
- SCALAR   -> "scalar"   : str, int, float, bool
- SEQUENCE -> "sequence" : list, tuple
- MAPPING  -> "mapping"  : any collections.abc.Mapping (dict, MappingProxyType, ...)
- OPAQUE   -> "opaque"   : everything else (datetime, callables, sets, Decimal, ...)

Opaque values are never introspected: they pass through as the same object.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

__all__ = ["ValueKind", "classify", "to_text"]


class ValueKind(StrEnum):
    NULL = auto()
    SCALAR = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    OPAQUE = auto()


def classify(value: Any) -> ValueKind:
    """Return the structural kind of ``value``.

    ``str`` is checked before the container kinds because strings are
    iterable but are leaves here.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bool, int, float)):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OPAQUE


def to_text(value: None | str | bool | int | float) -> str:
    """Render a null or scalar the way JSON text would spell it.

    ``None`` -> ``"null"``, booleans -> ``"true"``/``"false"``, integral
    floats drop their fractional part (``30.0`` -> ``"30"``), non-finite
    floats become ``"NaN"``/``"Infinity"``/``"-Infinity"``.
    """
    # bool before int: bool subclasses int
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _float_text(float(value))


def _float_text(value: float) -> str:
    """Shortest round-trip digits, laid out like JavaScript's Number#toString.

    Fixed notation for exponents -7 < e < 21, otherwise ``<digits>e<sign><n>``
    with no zero padding (``1e-7``, ``1.5e+21``).
    """
    text = repr(value)
    if "e" not in text:
        return text

    mantissa, _, exp_text = text.partition("e")
    exponent = int(exp_text)
    if exponent <= -7 or exponent >= 21:
        sign = "+" if exponent > 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"

    negative = mantissa.startswith("-")
    whole, _, fraction = mantissa.lstrip("-").partition(".")
    digits = whole + fraction
    point = len(whole) + exponent
    if point <= 0:
        fixed = "0." + "0" * -point + digits
    elif point >= len(digits):
        fixed = digits + "0" * (point - len(digits))
    else:
        fixed = f"{digits[:point]}.{digits[point:]}"
    return f"-{fixed}" if negative else fixed
