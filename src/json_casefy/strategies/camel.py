"""camelCase strategy (e.g. ``firstName``)."""

from __future__ import annotations

import re
from typing import Any

from json_casefy.strategies.base import SEPARATORS, BaseCaseStrategy

__all__ = ["CamelCaseStrategy", "join_capitalized"]

# A separator run followed by the character that starts the next segment.
_SEGMENT_START = re.compile(rf"{SEPARATORS}([a-zA-Z0-9])")
_LEADING_SEPARATORS = re.compile(rf"^{SEPARATORS}")
_FIRST_UPPER = re.compile(r"^[A-Z]")
_ANY_UPPER = re.compile(r"[A-Z]")


def join_capitalized(value: str) -> str:
    """Drop separator runs, upper-casing the character each one precedes.

    Only the first character of each segment is touched; the remainder is
    kept as-is, so ``"user_NAME"`` becomes ``"userNAME"``.  A separator run
    with no letter or digit after it (a trailing one) is left in place.
    """
    return _SEGMENT_START.sub(lambda m: m.group(1).upper(), value)


class CamelCaseStrategy(BaseCaseStrategy):
    """Lower-case first segment, capitalised following segments, no separator."""

    style_name = "camelCase"
    description = "Converts strings to camelCase format (e.g., firstName)"

    _SPECIAL = {"_": "_", "-": "", " ": ""}
    _PATTERN = re.compile(r"[a-z][a-zA-Z0-9]*")

    __slots__ = ()

    def detect(self, value: Any) -> bool:
        # A plain lower-case word is not camelCase: it needs a hump.
        return super().detect(value) and _ANY_UPPER.search(value) is not None

    def _convert(self, value: str) -> str:
        result = join_capitalized(value)
        result = _FIRST_UPPER.sub(lambda m: m.group(0).lower(), result)
        return _LEADING_SEPARATORS.sub("", result)
