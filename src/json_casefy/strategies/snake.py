"""snake_case strategy (e.g. ``first_name``)."""

from __future__ import annotations

import re

from json_casefy.strategies.base import SEPARATORS, BaseCaseStrategy

__all__ = ["SnakeCaseStrategy", "join_lowered"]

_UPPER = re.compile(r"([A-Z])")
_SEPARATOR_RUN = re.compile(SEPARATORS)


def join_lowered(value: str, separator: str) -> str:
    """Split at every upper-case letter and separator run, join with ``separator``.

    Upper-case runs are not grouped: each capital starts its own segment,
    so ``"URL"`` becomes ``"u_r_l"``.  At most one leading separator is
    produced and it is stripped.
    """
    result = _UPPER.sub(rf"{separator}\1", value)
    result = _SEPARATOR_RUN.sub(separator, result)
    if result.startswith(separator):
        result = result[1:]
    return result.lower()


class SnakeCaseStrategy(BaseCaseStrategy):
    """Lower-case segments joined by underscores."""

    style_name = "snake_case"
    description = "Converts strings to snake_case format (e.g., first_name)"

    _SPECIAL = {"_": "_", "-": "_", " ": "_"}
    _PATTERN = re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)*")

    __slots__ = ()

    def _convert(self, value: str) -> str:
        return join_lowered(value, "_")
