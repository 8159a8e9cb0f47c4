"""kebab-case strategy (e.g. ``first-name``)."""

from __future__ import annotations

import re

from json_casefy.strategies.base import BaseCaseStrategy
from json_casefy.strategies.snake import join_lowered

__all__ = ["KebabCaseStrategy"]


class KebabCaseStrategy(BaseCaseStrategy):
    """Lower-case segments joined by hyphens."""

    style_name = "kebab-case"
    description = "Converts strings to kebab-case format (e.g., first-name)"

    _SPECIAL = {"_": "-", "-": "-", " ": "-"}
    _PATTERN = re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*")

    __slots__ = ()

    def _convert(self, value: str) -> str:
        return join_lowered(value, "-")
