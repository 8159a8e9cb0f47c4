"""PascalCase strategy (e.g. ``FirstName``)."""

from __future__ import annotations

import re

from json_casefy.strategies.base import SEPARATORS, BaseCaseStrategy
from json_casefy.strategies.camel import join_capitalized

__all__ = ["PascalCaseStrategy"]

_LEADING_SEPARATORS = re.compile(rf"^{SEPARATORS}")
_FIRST_LOWER = re.compile(r"^[a-z]")


class PascalCaseStrategy(BaseCaseStrategy):
    """Every segment capitalised, no separator.

    ``detect`` accepts any identifier that starts with an upper-case letter
    and has only letters and digits, so all-caps constants such as ``"URL"``
    are reported as PascalCase too.
    """

    style_name = "PascalCase"
    description = "Converts strings to PascalCase format (e.g., FirstName)"

    _SPECIAL = {"_": "_", "-": "", " ": ""}
    _PATTERN = re.compile(r"[A-Z][a-zA-Z0-9]*")

    __slots__ = ()

    def _convert(self, value: str) -> str:
        result = join_capitalized(value)
        result = _FIRST_LOWER.sub(lambda m: m.group(0).upper(), result)
        return _LEADING_SEPARATORS.sub("", result)
