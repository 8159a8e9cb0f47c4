"""BaseCaseStrategy: shared plumbing for the built-in case strategies.

Subclasses supply three class attributes and one hook:

- ``style_name`` / ``description``: identity metadata.
- ``_SPECIAL``: exact-match results for the single-character separator
  inputs ``"_"``, ``"-"`` and ``" "``.  Generic segmentation of a lone
  separator gives degenerate output, so these are looked up first.
- ``_PATTERN``: compiled regex that a key must fully match for ``detect``.
- ``_convert(value)``: the general re-casing algorithm for a non-empty
  string that is not one of the special inputs.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar

__all__ = ["SEPARATORS", "BaseCaseStrategy"]

# A separator run: underscores, hyphens and whitespace in any combination.
SEPARATORS = r"[-_\s]+"


class BaseCaseStrategy:
    """Template for a stateless ``(transform, detect)`` pair.

    Instances hold no mutable state; one instance per style is shared by
    every traversal in the process.
    """

    style_name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    _SPECIAL: ClassVar[dict[str, str]] = {}
    _PATTERN: ClassVar[re.Pattern[str]]

    __slots__ = ()

    def transform(self, value: Any) -> Any:
        """Re-case ``value`` into this style.

        Non-string input is returned unchanged and the empty string maps to
        itself.  The single-character separator rules take precedence over
        the general algorithm.
        """
        if not isinstance(value, str) or not value:
            return value
        special = self._SPECIAL.get(value)
        if special is not None:
            return special
        return self._convert(value)

    def detect(self, value: Any) -> bool:
        """Return True if ``value`` is a string already written in this style."""
        if not isinstance(value, str):
            return False
        return self._PATTERN.fullmatch(value) is not None

    def _convert(self, value: str) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(style_name={self.style_name!r})"
