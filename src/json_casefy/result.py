"""Result dataclasses returned by the traversal engine and the public entry points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CasefyResult", "TransformResult", "TraversalResult"]


@dataclass(frozen=True, slots=True)
class TraversalResult:
    """Output of one ``TraversalEngine.run()`` call.

    Attributes:
        data: The rewritten value (a fresh tree; the input is never mutated).
        transformed_keys: Number of keys whose emitted name differs from the
            original, summed over every object the engine descended into.
    """

    data: Any
    transformed_keys: int


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Result of ``CasefyService.transform()``.

    Attributes:
        data: Rewritten value, or the untouched input when ``success`` is False.
        transformed_keys: Renamed-key count; 0 when ``success`` is False.
        from_case: Source style name.
        to_case: Target style name.
        success: False when walking the data failed and the input was echoed.
        error: Diagnostic message when ``success`` is False, else None.
    """

    data: Any
    transformed_keys: int
    from_case: str
    to_case: str
    success: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class CasefyResult:
    """Result of the functional ``casefy()`` call.

    Attributes:
        data: Rewritten value, or the untouched input when ``error`` is set.
        transformed_keys: Renamed-key count; 0 when ``error`` is set.
        from_case: Source style name.
        to_case: Target style name.
        deep: Whether nested objects were descended into.
        arrays: Whether array elements were descended into.
        error: Diagnostic message when walking the data failed, else None.
    """

    data: Any
    transformed_keys: int
    from_case: str
    to_case: str
    deep: bool
    arrays: bool
    error: str | None = None
