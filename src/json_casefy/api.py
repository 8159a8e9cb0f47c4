"""Public API functions for json-casefy.

This module provides the user-facing functions: ``casefy`` (alias
``transform_keys``), ``detect_case_style`` and ``supported_styles``, plus
the lower-level ``traverse`` that reports bad data by raising.  Each
``casefy`` call creates a fresh ``CasefyService`` to guarantee zero state
shared between calls (strategy instances aside, which are immutable).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.algorithm.traversal import TraversalEngine
from json_casefy.errors import ConfigurationError
from json_casefy.hooks import RenameHook
from json_casefy.registry import default_registry
from json_casefy.result import CasefyResult, TraversalResult
from json_casefy.service import CasefyService, resolve_styles

__all__ = [
    "casefy",
    "detect_case_style",
    "supported_styles",
    "transform_keys",
    "traverse",
]


def _require_styles(from_: str | None, to: str | None) -> tuple[str, str]:
    if not from_ or not to:
        msg = 'Both "from" and "to" case styles must be specified'
        raise ConfigurationError(msg)
    return from_, to


def casefy(
    data: Any,
    *,
    from_: str | None,
    to: str | None,
    deep: bool = True,
    arrays: bool = True,
    preserve_types: bool = True,
    field_mappings: Mapping[str, str] | None = None,
    exclude_fields: Iterable[str] | None = None,
    include_fields: Iterable[str] | None = None,
    on_rename: RenameHook | None = None,
) -> CasefyResult:
    """Rename the keys of ``data`` from one case style to another.

    Args:
        data:           Any JSON-like value (dict, list, scalar, None, ...).
        from_:          Source style; only keys it detects are re-cased.
        to:             Target style.
        deep:           Descend into nested objects.  Defaults to True.
        arrays:         Descend into array elements.  Defaults to True.
        preserve_types: Keep scalars as-is; when False they become text.
        field_mappings: Explicit ``{old: new}`` renames, emitted verbatim.
        exclude_fields: Keys left alone, value included.
        include_fields: Whitelist; when given, only these keys are eligible.
        on_rename:      Optional callback fired for every renamed key.

    Returns:
        A ``CasefyResult``.  If walking ``data`` failed, ``data`` is echoed
        back unchanged with ``transformed_keys=0`` and ``error`` set.

    Raises:
        ConfigurationError: If ``from_`` or ``to`` is missing, or names an
            unsupported style (source checked before target), or an option
            is ill-typed.

    Example::

        casefy({"user_name": "John", "user_age": 30}, from_="snake_case", to="camelCase")
        # CasefyResult(data={"userName": "John", "userAge": 30}, transformed_keys=2, ...)
    """
    from_, to = _require_styles(from_, to)

    options = TraversalOptions.from_kwargs(
        deep=deep,
        arrays=arrays,
        preserve_types=preserve_types,
        field_mappings=field_mappings,
        exclude_fields=exclude_fields,
        include_fields=include_fields,
    )
    service = CasefyService(from_, to, options, on_rename=on_rename)
    result = service.transform(data)

    return CasefyResult(
        data=result.data,
        transformed_keys=result.transformed_keys,
        from_case=from_,
        to_case=to,
        deep=options.deep,
        arrays=options.arrays,
        error=result.error,
    )


transform_keys = casefy


def traverse(
    value: Any,
    from_: str | None,
    to: str | None,
    options: TraversalOptions | None = None,
    *,
    on_rename: RenameHook | None = None,
) -> TraversalResult:
    """Low-level form of ``casefy``: resolve both styles, then run one traversal.

    Unlike ``casefy`` this does not recover from bad data.

    Raises:
        ConfigurationError: If a style is missing or unsupported (source
            checked before target).  Raised before any traversal work.
        DataError: If ``value`` cannot be walked (e.g. it contains a cycle).
    """
    from_, to = _require_styles(from_, to)
    source, target = resolve_styles(from_, to)
    return TraversalEngine(source, target, options, on_rename).run(value)


def detect_case_style(key: Any) -> str | None:
    """Return the name of the first supported style ``key`` is written in, or None.

    Built-ins are tried in ``supported_styles()`` order, so a single
    lower-case word (``"name"``) reports ``"snake_case"`` and an all-caps
    word (``"URL"``) reports ``"PascalCase"``.
    """
    return default_registry.detect_style(key)


def supported_styles() -> list[str]:
    """Return every style name ``casefy`` accepts, built-ins first."""
    return default_registry.list_styles()
