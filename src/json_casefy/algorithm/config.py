"""TraversalOptions: immutable configuration for one key-rewriting traversal.

Options are resolved once per top-level call, by merging whatever the caller
passed with the defaults, and are never mutated while a traversal runs.

Precedence applied per object key by the traversal engine:

1. ``exclude_fields``: listed keys pass through untouched, value included.
2. ``include_fields``: when set, unlisted keys pass through untouched.
3. ``field_mappings``: explicit rename, used verbatim.
4. Case detection: keys the source style recognises are re-cased.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from json_casefy.errors import ConfigurationError

__all__ = ["TraversalOptions"]


def _as_field_set(name: str, names: Iterable[str] | None) -> frozenset[str] | None:
    if names is None:
        return None
    if isinstance(names, str):
        # A bare string is almost always a forgotten list wrapper.
        msg = f"{name} must be a collection of field names, not a string: {names!r}"
        raise ConfigurationError(msg)
    try:
        return frozenset(names)
    except TypeError as exc:
        msg = f"{name} must be an iterable of field names, got {type(names).__name__}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True, slots=True)
class TraversalOptions:
    """Immutable traversal configuration.

    Attributes:
        deep: Recurse into nested objects.  When False, a key's object value is
            copied through as-is; arrays and scalars still get their own
            treatment.  Default True.
        arrays: Recurse into array elements.  When False, every array is
            returned untouched regardless of ``deep``.  Default True.
        preserve_types: Keep scalar values as they are.  When False, ``None``,
            booleans and numbers are replaced by their JSON-style text
            (``"null"``, ``"true"``, ``"30"``).  Default True.
        field_mappings: Explicit ``{original_key: new_key}`` overrides.  The new
            key is emitted verbatim, bypassing case detection.
        exclude_fields: Keys never renamed nor descended into.
        include_fields: Whitelist.  When not None, only these keys may be
            renamed or descended into.
    """

    deep: bool = True
    arrays: bool = True
    preserve_types: bool = True
    field_mappings: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exclude_fields: frozenset[str] = frozenset()
    include_fields: frozenset[str] | None = None

    def __post_init__(self) -> None:
        for name in ("deep", "arrays", "preserve_types"):
            flag = getattr(self, name)
            if not isinstance(flag, bool):
                msg = f"{name} must be a bool, got {type(flag).__name__}"
                raise ConfigurationError(msg)

        mappings = self.field_mappings
        if not isinstance(mappings, Mapping):
            msg = (
                "field_mappings must be a mapping of field names, "
                f"got {type(mappings).__name__}"
            )
            raise ConfigurationError(msg)
        # Empty targets would silently delete the rename; treat them as absent.
        frozen = MappingProxyType({k: v for k, v in mappings.items() if v})
        for source, target in frozen.items():
            if not isinstance(target, str):
                msg = f"field_mappings[{source!r}] must be a str, got {target!r}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "field_mappings", frozen)

        exclude = _as_field_set("exclude_fields", self.exclude_fields)
        object.__setattr__(self, "exclude_fields", exclude or frozenset())
        object.__setattr__(
            self,
            "include_fields",
            _as_field_set("include_fields", self.include_fields),
        )

    @classmethod
    def from_kwargs(cls, **overrides: Any) -> TraversalOptions:
        """Build options from partial configuration, ignoring ``None`` values.

        ``None`` means "use the default", which lets wrappers forward their
        own optional parameters without re-stating every default.

        Raises:
            ConfigurationError: On unknown option names or ill-typed values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            msg = f"Unknown traversal option(s): {', '.join(unknown)}"
            raise ConfigurationError(msg)
        return cls(**{k: v for k, v in overrides.items() if v is not None})

    def allows(self, key: Any) -> bool:
        """Return True if ``key`` is eligible for renaming and descent."""
        if key in self.exclude_fields:
            return False
        return self.include_fields is None or key in self.include_fields

    def mapped_name(self, key: Any) -> str | None:
        """Return the explicit rename for ``key``, or None."""
        return self.field_mappings.get(key)

    def as_dict(self) -> dict[str, Any]:
        """Plain-data view of the options, for diagnostics."""
        return {
            "deep": self.deep,
            "arrays": self.arrays,
            "preserve_types": self.preserve_types,
            "field_mappings": dict(self.field_mappings),
            "exclude_fields": sorted(self.exclude_fields, key=str),
            "include_fields": (
                None
                if self.include_fields is None
                else sorted(self.include_fields, key=str)
            ),
        }
