"""CasefyService: object-oriented entry point bound to (from, to, options).

This is the wiring layer between the registry, the traversal engine and the
public API.  Style names are validated once, at construction; ``transform()``
then never raises for bad data: a traversal either completes or the input
is echoed back with ``success=False`` and a diagnostic.

Architecture:
- The source and target strategies are resolved from a ``TransformerRegistry``
  (``default_registry`` unless one is injected) and wrapped in per-instance
  ``CachedStrategy`` proxies, so repeated keys across large arrays are
  detected and re-cased once.
- ``DataError`` is caught at exactly one place: the top of ``transform()``.
  Nested recursion does not guard individually.
- Logging is orthogonal to the traversal: ``set_logging(True)`` installs the
  stdlib-logging rename hook; an explicit ``on_rename`` callback can be
  passed instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.algorithm.traversal import TraversalEngine
from json_casefy.cache import CachedStrategy
from json_casefy.errors import ConfigurationError, DataError
from json_casefy.hooks import logging_hook
from json_casefy.registry import TransformerRegistry, default_registry
from json_casefy.result import TransformResult

if TYPE_CHECKING:
    from json_casefy.hooks import RenameHook
    from json_casefy.protocols import CaseStrategy

__all__ = ["CasefyService", "resolve_styles"]

logger = logging.getLogger(__name__)


def resolve_styles(
    from_case: str, to_case: str, registry: TransformerRegistry | None = None
) -> tuple[CaseStrategy, CaseStrategy]:
    """Resolve a source/target style pair, source first.

    Raises:
        ConfigurationError: If either style is unsupported.
    """
    registry = registry if registry is not None else default_registry
    if not registry.is_supported(from_case):
        msg = f"Unsupported source case style: {from_case}"
        raise ConfigurationError(msg)
    if not registry.is_supported(to_case):
        msg = f"Unsupported target case style: {to_case}"
        raise ConfigurationError(msg)
    return registry.resolve(from_case), registry.resolve(to_case)


class CasefyService:
    """Reusable key transformer for one source/target style pair.

    Each ``CasefyService`` owns its own strategy caches; two instances never
    share cache state.  One instance may serve concurrent ``transform()``
    calls; the caches are locked.

    Example::

        from json_casefy import CasefyService

        service = CasefyService("snake_case", "camelCase")
        result = service.transform({"user_name": "John", "user_age": 30})
        result.data               # {"userName": "John", "userAge": 30}
        result.transformed_keys   # 2
        result.success            # True
    """

    def __init__(
        self,
        from_case: str,
        to_case: str,
        options: TraversalOptions | None = None,
        *,
        on_rename: RenameHook | None = None,
        registry: TransformerRegistry | None = None,
        cache_size: int = 1024,
    ) -> None:
        """Resolve both styles and prepare the engine.

        Args:
            from_case: Source style name; only keys it detects are re-cased.
            to_case:   Target style name.
            options:   Traversal options.  Defaults to ``TraversalOptions()``.
            on_rename: Optional callback fired for every renamed key.
            registry:  Where to resolve style names.  Defaults to
                ``default_registry``.
            cache_size: Per-strategy LRU size.  Kept out of
                ``TraversalOptions``.

        Raises:
            ConfigurationError: If either style is unsupported (source checked first).
        """
        self._registry = registry if registry is not None else default_registry
        source, target = resolve_styles(from_case, to_case, self._registry)
        self._from = CachedStrategy(source, cache_size)
        self._to = CachedStrategy(target, cache_size)
        self._options = options if options is not None else TraversalOptions()
        self._on_rename = on_rename

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def from_strategy(self) -> CaseStrategy:
        return self._from.wrapped

    @property
    def to_strategy(self) -> CaseStrategy:
        return self._to.wrapped

    @property
    def options(self) -> TraversalOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set_logging(self, enabled: bool) -> None:
        """Turn the stdlib-logging rename hook on or off.

        Enabling replaces any ``on_rename`` callback given at construction.
        """
        self._on_rename = logging_hook() if enabled else None

    def transform(self, value: Any) -> TransformResult:
        """Rewrite the keys of ``value``.

        Never raises for bad data: on a ``DataError`` the original ``value``
        is returned with ``transformed_keys=0``, ``success=False`` and the
        error message in ``error``.
        """
        engine = TraversalEngine(self._from, self._to, self._options, self._on_rename)
        try:
            result = engine.run(value)
        except DataError as exc:
            logger.warning(
                "Key transformation %s -> %s failed: %s",
                self._from.style_name,
                self._to.style_name,
                exc,
            )
            return TransformResult(
                data=value,
                transformed_keys=0,
                from_case=self._from.style_name,
                to_case=self._to.style_name,
                success=False,
                error=str(exc),
            )

        return TransformResult(
            data=result.data,
            transformed_keys=result.transformed_keys,
            from_case=self._from.style_name,
            to_case=self._to.style_name,
            success=True,
        )

    def stats(self) -> dict[str, Any]:
        """Return the bound styles, the options and every available style name."""
        return {
            "from_case": self._from.style_name,
            "to_case": self._to.style_name,
            "options": self._options.as_dict(),
            "available_transformers": self._registry.list_styles(),
        }
