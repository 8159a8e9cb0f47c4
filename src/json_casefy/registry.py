"""TransformerRegistry: name -> case strategy lookup with one instance per style.

The four built-in styles are known up front but only instantiated on first
``resolve()``; afterwards the same instance is handed out for the life of
the registry.  Strategies are stateless, so sharing them is safe.

Custom styles registered at runtime take precedence over built-ins of the
same name and are listed after them.

Example::

    from json_casefy.registry import default_registry

    default_registry.resolve("camelCase").transform("user_name")   # "userName"
    default_registry.list_styles()
    # ["camelCase", "snake_case", "PascalCase", "kebab-case"]
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from json_casefy.errors import ConfigurationError
from json_casefy.protocols import CaseStrategy
from json_casefy.strategies import BUILTIN_STRATEGIES, BaseCaseStrategy

__all__ = ["TransformerRegistry", "default_registry"]

logger = logging.getLogger(__name__)


class TransformerRegistry:
    """Lazily-instantiating, singleton-per-name registry of case strategies.

    Each ``TransformerRegistry`` has its own instance table, so a registry
    built in a test never leaks custom styles into ``default_registry``.
    Instance creation is locked, so threads resolving the same name for the
    first time still receive one shared instance.
    """

    def __init__(self) -> None:
        self._builtins: dict[str, type[BaseCaseStrategy]] = {
            cls.style_name: cls for cls in BUILTIN_STRATEGIES
        }
        self._instances: dict[str, CaseStrategy] = {}
        self._custom: dict[str, CaseStrategy] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, style_name: str) -> CaseStrategy:
        """Return the strategy registered under ``style_name``.

        Raises:
            ConfigurationError: If no strategy is registered under that name.
        """
        custom = self._custom.get(style_name)
        if custom is not None:
            return custom

        instance = self._instances.get(style_name)
        if instance is not None:
            return instance

        cls = self._builtins.get(style_name)
        if cls is None:
            msg = f"Unsupported case style: {style_name}"
            raise ConfigurationError(msg)

        with self._lock:
            # Re-check: another thread may have created it meanwhile.
            instance = self._instances.get(style_name)
            if instance is None:
                instance = cls()
                self._instances[style_name] = instance
        return instance

    def is_supported(self, style_name: Any) -> bool:
        """Return True if ``style_name`` resolves to a strategy."""
        if not isinstance(style_name, str):
            return False
        return style_name in self._custom or style_name in self._builtins

    def list_styles(self) -> list[str]:
        """Return every supported style name: built-ins first, then custom ones."""
        styles = list(self._builtins)
        styles.extend(name for name in self._custom if name not in self._builtins)
        return styles

    def detect_style(self, key: Any) -> str | None:
        """Return the first style whose ``detect`` accepts ``key``, or None.

        Custom strategies are consulted before built-ins; built-ins are tried
        in ``list_styles()`` order, so a single lower-case word such as
        ``"name"`` reports ``"snake_case"``.
        """
        for style_name, strategy in self._custom.items():
            if strategy.detect(key):
                return style_name
        for style_name in self._builtins:
            if self.resolve(style_name).detect(key):
                return style_name
        return None

    def describe(self, style_name: str) -> dict[str, str] | None:
        """Return ``{"name", "description"}`` for a style, or None if unsupported."""
        if not self.is_supported(style_name):
            return None
        strategy = self.resolve(style_name)
        return {"name": strategy.style_name, "description": strategy.description}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def register(self, style_name: str, strategy: CaseStrategy) -> None:
        """Register (or replace) a strategy under ``style_name``.

        Raises:
            ConfigurationError: If ``style_name`` is empty or not a string.
            TypeError: If ``strategy`` does not satisfy the CaseStrategy Protocol.
        """
        if not isinstance(style_name, str) or not style_name:
            msg = f"style_name must be a non-empty string, got {style_name!r}"
            raise ConfigurationError(msg)
        if not isinstance(strategy, CaseStrategy):
            msg = f"{type(strategy).__name__} does not satisfy the CaseStrategy protocol"
            raise TypeError(msg)
        if style_name in self._custom or style_name in self._builtins:
            logger.debug("Overriding case style %r with %r", style_name, strategy)
        with self._lock:
            self._custom[style_name] = strategy

    def reset(self) -> None:
        """Drop cached built-in instances and every custom registration."""
        with self._lock:
            self._instances.clear()
            self._custom.clear()

    def stats(self) -> dict[str, int]:
        """Return counts of available styles, created instances and custom styles."""
        return {
            "total_available": len(self.list_styles()),
            "instances_created": len(self._instances),
            "custom_transformers": len(self._custom),
        }


# Process-wide registry backing the functional API.
default_registry = TransformerRegistry()
