"""algorithm subpackage: public API for the key-rewriting traversal.

Provides the traversal engine, its configuration, and the value/frame
primitives it threads through the recursion.  Import from this module (not
from sub-modules directly) to stay on the stable public interface.

Example::

    from json_casefy.algorithm import TraversalEngine, TraversalOptions
    from json_casefy.registry import default_registry

    engine = TraversalEngine(
        default_registry.resolve("snake_case"),
        default_registry.resolve("kebab-case"),
        TraversalOptions(exclude_fields=frozenset({"raw_payload"})),
    )
    engine.run({"user_id": 7, "raw_payload": {"keep_me": 1}}).data
    # {"user-id": 7, "raw_payload": {"keep_me": 1}}
"""

from __future__ import annotations

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.algorithm.frame import TraversalFrame
from json_casefy.algorithm.traversal import TraversalEngine
from json_casefy.algorithm.values import ValueKind, classify, to_text

__all__ = [
    "TraversalEngine",
    "TraversalFrame",
    "TraversalOptions",
    "ValueKind",
    "classify",
    "to_text",
]
