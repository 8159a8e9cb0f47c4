"""TraversalEngine: depth-first key rewriting over arbitrary JSON-like values.

The engine walks a value tree, deciding per object key whether and how to
rename it and per value whether to recurse, and counts the keys it renamed.

Per value kind (see ``values.classify``):

- NULL / SCALAR: returned as-is, or rendered as text when
  ``preserve_types`` is False.  Never any keys.
- SEQUENCE: returned untouched when ``arrays`` is False; otherwise every
  element is visited.  This is independent of ``deep``.
- MAPPING: every key, in input order, goes through the precedence chain
  documented on ``TraversalOptions``.  A key's value is visited when ``deep``
  is True or the value is not itself a mapping.
- OPAQUE: returned as the same object.

The input is never mutated: every visited container is rebuilt.  Containers
that are skipped (excluded keys, ``arrays=False``, ``deep=False``) are passed
through by reference.

Cycles: the ids of containers on the current descent path are tracked and
re-entering one raises ``DataError`` instead of recursing until the stack is
exhausted.  A ``RecursionError`` from pathologically deep (acyclic) input is
reported as a ``DataError`` as well.  Both are meant to be caught once, by
the caller of ``run()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.algorithm.frame import TraversalFrame
from json_casefy.algorithm.values import ValueKind, classify, to_text
from json_casefy.errors import DataError
from json_casefy.hooks import RenameEvent
from json_casefy.result import TraversalResult

if TYPE_CHECKING:
    from json_casefy.hooks import RenameHook
    from json_casefy.protocols import CaseStrategy

__all__ = ["TraversalEngine"]


def _rebuild(items: list[Any] | tuple[Any, ...], out: list[Any]) -> Any:
    """Return ``out`` in the container type of ``items``.

    Lists come back as plain lists.  Tuples keep their exact type; named
    tuples are rebuilt positionally.
    """
    if isinstance(items, list):
        return out
    cls = type(items)
    if cls is tuple:
        return tuple(out)
    if hasattr(cls, "_fields"):
        return cls(*out)
    return cls(out)


class TraversalEngine:
    """Recursive key rewriter bound to a source style, a target style and options.

    The engine keeps no state between ``run()`` calls; the set of containers
    being descended into lives on the call stack of a single run.

    Example::

        from json_casefy.algorithm import TraversalEngine, TraversalOptions
        from json_casefy.strategies import CamelCaseStrategy, SnakeCaseStrategy

        engine = TraversalEngine(SnakeCaseStrategy(), CamelCaseStrategy())
        result = engine.run({"user_name": "John", "tags": [{"tag_id": 1}]})
        # result.data == {"userName": "John", "tags": [{"tagId": 1}]}
        # result.transformed_keys == 2
    """

    def __init__(
        self,
        source: CaseStrategy,
        target: CaseStrategy,
        options: TraversalOptions | None = None,
        on_rename: RenameHook | None = None,
    ) -> None:
        self._source = source
        self._target = target
        self._options = options if options is not None else TraversalOptions()
        self._on_rename = on_rename

    @property
    def options(self) -> TraversalOptions:
        return self._options

    def run(self, value: Any) -> TraversalResult:
        """Rewrite every eligible key in ``value``.

        Raises:
            DataError: If ``value`` contains a reference cycle, nests deeper
                than the interpreter's recursion limit, or a container in it
                fails while being read (e.g. a custom Mapping whose
                ``items()`` raises).
        """
        try:
            data, count = self._visit(value, TraversalFrame(), set())
        except DataError:
            raise
        except RecursionError as exc:
            msg = "Input nests too deeply to traverse"
            raise DataError(msg) from exc
        except Exception as exc:
            msg = f"Unexpected {type(exc).__name__} while traversing input: {exc}"
            raise DataError(msg) from exc
        return TraversalResult(data=data, transformed_keys=count)

    # ------------------------------------------------------------------
    # Recursive dispatch
    # ------------------------------------------------------------------

    def _visit(
        self, value: Any, frame: TraversalFrame, active: set[int]
    ) -> tuple[Any, int]:
        kind = classify(value)

        if kind is ValueKind.NULL or kind is ValueKind.SCALAR:
            if self._options.preserve_types:
                return value, 0
            return to_text(value), 0

        if kind is ValueKind.SEQUENCE:
            if not self._options.arrays:
                return value, 0
            return self._visit_sequence(value, frame, active)

        if kind is ValueKind.MAPPING:
            return self._visit_mapping(value, frame, active)

        return value, 0

    def _visit_sequence(
        self, items: list[Any] | tuple[Any, ...], frame: TraversalFrame, active: set[int]
    ) -> tuple[Any, int]:
        self._enter(items, frame, active)
        try:
            out: list[Any] = []
            total = 0
            for index, item in enumerate(items):
                data, count = self._visit(item, frame.child_element(index), active)
                out.append(data)
                total += count
        finally:
            active.discard(id(items))

        return _rebuild(items, out), total

    def _visit_mapping(
        self, obj: Mapping[Any, Any], frame: TraversalFrame, active: set[int]
    ) -> tuple[dict[Any, Any], int]:
        options = self._options
        self._enter(obj, frame, active)
        try:
            out: dict[Any, Any] = {}
            total = 0
            for key, value in obj.items():
                if not options.allows(key):
                    out[key] = value
                    continue

                key_frame = frame.child_key(key)
                new_key = self._rename(key, key_frame)

                if options.deep or not isinstance(value, Mapping):
                    data, count = self._visit(value, key_frame.descend(), active)
                    total += count
                else:
                    data = value

                out[new_key] = data
                if new_key != key:
                    total += 1
        finally:
            active.discard(id(obj))
        return out, total

    # ------------------------------------------------------------------
    # Key decisions
    # ------------------------------------------------------------------

    def _rename(self, key: Any, frame: TraversalFrame) -> Any:
        """Return the name ``key`` is emitted under, firing the hook on change."""
        mapped = self._options.mapped_name(key)
        if mapped is not None:
            new_key = mapped
        elif self._source.detect(key):
            new_key = self._target.transform(key)
        else:
            return key

        if self._on_rename is not None and new_key != key:
            self._on_rename(
                RenameEvent(
                    original=key,
                    renamed=new_key,
                    style=self._target.style_name,
                    frame=frame,
                    mapped=mapped is not None,
                )
            )
        return new_key

    @staticmethod
    def _enter(container: Any, frame: TraversalFrame, active: set[int]) -> None:
        marker = id(container)
        if marker in active:
            where = frame.path or "<root>"
            msg = f"Circular reference detected at {where}"
            raise DataError(msg)
        active.add(marker)
