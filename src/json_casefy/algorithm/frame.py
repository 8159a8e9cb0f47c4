"""TraversalFrame: the immutable position of the engine inside a value tree.

A frame is created for every object key and every array element visited and
passed by value down the recursion; nothing in it is ever mutated.

Paths use dotted keys with ``[index]`` segments for array ancestry, e.g.
``users[0].first_name``.  The root frame has an empty path and depth 0.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TraversalFrame"]


@dataclass(frozen=True, slots=True)
class TraversalFrame:
    """Where a key or element sits in the input.

    Attributes:
        path:        Dotted path to this position ("" at the root).
        depth:       Nesting depth; keys of the root object are at depth 0.
        in_array:    True when the immediate parent container is an array element.
        array_index: Index within the parent array, or None.
    """

    path: str = ""
    depth: int = 0
    in_array: bool = False
    array_index: int | None = None

    def child_key(self, key: object) -> TraversalFrame:
        """Frame for ``key`` of the object at this position (same depth)."""
        path = f"{self.path}.{key}" if self.path else str(key)
        return TraversalFrame(
            path=path,
            depth=self.depth,
            in_array=self.in_array,
            array_index=self.array_index,
        )

    def child_element(self, index: int) -> TraversalFrame:
        """Frame for element ``index`` of the array at this position."""
        return TraversalFrame(
            path=f"{self.path}[{index}]",
            depth=self.depth + 1,
            in_array=True,
            array_index=index,
        )

    def descend(self) -> TraversalFrame:
        """Frame for the value held at this position, one level deeper."""
        return TraversalFrame(path=self.path, depth=self.depth + 1)
