"""Rename hooks: an opt-in callback fired for every key the engine actually renames.

The hook is supplied once, at the top of a traversal, and invoked wherever a
rename happens.  Keys whose emitted name equals the original never reach it,
and when no hook is supplied nothing is recorded at all.

``logging_hook()`` returns a ready-made hook that writes one DEBUG record per
rename through the standard ``logging`` module::

    import logging
    from json_casefy import CasefyService
    from json_casefy.hooks import logging_hook

    logging.basicConfig(level=logging.DEBUG)
    service = CasefyService("snake_case", "camelCase", on_rename=logging_hook())
    service.transform({"user_name": "John"})
    # DEBUG:json_casefy.hooks:[camelCase] user_name -> userName (user_name)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_casefy.algorithm.frame import TraversalFrame

__all__ = ["RenameEvent", "RenameHook", "logging_hook"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenameEvent:
    """One key rename.

    Attributes:
        original: The key as it appeared in the input.
        renamed:  The key as emitted in the output.
        style:    Target style name ("camelCase", ...).
        frame:    Position of the key in the input.
        mapped:   True when the new name came from ``field_mappings``.
    """

    original: str
    renamed: str
    style: str
    frame: TraversalFrame
    mapped: bool = False

    @property
    def path(self) -> str:
        return self.frame.path

    @property
    def depth(self) -> int:
        return self.frame.depth

    def describe(self) -> str:
        """Human-readable one-liner, e.g. ``[camelCase] a_b -> aB (x[0].a_b depth:1)``."""
        where = [self.frame.path]
        if self.frame.in_array:
            where.append(f"array[{self.frame.array_index}]")
        if self.frame.depth > 0:
            where.append(f"depth:{self.frame.depth}")
        return f"[{self.style}] {self.original} -> {self.renamed} ({' '.join(where)})"


RenameHook = Callable[[RenameEvent], None]


def logging_hook(
    target: logging.Logger | None = None, level: int = logging.DEBUG
) -> RenameHook:
    """Return a hook that logs every rename to ``target`` at ``level``.

    Args:
        target: Logger to write to.  Defaults to this module's logger.
        level:  Log level for rename records.  Defaults to DEBUG.
    """
    sink = target if target is not None else logger

    def _log(event: RenameEvent) -> None:
        if sink.isEnabledFor(level):
            sink.log(level, "%s", event.describe())

    return _log
