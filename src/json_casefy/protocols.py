"""CaseStrategy Protocol for the json-casefy case-style extension point.

Defines the structural interface every case strategy must satisfy.
Custom styles can be registered without inheriting from any base class:
any object with conformant ``transform``/``detect`` methods and
``style_name``/``description`` attributes passes ``isinstance`` checks.

Example::

    from json_casefy.protocols import CaseStrategy

    class ScreamingSnake:
        style_name = "SCREAMING_SNAKE"
        description = "Upper-case words joined by underscores (e.g. FIRST_NAME)"

        def transform(self, value: str) -> str:
            return value.upper()

        def detect(self, value: str) -> bool:
            return isinstance(value, str) and value.isupper()

    assert isinstance(ScreamingSnake(), CaseStrategy)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CaseStrategy(Protocol):
    """Structural protocol for case strategies.

    The methods must:
    - Never raise, for any input (including the empty string).
    - ``transform`` returns non-``str`` input unchanged.
    - ``detect`` returns ``False`` for non-``str`` input.
    - Hold no per-call state, so one instance can serve concurrent traversals.
    """

    style_name: str
    description: str

    def transform(self, value: Any) -> Any: ...

    def detect(self, value: Any) -> bool: ...
