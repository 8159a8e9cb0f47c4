"""Built-in case strategies.

Four styles ship with the package; each satisfies the ``CaseStrategy``
Protocol and is stateless, so a single instance per style is shared by the
registry:

- ``CamelCaseStrategy``  -> "camelCase"  (firstName)
- ``SnakeCaseStrategy``  -> "snake_case" (first_name)
- ``PascalCaseStrategy`` -> "PascalCase" (FirstName)
- ``KebabCaseStrategy``  -> "kebab-case" (first-name)
"""

from json_casefy.strategies.base import BaseCaseStrategy
from json_casefy.strategies.camel import CamelCaseStrategy
from json_casefy.strategies.kebab import KebabCaseStrategy
from json_casefy.strategies.pascal import PascalCaseStrategy
from json_casefy.strategies.snake import SnakeCaseStrategy

# Registration order is the order ``list_styles()`` reports.
BUILTIN_STRATEGIES: tuple[type[BaseCaseStrategy], ...] = (
    CamelCaseStrategy,
    SnakeCaseStrategy,
    PascalCaseStrategy,
    KebabCaseStrategy,
)

__all__ = [
    "BUILTIN_STRATEGIES",
    "BaseCaseStrategy",
    "CamelCaseStrategy",
    "KebabCaseStrategy",
    "PascalCaseStrategy",
    "SnakeCaseStrategy",
]
