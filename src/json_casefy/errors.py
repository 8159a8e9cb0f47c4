"""json-casefy error hierarchy.

Two disjoint failure classes share a common base so callers can catch
everything with ``except CasefyError``:

    CasefyError
    ├── ConfigurationError   # bad style names or options; always raised
    └── DataError            # unexpected value shape; caught per transform call
"""

from __future__ import annotations

__all__ = ["CasefyError", "ConfigurationError", "DataError"]


class CasefyError(Exception):
    """Base class for all json-casefy errors."""


class ConfigurationError(CasefyError, ValueError):
    """Raised for programmer errors: missing or unsupported case styles, bad options."""


class DataError(CasefyError):
    """Raised while walking a value that cannot be rewritten (e.g. a cycle)."""
