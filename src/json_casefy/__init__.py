"""json-casefy - recursive key case conversion for JSON-like data."""

from __future__ import annotations

from json_casefy.algorithm.config import TraversalOptions
from json_casefy.api import (
    casefy,
    detect_case_style,
    supported_styles,
    transform_keys,
    traverse,
)
from json_casefy.errors import CasefyError, ConfigurationError, DataError
from json_casefy.protocols import CaseStrategy
from json_casefy.registry import TransformerRegistry, default_registry
from json_casefy.result import CasefyResult, TransformResult, TraversalResult
from json_casefy.service import CasefyService

__version__: str = "0.1.0"
__all__: list[str] = [
    "CaseStrategy",
    "CasefyError",
    "CasefyResult",
    "CasefyService",
    "ConfigurationError",
    "DataError",
    "TransformResult",
    "TransformerRegistry",
    "TraversalOptions",
    "TraversalResult",
    "casefy",
    "default_registry",
    "detect_case_style",
    "supported_styles",
    "transform_keys",
    "traverse",
]
