"""Search package exports.

Combines the byte matchers and the directional search engine in one import
surface.
"""

from __future__ import annotations

from .engine import (
    QUERY_CAPACITY,
    Algorithm,
    CaseRule,
    Direction,
    SearchConfig,
    SearchEngine,
    SearchQuery,
)
from .matching import fold_ascii, fuzzy_match, substring_match

__all__ = [
    "Algorithm",
    "CaseRule",
    "Direction",
    "QUERY_CAPACITY",
    "SearchConfig",
    "SearchEngine",
    "SearchQuery",
    "fold_ascii",
    "fuzzy_match",
    "substring_match",
]
