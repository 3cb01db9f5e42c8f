"""Persistent JSON config helpers.

Stores default context-window sizes, the initial case rule and multi-output.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..search import CaseRule, SearchConfig

APP_NAME = "tmenu"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_CONTEXT_LINES = 1


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_context(value: object) -> int:
    """Accept non-negative ints; booleans and other types use the default."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_CONTEXT_LINES
    return value


def load_context_lines() -> tuple[int, int]:
    """Return configured ``(before, after)`` context counts."""
    data = load_config()
    return _coerce_context(data.get("context_before")), _coerce_context(data.get("context_after"))


def load_search_config() -> SearchConfig:
    """Initial search rules; only an explicit boolean ``case_sensitive`` is honored."""
    value = load_config().get("case_sensitive")
    if isinstance(value, bool) and not value:
        return SearchConfig(case=CaseRule.INSENSITIVE)
    return SearchConfig()


def load_multi_output() -> bool:
    """Return persisted multi-output preference (``False`` unless explicitly true)."""
    value = load_config().get("multi_output")
    return value if isinstance(value, bool) else False
