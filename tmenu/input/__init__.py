"""Input-layer public API: key tokens and the raw-byte decoder."""

from . import keys
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "keys",
    "read_key",
]
