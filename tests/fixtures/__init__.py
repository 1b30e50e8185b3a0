# Test fixtures
from .sample_documents import (
    SUPPORTED_KEY_CHARS,
    SUPPORTED_VALUE_CHARS,
    LOOSE_DOCUMENT,
    STRICT_DOCUMENT,
    LOOSE_SIMPLE_DOCUMENT,
    STRICT_SINGLE_DOCUMENT,
    keyed_document,
)

__all__ = [
    "SUPPORTED_KEY_CHARS",
    "SUPPORTED_VALUE_CHARS",
    "LOOSE_DOCUMENT",
    "STRICT_DOCUMENT",
    "LOOSE_SIMPLE_DOCUMENT",
    "STRICT_SINGLE_DOCUMENT",
    "keyed_document",
]
