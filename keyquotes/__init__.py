"""
Keyquotes - Text-Level JSON Key Quote Converter

Converts JSON-like text between a loose dialect (bare keys, literal tabs and
newlines in keys and string values) and a strict dialect (quoted keys,
escaped tabs and newlines). No JSON parsing and no validation: only keys and
string values are rewritten, everything else is preserved as written.
"""

__version__ = "1.0.0"

from .quotes import QuoteStyle
from .key_quotes import add_key_quotes, remove_key_quotes
from .ctrlchars import escape_ctrlchars, unescape_ctrlchars
from .converter import ConversionDirection, KeyQuoteConverter, convert, to_loose, to_strict

__all__ = [
    "QuoteStyle",
    "add_key_quotes",
    "remove_key_quotes",
    "escape_ctrlchars",
    "unescape_ctrlchars",
    "ConversionDirection",
    "KeyQuoteConverter",
    "convert",
    "to_loose",
    "to_strict",
]
