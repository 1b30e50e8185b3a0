"""
Chainable conversions between the loose and strict dialects.
"""

from dataclasses import dataclass, replace
from enum import Enum

from .ctrlchars import escape_ctrlchars, unescape_ctrlchars
from .key_quotes import add_key_quotes, remove_key_quotes
from .quotes import DEFAULT_QUOTE_STYLE, QuoteStyle


class ConversionDirection(Enum):
    """Which dialect a conversion produces."""
    TO_STRICT = "strict"
    TO_LOOSE = "loose"


@dataclass(frozen=True)
class KeyQuoteConverter:
    """
    Immutable converter state: the current text and the quote style.

    Every step returns a new converter, so steps can be chained:

        KeyQuoteConverter("{key: 1}").add_key_quotes().escape_ctrlchars().text
    """
    text: str
    quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE

    def add_key_quotes(self) -> "KeyQuoteConverter":
        return replace(self, text=add_key_quotes(self.text, self.quote_style))

    def remove_key_quotes(self) -> "KeyQuoteConverter":
        return replace(self, text=remove_key_quotes(self.text))

    def escape_ctrlchars(self) -> "KeyQuoteConverter":
        return replace(self, text=escape_ctrlchars(self.text))

    def unescape_ctrlchars(self) -> "KeyQuoteConverter":
        return replace(self, text=unescape_ctrlchars(self.text))

    def to_strict(self) -> "KeyQuoteConverter":
        """Quote keys, then escape control characters."""
        return self.add_key_quotes().escape_ctrlchars()

    def to_loose(self) -> "KeyQuoteConverter":
        """Unescape control characters, then strip key quotes."""
        return self.unescape_ctrlchars().remove_key_quotes()

    def __str__(self) -> str:
        return self.text


def to_strict(text: str, quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE) -> str:
    """Convert loose text (bare keys, literal tabs/newlines) to the strict dialect."""
    return KeyQuoteConverter(text, quote_style).to_strict().text


def to_loose(text: str) -> str:
    """Convert strict text (quoted keys, escaped tabs/newlines) to the loose dialect."""
    return KeyQuoteConverter(text).to_loose().text


def convert(
    text: str,
    direction: ConversionDirection,
    quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE,
) -> str:
    """Convert text in the given direction."""
    if direction is ConversionDirection.TO_STRICT:
        return to_strict(text, quote_style)
    return to_loose(text)
