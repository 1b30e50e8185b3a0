"""
Span scanner for loose and strict JSON-like text.

Splits text into object keys, quoted strings and everything else without
building a tree. Rendering the spans back always reproduces the input
exactly, so a rewrite only changes the spans it chooses to replace.

A key is recognised only in key position: after ``{`` or ``,`` and any
whitespace. There it is either a quoted string followed by ``:``, or a bare
run of characters up to the first delimiter that is followed by ``:``.
Strings anywhere else are consumed whole so that key-like content inside a
value (``"a, b: c"``) is never mistaken for a key.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional

from .quotes import QUOTE_CHARS

# Characters that end a bare key token.
KEY_DELIMITERS = frozenset(":,{}[]")

# Characters after which a key may start.
KEY_OPENERS = frozenset("{,")


class SpanKind(Enum):
    """Kinds of spans produced by the scanner."""
    TEXT = "text"
    KEY = "key"
    STRING = "string"


class ScanState(Enum):
    OUTSIDE = "outside"
    KEY_EXPECTED = "key_expected"


@dataclass(frozen=True)
class Span:
    """
    A slice of scanned text.

    ``text`` holds the inner text with any surrounding quotes removed;
    ``quote`` is the quote character, or None for bare keys and plain text.
    """
    kind: SpanKind
    text: str
    quote: Optional[str] = None

    @property
    def is_quoted(self) -> bool:
        return self.quote is not None

    def render(self) -> str:
        if self.quote is None:
            return self.text
        return f"{self.quote}{self.text}{self.quote}"

    def with_text(self, text: str) -> "Span":
        return replace(self, text=text)

    def with_quote(self, quote: Optional[str]) -> "Span":
        return replace(self, quote=quote)


def is_ambiguous_key(token: str) -> bool:
    """A bare token starting or ending with a quote looks like quoting."""
    return bool(token) and (token[0] in QUOTE_CHARS or token[-1] in QUOTE_CHARS)


class Scanner:
    """
    Single-pass scanner over one text buffer.

    Create one per input; ``scan()`` returns the spans in source order with
    adjacent plain text merged into one TEXT span.
    """

    def __init__(self, text: str):
        self.text = text
        self.spans: list[Span] = []
        self._pos = 0
        self._pending = 0
        self._state = ScanState.OUTSIDE

    def scan(self) -> list[Span]:
        text = self.text
        length = len(text)

        while self._pos < length:
            char = text[self._pos]

            if char in KEY_OPENERS:
                self._state = ScanState.KEY_EXPECTED
                self._pos += 1
                continue

            # Whitespace keeps the current state
            if char.isspace():
                self._pos += 1
                continue

            if self._state is ScanState.KEY_EXPECTED:
                self._state = ScanState.OUTSIDE
                if self._consume_key():
                    continue

            if char in QUOTE_CHARS:
                self._consume_string()
                continue

            self._pos += 1

        self._flush(length)
        return self.spans

    def _consume_key(self) -> bool:
        """Try to read a key at the current position."""
        text = self.text
        start = self._pos

        if text[start] in QUOTE_CHARS:
            end = _string_end(text, start)
            if end is not None:
                key_end = _quoted_key_end(text, start, end)
                if key_end is not None:
                    self._emit(Span(SpanKind.KEY, text[start + 1:key_end - 1], text[start]), start, key_end)
                    return True
                # The closing quote may belong to a later string; only a
                # token closed by the other quote style is still a key.
                return self._consume_bare_key(start, mismatched_only=True)
            # No closing quote: mismatched quoting reads as a bare token

        return self._consume_bare_key(start)

    def _consume_bare_key(self, start: int, mismatched_only: bool = False) -> bool:
        text = self.text
        end = start
        while end < len(text) and text[end] not in KEY_DELIMITERS:
            end += 1
        if end == len(text) or text[end] != ":":
            return False

        token = text[start:end].rstrip()
        if not token:
            return False
        if mismatched_only and not _is_mismatched(token):
            return False

        self._emit(Span(SpanKind.KEY, token), start, start + len(token))
        return True

    def _consume_string(self) -> None:
        text = self.text
        start = self._pos
        end = _string_end(text, start)

        if end is None:
            # Unterminated: leave the remainder untouched
            self._pos = len(text)
            return

        self._emit(Span(SpanKind.STRING, text[start + 1:end - 1], text[start]), start, end)

    def _emit(self, span: Span, start: int, end: int) -> None:
        self._flush(start)
        self.spans.append(span)
        self._pos = end
        self._pending = end

    def _flush(self, upto: int) -> None:
        if upto > self._pending:
            self.spans.append(Span(SpanKind.TEXT, self.text[self._pending:upto]))
            self._pending = upto


def _string_end(text: str, start: int) -> Optional[int]:
    """Index just past the closing quote of the string opened at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        i += 1
    return None


def _quoted_key_end(text: str, start: int, end: int) -> Optional[int]:
    """
    End of the quoted key opened at ``start``, or None if it is not a key.

    A quoted key normally ends at the first closing quote followed by ``:``.
    A key holding its own quote character (``"a"b":``) is extended to a
    later same-style quote that is followed by ``:``, as long as no part of
    it contains a delimiter.
    """
    if _next_significant(text, end) == ":":
        return end

    segment = text[start + 1:end - 1]
    while not _has_delimiter(segment):
        close = end - 1
        end = _string_end(text, close)
        if end is None:
            return None
        segment = text[close + 1:end - 1]
        if not _has_delimiter(segment) and _next_significant(text, end) == ":":
            return end
    return None


def _has_delimiter(segment: str) -> bool:
    return any(char in KEY_DELIMITERS for char in segment)


def _is_mismatched(token: str) -> bool:
    """The token opens with one quote style and closes with the other."""
    return (
        len(token) > 1
        and token[0] in QUOTE_CHARS
        and token[-1] in QUOTE_CHARS
        and token[0] != token[-1]
    )


def _next_significant(text: str, pos: int) -> str:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return text[pos] if pos < len(text) else ""


def scan(text: str) -> list[Span]:
    """Split text into spans."""
    return Scanner(text).scan()


def render(spans: Iterable[Span]) -> str:
    """Join spans back into text."""
    return "".join(span.render() for span in spans)


def rewrite(text: str, transform: Callable[[Span], Span]) -> str:
    """Scan text, pass every span through ``transform`` and render the result."""
    return render(transform(span) for span in scan(text))
