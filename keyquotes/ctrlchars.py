"""
Escaping and unescaping of tab and newline characters.

String values get the usual JSON treatment: a literal tab or newline is
written as ``\\t`` / ``\\n`` and read back again. Keys are stricter: a
literal tab or newline in a key is deleted when escaping, so escaping a key
and unescaping it again does not restore the original character.

Only the spans found by the scanner are touched. Whitespace between tokens
is left as it is.
"""

import re

from .scanner import Span, SpanKind, rewrite

CONTROL_CHARS = ("\t", "\n")

_ESCAPE_TABLE = str.maketrans({"\t": "\\t", "\n": "\\n"})
_STRIP_TABLE = str.maketrans("", "", "".join(CONTROL_CHARS))
_UNESCAPES = {"t": "\t", "n": "\n"}

# Backslash pairs are consumed left to right, so in "\\n" the first pair is
# an escaped backslash and the "n" is plain text.
_ESCAPE_PAIR = re.compile(r"\\(.)", re.DOTALL)


def escape_value(value: str) -> str:
    """Replace literal tabs and newlines with their escape sequences."""
    return value.translate(_ESCAPE_TABLE)


def strip_key(key: str) -> str:
    """Delete literal tabs and newlines from a key."""
    return key.translate(_STRIP_TABLE)


def unescape_span(value: str) -> str:
    """Replace ``\\t`` and ``\\n`` escape sequences with literal characters."""
    return _ESCAPE_PAIR.sub(
        lambda match: _UNESCAPES.get(match.group(1), match.group(0)),
        value,
    )


def escape_ctrlchars(text: str) -> str:
    """
    Escape control characters in string values and remove them from keys.

    Existing escape sequences are never escaped a second time, so running
    this on already-strict text changes nothing.

    Args:
        text: The JSON-like text.

    Returns:
        The text with string values escaped and keys free of tabs/newlines.
    """
    def _escape(span: Span) -> Span:
        if span.kind is SpanKind.STRING:
            return span.with_text(escape_value(span.text))
        if span.kind is SpanKind.KEY:
            return span.with_text(strip_key(span.text))
        return span

    return rewrite(text, _escape)


def unescape_ctrlchars(text: str) -> str:
    """
    Turn ``\\t`` and ``\\n`` escape sequences in keys and string values
    back into literal tab and newline characters.

    An escaped backslash followed by ``t`` or ``n`` is not an escape
    sequence and is left as it is.
    """
    def _unescape(span: Span) -> Span:
        if span.kind in (SpanKind.STRING, SpanKind.KEY):
            return span.with_text(unescape_span(span.text))
        return span

    return rewrite(text, _unescape)
