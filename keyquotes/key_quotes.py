"""
Adding and removing quotes around object keys.
"""

from .quotes import DEFAULT_QUOTE_STYLE, QuoteStyle
from .scanner import KEY_DELIMITERS, Span, SpanKind, is_ambiguous_key, rewrite


def add_key_quotes(text: str, quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE) -> str:
    """
    Wrap every bare key in quotes.

    Keys that are already quoted keep their quote style; the style only
    applies to keys that had no quotes. Bare tokens that begin or end with
    a quote character are left alone, since they cannot be told apart from
    real (or mismatched) quoting.

    Args:
        text: The JSON-like text.
        quote_style: Quote character to add.

    Returns:
        The text with all bare keys quoted.
    """
    def _quote(span: Span) -> Span:
        if span.kind is not SpanKind.KEY or span.is_quoted:
            return span
        if is_ambiguous_key(span.text):
            return span
        return span.with_quote(quote_style.char)

    return rewrite(text, _quote)


def remove_key_quotes(text: str) -> str:
    """
    Strip the quotes from every quoted key, whichever style it uses.

    Keys opened with one quote style and closed with the other are not
    treated as quoted. A key keeps its quotes when the bare result would not
    read back as the same key: it is empty, contains a delimiter, or begins
    or ends with a quote character or whitespace.
    """
    def _unquote(span: Span) -> Span:
        if span.kind is not SpanKind.KEY or not span.is_quoted:
            return span
        if not is_strippable(span.text):
            return span
        return span.with_quote(None)

    return rewrite(text, _unquote)


def is_strippable(inner: str) -> bool:
    """Whether a quoted key's inner text can stand as a bare key."""
    if not inner or inner != inner.strip():
        return False
    if is_ambiguous_key(inner):
        return False
    return not any(char in KEY_DELIMITERS for char in inner)
