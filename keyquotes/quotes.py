"""
Quote styles used when adding quotes around object keys.
"""

from enum import Enum


class QuoteStyle(Enum):
    """Which quote character wraps a key when quotes are added."""
    DOUBLE = '"'
    SINGLE = "'"

    @classmethod
    def default(cls) -> "QuoteStyle":
        return cls.DOUBLE

    @classmethod
    def from_name(cls, name: str) -> "QuoteStyle":
        """
        Resolve a style from a user-facing name.

        Accepts the variant name ("double", "single", any case) or the
        quote character itself.

        Raises:
            ValueError: If the name matches no style.
        """
        candidate = name.strip()
        for style in cls:
            if candidate.lower() == style.name.lower() or candidate == style.value:
                return style
        valid = ", ".join(style.name.lower() for style in cls)
        raise ValueError(f"Unknown quote style: {name!r} (expected one of {valid})")

    @property
    def char(self) -> str:
        return self.value


DEFAULT_QUOTE_STYLE = QuoteStyle.default()

# Every style is recognised when scanning, whichever one is used for adding.
QUOTE_CHARS = frozenset(style.value for style in QuoteStyle)
