"""
Keyquotes File Engine

Reads JSON-like files, converts them between the loose dialect (bare keys,
literal tabs/newlines) and the strict dialect (quoted keys, escaped
tabs/newlines), and writes the result back. Files are rewritten in place
unless an output directory is given.

Text-level rewriting only; the output is not guaranteed to be valid JSON.
"""

import os
import sys
from datetime import datetime, timezone
from typing import Optional

from .converter import ConversionDirection, convert
from .quotes import DEFAULT_QUOTE_STYLE, QuoteStyle

DEFAULT_ENCODING = "utf-8"


class ConversionError(Exception):
    """Raised when a source cannot be converted."""
    pass


def load_json(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read a JSON-like file as text.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConversionError: If the file is not valid text in ``encoding``.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"JSON file not found: {path}")

    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ConversionError(f"Cannot decode {path} as {encoding}: {e}") from e


def write_json(path: str, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write text to a file, replacing its contents."""
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def convert_file(
    path: str,
    direction: ConversionDirection,
    quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE,
    output_path: Optional[str] = None,
) -> str:
    """
    Convert a file and write the result.

    Args:
        path: Source file.
        direction: Dialect to convert to.
        quote_style: Quote character for added key quotes.
        output_path: Where to write; defaults to overwriting ``path``.

    Returns:
        The converted text.
    """
    converted = convert(load_json(path), direction, quote_style)
    write_json(output_path or path, converted)
    return converted


def json_convert_without_to_with_keyquotes(
    path: str, quote_type: QuoteStyle = DEFAULT_QUOTE_STYLE
) -> str:
    """Rewrite a loose file in place as strict text."""
    return convert_file(path, ConversionDirection.TO_STRICT, quote_type)


def json_convert_with_to_without_keyquotes(path: str) -> str:
    """Rewrite a strict file in place as loose text."""
    return convert_file(path, ConversionDirection.TO_LOOSE)


class FileConverter:
    """
    Converts files and directories of JSON-like text.

    Accepts a file path or a directory and writes each converted file either
    in place or into ``output_dir`` under the same file name.
    """

    SUPPORTED_EXTENSIONS = {".json", ".json5", ".jsonc", ".txt"}

    def __init__(
        self,
        output_dir: Optional[str] = None,
        quote_style: QuoteStyle = DEFAULT_QUOTE_STYLE,
        extensions: Optional[set[str]] = None,
        encoding: str = DEFAULT_ENCODING,
        verbose: bool = True,
    ):
        self.output_dir = output_dir
        self.quote_style = quote_style
        self.extensions = {ext.lower() for ext in (extensions or self.SUPPORTED_EXTENSIONS)}
        self.encoding = encoding
        self.verbose = verbose
        if self.output_dir:
            os.makedirs(self.output_dir, exist_ok=True)

    @classmethod
    def can_handle(cls, file_path: str, extensions: Optional[set[str]] = None) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in (extensions or cls.SUPPORTED_EXTENSIONS)

    def convert_text(self, text: str, direction: ConversionDirection) -> str:
        """Convert in-memory text with this converter's quote style."""
        return convert(text, direction, self.quote_style)

    def convert(
        self,
        source: str,
        direction: ConversionDirection = ConversionDirection.TO_STRICT,
        save: bool = True,
    ) -> str:
        """
        Convert a file or every supported file in a directory.

        Args:
            source: File or directory path
            direction: Dialect to convert to
            save: If True, write the converted text

        Returns:
            The converted text
        """
        source = source.strip()

        if os.path.isdir(source):
            self._report(f"[DIR] Converting all supported files in: {source}")
            return self.convert_directory(source, direction, save=save)

        if not os.path.isfile(source):
            raise ConversionError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file or directory path."
            )

        self._report(f"[{direction.name}] Converting: {source}")
        return self._convert_file(source, direction, save)

    def convert_directory(
        self,
        dir_path: str,
        direction: ConversionDirection = ConversionDirection.TO_STRICT,
        save: bool = True,
    ) -> str:
        """Convert all supported files in a directory (not recursive)."""
        results = []
        converted_count = 0
        error_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path):
                continue
            if not self.can_handle(file_path, self.extensions):
                continue

            try:
                results.append(self._convert_file(file_path, direction, save))
                converted_count += 1
            except (OSError, ConversionError) as e:
                print(f"[ERROR] Failed to convert {filename}: {e}", file=sys.stderr)
                error_count += 1

        self._report(
            f"[DIR] {converted_count} converted, {error_count} failed "
            f"at {datetime.now(timezone.utc).isoformat()}"
        )
        return "\n".join(results)

    def output_path_for(self, file_path: str) -> str:
        """Where the converted version of ``file_path`` is written."""
        if not self.output_dir:
            return file_path
        return os.path.join(self.output_dir, os.path.basename(file_path))

    def _convert_file(self, file_path: str, direction: ConversionDirection, save: bool) -> str:
        converted = self.convert_text(load_json(file_path, self.encoding), direction)
        if save:
            out_path = self.output_path_for(file_path)
            write_json(out_path, converted, self.encoding)
            self._report(f"[SAVED] {out_path}")
        return converted

    def _report(self, message: str) -> None:
        if self.verbose:
            print(message)

    @staticmethod
    def supported_directions() -> dict:
        """Describe the available conversions."""
        return {
            ConversionDirection.TO_STRICT.value: "quote keys, escape tabs/newlines in values, drop them from keys",
            ConversionDirection.TO_LOOSE.value: "unescape tabs/newlines, strip key quotes",
        }
