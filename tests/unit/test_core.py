"""
Unit tests for the file conversion engine.
"""

import pytest

from keyquotes.converter import ConversionDirection
from keyquotes.core import (
    ConversionError,
    FileConverter,
    convert_file,
    json_convert_with_to_without_keyquotes,
    json_convert_without_to_with_keyquotes,
    load_json,
    write_json,
)
from keyquotes.quotes import QuoteStyle
from tests.fixtures.sample_documents import (
    LOOSE_DOCUMENT,
    STRICT_DOCUMENT,
    LOOSE_SIMPLE_DOCUMENT,
    STRICT_SINGLE_DOCUMENT,
)


class TestLoadWrite:
    """Tests for load_json() and write_json()."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "doc.json"
        write_json(str(path), LOOSE_DOCUMENT)
        assert load_json(str(path)) == LOOSE_DOCUMENT

    def test_preserves_line_endings(self, tmp_path):
        """Test that CRLF line endings are neither added nor removed."""
        path = tmp_path / "crlf.json"
        path.write_bytes(b'{\r\n  "a": 1\r\n}')
        assert load_json(str(path)) == '{\r\n  "a": 1\r\n}'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(str(tmp_path / "missing.json"))

    def test_undecodable_file(self, tmp_path):
        """Test that non-UTF-8 content raises ConversionError."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b"{caf\xe9: 1}")
        with pytest.raises(ConversionError, match="Cannot decode"):
            load_json(str(path))


class TestConvertFile:
    """Tests for the file-level conversion functions."""

    def test_convert_in_place(self, loose_file):
        result = convert_file(str(loose_file), ConversionDirection.TO_STRICT)
        assert result == STRICT_DOCUMENT
        assert loose_file.read_text(encoding="utf-8") == STRICT_DOCUMENT

    def test_convert_to_output_path(self, loose_file, tmp_path):
        out = tmp_path / "out.json"
        convert_file(str(loose_file), ConversionDirection.TO_STRICT, output_path=str(out))
        assert out.read_text(encoding="utf-8") == STRICT_DOCUMENT
        assert loose_file.read_text(encoding="utf-8") == LOOSE_DOCUMENT

    def test_without_to_with_keyquotes(self, loose_file):
        json_convert_without_to_with_keyquotes(str(loose_file), QuoteStyle.DOUBLE)
        assert loose_file.read_text(encoding="utf-8") == STRICT_DOCUMENT

    def test_without_to_with_keyquotes_single(self, tmp_path):
        path = tmp_path / "simple.json"
        path.write_text(LOOSE_SIMPLE_DOCUMENT, encoding="utf-8")
        json_convert_without_to_with_keyquotes(str(path), QuoteStyle.SINGLE)
        assert path.read_text(encoding="utf-8") == STRICT_SINGLE_DOCUMENT

    def test_with_to_without_keyquotes(self, strict_file):
        json_convert_with_to_without_keyquotes(str(strict_file))
        assert strict_file.read_text(encoding="utf-8") == LOOSE_DOCUMENT


class TestFileConverter:
    """Tests for FileConverter class."""

    @pytest.mark.parametrize("name", ["a.json", "b.JSON", "c.json5", "d.jsonc", "e.txt"])
    def test_can_handle(self, name):
        assert FileConverter.can_handle(name)

    @pytest.mark.parametrize("name", ["a.md", "b.yaml", "json"])
    def test_cannot_handle(self, name):
        assert not FileConverter.can_handle(name)

    def test_custom_extensions(self, tmp_path):
        converter = FileConverter(extensions={".CONF"}, verbose=False)
        assert converter.extensions == {".conf"}
        assert converter.can_handle("x.conf", converter.extensions)
        assert not converter.can_handle("x.json", converter.extensions)

    def test_convert_file_in_place(self, quiet_converter, loose_file):
        result = quiet_converter.convert(str(loose_file), ConversionDirection.TO_STRICT)
        assert result == STRICT_DOCUMENT
        assert loose_file.read_text(encoding="utf-8") == STRICT_DOCUMENT

    def test_convert_without_saving(self, quiet_converter, strict_file):
        result = quiet_converter.convert(str(strict_file), ConversionDirection.TO_LOOSE, save=False)
        assert result == LOOSE_DOCUMENT
        assert strict_file.read_text(encoding="utf-8") == STRICT_DOCUMENT

    def test_output_dir(self, loose_file, tmp_path):
        """Test that converted files land in the output directory."""
        out_dir = tmp_path / "out"
        converter = FileConverter(output_dir=str(out_dir), verbose=False)
        converter.convert(str(loose_file))

        assert (out_dir / "loose.json").read_text(encoding="utf-8") == STRICT_DOCUMENT
        assert loose_file.read_text(encoding="utf-8") == LOOSE_DOCUMENT

    def test_output_path_for(self, tmp_path):
        assert FileConverter(verbose=False).output_path_for("/a/b.json") == "/a/b.json"
        converter = FileConverter(output_dir=str(tmp_path), verbose=False)
        assert converter.output_path_for("/a/b.json") == str(tmp_path / "b.json")

    def test_single_quote_style(self, tmp_path):
        path = tmp_path / "simple.json"
        path.write_text(LOOSE_SIMPLE_DOCUMENT, encoding="utf-8")
        FileConverter(quote_style=QuoteStyle.SINGLE, verbose=False).convert(str(path))
        assert path.read_text(encoding="utf-8") == STRICT_SINGLE_DOCUMENT

    def test_invalid_source(self, quiet_converter, tmp_path):
        """Test that a path that is neither file nor directory is rejected."""
        with pytest.raises(ConversionError, match="Cannot handle source"):
            quiet_converter.convert(str(tmp_path / "nope.json"))

    def test_convert_text(self):
        converter = FileConverter(quote_style=QuoteStyle.SINGLE, verbose=False)
        assert converter.convert_text("{a: 1}", ConversionDirection.TO_STRICT) == "{'a': 1}"

    def test_verbose_reports_progress(self, loose_file, capsys):
        FileConverter().convert(str(loose_file))
        out = capsys.readouterr().out
        assert "[TO_STRICT] Converting:" in out
        assert "[SAVED]" in out

    def test_quiet_prints_nothing(self, quiet_converter, loose_file, capsys):
        quiet_converter.convert(str(loose_file))
        assert capsys.readouterr().out == ""

    def test_supported_directions(self):
        directions = FileConverter.supported_directions()
        assert set(directions) == {"strict", "loose"}
