#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_io_utils.py
"""Unit tests for write_content."""

from io import BytesIO, StringIO

import pytest

from hearthmd.exceptions import RenderingError
from hearthmd.utils import write_content


class FailingStream:
    """Text stream whose writes always fail."""

    mode = "w"

    def write(self, data):
        raise OSError("disk full")


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content destinations."""

    def test_path_string(self, tmp_path):
        """Test writing to a path given as a string."""
        target = tmp_path / "out.html"
        write_content("<p>é</p>", str(target))
        assert target.read_text(encoding="utf-8") == "<p>é</p>"

    def test_path_object(self, tmp_path):
        """Test writing to a Path."""
        target = tmp_path / "out.html"
        write_content("<hr />", target)
        assert target.read_text(encoding="utf-8") == "<hr />"

    def test_text_stream(self):
        """Test writing to a text stream."""
        buffer = StringIO()
        write_content("<p>x</p>", buffer)
        assert buffer.getvalue() == "<p>x</p>"

    def test_binary_stream(self):
        """Test binary streams receive UTF-8."""
        buffer = BytesIO()
        write_content("<p>é</p>", buffer)
        assert buffer.getvalue() == "<p>é</p>".encode("utf-8")

    def test_binary_file(self, tmp_path):
        """Test a file opened in binary mode."""
        target = tmp_path / "out.html"
        with open(target, "wb") as f:
            write_content("<p>x</p>", f)
        assert target.read_bytes() == b"<p>x</p>"

    def test_missing_directory(self, tmp_path):
        """Test an unwritable path raises RenderingError."""
        target = tmp_path / "missing" / "out.html"
        with pytest.raises(RenderingError) as exc_info:
            write_content("x", target)
        assert exc_info.value.output_path == str(target)
        assert isinstance(exc_info.value.original_error, OSError)

    def test_failing_stream(self):
        """Test stream write failures are wrapped."""
        with pytest.raises(RenderingError) as exc_info:
            write_content("x", FailingStream())
        assert exc_info.value.output_path is None

    def test_unsupported_output(self):
        """Test objects without write() are rejected."""
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]
