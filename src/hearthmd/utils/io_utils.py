#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/hearthmd/utils/io_utils.py
"""Writing rendered HTML to its destination."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from hearthmd.exceptions import RenderingError


def _is_binary_stream(output: Union[IO[bytes], IO[str]]) -> bool:
    """Guess whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or a text/binary stream.

    Binary destinations receive UTF-8. Streams whose mode cannot be
    determined are treated as text.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        File path or writable file-like object

    Raises
    ------
    RenderingError
        If the destination cannot be written
    TypeError
        If ``output`` is neither a path nor writable

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<p>hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>hi</p>'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise RenderingError(
                f"Could not write output to {output_path}: {e}", output_path=str(output_path), original_error=e
            ) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    try:
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
    except OSError as e:
        raise RenderingError(f"Could not write output to stream: {e}", original_error=e) from e


__all__ = ["write_content"]
