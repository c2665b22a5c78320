"""Reading ``.ber`` map files into lists of raw lines."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO

__all__ = ["MapError", "iter_lines", "read_map", "check_extension"]

_CHUNK_SIZE = 100_000
_EXTENSION = ".ber"
# Map files are treated as raw bytes; latin-1 keeps one character per byte.
_ENCODING = "latin-1"


class MapError(Exception):
    """Raised when a map file cannot be used; the message is the reason."""


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream, each with its trailing newline.

    Only ``"\\n"`` separates lines; any other character, ``"\\r"`` included,
    stays part of the line. The last line has no newline if the stream
    does not end with one.
    """
    pending = ""
    while chunk := stream.read(_CHUNK_SIZE):
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Return the lines of the map at ``path``, newlines kept.

    Raises :class:`MapError` when the file cannot be read or holds nothing.
    """
    try:
        with open(path, encoding=_ENCODING, newline="") as stream:
            rows = list(iter_lines(stream))
    except OSError as exc:
        raise MapError("Empty map !") from exc
    if not rows:
        raise MapError("Empty map !")
    return rows


def check_extension(path: str | os.PathLike[str]) -> None:
    """Check that ``path`` can be opened and is named like a map file.

    The name must be longer than the extension and end with its letters
    ``ber``; the dot before them is not itself compared.
    """
    name = os.fspath(path)
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError("Check your file !") from exc
    if len(name) <= len(_EXTENSION):
        raise MapError("Check your file !")
    if not name.endswith(_EXTENSION[1:]):
        raise MapError("Check your file !")