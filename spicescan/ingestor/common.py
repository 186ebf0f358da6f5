"""
Shared utilities for parser components.

Provides memory-mapped source reading used by the orchestrator and the
factory entry points.
"""

import contextlib
import mmap
import os
from pathlib import Path
from typing import BinaryIO, Iterator

from spicescan.errors import NetlistSourceError

__all__ = ["open_mmap", "open_source", "decode_line"]


def decode_line(line_bytes: bytes) -> str:
    return line_bytes.decode("utf-8", errors="replace").rstrip("\r\n")


@contextlib.contextmanager
def open_mmap(f: BinaryIO) -> Iterator[mmap.mmap | None]:
    """
    Maps an open binary file read-only.

    :param f: File object opened in binary mode.
    :return: Context yielding the mapping, or None for an empty file.
    """
    if os.fstat(f.fileno()).st_size == 0:
        yield None
        return
    with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
        yield mm


def _iter_lines(f: BinaryIO) -> Iterator[str]:
    with open_mmap(f) as mm:
        if mm is None:
            return
        while line_bytes := mm.readline():
            yield decode_line(line_bytes)


@contextlib.contextmanager
def open_source(filepath: str | Path) -> Iterator[Iterator[str]]:
    """
    Opens a netlist file and yields an iterator over its physical lines.

    :param filepath: Path to the netlist file.
    :return: Context yielding decoded lines without line terminators.
    :raises NetlistSourceError: If the file cannot be opened.
    """
    try:
        f = open(filepath, "rb")
    except OSError as e:
        raise NetlistSourceError(filepath, e.strerror or str(e)) from e
    with f:
        yield _iter_lines(f)
