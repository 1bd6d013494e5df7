"""
Lazy byte sources over binary readers.
"""

import sys
import itertools
import contextlib

from hexify import SourceReadFailure

CHUNK_SIZE = 64 * 1024


def stream_bytes(reader, chunk_size=CHUNK_SIZE):
    while True:
        try:
            block = reader.read(chunk_size)
        except OSError as e:
            raise SourceReadFailure(f"cannot read input: {e}") from e
        if not block:
            return
        yield from block


def bounded(source, seek=0, length=None):
    stop = None if length is None else seek + length
    return itertools.islice(source, seek, stop)


def is_std_path(path):
    return path is None or path == "-"


# Standard streams are wrapped so that leaving the with block does not close them.

def open_source(path, binary=True):
    if is_std_path(path):
        return contextlib.nullcontext(sys.stdin.buffer if binary else sys.stdin)
    if binary:
        return open(path, "rb")
    return open(path, "r", encoding="latin-1")


def open_sink(path, binary=False):
    if is_std_path(path):
        return contextlib.nullcontext(sys.stdout.buffer if binary else sys.stdout)
    if binary:
        return open(path, "wb")
    return open(path, "w")
