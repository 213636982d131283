"""
Whole-file writes that either fully land or leave the old file alone.
"""

import os
import tempfile


def replace_file(path: str, data: bytes) -> None:
    """Write `data` to a sibling temp file, fsync it, then swap it over `path`."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        dir=directory, prefix=f".{os.path.basename(path)}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def read_file(path: str) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()
