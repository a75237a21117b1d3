# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Path segment primitives.

A path is handled as an ordered list of non-empty segments::

    "/path//to/0/page/"  →  split_segments  →  ["path", "to", "page"]
    ["path", "to", "page"]  →  join_segments  →  "/path/to/page/"

Trailing slash policy of ``join_segments``: a "/" is appended only when
``trailing_slash`` is true, there is at least one segment, and the path does
not end with one of ``FILE_SUFFIXES``.
"""

from collections.abc import Iterable

__all__ = ["FILE_SUFFIXES", "EMPTY_SEGMENTS", "split_segments", "join_segments"]

# Paths ending with these look like files and never get a trailing slash.
FILE_SUFFIXES = (".php", ".html")

# Segments dropped on split and join, along with "" and None.
EMPTY_SEGMENTS = frozenset({"0"})


def _is_segment(segment: str | None) -> bool:
    return bool(segment) and segment not in EMPTY_SEGMENTS


def split_segments(path: str | None) -> list[str]:
    """Split ``path`` on "/" dropping empty and "0" segments."""
    if not path:
        return []
    return [segment for segment in path.split("/") if _is_segment(segment)]


def join_segments(segments: Iterable[str | None], trailing_slash: bool = True) -> str:
    """
    Build an absolute path from segments.

    Args:
        segments: Path segments. Empty strings, ``None`` and "0" are dropped.
        trailing_slash: Append "/" unless the path looks like a file.

    Returns:
        Path starting with "/". An empty segment list gives "/".

    Example:
        >>> join_segments(["a", "b"])
        '/a/b/'
        >>> join_segments(["a", "index.php"])
        '/a/index.php'
        >>> join_segments(["a", "b"], trailing_slash=False)
        '/a/b'
    """
    kept = [segment for segment in segments if segment is not None and _is_segment(segment)]
    path = "/" + "/".join(kept)
    if trailing_slash and kept and not path.endswith(FILE_SUFFIXES):
        path += "/"
    return path
