# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string primitives.

Purpose
=======
The URL classes keep the query as a raw string and re-parse it on every
query operation. This module provides the three steps of that cycle:
parse into an ordered mapping, merge updates into it, serialize it back.

Parsing Schema::

    Query string: "name=john&tags=python&tags=web&empty="
                        ↓
                urllib.parse.parse_qsl
                        ↓
    Mapping: {
        "name": "john",
        "tags": "web",     # last value wins, first position kept
        "empty": ""
    }
                        ↓
                urllib.parse.urlencode
                        ↓
    "name=john&tags=web&empty="

Definition::

    def parse_query(query: str | None) -> dict[str, str]
    def build_query(params: Mapping[str, Any]) -> str
    def merge_query(params: Mapping[str, str], updates: Mapping[str, Any]) -> dict[str, str | None]

Design Notes
============
- Single-valued: repeated keys collapse to their last value
- Encoding is ``application/x-www-form-urlencoded`` (space → ``+``)
- ``None`` values are dropped on serialization
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode

__all__ = ["parse_query", "build_query", "merge_query"]


def parse_query(query: str | None) -> dict[str, str]:
    """
    Decode a raw query string into an ordered mapping.

    Args:
        query: Query string without the leading "?". ``None`` is treated
               as empty.

    Returns:
        Ordered dict of decoded key → value. Blank values are kept as "".

    Example:
        >>> parse_query("a=1&b=x+y&a=2")
        {'a': '2', 'b': 'x y'}
    """
    if not query:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def build_query(params: Mapping[str, Any]) -> str:
    """
    Encode a mapping as a query string.

    Args:
        params: Key → value pairs. Values are converted with ``str()``;
                ``None`` values are skipped.

    Returns:
        The encoded query string, "" for an empty mapping.
    """
    return urlencode([(key, str(value)) for key, value in params.items() if value is not None])


def merge_query(params: Mapping[str, str], updates: Mapping[str, Any]) -> dict[str, str | None]:
    """
    Merge ``updates`` into ``params`` without touching either.

    Existing keys keep their position and take the incoming value; new keys
    are appended in the order of ``updates``.

    Example:
        >>> merge_query({"a": "1", "b": "2"}, {"b": 3, "c": 4})
        {'a': '1', 'b': '3', 'c': '4'}
    """
    merged: dict[str, str | None] = dict(params)
    for key, value in updates.items():
        merged[key] = value if value is None else str(value)
    return merged
