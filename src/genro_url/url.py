# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Fluent URL builder in a mutable and an immutable flavour.

Purpose
=======
Wraps a ``UrlComponents`` record and offers chained edits of the query,
the path segments and the authority, rendering back to a string with
``str()``.

Two classes share the same behaviour and differ only in what a mutator
returns::

    Url            edits its own record, returns self
    UrlImmutable   edits a copy, returns a new UrlImmutable

    url = Url.create("https://example.com/a/")
    url.push("b") is url                        # True
    str(url)                                    # "https://example.com/a/b/"

    frozen = UrlImmutable.create("https://example.com/a/")
    other = frozen.push("b")
    other is frozen                             # False
    str(frozen)                                 # "https://example.com/a/"

Definition::

    class BaseUrl(ABC):
        @classmethod create(cls, url: str = "", strict: bool = False)
        def get_query(self, name) / set_query / remove_query / set_query_map
        def get_scheme / get_host / get_port / get_path
        def set_scheme / set_host / set_port / set_path
        def get_path_segments / set_path_segments
        def shift / unshift / push / pop  (+ *_path_segment long names)
        def with_trailing_slash / without_trailing_slash
        def to_string(self) -> str

    class Url(BaseUrl)
    class UrlImmutable(BaseUrl)

Design Notes
============
- The query is kept raw and re-parsed on every query call (no cache)
- Setters do not validate scheme, host or port
- Path mutations always produce an absolute path; see ``genro_url.path``
  for the trailing slash policy
- Mutators go through two hooks: ``_edit()`` returns the record to change,
  ``_commit()`` turns the changed record into the return value
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .components import UrlComponents, build_url, parse_url
from .path import join_segments, split_segments
from .query import build_query, merge_query, parse_query

__all__ = ["BaseUrl", "Url", "UrlImmutable"]

logger = logging.getLogger("genro_url")

_U = TypeVar("_U", bound="BaseUrl")


class BaseUrl(ABC):
    """
    Shared core of ``Url`` and ``UrlImmutable``.

    Holds the component record and implements every operation on top of
    the ``_edit()`` / ``_commit()`` hooks.
    """

    __slots__ = ("_components",)

    def __init__(self, url: str | UrlComponents | Mapping[str, Any] = "") -> None:
        """
        Initialize from a URL string or from ready components.

        Args:
            url: A URL string (parsed leniently), a ``UrlComponents`` record
                 or a mapping of component names. Records and mappings are
                 used as they are, without validation.
        """
        if isinstance(url, UrlComponents):
            self._components = url
        elif isinstance(url, str):
            self._components = parse_url(url)
        elif isinstance(url, Mapping):
            self._components = UrlComponents.from_mapping(url)
        else:
            raise TypeError(f"Expected str, UrlComponents or mapping, got {type(url).__name__}")

    @classmethod
    def create(cls: type[_U], url: str = "", strict: bool = False) -> _U:
        """
        Parse ``url`` into a new instance.

        Args:
            url: The URL string.
            strict: Raise ``UrlParseError`` on input ``urllib.parse`` rejects
                    instead of starting from empty components.
        """
        return cls(parse_url(url, strict=strict))

    @abstractmethod
    def _edit(self) -> UrlComponents:
        """Return the record a mutator should change."""

    @abstractmethod
    def _commit(self: _U, components: UrlComponents) -> _U:
        """Return the result of a mutator that changed ``components``."""

    @property
    def components(self) -> UrlComponents:
        """Copy of the component record."""
        return self._components.copy()

    # Query

    def get_query(self, name: str) -> str | None:
        """Return the decoded value of query parameter ``name``, or None."""
        return parse_query(self._components.query).get(name)

    def set_query(self: _U, name: str, value: str) -> _U:
        """Set query parameter ``name``, replacing any current value."""
        components = self._edit()
        params = parse_query(components.query)
        params[name] = value
        components.query = build_query(params)
        return self._commit(components)

    def remove_query(self: _U, name: str) -> _U:
        """Remove query parameter ``name`` if present."""
        components = self._edit()
        params = parse_query(components.query)
        params.pop(name, None)
        components.query = build_query(params)
        return self._commit(components)

    def set_query_map(self: _U, params: Mapping[str, Any]) -> _U:
        """
        Set several query parameters at once.

        Current parameters keep their position; values in ``params``
        override them and unknown keys are appended.
        """
        components = self._edit()
        components.query = build_query(merge_query(parse_query(components.query), params))
        return self._commit(components)

    # Components

    def get_scheme(self) -> str | None:
        """Return the scheme, or None."""
        return self._components.scheme

    def get_host(self) -> str | None:
        """Return the host, or None."""
        return self._components.host

    def get_port(self) -> int | None:
        """Return the port as int, or None when absent or not numeric."""
        port = self._components.port
        if port is None:
            return None
        try:
            return int(port)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric port %r", port)
            return None

    def get_path(self) -> str | None:
        """Return the path as stored, or None."""
        return self._components.path

    def set_scheme(self: _U, scheme: str) -> _U:
        """Replace the scheme."""
        components = self._edit()
        components.scheme = scheme
        return self._commit(components)

    def set_host(self: _U, host: str) -> _U:
        """Replace the host."""
        components = self._edit()
        components.host = host
        return self._commit(components)

    def set_port(self: _U, port: int) -> _U:
        """Replace the port, without range checks."""
        components = self._edit()
        components.port = port
        return self._commit(components)

    def set_path(self: _U, path: str) -> _U:
        """Replace the whole path."""
        components = self._edit()
        components.path = path
        return self._commit(components)

    # Path segments

    def get_path_segments(self) -> list[str]:
        """Return the non-empty segments of the path."""
        return split_segments(self._components.path)

    def set_path_segments(self: _U, segments: Iterable[str], trailing_slash: bool = True) -> _U:
        """
        Replace the path with ``segments``.

        Empty segments are dropped. A trailing slash is added when
        ``trailing_slash`` is true, unless the last segment ends with
        ".php" or ".html".
        """
        components = self._edit()
        components.path = join_segments(segments, trailing_slash)
        return self._commit(components)

    def shift_path_segment(self: _U) -> _U:
        """Remove the first path segment."""
        return self.set_path_segments(self.get_path_segments()[1:])

    def shift(self: _U) -> _U:
        return self.shift_path_segment()

    def unshift_path_segment(self: _U, segment: str, trailing_slash: bool = True) -> _U:
        """Insert ``segment`` at the start of the path."""
        return self.set_path_segments([segment, *self.get_path_segments()], trailing_slash)

    def unshift(self: _U, segment: str) -> _U:
        return self.unshift_path_segment(segment)

    def push_path_segment(self: _U, segment: str) -> _U:
        """Append ``segment`` to the path."""
        return self.set_path_segments([*self.get_path_segments(), segment])

    def push(self: _U, segment: str) -> _U:
        return self.push_path_segment(segment)

    def pop_path_segment(self: _U) -> _U:
        """Remove the last path segment."""
        return self.set_path_segments(self.get_path_segments()[:-1])

    def pop(self: _U) -> _U:
        return self.pop_path_segment()

    def with_trailing_slash(self: _U) -> _U:
        """Rebuild the path ending with "/" (files excepted)."""
        return self.set_path_segments(self.get_path_segments())

    def without_trailing_slash(self: _U) -> _U:
        """Rebuild the path without a final "/"."""
        return self.set_path_segments(self.get_path_segments(), False)

    # Rendering

    def to_string(self) -> str:
        return build_url(self._components)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        """
        Compare with another URL of the same kind or with a string.

        Args:
            other: A URL instance or URL string.

        Returns:
            True if components (or rendered strings) match, False otherwise.
        """
        if isinstance(other, BaseUrl):
            return type(self) is type(other) and self._components == other._components
        if isinstance(other, str):
            return self.to_string() == other
        return False


class Url(BaseUrl):
    """
    Mutable URL: every mutator changes this instance and returns it.

    Example:
        >>> url = Url.create("https://example.com/catalog/")
        >>> url.set_query("page", "2").push("shoes") is url
        True
        >>> str(url)
        'https://example.com/catalog/shoes/?page=2'
    """

    __slots__ = ()

    def _edit(self) -> UrlComponents:
        return self._components

    def _commit(self, components: UrlComponents) -> "Url":
        self._components = components
        return self

    def to_immutable(self) -> "UrlImmutable":
        """Return an immutable URL with a copy of the current components."""
        return UrlImmutable(self._components)


class UrlImmutable(BaseUrl):
    """
    Immutable URL: every mutator returns a new instance.

    The receiver is never changed, so instances can be shared and used as
    dict keys. A ``UrlComponents`` record given to the constructor is copied,
    later changes to it do not reach the instance.

    Example:
        >>> base = UrlImmutable.create("https://example.com/catalog/")
        >>> page = base.set_query("page", "2")
        >>> str(base), str(page)
        ('https://example.com/catalog/', 'https://example.com/catalog/?page=2')
    """

    __slots__ = ()

    def __init__(self, url: str | UrlComponents | Mapping[str, Any] = "") -> None:
        if isinstance(url, UrlComponents):
            url = url.copy()
        super().__init__(url)

    def _edit(self) -> UrlComponents:
        return self._components.copy()

    def _commit(self, components: UrlComponents) -> "UrlImmutable":
        return type(self)(components)

    def to_mutable(self) -> Url:
        """Return a mutable URL with a copy of the current components."""
        return Url(self._components.copy())

    def __hash__(self) -> int:
        return hash(self.to_string())
