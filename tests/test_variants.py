# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for the mutation discipline of Url and UrlImmutable."""

import pytest

from genro_url import Url, UrlComponents, UrlImmutable

SOURCE = "https://domain.tld:8080/path/to/page?a=1"

MUTATORS = [
    ("set_query", ("b", "2")),
    ("remove_query", ("a",)),
    ("set_query_map", ({"c": "3"},)),
    ("set_host", ("other.tld",)),
    ("set_scheme", ("http",)),
    ("set_port", (9090,)),
    ("set_path", ("/new",)),
    ("set_path_segments", (["x", "y"],)),
    ("shift_path_segment", ()),
    ("shift", ()),
    ("unshift_path_segment", ("root",)),
    ("unshift", ("root",)),
    ("push_path_segment", ("leaf",)),
    ("push", ("leaf",)),
    ("pop_path_segment", ()),
    ("pop", ()),
    ("with_trailing_slash", ()),
    ("without_trailing_slash", ()),
]


class TestUrl:
    """Test the mutable variant."""

    @pytest.mark.parametrize("method, args", MUTATORS)
    def test_mutator_returns_self(self, method, args):
        """Every mutator returns the receiver."""
        url = Url.create(SOURCE)
        assert getattr(url, method)(*args) is url

    def test_chained_calls_share_state(self):
        """Chained edits accumulate on the same object."""
        url = Url.create("https://example.com/catalog/")
        url.set_query("page", "2").push("shoes").set_port(8443)
        assert str(url) == "https://example.com:8443/catalog/shoes/?page=2"

    def test_components_edited_in_place(self):
        """The record passed to the constructor is the one edited."""
        parts = UrlComponents(scheme="https", host="example.com", path="/a")
        url = Url(parts)
        url.push("more")
        assert parts.path == "/a/more/"
        assert url.get_path() == "/a/more/"

    def test_unhashable(self):
        """Mutable URLs cannot be dict keys."""
        with pytest.raises(TypeError):
            hash(Url.create(SOURCE))

    def test_to_immutable(self):
        """Conversion copies the components."""
        url = Url.create(SOURCE)
        frozen = url.to_immutable()
        assert isinstance(frozen, UrlImmutable)
        url.set_host("changed.tld")
        assert frozen.get_host() == "domain.tld"
        assert str(frozen) == SOURCE


class TestUrlImmutable:
    """Test the immutable variant."""

    @pytest.mark.parametrize("method, args", MUTATORS)
    def test_mutator_returns_new_instance(self, method, args):
        """Every mutator returns a different object and leaves the receiver alone."""
        url = UrlImmutable.create(SOURCE)
        result = getattr(url, method)(*args)
        assert result is not url
        assert isinstance(result, UrlImmutable)
        assert str(url) == SOURCE
        assert url.get_scheme() == "https"
        assert url.get_host() == "domain.tld"
        assert url.get_port() == 8080
        assert url.get_path() == "/path/to/page"
        assert url.get_query("a") == "1"

    def test_derived_values(self):
        """The new instance carries the edit."""
        base = UrlImmutable.create("https://example.com/catalog/")
        page = base.set_query("page", "2")
        assert str(base) == "https://example.com/catalog/"
        assert str(page) == "https://example.com/catalog/?page=2"

    def test_branching(self):
        """Two edits from the same base do not interfere."""
        base = UrlImmutable.create("https://example.com/a/")
        left = base.push("left")
        right = base.push("right")
        assert left.get_path() == "/a/left/"
        assert right.get_path() == "/a/right/"
        assert base.get_path() == "/a/"

    def test_subclass_preserved(self):
        """Mutators return instances of the receiver's class."""

        class MyUrl(UrlImmutable):
            __slots__ = ()

        result = MyUrl.create(SOURCE).push("x")
        assert type(result) is MyUrl

    def test_hashable(self):
        """Equal immutable URLs hash the same and work as dict keys."""
        a = UrlImmutable.create(SOURCE)
        b = UrlImmutable.create(SOURCE)
        assert hash(a) == hash(b)
        assert {a: "value"}[b] == "value"

    def test_to_mutable(self):
        """Conversion copies the components."""
        frozen = UrlImmutable.create(SOURCE)
        url = frozen.to_mutable()
        assert isinstance(url, Url)
        url.set_host("changed.tld")
        assert frozen.get_host() == "domain.tld"

    def test_constructor_record_not_edited(self):
        """The record passed to the constructor is left alone."""
        parts = UrlComponents(scheme="https", host="example.com", path="/a")
        url = UrlImmutable(parts)
        url.push("more")
        assert parts.path == "/a"

    def test_constructor_record_copied(self):
        """Later changes to the given record do not reach the instance."""
        parts = UrlComponents(scheme="https", host="example.com", path="/a")
        url = UrlImmutable(parts)
        before = hash(url)
        parts.path = "/changed"
        parts.host = "other.org"
        assert url.get_path() == "/a"
        assert str(url) == "https://example.com/a"
        assert hash(url) == before
