# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""genro-url - Fluent URL manipulation, mutable and immutable.

Main components:
    Url: Mutable URL, mutators return the same instance
    UrlImmutable: Immutable URL, mutators return a new instance
    UrlComponents: Parsed URL parts (scheme, host, port, path, query, ...)

Helpers:
    parse_url / build_url: split and join URL strings
    parse_query / build_query / merge_query: query string round trip
    split_segments / join_segments: path segment handling

Usage:
    from genro_url import Url

    url = Url.create("https://domain.tld:8080/path/to/page")
    url.set_query("page", "2").push("next")
    print(url)  # https://domain.tld:8080/path/to/page/next/?page=2
"""

__version__ = "0.1.0"

from .components import UrlComponents, build_url, parse_url
from .exceptions import UrlParseError
from .path import FILE_SUFFIXES, join_segments, split_segments
from .query import build_query, merge_query, parse_query
from .url import BaseUrl, Url, UrlImmutable

__all__ = [
    # URL classes
    "BaseUrl",
    "Url",
    "UrlImmutable",
    # Components
    "UrlComponents",
    "parse_url",
    "build_url",
    # Query
    "parse_query",
    "build_query",
    "merge_query",
    # Path
    "FILE_SUFFIXES",
    "split_segments",
    "join_segments",
    # Exceptions
    "UrlParseError",
]
