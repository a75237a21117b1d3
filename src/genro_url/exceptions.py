# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for genro-url.

Parsing is lenient by default: malformed input degrades to an empty
component set and nothing is raised. Callers that want to know about the
failure pass ``strict=True`` and get a ``UrlParseError`` instead.

UrlParseError
-------------
Raised by ``parse_url(..., strict=True)`` and ``Url.create(..., strict=True)``
when ``urllib.parse`` rejects the input (unbalanced IPv6 brackets,
non-numeric or out-of-range port).

Attributes:
    url (str): The rejected input.
    reason (str): Message of the underlying ``ValueError``.

Example:
    >>> try:
    ...     Url.create("http://host:99999/", strict=True)
    ... except UrlParseError as e:
    ...     print(e.url, e.reason)

Inherits from ``ValueError`` so code already catching ``urllib`` errors keeps
working.
"""

__all__ = ["UrlParseError"]


class UrlParseError(ValueError):
    """
    URL string that could not be split into components.

    Attributes:
        url: The input that failed to parse.
        reason: Why it failed.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        """
        Initialize parse error.

        Args:
            url: The input that failed to parse.
            reason: Why it failed (default: "").
        """
        self.url = url
        self.reason = reason
        super().__init__(f"Cannot parse URL {url!r}: {reason}" if reason else f"Cannot parse URL {url!r}")

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"UrlParseError(url={self.url!r}, reason={self.reason!r})"
