#  urlparts - Decomposition of URLs into domains, paths and fragments
#  Copyright (C) 2023 Dominick C. Pastore
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Tools for isolating the authority (host and port) part of a URL-like
string, and for stripping credentials and query strings from it"""

import re
from typing import NamedTuple, Optional

from .protocols import SCHEME_RE

_PORT_RE = re.compile(r'[0-9]*')


class Authority(NamedTuple):
    """The parts of a URL that identify the host"""

    #: Scheme prefix including ``://``, or ``None`` if there was none
    protocol: Optional[str]
    #: Hostname with credentials and port removed. IPv6 addresses keep their
    #: brackets. May be empty.
    hostname: str
    #: Port number as a string, or ``None`` if there was none
    port: Optional[str]


def find_used_protocol(url: Optional[str]) -> Optional[str]:
    """Return the scheme prefix the URL begins with, including the ``://``

    Any scheme is accepted, but it must be followed by exactly ``://``.
    Look-alikes such as ``http:/example.com`` or ``http//example.com`` are
    not matched.

    :param url: The URL to check
    :return: The scheme prefix (e.g. ``'https://'``) or ``None``
    """
    if not url:
        return None
    match = SCHEME_RE.match(url)
    if match is None:
        return None
    return match.group(0)


def url_contains_protocol(url: Optional[str]) -> bool:
    """Check whether the URL begins with a scheme and ``://``"""
    return find_used_protocol(url) is not None


def _authority_bounds(url: str, protocol: Optional[str]):
    """Find where the authority starts and ends in a URL

    :return: A tuple ``(start, end)`` of indices into ``url``
    """
    start = len(protocol) if protocol else 0
    end = len(url)
    for delimiter in '/?#':
        index = url.find(delimiter, start)
        if index != -1:
            end = min(end, index)
    return start, end


def split_authority(url: str) -> Authority:
    """Split the host, port, and protocol out of a URL-like string

    A string with no protocol is treated as starting with the authority. The
    authority ends at the first ``/``, ``?``, or ``#``. Credentials (anything
    up to the last ``@``) are dropped.

    The port is only removed in two cases, so that IPv6 addresses are never
    cut apart:

    - the host is a bracketed IPv6 address and ``:<digits>`` follows the
      closing bracket
    - the authority contains exactly one ``:`` and only digits follow it

    :param url: The URL to split
    :return: An :class:`Authority`
    """
    protocol = find_used_protocol(url)
    start, end = _authority_bounds(url, protocol)
    authority = url[start:end].rpartition('@')[2]

    if authority.startswith('['):
        close = authority.find(']')
        if close != -1:
            hostname = authority[:close + 1]
            rest = authority[close + 1:]
            port = None
            if rest.startswith(':') and _PORT_RE.fullmatch(rest[1:]):
                port = rest[1:] or None
            return Authority(protocol, hostname, port)

    segments = authority.split(':')
    if len(segments) == 2 and _PORT_RE.fullmatch(segments[1]):
        return Authority(protocol, segments[0], segments[1] or None)
    return Authority(protocol, authority, None)


def omit_credentials_from_url(url: Optional[str]) -> Optional[str]:
    """Remove ``user:password@`` from a URL

    Only an ``@`` inside the authority counts. One that appears later, in the
    path or query string, is left alone.

    :param url: The URL to strip
    :return: The URL without credentials, the URL unchanged if it has none,
             or ``None`` if the URL is empty
    """
    if not url:
        return None
    protocol = find_used_protocol(url)
    start, end = _authority_bounds(url, protocol)
    at = url.find('@', start, end)
    if at == -1:
        return url
    return (protocol or '') + url[at + 1:]


def omit_query_string_from_url(url: Optional[str]) -> Optional[str]:
    """Truncate a URL at the first ``?``

    :param url: The URL to strip
    :return: The URL without its query string, or ``None`` if the URL is
             empty
    """
    if not url:
        return None
    return url.partition('?')[0]
