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

"""Extraction of domains, paths, and fragments from URL-like strings

Every function here accepts any string, or ``None``, and never raises.
Missing parts come back as ``None``.
"""

import dataclasses
from typing import Optional

from .authority import (find_used_protocol, url_contains_protocol,
                        omit_credentials_from_url, omit_query_string_from_url,
                        split_authority)
from .configuration import ParseOptions
from .domains import decompose, has_registrable_domain
from .hosts import HostClass, classify
from .protocols import match_known_protocol
from .util.suffixes import PublicSuffixResolver, default_resolver

__all__ = [
    "ParsedUrl",
    "extract_full_filepath_from_url",
    "extract_filepath_from_url",
    "extract_full_domain",
    "extract_naked_domain",
    "extract_root_domain",
    "extract_root_domain_name",
    "extract_sub_domain_name",
    "extract_url_hash",
    "is_url_with_ipv4",
    "is_url_with_ipv6",
    "is_url_with_ip",
    "is_url_with_domain",
    "is_url",
    "find_used_protocol",
    "url_contains_protocol",
    "omit_query_string_from_url",
    "omit_credentials_from_url",
    "get_parsed_url",
]


@dataclasses.dataclass(frozen=True)
class ParsedUrl:
    """Everything :func:`get_parsed_url` extracts from a URL"""

    #: The URL, exactly as given
    url: Optional[str]
    #: Hostname including subdomains, e.g. ``www.example.co.uk``
    full_domain: Optional[str] = None
    #: Registrable domain, e.g. ``example.co.uk``
    root_domain: Optional[str] = None
    #: Registrable domain without public suffix, e.g. ``example``
    root_domain_name: Optional[str] = None
    #: Labels in front of the root domain, never ``www``
    sub_domain_name: Optional[str] = None
    #: Text after the first ``#``
    url_hash: Optional[str] = None
    #: Scheme prefix including ``://``
    protocol: Optional[str] = None
    #: What kind of host the URL points to
    host_class: Optional[HostClass] = None


def _hostname(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    return split_authority(url).hostname or None


def extract_full_filepath_from_url(url: Optional[str]) -> Optional[str]:
    """Return everything after the host: path, query string, and fragment

    Only URLs starting with one of the
    :data:`~urlparts.protocols.KNOWN_PROTOCOLS` are stripped. Anything else,
    including URLs with an unknown scheme, is returned unchanged, since it
    may already be a path.

    >>> extract_full_filepath_from_url('http://x.com/a?b=1#c')
    '/a?b=1#c'
    """
    if not url:
        return None
    protocol = match_known_protocol(url)
    if protocol is None:
        return url
    rest = url[len(protocol):]
    for index, char in enumerate(rest):
        if char in '/?#':
            return rest[index:]
    return None


def extract_filepath_from_url(url: Optional[str]) -> Optional[str]:
    """Like :func:`extract_full_filepath_from_url`, but without the query
    string"""
    path = extract_full_filepath_from_url(url)
    if path is None:
        return None
    return path.partition('?')[0] or None


def extract_full_domain(url: Optional[str]) -> Optional[str]:
    """Return the hostname, including subdomains, without port or
    credentials. IP addresses and ``localhost`` are returned as-is."""
    return _hostname(url)


def extract_naked_domain(url: Optional[str]) -> Optional[str]:
    """Return the full domain with a leading ``www.`` removed. Other labels
    that merely start with ``www`` (like ``www2``) are kept."""
    domain = _hostname(url)
    if domain is not None and domain[:4].lower() == 'www.':
        domain = domain[len('www.'):]
    return domain or None


def extract_root_domain(
    url: Optional[str],
    resolver: Optional[PublicSuffixResolver] = None,
) -> Optional[str]:
    """Return the registrable domain, e.g. ``example.co.uk``. IP addresses
    and ``localhost`` are returned as-is."""
    hostname = _hostname(url)
    if hostname is None:
        return None
    if classify(hostname) is not HostClass.NAME:
        return hostname
    return decompose(hostname, resolver).root_domain


def extract_root_domain_name(
    url: Optional[str],
    resolver: Optional[PublicSuffixResolver] = None,
) -> Optional[str]:
    """Return the registrable domain without its public suffix, e.g.
    ``example``. IP addresses and ``localhost`` are returned as-is."""
    hostname = _hostname(url)
    if hostname is None:
        return None
    if classify(hostname) is not HostClass.NAME:
        return hostname
    return decompose(hostname, resolver).root_domain_name


def extract_sub_domain_name(
    url: Optional[str],
    resolver: Optional[PublicSuffixResolver] = None,
) -> Optional[str]:
    """Return the labels in front of the root domain. ``None`` if there are
    none, if they are just ``www``, or if the host is an IP address or
    ``localhost``."""
    hostname = _hostname(url)
    if hostname is None:
        return None
    if classify(hostname) is not HostClass.NAME:
        return None
    return decompose(hostname, resolver).subdomain


def extract_url_hash(url: Optional[str]) -> Optional[str]:
    """Return the text after the first ``#``. ``None`` if there is no ``#``,
    empty string if nothing follows it."""
    if not url:
        return None
    _, sep, fragment = url.partition('#')
    if not sep:
        return None
    return fragment


def is_url_with_ipv4(url: Optional[str]) -> bool:
    return classify(_hostname(url)) is HostClass.IPV4


def is_url_with_ipv6(url: Optional[str]) -> bool:
    return classify(_hostname(url)) is HostClass.IPV6


def is_url_with_ip(url: Optional[str]) -> bool:
    return classify(_hostname(url)) in (HostClass.IPV4, HostClass.IPV6)


def is_url_with_domain(url: Optional[str],
                       options: Optional[ParseOptions] = None) -> bool:
    """Check whether the URL's host is a domain name with a root domain,
    or one of the authorized non-standard domains in ``options``"""
    hostname = _hostname(url)
    if hostname is None or classify(hostname) is not HostClass.NAME:
        return False
    if options is not None and options.is_authorized(hostname):
        return True
    return has_registrable_domain(hostname)


def is_url(url: Optional[str], options: Optional[ParseOptions] = None) -> bool:
    """Check whether the string points to a domain, an IP address, or
    ``localhost``"""
    return (is_url_with_domain(url, options) or is_url_with_ip(url) or
            classify(_hostname(url)) is HostClass.LOCALHOST)


def get_parsed_url(
    url: Optional[str],
    options: Optional[ParseOptions] = None,
    resolver: Optional[PublicSuffixResolver] = None,
) -> ParsedUrl:
    """Parse a URL once and return all of its parts

    :param url: The URL to parse
    :param options: :class:`~urlparts.ParseOptions`. Hostnames listed in its
                    ``authorized_non_standard_domains`` that have no public
                    suffix are reported as their own root domain.
    :param resolver: The public suffix resolver to use. Defaults to
                     :func:`~urlparts.util.default_resolver`.
    :return: A :class:`ParsedUrl`
    """
    if not url:
        return ParsedUrl(url)

    authority = split_authority(url)
    url_hash = extract_url_hash(url)
    hostname = authority.hostname
    if not hostname:
        return ParsedUrl(url, url_hash=url_hash, protocol=authority.protocol)

    host_class = classify(hostname)
    if host_class is not HostClass.NAME:
        return ParsedUrl(url, hostname, hostname, hostname, None, url_hash,
                         authority.protocol, host_class)

    if resolver is None:
        resolver = default_resolver()
    if (options is not None and options.is_authorized(hostname) and
            resolver.longest_public_suffix(hostname) is None):
        return ParsedUrl(url, hostname, hostname, hostname, None, url_hash,
                         authority.protocol, host_class)

    parts = decompose(hostname, resolver)
    return ParsedUrl(url, hostname, parts.root_domain, parts.root_domain_name,
                     parts.subdomain, url_hash, authority.protocol, host_class)
