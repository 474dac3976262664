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

"""Splitting domain names into subdomain, root domain, and root domain name"""

import logging
from typing import NamedTuple, Optional

from .util.suffixes import PublicSuffixResolver, default_resolver

log = logging.getLogger('urlparts')


class DomainParts(NamedTuple):
    """A domain name split at its registrable ("root") domain"""

    #: Labels in front of the root domain, or ``None`` if there are none or
    #: they are just ``www``
    subdomain: Optional[str]
    #: The registrable domain, e.g. ``example.co.uk``
    root_domain: str
    #: The root domain without its public suffix, e.g. ``example``, or
    #: ``None`` if that label is empty
    root_domain_name: Optional[str]
    #: The public suffix, e.g. ``co.uk``, or ``None`` if the unlisted-suffix
    #: fallback was used
    suffix: Optional[str]


def _subdomain(labels) -> Optional[str]:
    subdomain = '.'.join(labels)
    if subdomain == '' or subdomain.lower() == 'www':
        return None
    return subdomain


def decompose(hostname: str,
              resolver: Optional[PublicSuffixResolver] = None) -> DomainParts:
    """Split a domain name into subdomain, root domain, and root domain name

    The root domain is the longest public suffix matching the hostname plus
    one more label. For example, ``www.domain3.co.uk`` has the suffix
    ``co.uk``, so the root domain is ``domain3.co.uk``, the root domain name
    is ``domain3``, and there is no subdomain (``www`` does not count).

    Two fallbacks apply when that does not work:

    - *Unlisted-suffix fallback*: no public suffix matches (e.g. intranet
      names like ``url-without-extension``). The last two labels are the root
      domain, or the whole hostname if it has two labels or fewer.
    - *Bare-suffix host*: the hostname is itself a public suffix (e.g.
      ``co.uk``). The whole hostname is the root domain.

    In both cases the root domain name is the first label of the root domain.

    A trailing dot (absolute domain name, e.g. ``www.example.com.``) is
    ignored for the lookup and kept on the root domain, so the root domain is
    still a suffix of the hostname.

    Only call this for hostnames that :func:`urlparts.hosts.classify` reports
    as :attr:`~urlparts.hosts.HostClass.NAME`.

    :param hostname: The domain name to split
    :param resolver: The :class:`PublicSuffixResolver` to use. Defaults to
                     :func:`default_resolver`.
    :return: A :class:`DomainParts`
    """
    if resolver is None:
        resolver = default_resolver()
    root_dot = ''
    name = hostname
    if name.endswith('.') and name != '.':
        name = name[:-1]
        root_dot = '.'
    labels = name.split('.')
    suffix = resolver.longest_public_suffix(name)

    if suffix is None:
        log.debug("No public suffix for %s, using last two labels as root "
                  "domain", hostname)
        root_labels = labels[-2:]
        return DomainParts(_subdomain(labels[:-2]),
                           '.'.join(root_labels) + root_dot,
                           root_labels[0] or None, None)

    suffix_len = len(suffix.split('.'))
    if len(labels) <= suffix_len:
        log.debug("%s is a bare public suffix, using it as root domain",
                  hostname)
        return DomainParts(None, hostname, labels[0] or None, suffix)

    root_start = len(labels) - suffix_len - 1
    return DomainParts(_subdomain(labels[:root_start]),
                       '.'.join(labels[root_start:]) + root_dot,
                       labels[root_start] or None,
                       suffix)


def has_registrable_domain(hostname: Optional[str]) -> bool:
    """Check whether a domain name has enough labels to have a root domain:
    at least two, none of them empty. A trailing dot is allowed."""
    if not hostname:
        return False
    if hostname.endswith('.'):
        hostname = hostname[:-1]
    labels = hostname.split('.')
    return len(labels) >= 2 and all(labels)
