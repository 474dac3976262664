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

"""Classification of hostnames as IPv4 addresses, IPv6 addresses, localhost,
or domain names

Classification looks only at the hostname string itself. It never looks at
the rest of the URL the hostname came from.
"""

import enum
import re
from typing import Optional

_DECIMAL_RE = re.compile(r'[0-9]+')
_HEX_RE = re.compile(r'[0-9A-Fa-f]*')


class HostClass(enum.Enum):
    """The kind of host a hostname refers to"""

    IPV4 = 'ipv4'
    IPV6 = 'ipv6'
    LOCALHOST = 'localhost'
    NAME = 'name'


def is_ipv4(hostname: Optional[str]) -> bool:
    """Check whether a hostname is a dotted-quad IPv4 address

    The hostname must have exactly four parts, each of them a decimal number
    from 0 to 255. A hostname like ``54.77.248.115.google.com`` has numeric
    labels but is a domain name, not an address.

    :param hostname: The hostname to check
    :return: ``True`` if it is an IPv4 address
    """
    if not hostname:
        return False
    parts = hostname.split('.')
    if len(parts) != 4:
        return False
    return all(_DECIMAL_RE.fullmatch(part) and int(part, 10) <= 255
               for part in parts)


def is_ipv6(hostname: Optional[str]) -> bool:
    """Check whether a hostname is an IPv6 address, with or without the
    surrounding brackets used in URLs

    The address must have between 4 and 8 labels. Empty labels (from ``::``
    compression) count as zero. Every label must be hexadecimal and no
    greater than ``0xFFFF``.

    :param hostname: The hostname to check
    :return: ``True`` if it is an IPv6 address
    """
    if not hostname:
        return False
    if hostname.startswith('[') and hostname.endswith(']'):
        hostname = hostname[1:-1]
    labels = hostname.split(':')
    if not 4 <= len(labels) <= 8:
        return False
    for label in labels:
        if not _HEX_RE.fullmatch(label):
            return False
        if int(label or '0', 16) > 0xFFFF:
            return False
    return True


def is_localhost(hostname: Optional[str]) -> bool:
    """Check whether a hostname is literally ``localhost``"""
    return hostname == 'localhost'


def classify(hostname: Optional[str]) -> HostClass:
    """Determine what kind of host a hostname is

    Anything that is not an IP address or ``localhost`` is a
    :attr:`HostClass.NAME`, including empty hostnames and names with no
    recognizable public suffix.

    :param hostname: The hostname to classify
    :return: The :class:`HostClass`
    """
    if is_ipv4(hostname):
        return HostClass.IPV4
    if is_ipv6(hostname):
        return HostClass.IPV6
    if is_localhost(hostname):
        return HostClass.LOCALHOST
    return HostClass.NAME
