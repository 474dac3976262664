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

"""Table of URL protocols recognized when stripping a URL down to its path"""

import re
from typing import Optional, Tuple

#: Protocol prefixes, checked in order
KNOWN_PROTOCOLS: Tuple[str, ...] = (
    'http://',
    'https://',
    'ftp://',
    'file://',
    'afp://',
    'smb://',
)

#: Any scheme followed by ``://`` (RFC 3986 scheme grammar)
SCHEME_RE = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*://')


def match_known_protocol(url: str) -> Optional[str]:
    """Return the entry of :data:`KNOWN_PROTOCOLS` that the URL begins with

    :param url: The URL to check
    :return: The matching protocol prefix (e.g. ``'https://'``), or ``None``
    """
    for protocol in KNOWN_PROTOCOLS:
        if url.startswith(protocol):
            return protocol
    return None
