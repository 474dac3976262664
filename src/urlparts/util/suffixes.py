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

"""Public suffix resolvers: find the longest public suffix of a hostname
using the `Public Suffix List`_

.. _Public Suffix List: https://publicsuffix.org/
"""

import logging
import os
import os.path
import pathlib
import threading
from typing import FrozenSet, Iterable, Optional, Protocol, Sequence, Union

import tldextract

from ..exceptions import ResolverSetupError

log = logging.getLogger('urlparts')


class PublicSuffixResolver(Protocol):
    """Anything that can look up the public suffix of a hostname"""

    def longest_public_suffix(self, hostname: str) -> Optional[str]:
        """Return the longest public suffix matching the hostname

        :param hostname: A domain name (not an IP address)
        :return: The suffix, e.g. ``'co.uk'``, or ``None`` if no known suffix
                 matches
        """
        ...


class TLDExtractResolver:
    """A resolver backed by :mod:`tldextract`

    By default, the snapshot of the Public Suffix List that ships with
    tldextract is used and nothing is fetched over the network.

    :param datadir: Directory to cache downloaded suffix lists in. If
                    ``None``, nothing is cached.
    :param suffix_list_urls: URLs to fetch the suffix list from. If empty,
                             the bundled snapshot is used.
    :param include_private_domains: Whether to use the private section of
                                    the list (e.g. ``blogspot.com``)
    :raises ResolverSetupError: if the cache directory could not be created
    """

    def __init__(self,
                 datadir: Optional[str] = None,
                 suffix_list_urls: Sequence[str] = (),
                 include_private_domains: bool = False):
        cache_dir: Optional[str] = None
        if datadir is not None:
            cache_dir = os.path.join(datadir, 'tldextract')
            try:
                os.makedirs(cache_dir, exist_ok=True)
            except OSError as e:
                raise ResolverSetupError("Could not create suffix list cache "
                                         "directory %s: %s" %
                                         (cache_dir, e.strerror)) from e
        self._extract_func = tldextract.TLDExtract(
            cache_dir=cache_dir,
            suffix_list_urls=tuple(suffix_list_urls),
            include_psl_private_domains=include_private_domains,
        )
        log.info("Using tldextract public suffix resolver (%s, private "
                 "domains %s)",
                 "bundled snapshot" if not suffix_list_urls else
                 ", ".join(suffix_list_urls),
                 "included" if include_private_domains else "excluded")

    def longest_public_suffix(self, hostname: str) -> Optional[str]:
        result = self._extract_func(hostname)
        return result.suffix or None


class StaticSuffixResolver:
    """A resolver over a fixed table of suffixes

    The longest matching suffix wins, so ``co.uk`` is preferred over ``uk``
    when both are in the table. Matching is case-insensitive.

    :param suffixes: The public suffixes, without leading dots
    """

    def __init__(self, suffixes: Iterable[str]):
        self.suffixes: FrozenSet[str] = frozenset(
            s.strip().strip('.').lower() for s in suffixes if s.strip()
        )

    @classmethod
    def from_file(
        cls, filename: Union[str, pathlib.Path]
    ) -> 'StaticSuffixResolver':
        """Load the table from a file in Public Suffix List format

        Blank lines and ``//`` comments are skipped. Wildcard (``*.``) and
        exception (``!``) rules are not supported and are skipped too.

        :param filename: Path to the file
        :raises ResolverSetupError: if the file could not be read
        """
        suffixes = []
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for line in f:
                    rule = line.strip()
                    if not rule or rule.startswith('//'):
                        continue
                    if rule.startswith(('*', '!')):
                        log.debug("Skipping unsupported suffix rule %s", rule)
                        continue
                    suffixes.append(rule)
        except OSError as e:
            raise ResolverSetupError("Could not read suffix list %s: %s" %
                                     (filename, e.strerror)) from e
        log.info("Loaded %d public suffixes from %s", len(suffixes), filename)
        return cls(suffixes)

    def longest_public_suffix(self, hostname: str) -> Optional[str]:
        labels = hostname.lower().split('.')
        for i in range(len(labels)):
            candidate = '.'.join(labels[i:])
            if candidate in self.suffixes:
                return candidate
        return None


_default_resolver: Optional[TLDExtractResolver] = None
_default_resolver_lock = threading.Lock()


def default_resolver() -> TLDExtractResolver:
    """Return the shared resolver used when none is passed explicitly

    It is created on first use from tldextract's bundled snapshot and is
    never modified afterward, so it is safe to share between threads.
    """
    global _default_resolver
    with _default_resolver_lock:
        if _default_resolver is None:
            _default_resolver = TLDExtractResolver()
        return _default_resolver
