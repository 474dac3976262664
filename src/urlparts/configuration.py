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

"""urlparts configuration: per-call parse options and the optional config
file read by the command line tool"""

import configparser
import dataclasses
import os.path
import pathlib
import re
from typing import Dict, FrozenSet, Iterable, Optional, TextIO, Union

from .exceptions import ConfigError
from .util.suffixes import (PublicSuffixResolver, StaticSuffixResolver,
                            TLDExtractResolver)


@dataclasses.dataclass(frozen=True)
class ParseOptions:
    """Options for :func:`urlparts.get_parsed_url` and friends

    :param authorized_non_standard_domains: Hostnames without a public suffix
        (intranet names and the like) that should still count as valid hosts.
        Such a hostname is reported as its own full domain, root domain, and
        root domain name. Matching is case-insensitive.
    """

    authorized_non_standard_domains: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(
            self, 'authorized_non_standard_domains',
            frozenset(d.lower() for d in self.authorized_non_standard_domains)
        )

    def is_authorized(self, hostname: str) -> bool:
        """Check whether a hostname is one of the authorized non-standard
        domains"""
        return hostname.lower() in self.authorized_non_standard_domains


_OPTIONS = {'authorized_domains', 'private_domains', 'suffix_list', 'datadir'}
_LIST_SPLIT_RE = re.compile(r'[\s,]+')


class Config:
    """urlparts configuration data, from the ``[urlparts]`` section of a
    config file

    :param main: The options in the ``[urlparts]`` section
    :raises ConfigError: if an option is unknown or has an invalid value
    """

    def __init__(self, main: Dict[str, str]):
        #: Dict containing the raw ``[urlparts]`` options
        self.main: Dict[str, str] = main

        for key in self.main:
            if key not in _OPTIONS:
                raise ConfigError("Unknown config option %s" % key)

        try:
            self.private_domains: bool = _parse_bool(
                self.main.get('private_domains', 'false')
            )
        except ValueError:
            raise ConfigError("Config option 'private_domains' must be a "
                              "boolean") from None

        self.datadir: Optional[str] = self.main.get('datadir') or None
        if self.datadir is not None and not os.path.isabs(self.datadir):
            raise ConfigError("Config option 'datadir' cannot be a relative "
                              "path")

        self.suffix_list: Optional[str] = self.main.get('suffix_list') or None

        #: The :class:`ParseOptions` to parse URLs with
        self.options = ParseOptions(frozenset(
            _split_list(self.main.get('authorized_domains', ''))
        ))

    def make_resolver(self) -> PublicSuffixResolver:
        """Create the public suffix resolver this configuration asks for

        :raises ResolverSetupError: if the resolver could not be created
        """
        if self.suffix_list is not None:
            return StaticSuffixResolver.from_file(self.suffix_list)
        return TLDExtractResolver(
            datadir=self.datadir,
            include_private_domains=self.private_domains,
        )


def _parse_bool(value: str) -> bool:
    value = value.strip().lower()
    if value in ('true', 'yes', 'on', '1'):
        return True
    if value in ('false', 'no', 'off', '0'):
        return False
    raise ValueError(value)


def _split_list(value: str) -> Iterable[str]:
    return [item for item in _LIST_SPLIT_RE.split(value) if item]


def _process_config(config: configparser.ConfigParser) -> Config:
    """Process the given :class:`~configparser.ConfigParser` into a
    :class:`Config`

    :param config: The configuration to process
    :raises ConfigError: if the configuration is invalid
    :returns: the processed and validated configuration
    """
    main: Dict[str, str] = dict()
    for section in config.sections():
        if section == 'urlparts':
            main.update(config[section])
        else:
            raise ConfigError("Config section %s is not a urlparts section"
                              % section)
    return Config(main)


def read_file_from_path(filename: Union[str, pathlib.Path]) -> Config:
    """Read configuration from the named file or :class:`~pathlib.Path`

    :param filename: Filename or path to read from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    try:
        with open(filename, 'r') as f:
            return read_file(f)
    except OSError as e:
        raise ConfigError("Could not read config file %s: %s" %
                          (filename, e.strerror)) from e


def read_file(configfile: TextIO) -> Config:
    """Read configuration in from a file-like object

    :param configfile: Filelike object to read the config from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    config = configparser.ConfigParser()
    try:
        config.read_file(configfile)
    except configparser.Error as e:
        raise ConfigError("Error in config file: %s" % e) from e
    except OSError as e:
        raise ConfigError("Could not read config file: %s" % e.strerror) \
            from e

    return _process_config(config)
