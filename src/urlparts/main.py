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

import argparse
import json
import logging
import sys

from . import configuration, parser
from .exceptions import ConfigError, ResolverSetupError
from .util import default_resolver


def parse_args(argv):
    """Parse command line arguments

    :param argv: Either ``None`` or a list of arguments
    :returns: a :class:`argparse.Namespace` containing the parsed arguments
    """
    arg_parser = argparse.ArgumentParser(
        description="Split URLs into protocol, domains, and fragment",
    )
    arg_parser.add_argument("-c", "--configfile", default=None,
                            help="Path to a config file")
    arg_parser.add_argument("-d", "--debug-logs", action="store_true",
                            help="Increase verbosity of logging "
                                 "significantly")
    arg_parser.add_argument("-j", "--json", action="store_true",
                            help="Print one JSON object per URL")
    arg_parser.add_argument("urls", metavar="URL", nargs="+",
                            help="URL to parse")
    return arg_parser.parse_args(argv)


def _as_dict(parsed: parser.ParsedUrl):
    fields = {
        "url": parsed.url,
        "protocol": parsed.protocol,
        "host_class": (parsed.host_class.value
                       if parsed.host_class is not None else None),
        "full_domain": parsed.full_domain,
        "root_domain": parsed.root_domain,
        "root_domain_name": parsed.root_domain_name,
        "sub_domain_name": parsed.sub_domain_name,
        "url_hash": parsed.url_hash,
    }
    return fields


def main(argv=None):
    """Main entry point when run as a standalone program

    :param argv: List of arguments. If ``None``, read :data:`sys.argv`.
    """
    args = parse_args(argv)

    log = logging.getLogger('urlparts')
    log.addHandler(logging.StreamHandler())
    if args.debug_logs:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.INFO)

    options = None
    if args.configfile is not None:
        try:
            conf = configuration.read_file_from_path(args.configfile)
        except ConfigError as e:
            print("Config error:", e, file=sys.stderr)
            sys.exit(2)
        options = conf.options
        try:
            resolver = conf.make_resolver()
        except ResolverSetupError as e:
            log.critical("Could not set up public suffix resolver: %s", e)
            sys.exit(1)
    else:
        resolver = default_resolver()

    for url in args.urls:
        fields = _as_dict(parser.get_parsed_url(url, options, resolver))
        if args.json:
            print(json.dumps(fields))
            continue
        for name, value in fields.items():
            print(f"{name}: {'' if value is None else value}")
        print()
