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

"""urlparts: split URL-like strings into protocol, domains, path, query
string, and fragment

Top-level module, containing the URL parsing functions and the classes needed
to customize them.
"""

from .authority import Authority, split_authority
from .configuration import Config, ParseOptions, read_file, read_file_from_path
from .domains import DomainParts, decompose
from .exceptions import (UrlPartsException, UrlPartsSetupError, ConfigError,
                         ResolverSetupError)
from .hosts import HostClass, classify
from .parser import (ParsedUrl, extract_full_filepath_from_url,
                     extract_filepath_from_url, extract_full_domain,
                     extract_naked_domain, extract_root_domain,
                     extract_root_domain_name, extract_sub_domain_name,
                     extract_url_hash, is_url_with_ipv4, is_url_with_ipv6,
                     is_url_with_ip, is_url_with_domain, is_url,
                     find_used_protocol, url_contains_protocol,
                     omit_query_string_from_url, omit_credentials_from_url,
                     get_parsed_url)
from .util import (PublicSuffixResolver, TLDExtractResolver,
                   StaticSuffixResolver, default_resolver)
