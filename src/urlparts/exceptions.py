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

"""All urlparts exceptions

None of the URL parsing functions raise. These are only raised while setting
up a resolver or reading configuration.
"""


class UrlPartsException(Exception):
    """Base class for all urlparts exceptions"""


class UrlPartsSetupError(UrlPartsException):
    """Base class for urlparts exceptions that happen during setup"""


class ConfigError(UrlPartsSetupError):
    """Raised when the configuration is malformed or has other errors"""


class ResolverSetupError(UrlPartsSetupError):
    """Raised when a public suffix resolver cannot be created, for example
    because its cache directory or suffix list file is unusable"""
