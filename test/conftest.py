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

import pytest

import doubles
import urlparts


#: Suffixes used by tests that should not depend on the bundled Public Suffix
#: List snapshot
TEST_SUFFIXES = [
    'com',
    'net',
    'org',
    'uk',
    'co.uk',
    'gov.uk',
    'judiciary.uk',
    'ca',
    'qc.ca',
    'us',
    'k12.ma.us',
    'pvt.k12.ma.us',
]


@pytest.fixture
def static_resolver():
    """Fixture creating a :class:`~urlparts.StaticSuffixResolver` over a
    small fixed table"""
    return urlparts.StaticSuffixResolver(TEST_SUFFIXES)


@pytest.fixture
def recording_resolver():
    """Fixture creating a resolver that records its lookups"""
    return doubles.RecordingResolver(TEST_SUFFIXES)


@pytest.fixture
def suffix_file_factory(tmp_path):
    """Fixture creating a factory for temporary suffix list files"""
    count = 0

    def factory(contents: str):
        nonlocal count
        count += 1
        path = tmp_path / f"suffixes_{count}.dat"
        with open(path, "w") as f:
            for line in contents.splitlines():
                print(line.strip(), file=f)
        return path
    return factory
