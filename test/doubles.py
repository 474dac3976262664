"""Test doubles for use in test classes and fixtures"""
import errno
from typing import List, Optional

import urlparts


class BrokenFile:
    """File-like object that raises an exception when being read from"""
    def __iter__(self):
        raise OSError(errno.ETIMEDOUT, "timeout")

    def readline(self, *_):
        raise OSError(errno.ETIMEDOUT, "timeout")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


class RecordingResolver(urlparts.StaticSuffixResolver):
    """Static suffix resolver that keeps a list of the hostnames it was asked
    about"""

    def __init__(self, suffixes):
        super().__init__(suffixes)
        self.lookups: List[str] = []

    def longest_public_suffix(self, hostname: str) -> Optional[str]:
        self.lookups.append(hostname)
        return super().longest_public_suffix(hostname)


class UppercaseResolver:
    """Resolver that hands back the suffix in the case it was given, the way
    tldextract does"""

    def __init__(self, suffix_labels: int):
        self.suffix_labels = suffix_labels

    def longest_public_suffix(self, hostname: str) -> Optional[str]:
        return '.'.join(hostname.split('.')[-self.suffix_labels:])
