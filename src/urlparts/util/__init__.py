"""Helper classes and functions for urlparts"""

from .suffixes import (PublicSuffixResolver, TLDExtractResolver,
                       StaticSuffixResolver, default_resolver)

__all__ = [
    "PublicSuffixResolver",
    "TLDExtractResolver",
    "StaticSuffixResolver",
    "default_resolver",
]
