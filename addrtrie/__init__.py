"""
Longest-match lookup tables for IPv4/IPv6 prefixes and domain names.

``BitTrie4`` and ``BitTrie6`` map CIDR prefixes to values and answer
longest-prefix-match queries. ``DomainMatcher`` maps exact and wildcard
domain patterns to values and answers longest-suffix queries.
"""

from .bittrie import BitTrie, BitTrie4, BitTrie6
from .domain import DomainMatcher, split_and_reverse
from .errors import (AddrTrieError, AddressError, InvalidAddressError,
                     AddressFamilyError, NonCanonicalMaskError,
                     InvalidPrefixLengthError, InvalidPatternError)
from .prefix import AddressPrefix, parse_address, parse_prefix

__version__ = '1.0.0'
__all__ = [
    'BitTrie', 'BitTrie4', 'BitTrie6',
    'DomainMatcher', 'split_and_reverse',
    'AddressPrefix', 'parse_address', 'parse_prefix',
    'AddrTrieError', 'AddressError', 'InvalidAddressError',
    'AddressFamilyError', 'NonCanonicalMaskError',
    'InvalidPrefixLengthError', 'InvalidPatternError',
]
