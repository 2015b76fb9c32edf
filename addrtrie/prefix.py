"""
Address and CIDR parsing for the bit tries.

Addresses are turned into plain integers in network bit order, so bit 0
of the prefix is the most significant bit of the integer.
"""
import re
from socket import inet_pton, inet_ntop, AF_INET, AF_INET6

from .errors import (InvalidAddressError, AddressFamilyError,
                     NonCanonicalMaskError, InvalidPrefixLengthError)

MAXBITS = {AF_INET: 32, AF_INET6: 128}
FAMILY_NAMES = {AF_INET: 'IPv4', AF_INET6: 'IPv6'}

_MASKLEN_RE = re.compile(r'-?[0-9]+')
# digits in the longest legal prefix length (128)
_MASKLEN_DIGITS = 3


def _other(family):
    return AF_INET6 if family == AF_INET else AF_INET


def _pton(family, text):
    try:
        packed = inet_pton(family, text)
    except (OSError, ValueError):
        return None
    return int.from_bytes(packed, 'big')


def _is_ipv4_in_ipv6(addr, text):
    # ::ffff:0:0/96 in any spelling, or ::/96 written with a dotted quad
    if addr >> 32 == 0xffff:
        return True
    return addr >> 32 == 0 and '.' in text


def netmask(masklen, maxbits):
    """Integer mask with the top ``masklen`` of ``maxbits`` bits set."""
    full = (1 << maxbits) - 1
    return full ^ ((1 << (maxbits - masklen)) - 1)


def mask_size(mask, maxbits):
    """Return ``(ones, bits)`` for a canonical mask, ``(0, 0)`` otherwise.

    A canonical mask is a run of one-bits from the top followed only by
    zero-bits. The all-zero mask is canonical and yields ``(0, maxbits)``.
    """
    ones = bin(mask).count('1')
    if mask != netmask(ones, maxbits):
        return 0, 0
    return ones, maxbits


class AddressPrefix(object):
    """A parsed address with its prefix length."""

    def __init__(self, family, addr, bitlen):
        self.family = family
        self.addr = addr
        self.bitlen = bitlen

    def __str__(self):
        return '{0}/{1}'.format(self.network, self.bitlen)

    def __repr__(self):
        return '<AddressPrefix {0}>'.format(self)

    def __eq__(self, other):
        if not isinstance(other, AddressPrefix):
            return NotImplemented
        return ((self.family, self.addr, self.bitlen) ==
                (other.family, other.addr, other.bitlen))

    def __hash__(self):
        return hash((self.family, self.addr, self.bitlen))

    @property
    def maxbits(self):
        return MAXBITS[self.family]

    @property
    def packed(self):
        return self.addr.to_bytes(self.maxbits // 8, 'big')

    @property
    def network(self):
        return inet_ntop(self.family, self.packed)

    def bit(self, index):
        """Value (0 or 1) of bit ``index``, counting from the top."""
        maxbits = self.maxbits
        if not (0 <= index < maxbits):
            raise IndexError('bit index out of range')
        return (self.addr >> (maxbits - 1 - index)) & 1


def parse_address(text, family):
    """Parse a bare address of ``family`` into an integer.

    A ``/`` anywhere in ``text`` is rejected: lookups take addresses,
    not prefixes.
    """
    text = text if isinstance(text, str) else str(text)
    if '/' in text:
        raise InvalidAddressError(text, 'prefix length not allowed here')
    return _parse_addr(text, family, text)


def _parse_addr(network, family, text):
    addr = _pton(family, network)
    if addr is None:
        if _pton(_other(family), network) is not None:
            raise AddressFamilyError(
                text, 'not an {0} address'.format(FAMILY_NAMES[family]))
        raise InvalidAddressError(text)
    if family == AF_INET6 and _is_ipv4_in_ipv6(addr, network):
        raise AddressFamilyError(text, 'IPv4 address in IPv6 form')
    return addr


def _parse_masklen(mask, family, text):
    maxbits = MAXBITS[family]
    if _MASKLEN_RE.fullmatch(mask):
        # very long digit runs trip int()'s own conversion limit
        if (len(mask.lstrip('-')) > _MASKLEN_DIGITS or
                not (0 <= int(mask) <= maxbits)):
            raise InvalidPrefixLengthError(
                text, 'must be between 0 and {0}'.format(maxbits))
        return int(mask)
    value = _pton(family, mask)
    if value is None:
        if _pton(_other(family), mask) is not None:
            raise AddressFamilyError(
                text, 'mask is not an {0} mask'.format(FAMILY_NAMES[family]))
        raise InvalidAddressError(text, 'unparseable mask')
    ones, bits = mask_size(value, maxbits)
    if ones == 0 and bits == 0:
        raise NonCanonicalMaskError(text)
    return ones


def parse_prefix(text, family):
    """Parse ``addr``, ``addr/N`` or ``addr/mask`` into an AddressPrefix.

    A bare address gets the full prefix length of its family. Host bits
    past the prefix length are cleared.
    """
    text = text if isinstance(text, str) else str(text)
    split = text.split('/')
    if len(split) > 2:
        raise InvalidAddressError(text, 'more than one "/"')
    addr = _parse_addr(split[0], family, text)
    maxbits = MAXBITS[family]
    if len(split) > 1:
        masklen = _parse_masklen(split[1], family, text)
    else:
        masklen = maxbits
    return AddressPrefix(family, addr & netmask(masklen, maxbits), masklen)
