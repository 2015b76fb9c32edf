"""
One-bit-per-level tries for IPv4 and IPv6 longest prefix match.

    >>> from addrtrie import BitTrie4
    >>> trie = BitTrie4()
    >>> trie.insert('10.0.0.0/8', 'A')
    >>> trie.insert('10.1.0.0/16', 'B')
    >>> trie.find('10.1.2.3')
    'B'
    >>> trie.find('10.2.3.4')
    'A'
    >>> trie.find('11.0.0.0') is None
    True

Prefixes and addresses that are not ``str`` (e.g. ``ipaddress`` objects)
are converted with ``str()`` and parsed like any other text.
"""
import logging
from socket import AF_INET, AF_INET6

from .base import Matcher, EMPTY, V
from .errors import AddressError
from .prefix import MAXBITS, parse_address, parse_prefix


class BitNode(object):
    __slots__ = ('children', 'value')

    def __init__(self):
        self.children = [None, None]
        self.value = EMPTY


class BitTrie(Matcher[V]):
    """Binary trie keyed by the bits of a fixed-width address.

    Subclasses pick the address family; the walk is the same for both.
    Not safe for concurrent inserts. Once populated, any number of threads
    may call ``find`` at the same time.
    """

    family = None

    def __init__(self, cache_size=0):
        if self.family is None:
            raise TypeError('use BitTrie4 or BitTrie6, not BitTrie')
        super(BitTrie, self).__init__(cache_size)
        self.maxbits = MAXBITS[self.family]
        self.head = BitNode()
        self.logger = logging.getLogger(
            '{0}.{1}'.format(__name__, type(self).__name__))

    def insert(self, prefix, value):
        """Store ``value`` under ``prefix`` (``addr`` or ``addr/len``).

        Raises an ``AddressError`` subclass for malformed input, in which
        case the trie is left untouched. Inserting the same prefix again
        replaces the stored value.
        """
        try:
            parsed = parse_prefix(prefix, self.family)
        except AddressError as e:
            self.logger.warning('rejected prefix %s: %s', prefix, e)
            raise
        node = self.head
        for i in range(parsed.bitlen):
            bit = parsed.bit(i)
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = BitNode()
            node = child
        node.value = value
        self._invalidate()
        self.logger.debug('inserted %s', parsed)

    def _lookup(self, address):
        addr = parse_address(address, self.family)
        maxbits = self.maxbits
        best = EMPTY
        node = self.head
        for i in range(maxbits):
            if node.value is not EMPTY:
                best = node.value
            child = node.children[(addr >> (maxbits - 1 - i)) & 1]
            if child is None:
                break
            node = child
        # the walk can end on a valued node without re-checking it
        if node.value is not EMPTY:
            best = node.value
        return best


class BitTrie4(BitTrie[V]):
    """IPv4 (32-bit) prefix trie."""
    family = AF_INET


class BitTrie6(BitTrie[V]):
    """IPv6 (128-bit) prefix trie.

    IPv4 addresses, including IPv4-mapped (``::ffff:a.b.c.d``) and
    IPv4-compatible (``::a.b.c.d``) spellings, are refused with
    ``AddressFamilyError``.
    """
    family = AF_INET6
