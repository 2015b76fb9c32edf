"""
Exception classes raised by addrtrie.

All errors derive from ``ValueError`` so code written against the plain
``ValueError`` the radix tree used to raise keeps working.

    AddrTrieError
    +-- AddressError
    |   +-- InvalidAddressError
    |   +-- AddressFamilyError
    |   +-- NonCanonicalMaskError
    |   +-- InvalidPrefixLengthError
    +-- InvalidPatternError
"""


class AddrTrieError(ValueError):
    """Base class for every addrtrie failure.

    Attributes:
        value: the offending pattern or query text (if available)
        reason: extra detail on why it was rejected (if available)
    """

    default_message = 'addrtrie error'

    def __init__(self, value=None, reason=None, message=None):
        self.value = value
        self.reason = reason
        self.message = message or self.default_message
        text = self.message
        if value is not None:
            text = '{0}: {1}'.format(text, value)
        if reason is not None:
            text = '{0} ({1})'.format(text, reason)
        super(AddrTrieError, self).__init__(text)


class AddressError(AddrTrieError):
    default_message = 'invalid address'


class InvalidAddressError(AddressError):
    """Text could not be parsed as an address at all."""
    default_message = 'invalid address'


class AddressFamilyError(AddressError):
    """Address or mask belongs to the other family.

    Also raised for IPv4 addresses written in IPv6 form (mapped or
    compatible) when given to the IPv6 trie.
    """
    default_message = 'address family mismatch'


class NonCanonicalMaskError(AddressError):
    """Mask bits are not a contiguous run of ones from the top."""
    default_message = 'non-canonical mask'


class InvalidPrefixLengthError(AddressError):
    default_message = 'invalid prefix length'


class InvalidPatternError(AddrTrieError):
    """Domain pattern is malformed (e.g. has no dot)."""
    default_message = 'invalid pattern'
