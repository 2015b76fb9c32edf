"""
Domain name matching with exact and wildcard-suffix patterns.

Pattern forms accepted by ``DomainMatcher.add``:

    example.com      exact: matches only ``example.com``
    *.example.com    suffix: matches ``a.example.com``, ``b.a.example.com``
                     but not ``example.com`` itself
    *example.com     inclusive: ``example.com`` and all its subdomains

Exact entries are checked first and win over any wildcard. Among
wildcards, the one with the most labels wins.

Patterns and queries must be ``str``; anything else raises ``TypeError``
from both ``add`` and ``find``. Labels are compared verbatim, so an empty
label (as in ``.example.com``) is just another label.
"""
import logging

from .base import Matcher, EMPTY, V
from .errors import InvalidPatternError


def split_and_reverse(domain):
    """Split ``domain`` into labels, top-level label first."""
    labels = domain.split('.')
    labels.reverse()
    return labels


class LabelNode(object):
    __slots__ = ('children', 'value')

    def __init__(self):
        self.children = {}
        self.value = EMPTY


class DomainMatcher(Matcher[V]):

    def __init__(self, cache_size=0):
        super(DomainMatcher, self).__init__(cache_size)
        self.exact_domains = {}
        self.head = LabelNode()
        self.logger = logging.getLogger(
            '{0}.{1}'.format(__name__, type(self).__name__))

    def _coerce(self, query):
        if not isinstance(query, str):
            raise TypeError('domain must be a str, not {0}'.format(
                type(query).__name__))
        return query

    def _insert_trie(self, domain, value):
        node = self.head
        for label in split_and_reverse(domain):
            child = node.children.get(label)
            if child is None:
                child = node.children[label] = LabelNode()
            node = child
        node.value = value

    def add(self, pattern, value):
        """Store ``value`` under a domain pattern.

        Raises ``InvalidPatternError`` if ``pattern`` has no ``.``, and
        ``TypeError`` if it is not a ``str``.
        """
        pattern = self._coerce(pattern)
        if '.' not in pattern:
            self.logger.warning('rejected domain pattern %r', pattern)
            raise InvalidPatternError(pattern, 'must contain a "."')
        if pattern.startswith('*.'):
            self._insert_trie(pattern[2:], value)
        elif pattern.startswith('*'):
            domain = pattern[1:]
            self.exact_domains[domain] = value
            self._insert_trie(domain, value)
        else:
            self.exact_domains[pattern] = value
        self._invalidate()
        self.logger.debug('added domain pattern %s', pattern)

    def _lookup(self, domain):
        value = self.exact_domains.get(domain, EMPTY)
        if value is not EMPTY:
            return value
        labels = split_and_reverse(domain)
        best = EMPTY
        node = self.head
        for depth, label in enumerate(labels, 1):
            node = node.children.get(label)
            if node is None:
                break
            # a wildcard node only covers names below it, never its apex
            if node.value is not EMPTY and depth < len(labels):
                best = node.value
        return best
