from typing import Generic, TypeVar

from .cache import make_cache

V = TypeVar('V')

# marks "no value stored here"; None is a legal stored value
EMPTY = object()

_MISS = object()


class Matcher(Generic[V]):
    """Lookup surface shared by the address and domain tries.

    Subclasses implement ``_lookup(query)`` which returns the matched value
    or ``EMPTY``, and call ``_invalidate()`` after every successful insert.
    """

    def __init__(self, cache_size=0):
        self._cache = make_cache(cache_size)

    def _coerce(self, query):
        return query if isinstance(query, str) else str(query)

    def _lookup(self, query):
        raise NotImplementedError

    def _invalidate(self):
        if self._cache is not None:
            self._cache.clear()

    def _find(self, query):
        query = self._coerce(query)
        if self._cache is None:
            return self._lookup(query)
        value = self._cache.get(query, _MISS)
        if value is _MISS:
            value = self._lookup(query)
            self._cache.put(query, value)
        return value

    def find(self, query, default=None):
        """Return the longest match for ``query``, or ``default``."""
        value = self._find(query)
        if value is EMPTY:
            return default
        return value

    def __contains__(self, query):
        return self._find(query) is not EMPTY

    def __getitem__(self, query):
        value = self._find(query)
        if value is EMPTY:
            raise KeyError(query)
        return value
