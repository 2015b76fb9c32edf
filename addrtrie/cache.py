import threading

import pylru


class LookupCache(object):
    """Bounded LRU memo of ``find`` results.

    Reads reorder the LRU list, so every access takes the lock; this keeps
    a frozen trie with a cache safe for concurrent readers.
    """

    def __init__(self, size):
        self.size = size
        self._lock = threading.Lock()
        self._cache = pylru.lrucache(size)

    def get(self, key, missing):
        with self._lock:
            try:
                return self._cache[key]
            except KeyError:
                return missing

    def put(self, key, value):
        with self._lock:
            self._cache[key] = value

    def clear(self):
        with self._lock:
            self._cache.clear()

    def __len__(self):
        with self._lock:
            return len(self._cache)


def make_cache(cache_size):
    if cache_size is None or cache_size <= 0:
        return None
    return LookupCache(cache_size)
