"""
Cache management for word frequency estimation.

Three caches make repeated lookups cheap:

- decoded bucket arrays, one per (language, wordlist)
- token -> probability dictionaries derived from those buckets
- a bounded LRU cache of final query results

Every cached value is a pure function of static data, so a race between two
threads can only cause the same value to be computed twice.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any

from lexfreq.paths import logger
from lexfreq.services.language import normalize_language_tag, primary_subtag
from lexfreq.services.tables import WordlistIndex, normalize_wordlist, read_cbpack
from lexfreq.utils.scale import cB_to_freq

FrequencyBuckets = list[list[str]]


class LRUResultCache:
    """Thread-safe bounded cache with least-recently-used eviction."""

    def __init__(self, max_size: int = 100_000):
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        self._lock = threading.RLock()
        self._store: OrderedDict[Hashable, Any] = OrderedDict()
        self.cache_hits = 0
        self.cache_misses = 0

    def _evict(self) -> None:
        while len(self._store) > self.max_size:
            self._store.popitem(last=False)

    def get(self, key: Hashable) -> Any | None:
        with self._lock:
            if key not in self._store:
                self.cache_misses += 1
                return None
            self._store.move_to_end(key)
            self.cache_hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            self._evict()

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self.cache_hits = 0
            self.cache_misses = 0

    def __len__(self) -> int:
        return len(self._store)


def closest_language(requested: str, available: list[str]) -> str | None:
    """
    Pick the available language tag that best serves a requested one.

    Tried in order: the same normalized tag, the bare primary-language
    subtag, then any available tag with that primary language.
    """
    normalized = {normalize_language_tag(tag): tag for tag in available}
    wanted = normalize_language_tag(requested)
    if wanted in normalized:
        return normalized[wanted]

    base = primary_subtag(requested)
    if base in normalized:
        return normalized[base]

    for tag_normalized, tag in sorted(normalized.items()):
        if tag_normalized.split("-")[0] == base:
            return tag
    return None


class FrequencyTableCache:
    """
    Decoded frequency tables and the dictionaries derived from them.

    The table loader is injectable so that tests can serve buckets from
    memory; by default tables are read with `read_cbpack`.
    """

    def __init__(
        self,
        index: WordlistIndex,
        loader: Callable[[str], FrequencyBuckets] = read_cbpack,
    ):
        self._index = index
        self._loader = loader
        self._lists: dict[tuple[str, str], FrequencyBuckets] = {}
        self._dicts: dict[tuple[str, str], dict[str, float]] = {}
        self._lock = threading.Lock()

    @property
    def loaded_tables(self) -> int:
        return len(self._lists)

    @property
    def loaded_dictionaries(self) -> int:
        return len(self._dicts)

    def available_languages(self, wordlist: str) -> dict[str, str]:
        return self._index.available_languages(wordlist)

    def resolve(self, lang: str, wordlist: str) -> tuple[str, str, str]:
        """
        Return (language, wordlist, path) for the table serving a request.

        Raises LookupError when the wordlist has no table for the language.
        """
        wordlist = normalize_wordlist(wordlist)
        available = self._index.available_languages(wordlist)
        best = closest_language(lang, list(available))
        if best is None:
            raise LookupError(f"No wordlist {wordlist!r} available for language {lang!r}")
        return best, wordlist, available[best]

    def get_frequency_list(self, lang: str, wordlist: str) -> FrequencyBuckets:
        """Decoded buckets for a language, loading the table on first access."""
        best, wordlist, path = self.resolve(lang, wordlist)
        key = (best, wordlist)
        buckets = self._lists.get(key)
        if buckets is None:
            logger.debug(f"Loading wordlist {wordlist!r} for {best!r} from {path}")
            buckets = self._loader(path)
            with self._lock:
                buckets = self._lists.setdefault(key, buckets)
        return buckets

    def get_frequency_dict(self, lang: str, wordlist: str) -> dict[str, float]:
        """Token -> probability mapping for a language, built once from its buckets."""
        best, wordlist, _path = self.resolve(lang, wordlist)
        key = (best, wordlist)
        freqs = self._dicts.get(key)
        if freqs is None:
            freqs = {}
            for index, bucket in enumerate(self.get_frequency_list(best, wordlist)):
                freq = cB_to_freq(-index)
                for word in bucket:
                    freqs[word] = freq
            with self._lock:
                freqs = self._dicts.setdefault(key, freqs)
        return freqs
