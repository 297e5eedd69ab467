"""
Word Frequency Estimation Module

This module estimates how common a word or short phrase is in a language,
as a probability or on the logarithmic Zipf scale, using static frequency
tables for many languages.

## Overview

The core functionality is provided by the `WordFrequencyEstimator` class,
which runs each query through a pipeline:

1. **Language profile**: the tag is resolved to normalization and
   tokenization settings
2. **Tokenization**: text is normalized and segmented; Chinese is
   simplified and segmented with jieba when available
3. **Lookup**: each token is looked up under its smashed numeric form,
   composing unknown Chinese words from their characters
4. **Numeric smoothing**: smashed digits are scaled by Benford and year
   distributions
5. **Merging**: token frequencies are combined, discounted for inferred word
   boundaries and rounded to three significant digits

## Usage Examples

```python
estimator = WordFrequencyEstimator()
estimator.word_frequency("the", "en")    # 0.0537
estimator.zipf_frequency("the", "en")    # 7.73
estimator.top_n_list("en", 3)            # ['the', 'to', 'and']
estimator.random_words("en", nwords=4)   # 'shift fabric anyone pull'
```

## Caching

Decoded tables and derived dictionaries are kept for the lifetime of the
estimator; final results live in a bounded LRU cache. Each estimator owns
its caches, so independent instances (for example in tests) never share
state. The module-level functions in `lexfreq` use one shared default
instance.

## Errors

- `LookupError`: the wordlist has no table for the requested language
- `ValueError`: a table file has an incompatible header, or a random word
  request asks for more entropy than the wordlist provides
- Unknown words are not errors; they return the `minimum` floor
"""
from __future__ import annotations

import random
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain, islice

from lexfreq.services import (
    CacheInfo,
    ChineseSegmenter,
    ChineseSimplifier,
    FrequencyTableCache,
    LexFreqConfig,
    LRUResultCache,
    ProbabilityMergeService,
    TextNormalizationService,
    TokenizationService,
    WordlistIndex,
    get_language_profile,
)
from lexfreq.utils.numbers import has_digit_sequence
from lexfreq.utils.scale import freq_to_zipf, zipf_to_freq

# ════════════════════════════════════════════════════════════════════════════════
# WORDLIST VIEW
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class WordlistView:
    """
    Finite, restartable sequence of every word of a wordlist in frequency order.

    Each iteration walks the cached buckets from the start; there is no shared
    cursor between iterations.
    """

    buckets: list[list[str]]

    def __iter__(self) -> Iterator[str]:
        return chain.from_iterable(self.buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)


# ════════════════════════════════════════════════════════════════════════════════
# MAIN ESTIMATOR CLASS
# ════════════════════════════════════════════════════════════════════════════════


class WordFrequencyEstimator:
    """Main word frequency lookup service."""

    def __init__(
        self,
        config: LexFreqConfig | None = None,
        segmenter_backend: str | None = None,
        rng: random.Random | None = None,
    ):
        self._config = config or LexFreqConfig.create_default()
        self._rng = rng or random.SystemRandom()

        self._index = WordlistIndex(self._config.data_dir)
        self._tables = FrequencyTableCache(self._index)
        self._results = LRUResultCache(self._config.cache_size)

        self._normalizer = TextNormalizationService(self._config)
        self._simplifier = ChineseSimplifier(self._config)
        self._segmenter = ChineseSegmenter(self._config, self._simplifier, backend=segmenter_backend)
        self._tokenizer = TokenizationService(self._config, self._normalizer, self._simplifier, self._segmenter)
        self._merger = ProbabilityMergeService(self._config)

    @property
    def config(self) -> LexFreqConfig:
        return self._config

    @property
    def segmenter(self) -> ChineseSegmenter:
        return self._segmenter

    # ---------- cache diagnostics ----------
    def get_cache_info(self) -> CacheInfo:
        """Get cache information."""
        return CacheInfo(
            result_cache_size=len(self._results),
            result_cache_capacity=self._results.max_size,
            result_cache_hits=self._results.cache_hits,
            result_cache_misses=self._results.cache_misses,
            loaded_tables=self._tables.loaded_tables,
            loaded_dictionaries=self._tables.loaded_dictionaries,
        )

    def clear_result_cache(self) -> None:
        """Clear the query result cache; decoded tables are kept."""
        self._results.clear()

    # ---------- tokenization ----------
    def simple_tokenize(self, text: str, include_punctuation: bool = False) -> list[str]:
        return self._tokenizer.simple_tokenize(text, include_punctuation)

    def tokenize(
        self,
        text: str,
        lang: str,
        include_punctuation: bool = False,
        external_wordlist: bool = False,
    ) -> list[str]:
        return self._tokenizer.tokenize(text, lang, include_punctuation, external_wordlist)

    def lossy_tokenize(
        self,
        text: str,
        lang: str,
        include_punctuation: bool = False,
        external_wordlist: bool = False,
    ) -> list[str]:
        return self._tokenizer.lossy_tokenize(text, lang, include_punctuation, external_wordlist)

    # ---------- tables ----------
    def available_languages(self, wordlist: str | None = None) -> dict[str, str]:
        """Map each language covered by a wordlist to the file its table is read from."""
        return self._tables.available_languages(wordlist or self._config.default_wordlist)

    def get_frequency_list(self, lang: str, wordlist: str | None = None) -> list[list[str]]:
        return self._tables.get_frequency_list(lang, wordlist or self._config.default_wordlist)

    def get_frequency_dict(self, lang: str, wordlist: str | None = None) -> dict[str, float]:
        return self._tables.get_frequency_dict(lang, wordlist or self._config.default_wordlist)

    def iter_wordlist(self, lang: str, wordlist: str | None = None) -> WordlistView:
        """All words of a wordlist in descending frequency order."""
        return WordlistView(self.get_frequency_list(lang, wordlist))

    # ---------- frequencies ----------
    def word_frequency(self, word: str, lang: str, wordlist: str | None = None, minimum: float = 0.0) -> float:
        """
        Main API method: frequency of a word or phrase as a probability in [minimum, 1].

        Multi-word phrases are tokenized and their token frequencies combined.
        Words missing from the table return `minimum`.
        """
        wordlist = wordlist or self._config.default_wordlist
        key = (word, lang, wordlist, minimum)
        cached = self._results.get(key)
        if cached is not None:
            return cached

        result = self._word_frequency(word, lang, wordlist, minimum)
        self._results.set(key, result)
        return result

    def _word_frequency(self, word: str, lang: str, wordlist: str, minimum: float) -> float:
        profile = get_language_profile(lang)
        tokens = self._tokenizer.lossy_tokenize(word, lang)
        if not tokens:
            return minimum

        freqs = self._tables.get_frequency_dict(lang, wordlist)
        return self._merger.merge(tokens, freqs, profile, minimum)

    def zipf_frequency(self, word: str, lang: str, wordlist: str | None = None, minimum: float = 0.0) -> float:
        """
        Frequency of a word on the Zipf scale, rounded to two decimal places.

        `minimum` is a Zipf value too; the default of 0 corresponds to one
        occurrence per billion words.
        """
        freq_min = zipf_to_freq(minimum)
        freq = self.word_frequency(word, lang, wordlist, freq_min)
        return round(freq_to_zipf(freq), 2)

    # ---------- word lists ----------
    def _iter_top_words(self, lang: str, wordlist: str | None, ascii_only: bool) -> Iterator[str]:
        for word in self.iter_wordlist(lang, wordlist):
            if ascii_only and word and max(word) > "~":
                continue
            if has_digit_sequence(word):
                continue
            yield word

    def top_n_list(self, lang: str, n: int, wordlist: str | None = None, ascii_only: bool = False) -> list[str]:
        """
        The `n` most frequent words of a language, most frequent first.

        Numeric shapes such as "0000" are skipped because they stand for many
        numbers rather than a word. With `ascii_only`, words containing
        characters beyond "~" are skipped.
        """
        return list(islice(self._iter_top_words(lang, wordlist, ascii_only), n))

    def random_words(
        self,
        lang: str = "en",
        wordlist: str | None = None,
        nwords: int = 5,
        bits_per_word: int = 12,
        ascii_only: bool = False,
    ) -> str:
        """
        A space-separated string of random words drawn from the top 2 ** bits_per_word words.

        Raises ValueError when the wordlist is too small to supply that much
        entropy per word.
        """
        n_choices = 2**bits_per_word
        choices = self.top_n_list(lang, n_choices, wordlist, ascii_only=ascii_only)
        if len(choices) < n_choices:
            raise ValueError(
                f"There aren't enough words in the wordlist to provide {bits_per_word} bits of entropy per word.",
            )
        return " ".join(self._rng.choice(choices) for _ in range(nwords))

    def random_ascii_words(
        self,
        lang: str = "en",
        wordlist: str | None = None,
        nwords: int = 5,
        bits_per_word: int = 12,
    ) -> str:
        """Like `random_words`, restricted to ASCII words."""
        return self.random_words(lang, wordlist, nwords, bits_per_word, ascii_only=True)


_DEFAULT_ESTIMATOR: WordFrequencyEstimator | None = None
_DEFAULT_LOCK = threading.Lock()


def get_default_estimator() -> WordFrequencyEstimator:
    """The process-wide estimator behind the module-level functions, created on first use."""
    global _DEFAULT_ESTIMATOR
    if _DEFAULT_ESTIMATOR is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_ESTIMATOR is None:
                _DEFAULT_ESTIMATOR = WordFrequencyEstimator()
    return _DEFAULT_ESTIMATOR
