"""
Module-level lookup functions.

Each function delegates to the process-wide default estimator, which reads
its tables from the configured data directory.
"""
from __future__ import annotations

from lexfreq.estimator import WordlistView, get_default_estimator


def word_frequency(word: str, lang: str, wordlist: str = "best", minimum: float = 0.0) -> float:
    return get_default_estimator().word_frequency(word, lang, wordlist, minimum)


def zipf_frequency(word: str, lang: str, wordlist: str = "best", minimum: float = 0.0) -> float:
    return get_default_estimator().zipf_frequency(word, lang, wordlist, minimum)


def top_n_list(lang: str, n: int, wordlist: str = "best", ascii_only: bool = False) -> list[str]:
    return get_default_estimator().top_n_list(lang, n, wordlist, ascii_only)


def random_words(
    lang: str = "en",
    wordlist: str = "best",
    nwords: int = 5,
    bits_per_word: int = 12,
    ascii_only: bool = False,
) -> str:
    return get_default_estimator().random_words(lang, wordlist, nwords, bits_per_word, ascii_only)


def random_ascii_words(lang: str = "en", wordlist: str = "best", nwords: int = 5, bits_per_word: int = 12) -> str:
    return get_default_estimator().random_ascii_words(lang, wordlist, nwords, bits_per_word)


def available_languages(wordlist: str = "best") -> dict[str, str]:
    return get_default_estimator().available_languages(wordlist)


def iter_wordlist(lang: str, wordlist: str = "best") -> WordlistView:
    return get_default_estimator().iter_wordlist(lang, wordlist)


def get_frequency_list(lang: str, wordlist: str = "best") -> list[list[str]]:
    return get_default_estimator().get_frequency_list(lang, wordlist)


def get_frequency_dict(lang: str, wordlist: str = "best") -> dict[str, float]:
    return get_default_estimator().get_frequency_dict(lang, wordlist)


def simple_tokenize(text: str, include_punctuation: bool = False) -> list[str]:
    return get_default_estimator().simple_tokenize(text, include_punctuation)


def tokenize(text: str, lang: str, include_punctuation: bool = False, external_wordlist: bool = False) -> list[str]:
    return get_default_estimator().tokenize(text, lang, include_punctuation, external_wordlist)


def lossy_tokenize(
    text: str,
    lang: str,
    include_punctuation: bool = False,
    external_wordlist: bool = False,
) -> list[str]:
    return get_default_estimator().lossy_tokenize(text, lang, include_punctuation, external_wordlist)
