"""
lexfreq: Word Frequency Estimation Library

Estimates how common a word or short phrase is in a given language, as a
probability or on the Zipf scale, from static frequency tables covering many
languages and scripts.
"""

__version__ = "0.1.0"

_EXPORTS = {
    "WordFrequencyEstimator": "lexfreq.estimator",
    "LexFreqConfig": "lexfreq.types",
    "word_frequency": "lexfreq.api",
    "zipf_frequency": "lexfreq.api",
    "top_n_list": "lexfreq.api",
    "random_words": "lexfreq.api",
    "random_ascii_words": "lexfreq.api",
    "available_languages": "lexfreq.api",
    "iter_wordlist": "lexfreq.api",
    "get_frequency_list": "lexfreq.api",
    "get_frequency_dict": "lexfreq.api",
    "simple_tokenize": "lexfreq.api",
    "tokenize": "lexfreq.api",
    "lossy_tokenize": "lexfreq.api",
    "cB_to_freq": "lexfreq.utils.scale",
    "cB_to_zipf": "lexfreq.utils.scale",
    "zipf_to_freq": "lexfreq.utils.scale",
    "freq_to_zipf": "lexfreq.utils.scale",
    "digit_freq": "lexfreq.utils.numbers",
    "benford_freq": "lexfreq.utils.numbers",
    "year_freq": "lexfreq.utils.numbers",
    "smash_numbers": "lexfreq.utils.numbers",
    "has_digit_sequence": "lexfreq.utils.numbers",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name):
    """Lazy import to avoid loading tokenizer dependencies until they are needed."""
    if name in _EXPORTS:
        import importlib

        module = importlib.import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
