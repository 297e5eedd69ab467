"""
Conversions between the frequency scales used by the wordlists.

Tables store frequencies in centibels (cB): bucket `i` holds words with
frequency 10 ** (-i / 100). The Zipf scale is log10 of frequency per billion
words, so a word appearing once per thousand words has Zipf value 6.
"""
from __future__ import annotations

import math


def cB_to_freq(cB: float) -> float:
    """Convert a (non-positive) centibel value to a frequency in (0, 1]."""
    if cB > 0:
        raise ValueError(f"A frequency cannot be a positive number of centibels, got {cB}")
    return 10 ** (cB / 100)


def cB_to_zipf(cB: float) -> float:
    return (cB + 900) / 100


def zipf_to_freq(zipf: float) -> float:
    return 10**zipf / 1e9


def freq_to_zipf(freq: float) -> float:
    return math.log10(freq) + 9
