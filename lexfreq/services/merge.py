"""
Probability merge service.

Turns the per-token frequencies of a query into one probability:

1. each token is looked up under its smashed numeric form; Chinese words
   missing from the table may be composed from their characters
2. tokens whose digits were smashed are scaled by the estimated frequency of
   their actual digits
3. token frequencies are combined as 1 / sum(1 / f)
4. Chinese text split into several words by the segmenter is discounted by
   one order of magnitude per inferred boundary
5. the result is rounded to three significant digits and floored
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from lexfreq.types import LanguageProfile, LexFreqConfig
from lexfreq.utils.numbers import digit_freq, smash_numbers


class ProbabilityMergeService:
    """Combines token frequencies into a single word or phrase frequency."""

    def __init__(self, config: LexFreqConfig):
        self._config = config

    def estimate_chinese_word_frequency(self, word: str, freqs: Mapping[str, float]) -> float | None:
        """
        Estimate the frequency of a Chinese word missing from the table from its characters.

        Returns None if the word is a single character or if any character is
        unknown. Otherwise the character frequencies are combined like the
        tokens of a phrase, then divided by the combination penalty once per
        extra character, so composed words rank below real dictionary words.
        """
        if len(word) <= 1:
            return None

        char_freqs = []
        for char in word:
            freq = freqs.get(char)
            if freq is None:
                return None
            char_freqs.append(freq)

        penalty = self._config.char_combination_penalty ** (len(word) - 1)
        return self.combine(char_freqs) / penalty

    @staticmethod
    def combine(frequencies: Iterable[float]) -> float:
        """Combine frequencies as the reciprocal of the sum of their reciprocals."""
        one_over_result = sum(1.0 / freq for freq in frequencies)
        return 1.0 / one_over_result

    def round_to_significant_digits(self, value: float, minimum: float = 0.0) -> float:
        """
        Round to the configured number of significant digits, never going below `minimum`.

        Frequencies are only meaningful to about 1%, so extra digits are noise.
        """
        unrounded = max(value, minimum)
        if unrounded == 0:
            return 0.0
        leading_zeroes = math.floor(-math.log10(unrounded))
        rounded = round(unrounded, leading_zeroes + self._config.significant_digits)
        return max(rounded, minimum)

    def token_frequency(self, token: str, freqs: Mapping[str, float], profile: LanguageProfile) -> float | None:
        """Frequency of a single token, or None if neither the table nor the character fallback knows it."""
        smashed = smash_numbers(token)
        freq = freqs.get(smashed)

        if freq is None and profile.uses_dictionary_segmentation:
            freq = self.estimate_chinese_word_frequency(smashed, freqs)
        if freq is None:
            return None

        if smashed != token:
            freq *= digit_freq(token)
        return freq

    def merge(
        self,
        tokens: list[str],
        freqs: Mapping[str, float],
        profile: LanguageProfile,
        minimum: float = 0.0,
    ) -> float:
        """Frequency of a tokenized query, or `minimum` when it has no tokens or an unknown token."""
        if not tokens:
            return minimum

        token_freqs = []
        for token in tokens:
            freq = self.token_frequency(token, freqs, profile)
            if freq is None:
                return minimum
            token_freqs.append(freq)

        result = self.combine(token_freqs)
        if profile.uses_dictionary_segmentation and len(tokens) > 1:
            result *= self._config.inferred_space_factor ** -(len(tokens) - 1)

        return self.round_to_significant_digits(result, minimum)
