"""
Tokenization service.

Splits text into the tokens the wordlists are keyed by. The tokenizer is
chosen by the language profile:

- generic: Unicode word boundaries, keeping runs of ideographs and of
  spaceless-script letters together
- dictionary: jieba segmentation for Chinese-family languages, falling back
  to the generic segmentation when jieba is unavailable
- none: spaceless scripts without a dedicated segmenter, which get the
  generic segmentation as an approximation

`lossy_tokenize` additionally simplifies Chinese and straightens curly
quotes; it is the form frequency lookups use.
"""
from __future__ import annotations

import unicodedata

from ftfy.fixes import uncurl_quotes

from lexfreq.services.language import get_language_profile
from lexfreq.services.normalization import TextNormalizationService
from lexfreq.services.segmentation import ChineseSegmenter, ChineseSimplifier
from lexfreq.types import LexFreqConfig, TokenizerKind


class TokenizationService:
    """Language-aware tokenization with pluggable dictionary segmentation."""

    def __init__(
        self,
        config: LexFreqConfig,
        normalizer: TextNormalizationService,
        simplifier: ChineseSimplifier,
        segmenter: ChineseSegmenter,
    ):
        self._config = config
        self._normalizer = normalizer
        self._simplifier = simplifier
        self._segmenter = segmenter

    # ---------- public API ----------
    def simple_tokenize(self, text: str, include_punctuation: bool = False) -> list[str]:
        """Tokenize without any language-specific handling."""
        text = unicodedata.normalize("NFC", text)
        return self._word_boundary_tokenize(text, include_punctuation)

    def tokenize(
        self,
        text: str,
        lang: str,
        include_punctuation: bool = False,
        external_wordlist: bool = False,
    ) -> list[str]:
        """
        Normalize text for a language and split it into tokens.

        `external_wordlist` selects jieba's general-purpose dictionary instead
        of the one matching the frequency tables; it only affects Chinese.
        """
        profile = get_language_profile(lang)
        text = self._normalizer.normalize(text, profile)

        if profile.tokenizer is TokenizerKind.DICTIONARY:
            return self._dictionary_tokenize(text, include_punctuation, external_wordlist)
        # TokenizerKind.NONE has no dedicated segmenter yet
        return self._word_boundary_tokenize(text, include_punctuation)

    def lossy_tokenize(
        self,
        text: str,
        lang: str,
        include_punctuation: bool = False,
        external_wordlist: bool = False,
    ) -> list[str]:
        """
        Tokenize into the keys used by the frequency tables.

        On top of `tokenize`, Chinese tokens are converted to Simplified
        characters and curly quotes become straight ASCII quotes.
        """
        profile = get_language_profile(lang)
        tokens = self.tokenize(text, lang, include_punctuation, external_wordlist)

        if profile.lookup_transliteration == "zh-Hans":
            tokens = [self._simplifier.simplify(token) for token in tokens]

        return [uncurl_quotes(token) for token in tokens]

    # ---------- internal ----------
    def _boundary_segments(self, text: str) -> list[str]:
        """Split at Unicode word boundaries, keeping spaceless runs whole."""
        segments: list[str] = []
        position = 0
        for match in self._config.spaceless_pattern.finditer(text):
            segments.extend(self._config.word_boundary_pattern.split(text[position : match.start()]))
            segments.append(match.group(0))
            position = match.end()
        segments.extend(self._config.word_boundary_pattern.split(text[position:]))
        return segments

    def _word_boundary_tokenize(self, text: str, include_punctuation: bool) -> list[str]:
        tokens = []
        for segment in self._boundary_segments(text):
            segment = segment.strip()
            if not segment:
                continue
            if not include_punctuation and not self._config.word_like_pattern.search(segment):
                continue
            tokens.append(segment.casefold())
        return tokens

    def _dictionary_tokenize(self, text: str, include_punctuation: bool, external_wordlist: bool) -> list[str]:
        segments = self._segmenter.segment(text, external_wordlist)
        if segments is None:
            return self._word_boundary_tokenize(text, include_punctuation)

        tokens = []
        for segment in segments:
            segment = segment.strip()
            if not segment:
                continue
            if not include_punctuation and self._config.punctuation_only_pattern.fullmatch(segment):
                continue
            tokens.append(segment.casefold())
        return tokens
