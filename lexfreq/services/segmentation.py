"""
Chinese simplification and dictionary-based segmentation.

Chinese has no spaces between words, so its text is segmented with jieba
against a dictionary matching the frequency tables. jieba is optional: when
it is not installed, or its dictionary file is missing, the segmenter reports
itself unavailable and callers fall back to generic word-boundary
segmentation. The capability is resolved once per segmenter, never per call.
"""
from __future__ import annotations

import importlib.util
import threading
from typing import Any

from lexfreq.paths import logger
from lexfreq.services.tables import load_msgpack
from lexfreq.types import LexFreqConfig

SIMPLIFIED_MAP_FILENAME = "_chinese_mapping.msgpack.gz"
CURATED_DICT_FILENAME = "jieba_zh.txt"
EXTERNAL_DICT_FILENAME = "jieba_zh_orig.txt"

SEGMENTER_BACKENDS = ("jieba", "fallback")


class ChineseSimplifier:
    """Character-by-character Traditional to Simplified mapping, loaded lazily from the data directory."""

    def __init__(self, config: LexFreqConfig):
        self._config = config
        self._table: dict[int, str] | None = None
        self._lock = threading.Lock()

    def _load_table(self) -> dict[int, str]:
        if self._table is None:
            with self._lock:
                if self._table is None:
                    path = self._config.data_path / SIMPLIFIED_MAP_FILENAME
                    raw = load_msgpack(path)
                    # Keys are code points, stored either as integers or as decimal strings
                    self._table = {int(codepoint): target for codepoint, target in raw.items()}
                    logger.debug(f"Loaded {len(self._table)} simplification entries from {path}")
        return self._table

    def to_simplified(self, text: str) -> str:
        """Map each character to its Simplified form, leaving case untouched."""
        return text.translate(self._load_table())

    def simplify(self, text: str) -> str:
        """Simplified form of the text, case-folded, as used for table lookups."""
        return self.to_simplified(text).casefold()


class ChineseSegmenter:
    """
    Dictionary segmentation entry point for Chinese-family languages.

    Backends: "jieba" (dictionary segmenter) or "fallback" (no dictionary
    segmentation; `segment` returns None and callers use generic
    segmentation). By default the backend is detected from the installed
    packages.
    """

    def __init__(self, config: LexFreqConfig, simplifier: ChineseSimplifier, backend: str | None = None):
        if backend is not None and backend not in SEGMENTER_BACKENDS:
            raise ValueError(f"unknown segmenter backend {backend!r}, expected one of {SEGMENTER_BACKENDS}")
        self._config = config
        self._simplifier = simplifier
        self.backend = backend or self._detect_backend()
        self._tokenizers: dict[bool, Any] = {}
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        return self.backend == "jieba"

    def segment(self, text: str, external_wordlist: bool = False) -> list[str] | None:
        """
        Segment text into words, or return None when no dictionary segmenter is usable.

        With the curated vocabulary the text is simplified before segmenting,
        because the dictionary holds Simplified Chinese, and the returned
        tokens are the matching spans of the original text. With the external
        vocabulary the text is segmented as-is.
        """
        tokenizer = self._get_tokenizer(external_wordlist)
        if tokenizer is None:
            return None

        if external_wordlist:
            return tokenizer.lcut(text)

        simplified = self._simplifier.to_simplified(text)
        if len(simplified) != len(text):
            return tokenizer.lcut(simplified, HMM=False)
        return [text[start:end] for _word, start, end in tokenizer.tokenize(simplified, HMM=False)]

    def _get_tokenizer(self, external_wordlist: bool):
        if not self.available:
            return None
        if external_wordlist in self._tokenizers:
            return self._tokenizers[external_wordlist]

        with self._lock:
            if external_wordlist not in self._tokenizers:
                self._tokenizers[external_wordlist] = self._build_tokenizer(external_wordlist)
        return self._tokenizers[external_wordlist]

    def _build_tokenizer(self, external_wordlist: bool):
        filename = EXTERNAL_DICT_FILENAME if external_wordlist else CURATED_DICT_FILENAME
        path = self._config.data_path / filename
        if not path.exists():
            logger.warning(
                f"jieba dictionary not found at {path}. "
                f"Chinese text will use generic word-boundary segmentation.",
            )
            return None

        import jieba

        logger.debug(f"Building jieba tokenizer from {path}")
        return jieba.Tokenizer(dictionary=str(path))

    def _detect_backend(self) -> str:
        if importlib.util.find_spec("jieba") is not None:
            return "jieba"
        logger.warning(
            "Dictionary segmentation disabled: jieba is not installed. "
            "Chinese text will use generic word-boundary segmentation. "
            "Install with: pip install 'lexfreq[cjk]'",
        )
        return "fallback"
