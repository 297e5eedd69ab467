"""
Services package for word frequency estimation.

This package contains the service classes used by the estimator, organized
by responsibility: language profiles, normalization, segmentation,
tokenization, table loading, caching and probability merging.
"""

from lexfreq.services.cache import FrequencyTableCache, LRUResultCache, closest_language
from lexfreq.services.language import get_language_profile, normalize_language_tag
from lexfreq.services.merge import ProbabilityMergeService
from lexfreq.services.normalization import TextNormalizationService
from lexfreq.services.segmentation import ChineseSegmenter, ChineseSimplifier
from lexfreq.services.tables import WordlistIndex, normalize_wordlist, read_cbpack
from lexfreq.services.tokenization import TokenizationService
from lexfreq.types import CacheInfo, LanguageProfile, LexFreqConfig

__all__ = [
    # Types (re-exported for convenience)
    "CacheInfo",
    "LanguageProfile",
    "LexFreqConfig",
    # Services
    "ChineseSegmenter",
    "ChineseSimplifier",
    "FrequencyTableCache",
    "LRUResultCache",
    "ProbabilityMergeService",
    "TextNormalizationService",
    "TokenizationService",
    "WordlistIndex",
    # Helpers
    "closest_language",
    "get_language_profile",
    "normalize_language_tag",
    "normalize_wordlist",
    "read_cbpack",
]
