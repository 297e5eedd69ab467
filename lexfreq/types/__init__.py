"""
Types package for word frequency estimation.

This package contains configuration, language profile and result types
shared by every service of the estimator.
"""

from lexfreq.types.config import LexFreqConfig
from lexfreq.types.profile import DiacriticRemap, LanguageProfile, TokenizerKind
from lexfreq.types.results import CacheInfo

__all__ = [
    "CacheInfo",
    "DiacriticRemap",
    "LanguageProfile",
    "LexFreqConfig",
    "TokenizerKind",
]
