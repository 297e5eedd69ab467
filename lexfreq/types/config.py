"""
Configuration for word frequency estimation.

`LexFreqConfig` bundles the data location, cache sizing, the merge constants
and every precompiled pattern the tokenizer relies on, so a single immutable
object can be handed to all services.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import regex

from lexfreq.paths import resolve_data_dir

# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

# Scripts written without spaces between words. The Unicode word-break rules
# split these between every letter, so runs of them are kept together.
SPACELESS_SCRIPTS = ("Hira", "Kana", "Thai", "Khmr", "Laoo", "Mymr", "Tale", "Talu", "Lana")
EXTRA_JAPANESE_CHARACTERS = "ー々〻〆"


def _build_spaceless_pattern() -> regex.Pattern[str]:
    """Build a pattern matching maximal runs of ideographs and spaceless-script letters."""
    pieces = [r"\p{IsIdeo}"] + [rf"\p{{Script={script}}}" for script in SPACELESS_SCRIPTS]
    return regex.compile(f"[{''.join(pieces)}{EXTRA_JAPANESE_CHARACTERS}]+")


_SPACELESS_PATTERN = _build_spaceless_pattern()
# Version 1 behaviour is needed to split on zero-width matches; WORD switches
# \b to the default Unicode word boundaries.
_WORD_BOUNDARY_PATTERN = regex.compile(r"\b", regex.V1 | regex.WORD)
_WORD_LIKE_PATTERN = regex.compile(r"\w")
_PUNCTUATION_ONLY_PATTERN = regex.compile(r"[\p{P}\p{S}\s]+")
_MARK_PATTERN = regex.compile(r"[\p{Mn}\u0640]")


@dataclass(frozen=True)
class LexFreqConfig:
    """Immutable configuration shared by every estimator service."""

    # Data location
    data_dir: str

    # Cache sizing
    cache_size: int

    # Wordlist used when the caller does not name one
    default_wordlist: str

    # Merge constants: each inferred word boundary costs one order of
    # magnitude, each extra character of a composed Chinese word a factor 3
    inferred_space_factor: float
    char_combination_penalty: float
    significant_digits: int

    # Precompiled patterns
    spaceless_pattern: regex.Pattern[str]
    word_boundary_pattern: regex.Pattern[str]
    word_like_pattern: regex.Pattern[str]
    punctuation_only_pattern: regex.Pattern[str]
    mark_pattern: regex.Pattern[str]

    @classmethod
    def create_default(cls) -> LexFreqConfig:
        """Factory method for the default configuration."""
        return cls(
            data_dir=str(resolve_data_dir()),
            cache_size=100_000,
            default_wordlist="best",
            inferred_space_factor=10.0,
            char_combination_penalty=3.0,
            significant_digits=3,
            spaceless_pattern=_SPACELESS_PATTERN,
            word_boundary_pattern=_WORD_BOUNDARY_PATTERN,
            word_like_pattern=_WORD_LIKE_PATTERN,
            punctuation_only_pattern=_PUNCTUATION_ONLY_PATTERN,
            mark_pattern=_MARK_PATTERN,
        )

    def with_data_dir(self, data_dir: str | Path) -> LexFreqConfig:
        """Immutable update method for the data directory."""
        return replace(self, data_dir=str(data_dir))

    def with_cache_size(self, cache_size: int) -> LexFreqConfig:
        """Immutable update method for the result cache capacity."""
        return replace(self, cache_size=cache_size)

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir)
