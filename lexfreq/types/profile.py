"""
Language profile types.

A `LanguageProfile` captures everything the normalizer and the tokenizer need
to know about a language tag: which Unicode normal form to apply, how to fold
case, which transliteration to run and which segmenter splits its text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenizerKind(Enum):
    """Segmenter family used for a language."""

    GENERIC = "generic"
    DICTIONARY = "dictionary"
    # Spaceless scripts with no dedicated segmenter
    NONE = "none"


class DiacriticRemap(Enum):
    """Direction of the cedilla/comma-below remapping applied after case folding."""

    CEDILLAS = "cedillas"
    COMMAS = "commas"


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable normalization and tokenization settings for one language tag."""

    language: str
    script: str | None = None
    tokenizer: TokenizerKind = TokenizerKind.GENERIC
    normal_form: str = "NFKC"
    remove_marks: bool = False
    dotless_i: bool = False
    diacritics_under: DiacriticRemap | None = None
    transliteration: str | None = None
    lookup_transliteration: str | None = None

    @classmethod
    def neutral(cls, language: str = "und") -> LanguageProfile:
        """Profile used when a tag cannot be resolved: generic tokenizer, NFKC, nothing else."""
        return cls(language=language)

    @property
    def uses_dictionary_segmentation(self) -> bool:
        return self.tokenizer is TokenizerKind.DICTIONARY
