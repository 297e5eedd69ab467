"""
Text normalization service.

Brings text into the form the wordlists were built from. The steps run in a
fixed order: Unicode normalization, transliteration, mark removal, case
folding, then the cedilla/comma remapping. Transliteration must see the
original case and mark removal must run before the remapping, otherwise
lookups drift from the stored keys.
"""
from __future__ import annotations

import unicodedata

from lexfreq.transliteration_data import TRANSLITERATION_TABLES
from lexfreq.types import DiacriticRemap, LanguageProfile, LexFreqConfig

_COMMAS_TO_CEDILLAS = str.maketrans({"ș": "ş", "ț": "ţ"})
_CEDILLAS_TO_COMMAS = str.maketrans({"ş": "ș", "ţ": "ț"})


def transliterate(table_name: str, text: str) -> str:
    """Transliterate text with a named table; unknown table names leave the text unchanged."""
    table = TRANSLITERATION_TABLES.get(table_name)
    if table is None:
        return text
    return text.translate(table)


def casefold_with_i_dots(text: str) -> str:
    """
    Case-fold for languages that distinguish dotted and dotless I.

    "İ" becomes "i" and "I" becomes "ı"; the text is composed first so that an
    "I" followed by a combining dot is treated as "İ".
    """
    text = unicodedata.normalize("NFC", text).replace("İ", "i").replace("I", "ı")
    return text.casefold()


def commas_to_cedillas(text: str) -> str:
    return text.translate(_COMMAS_TO_CEDILLAS)


def cedillas_to_commas(text: str) -> str:
    return text.translate(_CEDILLAS_TO_COMMAS)


class TextNormalizationService:
    """Language-aware text normalization."""

    def __init__(self, config: LexFreqConfig):
        self._config = config

    def remove_marks(self, text: str) -> str:
        """Remove nonspacing marks and the Arabic tatweel."""
        return self._config.mark_pattern.sub("", text)

    def normalize(self, text: str, profile: LanguageProfile) -> str:
        """Apply the profile's normalization steps in their fixed order."""
        text = unicodedata.normalize(profile.normal_form, text)

        if profile.transliteration:
            text = transliterate(profile.transliteration, text)

        if profile.remove_marks:
            text = self.remove_marks(text)

        text = casefold_with_i_dots(text) if profile.dotless_i else text.casefold()

        if profile.diacritics_under is DiacriticRemap.COMMAS:
            text = cedillas_to_commas(text)
        elif profile.diacritics_under is DiacriticRemap.CEDILLAS:
            text = commas_to_cedillas(text)

        return text
