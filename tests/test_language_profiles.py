"""
Language Profile Test Suite

Resolution of language tags to normalization and tokenization settings.
"""

import sys
from pathlib import Path

# Add the parent directory to path to import lexfreq
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexfreq.services.language import get_language_profile, normalize_language_tag, primary_subtag
from lexfreq.types import DiacriticRemap, LanguageProfile, TokenizerKind

# (tag, {field: expected value})
PROFILE_TEST_CASES = [
    # Chinese family
    ("zh", {"tokenizer": TokenizerKind.DICTIONARY, "normal_form": "NFKC", "lookup_transliteration": "zh-Hans"}),
    ("zh-Hans", {"tokenizer": TokenizerKind.DICTIONARY, "lookup_transliteration": "zh-Hans"}),
    ("zh-Hant", {"tokenizer": TokenizerKind.DICTIONARY, "lookup_transliteration": None}),
    ("zh-TW", {"tokenizer": TokenizerKind.DICTIONARY, "lookup_transliteration": None}),
    ("yue", {"tokenizer": TokenizerKind.DICTIONARY, "lookup_transliteration": None}),
    # Alphabetic scripts use NFC
    ("en", {"tokenizer": TokenizerKind.GENERIC, "normal_form": "NFC", "remove_marks": False}),
    ("en-US", {"tokenizer": TokenizerKind.GENERIC, "normal_form": "NFC"}),
    ("el", {"normal_form": "NFC"}),
    ("ru", {"normal_form": "NFC", "transliteration": None}),
    # Dotted and dotless I, cedillas and commas below
    ("tr", {"dotless_i": True, "diacritics_under": DiacriticRemap.CEDILLAS, "normal_form": "NFC"}),
    ("kk", {"dotless_i": True, "diacritics_under": DiacriticRemap.CEDILLAS}),
    ("ro", {"dotless_i": False, "diacritics_under": DiacriticRemap.COMMAS}),
    # Transliterated languages
    ("sr", {"transliteration": "sr-Latn", "normal_form": "NFC"}),
    ("az", {"transliteration": "az-Latn", "dotless_i": True, "diacritics_under": DiacriticRemap.CEDILLAS}),
    # Abjads drop vowel marks
    ("ar", {"remove_marks": True, "normal_form": "NFKC"}),
    ("he", {"remove_marks": True}),
    ("fa", {"remove_marks": True}),
    # Spaceless scripts
    ("th", {"tokenizer": TokenizerKind.NONE}),
    ("km", {"tokenizer": TokenizerKind.NONE}),
    ("lo", {"tokenizer": TokenizerKind.NONE}),
    ("my", {"tokenizer": TokenizerKind.NONE}),
    # Japanese and Korean use generic segmentation
    ("ja", {"tokenizer": TokenizerKind.GENERIC, "normal_form": "NFKC"}),
    ("ko", {"tokenizer": TokenizerKind.GENERIC, "normal_form": "NFKC"}),
]


def test_language_profiles():
    """Each tag resolves to the expected profile fields."""
    passed = 0
    failed = 0

    for tag, expected in PROFILE_TEST_CASES:
        profile = get_language_profile(tag)
        mismatches = {
            field: getattr(profile, field)
            for field, value in expected.items()
            if getattr(profile, field) != value
        }
        if not mismatches:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{tag}': expected {expected}, got {mismatches}")

    assert failed == 0, f"Language profile tests: {failed} failures out of {len(PROFILE_TEST_CASES)} tests"
    print(f"Language profile tests: {passed} passed, {failed} failed")


def test_profile_records_maximized_script():
    assert get_language_profile("zh").script == "Hans"
    assert get_language_profile("zh-TW").script == "Hant"
    assert get_language_profile("sr").script == "Cyrl"
    assert get_language_profile("en").language == "en"


def test_malformed_tag_does_not_raise():
    for tag in ("!!!", "not a tag"):
        profile = get_language_profile(tag)
        assert profile.tokenizer is TokenizerKind.GENERIC
        assert not profile.remove_marks
        assert not profile.dotless_i
        assert profile.diacritics_under is None
        assert profile.transliteration is None
        assert profile.lookup_transliteration is None


def test_neutral_profile():
    profile = LanguageProfile.neutral()
    assert profile.language == "und"
    assert profile.tokenizer is TokenizerKind.GENERIC
    assert not profile.uses_dictionary_segmentation


def test_profiles_are_cached_per_tag():
    assert get_language_profile("tr") is get_language_profile("tr")


def test_normalize_language_tag():
    assert normalize_language_tag("en_US") == "en-us"
    assert normalize_language_tag("zh-Hant") == "zh-hant"
    assert normalize_language_tag("EN") == "en"
    assert primary_subtag("pt-BR") == "pt"
    assert primary_subtag("zh_Hant_TW") == "zh"


if __name__ == "__main__":
    test_language_profiles()
