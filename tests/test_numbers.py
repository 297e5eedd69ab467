"""
Numeric Token Test Suite

Digit smashing and the Benford and year distributions used to estimate the
frequency of specific numbers.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import lexfreq
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexfreq.utils.numbers import (
    DIGIT_FREQS,
    benford_freq,
    digit_freq,
    has_digit_sequence,
    smash_numbers,
    year_freq,
)

SMASH_TEST_CASES = [
    ("abc1234def", "abc0000def"),
    ("1", "1"),
    ("a1b", "a1b"),
    ("42", "00"),
    ("12,345.67", "00,000.00"),
    ("route 66 and 1984", "route 00 and 0000"),
    ("no digits", "no digits"),
]


def test_smash_numbers():
    passed = 0
    failed = 0

    for text, expected in SMASH_TEST_CASES:
        result = smash_numbers(text)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{text}': expected {expected!r}, got {result!r}")

    assert failed == 0, f"Smashing tests: {failed} failures out of {len(SMASH_TEST_CASES)} tests"


def test_has_digit_sequence_matches_smashing():
    for text, smashed in SMASH_TEST_CASES:
        assert has_digit_sequence(text) == (text != smashed)


def test_digit_freqs_form_a_distribution():
    assert len(DIGIT_FREQS) == 10
    assert sum(DIGIT_FREQS) == pytest.approx(1.0)


def test_benford_freq():
    assert benford_freq("1") == pytest.approx(0.3)
    assert benford_freq("25") == pytest.approx(0.0175)
    assert benford_freq("900") == pytest.approx(0.00045)
    assert benford_freq("07") == pytest.approx(0.0009)


def test_year_freq_shape():
    peak = 10**-1.9185
    assert year_freq("2019") == pytest.approx(peak + 0.1 * benford_freq("2019"))
    # Flat for twenty years after the reference year
    assert year_freq("2030") == pytest.approx(year_freq("2019"))
    assert year_freq("2039") == pytest.approx(year_freq("2019"))
    # Slow decay into the past, fast decay into the future
    assert year_freq("1919") == pytest.approx(10 ** (-1.9185 - 0.83) + 0.1 * benford_freq("1919"))
    assert year_freq("2045") == pytest.approx(10 ** (-1.9185 - 1.2) + 0.1 * benford_freq("2045"))
    assert year_freq("1990") > year_freq("1800") > year_freq("1000")


def test_digit_freq():
    assert digit_freq("abc") == 1.0
    assert digit_freq("7") == 1.0
    assert digit_freq("1234") == pytest.approx(year_freq("1234"))
    assert digit_freq("42") == pytest.approx(benford_freq("42"))
    assert digit_freq("12,345.67") == pytest.approx(
        benford_freq("12") * benford_freq("345") * benford_freq("67"),
    )
    assert digit_freq("1984 and 42") == pytest.approx(year_freq("1984") * benford_freq("42"))


if __name__ == "__main__":
    test_smash_numbers()
