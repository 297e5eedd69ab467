"""
Frequency estimates for numeric tokens.

Wordlists do not store every number separately. Multi-digit sequences are
"smashed" into a shape where each digit becomes 0, so "1984" and "2024" share
the table entry "0000". The frequency of the actual number is then estimated
from a leading-digit (Benford) distribution, with a dedicated distribution
for four-digit tokens that are probably years.
"""
from __future__ import annotations

import regex

# Leading-digit distribution. Index 0 is the empirical rate of a leading zero,
# indices 1-9 follow Benford's law; together they sum to 1.
DIGIT_FREQS = (0.009, 0.300, 0.175, 0.124, 0.096, 0.078, 0.066, 0.057, 0.050, 0.045)

# Year distribution parameters
YEAR_LOG_PEAK = -1.9185
NOT_YEAR_PROB = 0.1
REFERENCE_YEAR = 2019
PLATEAU_WIDTH = 20
PAST_YEAR_SLOPE = 0.0083
FUTURE_YEAR_SLOPE = 0.2

DIGIT_RE = regex.compile(r"\d")
MULTI_DIGIT_RE = regex.compile(r"\d[\d.,]+")
PURE_DIGIT_RE = regex.compile(r"\d+")


def benford_freq(text: str) -> float:
    """Estimate the frequency of a digit string from its first digit and length."""
    first_digit = int(text[0])
    return DIGIT_FREQS[first_digit] / 10 ** (len(text) - 1)


def year_freq(text: str) -> float:
    """
    Estimate the frequency of a four-digit string that may be a year.

    Log-frequency is flat for PLATEAU_WIDTH years after REFERENCE_YEAR, decays
    slowly into the past and quickly into the future. A share of the Benford
    estimate is added because the digits might not be a year at all.
    """
    year = int(text)

    if year <= REFERENCE_YEAR:
        year_log_freq = YEAR_LOG_PEAK - PAST_YEAR_SLOPE * (REFERENCE_YEAR - year)
    elif year <= REFERENCE_YEAR + PLATEAU_WIDTH:
        year_log_freq = YEAR_LOG_PEAK
    else:
        year_log_freq = YEAR_LOG_PEAK - FUTURE_YEAR_SLOPE * (year - (REFERENCE_YEAR + PLATEAU_WIDTH))

    year_prob = 10.0**year_log_freq
    not_year_prob = NOT_YEAR_PROB * benford_freq(text)
    return year_prob + not_year_prob


def digit_freq(text: str) -> float:
    """
    Relative frequency of the specific digits in a token, compared to its smashed form.

    Every run of digits inside a multi-digit sequence contributes a factor, so
    "12,345.67" is scored as the three runs "12", "345" and "67".
    """
    freq = 1.0
    for match in MULTI_DIGIT_RE.findall(text):
        for digits in PURE_DIGIT_RE.findall(match):
            if len(digits) == 4:
                freq *= year_freq(digits)
            else:
                freq *= benford_freq(digits)
    return freq


def has_digit_sequence(text: str) -> bool:
    """Return True if the text contains a multi-digit sequence that smashing would rewrite."""
    return MULTI_DIGIT_RE.search(text) is not None


def _sub_zeroes(match: regex.Match[str]) -> str:
    return DIGIT_RE.sub("0", match.group(0))


def smash_numbers(text: str) -> str:
    """Replace every digit of each multi-digit sequence with 0."""
    return MULTI_DIGIT_RE.sub(_sub_zeroes, text)
