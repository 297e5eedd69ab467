"""
Language profile resolution.

Maps a language tag to a `LanguageProfile`. The linguistic policy lives in
`PROFILE_RULES`, a declarative table evaluated once per tag; the resolver only
canonicalizes the tag, maximizes it to find its script and folds the matching
rules into a profile.

Rules are applied in table order and the first rule to set a field wins, so
Chinese keeps its dictionary tokenizer even though its script is also
spaceless.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cache

import langcodes

from lexfreq.paths import logger
from lexfreq.types import DiacriticRemap, LanguageProfile, TokenizerKind
from lexfreq.types.config import SPACELESS_SCRIPTS


@dataclass(frozen=True)
class ProfileRule:
    """One row of the rule table: a language or script condition and the profile fields it sets."""

    fields: dict[str, object]
    languages: frozenset[str] = frozenset()
    scripts: frozenset[str] = frozenset()
    excluded_scripts: frozenset[str] = frozenset()

    def matches(self, language: str, script: str | None) -> bool:
        if self.languages and language not in self.languages:
            return False
        if self.scripts and script not in self.scripts:
            return False
        return script not in self.excluded_scripts


SPACELESS_SCRIPT_CODES = frozenset(SPACELESS_SCRIPTS)

PROFILE_RULES: tuple[ProfileRule, ...] = (
    # Tokenizer
    ProfileRule(languages=frozenset({"zh", "yue"}), fields={"tokenizer": TokenizerKind.DICTIONARY}),
    ProfileRule(scripts=SPACELESS_SCRIPT_CODES, fields={"tokenizer": TokenizerKind.NONE}),
    # Normal form
    ProfileRule(scripts=frozenset({"Latn", "Grek", "Cyrl"}), fields={"normal_form": "NFC"}),
    # Abjads: vowel marks are optional and inconsistently written
    ProfileRule(scripts=frozenset({"Arab", "Hebr"}), fields={"remove_marks": True}),
    # Dotted and dotless I, cedillas and commas below
    ProfileRule(
        languages=frozenset({"tr", "az", "kk"}),
        fields={"dotless_i": True, "diacritics_under": DiacriticRemap.CEDILLAS},
    ),
    ProfileRule(languages=frozenset({"ro"}), fields={"diacritics_under": DiacriticRemap.COMMAS}),
    # Languages written in Cyrillic and Latin, looked up in Latin
    ProfileRule(languages=frozenset({"sr"}), fields={"transliteration": "sr-Latn"}),
    ProfileRule(languages=frozenset({"az"}), fields={"transliteration": "az-Latn"}),
    # Chinese lookups use Simplified characters unless the text is Traditional
    ProfileRule(
        languages=frozenset({"zh"}),
        excluded_scripts=frozenset({"Hant"}),
        fields={"lookup_transliteration": "zh-Hans"},
    ),
)


def normalize_language_tag(tag: str) -> str:
    """Canonical, lowercased form of a language tag, used for matching and cache keys."""
    safe_tag = tag.replace("_", "-").strip()
    try:
        return langcodes.standardize_tag(safe_tag).lower()
    except ValueError:
        return safe_tag.lower()


def primary_subtag(tag: str) -> str:
    return normalize_language_tag(tag).split("-")[0]


@cache  # one entry per distinct tag
def get_language_profile(tag: str) -> LanguageProfile:
    """
    Resolve a language tag to its profile.

    Tags that cannot be parsed degrade to the neutral profile instead of
    failing, so a malformed tag never aborts normalization or tokenization.
    """
    try:
        language = langcodes.Language.get(tag.replace("_", "-"))
        maximized = language.maximize()
    except ValueError as e:
        logger.debug(f"Unparseable language tag {tag!r}, using the neutral profile: {e}")
        return LanguageProfile.neutral()

    primary = language.language or "und"
    script = maximized.script

    profile = LanguageProfile(language=primary, script=script)
    assigned: set[str] = set()
    for rule in PROFILE_RULES:
        if not rule.matches(primary, script):
            continue
        updates = {name: value for name, value in rule.fields.items() if name not in assigned}
        if updates:
            profile = replace(profile, **updates)
            assigned.update(updates)
    return profile
