"""
Suffix rule tables for the Esperanto stemmer.

Endings are grouped the way Esperanto grammar groups them (part of speech,
mood, tense, voice, participles, number/case). A rule variant selects which
groups are active and which extra resolver steps are switched on. The four
variants mirror how the rule set grew: from bare vowel endings up to
participles and hyphenated compounds.

Source: https://en.wikipedia.org/wiki/Esperanto_grammar
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Iterable, Iterator

# -----------------------------------------------------------------------------
# --- Suffix groups
# -----------------------------------------------------------------------------

PART_OF_SPEECH = frozenset({
    "o",  # noun
    "a",  # adjective
    "e",  # adverb
    "i",  # infinitive
})

MOOD = frozenset({
    "u",   # volitive (imperative)
    "us",  # conditional
})

INDICATIVE = frozenset({
    "is",  # past
    "as",  # present
    "os",  # future
})

_ACTIVE_STEMS = ("int", "ant", "ont")
_PASSIVE_STEMS = ("it", "at", "ot")
_PARTICIPLE_STEMS = _ACTIVE_STEMS + _PASSIVE_STEMS

# Adjectival participles: vidinta, vidata, ...
VOICE = frozenset(stem + "a" for stem in _PARTICIPLE_STEMS)

# Compound tenses fused onto the participle: estis vidinta -> vidintis
COMPOUND_TENSE = frozenset(
    stem + tense
    for stem in _PARTICIPLE_STEMS
    for tense in ("as", "is", "os", "us")
)

# Adverbial and nominal participles: vidinte, vidanto, ...
NOMINAL_PARTICIPLE = frozenset(
    stem + ending
    for stem in _PARTICIPLE_STEMS
    for ending in ("e", "o")
)

PLURAL_ACCUSATIVE = frozenset({"oj", "aj", "on", "an", "ojn", "ajn"})

# A leading '-' marks a hyphen boundary; everything from the hyphen on is cut.
HYPHEN = frozenset({"-o", "-a", "-e", "-"})


class RuleVariant(Enum):
    """Rule set variants, from the smallest to the richest."""
    BASIC = "basic"
    VERBAL = "verbal"
    PARTICIPIAL = "participial"
    FULL = "full"

    @classmethod
    def from_name(cls, name: str) -> "RuleVariant":
        """Look up a variant by its (case-insensitive) name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown rule variant '{name}'. Expected one of: {valid}")


_VARIANT_GROUPS = {
    RuleVariant.BASIC: (PART_OF_SPEECH, PLURAL_ACCUSATIVE),
    RuleVariant.VERBAL: (PART_OF_SPEECH, PLURAL_ACCUSATIVE, MOOD, INDICATIVE),
    RuleVariant.PARTICIPIAL: (
        PART_OF_SPEECH, PLURAL_ACCUSATIVE, MOOD, INDICATIVE,
        VOICE, COMPOUND_TENSE, NOMINAL_PARTICIPLE,
    ),
    RuleVariant.FULL: (
        PART_OF_SPEECH, PLURAL_ACCUSATIVE, MOOD, INDICATIVE,
        VOICE, COMPOUND_TENSE, NOMINAL_PARTICIPLE, HYPHEN,
    ),
}


class RuleTable:
    """
    Immutable set of removable suffixes.

    The strip length of a suffix is always its own length, so the table is a
    plain set with a length function rather than a suffix -> removal mapping.
    """

    __slots__ = ("_suffixes", "_max_length")

    def __init__(self, suffixes: Iterable[str]):
        suffixes = frozenset(suffixes)
        if "" in suffixes:
            raise ValueError("Suffixes must be non-empty")
        # The stemmer's search window relies on '-' only ever leading a suffix
        for suffix in suffixes:
            if "-" in suffix[1:]:
                raise ValueError(f"Hyphen may only lead a suffix: '{suffix}'")
        self._suffixes: FrozenSet[str] = suffixes
        self._max_length = max((len(s) for s in suffixes), default=0)

    @property
    def suffixes(self) -> FrozenSet[str]:
        return self._suffixes

    @property
    def max_length(self) -> int:
        """Length of the longest suffix in the table."""
        return self._max_length

    def contains(self, suffix: str) -> bool:
        return suffix in self._suffixes

    def strip_length(self, suffix: str) -> int:
        """Number of characters removed for ``suffix``."""
        if suffix not in self._suffixes:
            raise KeyError(suffix)
        return len(suffix)

    def __contains__(self, suffix: object) -> bool:
        return suffix in self._suffixes

    def __iter__(self) -> Iterator[str]:
        # Longest first, then alphabetical, so listings are stable
        return iter(sorted(self._suffixes, key=lambda s: (-len(s), s)))

    def __len__(self) -> int:
        return len(self._suffixes)

    def __repr__(self) -> str:
        return f"RuleTable({len(self)} suffixes, max_length={self._max_length})"


@dataclass(frozen=True)
class RuleSet:
    """A rule table plus the resolver features that go with it."""

    variant: RuleVariant
    table: RuleTable
    strip_plural_accusative: bool  # -n / -j pre-pass and plural-direct check
    hyphen_sentinel: bool          # hyphen suffixes bypass the minimum stem length
    roman_numerals: bool           # i..xviii are exception words


def build_rule_set(variant: RuleVariant = RuleVariant.FULL) -> RuleSet:
    """Construct a fresh rule set for ``variant``."""
    if isinstance(variant, str):
        variant = RuleVariant.from_name(variant)

    suffixes = frozenset().union(*_VARIANT_GROUPS[variant])
    richer = variant in (RuleVariant.PARTICIPIAL, RuleVariant.FULL)

    return RuleSet(
        variant=variant,
        table=RuleTable(suffixes),
        strip_plural_accusative=richer,
        hyphen_sentinel=variant is RuleVariant.FULL,
        roman_numerals=variant is RuleVariant.FULL,
    )


@lru_cache(maxsize=None)
def get_rule_set(variant: RuleVariant = RuleVariant.FULL) -> RuleSet:
    """Shared, read-only rule set for ``variant``."""
    return build_rule_set(variant)
