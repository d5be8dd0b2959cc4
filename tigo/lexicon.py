"""
Closed word lists consulted by the stemmer.

Function words (the article, pronouns, prepositions, particles...) carry no
inflectional ending, so stripping a final vowel from them would only produce
noise. They are kept whole. Numerals get their own list because constructed
numerals (du+dek, tri+cent) are validated against it.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet

# -----------------------------------------------------------------------------
# --- Exception words
# -----------------------------------------------------------------------------

ARTICLE = frozenset({"la"})

CONJUNCTIONS = frozenset({
    "kaj",    # and
    "ke",     # that
    "kie",    # where
    "minus",
    "plus",
    "se",     # if
})

INTERJECTIONS = frozenset({
    "aha", "bis", "damne", "dirlididi", "fi", "forfikiĝu", "ha", "ho",
    "hola", "hu", "hura", "muu", "nedankinde", "nu", "oho", "ve",
})

PRONOUNS = frozenset({
    "aliu", "ĉio", "ĉiu", "ili", "io", "iŝi", "iu", "kio", "kiu",
    "nenio", "neniu", "oni", "tio", "tiu",
})

DETERMINERS = frozenset({
    "ĉies", "ia", "kelka", "kia", "nenia", "tia", "tie",
})

PREPOSITIONS = frozenset({
    "cis", "ĉe", "da", "de", "disde", "ekde", "en", "ĝis", "je", "kun",
    "na", "po", "pri", "pro", "sen", "tra",
})

ADVERBS = frozenset({
    "malplej", "malpli", "plej", "pli", "plu", "tamen",
})

PARTICLES = frozenset({
    "ajn",  # ever (kiu ajn)
    "ĉu",   # question particle
    "ĉi",   # proximity (ĉi tiu)
    "jen",  # here is
    "ju",   # the (more)...
    "ne",   # not
})

# 11-20 written without the numeral-infix shape (root + dek)
ALTERNATE_NUMERALS = frozenset({"dekdu", "dekkvin", "dektri", "dekunu"})

# Dates: "la 3-a de majo", "en la 3-an"
DATE_FORMS = frozenset({"a", "an"})

ROMAN_NUMERALS = frozenset({
    "i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix",
    "x", "xi", "xii", "xiii", "xiv", "xv", "xvi", "xvii", "xviii",
})

BASIC_NUMERALS = frozenset({
    "unu", "du", "tri", "kvar", "kvin", "ses", "sep", "ok", "naŭ",
})

# Short roots that would be eaten by the -n/-j rule: min -> mi, ilin -> ili
PLURAL_DIRECT_CHECKS = frozenset({
    "ci", "ĝi", "gi", "iŝi", "li", "mi", "ni", "ri", "ŝi", "si", "ŝli", "vi",
    "ia", "io", "iu",
})

# Infixes of constructed numerals, checked in this order
NUMERAL_INFIXES = ("meg", "cent", "dek")


@dataclass(frozen=True)
class ExceptionSets:
    """Read-only word lists used as oracles by the stemmer."""

    stemmer_exceptions: FrozenSet[str]
    basic_numerals: FrozenSet[str] = BASIC_NUMERALS
    plural_direct_checks: FrozenSet[str] = PLURAL_DIRECT_CHECKS
    # Whole-word only; never a root for the -n / -j check
    roman_numerals: FrozenSet[str] = frozenset()

    def is_exception(self, word: str) -> bool:
        return word in self.stemmer_exceptions

    def is_basic_numeral(self, word: str) -> bool:
        return word in self.basic_numerals

    def is_roman_numeral(self, word: str) -> bool:
        return word in self.roman_numerals

    def is_plural_direct_check_root(self, root: str) -> bool:
        return root in self.plural_direct_checks


def build_exception_sets(roman_numerals: bool = True) -> ExceptionSets:
    """
    Build the exception lists.

    Args:
        roman_numerals: Also keep lowercase Roman numerals i..xviii whole
            (chapter and century numbers).
    """
    words = (
        ARTICLE | CONJUNCTIONS | INTERJECTIONS | PRONOUNS | DETERMINERS
        | PREPOSITIONS | ADVERBS | PARTICLES | ALTERNATE_NUMERALS | DATE_FORMS
    )
    return ExceptionSets(
        stemmer_exceptions=frozenset(words),
        roman_numerals=ROMAN_NUMERALS if roman_numerals else frozenset(),
    )


@lru_cache(maxsize=None)
def get_exception_sets(roman_numerals: bool = True) -> ExceptionSets:
    """Shared instance of :func:`build_exception_sets`."""
    return build_exception_sets(roman_numerals)
