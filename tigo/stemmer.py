"""
Rule-based Esperanto stemmer.

Esperanto inflection is almost entirely regular: every content word ends in a
part-of-speech vowel, optionally followed by plural -j and accusative -n, and
verbs carry one of a handful of tense/mood endings. Stemming is therefore a
matter of finding the longest known ending that still leaves a plausible root,
while leaving function words and numerals alone.

The stemmer never fails. Whenever no rule applies confidently, the word is
returned unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .lexicon import NUMERAL_INFIXES, ExceptionSets, get_exception_sets
from .rules import RuleSet, RuleVariant, get_rule_set

logger = logging.getLogger(__name__)

VOWELS = frozenset("aeiou")

DEFAULT_MIN_STEM_LENGTH = 2

# Which step of the resolver decided the result
EXCEPTION = "exception"
NUMERAL = "numeral"
PLURAL_DIRECT = "plural_direct"
HYPHEN = "hyphen"
SUFFIX = "suffix"
NO_MATCH = "no_match"
TOO_SHORT = "too_short"


@dataclass(frozen=True)
class StemTrace:
    """Outcome of stemming one word, with the step that produced it."""

    word: str
    stem: str
    rule: str
    suffix: Optional[str] = None
    offset: int = 0
    min_length: int = DEFAULT_MIN_STEM_LENGTH

    @property
    def changed(self) -> bool:
        return self.stem != self.word


def first_vowel_index(word: str) -> int:
    """Index of the first vowel in ``word``, or -1 if there is none."""
    for i, ch in enumerate(word):
        if ch in VOWELS:
            return i
    return -1


class Stemmer:
    """
    Strips inflectional endings from Esperanto words.

    Instances hold no per-call state; the rule table and word lists are
    immutable, so one stemmer can be shared across threads.
    """

    def __init__(
        self,
        rule_set: Optional[RuleSet] = None,
        exceptions: Optional[ExceptionSets] = None,
        min_stem_length: int = DEFAULT_MIN_STEM_LENGTH,
    ):
        if min_stem_length < 1:
            raise ValueError(f"min_stem_length must be at least 1, got {min_stem_length}")

        self.rule_set = rule_set or get_rule_set(RuleVariant.FULL)
        self.exceptions = exceptions or get_exception_sets(self.rule_set.roman_numerals)
        self.min_stem_length = min_stem_length

        logger.debug(
            "Stemmer ready: variant=%s, %d suffixes (max length %d), %d exception words",
            self.rule_set.variant.value,
            len(self.rule_set.table),
            self.rule_set.table.max_length,
            len(self.exceptions.stemmer_exceptions),
        )

    @property
    def variant(self) -> RuleVariant:
        return self.rule_set.variant

    def stem_word(self, word: str) -> str:
        """
        Return the stem of ``word``.

        The result is always a prefix of ``word`` with its original casing
        (or ``word`` itself).

        Examples:
            >>> Stemmer().stem_word("birdojn")
            'bird'
            >>> Stemmer().stem_word("La")
            'La'
        """
        return self._resolve(word).stem

    def explain(self, word: str) -> StemTrace:
        """Stem ``word`` and report which rule decided the result."""
        return self._resolve(word)

    __call__ = stem_word

    def _is_constructed_numeral(self, lowered: str) -> bool:
        # Only the first infix found (meg, then cent, then dek) is considered
        for infix in NUMERAL_INFIXES:
            index = lowered.find(infix)
            if index != -1:
                return self.exceptions.is_basic_numeral(lowered[:index])
        return False

    def _search_window(self, suffix: str) -> str:
        """Skip candidates that cannot be in the table."""
        max_length = self.rule_set.table.max_length
        if max_length == 0:
            return ""
        if len(suffix) > max_length:
            suffix = suffix[-max_length:]
        # Anything starting before the last hyphen has a non-leading '-'
        hyphen = suffix.rfind("-")
        if hyphen > 0:
            suffix = suffix[hyphen:]
        return suffix

    def _resolve(self, word: str) -> StemTrace:
        lowered = word.lower()
        length = len(lowered)
        local_min = max(self.min_stem_length, first_vowel_index(lowered) + 1)

        if (self.exceptions.is_exception(lowered) or self.exceptions.is_basic_numeral(lowered)
                or self.exceptions.is_roman_numeral(lowered)):
            return StemTrace(word, word, EXCEPTION, min_length=local_min)

        if self._is_constructed_numeral(lowered):
            return StemTrace(word, word, NUMERAL, min_length=local_min)

        suffix = lowered
        offset = 0

        if self.rule_set.strip_plural_accusative:
            # Accusative
            if suffix.endswith("n"):
                offset += 1
                suffix = suffix[:-1]
            # Plural
            if suffix.endswith("j"):
                offset += 1
                suffix = suffix[:-1]

            if offset:
                root = lowered[:length - offset]
                if self.exceptions.is_plural_direct_check_root(root) or self.exceptions.is_exception(root):
                    return StemTrace(word, word[:length - offset], PLURAL_DIRECT, offset=offset,
                                     min_length=local_min)

        table = self.rule_set.table
        hyphen_sentinel = self.rule_set.hyphen_sentinel

        suffix = self._search_window(suffix)
        while suffix:
            if suffix in table:
                if length - table.strip_length(suffix) - offset >= local_min:
                    break
                if hyphen_sentinel and suffix[0] == "-":
                    break
            suffix = suffix[1:]

        if not suffix:
            return StemTrace(word, word, NO_MATCH, offset=offset, min_length=local_min)

        stem_length = length - table.strip_length(suffix) - offset

        if hyphen_sentinel and suffix[0] == "-" and len(suffix) + offset < length:
            return StemTrace(word, word[:stem_length], HYPHEN, suffix, offset, local_min)

        if stem_length < local_min:
            return StemTrace(word, word, TOO_SHORT, suffix, offset, local_min)

        return StemTrace(word, word[:stem_length], SUFFIX, suffix, offset, local_min)


@lru_cache(maxsize=None)
def default_stemmer() -> Stemmer:
    """Shared stemmer using the full rule set."""
    return Stemmer()


def stem(word: str) -> str:
    """Stem a single word with the full rule set."""
    return default_stemmer().stem_word(word)
