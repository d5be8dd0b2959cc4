"""
Tests for the exception word lists.
"""
import pytest

from tigo.lexicon import (
    BASIC_NUMERALS, NUMERAL_INFIXES, PLURAL_DIRECT_CHECKS, ROMAN_NUMERALS,
    ExceptionSets, build_exception_sets, get_exception_sets,
)


class TestExceptionSets:
    """Test suite for ExceptionSets."""

    def setup_method(self):
        self.sets = build_exception_sets()

    @pytest.mark.parametrize("word", ["la", "kaj", "ĉu", "tamen", "dekdu", "an", "kiu", "ĝis"])
    def test_grammatical_exceptions(self, word):
        assert self.sets.is_exception(word) is True

    @pytest.mark.parametrize("word", ["birdo", "kiuj", "La", "l", ""])
    def test_exact_match_only(self, word):
        assert self.sets.is_exception(word) is False

    def test_basic_numerals(self):
        assert BASIC_NUMERALS == {"unu", "du", "tri", "kvar", "kvin", "ses", "sep", "ok", "naŭ"}
        assert self.sets.is_basic_numeral("naŭ") is True
        assert self.sets.is_basic_numeral("dek") is False

    def test_plural_direct_roots(self):
        assert self.sets.is_plural_direct_check_root("mi") is True
        assert self.sets.is_plural_direct_check_root("ŝli") is True
        assert self.sets.is_plural_direct_check_root("ili") is False
        assert "iu" in PLURAL_DIRECT_CHECKS

    def test_roman_numerals_optional(self):
        without = build_exception_sets(roman_numerals=False)
        assert self.sets.is_roman_numeral("xviii") is True
        assert without.is_roman_numeral("xviii") is False
        assert self.sets.roman_numerals == ROMAN_NUMERALS
        assert self.sets.stemmer_exceptions == without.stemmer_exceptions

    @pytest.mark.parametrize("word", ["i", "v", "x", "iv"])
    def test_roman_numerals_are_not_exception_roots(self, word):
        assert self.sets.is_roman_numeral(word) is True
        assert self.sets.is_exception(word) is False

    def test_numeral_infix_priority(self):
        assert NUMERAL_INFIXES == ("meg", "cent", "dek")

    def test_sets_are_immutable(self):
        assert isinstance(self.sets.stemmer_exceptions, frozenset)
        with pytest.raises(AttributeError):
            self.sets.basic_numerals = frozenset()

    def test_shared_instance(self):
        assert get_exception_sets(True) is get_exception_sets(True)
        assert isinstance(get_exception_sets(False), ExceptionSets)
