"""
Tests for the Esperanto word tokenizer.
"""
import pytest

from tigo.tokenizer import ESPERANTO_ALPHABET, Token, iter_tokens, tokenize, word_pattern


class TestTokenizer:
    """Test suite for iter_tokens / tokenize."""

    def test_maximal_runs(self):
        assert tokenize("La birdoj kantas.") == ["La", "birdoj", "kantas"]

    def test_spans(self):
        tokens = list(iter_tokens("Ĉu vi?"))
        assert tokens == [Token("Ĉu", 0, 2), Token("vi", 3, 5)]

    def test_supersigned_letters(self):
        assert tokenize("ŝi manĝas ĉokoladon; Ĝis!") == ["ŝi", "manĝas", "ĉokoladon", "Ĝis"]

    @pytest.mark.parametrize("letter", ["q", "w", "x", "y", "Q", "W", "X", "Y"])
    def test_foreign_letters_not_in_alphabet(self, letter):
        assert letter not in ESPERANTO_ALPHABET

    def test_words_with_foreign_letters_are_skipped(self):
        assert tokenize("xbirdo quick kato") == ["kato"]

    def test_letters_glued_to_digits_are_skipped(self):
        assert tokenize("2020an birdo2 la") == ["la"]

    def test_hyphen_included_by_default(self):
        assert tokenize("nord-ameriko") == ["nord-ameriko"]

    def test_hyphen_excluded(self):
        assert tokenize("nord-ameriko", word_pattern(include_hyphens=False)) == ["nord", "ameriko"]

    def test_trailing_hyphen_not_part_of_token(self):
        assert tokenize("birdo- kato") == ["birdo", "kato"]

    def test_empty_line(self):
        assert tokenize("") == []
        assert tokenize("  12, 34! ") == []

    def test_pattern_is_cached(self):
        assert word_pattern(True) is word_pattern(True)
