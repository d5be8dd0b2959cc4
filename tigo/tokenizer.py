"""
Word-boundary tokenizer for Esperanto text.

Esperanto uses the Latin alphabet plus ĉ, ĝ, ĥ, ĵ, ŝ, ŭ but has no q, w, x
or y. A token is a maximal run of alphabet letters (and optionally hyphens)
standing between word boundaries. A letter run glued to a digit or to a
foreign letter has no boundary there, so it is not a token and stays
untouched.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator, List, NamedTuple, Optional

ESPERANTO_LOWER = "abcĉdefgĝhĥijĵklmnoprsŝtuŭvz"
ESPERANTO_UPPER = ESPERANTO_LOWER.upper()
ESPERANTO_ALPHABET = ESPERANTO_LOWER + ESPERANTO_UPPER


class Token(NamedTuple):
    """A word and its [start, end) span in the line it came from."""
    text: str
    start: int
    end: int


@lru_cache(maxsize=None)
def word_pattern(include_hyphens: bool = True) -> re.Pattern:
    """Compiled pattern matching one token."""
    letters = re.escape(ESPERANTO_ALPHABET)
    if include_hyphens:
        letters += r"\-"
    return re.compile(rf"\b[{letters}]+\b")


def iter_tokens(line: str, pattern: Optional[re.Pattern] = None) -> Iterator[Token]:
    """Yield the tokens of ``line`` left to right."""
    pattern = pattern or word_pattern()
    for match in pattern.finditer(line):
        yield Token(match.group(), match.start(), match.end())


def tokenize(line: str, pattern: Optional[re.Pattern] = None) -> List[str]:
    """Return just the token strings of ``line``."""
    return [token.text for token in iter_tokens(line, pattern)]
