"""Alphabetic tokenizer shared by the entropy and topology engines."""

from __future__ import annotations

from typing import Iterator

import regex

MIN_TOKEN_LENGTH: int = 2

# Unicode Alphabetic property: letters plus the vowel signs and marks
# (Devanagari matras, Arabic harakat) that belong inside words
_ALPHABETIC_RUN_RE = regex.compile(r"\p{Alphabetic}+")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase tokens made of alphabetic characters only.

    Every maximal run of Unicode Alphabetic characters is one token.
    Digits, punctuation, symbols and whitespace only separate tokens.
    Single-character runs are dropped. No stemming.
    """
    return [
        word.lower()
        for word in _ALPHABETIC_RUN_RE.findall(text)
        if len(word) >= MIN_TOKEN_LENGTH
    ]


def ngrams(tokens: list[str], n: int) -> Iterator[str]:
    """Yield contiguous n-grams joined by a single space."""
    if n < 1:
        return
    for i in range(len(tokens) - n + 1):
        yield " ".join(tokens[i : i + n])
