"""Deterministic text cleaning ahead of scoring.

Removes noise (case, digits, punctuation, stop words) while keeping the
semantic material. Cleaning is optional: the engines work on raw text.
"""

from __future__ import annotations

import math
import unicodedata
from collections import Counter
from dataclasses import dataclass
from enum import Enum

import regex

from ._stop_words import ENGLISH_STOP_WORDS, FRENCH_STOP_WORDS, STOP_WORDS

_DIGITS_RE = regex.compile(r"\d+")
# Anything that is neither Unicode Alphabetic nor whitespace
_NON_ALPHABETIC_RE = regex.compile(r"[^\p{Alphabetic}\s]")

# Floor for the dynamic stop-word count so tiny texts keep their words
_MIN_DYNAMIC_COUNT = 3


class Language(str, Enum):
    FRENCH = "french"
    ENGLISH = "english"
    BOTH = "both"


_STOP_WORD_SETS = {
    Language.FRENCH: FRENCH_STOP_WORDS,
    Language.ENGLISH: ENGLISH_STOP_WORDS,
    Language.BOTH: STOP_WORDS,
}


@dataclass(slots=True, frozen=True)
class CleanerConfig:
    remove_stopwords: bool = True
    lowercase: bool = True
    remove_punctuation: bool = True
    remove_numbers: bool = True
    normalize_unicode: bool = True   # NFC
    language: Language = Language.BOTH
    min_word_length: int = 2         # characters
    dynamic_stopwords: bool = False  # drop Zipf-head words by frequency
    dynamic_stopwords_threshold: float = 0.01

    def __post_init__(self) -> None:
        if self.min_word_length < 0:
            raise ValueError(
                f"min_word_length must be >= 0, got {self.min_word_length}"
            )
        if not (0.0 <= self.dynamic_stopwords_threshold <= 1.0):
            raise ValueError(
                "dynamic_stopwords_threshold must be in [0.0, 1.0], "
                f"got {self.dynamic_stopwords_threshold}"
            )


def _dynamic_stop_words(words: list[str], threshold: float) -> set[str]:
    """Words whose share of the text reaches threshold (min count 3)."""
    total = len(words)
    if total == 0:
        return set()
    min_count = max(_MIN_DYNAMIC_COUNT, math.ceil(total * threshold))
    return {w for w, c in Counter(words).items() if c >= min_count}


def clean_text(text: str, config: CleanerConfig | None = None) -> str:
    """Clean text according to config and return space-joined words."""
    if config is None:
        config = CleanerConfig()

    result = text
    if config.normalize_unicode:
        result = unicodedata.normalize("NFC", result)
    if config.lowercase:
        result = result.lower()
    if config.remove_numbers:
        result = _DIGITS_RE.sub(" ", result)
    if config.remove_punctuation:
        result = _NON_ALPHABETIC_RE.sub(" ", result)

    words = [w for w in result.split() if len(w) >= config.min_word_length]

    stop_words = (
        _STOP_WORD_SETS[config.language]
        if config.remove_stopwords
        else frozenset()
    )
    dynamic = (
        _dynamic_stop_words(words, config.dynamic_stopwords_threshold)
        if config.dynamic_stopwords
        else set()
    )

    return " ".join(
        w for w in words if w not in stop_words and w not in dynamic
    )


def clean_default(text: str) -> str:
    """Clean with the default configuration."""
    return clean_text(text, CleanerConfig())


def extract_semantic_core(text: str) -> str:
    """Keep only words of 4+ characters that are not stop words.

    Length is a cheap proxy for content words (nouns, verbs, adjectives).
    """
    return clean_text(text, CleanerConfig(min_word_length=4))
