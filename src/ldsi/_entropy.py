"""Shannon entropy and lexical diversity over token frequencies."""

from __future__ import annotations

import math
from collections import Counter

from ._tokenizer import ngrams, tokenize
from ._types import EntropyResult

# Ratio reported when the reference text carries no information but the
# candidate does.
ZERO_REFERENCE_RATIO: float = 2.0


def shannon_entropy(frequencies: Counter[str], total: int) -> float:
    """H = -sum(p * log2(p)) in bits, 0.0 for an empty distribution."""
    if total == 0:
        return 0.0
    h = 0.0
    for count in frequencies.values():
        p = count / total
        if p > 0.0:
            h -= p * math.log2(p)
    return h


def compute_entropy(text: str) -> EntropyResult:
    """Entropy, type-token ratio and hapax statistics of a text."""
    tokens = tokenize(text)
    total = len(tokens)
    frequencies = Counter(tokens)
    unique = len(frequencies)
    hapax = sum(1 for c in frequencies.values() if c == 1)

    return EntropyResult(
        shannon=shannon_entropy(frequencies, total),
        ttr=unique / total if total > 0 else 0.0,
        total_tokens=total,
        unique_tokens=unique,
        hapax_count=hapax,
        hapax_ratio=hapax / total if total > 0 else 0.0,
    )


def compute_ngram_entropy(text: str, n: int = 2) -> float:
    """Entropy over contiguous token n-grams (bigrams by default).

    More sensitive to structural patterns than single-token entropy.
    Returns 0.0 when the text has fewer than n tokens.
    """
    if n < 1:
        return 0.0
    tokens = tokenize(text)
    if len(tokens) < n:
        return 0.0
    frequencies = Counter(ngrams(tokens, n))
    return shannon_entropy(frequencies, len(tokens) - n + 1)


def ratio_of(shannon_a: float, shannon_b: float) -> float:
    if shannon_a > 0.0:
        return shannon_b / shannon_a
    if shannon_b > 0.0:
        return ZERO_REFERENCE_RATIO
    return 1.0


def entropy_ratio(text_a: str, text_b: str) -> float:
    """H(B) / H(A). Above 1.0 means B carries more information than A."""
    return ratio_of(
        compute_entropy(text_a).shannon, compute_entropy(text_b).shannon,
    )
