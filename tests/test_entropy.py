"""Tests for Shannon entropy, TTR and hapax statistics."""

import math

import pytest

from ldsi import compute_entropy, compute_ngram_entropy, entropy_ratio


def test_empty_text():
    result = compute_entropy("")
    assert result.shannon == 0.0
    assert result.ttr == 0.0
    assert result.total_tokens == 0
    assert result.unique_tokens == 0
    assert result.hapax_count == 0
    assert result.hapax_ratio == 0.0


def test_punctuation_only():
    """No tokens means every ratio falls back to zero."""
    result = compute_entropy("... !!! 42")
    assert result.shannon == 0.0
    assert result.ttr == 0.0


def test_uniform_distribution():
    """4 distinct single-occurrence tokens carry log2(4) = 2 bits."""
    result = compute_entropy("alpha beta gamma delta")
    assert abs(result.shannon - 2.0) < 0.01
    assert result.ttr == 1.0
    assert result.hapax_ratio == 1.0


@pytest.mark.parametrize("n", [2, 8, 30])
def test_uniform_is_log2_n(n):
    text = " ".join(f"w{chr(ord('a') + i % 26)}{chr(ord('a') + i // 26)}" for i in range(n))
    assert compute_entropy(text).shannon == pytest.approx(math.log2(n), abs=0.01)


def test_repetitive_text():
    result = compute_entropy("le le le le le le le le")
    assert result.shannon == 0.0
    assert result.ttr == pytest.approx(1 / 8)
    assert result.total_tokens == 8
    assert result.unique_tokens == 1


def test_hapax():
    """beta, gamma and delta occur once; alpha twice."""
    result = compute_entropy("alpha beta gamma delta alpha")
    assert result.hapax_count == 3
    assert result.hapax_ratio == pytest.approx(3 / 5)
    assert result.unique_tokens == 4


def test_ttr_bounded():
    for text in ["", "x", "one", "one one two", "Le chat dort sur le tapis."]:
        ttr = compute_entropy(text).ttr
        assert 0.0 <= ttr <= 1.0


def test_bigram_entropy():
    """3 distinct bigrams, equally frequent."""
    h = compute_ngram_entropy("alpha beta gamma delta", 2)
    assert h == pytest.approx(math.log2(3))


def test_bigram_entropy_repetition():
    """Repeating one bigram pattern lowers n-gram entropy."""
    varied = compute_ngram_entropy("alpha beta gamma delta epsilon zeta", 2)
    looped = compute_ngram_entropy("alpha beta alpha beta alpha beta", 2)
    assert looped < varied


def test_ngram_too_few_tokens():
    assert compute_ngram_entropy("alpha beta", 3) == 0.0
    assert compute_ngram_entropy("", 2) == 0.0


def test_ngram_degenerate_n():
    assert compute_ngram_entropy("alpha beta gamma", 0) == 0.0


def test_unigram_matches_compute_entropy():
    text = "the cat and the dog and the bird"
    assert compute_ngram_entropy(text, 1) == pytest.approx(
        compute_entropy(text).shannon
    )


def test_entropy_ratio_enriched():
    standard = "Le chat dort sur le tapis."
    enriched = "Le félin somnole paisiblement sur le kilim persan ancestral."
    assert entropy_ratio(standard, enriched) > 1.0


def test_entropy_ratio_zero_reference():
    """Empty reference: 2.0 if the candidate has information, else 1.0."""
    assert entropy_ratio("", "alpha beta") == 2.0
    assert entropy_ratio("", "") == 1.0
    assert entropy_ratio("alpha beta", "") == 0.0
