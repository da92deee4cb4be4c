"""Benchmark suite for the ldsi scoring engines.

Measures each engine in isolation and the full lambda pipeline across
text sizes.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import ldsi
from ldsi._graph import CooccurrenceGraph
from ldsi._tokenizer import tokenize

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

STANDARD_4W = "Le chat dort."

SENTENCE_12W = (
    "Le félin somnole paisiblement sur le coussin moelleux du salon."
)

SENTENCE_30W = (
    "The human brain contains approximately eighty six billion neurons "
    "connected through trillions of synapses forming complex neural "
    "networks that process sensory information and generate behavioral "
    "responses across cortical and subcortical regions"
)

PARAGRAPH_200W = " ".join([SENTENCE_30W] * 7)

DOCUMENT_1000W = " ".join([PARAGRAPH_200W] * 5)

SAMPLE_TEXTS = {
    "standard_4w": STANDARD_4W,
    "sentence_12w": SENTENCE_12W,
    "sentence_30w": SENTENCE_30W,
    "paragraph_200w": PARAGRAPH_200W,
    "document_1000w": DOCUMENT_1000W,
}

# ---------------------------------------------------------------------------
# 1. End-to-end lambda
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_compute_ldsi(benchmark, text_key):
    """compute_ldsi() of the standard sentence against each sample."""
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark.extra_info["n_words"] = len(text.split())
    benchmark(ldsi.compute_ldsi, STANDARD_4W, text)


def test_bench_compute_ldsi_batch(benchmark):
    """compute_ldsi_batch() over 6 mixed pairs."""
    pairs = [
        (STANDARD_4W, SENTENCE_12W),
        (STANDARD_4W, SENTENCE_30W),
        (SENTENCE_12W, SENTENCE_30W),
        (SENTENCE_30W, PARAGRAPH_200W),
        (STANDARD_4W, STANDARD_4W),
        (SENTENCE_12W, SENTENCE_12W),
    ]
    benchmark(ldsi.compute_ldsi_batch, pairs)


# ---------------------------------------------------------------------------
# 2. Per-engine isolation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text_key", ["sentence_30w", "paragraph_200w", "document_1000w"])
def test_bench_ncd(benchmark, text_key):
    """Three zstd compressions per call."""
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark(ldsi.compute_ncd, SENTENCE_12W, text)


@pytest.mark.parametrize("text_key", ["sentence_30w", "paragraph_200w", "document_1000w"])
def test_bench_entropy(benchmark, text_key):
    """Tokenize + frequency count + Shannon sum."""
    benchmark.extra_info["text_key"] = text_key
    benchmark(ldsi.compute_entropy, SAMPLE_TEXTS[text_key])


@pytest.mark.parametrize("text_key", ["sentence_30w", "paragraph_200w", "document_1000w"])
def test_bench_topology(benchmark, text_key):
    """Graph build, components, clustering and sampled BFS."""
    benchmark.extra_info["text_key"] = text_key
    benchmark(ldsi.analyze_topology, SAMPLE_TEXTS[text_key])


def test_bench_graph_build(benchmark):
    """Sliding-window graph construction alone on 1000 words."""
    tokens = tokenize(DOCUMENT_1000W)
    benchmark.extra_info["n_tokens"] = len(tokens)
    benchmark(CooccurrenceGraph.from_tokens, tokens)


# ---------------------------------------------------------------------------
# 3. Micro-benchmarks: pedantic mode for sub-us operations
# ---------------------------------------------------------------------------


def test_bench_tokenize(benchmark):
    """Tokenizer on a 30-word sentence."""
    benchmark.pedantic(
        tokenize, args=(SENTENCE_30W,), rounds=1000, iterations=10,
    )


def test_bench_verdict(benchmark):
    """Verdict classification of a single lambda."""
    benchmark.pedantic(
        ldsi.Verdict.from_lambda, args=(0.85,), rounds=1000, iterations=1000,
    )


# ---------------------------------------------------------------------------
# 4. Cleaner
# ---------------------------------------------------------------------------


def test_bench_clean_default(benchmark):
    """clean_default() on a 200-word paragraph."""
    benchmark(ldsi.clean_default, PARAGRAPH_200W)


def test_bench_clean_dynamic(benchmark):
    """Cleaning with frequency-based stop words on 1000 words."""
    config = ldsi.CleanerConfig(dynamic_stopwords=True)
    benchmark(ldsi.clean_text, DOCUMENT_1000W, config)
