"""Normalized Compression Distance over raw UTF-8 bytes.

NCD(x, y) = (C(xy) - min(C(x), C(y))) / max(C(x), C(y)), with C the
Zstandard-compressed size. The compression window is sized from the
concatenation so the compressor sees all of x while encoding y; a window
smaller than the input inflates the distance of long texts.
"""

from __future__ import annotations

import logging

import zstandard as zstd

from ._types import NcdResult

logger = logging.getLogger(__name__)

COMPRESSION_LEVEL: int = 3

# window_log bounds: 2**10 = 1 KiB .. 2**31 = 2 GiB
MIN_WINDOW_LOG: int = 10
MAX_WINDOW_LOG: int = 31

# Real compressors can overshoot 1.0 on adversarial inputs
NCD_CEILING: float = 1.5


def optimal_window_log(size: int) -> int:
    """Bits needed to represent size, clamped to [MIN, MAX]_WINDOW_LOG."""
    if size <= 0:
        return MIN_WINDOW_LOG
    return max(MIN_WINDOW_LOG, min(MAX_WINDOW_LOG, size.bit_length()))


def compressed_size(data: bytes, window_log: int) -> int:
    """Zstandard-compressed length of data using a 2**window_log window.

    Falls back to the default window, then to len(data), if the
    compressor rejects its parameters.
    """
    try:
        params = zstd.ZstdCompressionParameters.from_level(
            COMPRESSION_LEVEL, window_log=window_log,
        )
        return len(zstd.ZstdCompressor(compression_params=params).compress(data))
    except (zstd.ZstdError, ValueError) as e:
        logger.warning(
            "window_log=%d rejected (%s), retrying with default window",
            window_log, e,
        )

    try:
        return len(zstd.ZstdCompressor(level=COMPRESSION_LEVEL).compress(data))
    except zstd.ZstdError as e:
        logger.warning("compression failed (%s), using raw size", e)
        return len(data)


def compute_ncd(text_a: str, text_b: str) -> NcdResult:
    """Compression distance between two texts.

    ~0.0 for near-identical texts, ~1.0 for unrelated ones, clamped to
    [0.0, NCD_CEILING].
    """
    raw_a = text_a.encode("utf-8")
    raw_b = text_b.encode("utf-8")
    combined = raw_a + raw_b
    window_log = optimal_window_log(len(combined))

    size_a = compressed_size(raw_a, window_log)
    size_b = compressed_size(raw_b, window_log)
    size_combined = compressed_size(combined, window_log)

    min_c = min(size_a, size_b)
    max_c = max(size_a, size_b)
    score = (size_combined - min_c) / max_c if max_c > 0 else 0.0
    score = max(0.0, min(NCD_CEILING, score))

    logger.debug(
        "ncd window_log=%d C(A)=%d C(B)=%d C(AB)=%d score=%.6f",
        window_log, size_a, size_b, size_combined, score,
    )

    return NcdResult(
        score=score,
        size_a=size_a,
        size_b=size_b,
        size_combined=size_combined,
        raw_size_a=len(raw_a),
        raw_size_b=len(raw_b),
    )


def ncd_score(text_a: str, text_b: str) -> float:
    """Score-only shortcut for compute_ncd."""
    return compute_ncd(text_a, text_b).score
