"""Lambda score: weighted blend of NCD, entropy ratio and topology delta."""

from __future__ import annotations

import logging
from typing import Iterable

from ._entropy import compute_entropy, ratio_of
from ._ncd import compute_ncd
from ._topology import analyze_topology, delta_between
from ._types import (
    DEFAULT_COEFFICIENTS,
    Coefficients,
    EntropyMetrics,
    LdsiResult,
    NcdMetrics,
    TopologyMetrics,
    Verdict,
)

logger = logging.getLogger(__name__)

# Keeps one information-rich answer from dominating lambda
ENTROPY_RATIO_CAP: float = 2.0


def compute_ldsi(
    text_a: str,
    text_b: str,
    coefficients: Coefficients | None = None,
) -> LdsiResult:
    """Score the divergence of text_b (fractured) from text_a (standard).

    lambda = alpha * NCD(A, B) + beta * min(H(B)/H(A), 2) + gamma * delta

    Args:
        text_a: Standard (control) response.
        text_b: Fractured/alternative response to the same prompt.
        coefficients: Weights to use. None means DEFAULT_COEFFICIENTS.
    """
    coef = coefficients if coefficients is not None else DEFAULT_COEFFICIENTS

    # 1. Compression distance
    ncd = compute_ncd(text_a, text_b)

    # 2. Entropy
    entropy_a = compute_entropy(text_a)
    entropy_b = compute_entropy(text_b)
    ratio = ratio_of(entropy_a.shannon, entropy_b.shannon)

    # 3. Topology
    topo_a = analyze_topology(text_a)
    topo_b = analyze_topology(text_b)
    delta = delta_between(topo_a, topo_b)

    # 4. Blend
    lambda_ = (
        coef.alpha * ncd.score
        + coef.beta * min(ratio, ENTROPY_RATIO_CAP)
        + coef.gamma * delta
    )
    verdict = Verdict.from_lambda(lambda_)

    logger.debug(
        "ldsi ncd=%.4f ratio=%.4f delta=%.4f lambda=%.4f verdict=%s",
        ncd.score, ratio, delta, lambda_, verdict.value,
    )

    return LdsiResult(
        lambda_=lambda_,
        verdict=verdict,
        ncd=NcdMetrics(
            score=ncd.score,
            size_a=ncd.size_a,
            size_b=ncd.size_b,
            size_combined=ncd.size_combined,
        ),
        entropy=EntropyMetrics(
            shannon_a=entropy_a.shannon,
            shannon_b=entropy_b.shannon,
            ratio=ratio,
            ttr_a=entropy_a.ttr,
            ttr_b=entropy_b.ttr,
        ),
        topology=TopologyMetrics(
            delta=delta,
            density_a=topo_a.density,
            density_b=topo_b.density,
            lcc_ratio_a=topo_a.lcc_ratio,
            lcc_ratio_b=topo_b.lcc_ratio,
            clustering_a=topo_a.clustering_coefficient,
            clustering_b=topo_b.clustering_coefficient,
        ),
        coefficients=coef,
    )


def compute_ldsi_batch(
    pairs: Iterable[tuple[str, str]],
    coefficients: Coefficients | None = None,
) -> list[LdsiResult]:
    """Score multiple (text_a, text_b) pairs."""
    return [compute_ldsi(a, b, coefficients) for a, b in pairs]
