"""LDSI: Lyapunov-Dabert Stability Index.

White-box divergence scoring of two LLM responses using compression
distance, Shannon entropy and co-occurrence graph topology. No neural
network is involved; results are reproducible byte for byte.
"""

from __future__ import annotations

from ._audit import (
    AuditEntry,
    AuditLogger,
    AuditMetadata,
    SummaryReport,
    create_entry,
    generate_test_id,
)
from ._cleaner import CleanerConfig, Language, clean_default, clean_text, extract_semantic_core
from ._combiner import compute_ldsi, compute_ldsi_batch
from ._entropy import compute_entropy, compute_ngram_entropy, entropy_ratio
from ._errors import LdsiAuditError, LdsiChecksumError, LdsiError, LdsiVersionError
from ._graph import CooccurrenceGraph
from ._ncd import compute_ncd, ncd_score, optimal_window_log
from ._stop_words import ENGLISH_STOP_WORDS, FRENCH_STOP_WORDS, STOP_WORDS
from ._tokenizer import tokenize
from ._topology import analyze_topology, topology_delta
from ._types import (
    DEFAULT_COEFFICIENTS,
    Coefficients,
    EntropyMetrics,
    EntropyResult,
    LdsiResult,
    NcdMetrics,
    NcdResult,
    TopologyMetrics,
    TopologyResult,
    Verdict,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "analyze_topology",
    "AuditEntry",
    "AuditLogger",
    "AuditMetadata",
    "clean_default",
    "clean_text",
    "CleanerConfig",
    "Coefficients",
    "compute_entropy",
    "compute_ldsi",
    "compute_ldsi_batch",
    "compute_ncd",
    "compute_ngram_entropy",
    "CooccurrenceGraph",
    "create_entry",
    "DEFAULT_COEFFICIENTS",
    "ENGLISH_STOP_WORDS",
    "entropy_ratio",
    "EntropyMetrics",
    "EntropyResult",
    "extract_semantic_core",
    "FRENCH_STOP_WORDS",
    "generate_test_id",
    "Language",
    "LdsiAuditError",
    "LdsiChecksumError",
    "LdsiError",
    "LdsiResult",
    "LdsiVersionError",
    "ncd_score",
    "NcdMetrics",
    "NcdResult",
    "optimal_window_log",
    "STOP_WORDS",
    "SummaryReport",
    "tokenize",
    "topology_delta",
    "TopologyMetrics",
    "TopologyResult",
    "Verdict",
]
