"""Data structures for ldsi."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping

# Upper bound on |NCD|, the capped entropy ratio and |topology delta|
_TERM_BOUND: float = 2.0

# Verdict thresholds (half-open, lower bound inclusive)
ZOMBIE_MAX: float = 0.3
REBELLE_MAX: float = 0.7
ARCHITECTE_MAX: float = 1.2


class Verdict(str, Enum):
    """Where a text pair falls on the repetition-to-chaos spectrum."""

    ZOMBIE = "Zombie"
    REBELLE = "Rebelle"
    ARCHITECTE = "Architecte"
    FOU = "Fou"

    @classmethod
    def from_lambda(cls, lambda_score: float) -> Verdict:
        if lambda_score < ZOMBIE_MAX:
            return cls.ZOMBIE
        if lambda_score < REBELLE_MAX:
            return cls.REBELLE
        if lambda_score < ARCHITECTE_MAX:
            return cls.ARCHITECTE
        return cls.FOU

    @property
    def description(self) -> str:
        return _VERDICT_DESCRIPTIONS[self]


_VERDICT_DESCRIPTIONS = {
    Verdict.ZOMBIE: "ZOMBIE - the model recites, output fully smoothed",
    Verdict.REBELLE: "REBELLE - notable divergence, lexical enrichment",
    Verdict.ARCHITECTE: "ARCHITECTE - strong divergence, structure preserved",
    Verdict.FOU: "FOU - maximal chaos, structure collapsed",
}


@dataclass(slots=True, frozen=True)
class Coefficients:
    """Weights of the lambda formula.

    alpha weighs the compression distance, beta the (capped) entropy ratio
    and gamma the topology delta. They need not sum to 1; negative weights
    are accepted for diagnostic runs. Weights must be finite and small
    enough that lambda cannot overflow.
    """

    alpha: float = 0.50
    beta: float = 0.30
    gamma: float = 0.20

    def __post_init__(self) -> None:
        for name in ("alpha", "beta", "gamma"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        bound = _TERM_BOUND * (abs(self.alpha) + abs(self.beta) + abs(self.gamma))
        if not math.isfinite(bound):
            raise ValueError(
                "coefficients too large: lambda would overflow "
                f"(alpha={self.alpha!r}, beta={self.beta!r}, gamma={self.gamma!r})"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> Coefficients:
        """Build from a mapping, missing keys falling back to the defaults."""
        unknown = set(values) - {"alpha", "beta", "gamma"}
        if unknown:
            raise ValueError(f"unknown coefficient(s): {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in values.items()})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


DEFAULT_COEFFICIENTS = Coefficients()


@dataclass(slots=True, frozen=True)
class NcdResult:
    score: float
    size_a: int          # compressed bytes
    size_b: int
    size_combined: int
    raw_size_a: int      # UTF-8 bytes
    raw_size_b: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class EntropyResult:
    shannon: float       # bits
    ttr: float
    total_tokens: int
    unique_tokens: int
    hapax_count: int
    hapax_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class TopologyResult:
    node_count: int
    edge_count: int
    density: float
    components: int
    lcc_size: int
    lcc_ratio: float
    clustering_coefficient: float
    avg_path_length: float
    small_world_index: float
    avg_degree: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class NcdMetrics:
    score: float
    size_a: int
    size_b: int
    size_combined: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class EntropyMetrics:
    shannon_a: float
    shannon_b: float
    ratio: float         # uncapped H(B)/H(A)
    ttr_a: float
    ttr_b: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class TopologyMetrics:
    delta: float
    density_a: float
    density_b: float
    lcc_ratio_a: float
    lcc_ratio_b: float
    clustering_a: float
    clustering_b: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class LdsiResult:
    lambda_: float
    verdict: Verdict
    ncd: NcdMetrics
    entropy: EntropyMetrics
    topology: TopologyMetrics
    coefficients: Coefficients = field(default_factory=Coefficients)

    @property
    def lambda_score(self) -> float:
        return self.lambda_

    def to_dict(self) -> dict[str, Any]:
        return {
            "lambda": self.lambda_,
            "verdict": self.verdict.value,
            "ncd": self.ncd.to_dict(),
            "entropy": self.entropy.to_dict(),
            "topology": self.topology.to_dict(),
            "coefficients": self.coefficients.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LdsiResult:
        """Rebuild a result serialized with to_dict()."""
        return cls(
            lambda_=float(data["lambda"]),
            verdict=Verdict(data["verdict"]),
            ncd=NcdMetrics(**data["ncd"]),
            entropy=EntropyMetrics(**data["entropy"]),
            topology=TopologyMetrics(**data["topology"]),
            coefficients=Coefficients(**data["coefficients"]),
        )
