"""Audit trail: JSON and msgpack persistence of scoring results.

Every entry stores both responses with their SHA-256 digests so a reloaded
entry can be checked against the text it claims to score.
"""

from __future__ import annotations

import hashlib
import json
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

import msgpack

from ._errors import LdsiAuditError, LdsiChecksumError, LdsiVersionError
from ._types import LdsiResult

logger = logging.getLogger(__name__)

_ARCHIVE_VERSION = "1.0"


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_test_id() -> str:
    """LDSI_<UTC timestamp>_<32 random bits in hex>."""
    now = datetime.now(timezone.utc)
    return f"LDSI_{now:%Y%m%d_%H%M%S}_{secrets.randbits(32):08X}"


@dataclass(slots=True, frozen=True)
class AuditMetadata:
    ldsi_version: str
    duration_ms: int
    hash_response_a: str   # SHA-256 hex of the UTF-8 text
    hash_response_b: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "ldsi_version": self.ldsi_version,
            "duration_ms": self.duration_ms,
            "hash_response_a": self.hash_response_a,
            "hash_response_b": self.hash_response_b,
        }


@dataclass(slots=True, frozen=True)
class AuditEntry:
    timestamp: str         # ISO 8601, UTC
    test_id: str
    model_target: str
    prompt_a: str
    prompt_b: str
    response_a: str
    response_b: str
    result: LdsiResult
    metadata: AuditMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "test_id": self.test_id,
            "model_target": self.model_target,
            "prompt_a": self.prompt_a,
            "prompt_b": self.prompt_b,
            "response_a": self.response_a,
            "response_b": self.response_b,
            "ldsi_result": self.result.to_dict(),
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AuditEntry:
        try:
            return cls(
                timestamp=data["timestamp"],
                test_id=data["test_id"],
                model_target=data["model_target"],
                prompt_a=data["prompt_a"],
                prompt_b=data["prompt_b"],
                response_a=data["response_a"],
                response_b=data["response_b"],
                result=LdsiResult.from_dict(data["ldsi_result"]),
                metadata=AuditMetadata(**data["metadata"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LdsiAuditError(f"Malformed audit entry: {e!r}") from e

    def verify(self) -> None:
        """Raise LdsiChecksumError if a response no longer matches its hash."""
        for label, text, expected in (
            ("response_a", self.response_a, self.metadata.hash_response_a),
            ("response_b", self.response_b, self.metadata.hash_response_b),
        ):
            if not isinstance(text, str) or not isinstance(expected, str):
                raise LdsiAuditError(
                    f"Malformed audit entry {self.test_id}: {label} and its "
                    "hash must be strings"
                )
            actual = _sha256(text)
            if actual != expected:
                raise LdsiChecksumError(
                    f"Checksum mismatch for {label} of {self.test_id}: "
                    f"expected {expected[:16]}..., got {actual[:16]}..."
                )


@dataclass(slots=True, frozen=True)
class SummaryReport:
    """Condensed view of an entry for terminal or dashboard display."""

    timestamp: str
    model: str
    lambda_score: float
    verdict: str
    ncd_score: float
    entropy_ratio: float
    topology_delta: float

    @classmethod
    def from_entry(cls, entry: AuditEntry) -> SummaryReport:
        result = entry.result
        return cls(
            timestamp=entry.timestamp,
            model=entry.model_target,
            lambda_score=result.lambda_,
            verdict=result.verdict.description,
            ncd_score=result.ncd.score,
            entropy_ratio=result.entropy.ratio,
            topology_delta=result.topology.delta,
        )


def create_entry(
    model: str,
    prompt_a: str,
    prompt_b: str,
    response_a: str,
    response_b: str,
    result: LdsiResult,
    duration_ms: int,
) -> AuditEntry:
    """Wrap a scoring result with its inputs and integrity metadata."""
    from . import __version__

    return AuditEntry(
        timestamp=datetime.now(timezone.utc).isoformat(),
        test_id=generate_test_id(),
        model_target=model,
        prompt_a=prompt_a,
        prompt_b=prompt_b,
        response_a=response_a,
        response_b=response_b,
        result=result,
        metadata=AuditMetadata(
            ldsi_version=__version__,
            duration_ms=duration_ms,
            hash_response_a=_sha256(response_a),
            hash_response_b=_sha256(response_b),
        ),
    )


def _decode_json_documents(text: str) -> list[Any]:
    """Decode one or more concatenated JSON documents."""
    decoder = json.JSONDecoder()
    docs: list[Any] = []
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos == end:
            return docs
        doc, pos = decoder.raw_decode(text, pos)
        docs.append(doc)


def _entries_from_dicts(
    items: Iterable[Any], verify: bool
) -> list[AuditEntry]:
    entries: list[AuditEntry] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise LdsiAuditError(
                f"Expected an audit entry object, got {type(item).__name__}"
            )
        entry = AuditEntry.from_dict(item)
        if verify:
            entry.verify()
        entries.append(entry)
    return entries


class AuditLogger:
    """Buffers audit entries in memory and writes them as a JSON array."""

    __slots__ = ("_path", "_entries")

    def __init__(self, output_path: Path | str) -> None:
        self._path = Path(output_path)
        self._entries: list[AuditEntry] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def entries(self) -> list[AuditEntry]:
        return list(self._entries)

    def log(self, entry: AuditEntry) -> None:
        self._entries.append(entry)

    def flush(self) -> None:
        """Write every buffered entry, replacing the file's content."""
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(
                [e.to_dict() for e in self._entries], f,
                indent=2, ensure_ascii=False,
            )
            f.write("\n")
        logger.info("Wrote %d audit entries to %s", len(self._entries), self._path)

    @staticmethod
    def write_single(entry: AuditEntry, path: Path | str) -> None:
        """Append one entry as a standalone pretty-printed JSON document."""
        with open(path, "a", encoding="utf-8") as f:
            json.dump(entry.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.info("Appended audit entry %s to %s", entry.test_id, path)

    @staticmethod
    def load_entries(
        path: Path | str, *, verify: bool = True
    ) -> list[AuditEntry]:
        """Load entries written by flush() or write_single().

        Raises:
            LdsiAuditError: The file is missing or malformed.
            LdsiChecksumError: verify is set and a response hash mismatches.
        """
        path = Path(path)
        if not path.exists():
            raise LdsiAuditError(f"Audit file not found: {path}")
        try:
            docs = _decode_json_documents(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LdsiAuditError(f"Invalid JSON in {path}: {e}") from e

        items: list[Any] = []
        for doc in docs:
            if isinstance(doc, list):
                items.extend(doc)
            else:
                items.append(doc)
        return _entries_from_dicts(items, verify)

    @staticmethod
    def write_archive(entries: Iterable[AuditEntry], path: Path | str) -> None:
        """Write entries as a compact msgpack archive."""
        payload = {
            "version": _ARCHIVE_VERSION,
            "entries": [e.to_dict() for e in entries],
        }
        with open(path, "wb") as f:
            f.write(msgpack.packb(payload, use_bin_type=True))
        logger.info(
            "Wrote %d audit entries to archive %s",
            len(payload["entries"]), path,
        )

    @staticmethod
    def read_archive(
        path: Path | str, *, verify: bool = True
    ) -> list[AuditEntry]:
        """Load a msgpack archive written by write_archive().

        Raises:
            LdsiAuditError: The file is missing or malformed.
            LdsiVersionError: The archive format version is not supported.
            LdsiChecksumError: verify is set and a response hash mismatches.
        """
        path = Path(path)
        if not path.exists():
            raise LdsiAuditError(f"Audit archive not found: {path}")
        with open(path, "rb") as f:
            try:
                payload = msgpack.unpackb(f.read(), raw=False)
            except (ValueError, TypeError) as e:
                raise LdsiAuditError(f"Invalid archive {path}: {e}") from e

        if not isinstance(payload, dict):
            raise LdsiAuditError(f"Invalid archive {path}: not a map")
        version = payload.get("version")
        if version != _ARCHIVE_VERSION:
            raise LdsiVersionError(
                f"Expected archive version {_ARCHIVE_VERSION!r}, got {version!r}"
            )
        entries = payload.get("entries", [])
        if not isinstance(entries, list):
            raise LdsiAuditError(
                f"Invalid archive {path}: entries must be a list, "
                f"got {type(entries).__name__}"
            )
        return _entries_from_dicts(entries, verify)
