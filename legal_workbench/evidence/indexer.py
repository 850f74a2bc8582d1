"""Evidence indexer - hashing, metadata and credibility scoring."""

from __future__ import annotations

import hashlib
import logging
from typing import Any

from legal_workbench.core.ontology import (
    EvidenceId,
    EvidenceIndex,
    EvidenceItem,
    EvidenceType,
    ExtractedMetadata,
    Provenance,
    SourceAccessLog,
    SourceEntry,
    SourceManifest,
    generate_id,
    now_iso,
    try_parse_iso,
)

from .metadata import extract_metadata

logger = logging.getLogger(__name__)

BASELINE_CREDIBILITY = 0.5

PROVENANCE_BOOST: dict[Provenance, float] = {
    Provenance.OFFICIAL_API: 0.3,
    Provenance.OFFICIAL_LINK: 0.25,
    Provenance.USER_PROVIDED: 0.1,
}


def hash_content(content: bytes) -> str:
    """SHA-256 hex digest of the raw bytes."""
    return hashlib.sha256(content).hexdigest()


def compute_credibility(provenance: Provenance, metadata: ExtractedMetadata) -> float:
    """Score evidence credibility in [0, 1] from provenance and metadata completeness."""
    score = BASELINE_CREDIBILITY + PROVENANCE_BOOST.get(Provenance(provenance), 0.0)
    if metadata.date:
        score += 0.1
    if metadata.sender or metadata.recipient:
        score += 0.1
    if metadata.subject:
        score += 0.05
    return round(min(score, 1.0), 4)


class EvidenceIndexer:
    """Append-only accumulator of evidence items for one matter session.

    Not synchronized; one instance should serve one session at a time.
    Identical uploads get identical hashes but are not deduplicated.
    """

    def __init__(self) -> None:
        self._items: list[EvidenceItem] = []
        self._sources: list[SourceEntry] = []
        self._access_log: list[SourceAccessLog] = []

    def add_item(
        self,
        filename: str,
        content: bytes,
        evidence_type: EvidenceType | str,
        provenance: Provenance | str,
        options: dict[str, Any] | None = None,
    ) -> EvidenceItem:
        """Hash, extract metadata from and score a file, then append it.

        ``options`` may carry ``date`` (overrides the extracted date when it
        is a readable ISO 8601 value, otherwise ignored), ``summary`` and
        ``tags``.
        """
        options = options or {}
        evidence_type = EvidenceType(evidence_type)
        provenance = Provenance(provenance)

        metadata = extract_metadata(evidence_type, content)
        declared = options.get("date")
        if declared:
            if try_parse_iso(declared) is None:
                logger.warning("Ignoring unreadable date %r declared for %s", declared, filename)
            else:
                metadata = metadata.model_copy(update={"date": declared})

        item = EvidenceItem(
            id=EvidenceId(generate_id("ev")),
            filename=filename,
            type=evidence_type,
            date=metadata.date,
            summary=options.get("summary") or metadata.summary or f"{evidence_type.value} file: {filename}",
            provenance=provenance,
            hash=hash_content(content),
            tags=list(options.get("tags") or []),
            credibility_score=compute_credibility(provenance, metadata),
            sender=metadata.sender,
            recipient=metadata.recipient,
            subject=metadata.subject,
        )
        self._items.append(item)
        logger.debug("Indexed %s as %s (credibility %.2f)", filename, item.id, item.credibility_score)
        return item

    def set_sources(self, sources: list[SourceEntry], access_log: list[SourceAccessLog] | None = None) -> None:
        """Replace the source list used for citations, and its access log."""
        self._sources = list(sources)
        self._access_log = list(access_log or [])

    @property
    def items(self) -> list[EvidenceItem]:
        return list(self._items)

    def generate_index(self) -> EvidenceIndex:
        """Snapshot the current items and sources."""
        now = now_iso()
        return EvidenceIndex(
            items=list(self._items),
            generated_at=now,
            source_manifest=SourceManifest(
                entries=list(self._sources), access_log=list(self._access_log), compiled_at=now
            ),
        )

    def __len__(self) -> int:
        return len(self._items)
