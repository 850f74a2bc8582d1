"""Audit log and manifest building."""

from __future__ import annotations

import logging
from typing import Any

from legal_workbench.core.ontology import (
    AuditEvent,
    AuditEventType,
    EvidenceIndex,
    EvidenceManifest,
    EvidenceManifestItem,
    SourceAccessLog,
    SourceEntry,
    SourceManifest,
    generate_id,
    now_iso,
)

logger = logging.getLogger(__name__)


class AuditLogger:
    """Append-only audit log for one session.

    Not synchronized; give each concurrent session its own logger.
    """

    def __init__(self) -> None:
        self._events: list[AuditEvent] = []

    def log(
        self,
        event_type: AuditEventType,
        actor: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> AuditEvent:
        event = AuditEvent(
            id=generate_id("audit"),
            type=event_type,
            timestamp=now_iso(),
            actor=actor,
            message=message,
            details=details,
        )
        self._events.append(event)
        logger.debug("Audit %s by %s: %s", event_type.value, actor, message)
        return event

    def entries(self) -> list[AuditEvent]:
        """Snapshot of all events in append order."""
        return list(self._events)

    def filter_by_type(self, event_type: AuditEventType) -> list[AuditEvent]:
        return [e for e in self._events if e.type == event_type]

    def clear(self) -> None:
        """Drop all events. Intended for tests."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


class ManifestBuilder:
    def build_source_manifest(
        self,
        entries: list[SourceEntry],
        access_log: list[SourceAccessLog] | None = None,
        notes: str | None = None,
    ) -> SourceManifest:
        return SourceManifest(
            entries=list(entries),
            access_log=list(access_log or []),
            compiled_at=now_iso(),
            notes=notes,
        )

    def build_evidence_manifest(self, index: EvidenceIndex, notes: str | None = None) -> EvidenceManifest:
        items = [
            EvidenceManifestItem(
                id=item.id,
                filename=item.filename,
                type=item.type,
                hash=item.hash,
                provenance=item.provenance,
                credibility_score=item.credibility_score,
                date=item.date,
            )
            for item in index.items
        ]
        return EvidenceManifest(items=items, compiled_at=now_iso(), notes=notes)
