"""Data lifecycle - retention, legal hold, export and deletion."""

from __future__ import annotations

import logging

from legal_workbench.audit import AuditLogger
from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import (
    AuditEvent,
    AuditEventType,
    DeletionRequest,
    DeletionResult,
    DeletionStatus,
    ExportRequest,
    ExportResult,
    RetentionPolicy,
    now_iso,
)

logger = logging.getLogger(__name__)


class DataLifecycleManager:
    """Owns the retention policy and gates deletion on legal hold.

    Every mutation and request is written to the audit log.
    """

    def __init__(self, audit: AuditLogger | None = None, default_retention_days: int | None = None):
        self.audit = audit if audit is not None else AuditLogger()
        if default_retention_days is None:
            default_retention_days = get_settings().default_retention_days
        self._retention = RetentionPolicy(days=default_retention_days, updated_at=now_iso())

    def get_retention(self) -> RetentionPolicy:
        return self._retention.model_copy()

    def update_retention(self, days: int, actor: str) -> RetentionPolicy:
        self._retention = self._retention.model_copy(update={"days": days, "updated_at": now_iso()})
        self.audit.log(
            AuditEventType.RETENTION_UPDATE,
            actor,
            f"Retention updated to {days} days.",
            {"days": days},
        )
        return self.get_retention()

    def apply_legal_hold(self, reason: str, actor: str) -> RetentionPolicy:
        self._retention = self._retention.model_copy(
            update={"legal_hold": True, "legal_hold_reason": reason, "updated_at": now_iso()}
        )
        self.audit.log(AuditEventType.LEGAL_HOLD, actor, "Legal hold applied.", {"reason": reason})
        logger.info("Legal hold applied by %s", actor)
        return self.get_retention()

    def clear_legal_hold(self, actor: str) -> RetentionPolicy:
        self._retention = self._retention.model_copy(
            update={"legal_hold": False, "legal_hold_reason": None, "updated_at": now_iso()}
        )
        self.audit.log(AuditEventType.LEGAL_HOLD, actor, "Legal hold cleared.")
        return self.get_retention()

    def export_data(self, request: ExportRequest) -> ExportResult:
        self.audit.log(
            AuditEventType.EXPORT,
            request.actor,
            "Data export requested.",
            {"items": list(request.items)},
        )
        return ExportResult(exported_at=now_iso(), items=list(request.items), manifest=request.manifest)

    def request_deletion(self, request: DeletionRequest) -> DeletionResult:
        """Delete unless a legal hold is set on the policy or on the request.

        A block is returned as ``status == "blocked"``, not raised.
        """
        held = self._retention.legal_hold or request.legal_hold
        if held:
            reason = request.reason or self._retention.legal_hold_reason
            self.audit.log(
                AuditEventType.DELETION,
                request.actor,
                "Deletion blocked due to legal hold.",
                {"items": list(request.items), "reason": reason},
            )
            logger.warning("Deletion of %d item(s) blocked by legal hold", len(request.items))
            return DeletionResult(
                deleted_at=now_iso(),
                items=list(request.items),
                legal_hold_applied=True,
                status=DeletionStatus.BLOCKED,
                reason=reason,
            )

        self.audit.log(
            AuditEventType.DELETION,
            request.actor,
            "Deletion completed.",
            {"items": list(request.items)},
        )
        return DeletionResult(
            deleted_at=now_iso(),
            items=list(request.items),
            legal_hold_applied=False,
            status=DeletionStatus.COMPLETED,
            reason=request.reason,
        )

    def audit_log(self) -> list[AuditEvent]:
        return self.audit.entries()
