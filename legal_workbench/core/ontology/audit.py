"""Audit, retention and lifecycle result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .evidence import SourceManifest
from .types import AuditEventType, DeletionStatus


class AuditEvent(BaseModel):
    """An append-only audit log entry."""

    id: str
    type: AuditEventType
    timestamp: str
    actor: str
    message: str
    details: dict[str, Any] | None = None


class RetentionPolicy(BaseModel):
    """Retention settings gating deletion."""

    days: int = Field(..., ge=0)
    legal_hold: bool = False
    legal_hold_reason: str | None = None
    updated_at: str


class ExportRequest(BaseModel):
    """Request to export matter data."""

    actor: str
    items: list[str] = Field(default_factory=list)
    manifest: SourceManifest = Field(default_factory=SourceManifest)


class DeletionRequest(BaseModel):
    """Request to delete matter data."""

    actor: str
    items: list[str] = Field(default_factory=list)
    legal_hold: bool = False
    reason: str | None = None


class ExportResult(BaseModel):
    """Result of an export."""

    exported_at: str
    items: list[str]
    manifest: SourceManifest


class DeletionResult(BaseModel):
    """Result of a deletion request. Blocked is a normal outcome."""

    deleted_at: str
    items: list[str]
    legal_hold_applied: bool
    status: DeletionStatus
    reason: str | None = None
