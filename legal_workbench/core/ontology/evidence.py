"""Evidence, source manifest and timeline models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .types import EvidenceId, EvidenceType, Provenance, RiskLevel, SourceService


# =============================================================================
# Sources
# =============================================================================


class SourceEntry(BaseModel):
    """An official source consulted for citations."""

    service: SourceService
    url: str
    retrieval_date: str | None = Field(None, description="ISO date the source was retrieved")
    version: str | None = None


class SourceAccessPolicy(BaseModel):
    """Access rules for one official source service."""

    service: SourceService
    allowed_methods: list[Provenance] = Field(default_factory=list)
    blocked: list[str] = Field(default_factory=list, description="URL prefixes that may not be accessed")
    enforce_currency_dates: bool = True
    enforce_bilingual_text: bool = False


class SourceAccessLog(BaseModel):
    """A single access decision for an official source."""

    service: SourceService
    url: str
    accessed_at: str
    actor: str = "system"
    method: Provenance | None = None
    allowed: bool = True
    reason: str | None = None


class SourceManifest(BaseModel):
    """Sources used to support a package."""

    entries: list[SourceEntry] = Field(default_factory=list)
    access_log: list[SourceAccessLog] = Field(default_factory=list)
    compiled_at: str | None = None
    notes: str | None = None


# =============================================================================
# Evidence
# =============================================================================


class EvidenceItem(BaseModel):
    """An indexed evidence file. The hash is content-derived and never changes."""

    id: EvidenceId
    filename: str
    type: EvidenceType
    date: str | None = None
    summary: str | None = None
    provenance: Provenance
    hash: str
    tags: list[str] = Field(default_factory=list)
    credibility_score: float = Field(..., ge=0.0, le=1.0)

    sender: str | None = None
    recipient: str | None = None
    subject: str | None = None

    model_config = {"frozen": True}


class EvidenceIndex(BaseModel):
    """Snapshot of indexed evidence and the current source list."""

    items: list[EvidenceItem] = Field(default_factory=list)
    generated_at: str
    source_manifest: SourceManifest = Field(default_factory=SourceManifest)

    def find(self, evidence_id: str) -> tuple[int, EvidenceItem] | None:
        """Locate an item by id, returning its 0-based position and the item."""
        for position, item in enumerate(self.items):
            if item.id == evidence_id:
                return position, item
        return None


class EvidenceManifestItem(BaseModel):
    """Evidence manifest row."""

    id: EvidenceId
    filename: str
    type: EvidenceType
    hash: str
    provenance: Provenance
    credibility_score: float
    date: str | None = None


class EvidenceManifest(BaseModel):
    """Manifest of evidence included in a package."""

    items: list[EvidenceManifestItem] = Field(default_factory=list)
    compiled_at: str
    notes: str | None = None


# =============================================================================
# Validation, Extraction, Redaction
# =============================================================================


class ValidationResult(BaseModel):
    """Outcome of file validation. Rejections are returned, not raised."""

    ok: bool
    type: EvidenceType | None = None
    errors: list[str] = Field(default_factory=list)


class ExtractedMetadata(BaseModel):
    """Metadata pulled from file content."""

    date: str | None = None
    sender: str | None = None
    recipient: str | None = None
    subject: str | None = None
    summary: str | None = None


class RedactionFinding(BaseModel):
    """A single redacted value."""

    type: str
    value: str


class RedactionResult(BaseModel):
    """Redacted text with the values that were removed."""

    redacted: str
    findings: list[RedactionFinding] = Field(default_factory=list)


# =============================================================================
# Timeline
# =============================================================================


class TimelineEntry(BaseModel):
    """A dated evidence item on the timeline."""

    date: str
    item_id: EvidenceId
    filename: str
    type: EvidenceType
    summary: str | None = None


class TimelineGap(BaseModel):
    """A gap between consecutive timeline entries."""

    start: str
    end: str
    duration_days: int
    risk_level: RiskLevel


class MissingEvidenceAlert(BaseModel):
    """A suggestion about evidence that appears to be missing."""

    type: str  # screenshot, email-original, audio-video, unknown
    message: str
