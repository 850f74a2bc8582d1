"""Core ontology types for the legal triage workbench."""

from .types import (
    EvidenceId,
    AuthorityId,
    Domain,
    Jurisdiction,
    PartyType,
    PartyRole,
    Urgency,
    RiskLevel,
    Pillar,
    AuthorityType,
    EvidenceType,
    Provenance,
    SourceService,
    SOURCE_PRIORITY,
    AuditEventType,
    DeletionStatus,
    SandboxTier,
    generate_id,
    now_iso,
    parse_iso,
    try_parse_iso,
)
from .matter import (
    ClassificationInput,
    Parties,
    MatterTimeline,
    MatterClassification,
    ConfidenceFactors,
    ConfidenceScore,
    UncertaintyFactor,
    AlternativeDomain,
    ClassificationResult,
)
from .authority import Authority, AuthorityRef, ForumMap
from .evidence import (
    SourceEntry,
    SourceAccessPolicy,
    SourceAccessLog,
    SourceManifest,
    EvidenceItem,
    EvidenceIndex,
    EvidenceManifestItem,
    EvidenceManifest,
    ValidationResult,
    ExtractedMetadata,
    RedactionFinding,
    RedactionResult,
    TimelineEntry,
    TimelineGap,
    MissingEvidenceAlert,
)
from .documents import (
    EvidenceReference,
    Citation,
    DraftSection,
    DocumentDraft,
    PackagedFile,
    PackageLayout,
    DocumentPackage,
)
from .audit import (
    AuditEvent,
    RetentionPolicy,
    ExportRequest,
    DeletionRequest,
    ExportResult,
    DeletionResult,
)

__all__ = [
    # Types
    "EvidenceId",
    "AuthorityId",
    "Domain",
    "Jurisdiction",
    "PartyType",
    "PartyRole",
    "Urgency",
    "RiskLevel",
    "Pillar",
    "AuthorityType",
    "EvidenceType",
    "Provenance",
    "SourceService",
    "SOURCE_PRIORITY",
    "AuditEventType",
    "DeletionStatus",
    "SandboxTier",
    "generate_id",
    "now_iso",
    "parse_iso",
    "try_parse_iso",
    # Matter
    "ClassificationInput",
    "Parties",
    "MatterTimeline",
    "MatterClassification",
    "ConfidenceFactors",
    "ConfidenceScore",
    "UncertaintyFactor",
    "AlternativeDomain",
    "ClassificationResult",
    # Authority
    "Authority",
    "AuthorityRef",
    "ForumMap",
    # Evidence
    "SourceEntry",
    "SourceAccessPolicy",
    "SourceAccessLog",
    "SourceManifest",
    "EvidenceItem",
    "EvidenceIndex",
    "EvidenceManifestItem",
    "EvidenceManifest",
    "ValidationResult",
    "ExtractedMetadata",
    "RedactionFinding",
    "RedactionResult",
    "TimelineEntry",
    "TimelineGap",
    "MissingEvidenceAlert",
    # Documents
    "EvidenceReference",
    "Citation",
    "DraftSection",
    "DocumentDraft",
    "PackagedFile",
    "PackageLayout",
    "DocumentPackage",
    # Audit
    "AuditEvent",
    "RetentionPolicy",
    "ExportRequest",
    "DeletionRequest",
    "ExportResult",
    "DeletionResult",
]
