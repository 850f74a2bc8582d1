"""Request and response models for the integration surface."""

from typing import Any

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import (
    ClassificationResult,
    DocumentDraft,
    DocumentPackage,
    EvidenceIndex,
    EvidenceItem,
    ForumMap,
    MatterClassification,
    MissingEvidenceAlert,
    SourceAccessLog,
    SourceManifest,
    TimelineEntry,
    TimelineGap,
    ValidationResult,
)
from legal_workbench.triage import TimelineAssessment
from legal_workbench.upl import SandboxPlan


# =============================================================================
# Intake
# =============================================================================


class IntakeResponse(BaseModel):
    """Classification with routing and triage context attached."""

    result: ClassificationResult
    forum_map: ForumMap
    timeline_assessment: TimelineAssessment
    sandbox_plan: SandboxPlan

    @property
    def classification(self) -> MatterClassification:
        return self.result.classification


# =============================================================================
# Evidence
# =============================================================================


class UploadResponse(BaseModel):
    """Outcome of an evidence upload.

    When validation fails only ``validation`` is populated and the file was
    not indexed.
    """

    validation: ValidationResult
    item: EvidenceItem | None = None
    index: EvidenceIndex | None = None
    timeline: list[TimelineEntry] = Field(default_factory=list)
    gaps: list[TimelineGap] = Field(default_factory=list)
    alerts: list[MissingEvidenceAlert] = Field(default_factory=list)
    redacted_preview: str | None = None


# =============================================================================
# Sources
# =============================================================================


class SourcesResponse(BaseModel):
    """Outcome of registering citation sources.

    ``manifest`` holds only the accepted entries; ``rejected`` maps each
    refused URL to its reasons.
    """

    manifest: SourceManifest
    decisions: list[SourceAccessLog] = Field(default_factory=list)
    rejected: dict[str, list[str]] = Field(default_factory=dict)


# =============================================================================
# Documents
# =============================================================================


class GenerateDocumentsRequest(BaseModel):
    classification: MatterClassification
    forum_map: ForumMap | None = None
    package_name: str | None = None
    source_manifest: SourceManifest | None = None
    form_mappings: dict[str, dict[str, Any]] | None = None
    matter_id: str | None = None
    actor: str = "system"


class GenerateDocumentsResponse(BaseModel):
    drafts: list[DocumentDraft] = Field(default_factory=list)
    package: DocumentPackage
    warnings: list[str] = Field(default_factory=list)
