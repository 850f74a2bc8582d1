"""Domain module contract and the shared packaging step.

A domain module turns a classified matter into drafts. Packaging is the
same for every domain and lives in :func:`build_package_from_drafts`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Protocol

from pydantic import BaseModel, Field

from legal_workbench.audit import ManifestBuilder
from legal_workbench.core.ontology import (
    Domain,
    DocumentDraft,
    DocumentPackage,
    DraftSection,
    EvidenceIndex,
    EvidenceManifest,
    EvidenceReference,
    MatterClassification,
    SourceManifest,
    generate_id,
    now_iso,
)
from legal_workbench.documents import DocumentDraftingEngine, DocumentPackager, DraftingInput, PackageInput
from legal_workbench.templates import TemplateLibrary, fill_placeholders


# =============================================================================
# Contract
# =============================================================================


class DomainModuleInput(BaseModel):
    """Everything a domain module needs to draft and package a matter."""

    classification: MatterClassification
    forum_map: str = Field(..., description="Rendered forum map markdown")
    timeline: str = Field(..., description="Rendered timeline markdown")
    missing_evidence: str = Field(..., description="Rendered missing-evidence checklist")
    evidence_index: EvidenceIndex
    source_manifest: SourceManifest = Field(default_factory=SourceManifest)
    evidence_manifest: EvidenceManifest | None = None
    package_name: str | None = None
    form_mappings: dict[str, dict[str, Any]] | None = None
    matter_id: str | None = None


class DomainModuleOutput(BaseModel):
    drafts: list[DocumentDraft] = Field(default_factory=list)
    package: DocumentPackage
    warnings: list[str] = Field(default_factory=list)


class DomainModule(Protocol):
    domain: Domain

    def generate(self, data: DomainModuleInput) -> DomainModuleOutput: ...


# =============================================================================
# Shared packaging
# =============================================================================


def build_evidence_manifest(index: EvidenceIndex) -> EvidenceManifest:
    return ManifestBuilder().build_evidence_manifest(index)


def ensure_source_manifest(manifest: SourceManifest) -> SourceManifest:
    """Stamp ``compiled_at`` if the manifest has none."""
    if manifest.compiled_at:
        return manifest
    return manifest.model_copy(update={"compiled_at": now_iso()})


def build_package_from_drafts(
    domain: Domain,
    drafts: list[DocumentDraft],
    data: DomainModuleInput,
    packager: DocumentPackager,
) -> DomainModuleOutput:
    """Package drafts for a domain.

    Warnings combine package warnings with each draft's missing
    confirmations.
    """
    evidence_manifest = data.evidence_manifest or build_evidence_manifest(data.evidence_index)
    package = packager.assemble(
        PackageInput(
            package_name=data.package_name or f"{domain.value}-package",
            forum_map=data.forum_map,
            timeline=data.timeline,
            missing_evidence_checklist=data.missing_evidence,
            drafts=drafts,
            source_manifest=ensure_source_manifest(data.source_manifest),
            evidence_manifest=evidence_manifest,
            jurisdiction=data.classification.jurisdiction,
            domain=data.classification.domain,
            form_mappings=data.form_mappings,
            matter_id=data.matter_id,
        )
    )
    warnings = list(package.warnings)
    for draft in drafts:
        warnings.extend(draft.missing_confirmations)
    return DomainModuleOutput(drafts=drafts, package=package, warnings=warnings)


# =============================================================================
# Base module
# =============================================================================


class BaseDomainModule(ABC):
    """Convenience base for domain modules.

    Subclasses set ``domain`` and implement :meth:`build_drafts`.
    """

    domain: Domain

    def __init__(
        self,
        drafting: DocumentDraftingEngine | None = None,
        packager: DocumentPackager | None = None,
        templates: TemplateLibrary | None = None,
    ):
        self.templates = templates or TemplateLibrary()
        self.drafting = drafting or DocumentDraftingEngine()
        self.packager = packager or DocumentPackager(self.templates)

    def generate(self, data: DomainModuleInput) -> DomainModuleOutput:
        drafts = self.build_drafts(data)
        return build_package_from_drafts(self.domain, drafts, data, self.packager)

    @abstractmethod
    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        """Drafts for the matter, in package order."""

    # =========================================================================
    # Draft helpers
    # =========================================================================

    def disclaimer(self) -> str:
        disclaimers = self.templates.disclaimers()
        return disclaimers[0].body if disclaimers else ""

    def template_draft(
        self,
        title: str,
        heading: str,
        template_id: str,
        context: Mapping[str, Any] | None = None,
        missing_confirmations: list[str] | None = None,
        keep_placeholders: bool = False,
    ) -> DocumentDraft:
        """A single-section draft rendered from a library template."""
        content = self.templates.render_template(template_id, context, keep_placeholders=keep_placeholders)
        return DocumentDraft(
            id=generate_id("draft"),
            title=title,
            sections=[DraftSection(heading=heading, content=content)],
            disclaimer=self.disclaimer(),
            missing_confirmations=list(missing_confirmations or []),
        )

    def blueprint_draft(
        self,
        title: str,
        blueprint_id: str,
        data: DomainModuleInput,
        context: Mapping[str, Any] | None = None,
        confirm: Mapping[str, bool] | None = None,
    ) -> DocumentDraft:
        """A draft built from a blueprint and checked by the drafting engine.

        Sections marked ``cite`` reference the matter's primary evidence.
        ``confirm`` overrides the confirmed flag by section heading.
        """
        refs = primary_refs(data.evidence_index)
        sections = []
        for section in self.templates.blueprint(blueprint_id):
            confirmed = section.confirmed
            if confirm and section.heading in confirm:
                confirmed = confirm[section.heading]
            sections.append(
                DraftSection(
                    heading=section.heading,
                    content=fill_placeholders(section.content, context or {}),
                    evidence_refs=[r.model_copy() for r in refs] if section.cite else [],
                    confirmed=confirmed,
                )
            )
        return self.drafting.create_draft(
            DraftingInput(
                title=title,
                sections=sections,
                evidence_index=data.evidence_index,
                jurisdiction=data.classification.jurisdiction.value,
            )
        )


def primary_refs(index: EvidenceIndex) -> list[EvidenceReference]:
    """Reference to the first indexed item, if any."""
    if not index.items:
        return []
    return [EvidenceReference(evidence_id=index.items[0].id)]
