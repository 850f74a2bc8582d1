"""Session orchestrator tying triage, evidence, drafting and lifecycle together.

One :class:`IntegrationAPI` instance serves one matter session. It owns the
session's evidence indexer, audit log and lifecycle manager; none of them
are shared between instances.
"""

from __future__ import annotations

import logging
from typing import Any

from legal_workbench.audit import AuditLogger, ManifestBuilder, SourceAccessController
from legal_workbench.authority import AuthorityRegistry, seed_registry
from legal_workbench.core.config import get_settings
from legal_workbench.core.ontology import (
    AuditEvent,
    AuditEventType,
    ClassificationInput,
    DeletionRequest,
    DeletionResult,
    DocumentDraft,
    DraftSection,
    EvidenceType,
    ExportRequest,
    ExportResult,
    ForumMap,
    Provenance,
    SourceEntry,
)
from legal_workbench.documents import DocumentDraftingEngine, DocumentPackager, DraftingInput
from legal_workbench.domains import (
    DomainModuleInput,
    DomainModuleRegistry,
    build_package_from_drafts,
    default_registry,
    primary_refs,
)
from legal_workbench.evidence import (
    EvidenceIndexer,
    TimelineGenerator,
    alerts_to_markdown,
    redact_pii,
    validate_file,
)
from legal_workbench.lifecycle import DataLifecycleManager
from legal_workbench.templates import TemplateLibrary
from legal_workbench.triage import (
    ForumRouter,
    JourneyProgress,
    JourneyTracker,
    MatterClassifier,
    PillarClassifier,
    PillarExplainer,
    TimelineAssessor,
)
from legal_workbench.upl import A2ISandboxFramework, SandboxInput

from .schemas import (
    GenerateDocumentsRequest,
    GenerateDocumentsResponse,
    IntakeResponse,
    SourcesResponse,
    UploadResponse,
)

logger = logging.getLogger(__name__)

PREVIEW_TYPES = frozenset({EvidenceType.TXT, EvidenceType.EML})
PREVIEW_LENGTH = 500


def forum_map_to_markdown(forum_map: ForumMap | None) -> str:
    """Render a forum map as the ``forum_map.md`` package file."""
    if forum_map is None:
        return "# Forum Map\n\nNo forum map available."
    lines = [
        "# Forum Map",
        "",
        f"**Primary forum:** {forum_map.primary_forum.name} ({forum_map.primary_forum.id})",
    ]
    if forum_map.alternatives:
        lines.append("")
        lines.append("## Alternatives")
        lines.extend(f"- {a.name} ({a.id})" for a in forum_map.alternatives)
    if forum_map.escalation:
        lines.append("")
        lines.append("## Escalation")
        lines.extend(f"- {a.name} ({a.id})" for a in forum_map.escalation)
    if forum_map.rationale:
        lines.extend(["", forum_map.rationale])
    return "\n".join(lines)


class IntegrationAPI:
    """Entry points called by the HTTP and persistence layers."""

    def __init__(
        self,
        registry: DomainModuleRegistry | None = None,
        authorities: AuthorityRegistry | None = None,
        templates: TemplateLibrary | None = None,
        actor: str = "system",
    ):
        settings = get_settings()
        self.actor = actor
        self.templates = templates or TemplateLibrary()
        self.registry = registry if registry is not None else default_registry(self.templates)
        self.authorities = authorities if authorities is not None else seed_registry()

        self.classifier = MatterClassifier()
        self.router = ForumRouter(self.authorities)
        self.pillars = PillarClassifier()
        self.explainer = PillarExplainer()
        self.sandbox = A2ISandboxFramework()
        self.journey = JourneyTracker()
        self.timeline_assessor = TimelineAssessor()
        self.timeline_generator = TimelineGenerator(settings.gap_threshold_days)
        self.drafting = DocumentDraftingEngine()
        self.packager = DocumentPackager(self.templates)

        # Session state
        self.indexer = EvidenceIndexer()
        self.audit = AuditLogger()
        self.lifecycle = DataLifecycleManager(self.audit)
        self.access = SourceAccessController(self.audit)
        self._documents_generated = False

    # =========================================================================
    # Intake
    # =========================================================================

    def intake(self, data: ClassificationInput | dict | None = None) -> IntakeResponse:
        """Classify a matter, route it and attach pillar, UPL tier and journey."""
        if isinstance(data, dict):
            data = ClassificationInput(**data)
        data = data or ClassificationInput()

        result = self.classifier.classify_with_confidence(data)
        classification = result.classification
        forum_map = self.router.route(classification)

        text = " ".join(part for part in [data.description, data.domain_hint, *data.notes] if part)
        matches = self.pillars.detect_all_pillars(text)
        pillar = self.pillars.classify(text)
        plan = self.sandbox.plan(
            SandboxInput(
                domain=classification.domain,
                jurisdiction=classification.jurisdiction.value,
                urgency=classification.urgency,
                contains_sensitive_data=bool(redact_pii(text).findings),
            )
        )

        classification.pillar = pillar
        classification.pillar_matches = matches
        classification.pillar_explanation = self.explainer.explain(
            pillar, classification.domain.value
        ).model_dump(mode="json")
        classification.upl_tier = plan.tier
        classification.journey = self.journey.build_progress(
            classification, forum_map, evidence_count=len(self.indexer)
        ).model_dump(mode="json")

        self.audit.log(
            AuditEventType.OTHER,
            self.actor,
            "Matter classified.",
            {
                "classification_id": classification.id,
                "domain": classification.domain.value,
                "primary_forum": forum_map.primary_forum.id,
            },
        )
        logger.info(
            "Intake %s classified as %s, routed to %s",
            classification.id,
            classification.domain.value,
            forum_map.primary_forum.id,
        )
        return IntakeResponse(
            result=result,
            forum_map=forum_map,
            timeline_assessment=self.timeline_assessor.assess(classification.timeline.key_dates),
            sandbox_plan=plan,
        )

    # =========================================================================
    # Evidence
    # =========================================================================

    def upload_evidence(
        self,
        filename: str,
        content: bytes,
        provenance: Provenance | str = Provenance.USER_PROVIDED,
        options: dict[str, Any] | None = None,
    ) -> UploadResponse:
        """Validate, index and summarize one uploaded file.

        A file that fails validation is not indexed.
        """
        validation = validate_file(filename, content)
        if not validation.ok:
            logger.info("Rejected upload %s: %s", filename, "; ".join(validation.errors))
            return UploadResponse(validation=validation)

        item = self.indexer.add_item(filename, content, validation.type, provenance, options)
        index = self.indexer.generate_index()
        timeline = self.timeline_generator.generate(index)
        gaps = self.timeline_generator.detect_gaps(timeline)
        alerts = self.timeline_generator.flag_missing_evidence(index, timeline)

        preview = None
        if item.type in PREVIEW_TYPES:
            preview = redact_pii(content.decode("utf-8", errors="replace")).redacted[:PREVIEW_LENGTH]

        self.audit.log(
            AuditEventType.OTHER,
            self.actor,
            "Evidence uploaded.",
            {"evidence_id": item.id, "filename": filename, "hash": item.hash},
        )
        logger.info("Indexed %s as %s; %d item(s) in session", filename, item.id, len(self.indexer))
        return UploadResponse(
            validation=validation,
            item=item,
            index=index,
            timeline=timeline,
            gaps=gaps,
            alerts=alerts,
            redacted_preview=preview,
        )

    # =========================================================================
    # Sources
    # =========================================================================

    def set_sources(
        self,
        entries: list[SourceEntry],
        method: Provenance | str = Provenance.OFFICIAL_LINK,
        actor: str | None = None,
    ) -> SourcesResponse:
        """Register the official sources drafts may cite.

        Each entry must pass the access policy for ``method`` and carry what
        its service requires (a retrieval date, and a version for Justice
        Laws). Refused entries are left out of the manifest.
        """
        actor = actor or self.actor
        accepted: list[SourceEntry] = []
        decisions = []
        rejected: dict[str, list[str]] = {}
        for entry in entries:
            decision = self.access.validate_access(entry.service, entry.url, method, actor)
            decisions.append(decision)
            errors = [] if decision.allowed else [decision.reason]
            errors.extend(self.access.validate_source_entry(entry).errors)
            if errors:
                rejected[entry.url] = errors
            else:
                accepted.append(entry)

        self.indexer.set_sources(accepted, decisions)
        manifest = ManifestBuilder().build_source_manifest(accepted, decisions)
        logger.info("Registered %d source(s); %d rejected", len(accepted), len(rejected))
        return SourcesResponse(manifest=manifest, decisions=decisions, rejected=rejected)

    # =========================================================================
    # Documents
    # =========================================================================

    def generate_documents(self, request: GenerateDocumentsRequest) -> GenerateDocumentsResponse:
        """Draft and package documents for a classified matter.

        A ``source_manifest`` on the request replaces the session's sources
        for this call. Its entries are checked against the access policies;
        problems are reported as warnings.
        """
        classification = request.classification
        index = self.indexer.generate_index()
        source_warnings: list[str] = []
        if request.source_manifest is not None:
            index = index.model_copy(update={"source_manifest": request.source_manifest})
            for entry in request.source_manifest.entries:
                for error in self.access.validate_source_entry(entry).errors:
                    source_warnings.append(f"Source {entry.url}: {error}")
        timeline = self.timeline_generator.generate(index)
        gaps = self.timeline_generator.detect_gaps(timeline)
        alerts = self.timeline_generator.flag_missing_evidence(index, timeline)
        forum_map = request.forum_map or self.router.route(classification)

        data = DomainModuleInput(
            classification=classification,
            forum_map=forum_map_to_markdown(forum_map),
            timeline=self.timeline_generator.to_markdown(timeline, gaps),
            missing_evidence=alerts_to_markdown(alerts),
            evidence_index=index,
            source_manifest=index.source_manifest,
            package_name=request.package_name,
            form_mappings=request.form_mappings,
            matter_id=request.matter_id,
        )

        module = self.registry.get(classification.domain)
        if module is not None:
            output = module.generate(data)
        else:
            logger.info("No module for %s; using a generic draft", classification.domain.value)
            output = build_package_from_drafts(
                classification.domain, [self._generic_draft(data)], data, self.packager
            )

        self._documents_generated = True
        self.audit.log(
            AuditEventType.OTHER,
            request.actor,
            "Documents generated.",
            {
                "classification_id": classification.id,
                "drafts": len(output.drafts),
                "files": len(output.package.files),
            },
        )
        logger.info(
            "Generated %d draft(s) and %d file(s) for %s",
            len(output.drafts),
            len(output.package.files),
            classification.id,
        )
        return GenerateDocumentsResponse(
            drafts=output.drafts, package=output.package, warnings=source_warnings + output.warnings
        )

    def _generic_draft(self, data: DomainModuleInput) -> DocumentDraft:
        classification = data.classification
        return self.drafting.create_draft(
            DraftingInput(
                title="Draft Document",
                sections=[
                    DraftSection(
                        heading="Summary",
                        content=classification.description or "Describe what happened and when.",
                        evidence_refs=primary_refs(data.evidence_index),
                    )
                ],
                evidence_index=data.evidence_index,
                jurisdiction=classification.jurisdiction.value,
            )
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def export_data(self, request: ExportRequest) -> ExportResult:
        logger.info("Export of %d item(s) requested by %s", len(request.items), request.actor)
        return self.lifecycle.export_data(request)

    def delete_data(self, request: DeletionRequest) -> DeletionResult:
        """Request deletion. ``legal_hold=True`` also places a policy-level hold."""
        if request.legal_hold:
            self.lifecycle.apply_legal_hold(request.reason or "Legal hold requested", request.actor)
        result = self.lifecycle.request_deletion(request)
        logger.info("Deletion of %d item(s): %s", len(request.items), result.status.value)
        return result

    def audit_log(self) -> list[AuditEvent]:
        return self.audit.entries()

    def list_registered_modules(self) -> list[str]:
        return self.registry.list()

    def journey_progress(self, intake: IntakeResponse | None = None) -> JourneyProgress:
        """Current journey progress for the session."""
        return self.journey.build_progress(
            intake.classification if intake else None,
            intake.forum_map if intake else None,
            evidence_count=len(self.indexer),
            documents_generated=self._documents_generated,
        )
