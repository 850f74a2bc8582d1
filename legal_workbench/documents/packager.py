"""Document packager - assembles drafts and manifests into a package."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import (
    Domain,
    DocumentDraft,
    DocumentPackage,
    EvidenceManifest,
    Jurisdiction,
    PackagedFile,
    SourceManifest,
)
from legal_workbench.templates import TemplateLibrary

from .summaries import FormSummaryGenerator

logger = logging.getLogger(__name__)

# Ontario Superior Court filings are accepted as PDF/A
PDFA_DOMAINS = frozenset(
    {
        Domain.CIVIL_NEGLIGENCE,
        Domain.ESTATE_SUCCESSION,
        Domain.LEGAL_MALPRACTICE,
        Domain.MUNICIPAL_PROPERTY_DAMAGE,
    }
)

PDFA_GUIDE = """# Converting Documents to PDF/A

Ontario Superior Court e-filing accepts documents in PDF/A format.

## Steps
1. Finish editing the document in your word processor.
2. Choose "Save as" or "Export" and select PDF.
3. In the PDF options, enable "PDF/A" (ISO 19005) archiving.
4. Open the result and confirm the fonts and images display correctly.
5. Keep the original editable file in case changes are needed.

## Checks
- File names use ISO dates and contain no personal information.
- Each attachment number matches the evidence list.
- Scanned pages are legible at 100% zoom.
"""


class PackageInput(BaseModel):
    package_name: str
    forum_map: str
    timeline: str
    missing_evidence_checklist: str
    drafts: list[DocumentDraft] = Field(default_factory=list)
    source_manifest: SourceManifest
    evidence_manifest: EvidenceManifest
    jurisdiction: Jurisdiction | None = None
    domain: Domain | None = None
    form_mappings: dict[str, dict[str, Any]] | None = None
    matter_id: str | None = None


def slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower())
    return slug.strip("-")


def render_draft(draft: DocumentDraft) -> str:
    """Render a draft to markdown."""
    blocks = []
    for section in draft.sections:
        block = f"## {section.heading}\n{section.content}"
        if not section.confirmed:
            block += "\n**Confirmation required before sending.**"
        refs = []
        for ref in section.evidence_refs:
            label = ref.attachment_index if ref.attachment_index is not None else ref.evidence_id
            line = f"- Attachment {label}"
            if ref.timestamp:
                line += f" ({ref.timestamp})"
            refs.append(line)
        if refs:
            block += "\nEvidence References:\n" + "\n".join(refs)
        blocks.append(block)

    body = f"# {draft.title}\n" + "\n\n".join(blocks)
    if draft.citations:
        body += "\n\nCitations:\n" + "\n".join(
            f"- {c.label}: {c.url} (retrieved {c.retrieval_date or 'date unknown'})" for c in draft.citations
        )
    if draft.disclaimer:
        body += f"\n\n> {draft.disclaimer}"

    warnings = draft.missing_confirmations + draft.style_warnings + draft.citation_warnings
    if warnings:
        body += "\n\nWarnings:\n" + "\n".join(f"- {w}" for w in warnings)
    return body


class DocumentPackager:
    """Builds a complete package from drafts, manifests and rendered summaries.

    Every file named by the template layout is present in the output; missing
    ones are back-filled with a placeholder and a warning.
    """

    def __init__(
        self,
        templates: TemplateLibrary | None = None,
        summary_generator: FormSummaryGenerator | None = None,
    ):
        self.templates = templates or TemplateLibrary()
        self._summary_generator = summary_generator

    @property
    def summary_generator(self) -> FormSummaryGenerator:
        # Form mappings are only loaded when a package asks for summaries
        if self._summary_generator is None:
            self._summary_generator = FormSummaryGenerator()
        return self._summary_generator

    def assemble(self, data: PackageInput) -> DocumentPackage:
        layout = self.templates.package_layout()
        files: list[PackagedFile] = []
        warnings: list[str] = []

        files.append(PackagedFile(path="manifests/source_manifest.json", content=_to_json(data.source_manifest)))
        files.append(
            PackagedFile(path="manifests/evidence_manifest.json", content=_to_json(data.evidence_manifest))
        )
        files.append(PackagedFile(path="forum_map.md", content=data.forum_map))
        files.append(PackagedFile(path="timeline.md", content=data.timeline))
        files.append(PackagedFile(path="missing_evidence.md", content=data.missing_evidence_checklist))

        if not data.drafts:
            warnings.append("No draft documents provided.")
        for position, draft in enumerate(data.drafts, start=1):
            name = slugify(draft.title) or f"draft-{position}"
            files.append(PackagedFile(path=f"drafts/{name}.md", content=render_draft(draft)))

        if self._needs_pdfa_guide(data):
            files.append(PackagedFile(path="guides/pdfa_conversion.md", content=PDFA_GUIDE))

        if data.form_mappings:
            files.extend(self._form_summaries(data, warnings))

        present = {f.path for f in files}
        for path in layout.files:
            if path not in present:
                files.append(PackagedFile(path=path, content="# Placeholder\n"))
                warnings.append(f"Added placeholder for missing template file: {path}")

        logger.debug("Assembled package %s with %d files", data.package_name, len(files))
        return DocumentPackage(
            name=data.package_name,
            folders=layout.folders,
            files=files,
            source_manifest=data.source_manifest,
            evidence_manifest=data.evidence_manifest,
            warnings=warnings,
        )

    def _needs_pdfa_guide(self, data: PackageInput) -> bool:
        return data.jurisdiction == Jurisdiction.ONTARIO and data.domain in PDFA_DOMAINS

    def _form_summaries(self, data: PackageInput, warnings: list[str]) -> list[PackagedFile]:
        files = []
        for form_id, variables in data.form_mappings.items():
            try:
                summary = self.summary_generator.generate_summary(form_id, variables, matter_id=data.matter_id)
            except (ValueError, LookupError, FileNotFoundError) as e:
                logger.warning("Form summary for %s skipped: %s", form_id, e)
                warnings.append(f"Could not generate summary for form {form_id}: {e}")
                continue
            files.append(PackagedFile(path=f"forms/{summary.filename}", content=summary.markdown_content))
        return files


def _to_json(model: BaseModel) -> str:
    return json.dumps(model.model_dump(mode="json"), indent=2)
