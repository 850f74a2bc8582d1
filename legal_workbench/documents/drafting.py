"""Document drafting engine.

Hydrates evidence references, attaches citations from the source manifest
and collects style, citation and confirmation findings. None of the checks
block draft creation.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import (
    SOURCE_PRIORITY,
    Citation,
    DocumentDraft,
    DraftSection,
    EvidenceIndex,
    EvidenceReference,
    SourceEntry,
    generate_id,
)
from legal_workbench.templates import StyleGuide
from legal_workbench.upl import CitationEnforcer, DisclaimerService

UNMATCHED_REFERENCE = "Unmatched evidence reference"


class DraftingInput(BaseModel):
    title: str
    sections: list[DraftSection] = Field(default_factory=list)
    evidence_index: EvidenceIndex
    jurisdiction: str | None = None
    audience: str | None = None
    include_disclaimer: bool = True
    require_confirmations: bool = True


def pick_source(entries: list[SourceEntry]) -> SourceEntry | None:
    """First available source in fixed service priority order."""
    for service in SOURCE_PRIORITY:
        for entry in entries:
            if entry.service == service:
                return entry
    return None


class DocumentDraftingEngine:
    def __init__(
        self,
        style_guide: StyleGuide | None = None,
        disclaimer_service: DisclaimerService | None = None,
        citation_enforcer: CitationEnforcer | None = None,
    ):
        self.style_guide = style_guide or StyleGuide()
        self.disclaimer_service = disclaimer_service or DisclaimerService()
        self.citation_enforcer = citation_enforcer or CitationEnforcer()

    def create_draft(self, data: DraftingInput) -> DocumentDraft:
        sections = [self._hydrate_section(s, data.evidence_index) for s in data.sections]
        citations = self._build_citations(sections, data.evidence_index)

        text = " ".join(s.content for s in sections)
        has_refs = any(s.evidence_refs for s in sections)
        citation_check = self.citation_enforcer.ensure_citations(
            text, has_citation=bool(citations), requires_citation=has_refs
        )
        style_check = self.style_guide.check(text)

        disclaimer = None
        if data.include_disclaimer:
            disclaimer = self.disclaimer_service.legal_information_disclaimer(
                jurisdiction=data.jurisdiction, audience=data.audience
            )

        return DocumentDraft(
            id=generate_id("draft"),
            title=data.title,
            sections=sections,
            disclaimer=disclaimer,
            citations=citations,
            style_warnings=style_check.warnings + citation_check.tone_warnings,
            citation_warnings=citation_check.errors + citation_check.warnings,
            citation_errors=list(citation_check.errors),
            missing_confirmations=self._missing_confirmations(sections, data.require_confirmations),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _hydrate_section(self, section: DraftSection, index: EvidenceIndex) -> DraftSection:
        refs = [self._hydrate_reference(ref, index) for ref in section.evidence_refs]
        return section.model_copy(update={"evidence_refs": refs})

    def _hydrate_reference(self, ref: EvidenceReference, index: EvidenceIndex) -> EvidenceReference:
        found = index.find(ref.evidence_id)
        if found is None:
            return ref.model_copy(update={"description": ref.description or UNMATCHED_REFERENCE})
        position, item = found
        # Position in the current index; renumbers if the index changes
        return ref.model_copy(
            update={
                "attachment_index": position + 1,
                "timestamp": ref.timestamp or item.date,
                "description": ref.description or item.summary,
            }
        )

    def _build_citations(self, sections: list[DraftSection], index: EvidenceIndex) -> list[Citation]:
        source = pick_source(index.source_manifest.entries)
        if source is None:
            return []
        citations: list[Citation] = []
        for section in sections:
            for ref in section.evidence_refs:
                label = ref.attachment_index if ref.attachment_index is not None else ref.evidence_id
                citations.append(
                    Citation(
                        label=f"Attachment {label}",
                        url=source.url,
                        retrieval_date=source.retrieval_date,
                        source=source.service,
                        evidence_id=ref.evidence_id,
                    )
                )
        return citations

    def _missing_confirmations(self, sections: list[DraftSection], required: bool) -> list[str]:
        if not required:
            return []
        return [
            f'Section "{s.heading}" lacks user confirmation for factual assertions.'
            for s in sections
            if not s.confirmed
        ]
