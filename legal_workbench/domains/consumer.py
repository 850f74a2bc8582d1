"""Consumer protection drafts."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft

from .base import BaseDomainModule, DomainModuleInput


class ConsumerDomainModule(BaseDomainModule):
    domain = Domain.CONSUMER_PROTECTION

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        classification = data.classification
        names = classification.parties.names
        notes = classification.notes

        letter_context = {
            "businessName": names[1] if len(names) > 1 else "Business Name",
            "consumerName": names[0] if names else "Consumer Name",
            "serviceDate": classification.timeline.start or "YYYY-MM-DD",
            "contractReference": notes[0] if notes else "Contract/Invoice Number",
            "issueSummary": classification.description or "Describe the issue with the product or service",
            "resolutionRequested": (
                notes[1] if len(notes) > 1 else "Describe desired resolution (refund, repair, replacement)"
            ),
        }

        return [
            self.template_draft(
                "Consumer Protection Ontario Complaint Guide", "Guide Content", "consumer/cpo_complaint"
            ),
            self.template_draft("Chargeback Request Guide", "Guide Content", "consumer/chargeback_guide"),
            self.template_draft(
                "Service Dispute Letter",
                "Letter Content",
                "consumer/service_dispute_letter",
                letter_context,
                missing_confirmations=[
                    "Confirm business name, service date, and issue details before sending",
                    "Attach supporting documents (contract, receipts, photos)",
                ],
            ),
            self.template_draft(
                "Unfair Practice Documentation Checklist",
                "Checklist Content",
                "consumer/unfair_practice_documentation",
            ),
        ]
