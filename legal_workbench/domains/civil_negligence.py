"""Civil negligence and property damage."""

from __future__ import annotations

from legal_workbench.core.ontology import Domain, DocumentDraft
from legal_workbench.documents import VariableExtractor

from .base import BaseDomainModule, DomainModuleInput


class CivilNegligenceDomainModule(BaseDomainModule):
    domain = Domain.CIVIL_NEGLIGENCE

    def __init__(self, *args, extractor: VariableExtractor | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.extractor = extractor or VariableExtractor()

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        classification = data.classification
        notes = classification.notes
        variables = self.extractor.extract_from_description(
            classification.description or "\n".join(notes), classification
        )

        # Templates print their own "$"
        amount = classification.dispute_amount
        amount_text = f"{amount:,.0f}" if amount else str(variables.get("amountClaimed", "")).lstrip("$")

        claimant = variables.get("claimantName", "Claimant")
        respondent = variables.get("respondentName", "Respondent")
        incident_date = variables.get("incidentDate") or classification.timeline.start or "YYYY-MM-DD"
        particulars = "\n".join(notes) or classification.description or ""

        demand = self.template_draft(
            "Demand for Repair / Compensation",
            "Demand",
            "civil/demand_notice",
            {
                "respondentName": respondent,
                "claimantName": claimant,
                "incidentDate": incident_date,
                "propertyAddress": variables.get("propertyAddress", ""),
                "damageDescription": particulars,
                "amountClaimed": amount_text,
            },
        )
        form_7a = self.template_draft(
            "Small Claims Court Form 7A (Statement of Claim)",
            "Form 7A (Scaffold)",
            "civil/small_claims_form7a",
            {
                "claimantName": claimant,
                "respondentName": respondent,
                "amountClaimed": amount_text,
                "courtLocation": classification.jurisdiction.value,
                "incidentDate": incident_date,
                "particulars": particulars,
            },
        )
        checklist = self.template_draft(
            "Evidence Checklist: Property Damage", "Checklist", "civil/evidence_checklist"
        )
        return [demand, form_7a, checklist]
